"""Multiplayer lobby: players join, pick corner seats and choose the stakes."""

from __future__ import annotations

from typing import Optional

NUM_PADS = 4
PRESS_START = "Press Start"
_BLANK = " " * 12
_BLINK_PERIOD = 50
_BLINK_ON = 25

# Player states, one per joypad.
ABSENT = 0
ENTERED = 1
READY = 7
_AT_SEAT_BASE = 2  # 2..5 means standing at seat 0..3, not yet confirmed

# Seat states.
EMPTY = 0
TAKEN = 1
_READY_SEAT_BASE = 2  # pad index + 2 once the seat is confirmed
_CPU_SEAT_BASE = 6  # 6, 7, ... for seats given to the computer

_CORNERS = {
    ("up", "left"): 0,
    ("up", "right"): 1,
    ("down", "right"): 2,
    ("down", "left"): 3,
}
_OPPOSITE = {"up": "down", "down": "up", "left": "right", "right": "left"}

# Buy-in -> (default big blind, smallest big blind, blind step)
_BLIND_LEVELS = {
    100: (10, 2, 2),
    1000: (50, 10, 10),
    10000: (500, 100, 100),
}
_NEXT_BUY_IN = {100: 1000, 1000: 10000, 10000: 100}


def _check_pad(pad: int) -> None:
    if not 0 <= pad < NUM_PADS:
        raise ValueError(f"pad must be between 0 and {NUM_PADS - 1}")


def _corner(vertical: str, horizontal: str) -> int:
    try:
        return _CORNERS[(vertical, horizontal)]
    except KeyError:
        raise ValueError(
            f"unknown direction {vertical!r}/{horizontal!r}"
        ) from None


def press_start_text(counter: int) -> tuple[int, str]:
    """Advance the blink counter; return it with the text to show this frame."""
    counter += 1
    if counter == _BLINK_PERIOD:
        counter = 0
    return counter, PRESS_START if counter < _BLINK_ON else _BLANK


class Lobby:
    """Tracks which joypads have joined and which corner seats they hold."""

    def __init__(self) -> None:
        self.players = [ABSENT] * NUM_PADS
        self.seats = [EMPTY] * NUM_PADS
        self.entered = 0
        self.picked = 0

    def enter(self, pad: int) -> bool:
        """Join the lobby with a joypad; return True if it had not joined yet."""
        _check_pad(pad)
        if self.players[pad] != ABSENT:
            return False
        self.players[pad] = ENTERED
        self.entered += 1
        return True

    def pick_seat(self, pad: int, vertical: str, horizontal: str) -> Optional[int]:
        """Move a waiting player to the corner seat in the given direction.

        Return the seat index taken, or None if the player cannot take it.
        """
        _check_pad(pad)
        seat = _corner(vertical, horizontal)
        if self.players[pad] != ENTERED or self.seats[seat] != EMPTY:
            return None
        self.players[pad] = _AT_SEAT_BASE + seat
        self.seats[seat] = TAKEN
        return seat

    def seat_of(self, pad: int) -> Optional[int]:
        """Return the seat a player stands at without having confirmed it."""
        _check_pad(pad)
        state = self.players[pad]
        if _AT_SEAT_BASE <= state < _AT_SEAT_BASE + NUM_PADS:
            return state - _AT_SEAT_BASE
        return None

    def leave_seat(self, pad: int, vertical: str, horizontal: str) -> bool:
        """Step back to the middle, pushing toward the centre from the seat held."""
        seat = self.seat_of(pad)
        if seat is None:
            return False
        wanted = _corner(vertical, horizontal)
        held_v, held_h = next(k for k, v in _CORNERS.items() if v == seat)
        if _CORNERS[(_OPPOSITE[held_v], _OPPOSITE[held_h])] != wanted:
            return False
        self.players[pad] = ENTERED
        self.seats[seat] = EMPTY
        return True

    def confirm(self, pad: int) -> Optional[int]:
        """Confirm the seat a player stands at; return it, or None if none is held."""
        seat = self.seat_of(pad)
        if seat is None:
            return None
        self.players[pad] = READY
        self.seats[seat] = _READY_SEAT_BASE + pad
        self.picked += 1
        return seat

    def all_ready(self) -> bool:
        """True when at least one player joined and every joined player confirmed."""
        return self.picked != 0 and self.entered == self.picked

    def assign_cpu_seats(self) -> list[int]:
        """Give every empty seat to the computer and return the seat values."""
        cpu = _CPU_SEAT_BASE
        for index, value in enumerate(self.seats):
            if value == EMPTY:
                self.seats[index] = cpu
                cpu += 1
        return list(self.seats)


class Stakes:
    """Buy-in and big-blind choice for a poker table."""

    def __init__(self) -> None:
        self.buy_in = 1000
        self.big_blind = _BLIND_LEVELS[self.buy_in][0]

    def cycle_buy_in(self) -> None:
        """Switch to the next buy-in level, resetting the big blind to its default."""
        self.buy_in = _NEXT_BUY_IN[self.buy_in]
        self.big_blind = _BLIND_LEVELS[self.buy_in][0]

    def increment_blind(self) -> None:
        """Raise the big blind one step, wrapping to the smallest after the default."""
        default, smallest, step = _BLIND_LEVELS[self.buy_in]
        if self.big_blind == default:
            self.big_blind = smallest
        else:
            self.big_blind += step

    def buy(self, cash: int) -> int:
        """Pay the buy-in out of cash and return what remains."""
        if cash < self.buy_in:
            raise ValueError("not enough cash for the buy-in")
        return cash - self.buy_in