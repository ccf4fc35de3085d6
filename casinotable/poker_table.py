"""Poker table state: players, seating order, blinds and card positions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Sequence

NUM_SEATS = 4
DECK_SIZE = 52

SMALL_BET_SOUND = 9
MEDIUM_BET_SOUND = 10
LARGE_BET_SOUND = 11
FOLD_SOUND = 8

DEAL_START = (112, 16)

_SEAT_CARD_POSITIONS = (
    ((24, 16), (56, 16)),
    ((168, 16), (200, 16)),
    ((168, 144), (200, 144)),
    ((24, 144), (56, 144)),
)

_HUMAN_PADS = 4


class PlayerStatus(IntFlag):
    """Seat flags of one player."""

    NONE = 0
    AT_SEAT = 1
    IN_PLAY = 2
    FOLDED = 4


_ACTIVE = PlayerStatus.AT_SEAT | PlayerStatus.IN_PLAY
_FLAG_MASK = PlayerStatus.AT_SEAT | PlayerStatus.IN_PLAY | PlayerStatus.FOLDED


def player_label(joypad: int) -> str:
    """Return the on-screen name of a seat's owner: P1-P4 for pads, C1... for the computer."""
    if joypad < 0:
        raise ValueError("joypad number cannot be negative")
    if joypad < _HUMAN_PADS:
        return f"P{joypad + 1}"
    return f"C{joypad - 3}"


def chip_sound(amount: int, buy_in: int) -> int:
    """Pick the chip sound effect for a bet of this size relative to the buy-in."""
    third = buy_in // 3
    if amount > third << 1:
        return LARGE_BET_SOUND
    if amount > third:
        return MEDIUM_BET_SOUND
    return SMALL_BET_SOUND


@dataclass
class Player:
    """One seat at the table."""

    joypad: int
    cash: int = 0
    in_the_pot: int = 0
    not_calling: int = 0
    pocket: list[int] = field(default_factory=lambda: [0, 0])
    combination: list[int] = field(default_factory=lambda: [0] * 5)
    combination_strength: int = 0
    status: PlayerStatus = PlayerStatus.NONE

    @property
    def at_seat(self) -> bool:
        return bool(self.status & PlayerStatus.AT_SEAT)

    @property
    def in_play(self) -> bool:
        return bool(self.status & PlayerStatus.IN_PLAY)

    @property
    def folded(self) -> bool:
        return bool(self.status & PlayerStatus.FOLDED)

    @property
    def active(self) -> bool:
        """Seated, still able to bet and not folded."""
        return (self.status & _FLAG_MASK) == _ACTIVE

    @property
    def is_human(self) -> bool:
        return self.joypad < _HUMAN_PADS

    @property
    def label(self) -> str:
        return player_label(self.joypad)


class Table:
    """Four seats, the button and the betting order of a hand."""

    def __init__(self, buy_in: int, big_blind: int, joypads: Sequence[int]) -> None:
        if len(joypads) != NUM_SEATS:
            raise ValueError(f"exactly {NUM_SEATS} joypad numbers are needed")
        if buy_in <= 0 or big_blind <= 0:
            raise ValueError("buy-in and big blind must be positive")
        self.buy_in = buy_in
        self.big_blind = big_blind
        self.players = [
            Player(joypad=pad, cash=buy_in, status=_ACTIVE) for pad in joypads
        ]
        for player in self.players:
            player_label(player.joypad)
        self.at_the_table = NUM_SEATS
        self.in_the_hand = NUM_SEATS
        self.in_play = NUM_SEATS
        self.button = 0
        self.small_blind = 0
        self.last_played = 0
        self.next_to_play = 0
        self.last_to_play = 0
        self.current_bet = 0
        self.min_bet_raise = 0
        self.deal_states = 0
        self.deck_size = DECK_SIZE
        self.stage = 0

    def leave(self, seat: int) -> int:
        """Take a player off the table; return how many remain seated."""
        player = self.players[seat]
        if not player.at_seat:
            raise ValueError(f"seat {seat} is already empty")
        player.status &= ~PlayerStatus.AT_SEAT
        self.at_the_table -= 1
        return self.at_the_table

    def next_to_act(self) -> int:
        """Advance to the next active seat after the one that last played."""
        seat = 0 if self.last_played == NUM_SEATS else self.last_played
        for _ in range(NUM_SEATS):
            if self.players[seat].active:
                break
            seat = (seat + 1) % NUM_SEATS
        self.next_to_play = seat
        self.last_played = seat + 1
        return seat

    def last_to_act(self) -> int:
        """Find the active seat that closes the betting, counting back from the last player."""
        seat = (self.last_played - 2) % NUM_SEATS
        for _ in range(NUM_SEATS):
            if self.players[seat].active:
                break
            seat = (seat - 1) % NUM_SEATS
        self.last_to_play = seat
        return seat

    def _post(self, seat: int, amount: int, allow_exact: bool) -> None:
        player = self.players[seat]
        covers = player.cash >= amount if allow_exact else player.cash > amount
        if covers:
            player.cash -= amount
            player.in_the_pot = amount
            player.not_calling = amount
        else:
            player.in_the_pot = player.cash
            player.cash = 0
            player.status &= ~PlayerStatus.IN_PLAY
            self.in_play -= 1

    def post_blinds(self) -> None:
        """Move the button to a seated player and take the small and big blinds."""
        if not any(player.at_seat for player in self.players):
            raise ValueError("nobody is seated")
        while not self.players[self.button].at_seat:
            self.button = (self.button + 1) % NUM_SEATS
        self.last_played = self.button + 1
        half = self.big_blind >> 1

        if self.at_the_table == 2:
            self.small_blind = self.button
            self.next_to_play = self.button
            self._post(self.button, half, allow_exact=False)
            self._post(self.next_to_act(), self.big_blind, allow_exact=True)
            self.next_to_play = self.button
            self.last_played = self.button + 1
            return

        self.small_blind = self.next_to_act()
        self._post(self.small_blind, half, allow_exact=False)
        self._post(self.next_to_act(), self.big_blind, allow_exact=False)
        self.next_to_act()

    def start_hand(self) -> tuple[int, int]:
        """Reset seated players, post blinds and return (first to act, last to act)."""
        for player in self.players:
            if player.at_seat:
                player.status = _ACTIVE
        self.deal_states = 0
        self.stage = 0
        self.in_play = self.at_the_table
        self.in_the_hand = self.at_the_table
        self.current_bet = self.big_blind
        self.min_bet_raise = self.big_blind
        self.deck_size = DECK_SIZE
        self.post_blinds()
        self.last_to_act()
        return self.next_to_play, self.last_to_play

    def deal_order(self) -> list[tuple[int, int]]:
        """Return the (seat, round) order in which hole cards are dealt, from the small blind."""
        seated = [seat for seat, player in enumerate(self.players) if player.at_seat]
        if len(seated) < 2:
            raise ValueError("at least two seated players are needed to deal")
        last = next(
            (
                (self.small_blind - k) % NUM_SEATS
                for k in range(1, NUM_SEATS + 1)
                if self.players[(self.small_blind - k) % NUM_SEATS].active
            ),
            None,
        )
        if last is None:
            raise ValueError("no active player to close the deal")
        order: list[tuple[int, int]] = []
        seat = self.small_blind
        round_ = 0
        while round_ < 2:
            if self.players[seat].at_seat:
                order.append((seat, round_))
                if seat == last:
                    round_ += 1
            seat = (seat + 1) % NUM_SEATS
            while not self.players[seat].at_seat:
                seat = (seat + 1) % NUM_SEATS
        return order

    def deal_position(self, seat: int, round_: int) -> tuple[int, int]:
        """Return the screen position of a seat's first or second hole card."""
        if not 0 <= seat < NUM_SEATS:
            raise ValueError(f"seat must be between 0 and {NUM_SEATS - 1}")
        return _SEAT_CARD_POSITIONS[seat][1 if round_ else 0]