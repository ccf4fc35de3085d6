"""Settling the chips at the end of a hand: side pots, uncontested pots and the next deal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .poker_showdown import Payout, compare_hands
from .poker_table import DECK_SIZE, NUM_SEATS, Player, Table


@dataclass(frozen=True)
class GameOver:
    """The last player left at the table once everyone else has gone broke."""

    seat: int
    label: str
    human: bool
    winnings: int


def _check_players(players: Sequence[Player]) -> None:
    if len(players) != NUM_SEATS:
        raise ValueError(f"exactly {NUM_SEATS} players are needed")


def _contenders_for(players: Sequence[Player], order: Sequence[int],
                    eligible: set[int], level: int) -> list[int]:
    slots = [seat + 1 for seat in order
             if seat in eligible and players[seat].in_the_pot >= level]
    return slots + [0] * (NUM_SEATS - len(slots))


def solve_side_pots(players: Sequence[Player]) -> list[list[Payout]]:
    """Split the chips into a main pot and side pots and award each one.

    Every seated, unfolded player who put chips in competes for each pot up to
    the amount they put in. Chips of folded or departed players are shared out
    across the pots at the levels they reached; whatever lies above the largest
    contribution still contested goes into the last pot. Returns the payouts of
    each pot, smallest level first.
    """
    _check_players(players)
    eligible = {
        seat for seat, player in enumerate(players)
        if player.at_seat and not player.folded and player.in_the_pot > 0
    }
    if not eligible:
        raise ValueError("no player is left to contest the pot")
    order = sorted(range(NUM_SEATS), key=lambda seat: players[seat].in_the_pot)
    levels = sorted({players[seat].in_the_pot for seat in eligible})

    results: list[list[Payout]] = []
    previous = 0
    for index, level in enumerate(levels):
        if index == len(levels) - 1:
            amount = sum(max(p.in_the_pot - previous, 0) for p in players)
        else:
            amount = sum(
                min(p.in_the_pot, level) - min(p.in_the_pot, previous)
                for p in players
            )
        contenders = _contenders_for(players, order, eligible, level)
        results.append(compare_hands(players, contenders, amount))
        previous = level
    return results


def pay_winnings(players: Sequence[Player]) -> Payout:
    """Give the whole pot to the one player who has not folded."""
    _check_players(players)
    winner: Optional[int] = None
    for seat, player in enumerate(players):
        if player.at_seat and not player.folded:
            winner = seat
    if winner is None:
        raise ValueError("nobody is left in the hand")
    pot = sum(player.in_the_pot for player in players)
    player = players[winner]
    player.cash += pot
    return Payout(seat=winner, amount=pot, label=player.label)


def prepare_next_hand(table: Table) -> Optional[GameOver]:
    """Move the button, clear the bets and remove broke players.

    Returns the final winner when only one player is left seated, else None.
    """
    table.button = (table.button + 1) % NUM_SEATS
    table.deal_states = 0
    table.deck_size = DECK_SIZE
    table.stage = 0
    for seat, player in enumerate(table.players):
        player.in_the_pot = 0
        if player.cash == 0 and player.at_seat:
            table.leave(seat)
    if table.at_the_table != 1:
        return None
    seat, player = next(
        (seat, player) for seat, player in enumerate(table.players) if player.at_seat
    )
    return GameOver(
        seat=seat,
        label=player.label,
        human=player.is_human,
        winnings=table.buy_in * NUM_SEATS,
    )