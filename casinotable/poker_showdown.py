"""Showdown: decide who wins a pot by a two-round knockout of the remaining hands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .poker_table import NUM_SEATS, Player, PlayerStatus

_RANK_MASK = 0x0F


@dataclass(frozen=True)
class Payout:
    """Chips paid to one seat at showdown."""

    seat: int
    amount: int
    label: str


def _hand_key(player: Player) -> tuple[int, tuple[int, ...]]:
    ranks = tuple(card & _RANK_MASK for card in player.combination)
    return player.combination_strength, ranks


def _compare(first: Player, second: Player) -> int:
    a, b = _hand_key(first), _hand_key(second)
    return (a > b) - (a < b)


def _check_contenders(contenders: Sequence[int]) -> None:
    if len(contenders) != NUM_SEATS:
        raise ValueError(f"exactly {NUM_SEATS} contender slots are needed")
    for value in contenders:
        if not 0 <= value <= NUM_SEATS:
            raise ValueError("contender slots hold a seat number 1-4 or 0 for nobody")
    if not any(contenders):
        raise ValueError("there is nobody to compare")


def compare_hands(
    players: Sequence[Player], contenders: Sequence[int], pot: int
) -> list[Payout]:
    """Play the pot off between the contenders and credit the winners' cash.

    ``contenders`` holds four slots, each a seat number counted from 1 or 0 for
    an empty slot. Slots 0 and 1 meet in the first semifinal, slots 2 and 3 in
    the second, and the two survivors meet in the final. A drawn semifinal
    sends its first slot on and, if that side then takes the pot, both drawn
    hands share it; a drawn final shares it among everyone still tied.
    """
    _check_contenders(contenders)
    if len(players) != NUM_SEATS:
        raise ValueError(f"exactly {NUM_SEATS} players are needed")
    if pot < 0:
        raise ValueError("the pot cannot be negative")

    def player_at(slot: int) -> Optional[Player]:
        value = contenders[slot]
        return players[value - 1] if value else None

    def semifinal(slot_a: int, slot_b: int) -> tuple[int, list[int]]:
        first, second = player_at(slot_a), player_at(slot_b)
        if first is None:
            return slot_b, [slot_b]
        if second is None:
            return slot_a, [slot_a]
        result = _compare(first, second)
        if result > 0:
            return slot_a, [slot_a]
        if result < 0:
            return slot_b, [slot_b]
        return slot_a, [slot_a, slot_b]

    left, left_group = semifinal(0, 1)
    right, right_group = semifinal(2, 3)
    left_player, right_player = player_at(left), player_at(right)

    if right_player is None:
        winners = left_group
    elif left_player is None:
        winners = right_group
    else:
        result = _compare(left_player, right_player)
        if result > 0:
            winners = left_group
        elif result < 0:
            winners = right_group
        else:
            winners = left_group + right_group

    winners = [slot for slot in winners if contenders[slot]]
    share = pot // len(winners)
    payouts = []
    for slot in sorted(winners):
        seat = contenders[slot] - 1
        player = players[seat]
        player.cash += share
        payouts.append(Payout(seat=seat, amount=share, label=player.label))
    return payouts


def showdown(players: Sequence[Player]) -> list[Payout]:
    """Settle a hand in which nobody went all in: the best active hand takes every chip bet.

    Raises ValueError when a seated player is all in, since the chips must then
    be split into side pots first.
    """
    if len(players) != NUM_SEATS:
        raise ValueError(f"exactly {NUM_SEATS} players are needed")
    if any(player.status == PlayerStatus.AT_SEAT for player in players):
        raise ValueError("a player is all in; the side pots must be solved instead")
    contenders = [seat + 1 for seat, player in enumerate(players) if player.active]
    if not contenders:
        raise ValueError("no player is left in the hand")
    contenders += [0] * (NUM_SEATS - len(contenders))
    pot = sum(player.in_the_pot for player in players)
    return compare_hands(players, contenders, pot)