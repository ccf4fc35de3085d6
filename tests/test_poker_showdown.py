import pytest

from casinotable.poker_showdown import Payout, compare_hands, showdown
from casinotable.poker_table import Player, PlayerStatus

ACTIVE = PlayerStatus.AT_SEAT | PlayerStatus.IN_PLAY
FOLDED = PlayerStatus.AT_SEAT | PlayerStatus.FOLDED
ALL_IN = PlayerStatus.AT_SEAT


def make_player(joypad, strength, combination, in_pot=100, status=ACTIVE):
    return Player(
        joypad=joypad,
        cash=0,
        in_the_pot=in_pot,
        combination=list(combination),
        combination_strength=strength,
        status=status,
    )


HIGH = [12, 10, 8, 6, 4]
LOW = [11, 10, 8, 6, 4]


def table(strengths, combos=None, statuses=None):
    combos = combos or [HIGH] * 4
    statuses = statuses or [ACTIVE] * 4
    return [
        make_player(seat, strengths[seat], combos[seat], status=statuses[seat])
        for seat in range(4)
    ]


def test_strongest_hand_takes_whole_pot():
    players = table([1, 5, 2, 3])
    payouts = showdown(players)
    assert [p.seat for p in payouts] == [1]
    assert payouts[0].amount == 400
    assert players[1].cash == 400
    assert all(players[s].cash == 0 for s in (0, 2, 3))


def test_winner_in_second_semifinal():
    players = table([1, 2, 7, 3])
    payouts = showdown(players)
    assert payouts == [Payout(seat=2, amount=400, label="P3")]


def test_high_card_breaks_equal_strength():
    players = table([4, 4, 1, 1], combos=[LOW, HIGH, HIGH, HIGH])
    payouts = showdown(players)
    assert [p.seat for p in payouts] == [1]


def test_suit_bits_are_ignored_in_ranks():
    suited = [0x1C, 0x2A, 0x38, 0x06, 0x14]
    players = table([4, 4, 1, 1], combos=[HIGH, suited, HIGH, HIGH])
    payouts = showdown(players)
    assert sorted(p.seat for p in payouts) == [0, 1]
    assert payouts[0].amount == payouts[1].amount
    assert sum(p.amount for p in payouts) == 400


def test_four_way_draw_splits_evenly():
    players = table([3, 3, 3, 3])
    payouts = showdown(players)
    assert [p.seat for p in payouts] == [0, 1, 2, 3]
    assert len({p.amount for p in payouts}) == 1
    assert sum(p.amount for p in payouts) == 400


def test_three_way_draw_shares_among_tied():
    players = table([3, 3, 3, 1])
    payouts = showdown(players)
    assert [p.seat for p in payouts] == [0, 1, 2]
    amounts = {p.amount for p in payouts}
    assert len(amounts) == 1
    total = sum(p.amount for p in payouts)
    assert 0 <= 400 - total < 3


def test_semifinal_draw_winner_side_splits():
    players = table([6, 6, 2, 1])
    payouts = showdown(players)
    assert [p.seat for p in payouts] == [0, 1]
    assert players[0].cash == players[1].cash
    assert players[0].cash + players[1].cash == 400


def test_folded_players_excluded_but_chips_count():
    players = table([9, 1, 2, 3], statuses=[FOLDED, ACTIVE, ACTIVE, ACTIVE])
    payouts = showdown(players)
    assert [p.seat for p in payouts] == [3]
    assert payouts[0].amount == sum(p.in_the_pot for p in players)


def test_cpu_label():
    players = table([1, 1, 1, 1])
    players[2].joypad = 4
    players[2].combination_strength = 8
    payouts = showdown(players)
    assert payouts[0].label == "C1"


def test_all_in_player_requires_side_pots():
    players = table([1, 2, 3, 4], statuses=[ACTIVE, ALL_IN, ACTIVE, ACTIVE])
    with pytest.raises(ValueError):
        showdown(players)


def test_nobody_active_raises():
    players = table([1, 2, 3, 4], statuses=[FOLDED] * 4)
    with pytest.raises(ValueError):
        showdown(players)


def test_compare_hands_with_empty_slots():
    players = table([1, 2, 3, 4])
    payouts = compare_hands(players, [1, 3, 0, 0], 250)
    assert payouts == [Payout(seat=2, amount=250, label="P3")]
    assert players[2].cash == 250


def test_compare_hands_rejects_bad_slots():
    players = table([1, 2, 3, 4])
    with pytest.raises(ValueError):
        compare_hands(players, [1, 2, 3], 100)
    with pytest.raises(ValueError):
        compare_hands(players, [0, 0, 0, 0], 100)
    with pytest.raises(ValueError):
        compare_hands(players, [5, 0, 0, 0], 100)
    with pytest.raises(ValueError):
        compare_hands(players, [1, 2, 0, 0], -1)