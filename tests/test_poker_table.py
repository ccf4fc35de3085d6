import pytest

from casinotable.poker_table import (
    LARGE_BET_SOUND,
    MEDIUM_BET_SOUND,
    SMALL_BET_SOUND,
    Player,
    PlayerStatus,
    Table,
    chip_sound,
    player_label,
)


def make_table(buy_in=1000, big_blind=50):
    return Table(buy_in, big_blind, [0, 1, 4, 5])


def test_player_label_humans_and_cpu():
    assert player_label(0) == "P1"
    assert player_label(3) == "P4"
    assert player_label(4) == "C1"
    assert player_label(5) == "C2"


def test_player_label_rejects_negative():
    with pytest.raises(ValueError):
        player_label(-1)


def test_chip_sound_thresholds():
    assert chip_sound(900, 1000) == LARGE_BET_SOUND
    assert chip_sound(500, 1000) == MEDIUM_BET_SOUND
    assert chip_sound(333, 1000) == SMALL_BET_SOUND
    assert chip_sound(334, 1000) == MEDIUM_BET_SOUND


def test_chip_sound_is_monotonic():
    sounds = [chip_sound(amount, 1000) for amount in range(0, 1200, 7)]
    assert sounds == sorted(sounds)


def test_player_flags():
    player = Player(joypad=4, status=PlayerStatus.AT_SEAT | PlayerStatus.IN_PLAY)
    assert player.active and player.at_seat and not player.folded
    assert not player.is_human
    assert player.label == "C1"
    player.status |= PlayerStatus.FOLDED
    assert not player.active


def test_table_init_gives_everyone_buy_in():
    table = make_table()
    assert [p.cash for p in table.players] == [1000] * 4
    assert all(p.active for p in table.players)
    assert table.at_the_table == 4


def test_table_init_validation():
    with pytest.raises(ValueError):
        Table(1000, 50, [0, 1, 2])
    with pytest.raises(ValueError):
        Table(0, 50, [0, 1, 2, 3])


def test_deal_position_from_source():
    table = make_table()
    assert table.deal_position(0, 0) == (24, 16)
    assert table.deal_position(0, 1) == (56, 16)
    assert table.deal_position(2, 0) == (168, 144)
    assert table.deal_position(3, 1) == (56, 144)
    with pytest.raises(ValueError):
        table.deal_position(4, 0)


def test_next_to_act_skips_inactive():
    table = make_table()
    table.players[1].status = PlayerStatus.AT_SEAT | PlayerStatus.FOLDED
    table.last_played = 1
    assert table.next_to_act() == 2
    assert table.last_played == 3


def test_next_to_act_wraps_after_last_seat():
    table = make_table()
    table.last_played = 4
    assert table.next_to_act() == 0


def test_last_to_act_counts_back():
    table = make_table()
    table.last_played = 1
    assert table.last_to_act() == 3
    table.players[3].status = PlayerStatus.AT_SEAT
    assert table.last_to_act() == 2


def test_start_hand_four_players():
    table = make_table()
    first, last = table.start_hand()
    assert table.small_blind == 1
    assert table.players[1].in_the_pot == 25
    assert table.players[2].in_the_pot == 50
    assert table.players[1].cash == 1000 - 25
    assert table.players[2].cash == 1000 - 50
    assert first == 3
    assert last == 2
    assert table.current_bet == 50
    assert table.min_bet_raise == 50


def test_pot_and_cash_conserved_after_blinds():
    table = make_table()
    table.start_hand()
    total = sum(p.cash + p.in_the_pot for p in table.players)
    assert total == 4 * 1000


def test_heads_up_button_posts_small_blind():
    table = make_table()
    table.leave(1)
    assert table.leave(3) == 2
    first, last = table.start_hand()
    assert table.small_blind == 0
    assert table.players[0].in_the_pot == 25
    assert table.players[2].in_the_pot == 50
    assert first == 0
    assert last == 2


def test_short_stack_goes_all_in_on_blind():
    table = make_table()
    table.players[2].cash = 30
    table.start_hand()
    big = table.players[2]
    assert big.cash == 0
    assert big.in_the_pot == 30
    assert not big.in_play
    assert table.in_play == 3


def test_button_moves_to_seated_player():
    table = make_table()
    table.leave(0)
    table.start_hand()
    assert table.players[table.button].at_seat
    assert table.button == 1


def test_leave_empty_seat_raises():
    table = make_table()
    table.leave(2)
    with pytest.raises(ValueError):
        table.leave(2)


def test_deal_order_two_rounds_from_small_blind():
    table = make_table()
    table.start_hand()
    order = table.deal_order()
    assert order[0] == (table.small_blind, 0)
    seats = [seat for seat, _ in order]
    for seat in range(4):
        assert seats.count(seat) == 2
    assert [r for _, r in order] == [0] * 4 + [1] * 4


def test_deal_order_heads_up():
    table = make_table()
    table.leave(1)
    table.leave(3)
    table.start_hand()
    order = table.deal_order()
    assert len(order) == 4
    assert {seat for seat, _ in order} == {0, 2}


def test_deal_order_needs_two_players():
    table = make_table()
    table.leave(0)
    table.leave(1)
    table.leave(2)
    with pytest.raises(ValueError):
        table.deal_order()