import pytest

from casinotable.options import MAX_VOLUME, Options


def test_default_selector():
    assert Options().selector_rect() == (19, 99, 15, 15)


def test_selector_moves():
    opts = Options()
    opts.move_right()
    opts.move_down()
    assert opts.selector_rect() == (48, 128, 15, 15)
    opts.move_down()
    assert opts.row == 1
    opts.move_left()
    opts.move_up()
    assert opts.selector_rect() == (19, 99, 15, 15)


def test_music_preview_follows_row():
    opts = Options()
    opts.move_down()
    assert not opts.music_playing
    opts.move_up()
    assert opts.music_playing


def test_volume_caps_at_max():
    opts = Options(music_volume=MAX_VOLUME - 2)
    opts.move_right()
    results = [opts.adjust() for _ in range(5)]
    assert results[-1] == MAX_VOLUME
    assert opts.music_volume == 115


def test_slider_tracks_volume():
    opts = Options()
    gap = opts.music_slider_x - opts.music_volume
    for _ in range(10):
        opts.adjust()
    assert opts.music_volume == 53
    assert opts.music_slider_x - opts.music_volume == gap


def test_decrease_at_zero_crosses_icon():
    opts = Options(music_volume=1)
    assert opts.adjust() == 0
    assert not opts.music_crossed
    assert opts.adjust() == 0
    assert opts.music_crossed


def test_increase_from_zero_restores_sfx_icon():
    opts = Options(sfx_volume=0)
    assert opts.sfx_crossed
    opts.move_down()
    opts.move_right()
    assert opts.adjust() == 1
    assert not opts.sfx_crossed
    assert opts.music_volume == 63


def test_invalid_volume_rejected():
    with pytest.raises(ValueError):
        Options(music_volume=MAX_VOLUME + 1)
    with pytest.raises(ValueError):
        Options(sfx_volume=-1)