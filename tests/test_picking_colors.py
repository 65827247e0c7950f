import pytest

from rendercore.picking_colors import (
    BACKGROUND_ID,
    color_to_pick_id,
    describe_pick,
    pick_id_to_color,
)


def test_white_pixel_is_background():
    assert describe_pick(255, 255, 255) == "background"
    assert color_to_pick_id(255, 255, 255) == BACKGROUND_ID


def test_black_pixel_is_first_mesh():
    assert describe_pick(0, 0, 0) == "mesh 0"


def test_low_byte_goes_to_red():
    assert pick_id_to_color(0x00000042) == (0x42, 0, 0)


def test_middle_byte_goes_to_green():
    assert pick_id_to_color(0x00004200) == (0, 0x42, 0)


def test_high_byte_goes_to_blue():
    assert pick_id_to_color(0x00420000) == (0, 0, 0x42)


@pytest.mark.parametrize("index", [0, 1, 99, 255, 256, 65535, 65536, 0x123456, 0xFFFFFE])
def test_round_trip(index):
    assert color_to_pick_id(*pick_id_to_color(index)) == index


@pytest.mark.parametrize("index", [0, 7, 99, 300, 0xABCDEF])
def test_describe_matches_id(index):
    assert describe_pick(*pick_id_to_color(index)) == f"mesh {index}"


def test_channels_are_bytes():
    for index in (0, 12345, 0xFFFFFF, 0x800080):
        assert all(0 <= channel <= 255 for channel in pick_id_to_color(index))


def test_background_id_maps_to_white():
    assert pick_id_to_color(BACKGROUND_ID) == (255, 255, 255)


@pytest.mark.parametrize("index", [-1, 0x1000000])
def test_id_out_of_range(index):
    with pytest.raises(ValueError):
        pick_id_to_color(index)


@pytest.mark.parametrize("color", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_channel_out_of_range(color):
    with pytest.raises(ValueError):
        color_to_pick_id(*color)
    with pytest.raises(ValueError):
        describe_pick(*color)