import pytest

from skyness.visual import Visual, mask_shifts


def test_mask_shifts_true_color_24():
    assert mask_shifts(0xFF0000, 0x00FF00, 0x0000FF) == (16, 8, 8, 8, 0, 8)


def test_mask_shifts_rgb565():
    assert mask_shifts(0xF800, 0x07E0, 0x001F) == (11, 5, 5, 6, 0, 5)


def test_mask_shifts_zero_mask_rejected():
    with pytest.raises(ValueError):
        mask_shifts(0, 0xFF00, 0xFF)


def test_default_visual_shifts():
    assert Visual().shifts == (16, 8, 8, 8, 0, 8)


@pytest.mark.parametrize("color", [0xFF99FF, 0x00FFFF, 0x0, 0x123456])
def test_deep_visual_passes_colour_through(color):
    assert Visual(depth=24).color_value(color) == color


def test_rgb565_white_and_black():
    vis = Visual(depth=16, red_mask=0xF800, green_mask=0x07E0, blue_mask=0x001F)
    assert vis.color_value(0xFFFFFF) == 0xFFFF
    assert vis.color_value(0x000000) == 0


def test_rgb565_primaries_land_in_their_masks():
    vis = Visual(depth=16, red_mask=0xF800, green_mask=0x07E0, blue_mask=0x001F)
    assert vis.color_value(0xFF0000) == 0xF800
    assert vis.color_value(0x00FF00) == 0x07E0
    assert vis.color_value(0x0000FF) == 0x001F


def test_color_map_values_fit_pixel_width():
    vis = Visual(depth=16, red_mask=0xF800, green_mask=0x07E0, blue_mask=0x001F)
    w = h = 42
    for x in range(0, w, 5):
        for y in range(0, h, 5):
            color = (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
            assert 0 <= vis.color_value(color) < (1 << vis.bits_per_pixel)


def test_bits_per_pixel():
    assert Visual(depth=24).bits_per_pixel == 32
    assert Visual(depth=16, red_mask=0xF800, green_mask=0x07E0, blue_mask=0x1F).bits_per_pixel == 16


def test_bad_byte_order():
    with pytest.raises(ValueError):
        Visual(byte_order=2)