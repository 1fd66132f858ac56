import pytest

from skyness.image import Image
from skyness.visual import Visual


def _color_map(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_layout_42():
    img = Image(42, 42)
    assert img.bits_per_pixel == 32
    assert img.size_line == 168
    assert img.endian == 0
    assert len(img.data) == 168 * 42


def test_layout_242():
    img = Image(242, 242)
    assert img.size_line == 968


def test_new_image_is_black():
    img = Image(4, 3)
    assert all(img.get_pixel(x, y) == 0 for x in range(4) for y in range(3))


@pytest.mark.parametrize("byte_order", [0, 1])
def test_color_map_round_trip(byte_order):
    vis = Visual(byte_order=byte_order)
    w = h = 42
    img = Image(w, h, vis)
    for y in range(h):
        for x in range(w):
            img.put_pixel(x, y, vis.color_value(_color_map(x, y, w, h)))
    for y in range(h):
        for x in range(w):
            assert img.get_pixel(x, y) == vis.color_value(_color_map(x, y, w, h))


def test_little_endian_bytes():
    img = Image(2, 1, Visual(byte_order=0))
    img.put_pixel(1, 0, 0x112233)
    assert bytes(img.data[4:8]) == b"\x33\x22\x11\x00"


def test_big_endian_bytes():
    img = Image(2, 1, Visual(byte_order=1))
    img.put_pixel(1, 0, 0x112233)
    assert bytes(img.data[4:8]) == b"\x00\x11\x22\x33"


def test_alpha_byte_kept_in_32_bit_pixel():
    img = Image(1, 1)
    img.put_pixel(0, 0, 0xFF000000)
    assert img.get_pixel(0, 0) == 0xFF000000


def test_16_bit_image_truncates():
    vis = Visual(depth=16, red_mask=0xF800, green_mask=0x07E0, blue_mask=0x001F)
    img = Image(3, 2, vis)
    assert img.size_line == 8
    img.put_pixel(2, 1, 0x12345)
    assert img.get_pixel(2, 1) == 0x2345


def test_rows_are_independent():
    img = Image(3, 3)
    img.put_pixel(0, 1, 0xABCDEF)
    assert img.get_pixel(0, 1) == 0xABCDEF
    assert img.get_pixel(0, 0) == 0
    assert img.get_pixel(0, 2) == 0


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (5, 0), (0, 5)])
def test_out_of_bounds(x, y):
    img = Image(5, 5)
    with pytest.raises(IndexError):
        img.put_pixel(x, y, 1)
    with pytest.raises(IndexError):
        img.get_pixel(x, y)


@pytest.mark.parametrize("w, h", [(0, 5), (5, 0), (-1, 3)])
def test_bad_dimensions(w, h):
    with pytest.raises(ValueError):
        Image(w, h)