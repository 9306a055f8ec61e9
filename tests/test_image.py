import pytest

from raycub.image import Image

IM1_SX, IM1_SY = 42, 42
IM3_SX, IM3_SY = 242, 242


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.mark.parametrize("width, height", [(IM1_SX, IM1_SY), (IM3_SX, IM3_SY)])
def test_new_image_layout(width, height):
    img = Image(width, height)
    assert img.bpp == 32
    assert img.size_line == width * 4
    assert len(img.data) == img.size_line * height
    assert not any(img.data)


@pytest.mark.parametrize("endian", [0, 1])
@pytest.mark.parametrize("kind", [1, 2])
def test_fill_with_color_map(endian, kind):
    img = Image(IM1_SX, IM1_SY, endian=endian)
    for y in range(IM1_SY):
        for x in range(IM1_SX):
            img.put_pixel(x, y, _color_map(x, y, IM1_SX, IM1_SY, kind))
    for y in range(IM1_SY):
        for x in range(IM1_SX):
            assert img.get_pixel(x, y) == _color_map(x, y, IM1_SX, IM1_SY, kind)


def test_little_endian_bytes():
    img = Image(2, 1, endian=0)
    img.put_pixel(1, 0, 0x11223344)
    assert bytes(img.data[4:8]) == bytes([0x44, 0x33, 0x22, 0x11])
    assert bytes(img.data[0:4]) == bytes(4)


def test_big_endian_bytes():
    img = Image(2, 1, endian=1)
    img.put_pixel(0, 0, 0x11223344)
    assert bytes(img.data[0:4]) == bytes([0x11, 0x22, 0x33, 0x44])


def test_row_stride():
    img = Image(3, 2)
    img.put_pixel(0, 1, 0x00FFFFFF)
    start = img.size_line
    assert bytes(img.data[start:start + 4]) == bytes([0xFF, 0xFF, 0xFF, 0x00])


def test_transparent_marker_reads_negative():
    img = Image(1, 1)
    img.put_pixel(0, 0, 0xFF000000)
    value = img.get_pixel(0, 0)
    assert value < 0
    assert value & 0xFFFFFFFF == 0xFF000000


def test_minus_one_round_trip():
    img = Image(1, 1)
    img.put_pixel(0, 0, -1)
    assert img.get_pixel(0, 0) == -1


def test_fill_sets_every_pixel():
    img = Image(5, 4)
    img.fill(0xFF99FF)
    assert all(img.get_pixel(x, y) == 0xFF99FF for y in range(4) for x in range(5))
    assert len(img.data) == img.size_line * img.height


@pytest.mark.parametrize("bpp", [8, 16, 24])
def test_narrow_pixels_round_trip(bpp):
    img = Image(4, 3, bpp=bpp)
    assert img.size_line == 4 * bpp // 8
    limit = 1 << bpp
    img.put_pixel(3, 2, limit - 1)
    assert img.get_pixel(3, 2) == limit - 1
    assert img.get_pixel(0, 0) == 0


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (IM1_SX, 0), (0, IM1_SY)])
def test_out_of_bounds(x, y):
    img = Image(IM1_SX, IM1_SY)
    with pytest.raises(IndexError):
        img.put_pixel(x, y, 0)
    with pytest.raises(IndexError):
        img.get_pixel(x, y)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0, "height": 5},
        {"width": 5, "height": -1},
        {"width": 5, "height": 5, "bpp": 12},
        {"width": 5, "height": 5, "endian": 2},
    ],
)
def test_invalid_images(kwargs):
    with pytest.raises(ValueError):
        Image(**kwargs)