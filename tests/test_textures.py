import pytest

from raywave.geometry import Color
from raywave.textures import (
    BorderMode,
    CheckerboardTexture,
    ConstantTexture,
    FilterMode,
    Image,
    ImageTexture,
)

RED = Color(1, 0, 0)
GREEN = Color(0, 1, 0)
BLUE = Color(0, 0, 1)
WHITE = Color(1, 1, 1)


def quad_image() -> Image:
    # top row: RED GREEN, bottom row: BLUE WHITE
    return Image.from_rows([[RED, GREEN], [BLUE, WHITE]])


def test_image_get_row_major():
    image = quad_image()
    assert image.resolution == (2, 2)
    assert image.get(1, 0) == GREEN
    assert image.get(0, 1) == BLUE
    assert image[1, 1] == WHITE


def test_image_set_then_get():
    image = Image(3, 2)
    image[2, 1] = RED
    assert image.get(2, 1) == RED
    assert image.get(0, 0) == Color(0)


def test_image_out_of_range():
    with pytest.raises(IndexError):
        quad_image().get(2, 0)


def test_image_wrong_pixel_count():
    with pytest.raises(ValueError):
        Image(2, 2, [RED])


def test_image_ragged_rows():
    with pytest.raises(ValueError):
        Image.from_rows([[RED, GREEN], [BLUE]])


def test_constant_texture_same_everywhere():
    texture = ConstantTexture(GREEN)
    assert texture.evaluate((0.0, 0.0)) == GREEN
    assert texture.evaluate((0.7, -3.0)) == GREEN


def test_checkerboard_defaults():
    texture = CheckerboardTexture((2, 2))
    assert texture.evaluate((0.1, 0.1)) == Color(0)
    assert texture.evaluate((0.6, 0.1)) == Color(1)


@pytest.mark.parametrize(
    "uv, expected",
    [
        ((0.1, 0.1), "c0"),
        ((0.6, 0.1), "c1"),
        ((0.1, 0.6), "c1"),
        ((0.6, 0.6), "c0"),
        ((-0.1, 0.1), "c1"),
    ],
)
def test_checkerboard_pattern(uv, expected):
    texture = CheckerboardTexture((2, 2), color0=RED, color1=BLUE)
    assert texture.evaluate(uv) == {"c0": RED, "c1": BLUE}[expected]


def test_checkerboard_periodic():
    texture = CheckerboardTexture((4, 3), color0=RED, color1=BLUE)
    for uv in [(0.05, 0.1), (0.3, 0.5), (0.8, 0.9)]:
        shifted = (uv[0] + 0.5, uv[1] + 2 / 3)
        assert texture.evaluate(uv) == texture.evaluate(shifted)


def test_nearest_flips_v():
    texture = ImageTexture(quad_image(), filter=FilterMode.NEAREST)
    assert texture.evaluate((0.25, 0.75)) == RED
    assert texture.evaluate((0.75, 0.75)) == GREEN
    assert texture.evaluate((0.25, 0.25)) == BLUE
    assert texture.evaluate((0.75, 0.25)) == WHITE


def test_nearest_repeat_wraps():
    texture = ImageTexture(quad_image(), border="repeat", filter="nearest")
    assert texture.evaluate((1.25, 0.75)) == texture.evaluate((0.25, 0.75))
    assert texture.evaluate((-0.25, 0.75)) == GREEN


def test_nearest_clamp_stays_at_edge():
    texture = ImageTexture(quad_image(), border=BorderMode.CLAMP, filter="nearest")
    assert texture.evaluate((1.25, 0.75)) == GREEN
    assert texture.evaluate((-0.5, 0.25)) == BLUE


def test_bilinear_at_pixel_center_is_exact():
    texture = ImageTexture(quad_image(), border="clamp")
    assert texture.evaluate((0.25, 0.75)) == RED
    assert texture.evaluate((0.75, 0.25)) == WHITE


def test_bilinear_uniform_image_is_constant():
    image = Image(3, 3, [GREEN] * 9)
    texture = ImageTexture(image)
    for uv in [(0.0, 0.0), (0.37, 0.81), (0.99, 0.5)]:
        assert texture.evaluate(uv) == GREEN


def test_bilinear_midpoint_blends():
    image = Image.from_rows([[Color(0), Color(1)]])
    texture = ImageTexture(image, border="clamp")
    assert texture.evaluate((0.5, 0.5)) == Color(0.5)


def test_exposure_scales_result():
    texture = ImageTexture(quad_image(), exposure=2.0, filter="nearest")
    assert texture.evaluate((0.75, 0.25)) == WHITE * 2.0


def test_default_modes():
    texture = ImageTexture(quad_image())
    assert texture.border is BorderMode.REPEAT
    assert texture.filter is FilterMode.BILINEAR


def test_unknown_border_mode():
    with pytest.raises(ValueError):
        ImageTexture(quad_image(), border="mirror")


def test_unknown_filter_mode():
    with pytest.raises(ValueError):
        ImageTexture(quad_image(), filter="cubic")


def test_constant_texture_str():
    assert str(ConstantTexture(RED)).startswith("ConstantTexture[")