import pytest

from texel_universe.buffer import Cell, Grid
from texel_universe.renderer.image import (
    DEFAULT_BACKGROUND,
    ImageRenderer,
    render_image,
    to_array,
)


def test_render_image_size() -> None:
    img = render_image(Grid.filled(2, 3), cell_width=4, cell_height=5)
    assert img.size == (12, 10)
    assert img.mode == "RGBA"


def test_render_image_default_background() -> None:
    img = render_image(Grid.filled(1, 1), cell_width=2, cell_height=2)
    assert img.getpixel((0, 0)) == (*DEFAULT_BACKGROUND, 255)


def test_render_image_cell_background() -> None:
    grid = Grid.from_rows([[Cell(), Cell(bg=(10, 20, 30))]])
    img = render_image(grid, cell_width=4, cell_height=4)
    assert img.getpixel((5, 2)) == (10, 20, 30, 255)
    assert img.getpixel((1, 2)) == (*DEFAULT_BACKGROUND, 255)


def test_render_image_draws_glyph_pixels() -> None:
    grid = Grid.from_rows([[Cell(character="#", fg=(255, 255, 0))]])
    img = render_image(grid, cell_width=16, cell_height=16)
    assert (255, 255, 0, 255) in [color for _, color in img.getcolors(256 * 256)]


def test_render_image_rejects_bad_cell_size() -> None:
    with pytest.raises(ValueError):
        render_image(Grid.filled(1, 1), cell_width=0)


def test_to_array_shape() -> None:
    arr = to_array(Grid.filled(2, 3), cell_width=4, cell_height=5)
    assert arr.shape == (10, 12, 4)


def test_image_renderer_uses_settings() -> None:
    renderer = ImageRenderer(cell_width=3, cell_height=3, background=(9, 9, 9))
    img = renderer.render(Grid.filled(1, 2))
    assert img.size == (6, 3)
    assert img.getpixel((0, 0)) == (9, 9, 9, 255)
