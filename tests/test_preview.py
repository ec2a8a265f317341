import pytest
from PIL import ImageColor

from calendar_logic import DAY_ABBR, build_grid
from calendar_theme import DARK_THEME, LIGHT_THEME, ThemeMode
from day_annotations import attach_annotations
from preview import background_for, render_month


def test_image_size_follows_grid_shape():
    img = render_month(build_grid(2024, 2), LIGHT_THEME, cell_size=40)
    assert img.size == (7 * 40, 5 * 40)


def test_headers_and_title_add_bands():
    img = render_month(build_grid(2015, 2), LIGHT_THEME, headers=DAY_ABBR, cell_size=40, title="February 2015")
    assert img.size == (280, 4 * 40 + 20 + 20)


def test_background_and_theme_are_drawn():
    img = render_month(build_grid(2024, 2), DARK_THEME, cell_size=128, background=background_for(ThemeMode.DARK))
    assert img.getpixel((0, 0)) == ImageColor.getrgb("#1e1e30")
    # day colour appears somewhere in the image
    day_rgb = ImageColor.getrgb(DARK_THEME.day_color)
    assert day_rgb in {rgb for _count, rgb in img.getcolors(maxcolors=img.width * img.height)}


def test_annotated_grid_renders():
    grid = attach_annotations(build_grid(2024, 2), ["party", None, "star"])
    img = render_month(grid, LIGHT_THEME)
    assert img.mode == "RGB"


def test_bad_arguments():
    with pytest.raises(ValueError):
        render_month(build_grid(2024, 2), LIGHT_THEME, headers=["Mon"])
    with pytest.raises(ValueError):
        render_month(build_grid(2024, 2), LIGHT_THEME, cell_size=0)


def test_backgrounds():
    assert background_for(ThemeMode.LIGHT) == "white"
    assert background_for(ThemeMode.DARK) == "#1e1e30"
