"""Draw a month grid into a PIL Image (in-memory)."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from PIL import Image, ImageDraw, ImageFont

from calendar_logic import Grid, validate_headers
from calendar_theme import Theme, ThemeMode
from day_annotations import AnnotatedCell, AnnotatedGrid

logger = logging.getLogger(__name__)

# The grid sets no background of its own; these are the containers it is shown in.
_BACKGROUNDS = {ThemeMode.LIGHT: "white", ThemeMode.DARK: "#1e1e30"}

_FONT_NAMES = ("DejaVuSans.ttf", "Arial.ttf", "segoeui.ttf")


def background_for(mode: ThemeMode) -> str:
    return _BACKGROUNDS[mode]


def _load_font(size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    for name in _FONT_NAMES:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default()


def _centered(draw: ImageDraw.ImageDraw, box_x: int, box_w: int, y: int,
              text: str, font, fill: str) -> None:
    bbox = draw.textbbox((0, 0), text, font=font)
    x = box_x + (box_w - (bbox[2] - bbox[0])) / 2 - bbox[0]
    draw.text((x, y), text, fill=fill, font=font)


def render_month(
    grid: Grid | AnnotatedGrid,
    theme: Theme,
    headers: Sequence[str] | None = None,
    cell_size: int = 64,
    background: str = "white",
    title: str | None = None,
) -> Image.Image:
    """Return an RGB image of the grid: optional title, header row, then one row per week.

    Cells of an annotated grid get their annotation (as text) below the day
    number. An annotation colour of "inherit" uses the day colour.
    """
    if cell_size <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    labels = validate_headers(headers) if headers is not None else None

    band = cell_size // 2
    top = (band if title else 0) + (band if labels else 0)
    width = 7 * cell_size
    height = top + len(grid) * cell_size

    img = Image.new("RGB", (width, height), background)
    draw = ImageDraw.Draw(img)

    day_font = _load_font(max(cell_size // 4, 8))
    small_font = _load_font(max(cell_size // 5, 6))
    annotation_color = theme.day_color if theme.annotation_color == "inherit" else theme.annotation_color

    y = 0
    if title:
        _centered(draw, 0, width, y + band // 4, title, day_font, theme.header_color)
        y += band
    if labels:
        for col, label in enumerate(labels):
            _centered(draw, col * cell_size, cell_size, y + band // 4, label, small_font, theme.header_color)
        y += band

    for row, week in enumerate(grid):
        cell_y = top + row * cell_size
        for col, cell in enumerate(week):
            if isinstance(cell, AnnotatedCell):
                day, annotation = cell.day, cell.annotation
            else:
                day, annotation = cell, None
            if day is None:
                continue
            cell_x = col * cell_size
            _centered(draw, cell_x, cell_size, cell_y + 6, str(day), day_font, theme.day_color)
            if annotation is not None:
                day_box = draw.textbbox((0, 0), str(day), font=day_font)
                ann_y = cell_y + 6 + (day_box[3] - day_box[1]) + 4
                _centered(draw, cell_x, cell_size, ann_y, str(annotation), small_font, annotation_color)

    logger.debug("Rendered %dx%d month preview", width, height)
    return img
