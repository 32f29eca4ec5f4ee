"""Tray icon images."""

from functools import cache

from PIL import Image, ImageDraw

from ....domain.value_objects import AggregateState

ICON_SIZE = 64
TRANSPARENT = (0, 0, 0, 0)


@cache
def create_icon_image(state: AggregateState, size: int = ICON_SIZE) -> Image.Image:
    """Draw a filled circle in the colour of ``state``."""
    img = Image.new("RGBA", (size, size), TRANSPARENT)
    draw = ImageDraw.Draw(img)
    margin = max(1, size // 16)
    draw.ellipse(
        (margin, margin, size - margin - 1, size - margin - 1),
        fill=state.color_hex,
        outline=(0, 0, 0, 160),
        width=max(1, size // 32),
    )
    return img
