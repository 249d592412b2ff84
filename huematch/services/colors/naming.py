"""
Color naming for palette swatches.

Full names come from a nearest-match lookup in CIE Lab against a fixed
reference table; simple names come from hue/saturation/lightness buckets
so they stay stable for layperson display.
"""

from functools import lru_cache
from typing import List, Sequence, Tuple

import numpy as np
from loguru import logger

from huematch.schemas import PaletteSwatch
from .utils import hex_to_hls, hex_to_lab, hex_to_rgb, rgb_array_to_lab

FALLBACK_NAME = "Color"

# Order matters: on equal distance the earlier entry wins
NAMED_COLORS: Tuple[Tuple[str, str], ...] = (
    ("White", "#FFFFFF"),
    ("Off-White", "#F8F6F0"),
    ("Ivory", "#FFFFF0"),
    ("Cream", "#FFFDD0"),
    ("Beige", "#F5F5DC"),
    ("Light Gray", "#D3D3D3"),
    ("Silver", "#C0C0C0"),
    ("Gray", "#808080"),
    ("Charcoal", "#36454F"),
    ("Black", "#000000"),
    ("Red", "#FF0000"),
    ("Crimson", "#DC143C"),
    ("Burgundy", "#800020"),
    ("Maroon", "#800000"),
    ("Coral", "#FF7F50"),
    ("Salmon", "#FA8072"),
    ("Orange", "#FFA500"),
    ("Burnt Orange", "#CC5500"),
    ("Peach", "#FFDAB9"),
    ("Gold", "#FFD700"),
    ("Yellow", "#FFFF00"),
    ("Mustard", "#FFDB58"),
    ("Khaki", "#C3B091"),
    ("Tan", "#D2B48C"),
    ("Camel", "#C19A6B"),
    ("Brown", "#8B4513"),
    ("Chocolate", "#5C3317"),
    ("Olive", "#808000"),
    ("Lime", "#32CD32"),
    ("Green", "#008000"),
    ("Forest Green", "#228B22"),
    ("Mint", "#98FF98"),
    ("Sage", "#9CAF88"),
    ("Emerald", "#50C878"),
    ("Teal", "#008080"),
    ("Turquoise", "#40E0D0"),
    ("Cyan", "#00FFFF"),
    ("Sky Blue", "#87CEEB"),
    ("Light Blue", "#ADD8E6"),
    ("Blue", "#0000FF"),
    ("Royal Blue", "#4169E1"),
    ("Denim", "#1560BD"),
    ("Navy", "#000080"),
    ("Indigo", "#4B0082"),
    ("Purple", "#800080"),
    ("Violet", "#8F00FF"),
    ("Lavender", "#E6E6FA"),
    ("Lilac", "#C8A2C8"),
    ("Magenta", "#FF00FF"),
    ("Fuchsia", "#C154C1"),
    ("Pink", "#FFC0CB"),
    ("Hot Pink", "#FF69B4"),
    ("Rose", "#FF007F"),
    ("Blush", "#DE5D83"),
)


@lru_cache(maxsize=8)
def _table_lab(table: Tuple[Tuple[str, str], ...]) -> np.ndarray:
    """Lab coordinates of a reference table, computed once per table."""
    return rgb_array_to_lab(np.array([hex_to_rgb(hex_color) for _, hex_color in table]))


def lookup_color_name(hex_color: str, table: Sequence[Tuple[str, str]] = NAMED_COLORS) -> str:
    """
    Name a color by its nearest reference entry in Lab space.

    Args:
        hex_color: Color in format #RRGGBB
        table: Ordered (name, hex) reference entries

    Returns:
        Reference name, or "Color" when the table is empty

    Raises:
        InvalidColorError: If hex_color is malformed
    """
    target = hex_to_lab(hex_color)
    table = tuple(table)
    if not table:
        logger.warning("Color name table is empty, using fallback name")
        return FALLBACK_NAME

    distances = np.linalg.norm(_table_lab(table) - target, axis=1)
    # argmin returns the first minimum, which gives table-order tie breaking
    return table[int(np.argmin(distances))][0]


def simple_color_name(hex_color: str) -> str:
    """
    Bucket a color into a common single-word name.

    Args:
        hex_color: Color in format #RRGGBB

    Returns:
        One of White, Light Gray, Gray, Black, Brown, Red, Orange, Yellow,
        Green, Cyan, Blue, Purple, Magenta, Pink
    """
    h, l, s = hex_to_hls(hex_color)
    hue = h * 360.0
    chroma = s * (1.0 - abs(2.0 * l - 1.0))

    # Achromatic, including creams and near-whites whose HLS saturation is high
    if chroma < 0.10 or l > 0.96 or l < 0.04:
        if l > 0.90:
            return "White"
        if l > 0.70:
            return "Light Gray"
        if l > 0.25:
            return "Gray"
        return "Black"

    if 20 <= hue < 45 and l < 0.50:
        return "Brown"

    if hue < 15 or hue >= 345:
        return "Pink" if l > 0.75 else "Red"
    if hue < 45:
        return "Orange"
    if hue < 70:
        return "Yellow"
    if hue < 150:
        return "Green"
    if hue < 200:
        return "Cyan"
    if hue < 260:
        return "Blue"
    if hue < 290:
        return "Purple"
    if hue < 330:
        return "Magenta"
    return "Pink"


def name_colors(swatches: Sequence[PaletteSwatch]) -> List[PaletteSwatch]:
    """
    Attach name and simple name to every swatch.

    Names are derived from the hex alone, so naming an already named palette
    returns identical values.

    Args:
        swatches: Palette swatches, named or not

    Returns:
        New list of PaletteSwatch with name and simple_name populated
    """
    named = [
        swatch.model_copy(update={
            "name": lookup_color_name(swatch.hex),
            "simple_name": simple_color_name(swatch.hex),
        })
        for swatch in swatches
    ]
    logger.debug(f"Named palette: {[(s.hex, s.name, s.simple_name) for s in named]}")
    return named
