"""
Emoji and short text summaries for palettes.

Display helpers only: every function here is total and never raises on bad
color input.
"""

from typing import Optional, Sequence

from huematch.exceptions import InvalidColorError
from huematch.schemas import PaletteSwatch
from .confidence import resolve_locale
from .utils import hex_to_hls

DEFAULT_EMOJI = "⚪"

# (upper hue bound in degrees, emoji), checked in order
HUE_EMOJI = (
    (15, "🔴"),
    (45, "🟠"),
    (70, "🟡"),
    (150, "🟢"),
    (200, "🩵"),
    (250, "🔵"),
    (330, "🟣"),
    (345, "🌸"),
    (360, "🔴"),
)

PALETTE_LABELS = {
    "en": {"empty": "🎨 No colors detected", "detected": "Detected", "secondary": "Secondary"},
    "tn": {"empty": "🎨 Ma l9ina hata lawn", "detected": "Lawn", "secondary": "Lwen okhrin"},
}


def emoji_for(hex_color: Optional[str]) -> str:
    """
    Map a color to a representative emoji.

    Achromatic colors map by lightness, chromatic ones by hue. Missing or
    malformed input gets the default white circle.
    """
    if not hex_color:
        return DEFAULT_EMOJI
    try:
        h, l, s = hex_to_hls(hex_color)
    except InvalidColorError:
        return DEFAULT_EMOJI

    if s < 0.15:
        if l > 0.9:
            return "⚪"
        if l > 0.7:
            return "◻️"
        if l > 0.3:
            return "◽"
        if l > 0.15:
            return "◾"
        return "⬛"

    hue = h * 360.0
    for upper, emoji in HUE_EMOJI:
        if hue < upper:
            return emoji
    return DEFAULT_EMOJI


def _label(swatch: PaletteSwatch) -> str:
    return swatch.simple_name or swatch.name or swatch.hex


def palette_message(swatches: Sequence[PaletteSwatch], locale: Optional[str] = None) -> str:
    """
    One or two line summary of a named palette with emoji.

    Args:
        swatches: Palette, ideally named, most dominant first
        locale: Message language code

    Returns:
        The dominant color line, plus up to two secondary colors
    """
    labels = PALETTE_LABELS[resolve_locale(locale)]
    if not swatches:
        return labels["empty"]

    dominant = swatches[0]
    message = (
        f"🎨 **{labels['detected']}**: {emoji_for(dominant.hex)} "
        f"{_label(dominant)} ({dominant.percentage}%)"
    )

    secondary = swatches[1:3]
    if secondary:
        sec_list = ", ".join(
            f"{emoji_for(s.hex)} {_label(s)} ({s.percentage}%)" for s in secondary
        )
        message += f"\n   {labels['secondary']}: {sec_list}"
    return message


def color_description(swatches: Sequence[PaletteSwatch]) -> str:
    """
    Plain-language color description, e.g. "navy with beige accents".
    """
    if not swatches:
        return "neutral colored"

    dominant = _label(swatches[0]).lower()
    if len(swatches) == 1 or swatches[0].percentage > 70:
        return dominant
    return f"{dominant} with {_label(swatches[1]).lower()} accents"
