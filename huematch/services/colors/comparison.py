"""
Perceptual color comparison.

Checks how far an observed color (for example the product color measured in
a generated photo) drifted from the expected one, using CIE76 Delta E.
"""

from typing import Tuple

from loguru import logger

from huematch.schemas import ColorMatch, MatchLevel
from .utils import delta_e, normalize_hex

# Upper Delta E bound of each level; anything above the last is a failure
MATCH_TOLERANCES: Tuple[Tuple[float, MatchLevel], ...] = (
    (2.0, MatchLevel.PERFECT),
    (5.0, MatchLevel.ACCEPTABLE),
    (10.0, MatchLevel.NOTICEABLE),
    (20.0, MatchLevel.WARNING),
)

WARN_LEVELS = {MatchLevel.WARNING, MatchLevel.FAILURE}


def classify_delta_e(value: float) -> MatchLevel:
    """Map a Delta E value to its match level."""
    for upper, level in MATCH_TOLERANCES:
        if value <= upper:
            return level
    return MatchLevel.FAILURE


def compare_colors(expected_hex: str, actual_hex: str) -> ColorMatch:
    """
    Compare an expected color with an observed one.

    Args:
        expected_hex: Reference color #RRGGBB
        actual_hex: Observed color #RRGGBB

    Returns:
        ColorMatch with Delta E rounded to two decimals and its level

    Raises:
        InvalidColorError: If either color is malformed
    """
    expected = normalize_hex(expected_hex)
    actual = normalize_hex(actual_hex)

    value = round(delta_e(expected, actual), 2)
    level = classify_delta_e(value)
    if level in WARN_LEVELS:
        logger.warning(f"Color drift {expected} -> {actual}: ΔE={value} ({level.value})")

    return ColorMatch(
        expected_hex=expected,
        actual_hex=actual,
        delta_e=value,
        level=level,
        should_warn=level in WARN_LEVELS,
    )
