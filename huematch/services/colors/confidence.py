"""
Palette confidence assessment.

Decides how trustworthy an extracted palette is from the dominance of its
top swatch, near-duplicate clusters and total coverage, and picks a
localized message for the tier.
"""

from dataclasses import dataclass
from itertools import combinations
from typing import Dict, Optional, Sequence

from loguru import logger

from huematch.config import config
from huematch.exceptions import InvalidPaletteError
from huematch.schemas import ConfidenceAssessment, ConfidenceTier, PaletteSwatch
from .utils import rgb_distance


@dataclass(frozen=True)
class ConfidencePolicy:
    """Tunable thresholds for confidence tiers."""

    # Percentage the dominant swatch needs for each tier
    high_dominance: float = 60.0
    medium_dominance: float = 35.0

    # Two swatches closer than this in RGB are treated as one split color
    duplicate_distance: float = 30.0
    heavy_duplicate_pairs: int = 2

    # Palettes covering less of the image than this cannot be high
    min_total_coverage: float = 80.0


CONFIDENCE_MESSAGES: Dict[ConfidenceTier, Dict[str, str]] = {
    ConfidenceTier.HIGH: {
        "en": "✅ High confidence - color lock engaged",
        "tn": "✅ Theqa 3aliya - el lawn wadh7",
    },
    ConfidenceTier.MEDIUM: {
        "en": "⚠️ Multi-color product - using colors as guide",
        "tn": "⚠️ Hweyyej bel barcha alwen - nestaamel kif guide",
    },
    ConfidenceTier.LOW: {
        "en": "⚠️ Complex pattern - colors will be interpreted loosely",
        "tn": "⚠️ Pattern m3a9ed - el alwen bech yet5arou bel ta9rib",
    },
}


def resolve_locale(locale: Optional[str]) -> str:
    """
    Map a locale code onto a supported message language.

    "en-US" and "en_GB" become "en"; unknown codes fall back to the
    configured default, then to English.
    """
    supported = CONFIDENCE_MESSAGES[ConfidenceTier.HIGH]
    for candidate in (locale, config.DEFAULT_LOCALE):
        if not candidate:
            continue
        language = candidate.replace("_", "-").split("-")[0].lower()
        if language in supported:
            return language
    return "en"


def confidence_message(tier: ConfidenceTier, locale: Optional[str] = None) -> str:
    """Localized message for a confidence tier."""
    return CONFIDENCE_MESSAGES[tier][resolve_locale(locale)]


def count_duplicate_pairs(swatches: Sequence[PaletteSwatch], threshold: float) -> int:
    """Number of swatch pairs whose colors sit within threshold of each other."""
    return sum(
        1 for a, b in combinations(swatches, 2)
        if rgb_distance(a.hex, b.hex) < threshold
    )


def assess_confidence(swatches: Sequence[PaletteSwatch],
                      locale: Optional[str] = None,
                      policy: Optional[ConfidencePolicy] = None) -> ConfidenceAssessment:
    """
    Assess how trustworthy an extracted palette is.

    Args:
        swatches: Palette swatches, in any order
        locale: Message language code (defaults to config.DEFAULT_LOCALE)
        policy: Threshold overrides

    Returns:
        ConfidenceAssessment with tier and localized message

    Raises:
        InvalidPaletteError: If the palette is empty
    """
    if not swatches:
        logger.error("assess_confidence called with an empty palette")
        raise InvalidPaletteError("Cannot assess confidence of an empty palette")

    policy = policy or ConfidencePolicy()
    dominant = max(s.percentage for s in swatches)
    duplicates = count_duplicate_pairs(swatches, policy.duplicate_distance)
    coverage = sum(s.percentage for s in swatches)

    if duplicates >= policy.heavy_duplicate_pairs:
        tier = ConfidenceTier.LOW
    elif (dominant >= policy.high_dominance and duplicates == 0
          and coverage >= policy.min_total_coverage):
        tier = ConfidenceTier.HIGH
    elif dominant >= policy.medium_dominance:
        tier = ConfidenceTier.MEDIUM
    else:
        tier = ConfidenceTier.LOW

    logger.debug(
        f"Confidence {tier.value}: dominant={dominant:.1f}% "
        f"duplicate_pairs={duplicates} coverage={coverage:.1f}%"
    )
    return ConfidenceAssessment(tier=tier, message=confidence_message(tier, locale))
