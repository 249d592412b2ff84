"""
huematch Backdrop Harmony Engine: Suggestion Orchestrator

Coordinates backdrop generation from harmony candidates through ranking,
near-duplicate filtering and naming into the final suggestion list, and
implements the auto-match pick used when the user has not chosen a backdrop.
"""

from typing import List, Optional, Sequence

from loguru import logger

from huematch.schemas import HarmonySuggestion, HarmonyType
from ..naming import lookup_color_name
from ..utils import contrast_ratio, delta_e, normalize_hex
from . import BackdropPolicy, HarmonyCandidate, generate_harmony_candidates
from .neutrals import generate_neutral_candidates

# Ranking of harmony types, highest priority first
TYPE_PRIORITY = (
    HarmonyType.COMPLEMENTARY,
    HarmonyType.ANALOGOUS,
    HarmonyType.TRIADIC,
    HarmonyType.NEUTRAL,
)


def rank_and_filter(candidates_by_type: dict, policy: BackdropPolicy) -> List[HarmonyCandidate]:
    """
    Flatten candidates in priority order and drop near-duplicates.

    The first candidate of each type is always kept so every harmony type
    stays represented; later ones within policy.duplicate_delta_e of a kept
    candidate are dropped.

    Args:
        candidates_by_type: Candidates keyed by HarmonyType
        policy: Generation constants

    Returns:
        Ranked candidate list
    """
    kept: List[HarmonyCandidate] = []
    for harmony_type in TYPE_PRIORITY:
        for index, candidate in enumerate(candidates_by_type.get(harmony_type, [])):
            if index > 0 and any(
                delta_e(candidate.hex, other.hex) < policy.duplicate_delta_e for other in kept
            ):
                logger.debug(
                    f"Dropped near-duplicate {harmony_type.value} candidate {candidate.hex} "
                    f"({candidate.generation_rule})"
                )
                continue
            logger.debug(f"Kept {harmony_type.value} candidate {candidate.hex} ({candidate.generation_rule})")
            kept.append(candidate)
    return kept


def suggest_backdrops(base_hex: str, policy: Optional[BackdropPolicy] = None) -> List[HarmonySuggestion]:
    """
    Generate ranked backdrop suggestions for a product's dominant color.

    Args:
        base_hex: Dominant product color in format #RRGGBB
        policy: Generation constant overrides

    Returns:
        Suggestions ordered complementary, analogous, triadic, neutral

    Raises:
        InvalidColorError: If base_hex is malformed
    """
    policy = policy or BackdropPolicy()
    try:
        base_hex = normalize_hex(base_hex)
    except ValueError:
        logger.error(f"suggest_backdrops called with malformed base color {base_hex!r}")
        raise

    candidates = generate_harmony_candidates(base_hex, policy)
    candidates[HarmonyType.NEUTRAL] = generate_neutral_candidates(base_hex, policy)

    suggestions = []
    for candidate in rank_and_filter(candidates, policy):
        hex_color = candidate.hex
        suggestions.append(HarmonySuggestion(
            hex=hex_color,
            name=lookup_color_name(hex_color),
            type=candidate.category,
            description=candidate.description,
            contrast_ratio=round(contrast_ratio(base_hex, hex_color), 2),
        ))

    logger.info(
        f"Generated {len(suggestions)} backdrops for {base_hex}: "
        f"{[(s.type.value, s.hex) for s in suggestions]}"
    )
    return suggestions


def pick_auto_backdrop(suggestions: Sequence[HarmonySuggestion]) -> Optional[HarmonySuggestion]:
    """
    Backdrop chosen when auto-match is enabled.

    Returns:
        The first complementary suggestion, else the first suggestion,
        else None for an empty list
    """
    for suggestion in suggestions:
        if suggestion.type == HarmonyType.COMPLEMENTARY:
            return suggestion
    return suggestions[0] if suggestions else None
