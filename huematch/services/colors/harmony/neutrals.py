"""
huematch Backdrop Harmony Engine: Neutrals

Neutral backdrops depend only on the base color's lightness, never on its
hue: a tonal gray mirroring the base, plus curated studio neutrals ordered
for contrast against the product.
"""

from dataclasses import dataclass
from typing import List

from huematch.schemas import HarmonyType
from . import BackdropPolicy, HarmonyCandidate, hex_to_hls


@dataclass(frozen=True)
class NeutralColor:
    """A studio neutral with metadata for selection logic."""
    hex: str
    lightness: float  # Pre-computed for ordering
    description: str


# Fixed neutral pool
NEUTRAL_POOL = (
    NeutralColor("#FFFFFF", 1.00, "Pure white, e-commerce standard"),
    NeutralColor("#F5F5F5", 0.96, "Soft studio white"),
    NeutralColor("#E8E8E8", 0.91, "Light gray, clean and modern"),
    NeutralColor("#F5F5DC", 0.91, "Warm beige, gentle and natural"),
    NeutralColor("#808080", 0.50, "Mid gray, balanced studio backdrop"),
    NeutralColor("#2C2C2C", 0.17, "Dark charcoal, dramatic and high-end"),
)

# Preferred order when the product is light: darker neutrals first
LIGHT_BASE_ORDER = ("#2C2C2C", "#808080", "#E8E8E8", "#F5F5DC", "#F5F5F5", "#FFFFFF")
# Preferred order when the product is dark: lighter neutrals first
DARK_BASE_ORDER = ("#F5F5F5", "#FFFFFF", "#E8E8E8", "#F5F5DC", "#808080", "#2C2C2C")


def tonal_gray_candidate(base_l: float, policy: BackdropPolicy) -> HarmonyCandidate:
    """
    Zero-saturation gray whose lightness mirrors the base lightness.

    Args:
        base_l: Base color lightness [0, 1]
        policy: Generation constants

    Returns:
        Neutral harmony candidate
    """
    target_l = max(policy.tonal_l_min, min(policy.tonal_l_max, 1.0 - base_l))
    return HarmonyCandidate(
        h=0.0,
        l=target_l,
        s=0.0,
        category=HarmonyType.NEUTRAL,
        description="Soft neutral backdrop",
        generation_rule=f"S→0; L→1-base ({target_l:.2f})",
    )


def select_neutrals_by_base_lightness(base_l: float) -> List[NeutralColor]:
    """
    Order the neutral pool for contrast with the base.

    Args:
        base_l: Base color lightness [0, 1]

    Returns:
        Pool entries ordered by preference
    """
    priority_order = LIGHT_BASE_ORDER if base_l > 0.60 else DARK_BASE_ORDER
    neutral_map = {neutral.hex: neutral for neutral in NEUTRAL_POOL}
    return [neutral_map[hex_color] for hex_color in priority_order]


def generate_neutral_candidates(base_hex: str,
                                policy: BackdropPolicy = BackdropPolicy()) -> List[HarmonyCandidate]:
    """
    Generate neutral backdrop candidates for a base color.

    The tonal gray always comes first. Pool neutrals too close in lightness
    to an already chosen neutral are skipped.

    Args:
        base_hex: Base color in format #RRGGBB
        policy: Generation constants

    Returns:
        Neutral candidates in preference order

    Raises:
        InvalidColorError: If base_hex is malformed
    """
    _, base_l, _ = hex_to_hls(base_hex)

    tonal = tonal_gray_candidate(base_l, policy)
    candidates = [tonal]
    chosen_lightness = [tonal.l]

    for neutral in select_neutrals_by_base_lightness(base_l):
        if len(candidates) > policy.max_pool_neutrals:
            break
        if any(abs(neutral.lightness - l) < policy.neutral_l_separation for l in chosen_lightness):
            continue

        n_h, n_l, n_s = hex_to_hls(neutral.hex)
        candidates.append(HarmonyCandidate(
            h=n_h,
            l=n_l,
            s=n_s,
            category=HarmonyType.NEUTRAL,
            description=neutral.description,
            generation_rule=f"pool:{neutral.hex}",
        ))
        chosen_lightness.append(neutral.lightness)

    return candidates
