"""
huematch Backdrop Harmony Engine

This module implements color theory rules for generating complementary,
analogous and triadic backdrop candidates from a product's dominant color.
Candidates are expressed in HLS and kept inside a lightness band that reads
well behind a product.
"""

from dataclasses import dataclass
from typing import Dict, List

from huematch.schemas import HarmonyType
from ..utils import hex_to_hls, hls_to_hex

__all__ = [
    "BackdropPolicy", "HarmonyCandidate", "hex_to_hls", "hls_to_hex", "rotate_hue",
    "is_degenerate_base", "generate_complementary_candidates",
    "generate_analogous_candidates", "generate_triadic_candidates",
    "generate_harmony_candidates",
]


@dataclass(frozen=True)
class BackdropPolicy:
    """Centralized policy constants for backdrop generation."""

    # Lightness band for chromatic backdrops
    lightness_floor: float = 0.55
    lightness_ceiling: float = 0.88

    # Complementary
    complementary_s_cap: float = 0.85
    split_complementary: bool = True
    split_degrees: float = 30.0

    # Analogous
    analogous_degrees: float = 30.0
    analogous_s_factor: float = 0.90

    # Triadic
    triadic_l: float = 0.70
    triadic_s_cap: float = 0.65
    triadic_s_factor: float = 0.85

    # Achromatic bases get this much saturation so rotations differ
    degenerate_s_threshold: float = 0.12
    degenerate_s_floor: float = 0.30

    # Neutrals
    tonal_l_min: float = 0.25
    tonal_l_max: float = 0.90
    max_pool_neutrals: int = 2
    neutral_l_separation: float = 0.10

    # Candidates closer than this (Delta E) to a kept one are dropped
    duplicate_delta_e: float = 3.0


@dataclass(frozen=True)
class HarmonyCandidate:
    """A backdrop candidate with its generation metadata."""
    h: float  # Hue [0, 1)
    l: float  # Lightness [0, 1]
    s: float  # Saturation [0, 1]
    category: HarmonyType
    description: str
    generation_rule: str  # Human-readable generation rule for debugging

    @property
    def hex(self) -> str:
        return hls_to_hex(self.h, self.l, self.s)


def rotate_hue(h: float, degrees: float) -> float:
    """
    Rotate hue by specified degrees.

    Args:
        h: Original hue [0, 1)
        degrees: Rotation in degrees (can be negative)

    Returns:
        Rotated hue [0, 1) with proper wraparound
    """
    return (h + degrees / 360.0) % 1.0


def clamp_lightness(l: float, policy: BackdropPolicy) -> float:
    """Clamp lightness into the backdrop band."""
    return max(policy.lightness_floor, min(policy.lightness_ceiling, l))


def is_degenerate_base(base_s: float, policy: BackdropPolicy) -> bool:
    """True when the base is too desaturated for hue rotations to matter."""
    return base_s < policy.degenerate_s_threshold


def generate_complementary_candidates(base_h: float, base_l: float, base_s: float,
                                      policy: BackdropPolicy) -> List[HarmonyCandidate]:
    """
    Complementary candidates: +180 degrees, then optional split variants.
    """
    target_l = clamp_lightness(base_l, policy)
    target_s = min(policy.complementary_s_cap, base_s)

    candidates = [HarmonyCandidate(
        h=rotate_hue(base_h, 180.0),
        l=target_l,
        s=target_s,
        category=HarmonyType.COMPLEMENTARY,
        description="Complementary contrast",
        generation_rule=f"h_rot:+180°; L→{target_l:.2f}; S≤{policy.complementary_s_cap:.2f}",
    )]

    if policy.split_complementary:
        for degrees in (180.0 - policy.split_degrees, 180.0 + policy.split_degrees):
            candidates.append(HarmonyCandidate(
                h=rotate_hue(base_h, degrees),
                l=target_l,
                s=target_s,
                category=HarmonyType.COMPLEMENTARY,
                description="Split-complementary, softer contrast",
                generation_rule=f"h_rot:+{degrees:.0f}°; L→{target_l:.2f}",
            ))

    return candidates


def generate_analogous_candidates(base_h: float, base_l: float, base_s: float,
                                  policy: BackdropPolicy) -> List[HarmonyCandidate]:
    """
    Analogous candidates: one hue step either side of the base.
    """
    target_l = clamp_lightness(base_l, policy)
    target_s = base_s * policy.analogous_s_factor

    candidates = []
    for degrees in (policy.analogous_degrees, -policy.analogous_degrees):
        candidates.append(HarmonyCandidate(
            h=rotate_hue(base_h, degrees),
            l=target_l,
            s=target_s,
            category=HarmonyType.ANALOGOUS,
            description="Analogous, cohesive look",
            generation_rule=f"h_rot:{degrees:+.0f}°; L→{target_l:.2f}; S×{policy.analogous_s_factor:.2f}",
        ))
    return candidates


def generate_triadic_candidates(base_h: float, base_l: float, base_s: float,
                                policy: BackdropPolicy) -> List[HarmonyCandidate]:
    """
    Triadic candidates at ±120 degrees with a fixed mid-light lightness.
    """
    target_s = min(policy.triadic_s_cap, base_s * policy.triadic_s_factor)

    candidates = []
    for degrees in (120.0, -120.0):
        candidates.append(HarmonyCandidate(
            h=rotate_hue(base_h, degrees),
            l=policy.triadic_l,
            s=target_s,
            category=HarmonyType.TRIADIC,
            description="Triadic, energetic contrast",
            generation_rule=f"h_rot:{degrees:+.0f}°; L→{policy.triadic_l:.2f}",
        ))
    return candidates


def generate_harmony_candidates(base_hex: str,
                                policy: BackdropPolicy = BackdropPolicy()) -> Dict[HarmonyType, List[HarmonyCandidate]]:
    """
    Generate all chromatic harmony candidates for a base color.

    Args:
        base_hex: Base color in format #RRGGBB
        policy: Generation constants

    Returns:
        Dictionary mapping harmony type to its candidates, in generation order

    Raises:
        InvalidColorError: If base_hex is malformed
    """
    base_h, base_l, base_s = hex_to_hls(base_hex)
    if is_degenerate_base(base_s, policy):
        base_s = policy.degenerate_s_floor

    return {
        HarmonyType.COMPLEMENTARY: generate_complementary_candidates(base_h, base_l, base_s, policy),
        HarmonyType.ANALOGOUS: generate_analogous_candidates(base_h, base_l, base_s, policy),
        HarmonyType.TRIADIC: generate_triadic_candidates(base_h, base_l, base_s, policy),
    }

