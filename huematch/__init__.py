"""
huematch

Product photo color analysis: dominant palette extraction, color naming,
palette confidence and harmonious backdrop suggestions.
"""

from huematch.exceptions import (
    ColorAnalysisError,
    DecodeError,
    EmptyInputError,
    InvalidColorError,
    InvalidPaletteError,
)
from huematch.schemas import (
    ColorAnalysis,
    ColorMatch,
    ConfidenceAssessment,
    ConfidenceTier,
    HarmonySuggestion,
    HarmonyType,
    MatchLevel,
    PaletteSwatch,
)
from huematch.services.colors import __version__
from huematch.services.colors.comparison import compare_colors
from huematch.services.colors.confidence import assess_confidence
from huematch.services.colors.emoji import color_description, emoji_for, palette_message
from huematch.services.colors.extraction import extract_palette
from huematch.services.colors.harmony.orchestrator import pick_auto_backdrop, suggest_backdrops
from huematch.services.colors.naming import name_colors
from huematch.services.pipeline import analyze_image
from huematch.utils.logging import configure_logging

__all__ = [
    "__version__",
    "analyze_image",
    "extract_palette",
    "name_colors",
    "assess_confidence",
    "suggest_backdrops",
    "pick_auto_backdrop",
    "emoji_for",
    "palette_message",
    "color_description",
    "compare_colors",
    "configure_logging",
    "ColorAnalysis",
    "ColorMatch",
    "ConfidenceAssessment",
    "ConfidenceTier",
    "HarmonySuggestion",
    "HarmonyType",
    "MatchLevel",
    "PaletteSwatch",
    "ColorAnalysisError",
    "DecodeError",
    "EmptyInputError",
    "InvalidColorError",
    "InvalidPaletteError",
]
