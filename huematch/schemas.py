"""
huematch Schemas
Pydantic models for palette, confidence and backdrop suggestion results.

All models are frozen: an analysis produces new values and never mutates
earlier ones.
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

HEX_PATTERN = r"^#[0-9A-F]{6}$"


class ConfidenceTier(str, Enum):
    """Coarse quality signal for an extracted palette."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class HarmonyType(str, Enum):
    """Color-theory relationship used to derive a backdrop color."""
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    NEUTRAL = "neutral"


class MatchLevel(str, Enum):
    """Perceptual difference bands for Delta E comparisons."""
    PERFECT = "perfect"
    ACCEPTABLE = "acceptable"
    NOTICEABLE = "noticeable"
    WARNING = "warning"
    FAILURE = "failure"


class PaletteSwatch(BaseModel):
    """Single extracted color with its coverage share."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    hex: str = Field(
        ...,
        pattern=HEX_PATTERN,
        description="Uppercase hex color code in format #RRGGBB"
    )
    percentage: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Share of sampled pixels in this cluster (0-100, one decimal)"
    )
    name: Optional[str] = Field(
        None,
        description="Nearest reference color name"
    )
    simple_name: Optional[str] = Field(
        None,
        alias="simpleName",
        description="Common-language color bucket"
    )


class ConfidenceAssessment(BaseModel):
    """How trustworthy an extracted palette is, with a user-facing message."""
    model_config = ConfigDict(frozen=True)

    tier: ConfidenceTier = Field(..., description="high, medium or low")
    message: str = Field(..., description="Localized explanation of the tier")


class HarmonySuggestion(BaseModel):
    """A backdrop color derived from the dominant product color."""
    model_config = ConfigDict(frozen=True)

    hex: str = Field(..., pattern=HEX_PATTERN, description="Backdrop color #RRGGBB")
    name: str = Field(..., description="Nearest reference color name")
    type: HarmonyType = Field(..., description="Harmony relationship to the base")
    description: str = Field(..., description="Short explanation of the pairing")
    contrast_ratio: float = Field(
        ...,
        ge=1.0,
        le=21.0,
        description="WCAG contrast ratio between this backdrop and the base color"
    )


class ColorMatch(BaseModel):
    """Perceptual comparison of an expected and an observed color."""
    model_config = ConfigDict(frozen=True)

    expected_hex: str = Field(..., pattern=HEX_PATTERN)
    actual_hex: str = Field(..., pattern=HEX_PATTERN)
    delta_e: float = Field(..., ge=0.0, description="CIE76 Delta E, two decimals")
    level: MatchLevel
    should_warn: bool


class ColorAnalysis(BaseModel):
    """Complete result of analyzing one product image."""
    model_config = ConfigDict(frozen=True)

    analysis_id: str
    palette: List[PaletteSwatch]
    confidence: ConfidenceAssessment
    suggestions: List[HarmonySuggestion]
    auto_backdrop: Optional[HarmonySuggestion] = None
