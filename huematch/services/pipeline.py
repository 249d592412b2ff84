"""
huematch Analysis Pipeline

Runs the full color analysis for one product image: palette extraction,
naming, confidence assessment and backdrop suggestions from the dominant
swatch.
"""

from typing import Optional

from loguru import logger

from huematch.schemas import ColorAnalysis
from huematch.utils.ids import generate_analysis_id
from .colors.confidence import assess_confidence
from .colors.extraction import extract_palette
from .colors.harmony.orchestrator import pick_auto_backdrop, suggest_backdrops
from .colors.naming import name_colors
from .observability import performance_monitor


def analyze_image(image_bytes: bytes,
                  k: Optional[int] = None,
                  locale: Optional[str] = None,
                  max_samples: Optional[int] = None) -> ColorAnalysis:
    """
    Analyze a product image end to end.

    Args:
        image_bytes: Encoded image bytes
        k: Number of palette colors (defaults to config.DEFAULT_K)
        locale: Confidence message language
        max_samples: Pixel sample budget

    Returns:
        ColorAnalysis with palette, confidence, suggestions and auto pick

    Raises:
        DecodeError: If the image cannot be decoded; nothing else runs
    """
    analysis_id = generate_analysis_id()

    with logger.contextualize(analysis_id=analysis_id):
        logger.info("Starting color analysis")

        with performance_monitor("color_analysis"):
            palette = extract_palette(image_bytes, k, max_samples)

            with performance_monitor("color_naming", palette_size=len(palette)):
                palette = name_colors(palette)

            with performance_monitor("confidence_assessment"):
                confidence = assess_confidence(palette, locale)

            with performance_monitor("backdrop_suggestions"):
                suggestions = suggest_backdrops(palette[0].hex)

        auto_backdrop = pick_auto_backdrop(suggestions)
        logger.info(
            f"Color analysis complete: dominant={palette[0].hex} "
            f"confidence={confidence.tier.value} auto={auto_backdrop.hex if auto_backdrop else None}"
        )

    return ColorAnalysis(
        analysis_id=analysis_id,
        palette=palette,
        confidence=confidence,
        suggestions=suggestions,
        auto_backdrop=auto_backdrop,
    )
