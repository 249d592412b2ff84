"""
huematch Configuration
Manages environment variables and defaults for the color analysis services.
"""
import os
from numbers import Integral


class Config:
    """Configuration class for huematch services."""

    # Input limits
    MAX_FILE_MB: int = int(os.environ.get("HUEMATCH_MAX_FILE_MB", "10"))
    MAX_SAMPLES: int = int(os.environ.get("HUEMATCH_MAX_SAMPLES", "4000"))

    # Clustering defaults
    DEFAULT_K: int = int(os.environ.get("HUEMATCH_DEFAULT_K", "5"))
    MAX_ITERATIONS: int = int(os.environ.get("HUEMATCH_MAX_ITERATIONS", "20"))
    CONVERGENCE_THRESHOLD: float = float(os.environ.get("HUEMATCH_CONVERGENCE_THRESHOLD", "1.0"))
    LOW_VARIANCE_STD: float = float(os.environ.get("HUEMATCH_LOW_VARIANCE_STD", "1.0"))

    # Pixels at or below this alpha are treated as background
    ALPHA_CUTOFF: int = int(os.environ.get("HUEMATCH_ALPHA_CUTOFF", "120"))

    # Gray-reference white balance on sampled pixels
    ENABLE_WB: bool = bool(int(os.environ.get("HUEMATCH_ENABLE_WB", "0")))

    # Messaging and logging
    DEFAULT_LOCALE: str = os.environ.get("HUEMATCH_DEFAULT_LOCALE", "en")
    LOG_LEVEL: str = os.environ.get("HUEMATCH_LOG_LEVEL", "INFO")

    @classmethod
    def validate_k(cls, k: int) -> bool:
        """Validate requested cluster count."""
        return isinstance(k, Integral) and not isinstance(k, bool) and k >= 1

    @classmethod
    def validate_max_samples(cls, max_samples: int) -> bool:
        """Validate pixel sample budget."""
        return (isinstance(max_samples, Integral) and not isinstance(max_samples, bool)
                and max_samples >= 1)


# Global config instance
config = Config()
