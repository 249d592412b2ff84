"""
Pixel sampling for product photos.

Decodes uploaded image bytes with Pillow and strides over the raster so the
number of sampled pixels stays within a budget, bounding clustering cost.
"""

import math
from io import BytesIO
from typing import Optional, Tuple

import cv2
import numpy as np
from PIL import Image, UnidentifiedImageError
from loguru import logger

from huematch.config import config
from huematch.exceptions import DecodeError


# Single-channel modes wider than 8 bits; Pillow's RGBA convert clips these
HIGH_BIT_DEPTH_MODES = ("I;16", "I;16L", "I;16B", "I;16N", "I", "F")


def _high_bit_depth_to_rgba(image: Image.Image) -> np.ndarray:
    """Scale a 16-bit style grayscale image down to 8-bit opaque RGBA."""
    levels = np.clip(np.asarray(image, dtype=np.float64), 0, 65535).astype(np.uint32)
    gray = (levels >> 8).astype(np.uint8)
    alpha = np.full_like(gray, 255)
    return np.dstack([gray, gray, gray, alpha])


def decode_image_bytes(image_bytes: bytes) -> np.ndarray:
    """
    Decode raw image bytes into an RGBA array.

    Args:
        image_bytes: Encoded image (PNG, JPEG, WebP, ...)

    Returns:
        uint8 array of shape (H, W, 4)

    Raises:
        DecodeError: If the bytes are empty, too large or not an image
    """
    if not image_bytes:
        raise DecodeError("Empty image data")

    max_bytes = config.MAX_FILE_MB * 1024 * 1024
    if len(image_bytes) > max_bytes:
        raise DecodeError(f"Image too large: {len(image_bytes)} bytes > {config.MAX_FILE_MB}MB")

    try:
        with Image.open(BytesIO(image_bytes)) as image:
            image.load()
            if image.mode in HIGH_BIT_DEPTH_MODES:
                logger.debug(f"Scaling {image.mode} image to 8 bits")
                return _high_bit_depth_to_rgba(image)
            rgba = image.convert("RGBA")
    except (UnidentifiedImageError, OSError, ValueError, SyntaxError, EOFError,
            Image.DecompressionBombError) as e:
        logger.warning(f"Failed to decode image ({len(image_bytes)} bytes): {e}")
        raise DecodeError(f"Failed to decode image data: {e}") from e

    return np.asarray(rgba, dtype=np.uint8)


def choose_stride(width: int, height: int, max_samples: int) -> int:
    """
    Smallest stride s such that ceil(w/s) * ceil(h/s) <= max_samples.
    """
    stride = max(1, int(math.ceil(math.sqrt((width * height) / max_samples))))
    while math.ceil(width / stride) * math.ceil(height / stride) > max_samples:
        stride += 1
    return stride


def sample_pixels(image_bytes: bytes, max_samples: Optional[int] = None) -> np.ndarray:
    """
    Decode an image and return a strided, row-major sample of its pixels.

    Args:
        image_bytes: Encoded image bytes
        max_samples: Upper bound on the number of sampled pixels

    Returns:
        RGB pixels array (N, 3) uint8 with 1 <= N <= max_samples

    Raises:
        DecodeError: If the image cannot be decoded
        ValueError: If max_samples is not a positive integer
    """
    max_samples = config.MAX_SAMPLES if max_samples is None else max_samples
    if not config.validate_max_samples(max_samples):
        raise ValueError(f"max_samples must be a positive integer, got {max_samples!r}")

    rgba = decode_image_bytes(image_bytes)
    height, width = rgba.shape[:2]
    if height == 0 or width == 0:
        raise DecodeError("Image has no pixels")

    stride = choose_stride(width, height, max_samples)
    sampled = rgba[::stride, ::stride].reshape(-1, 4)
    logger.debug(f"Sampled {len(sampled)} of {width * height} pixels with stride {stride}")

    pixels, dropped = drop_transparent(sampled)
    if dropped:
        logger.debug(f"Dropped {dropped} transparent pixels")

    if config.ENABLE_WB:
        pixels, _ = correct_color_cast(pixels)

    return pixels


def drop_transparent(rgba_pixels: np.ndarray) -> Tuple[np.ndarray, int]:
    """
    Remove pixels at or below the alpha cutoff.

    Falls back to every pixel when nothing opaque remains, so a fully
    transparent image still yields a palette.

    Returns:
        Tuple of (RGB pixels (N, 3) uint8, number of pixels dropped)
    """
    opaque = rgba_pixels[:, 3] > config.ALPHA_CUTOFF
    if not opaque.any():
        return np.ascontiguousarray(rgba_pixels[:, :3]), 0
    kept = rgba_pixels[opaque, :3]
    return np.ascontiguousarray(kept), int(len(rgba_pixels) - len(kept))


def correct_color_cast(pixels: np.ndarray,
                       min_pixels: int = 100,
                       min_neutral: int = 20,
                       max_deviation: float = 30.0) -> Tuple[np.ndarray, bool]:
    """
    Neutralize a white balance cast using pixels that should be gray.

    Pixels with HLS saturation below 0.15 and lightness between 0.20 and
    0.80 are taken as neutral references. When their mean drifts from gray
    by more than max_deviation (sum of absolute channel offsets), every
    pixel is scaled by per-channel gains that pull that mean back to gray.

    Args:
        pixels: RGB pixels (N, 3) uint8
        min_pixels: Samples needed before a cast is estimated
        min_neutral: Neutral references needed before a cast is estimated
        max_deviation: Offset of the neutral mean tolerated as gray

    Returns:
        Tuple of (RGB pixels (N, 3) uint8, whether a correction was applied)
    """
    if len(pixels) < min_pixels:
        return pixels, False

    rgb = pixels.astype(np.float32)
    hls = cv2.cvtColor((rgb / 255.0).reshape(-1, 1, 3), cv2.COLOR_RGB2HLS).reshape(-1, 3)
    neutral = (hls[:, 2] < 0.15) & (hls[:, 1] > 0.20) & (hls[:, 1] < 0.80)
    if int(neutral.sum()) < min_neutral:
        return pixels, False

    means = rgb[neutral].astype(np.float64).mean(axis=0)
    gray = float(means.mean())
    deviation = float(np.abs(means - gray).sum())
    if deviation <= max_deviation:
        return pixels, False

    gains = gray / np.maximum(means, 1.0)
    logger.info(f"Color cast detected (deviation {deviation:.1f}), gains {np.round(gains, 3).tolist()}")
    corrected = np.clip(np.rint(pixels.astype(np.float64) * gains), 0, 255).astype(np.uint8)
    return corrected, True
