"""
Color conversion utilities shared by the color analysis services.

Hex strings are normalized to uppercase #RRGGBB. HSL math uses colorsys
(HLS ordering, all components in [0, 1]); perceptual distances use CIE Lab
computed through OpenCV.
"""

import colorsys
import re
from typing import Sequence, Tuple, Union

import cv2
import numpy as np

from huematch.exceptions import InvalidColorError

_HEX_RE = re.compile(r"^#?([0-9A-Fa-f]{6})$")

RGBLike = Union[Sequence[int], np.ndarray]


def normalize_hex(hex_color: str) -> str:
    """
    Validate a hex color and return it as uppercase #RRGGBB.

    Accepts an optional leading '#' and either letter case.

    Raises:
        InvalidColorError: If the value is not a 6-digit hex color
    """
    if not isinstance(hex_color, str):
        raise InvalidColorError(f"Invalid hex color format: {hex_color!r}")
    match = _HEX_RE.match(hex_color.strip())
    if not match:
        raise InvalidColorError(f"Invalid hex color format: {hex_color!r}")
    return f"#{match.group(1).upper()}"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color string to RGB tuple."""
    hex_clean = normalize_hex(hex_color)[1:]
    return tuple(int(hex_clean[i:i+2], 16) for i in (0, 2, 4))


def rgb_to_hex(rgb: RGBLike) -> str:
    """Convert an RGB triple (ints, floats or uint8 array) to #RRGGBB."""
    r, g, b = [int(max(0, min(255, round(float(x))))) for x in rgb]
    return f"#{r:02X}{g:02X}{b:02X}"


def hex_to_hls(hex_color: str) -> Tuple[float, float, float]:
    """
    Convert hex color to HLS color space.

    Args:
        hex_color: Color in format #RRGGBB

    Returns:
        Tuple of (H, L, S) where H in [0,1), L in [0,1], S in [0,1]

    Raises:
        InvalidColorError: If the hex string is malformed
    """
    r, g, b = hex_to_rgb(hex_color)
    return colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)


def hls_to_hex(h: float, l: float, s: float) -> str:
    """
    Convert HLS color to hex format.

    Args:
        h: Hue [0, 1)
        l: Lightness [0, 1]
        s: Saturation [0, 1]

    Returns:
        Hex color string in format #RRGGBB (uppercase)
    """
    r, g, b = colorsys.hls_to_rgb(h % 1.0, max(0.0, min(1.0, l)), max(0.0, min(1.0, s)))
    return rgb_to_hex((r * 255, g * 255, b * 255))


def rgb_array_to_lab(rgb: np.ndarray) -> np.ndarray:
    """
    Convert RGB colors to CIE Lab.

    Args:
        rgb: Array of shape (N, 3) with channel values 0-255

    Returns:
        float32 array (N, 3) with L in [0, 100] and a/b roughly [-128, 127]
    """
    rgb_f = np.asarray(rgb, dtype=np.float32).reshape(-1, 1, 3) / 255.0
    return cv2.cvtColor(rgb_f, cv2.COLOR_RGB2LAB).reshape(-1, 3)


def hex_to_lab(hex_color: str) -> np.ndarray:
    """Convert a hex color to a Lab triple."""
    return rgb_array_to_lab(np.array([hex_to_rgb(hex_color)]))[0]


def delta_e(hex1: str, hex2: str) -> float:
    """CIE76 color difference between two hex colors."""
    return float(np.linalg.norm(hex_to_lab(hex1) - hex_to_lab(hex2)))


def rgb_distance(hex1: str, hex2: str) -> float:
    """Euclidean distance between two hex colors in RGB space."""
    a = np.array(hex_to_rgb(hex1), dtype=np.float32)
    b = np.array(hex_to_rgb(hex2), dtype=np.float32)
    return float(np.linalg.norm(a - b))


def relative_luminance(hex_color: str) -> float:
    """WCAG relative luminance of a color."""
    channels = []
    for value in hex_to_rgb(hex_color):
        c = value / 255.0
        channels.append(c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4)
    r, g, b = channels
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(hex1: str, hex2: str) -> float:
    """WCAG contrast ratio between two colors, in [1, 21]."""
    lum1 = relative_luminance(hex1)
    lum2 = relative_luminance(hex2)
    lighter, darker = max(lum1, lum2), min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)
