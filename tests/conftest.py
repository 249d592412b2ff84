"""
Test configuration and fixtures for huematch color analysis tests.
"""
from io import BytesIO

import numpy as np
import pytest
from PIL import Image
from loguru import logger

from huematch.schemas import PaletteSwatch


def encode_png(array: np.ndarray) -> bytes:
    """Encode an (H, W, 3) or (H, W, 4) uint8 array as PNG bytes."""
    buffer = BytesIO()
    Image.fromarray(array.astype(np.uint8)).save(buffer, format="PNG")
    return buffer.getvalue()


def solid_image(color, size=(64, 64)) -> np.ndarray:
    """Create a solid RGB image array."""
    img = np.zeros((size[0], size[1], 3), dtype=np.uint8)
    img[:, :] = color
    return img


def make_palette(entries):
    """Build a palette from (hex, percentage) pairs."""
    return [PaletteSwatch(hex=hex_color, percentage=pct) for hex_color, pct in entries]


@pytest.fixture
def solid_red_png() -> bytes:
    """64x64 solid red PNG."""
    return encode_png(solid_image((255, 0, 0)))


@pytest.fixture
def red_blue_halves_png() -> bytes:
    """100x100 PNG, left half red, right half blue."""
    img = np.zeros((100, 100, 3), dtype=np.uint8)
    img[:, :50] = (255, 0, 0)
    img[:, 50:] = (0, 0, 255)
    return encode_png(img)


@pytest.fixture
def noisy_pixels() -> np.ndarray:
    """Deterministic random pixels for property checks."""
    rng = np.random.default_rng(42)
    return rng.integers(0, 256, size=(3000, 3), dtype=np.uint8)


@pytest.fixture
def captured_logs():
    """Collect loguru records for the duration of a test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
