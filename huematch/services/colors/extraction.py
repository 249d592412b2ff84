"""
Palette extraction for product photos.

This module implements the clustering half of the color analysis pipeline:
deterministic k-means over sampled RGB pixels, producing swatches with
coverage percentages ordered by dominance.
"""

from typing import List, Optional, Tuple

import numpy as np
from sklearn.cluster import KMeans
from loguru import logger

from huematch.config import config
from huematch.exceptions import EmptyInputError
from huematch.schemas import PaletteSwatch
from huematch.services.observability import performance_monitor
from .sampling import sample_pixels
from .utils import rgb_to_hex


def seed_centroids(pixels: np.ndarray, k: int) -> np.ndarray:
    """
    Pick initial centroids at evenly spaced indices of the pixel sequence.

    A seed whose color was already chosen is replaced by the next distinct
    pixel scanning forward (wrapping around), so images with large uniform
    regions still get one seed per distinct region. Fewer than k seeds are
    returned when the image has fewer than k distinct colors.

    Args:
        pixels: RGB pixels (N, 3)
        k: Requested number of centroids

    Returns:
        float64 array (m, 3) with 1 <= m <= k
    """
    n = len(pixels)
    step = max(1, n // k)
    chosen: List[np.ndarray] = []
    distinct = np.ones(n, dtype=bool)

    for i in range(k):
        start = min(i * step, n - 1)
        hits = np.flatnonzero(np.roll(distinct, -start))
        if hits.size == 0:
            break
        idx = (start + int(hits[0])) % n
        seed = pixels[idx]
        chosen.append(seed)
        # Exclude every pixel sharing this exact color from later seeds
        distinct &= np.any(pixels != seed, axis=1)

    return np.array(chosen, dtype=np.float64)


def run_kmeans(pixels: np.ndarray, centroids: np.ndarray,
               max_iterations: int, convergence_threshold: float) -> Tuple[np.ndarray, np.ndarray, int]:
    """
    Lloyd iterations from fixed seeds.

    scikit-learn's tolerance is a bound on the summed squared centroid
    shift scaled by the mean feature variance, so the threshold is
    converted to that unit: iteration stops once the total shift is within
    convergence_threshold, which also bounds every single centroid.

    Args:
        pixels: RGB pixels (N, 3)
        centroids: Initial centroids (m, 3), distinct
        max_iterations: Iteration cap
        convergence_threshold: Centroid movement that counts as converged

    Returns:
        Tuple of (final centroids (m, 3), labels (N,), iterations run)
    """
    data = pixels.astype(np.float64)
    mean_variance = float(np.mean(np.var(data, axis=0)))
    tol = convergence_threshold ** 2 / mean_variance if mean_variance > 0 else 0.0

    kmeans = KMeans(
        n_clusters=len(centroids),
        init=np.asarray(centroids, dtype=np.float64),
        n_init=1,
        max_iter=max_iterations,
        tol=tol,
        algorithm="lloyd",
    )
    kmeans.fit(data)
    return kmeans.cluster_centers_, kmeans.labels_, int(kmeans.n_iter_)


def build_swatches(centroids: np.ndarray, labels: np.ndarray) -> List[PaletteSwatch]:
    """
    Turn cluster assignments into swatches sorted by dominance.

    Percentages are truncated to one decimal so they never sum above 100.
    Empty clusters are dropped; ties keep seed order.
    """
    total = len(labels)
    counts = np.bincount(labels, minlength=len(centroids))

    order = sorted(range(len(centroids)), key=lambda i: (-counts[i], i))
    swatches = []
    for i in order:
        count = int(counts[i])
        if count == 0:
            continue
        tenths = count * 1000 // total
        swatches.append(PaletteSwatch(
            hex=rgb_to_hex(np.rint(centroids[i])),
            percentage=tenths / 10
        ))
    return swatches


def cluster_palette(pixels_rgb_u8: np.ndarray,
                    k: Optional[int] = None,
                    max_iterations: Optional[int] = None,
                    convergence_threshold: Optional[float] = None) -> List[PaletteSwatch]:
    """
    Cluster sampled pixels into a dominance-ordered palette.

    Args:
        pixels_rgb_u8: RGB pixels (N, 3) uint8
        k: Number of clusters (defaults to config.DEFAULT_K)
        max_iterations: Iteration cap (defaults to config.MAX_ITERATIONS)
        convergence_threshold: Centroid movement that counts as converged

    Returns:
        List of unnamed PaletteSwatch, length <= k, most dominant first

    Raises:
        EmptyInputError: If no pixels are provided
        ValueError: If k < 1
    """
    k = config.DEFAULT_K if k is None else k
    max_iterations = config.MAX_ITERATIONS if max_iterations is None else max_iterations
    if convergence_threshold is None:
        convergence_threshold = config.CONVERGENCE_THRESHOLD

    if not config.validate_k(k):
        raise ValueError(f"k must be a positive integer, got {k!r}")
    k = int(k)

    pixels = np.asarray(pixels_rgb_u8).reshape(-1, 3)
    if pixels.size == 0:
        logger.error("cluster_palette called with no pixels")
        raise EmptyInputError("Cannot extract a palette from zero pixels")

    # Effectively one color: skip clustering entirely
    if float(pixels.std(axis=0).max()) < config.LOW_VARIANCE_STD:
        mean_color = pixels.astype(np.float64).mean(axis=0)
        logger.info(f"Near-uniform image, single swatch {rgb_to_hex(mean_color)}")
        return [PaletteSwatch(hex=rgb_to_hex(mean_color), percentage=100.0)]

    logger.info(f"Starting clustering with k={k}, {len(pixels)} pixels")

    seeds = seed_centroids(pixels, k)
    centroids, labels, iterations = run_kmeans(pixels, seeds, max_iterations, convergence_threshold)
    swatches = build_swatches(centroids, labels)

    logger.info(
        f"Clustering finished after {iterations} iterations: "
        f"{[(s.hex, s.percentage) for s in swatches]}"
    )
    return swatches


def extract_palette(image_bytes: bytes,
                    k: Optional[int] = None,
                    max_samples: Optional[int] = None) -> List[PaletteSwatch]:
    """
    Extract the dominant color palette of an encoded image.

    Args:
        image_bytes: Encoded image bytes
        k: Number of clusters (defaults to config.DEFAULT_K)
        max_samples: Pixel sample budget (defaults to config.MAX_SAMPLES)

    Returns:
        List of unnamed PaletteSwatch, most dominant first

    Raises:
        DecodeError: If the image cannot be decoded
    """
    with performance_monitor("pixel_sampling", byte_count=len(image_bytes or b"")):
        pixels = sample_pixels(image_bytes, max_samples)

    with performance_monitor("color_clustering", pixel_count=len(pixels), k=k):
        return cluster_palette(pixels, k)
