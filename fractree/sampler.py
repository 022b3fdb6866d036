"""
Random sampling for branch jitter and flower placement.

The Gaussian sampler uses a Box-Muller transform rescaled to mean 0.5 and
standard deviation 0.1, rejecting draws outside the open interval (0, 1):

    z = sqrt(-2 ln u) * cos(2 pi v)
    x = z / 10 + 0.5

All functions take a numpy Generator as their entropy source so that a
seeded run reproduces the same tree.
"""

import logging
import math

import numpy as np

_LOGGER = logging.getLogger(__name__)

# Upper bound on rejection rounds; the mass outside 5 sigma is ~6e-7 so this
# is never reached in practice.
MAX_SAMPLE_ATTEMPTS = 1000


def make_rng(seed: int | np.random.Generator | None = None) -> np.random.Generator:
    """Build a Generator from a seed, or pass an existing one through."""
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def open_uniform(rng: np.random.Generator) -> float:
    """Uniform draw in (0, 1); `Generator.random` can return exactly 0."""
    u = 0.0
    while u == 0.0:
        u = float(rng.random())
    return u


def gaussian_sample(rng: np.random.Generator) -> float:
    """
    Sample from N(0.5, 0.1) restricted to (0, 1).

    Out-of-range draws are discarded and redrawn. After
    MAX_SAMPLE_ATTEMPTS rejections the mean is returned so the call
    always terminates.

    Args:
        rng: Entropy source

    Returns:
        A value strictly between 0 and 1
    """
    for _ in range(MAX_SAMPLE_ATTEMPTS):
        u = open_uniform(rng)
        v = open_uniform(rng)
        z = math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)
        x = z / 10.0 + 0.5
        if 0.0 < x < 1.0:
            return x

    _LOGGER.warning(
        "gaussian_sample: no draw in (0, 1) after %d attempts, using mean",
        MAX_SAMPLE_ATTEMPTS,
    )
    return 0.5


def coin_flip(rng: np.random.Generator) -> bool:
    """Fair coin: a uniform draw rounded half-up to {0, 1}."""
    return float(rng.random()) >= 0.5
