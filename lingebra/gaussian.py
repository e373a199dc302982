"""
Gaussian (normal) probability density.

    f(x) = 1 / (sigma * sqrt(2 pi)) * exp(-0.5 * ((x - mu) / sigma)^2)

sigma is the standard deviation and mu the mean. sigma is not validated:
zero or negative values produce whatever IEEE-754 arithmetic gives
(inf, nan, or a negative value), with a RuntimeWarning.
"""

from __future__ import annotations

import warnings

import numpy as np


def gaussian_function(x: float, sigma: float, mu: float) -> float:
    """
    Density of N(mu, sigma^2) evaluated at x.

    Parameters
    ----------
    x : float
        Point of evaluation.
    sigma : float
        Standard deviation.
    mu : float
        Mean.

    Returns
    -------
    float

    Examples
    --------
    >>> gaussian_function(1.0, 1.0, 1.0)
    0.3989422804014327
    """
    x = np.float64(x)
    sigma = np.float64(sigma)
    mu = np.float64(mu)

    if not sigma > 0:
        warnings.warn(
            f"gaussian_function: sigma should be positive, got {float(sigma)}; "
            f"the result is not a probability density",
            RuntimeWarning,
            stacklevel=2,
        )

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        z = (x - mu) / sigma
        return float((1.0 / (sigma * np.sqrt(2.0 * np.pi))) * np.exp(-0.5 * z ** 2))
