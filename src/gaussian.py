import numpy as np

from errors import DegenerateMatrixError, InvalidArgument
from linalg import EPSILON, apply_matrix, determinant, dot, inverse, scale, subtract


def _checked_determinant(sigma):
    det = determinant(sigma)
    if not np.isfinite(det) or abs(det) < EPSILON:
        raise DegenerateMatrixError(det)
    if det <= 0:
        raise InvalidArgument(
            f"Covariance determinant must be positive, got {det}"
        )
    return det


def _quadratic_term(x, mu, sigma):
    """-0.5 * (x - mu)^T sigma^-1 (x - mu)"""
    diff = subtract(x, mu)
    return dot(apply_matrix(scale(diff, -0.5), inverse(sigma)), diff)


def density(x, mu, sigma):
    """
    Bivariate normal density of x under N(mu, sigma)

    Parameters:
    x: query point (Vector2)
    mu: mean (Vector2)
    sigma: covariance (Matrix2x2), must be positive-definite
    """
    det = _checked_determinant(sigma)
    norm_const = 1.0 / (2 * np.pi * np.sqrt(det))
    return float(norm_const * np.exp(_quadratic_term(x, mu, sigma)))


def log_density(x, mu, sigma):
    det = _checked_determinant(sigma)
    return float(
        _quadratic_term(x, mu, sigma) - np.log(2 * np.pi) - 0.5 * np.log(det)
    )
