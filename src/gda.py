import os
import numpy as np
from dataclasses import dataclass

from errors import (
    EmptyClassError,
    EmptyDatasetError,
    InvalidArgument,
    InvalidClassLabelError,
    NotFittedError,
)
from linalg import (
    Matrix2x2,
    Vector2,
    add_assign,
    apply_matrix,
    dot,
    inverse,
    outer_product,
    scalar_divide,
    scalar_divide_vector,
    subtract,
    zero_matrix,
    zero_vector,
)

CLASSES = (0, 1)


@dataclass(frozen=True)
class Observation:
    x: float
    y: float
    label: int

    @property
    def features(self):
        return Vector2(self.x, self.y)


@dataclass(frozen=True)
class GDAParameters:
    phi: float
    mu0: Vector2
    mu1: Vector2
    sigma: Matrix2x2

    def mean(self, label):
        return self.mu1 if label == 1 else self.mu0

    def prior(self, label):
        return self.phi if label == 1 else 1.0 - self.phi


def _validate_labels(observations):
    for i, observation in enumerate(observations):
        if observation.label not in CLASSES:
            raise InvalidClassLabelError(i, observation.label)


def estimate_parameters(observations):
    """
    Maximum likelihood estimate of the GDA parameters

    phi is the fraction of class 1, mu_k the mean of class k and sigma
    the covariance of every point around its own class mean, pooled over
    all m points. Sums are accumulated first and divided once.

    Parameters:
    observations: a non-empty sequence of Observation with labels in {0, 1}
    """
    observations = list(observations)
    m = len(observations)
    if m == 0:
        raise EmptyDatasetError()
    _validate_labels(observations)

    # class sums and counts
    sums = {k: zero_vector() for k in CLASSES}
    counts = {k: 0 for k in CLASSES}
    for observation in observations:
        add_assign(sums[observation.label], observation.features)
        counts[observation.label] += 1

    for k in CLASSES:
        if counts[k] == 0:
            raise EmptyClassError(k)

    phi = counts[1] / m
    means = {k: scalar_divide_vector(sums[k], counts[k]) for k in CLASSES}

    # pooled covariance, needs the class means
    scatter = zero_matrix()
    for observation in observations:
        diff = subtract(observation.features, means[observation.label])
        add_assign(scatter, outer_product(diff, diff))
    sigma = scalar_divide(scatter, m)

    return GDAParameters(phi=phi, mu0=means[0], mu1=means[1], sigma=sigma)


def _validate_parameters(params, source):
    if not 0.0 <= params.phi <= 1.0:
        raise InvalidArgument(f"{source}: phi must be in [0, 1], got {params.phi}")
    values = np.concatenate(
        [params.mu0.to_array(), params.mu1.to_array(), params.sigma.to_array().ravel()]
    )
    if not np.all(np.isfinite(values)):
        raise InvalidArgument(f"{source}: parameters must be finite")
    if not np.isclose(params.sigma.b, params.sigma.c):
        raise InvalidArgument(
            f"{source}: sigma must be symmetric, got b={params.sigma.b} c={params.sigma.c}"
        )


class GaussianDiscriminantAnalysis():
    """
    Two-class Gaussian Discriminant Analysis on 2D features

    Each class is modelled as a bivariate normal with its own mean and a
    covariance shared by both classes, plus a Bernoulli prior on the class.
    """

    def __init__(self) -> None:
        self.params_ = None

    @property
    def params(self):
        if self.params_ is None:
            raise NotFittedError("The model has not been fitted or loaded")
        return self.params_

    def fit(self, observations):
        self.params_ = estimate_parameters(observations)
        return self

    def save_model(self, dir):
        params = self.params
        os.makedirs(dir, exist_ok=True)
        np.save(os.path.join(dir, "phi.npy"), np.array(params.phi))
        np.save(os.path.join(dir, "mu0.npy"), params.mu0.to_array())
        np.save(os.path.join(dir, "mu1.npy"), params.mu1.to_array())
        np.save(os.path.join(dir, "sigma.npy"), params.sigma.to_array())

    def load_model(self, dir):
        params = GDAParameters(
            phi=float(np.load(os.path.join(dir, "phi.npy"))),
            mu0=Vector2.from_array(np.load(os.path.join(dir, "mu0.npy"))),
            mu1=Vector2.from_array(np.load(os.path.join(dir, "mu1.npy"))),
            sigma=Matrix2x2.from_array(np.load(os.path.join(dir, "sigma.npy"))),
        )
        _validate_parameters(params, dir)
        self.params_ = params
        return self

    def decision_boundary(self, xs):
        """y values of the line where both classes are equally likely"""
        params = self.params
        if params.phi <= 0.0 or params.phi >= 1.0:
            raise InvalidArgument("No decision boundary when one prior is zero")

        sigma_inv = inverse(params.sigma)
        w = apply_matrix(subtract(params.mu1, params.mu0), sigma_inv)
        if w.y == 0:
            raise InvalidArgument("Decision boundary is vertical")

        const = 0.5 * (
            dot(apply_matrix(params.mu1, sigma_inv), params.mu1)
            - dot(apply_matrix(params.mu0, sigma_inv), params.mu0)
        ) - np.log(params.phi / (1 - params.phi))

        xs = np.asarray(xs, dtype=np.float64)
        return (const - w.x * xs) / w.y
