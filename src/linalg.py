import numpy as np
from dataclasses import dataclass

from errors import DegenerateMatrixError, InvalidArgument

# below this |det|, or with a non-finite det, a matrix is treated as singular
EPSILON = 1e-12


@dataclass
class Vector2:
    x: float
    y: float

    def to_array(self):
        return np.array([self.x, self.y], dtype=np.float64)

    @classmethod
    def from_array(cls, array):
        array = np.asarray(array, dtype=np.float64).reshape(2)
        return cls(float(array[0]), float(array[1]))


@dataclass
class Matrix2x2:
    """2x2 matrix stored row-major as [a b; c d]"""

    a: float
    b: float
    c: float
    d: float

    def to_array(self):
        return np.array([[self.a, self.b], [self.c, self.d]], dtype=np.float64)

    @classmethod
    def from_array(cls, array):
        array = np.asarray(array, dtype=np.float64).reshape(2, 2)
        return cls(
            float(array[0, 0]), float(array[0, 1]),
            float(array[1, 0]), float(array[1, 1]),
        )


def zero_vector():
    return Vector2(0.0, 0.0)


def zero_matrix():
    return Matrix2x2(0.0, 0.0, 0.0, 0.0)


def identity():
    return Matrix2x2(1.0, 0.0, 0.0, 1.0)


def add(v1, v2):
    return Vector2(v1.x + v2.x, v1.y + v2.y)


def subtract(v1, v2):
    return Vector2(v1.x - v2.x, v1.y - v2.y)


def scale(v, k):
    return Vector2(v.x * k, v.y * k)


def dot(v1, v2):
    return v1.x * v2.x + v1.y * v2.y


def outer_product(v1, v2):
    return Matrix2x2(v1.x * v2.x, v1.x * v2.y, v1.y * v2.x, v1.y * v2.y)


def apply_matrix(v, m):
    """Multiply the row vector v by m (v^T M)"""
    return Vector2(v.x * m.a + v.y * m.c, v.x * m.b + v.y * m.d)


def add_assign(total, value):
    """Accumulate value into total in place, for vectors or matrices"""
    if isinstance(total, Vector2):
        total.x += value.x
        total.y += value.y
    elif isinstance(total, Matrix2x2):
        total.a += value.a
        total.b += value.b
        total.c += value.c
        total.d += value.d
    else:
        raise TypeError(f"Cannot accumulate into {type(total).__name__}")
    return total


def scalar_divide(m, k):
    if k == 0:
        raise InvalidArgument("Cannot divide a matrix by zero")
    return Matrix2x2(m.a / k, m.b / k, m.c / k, m.d / k)


def scalar_divide_vector(v, k):
    if k == 0:
        raise InvalidArgument("Cannot divide a vector by zero")
    return Vector2(v.x / k, v.y / k)


def determinant(m):
    return m.a * m.d - m.b * m.c


def inverse(m):
    det = determinant(m)
    if not np.isfinite(det) or abs(det) < EPSILON:
        raise DegenerateMatrixError(det)
    return Matrix2x2(m.d / det, -m.b / det, -m.c / det, m.a / det)


def matmul(m1, m2):
    return Matrix2x2(
        m1.a * m2.a + m1.b * m2.c,
        m1.a * m2.b + m1.b * m2.d,
        m1.c * m2.a + m1.d * m2.c,
        m1.c * m2.b + m1.d * m2.d,
    )
