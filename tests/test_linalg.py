import numpy as np
import pytest

from errors import DegenerateMatrixError, InvalidArgument
from linalg import (
    Matrix2x2,
    Vector2,
    add,
    add_assign,
    apply_matrix,
    determinant,
    dot,
    identity,
    inverse,
    matmul,
    outer_product,
    scalar_divide,
    scalar_divide_vector,
    scale,
    subtract,
    zero_matrix,
    zero_vector,
)


def test_vector_operations():
    v1 = Vector2(3.0, -1.0)
    v2 = Vector2(1.0, 2.0)

    assert subtract(v1, v2) == Vector2(2.0, -3.0)
    assert add(v1, v2) == Vector2(4.0, 1.0)
    assert scale(v1, -0.5) == Vector2(-1.5, 0.5)
    assert dot(v1, v2) == 1.0


def test_outer_product_layout():
    m = outer_product(Vector2(1.0, 2.0), Vector2(3.0, 4.0))
    assert m == Matrix2x2(3.0, 4.0, 6.0, 8.0)


def test_apply_matrix_treats_vector_as_row():
    m = Matrix2x2(1.0, 2.0, 3.0, 4.0)
    result = apply_matrix(Vector2(1.0, 1.0), m)
    assert result == Vector2(4.0, 6.0)
    np.testing.assert_allclose(result.to_array(), np.array([1.0, 1.0]) @ m.to_array())


def test_add_assign_accumulates_in_place():
    total = zero_vector()
    for v in [Vector2(1.0, 2.0), Vector2(3.0, 4.0)]:
        add_assign(total, v)
    assert total == Vector2(4.0, 6.0)

    scatter = zero_matrix()
    add_assign(scatter, Matrix2x2(1.0, 2.0, 3.0, 4.0))
    add_assign(scatter, identity())
    assert scatter == Matrix2x2(2.0, 2.0, 3.0, 5.0)


def test_add_assign_rejects_unknown_type():
    with pytest.raises(TypeError):
        add_assign([0.0, 0.0], Vector2(1.0, 1.0))


def test_scalar_divide():
    assert scalar_divide(Matrix2x2(2.0, 4.0, 6.0, 8.0), 2) == Matrix2x2(1.0, 2.0, 3.0, 4.0)
    assert scalar_divide_vector(Vector2(3.0, 6.0), 3) == Vector2(1.0, 2.0)


def test_scalar_divide_by_zero():
    with pytest.raises(InvalidArgument):
        scalar_divide(identity(), 0)
    with pytest.raises(InvalidArgument):
        scalar_divide_vector(Vector2(1.0, 1.0), 0)


def test_determinant():
    assert determinant(Matrix2x2(1.0, 2.0, 3.0, 4.0)) == -2.0


@pytest.mark.parametrize(
    "m",
    [
        Matrix2x2(2.0, 0.3, 0.3, 1.0),
        Matrix2x2(0.25, -0.1, -0.1, 4.0),
        Matrix2x2(1.0, 2.0, 3.0, 4.0),
    ],
)
def test_inverse_gives_identity(m):
    product = matmul(m, inverse(m))
    np.testing.assert_allclose(product.to_array(), identity().to_array(), atol=1e-9)


def test_inverse_of_singular_matrix():
    with pytest.raises(DegenerateMatrixError) as e:
        inverse(Matrix2x2(1.0, 2.0, 2.0, 4.0))
    assert e.value.determinant == 0.0


def test_inverse_of_near_singular_matrix():
    with pytest.raises(DegenerateMatrixError):
        inverse(Matrix2x2(1e-7, 0.0, 0.0, 1e-7))


def test_array_conversion():
    m = Matrix2x2(1.0, 2.0, 3.0, 4.0)
    assert Matrix2x2.from_array(m.to_array()) == m
    assert Vector2.from_array(np.array([5.0, 6.0])) == Vector2(5.0, 6.0)


@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_inverse_of_non_finite_matrix(value):
    with pytest.raises(DegenerateMatrixError):
        inverse(Matrix2x2(value, 0.0, 0.0, 1.0))
