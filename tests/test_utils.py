import numpy as np
import pytest

from utils import (
    accuracy,
    confusion_matrix,
    f1_score,
    false_positive_rate,
    precision,
    recall,
)


def test_confusion_matrix_layout():
    c_matrix = confusion_matrix(predicted=[0, 1, 1, 0, 1], true=[0, 1, 0, 1, 1])
    np.testing.assert_array_equal(c_matrix, np.array([[1, 1], [1, 2]]))


def test_confusion_matrix_keeps_both_classes():
    assert confusion_matrix([0, 0], [0, 0]).shape == (2, 2)


def test_scores():
    c_matrix = np.array([[5, 1], [2, 4]])

    assert accuracy(c_matrix) == pytest.approx(9 / 12)
    assert precision(c_matrix) == pytest.approx(4 / 5)
    assert recall(c_matrix) == pytest.approx(4 / 6)
    assert false_positive_rate(c_matrix) == pytest.approx(1 / 6)
    assert f1_score(c_matrix) == pytest.approx(2 * (4 / 5) * (4 / 6) / (4 / 5 + 4 / 6))


def test_scores_without_positive_predictions():
    c_matrix = np.array([[3, 0], [2, 0]])
    assert precision(c_matrix) == 0.0
    assert f1_score(c_matrix) == 0.0
