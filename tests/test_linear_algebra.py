"""Tests for exact vector and matrix helpers."""

import numpy as np
import pytest

from arithmetic import Q, DivisionByZero
from linear_algebra import (
    determinant, dims, dot, frobenius_norm, from_numpy, identity, l2_norm,
    matrix_div_scalar, mm_product, mv_product, transpose, zeros,
)


def test_shapes():
    assert dims([]) == (0, 0)
    assert dims(zeros(2, 3)) == (2, 3)
    assert transpose([[1, 2, 3], [4, 5, 6]]) == [[1, 4], [2, 5], [3, 6]]
    assert identity(2) == [[1, 0], [0, 1]]


def test_products():
    A = [[1, 2], [3, 4]]
    assert mv_product(A, [Q(1, 2), Q(1, 3)]) == [Q(7, 6), Q(17, 6)]
    assert mm_product(A, identity(2)) == A
    assert mm_product(A, [[Q(1, 2)], [Q(1, 4)]]) == [[1], [Q(5, 2)]]
    with pytest.raises(ValueError):
        mv_product(A, [1, 2, 3])
    with pytest.raises(ValueError):
        dot([1], [1, 2])


def test_products_are_canonical():
    r = dot([Q(1, 2), Q(1, 2)], [1, 1])
    assert r == 1
    assert type(r) is int


def test_matrix_div_scalar():
    assert matrix_div_scalar([[2, 3]], 4) == [[Q(1, 2), Q(3, 4)]]
    assert type(matrix_div_scalar([[4]], 2)[0][0]) is int
    with pytest.raises(DivisionByZero):
        matrix_div_scalar([[1]], 0)


@pytest.mark.parametrize(
    "v, expected",
    [
        pytest.param([3, 4], 5, id="pythagorean"),
        pytest.param([Q(3, 5), Q(4, 5)], 1, id="rational-unit"),
        pytest.param([1, 2, 2], 3, id="three-d"),
        pytest.param([0, 0], 0, id="zero"),
    ],
)
def test_l2_norm_exact(v, expected):
    r = l2_norm(v)
    assert r == expected
    assert type(r) is int


def test_l2_norm_inexact():
    assert l2_norm([1, 1]) == pytest.approx(2 ** 0.5)


def test_frobenius_norm():
    assert frobenius_norm([[1, 2], [2, 4]]) == 5


@pytest.mark.parametrize(
    "M, expected",
    [
        pytest.param([[2, 1], [1, 3]], 5, id="2x2"),
        pytest.param([[0, 1], [1, 0]], -1, id="swap"),
        pytest.param([[1, 2], [2, 4]], 0, id="singular"),
        pytest.param([[Q(1, 2), 0], [0, Q(2, 3)]], Q(1, 3), id="rational"),
        pytest.param([[6, 1, 1], [4, -2, 5], [2, 8, 7]], -306, id="3x3"),
    ],
)
def test_determinant(M, expected):
    assert determinant(M) == expected


def test_determinant_is_int_for_int_matrix():
    assert type(determinant([[2, 1], [1, 3]])) is int
    with pytest.raises(ValueError):
        determinant([[1, 2]])


def test_from_numpy():
    assert from_numpy(np.array([[1, 2], [3, 4]], dtype=np.int64)) == [[1, 2], [3, 4]]
    v = from_numpy(np.array([0.5, 0.25, 2.0]))
    assert v == [Q(1, 2), Q(1, 4), 2]
    assert type(v[2]) is int
    assert l2_norm(from_numpy(np.array([3.0, 4.0]))) == 5
    with pytest.raises(ValueError):
        from_numpy(np.array([1.0, np.nan]))
    with pytest.raises(ValueError):
        from_numpy(np.zeros((2, 2, 2)))
