"""Reduced row echelon form and its bookkeeping."""
import logging

import pytest
from ratlinalg import FLOAT, INTEGER, DenseMatrix, ExactFraction, FloatOperations, Gauss, RrefResult, rref


def assert_rref_invariants(result: RrefResult, ops):
    m = result.matrix
    previous = -1
    seen_zero_row = False
    for r in range(m.rows):
        lead = next((c for c in range(m.cols) if not ops.is_zero(m.at(r, c))), None)
        if lead is None:
            seen_zero_row = True
            continue
        assert not seen_zero_row, "zero rows must come last"
        assert lead > previous, "pivot columns must strictly increase"
        assert ops.is_one(m.at(r, lead))
        for other in range(m.rows):
            if other != r:
                assert ops.is_zero(m.at(other, lead))
        previous = lead


def test_rref_of_3x4(matrix_3x4):
    result = Gauss.get_instance().rref(matrix_3x4)
    assert result.matrix == DenseMatrix.from_rows([[1, 0, 0, 1], [0, 1, 0, 0], [0, 0, 1, -1]])
    assert result.pivots == (0, 1, 2)
    assert result.rank == 3
    assert_rref_invariants(result, matrix_3x4.ops)


def test_rref_does_not_mutate_input(matrix_3x4):
    before = matrix_3x4.clone()
    matrix_3x4.rref()
    assert matrix_3x4 == before


@pytest.mark.parametrize("n", [1, 2, 3, 5])
def test_rref_of_identity(n):
    eye = DenseMatrix.identity(n)
    result = eye.rref()
    assert result.matrix == eye
    assert result.swaps == 0
    assert result.pivot_product == ExactFraction(1)


def test_rref_counts_swaps_and_pivot_product():
    m = DenseMatrix.from_rows([[0, 2], [3, 0]])
    result = m.rref()
    assert result.matrix == DenseMatrix.identity(2)
    assert result.swaps == 1
    assert result.pivot_product == ExactFraction(6)


def test_rref_skips_rank_deficient_columns():
    m = DenseMatrix.from_rows([[0, 1, 2], [0, 2, 4], [0, 3, 7]])
    result = m.rref()
    assert result.pivots == (1, 2)
    assert result.matrix == DenseMatrix.from_rows([[0, 1, 0], [0, 0, 1], [0, 0, 0]])
    assert_rref_invariants(result, m.ops)


def test_rref_zero_matrix():
    result = DenseMatrix(2, 3).rref()
    assert result.rank == 0
    assert result.matrix == DenseMatrix(2, 3)


def test_rref_wide_and_tall():
    wide = DenseMatrix.from_rows([[2, 4, 6, 8]])
    assert wide.rref().matrix == DenseMatrix.from_rows([[1, 2, 3, 4]])
    tall = DenseMatrix.from_rows([[1, 2], [2, 4], [3, 7]])
    result = tall.rref()
    assert result.matrix == DenseMatrix.from_rows([[1, 0], [0, 1], [0, 0]])
    assert_rref_invariants(result, tall.ops)


def test_rref_with_fraction_entries():
    m = DenseMatrix.from_rows([[ExactFraction(1, 2), ExactFraction(1, 3)], [ExactFraction(1, 4), ExactFraction(1, 5)]])
    result = m.rref()
    assert result.matrix == DenseMatrix.identity(2)
    assert_rref_invariants(result, m.ops)


def test_rref_for_field_types(field_ops):
    m = DenseMatrix.from_rows([[1, -2, 1, 0], [0, 2, -8, 8], [5, 0, -5, 10]], field_ops)
    result = m.rref()
    expected = DenseMatrix.from_rows([[1, 0, 0, 1], [0, 1, 0, 0], [0, 0, 1, -1]], field_ops)
    assert result.matrix == expected
    assert_rref_invariants(result, field_ops)


def test_rref_with_floats():
    m = DenseMatrix.from_rows([[2.0, 1.0], [4.0, 3.0]], FLOAT)
    result = m.rref()
    assert result.matrix.to_rows() == [[1.0, 0.0], [0.0, 1.0]]
    assert result.pivot_product == 2.0


def test_rref_float_tolerance():
    m = DenseMatrix.from_rows([[1.0, 2.0], [1.0, 2.0 + 1e-12]], FLOAT)
    assert m.rref().rank == 2
    assert rref(m, ops=FloatOperations(tolerance=1e-9)).rank == 1


def test_rref_with_integers_and_unit_pivots():
    m = DenseMatrix.from_rows([[1, 2], [3, 5]], INTEGER)
    result = m.rref()
    assert result.matrix.to_rows() == [[1, 0], [0, 1]]
    assert result.pivot_product == -1
    assert m.det() == -1


def test_rref_accepts_nested_lists():
    result = rref([[1, -2, 1, 0], [0, 2, -8, 8], [5, 0, -5, 10]])
    assert result.matrix.to_rows() == [[1, 0, 0, 1], [0, 1, 0, 0], [0, 0, 1, -1]]


def test_rref_logs_at_debug(matrix_3x4, caplog):
    with caplog.at_level(logging.DEBUG, logger="ratlinalg.math.gauss"):
        matrix_3x4.rref()
    assert "rank 3" in caplog.text
