import pytest
from ratlinalg import EXACT, FRACTION, SYMPY, DenseMatrix


@pytest.fixture(params=[EXACT, FRACTION, SYMPY], ids=['exact', 'fraction', 'sympy'], scope="session")
def field_ops(request: pytest.FixtureRequest):
    """Provide session-level fixture for the exact field element types."""
    return request.param


@pytest.fixture
def matrix_3x4() -> DenseMatrix:
    return DenseMatrix.from_rows([[1, -2, 1, 0], [0, 2, -8, 8], [5, 0, -5, 10]])


@pytest.fixture
def matrix_4x4() -> DenseMatrix:
    return DenseMatrix.from_rows([[1, -2, 1, 0], [0, 2, -8, 8], [5, 0, -5, 10], [9, -5, -5, 6]])


@pytest.fixture
def matrix_3x3() -> DenseMatrix:
    return DenseMatrix.from_rows([[1, -2, 1], [0, 2, -8], [5, 0, -5]])
