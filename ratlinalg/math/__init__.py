"""
Mathematical core of ratlinalg

- Exact rational arithmetic with ExactFraction
- NumberOperations, the capability set of a matrix element type
- DenseMatrix with row-major storage and elementary row operations
- Gaussian elimination (RREF) and the operations derived from it
"""

from .exact_fraction import ExactFraction
from .number_operations import (EXACT, FLOAT, FRACTION, INTEGER, SYMPY, ExactFractionOperations, FloatOperations,
                                FractionOperations, IntegerOperations, NumberOperations, SympyRationalOperations)
from .dense_matrix import DenseMatrix, RowView
from .gauss import Gauss, RrefResult

__all__ = [
    'ExactFraction',
    'NumberOperations',
    'ExactFractionOperations',
    'FractionOperations',
    'SympyRationalOperations',
    'FloatOperations',
    'IntegerOperations',
    'EXACT',
    'FRACTION',
    'SYMPY',
    'FLOAT',
    'INTEGER',
    'DenseMatrix',
    'RowView',
    'Gauss',
    'RrefResult',
]
