#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Functions for row reduction and the linear algebra derived from it

Every function accepts a DenseMatrix or any matrix-like value understood by
ratlinalg.interop.as_matrix (nested row lists, numpy arrays, scipy sparse
matrices, sympy matrices). Plain values are read as exact fractions unless
another element type is requested with the ``ops`` keyword."""

from typing import List, Optional, Sequence
import logging

import numpy as np

from ratlinalg.errors import SizeMismatch
from ratlinalg.interop import as_matrix, coerce_element
from ratlinalg.math import DenseMatrix, Gauss, NumberOperations, RrefResult

__all__ = ['rref', 'det', 'rank', 'nullity', 'linearly_independent', 'solve', 'nullspace', 'invert']

LOG = logging.getLogger(__name__)


def _gauss(ops: Optional[NumberOperations]) -> Gauss:
    return Gauss.get_instance() if ops is None else Gauss(ops)


def rref(matrix, ops: Optional[NumberOperations] = None) -> RrefResult:
    """Reduced row echelon form

    Args:
        matrix (DenseMatrix or matrix-like):
            Input matrix. It is not modified.
        ops (NumberOperations):
            (Optional) Element type used for conversion and elimination, e.g.
            FloatOperations(tolerance=1e-9) for float matrices.

    Returns:
        (RrefResult):
            The reduced matrix together with the number of row swaps, the
            product of the divided-out pivot values and the pivot columns.
    """
    return _gauss(ops).rref(as_matrix(matrix, ops))


def det(matrix, ops: Optional[NumberOperations] = None):
    """Determinant of a square matrix

    Raises:
        NotSquare: If the matrix is not square.
    """
    return _gauss(ops).det(as_matrix(matrix, ops))


def rank(matrix, ops: Optional[NumberOperations] = None) -> int:
    """Number of pivot columns of the reduced matrix"""
    return _gauss(ops).rank(as_matrix(matrix, ops))


def nullity(matrix, ops: Optional[NumberOperations] = None) -> int:
    return _gauss(ops).nullity(as_matrix(matrix, ops))


def linearly_independent(matrix, ops: Optional[NumberOperations] = None) -> bool:
    """Check whether the column vectors of a matrix are linearly independent"""
    return _gauss(ops).linearly_independent(as_matrix(matrix, ops))


def solve(matrix, rhs: Sequence, ops: Optional[NumberOperations] = None) -> Optional[List]:
    """Solve the square linear system A x = b

    Args:
        matrix (DenseMatrix or matrix-like):
            Square coefficient matrix A.
        rhs (list, numpy.ndarray or DenseMatrix):
            Right-hand side b, one value per row of A, or a single column.
        ops (NumberOperations):
            (Optional) Element type.

    Returns:
        (list or None):
            The unique solution x, or None if A is singular (the system is
            inconsistent or has infinitely many solutions).

    Raises:
        SizeMismatch: If len(b) differs from the number of rows of A.
        NotSquare: If A is not square.
    """
    coefficients = as_matrix(matrix, ops)
    if isinstance(rhs, np.ndarray) and rhs.ndim == 2:
        if rhs.shape[1] != 1:
            raise SizeMismatch(f"Right-hand side must be a single column, got {rhs.shape[0]}x{rhs.shape[1]}.")
        rhs = rhs[:, 0]
    if not isinstance(rhs, DenseMatrix):
        rhs = [coerce_element(v, coefficients.ops) for v in rhs]
    solution = _gauss(ops).solve(coefficients, rhs)
    if solution is None:
        LOG.info('Linear system of size %dx%d has no unique solution.', coefficients.rows, coefficients.cols)
    return solution


def nullspace(matrix, ops: Optional[NumberOperations] = None) -> Optional[DenseMatrix]:
    """Basis of the nullspace as matrix columns, or None if the nullspace is trivial"""
    return _gauss(ops).nullspace(as_matrix(matrix, ops))


def invert(matrix, ops: Optional[NumberOperations] = None) -> DenseMatrix:
    """Inverse of a square matrix

    Raises:
        NotSquare: If the matrix is not square.
        SingularMatrix: If the matrix is not invertible.
    """
    return _gauss(ops).invert(as_matrix(matrix, ops))
