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
"""Conversion between DenseMatrix and numpy, scipy.sparse and sympy matrices"""

from fractions import Fraction
from scipy import sparse
import numpy as np

from ratlinalg.errors import InvalidDimension, SizeMismatch
from ratlinalg.math import EXACT, DenseMatrix, ExactFraction, FloatOperations, IntegerOperations

__all__ = ['from_numpy', 'to_numpy', 'from_sparse', 'to_sparse', 'from_sympy', 'to_sympy', 'as_matrix']


def coerce_element(value, ops):
    # numpy scalars are not int/float subclasses in every case
    if isinstance(value, np.integer):
        value = int(value)
    elif isinstance(value, np.floating):
        value = float(value)
    if isinstance(value, float) and not isinstance(ops, (FloatOperations, IntegerOperations)):
        value = Fraction(value).limit_denominator()
    return ops.value_of(value)


def from_numpy(array, ops=None) -> DenseMatrix:
    """Convert a 2-D numpy array into a DenseMatrix

    Floats are converted to exact fractions with Fraction.limit_denominator
    unless the target element type is float.

    Args:
        array (numpy.ndarray):
            Two-dimensional array (a 1-D array is read as a single column).
        ops (NumberOperations):
            Element type of the result (default: ExactFraction).

    Returns:
        (DenseMatrix):
            Matrix holding the same values.
    """
    ops = EXACT if ops is None else ops
    array = np.asarray(array)
    if array.ndim == 1:
        array = array.reshape(-1, 1)
    if array.ndim != 2:
        raise SizeMismatch(f"Expected a 2-D array, got {array.ndim} dimensions.")
    rows, cols = array.shape
    if rows == 0 or cols == 0:
        raise InvalidDimension(f"Matrix dimensions must be positive, got {rows}x{cols}.")
    return DenseMatrix.from_flat(rows, cols, [coerce_element(v, ops) for v in array.flat], ops)


def to_numpy(matrix: DenseMatrix, dtype=float) -> np.ndarray:
    """Convert a DenseMatrix into a numpy array

    Args:
        matrix (DenseMatrix):
            Matrix to convert.
        dtype:
            numpy dtype of the result. Use ``object`` to keep exact elements.

    Returns:
        (numpy.ndarray):
            Array of shape (rows, cols).
    """
    if dtype is object:
        array = np.empty(matrix.shape, dtype=object)
        for r, row in enumerate(matrix.to_rows()):
            for c, value in enumerate(row):
                array[r, c] = value
        return array
    return np.array([[float(v) for v in row] for row in matrix.to_rows()], dtype=dtype)


def from_sparse(sparse_matrix, ops=None) -> DenseMatrix:
    """Convert a scipy sparse matrix into a (dense) DenseMatrix"""
    ops = EXACT if ops is None else ops
    rows, cols = sparse_matrix.shape
    matrix = DenseMatrix(rows, cols, ops)
    coo = sparse.coo_matrix(sparse_matrix)
    for i, j, v in zip(coo.row, coo.col, coo.data):
        # duplicate COO entries are summed
        matrix.set_at(int(i), int(j), ops.add(matrix.at(int(i), int(j)), coerce_element(v, ops)))
    return matrix


def to_sparse(matrix: DenseMatrix) -> sparse.csr_matrix:
    """Convert a DenseMatrix into a scipy CSR matrix of floats"""
    return sparse.csr_matrix(to_numpy(matrix, dtype=float))


def from_sympy(sympy_matrix, ops=None) -> DenseMatrix:
    """Convert a sympy Matrix of rational entries into a DenseMatrix"""
    ops = EXACT if ops is None else ops
    rows, cols = sympy_matrix.shape
    return DenseMatrix.from_flat(rows, cols, [ops.value_of(v) for v in sympy_matrix], ops)


def to_sympy(matrix: DenseMatrix):
    """Convert a DenseMatrix into a sympy Matrix with exact rational entries"""
    from sympy import Matrix, Rational

    def convert(value):
        if isinstance(value, ExactFraction):
            return value.to_sympy()
        if isinstance(value, Fraction):
            return Rational(value.numerator, value.denominator)
        return value

    return Matrix([[convert(v) for v in row] for row in matrix.to_rows()])


def as_matrix(value, ops=None) -> DenseMatrix:
    """Coerce a matrix-like value into a DenseMatrix

    Accepts DenseMatrix (returned unchanged when no other element type is
    requested), scipy sparse matrices, numpy arrays, sympy matrices and
    nested row sequences.
    """
    if isinstance(value, DenseMatrix):
        return value if ops is None or ops is value.ops else value.with_ops(ops)
    if sparse.issparse(value):
        return from_sparse(value, ops)
    if isinstance(value, np.ndarray):
        return from_numpy(value, ops)
    if hasattr(value, 'tolist') and hasattr(value, 'shape') and type(value).__module__.startswith('sympy'):
        return from_sympy(value, ops)
    return DenseMatrix.from_rows(value, ops)
