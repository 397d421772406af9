"""
Gauss operations - reduced row echelon form and everything derived from it.

``Gauss.rref`` clones the input and reduces the clone with the elementary row
operations of DenseMatrix, recording the number of row swaps and the product
of the pivot values that were divided out. Determinant, rank, independence,
solving, nullspace and inversion are all read off that result.

Pivoting takes the first non-zero entry from the top of the column, with no
magnitude based tie-break. Results are exact for field element types
(ExactFraction, Fraction, sympy.Rational); with floats, accuracy degrades for
ill-conditioned inputs.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..errors import NotSquare, SingularMatrix, SizeMismatch
from .dense_matrix import DenseMatrix
from .number_operations import NumberOperations

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class RrefResult:
    """Reduced matrix plus the statistics needed to rebuild a determinant"""

    matrix: DenseMatrix
    swaps: int
    pivot_product: object
    pivots: Tuple[int, ...]

    @property
    def rank(self) -> int:
        return len(self.pivots)


class Gauss:
    """
    Matrix operations based on Gaussian elimination.

    The operations use the NumberOperations of the matrix they are given,
    unless an override is passed to the constructor (for example a
    FloatOperations with a tolerance for float matrices).
    """

    _instance = None

    def __init__(self, ops: Optional[NumberOperations] = None):
        """
        Args:
            ops: Optional element operations applied instead of each matrix's own
        """
        self.ops = ops

    @classmethod
    def get_instance(cls) -> 'Gauss':
        """Shared instance that uses each matrix's own operations"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _ops_for(self, matrix: DenseMatrix) -> NumberOperations:
        return matrix.ops if self.ops is None else self.ops

    def rref(self, matrix: DenseMatrix) -> RrefResult:
        """
        Compute the reduced row echelon form of ``matrix``.

        The input is not modified.

        Args:
            matrix: Input matrix

        Returns:
            RrefResult with the reduced clone, the number of row swaps, the
            product of the original pivot values and the pivot columns
        """
        ops = self._ops_for(matrix)
        work = matrix.clone()
        rows, cols = work.rows, work.cols
        swaps = 0
        pivot_product = ops.one()
        pivots: List[int] = []

        row = col = 0
        while row < rows and col < cols:
            pivot_row = self._find_pivot_row(work, ops, row, col)
            if pivot_row == -1:
                # no pivot in this column
                col += 1
                continue

            if pivot_row != row:
                work.swap_rows(pivot_row, row)
                swaps += 1

            pivot_value = work.at(row, col)
            if not ops.is_one(pivot_value):
                work.scale_row(row, ops.invert(pivot_value))
                pivot_product = ops.multiply(pivot_product, pivot_value)

            self._eliminate_column(work, ops, row, col)
            pivots.append(col)
            row += 1
            col += 1

        LOG.debug("rref of %dx%d matrix: rank %d, %d row swaps, pivot columns %s",
                  rows, cols, len(pivots), swaps, pivots)
        return RrefResult(work, swaps, pivot_product, tuple(pivots))

    @staticmethod
    def _find_pivot_row(matrix: DenseMatrix, ops: NumberOperations, start_row: int, col: int) -> int:
        """First row at or below start_row with a non-zero entry in col, or -1"""
        for row in range(start_row, matrix.rows):
            if not ops.is_zero(matrix.at(row, col)):
                return row
        return -1

    @staticmethod
    def _eliminate_column(matrix: DenseMatrix, ops: NumberOperations, pivot_row: int, col: int) -> None:
        # above and below the pivot, giving the fully reduced form
        for row in range(matrix.rows):
            if row == pivot_row:
                continue
            factor = matrix.at(row, col)
            if not ops.is_zero(factor):
                matrix.add_row(pivot_row, row, ops.negate(factor))

    # Derived operations

    def det(self, matrix: DenseMatrix):
        """
        Determinant of a square matrix.

        Computed as the product of the RREF diagonal, times the product of the
        pivot values divided out during normalization, times -1 for an odd
        number of row swaps. A matrix of deficient rank has determinant zero,
        also when a tolerance left a tiny non-pivot value on the diagonal.

        Raises:
            NotSquare: If the matrix is not square
        """
        if not matrix.is_square():
            raise NotSquare(f"Determinant requires a square matrix, got {matrix.rows}x{matrix.cols}.")
        if matrix.rows == 1:
            return matrix.at(0, 0)

        ops = self._ops_for(matrix)
        result = self.rref(matrix)
        if result.rank < matrix.rows:
            return ops.zero()
        value = ops.one()
        for i in range(matrix.rows):
            value = ops.multiply(value, result.matrix.at(i, i))
        value = ops.multiply(value, result.pivot_product)
        if result.swaps % 2:
            value = ops.negate(value)
        return value

    def rank(self, matrix: DenseMatrix) -> int:
        return self.rref(matrix).rank

    def nullity(self, matrix: DenseMatrix) -> int:
        """Dimension of the nullspace (columns - rank)"""
        return matrix.cols - self.rank(matrix)

    def linearly_independent(self, matrix: DenseMatrix) -> bool:
        """True iff the column vectors of ``matrix`` are linearly independent"""
        return self.rank(matrix) == matrix.cols

    def solve(self, matrix: DenseMatrix, rhs: Sequence) -> Optional[List]:
        """
        Solve ``matrix * x = rhs`` for a unique solution.

        Args:
            matrix: Square coefficient matrix
            rhs: Right-hand side values, or a single-column DenseMatrix

        Returns:
            The solution as a list, or None when the system has no unique
            solution (inconsistent or underdetermined)

        Raises:
            NotSquare: If the coefficient matrix is not square
            SizeMismatch: If len(rhs) != matrix.rows
        """
        if isinstance(rhs, DenseMatrix):
            if rhs.cols != 1:
                raise SizeMismatch(f"Right-hand side must be a single column, got {rhs.rows}x{rhs.cols}.")
            rhs = rhs.column_at(0)
        rhs = list(rhs)
        if len(rhs) != matrix.rows:
            raise SizeMismatch(f"Right-hand side has length {len(rhs)}, matrix has {matrix.rows} rows.")
        if not matrix.is_square():
            raise NotSquare(f"Unique solution requires a square matrix, got {matrix.rows}x{matrix.cols}.")

        n = matrix.rows
        augmented = self._augment(matrix, [[v] for v in rhs])
        result = self.rref(augmented)
        # the coefficient block is the identity iff every pivot lies in it
        if result.pivots != tuple(range(n)):
            LOG.debug("system has no unique solution (pivot columns %s)", result.pivots)
            return None
        return result.matrix.column_at(n)

    def nullspace(self, matrix: DenseMatrix) -> Optional[DenseMatrix]:
        """
        Basis of the nullspace of ``matrix``.

        Each free (non-pivot) column yields one basis vector: the free variable
        is set to one and every pivot variable to the negated RREF entry of
        that column.

        Returns:
            A cols x nullity matrix whose columns span the nullspace, or None
            when the nullspace is trivial (a matrix cannot have zero columns)
        """
        ops = self._ops_for(matrix)
        result = self.rref(matrix)
        free = [c for c in range(matrix.cols) if c not in result.pivots]
        if not free:
            return None
        kernel = DenseMatrix(matrix.cols, len(free), matrix.ops)
        for k, free_col in enumerate(free):
            kernel.set_at(free_col, k, ops.one())
            for row, pivot_col in enumerate(result.pivots):
                kernel.set_at(pivot_col, k, ops.negate(result.matrix.at(row, free_col)))
        return kernel

    def invert(self, matrix: DenseMatrix) -> DenseMatrix:
        """
        Inverse of a square matrix from the RREF of ``[A | I]``.

        Raises:
            NotSquare: If the matrix is not square
            SingularMatrix: If the matrix has deficient rank
        """
        if not matrix.is_square():
            raise NotSquare(f"Inverse requires a square matrix, got {matrix.rows}x{matrix.cols}.")
        n = matrix.rows
        one, zero = matrix.ops.one(), matrix.ops.zero()
        identity = [[one if i == j else zero for j in range(n)] for i in range(n)]
        result = self.rref(self._augment(matrix, identity))
        if result.pivots[:n] != tuple(range(n)):
            raise SingularMatrix(f"Matrix is singular (rank {sum(1 for p in result.pivots if p < n)} < {n}).")
        reduced = result.matrix
        return DenseMatrix.from_rows([[reduced.at(i, n + j) for j in range(n)] for i in range(n)], matrix.ops)

    @staticmethod
    def _augment(matrix: DenseMatrix, extra_rows: List[List]) -> DenseMatrix:
        rows = [list(row) + list(extra) for row, extra in zip(matrix.to_rows(), extra_rows)]
        return DenseMatrix.from_rows(rows, matrix.ops)
