"""
DenseMatrix - fixed-shape matrix with row-major element storage.

The matrix is stored as one flat list of ``rows * cols`` elements in row-major
order (index = row * cols + col) together with the NumberOperations instance
describing the element type. The shape never changes after construction;
operations that produce a different shape return a new matrix.

The elementary row operations (swap, scale, add a multiple of a row) mutate
the matrix in place and validate their indices before touching any element.
"""

import io
from typing import Iterable, Iterator, List, Optional, Sequence

from ..errors import InvalidDimension, OutOfRange, RaggedInput, SizeMismatch, check_dimensions
from .number_operations import EXACT, NumberOperations


class RowView:
    """
    Live, non-owning view of one matrix row.

    Reads and writes go straight to the owning matrix's storage. The view is
    only meaningful while the caller still uses the matrix it came from; do
    not keep it around as a substitute for a copy (use ``list(view)``).
    """

    __slots__ = ('_matrix', '_row')

    def __init__(self, matrix: 'DenseMatrix', row: int):
        self._matrix = matrix
        self._row = row

    @property
    def row(self) -> int:
        return self._row

    def __len__(self) -> int:
        return self._matrix.cols

    def _index(self, col: int) -> int:
        if not 0 <= col < self._matrix.cols:
            raise OutOfRange(f"Column {col} outside of row of length {self._matrix.cols}.")
        return self._row * self._matrix.cols + col

    def __getitem__(self, col: int):
        return self._matrix._data[self._index(col)]

    def __setitem__(self, col: int, value) -> None:
        self._matrix._data[self._index(col)] = self._matrix.ops.value_of(value)

    def __iter__(self) -> Iterator:
        start = self._row * self._matrix.cols
        return iter(self._matrix._data[start:start + self._matrix.cols])

    def __eq__(self, other) -> bool:
        try:
            return list(self) == list(other)
        except TypeError:
            return NotImplemented

    def __repr__(self) -> str:
        return f"RowView(row={self._row}, values=[{', '.join(str(v) for v in self)}])"


class DenseMatrix:
    """
    Dense matrix over an arbitrary element type.

    Supported construction:
    - DenseMatrix(rows, cols, ops=EXACT) - zero matrix
    - DenseMatrix.from_flat(rows, cols, values, ops=EXACT)
    - DenseMatrix.from_rows(rows, ops=EXACT)
    - DenseMatrix.from_columns(columns, ops=EXACT)
    - DenseMatrix.identity(size, ops=EXACT)

    Raises:
        InvalidDimension: If rows or cols is not positive
    """

    def __init__(self, rows: int, cols: int, ops: Optional[NumberOperations] = None):
        check_dimensions(rows, cols)
        self.ops = EXACT if ops is None else ops
        self._rows = rows
        self._cols = cols
        self._data = [self.ops.zero()] * (rows * cols)

    @classmethod
    def _wrap(cls, rows: int, cols: int, data: List, ops: NumberOperations) -> 'DenseMatrix':
        # data must already be coerced and of length rows * cols
        matrix = cls.__new__(cls)
        matrix.ops = ops
        matrix._rows = rows
        matrix._cols = cols
        matrix._data = data
        return matrix

    @classmethod
    def from_flat(cls, rows: int, cols: int, values: Iterable,
                  ops: Optional[NumberOperations] = None) -> 'DenseMatrix':
        """Build from a flat row-major sequence of exactly rows * cols values"""
        check_dimensions(rows, cols)
        ops = EXACT if ops is None else ops
        data = [ops.value_of(v) for v in values]
        if len(data) != rows * cols:
            raise SizeMismatch(f"Initializer of length {len(data)} does not match {rows}x{cols} matrix.")
        return cls._wrap(rows, cols, data, ops)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable], ops: Optional[NumberOperations] = None) -> 'DenseMatrix':
        """
        Build from nested row sequences.

        Raises:
            InvalidDimension: If there are no rows or a row is empty
            RaggedInput: If rows differ in length
        """
        ops = EXACT if ops is None else ops
        nested = [[ops.value_of(v) for v in row] for row in rows]
        width = cls._common_length(nested, 'row')
        data = [value for row in nested for value in row]
        return cls._wrap(len(nested), width, data, ops)

    @classmethod
    def from_columns(cls, columns: Iterable[Iterable], ops: Optional[NumberOperations] = None) -> 'DenseMatrix':
        """Build from column vectors; the input is transposed into row-major storage"""
        ops = EXACT if ops is None else ops
        nested = [[ops.value_of(v) for v in col] for col in columns]
        height = cls._common_length(nested, 'column')
        width = len(nested)
        data = [nested[col][row] for row in range(height) for col in range(width)]
        return cls._wrap(height, width, data, ops)

    @staticmethod
    def _common_length(vectors: List[List], kind: str) -> int:
        if not vectors:
            raise InvalidDimension(f"Matrix needs at least one {kind}.")
        length = len(vectors[0])
        for index, vector in enumerate(vectors):
            if not vector:
                raise InvalidDimension(f"{kind} {index} is empty.")
            if len(vector) != length:
                raise RaggedInput(f"{kind} {index} has length {len(vector)}, expected {length}.")
        return length

    @classmethod
    def identity(cls, size: int, ops: Optional[NumberOperations] = None) -> 'DenseMatrix':
        matrix = cls(size, size, ops)
        one = matrix.ops.one()
        for i in range(size):
            matrix._data[i * size + i] = one
        return matrix

    # Shape and access

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self):
        return self._rows, self._cols

    def is_square(self) -> bool:
        return self._rows == self._cols

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self._rows:
            raise OutOfRange(f"Row {row} outside of matrix with {self._rows} rows.")

    def _check_col(self, col: int) -> None:
        if not 0 <= col < self._cols:
            raise OutOfRange(f"Column {col} outside of matrix with {self._cols} columns.")

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise OutOfRange(f"Position ({row}, {col}) outside of {self._rows}x{self._cols} matrix.")
        return row * self._cols + col

    def at(self, row: int, col: int):
        return self._data[self._index(row, col)]

    def set_at(self, row: int, col: int, value) -> None:
        self._data[self._index(row, col)] = self.ops.value_of(value)

    def __getitem__(self, position):
        row, col = position
        return self.at(row, col)

    def __setitem__(self, position, value) -> None:
        row, col = position
        self.set_at(row, col, value)

    def row_at(self, row: int) -> RowView:
        self._check_row(row)
        return RowView(self, row)

    def column_at(self, col: int) -> List:
        """Copy of column ``col``"""
        self._check_col(col)
        return self._data[col::self._cols]

    def to_rows(self) -> List[List]:
        return [self._data[r * self._cols:(r + 1) * self._cols] for r in range(self._rows)]

    def to_flat(self) -> List:
        return list(self._data)

    def __iter__(self) -> Iterator[RowView]:
        return (RowView(self, r) for r in range(self._rows))

    def clone(self) -> 'DenseMatrix':
        """Deep, independent copy; elements are immutable values"""
        return self._wrap(self._rows, self._cols, list(self._data), self.ops)

    def __copy__(self) -> 'DenseMatrix':
        return self.clone()

    def __deepcopy__(self, memo) -> 'DenseMatrix':
        return self.clone()

    def with_ops(self, ops: NumberOperations) -> 'DenseMatrix':
        """Copy of this matrix converted to another element type"""
        return self._wrap(self._rows, self._cols, [ops.value_of(v) for v in self._data], ops)

    # Elementary row operations

    def swap_rows(self, row1: int, row2: int) -> None:
        self._check_row(row1)
        self._check_row(row2)
        if row1 == row2:
            return
        cols = self._cols
        a, b = row1 * cols, row2 * cols
        self._data[a:a + cols], self._data[b:b + cols] = self._data[b:b + cols], self._data[a:a + cols]

    def scale_row(self, row: int, scalar) -> None:
        """Multiply every element of ``row`` by ``scalar`` in place"""
        self._check_row(row)
        scalar = self.ops.value_of(scalar)
        multiply = self.ops.multiply
        start = row * self._cols
        for i in range(start, start + self._cols):
            self._data[i] = multiply(self._data[i], scalar)

    def add_row(self, source: int, target: int, scalar) -> None:
        """``target[col] += scalar * source[col]`` for every column"""
        self._check_row(source)
        self._check_row(target)
        scalar = self.ops.value_of(scalar)
        add, multiply = self.ops.add, self.ops.multiply
        src, dst = source * self._cols, target * self._cols
        for col in range(self._cols):
            self._data[dst + col] = add(self._data[dst + col], multiply(scalar, self._data[src + col]))

    # Arithmetic

    def _check_same_shape(self, other: 'DenseMatrix', what: str) -> None:
        if self.shape != other.shape:
            raise SizeMismatch(f"Cannot {what} {self._rows}x{self._cols} and {other.rows}x{other.cols} matrices.")

    def scale(self, scalar) -> 'DenseMatrix':
        scalar = self.ops.value_of(scalar)
        return self._wrap(self._rows, self._cols, [self.ops.multiply(scalar, v) for v in self._data], self.ops)

    def add(self, other: 'DenseMatrix') -> 'DenseMatrix':
        self._check_same_shape(other, 'add')
        add = self.ops.add
        return self._wrap(self._rows, self._cols, [add(a, b) for a, b in zip(self._data, other._data)], self.ops)

    def subtract(self, other: 'DenseMatrix') -> 'DenseMatrix':
        self._check_same_shape(other, 'subtract')
        sub = self.ops.subtract
        return self._wrap(self._rows, self._cols, [sub(a, b) for a, b in zip(self._data, other._data)], self.ops)

    def negate(self) -> 'DenseMatrix':
        return self._wrap(self._rows, self._cols, [self.ops.negate(v) for v in self._data], self.ops)

    def multiply(self, other: 'DenseMatrix') -> 'DenseMatrix':
        """
        Matrix product ``self * other``.

        Raises:
            SizeMismatch: If self.cols != other.rows
        """
        if self._cols != other.rows:
            raise SizeMismatch(f"Cannot multiply {self._rows}x{self._cols} by {other.rows}x{other.cols} matrix.")
        add, multiply = self.ops.add, self.ops.multiply
        inner, width = self._cols, other.cols
        data = []
        for r in range(self._rows):
            row = self._data[r * inner:(r + 1) * inner]
            for c in range(width):
                total = self.ops.zero()
                for k in range(inner):
                    total = add(total, multiply(row[k], other._data[k * width + c]))
                data.append(total)
        return self._wrap(self._rows, width, data, self.ops)

    def transpose(self) -> 'DenseMatrix':
        data = [self._data[r * self._cols + c] for c in range(self._cols) for r in range(self._rows)]
        return self._wrap(self._cols, self._rows, data, self.ops)

    def __add__(self, other):
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return self.negate()

    def __mul__(self, other):
        if isinstance(other, DenseMatrix):
            return self.multiply(other)
        return self.scale(other)

    def __rmul__(self, other):
        return self.scale(other)

    def __matmul__(self, other):
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self.multiply(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        equal = self.ops.equal
        return all(equal(a, b) for a, b in zip(self._data, other._data))

    __hash__ = None

    # Elimination based operations, see Gauss

    def rref(self):
        return _gauss().rref(self)

    def det(self):
        return _gauss().det(self)

    def rank(self) -> int:
        return _gauss().rank(self)

    def linearly_independent(self) -> bool:
        return _gauss().linearly_independent(self)

    def solve(self, rhs: Sequence):
        return _gauss().solve(self, rhs)

    def nullspace(self) -> 'DenseMatrix':
        return _gauss().nullspace(self)

    def inverse(self) -> 'DenseMatrix':
        return _gauss().invert(self)

    # String representation

    def __str__(self) -> str:
        """Row-major; ', ' between elements of a row, newline between rows"""
        return '\n'.join(', '.join(str(v) for v in row) for row in self.to_rows())

    def __repr__(self) -> str:
        rows = ', '.join('[' + ', '.join(str(v) for v in row) + ']' for row in self.to_rows())
        return f"DenseMatrix({self._rows}x{self._cols}, [{rows}])"

    def to_multiline_string(self) -> str:
        """Column-aligned rendering for inspection"""
        cells = [[str(v) for v in row] for row in self.to_rows()]
        widths = [max(len(cells[r][c]) for r in range(self._rows)) for c in range(self._cols)]
        out = io.StringIO()
        for row in cells:
            out.write(' [' + ', '.join(cell.rjust(w) for cell, w in zip(row, widths)) + ']\n')
        return out.getvalue()


def _gauss():
    from .gauss import Gauss
    return Gauss.get_instance()
