"""
NumberOperations - the capability set a matrix element type must provide.

DenseMatrix and Gauss never inspect element types at runtime. Each matrix
carries one NumberOperations instance which supplies the additive and
multiplicative identities, arithmetic, zero/one tests and the coercion of
plain input values. One singleton is provided per supported element type:

- ``EXACT``    ExactFraction (default, exact field)
- ``FRACTION`` fractions.Fraction (exact field)
- ``SYMPY``    sympy.Rational (exact field)
- ``FLOAT``    float (inexact; optional zero tolerance)
- ``INTEGER``  int (division truncates, so elimination is not exact)
"""

from abc import ABC, abstractmethod
from fractions import Fraction
from typing import Generic, TypeVar

from ..errors import DivisionByZero
from .exact_fraction import ExactFraction

N = TypeVar('N')


class NumberOperations(ABC, Generic[N]):
    """
    Operations on one number type, in the style of a trait.

    Subclasses must implement the identities, ``value_of`` and ``divide``.
    The arithmetic defaults delegate to the Python operators of the type.
    """

    name = 'abstract'

    @abstractmethod
    def zero(self) -> N:
        """Additive identity"""

    @abstractmethod
    def one(self) -> N:
        """Multiplicative identity"""

    @abstractmethod
    def value_of(self, value) -> N:
        """Coerce a plain input value to the element type"""

    @abstractmethod
    def divide(self, num_a: N, num_b: N) -> N:
        """Divide num_a by num_b, raising DivisionByZero for a zero divisor"""

    def add(self, num_a: N, num_b: N) -> N:
        return num_a + num_b

    def subtract(self, num_a: N, num_b: N) -> N:
        return num_a - num_b

    def multiply(self, num_a: N, num_b: N) -> N:
        return num_a * num_b

    def negate(self, number: N) -> N:
        return -number

    def invert(self, number: N) -> N:
        return self.divide(self.one(), number)

    def is_zero(self, number: N) -> bool:
        return number == self.zero()

    def is_one(self, number: N) -> bool:
        return number == self.one()

    def equal(self, num_a: N, num_b: N) -> bool:
        return num_a == num_b

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ExactFractionOperations(NumberOperations[ExactFraction]):
    """Operations for ExactFraction, the library's own rational type"""

    name = 'exact'

    def zero(self) -> ExactFraction:
        return ExactFraction.ZERO

    def one(self) -> ExactFraction:
        return ExactFraction.ONE

    def value_of(self, value) -> ExactFraction:
        return ExactFraction.value_of(value)

    def divide(self, num_a: ExactFraction, num_b: ExactFraction) -> ExactFraction:
        return num_a / num_b

    def is_zero(self, number: ExactFraction) -> bool:
        return number.is_zero()

    def is_one(self, number: ExactFraction) -> bool:
        return number.is_one()


class FractionOperations(NumberOperations[Fraction]):
    """Operations for the standard library ``fractions.Fraction``"""

    name = 'fraction'

    _ZERO = Fraction(0)
    _ONE = Fraction(1)

    def zero(self) -> Fraction:
        return self._ZERO

    def one(self) -> Fraction:
        return self._ONE

    def value_of(self, value) -> Fraction:
        if isinstance(value, Fraction):
            return value
        if isinstance(value, ExactFraction):
            return value.to_fraction()
        if isinstance(value, float):
            return Fraction(value).limit_denominator()
        if hasattr(value, 'p') and hasattr(value, 'q'):
            return Fraction(int(value.p), int(value.q))
        return Fraction(value)

    def divide(self, num_a: Fraction, num_b: Fraction) -> Fraction:
        if num_b == 0:
            raise DivisionByZero(f"Cannot divide {num_a} by zero.")
        return num_a / num_b


class SympyRationalOperations(NumberOperations):
    """Operations for ``sympy.Rational``; sympy is imported on first use"""

    name = 'sympy'

    def __init__(self):
        self._zero = None
        self._one = None

    def _load(self):
        if self._zero is None:
            from sympy import Rational
            self._zero = Rational(0)
            self._one = Rational(1)

    def zero(self):
        self._load()
        return self._zero

    def one(self):
        self._load()
        return self._one

    def value_of(self, value):
        from sympy import Rational
        if isinstance(value, Rational):
            return value
        if isinstance(value, ExactFraction):
            return value.to_sympy()
        if isinstance(value, float):
            value = Fraction(value).limit_denominator()
        if isinstance(value, Fraction):
            return Rational(value.numerator, value.denominator)
        return Rational(value)

    def divide(self, num_a, num_b):
        if num_b == 0:
            raise DivisionByZero(f"Cannot divide {num_a} by zero.")
        return num_a / num_b

    def is_zero(self, number) -> bool:
        return number == 0

    def is_one(self, number) -> bool:
        return number == 1


class FloatOperations(NumberOperations[float]):
    """
    Operations for ``float`` elements.

    With a positive ``tolerance``, values whose magnitude is within tolerance
    of zero (or one) count as zero (or one) during elimination. Pivoting is
    still first-nonzero, so accuracy is not guaranteed for ill-conditioned
    inputs.
    """

    name = 'float'

    def __init__(self, tolerance: float = 0.0):
        if tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {tolerance}")
        self.tolerance = tolerance

    def zero(self) -> float:
        return 0.0

    def one(self) -> float:
        return 1.0

    def value_of(self, value) -> float:
        return float(value)

    def divide(self, num_a: float, num_b: float) -> float:
        if num_b == 0.0:
            raise DivisionByZero(f"Cannot divide {num_a} by zero.")
        return num_a / num_b

    def is_zero(self, number: float) -> bool:
        return abs(number) <= self.tolerance

    def is_one(self, number: float) -> bool:
        return abs(number - 1.0) <= self.tolerance

    def __repr__(self) -> str:
        return f"FloatOperations(tolerance={self.tolerance})"


class IntegerOperations(NumberOperations[int]):
    """
    Operations for ``int`` elements.

    Division truncates toward zero, so ``invert`` of any value other than 1
    or -1 is 0. Row reduction scales each pivot row by the inverted pivot, so
    a pivot such as 2 clears its whole row: over INTEGER the matrix
    ``[[2, 0], [0, 2]]`` reduces to the zero matrix and gets a
    determinant of 0. Results are only exact when every pivot is 1 or -1.
    Use a field type (EXACT, FRACTION, SYMPY) otherwise.

    ``value_of`` rejects values with a fractional part instead of truncating
    them.
    """

    name = 'integer'

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def value_of(self, value) -> int:
        if isinstance(value, str):
            return int(value)
        result = int(value)
        if result != value:
            raise ValueError(f"Cannot represent {value} as an integer element.")
        return result

    def divide(self, num_a: int, num_b: int) -> int:
        if num_b == 0:
            raise DivisionByZero(f"Cannot divide {num_a} by zero.")
        quotient = abs(num_a) // abs(num_b)
        return quotient if (num_a < 0) == (num_b < 0) else -quotient


EXACT = ExactFractionOperations()
FRACTION = FractionOperations()
SYMPY = SympyRationalOperations()
FLOAT = FloatOperations()
INTEGER = IntegerOperations()
