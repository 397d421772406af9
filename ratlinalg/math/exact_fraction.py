"""
Exact rational numbers for elimination without rounding.

ExactFraction stores a numerator/denominator pair of Python ints (arbitrary
precision) that is always kept in lowest terms with a positive denominator.
Because the representation is canonical, two fractions are equal exactly when
their stored fields are identical.
"""

from fractions import Fraction
import math
import numbers

from ..errors import DivisionByZero


class ExactFraction:
    """
    Immutable rational value in canonical (reduced) form.

    Arithmetic with ``int`` or another ExactFraction always returns a new,
    normalized instance. The in-place operators rebind the name to a new value.
    """

    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator: int, denominator: int = 1):
        """
        Args:
            numerator: Integer numerator
            denominator: Integer denominator (default 1)

        Raises:
            TypeError: If numerator or denominator is not an integer (use
                ``value_of`` to convert floats, Fraction or sympy values)
            DivisionByZero: If denominator is zero
        """
        if not isinstance(numerator, numbers.Integral) or not isinstance(denominator, numbers.Integral):
            raise TypeError(f"ExactFraction requires integer arguments, got "
                            f"{type(numerator).__name__} and {type(denominator).__name__}.")
        if denominator == 0:
            raise DivisionByZero(f"Denominator cannot be zero ({numerator}/0).")
        self._numerator, self._denominator = self._normalize(int(numerator), int(denominator))

    @staticmethod
    def _normalize(numerator: int, denominator: int):
        # Euclid on the magnitudes; the sign always lives in the numerator
        divisor = math.gcd(abs(numerator), abs(denominator))
        if denominator < 0:
            divisor = -divisor
        return numerator // divisor, denominator // divisor

    @classmethod
    def _from_reduced(cls, numerator: int, denominator: int) -> 'ExactFraction':
        result = cls.__new__(cls)
        result._numerator = numerator
        result._denominator = denominator
        return result

    @classmethod
    def from_integer(cls, value: int) -> 'ExactFraction':
        """Whole number ``value/1``"""
        return cls(value, 1)

    @classmethod
    def value_of(cls, value) -> 'ExactFraction':
        """
        Build an ExactFraction from the value types used around the library.

        Accepts ExactFraction, int, ``fractions.Fraction``, ``sympy.Rational``
        (anything exposing integer ``p``/``q``), strings of the form ``"n"`` or
        ``"n/d"`` and floats (approximated with ``limit_denominator``).
        """
        if isinstance(value, ExactFraction):
            return value
        if isinstance(value, bool):
            return cls(int(value))
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, Fraction):
            return cls._from_reduced(value.numerator, value.denominator)
        if isinstance(value, str):
            text = value.strip()
            if '/' in text:
                parts = text.split('/')
                if len(parts) != 2:
                    raise ValueError(f"Invalid fraction format: {value}")
                return cls(int(parts[0]), int(parts[1]))
            return cls.value_of(Fraction(text))
        if isinstance(value, float):
            return cls.value_of(Fraction(value).limit_denominator())
        if hasattr(value, 'p') and hasattr(value, 'q'):
            # sympy.Rational and sympy.Integer
            return cls(int(value.p), int(value.q))
        raise TypeError(f"Cannot convert {type(value).__name__} to ExactFraction")

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_one(self) -> bool:
        return self._numerator == 1 and self._denominator == 1

    def is_integer(self) -> bool:
        return self._denominator == 1

    def signum(self) -> int:
        """Return sign: -1, 0, or 1"""
        return (self._numerator > 0) - (self._numerator < 0)

    def invert(self) -> 'ExactFraction':
        """Multiplicative inverse ``1/self``"""
        if self._numerator == 0:
            raise DivisionByZero("Cannot invert a zero fraction.")
        return ExactFraction(self._denominator, self._numerator)

    def to_fraction(self) -> Fraction:
        return Fraction(self._numerator, self._denominator)

    def to_sympy(self):
        from sympy import Rational
        return Rational(self._numerator, self._denominator)

    # Arithmetic

    @staticmethod
    def _coerce(other):
        if isinstance(other, ExactFraction):
            return other
        if isinstance(other, int):
            return ExactFraction(other)
        return None

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return ExactFraction(self._numerator * other._denominator + other._numerator * self._denominator,
                             self._denominator * other._denominator)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other + (-self)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return ExactFraction(self._numerator * other._numerator, self._denominator * other._denominator)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if other._numerator == 0:
            raise DivisionByZero(f"Cannot divide {self} by zero.")
        return ExactFraction(self._numerator * other._denominator, self._denominator * other._numerator)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    def __neg__(self) -> 'ExactFraction':
        return ExactFraction._from_reduced(-self._numerator, self._denominator)

    def __pos__(self) -> 'ExactFraction':
        return self

    def __abs__(self) -> 'ExactFraction':
        return ExactFraction._from_reduced(abs(self._numerator), self._denominator)

    # Comparison

    def __eq__(self, other) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._numerator == other._numerator and self._denominator == other._denominator

    def __hash__(self) -> int:
        # agrees with hash(int) for whole numbers
        return hash(self.to_fraction())

    def _compare(self, other):
        other = self._coerce(other)
        if other is None:
            return None
        return self._numerator * other._denominator - other._numerator * self._denominator

    def __lt__(self, other):
        diff = self._compare(other)
        return NotImplemented if diff is None else diff < 0

    def __le__(self, other):
        diff = self._compare(other)
        return NotImplemented if diff is None else diff <= 0

    def __gt__(self, other):
        diff = self._compare(other)
        return NotImplemented if diff is None else diff > 0

    def __ge__(self, other):
        diff = self._compare(other)
        return NotImplemented if diff is None else diff >= 0

    def __bool__(self) -> bool:
        return self._numerator != 0

    # Conversion

    def __float__(self) -> float:
        return self._numerator / self._denominator

    def __int__(self) -> int:
        # truncates toward zero like int(float)
        return int(self.to_fraction())

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"ExactFraction({self._numerator}, {self._denominator})"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (ExactFraction, (self._numerator, self._denominator))


ExactFraction.ZERO = ExactFraction(0)
ExactFraction.ONE = ExactFraction(1)
