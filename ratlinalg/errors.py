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
"""Exceptions raised by the ratlinalg package

Every error is a caller-input contract violation and is raised immediately.
Each class also derives from the builtin exception a Python caller would
naturally catch, so ``except ValueError`` or ``except ZeroDivisionError``
keeps working for code that does not know about this module."""

__all__ = [
    "LinearAlgebraError", "InvalidDimension", "SizeMismatch", "RaggedInput", "OutOfRange", "NotSquare", "DivisionByZero",
    "SingularMatrix"
]


class LinearAlgebraError(Exception):
    """Base class of all ratlinalg errors"""


class InvalidDimension(LinearAlgebraError, ValueError):
    """A matrix was requested with zero (or negative) rows or columns"""


class SizeMismatch(LinearAlgebraError, ValueError):
    """Operand shapes or initializer lengths are incompatible"""


class RaggedInput(LinearAlgebraError, ValueError):
    """Nested row or column initializers have unequal lengths"""


class OutOfRange(LinearAlgebraError, IndexError):
    """A row or column index lies outside the matrix"""


class NotSquare(LinearAlgebraError, ValueError):
    """The operation is only defined for square matrices"""


class DivisionByZero(LinearAlgebraError, ZeroDivisionError):
    """Zero denominator, or division by a zero scalar"""


class SingularMatrix(DivisionByZero):
    """A square matrix has no inverse"""


def check_dimensions(rows, cols):
    if rows <= 0 or cols <= 0:
        raise InvalidDimension(f"Matrix dimensions must be positive, got {rows}x{cols}.")
