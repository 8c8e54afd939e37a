from __future__ import annotations


__copyright__ = "Copyright (C) 2026 abstensor contributors"

__license__ = """
Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

import numpy as np


# {{{ docs

__doc__ = """
.. currentmodule:: abstensor.rings

Rings
-----

A ring supplies the two operations a :class:`~abstensor.Tensor` needs to
multiply and contract its entries. Rings carry no state; two rings are the
same ring iff they are instances of the same class.

.. autoclass:: Ring
.. autoclass:: IntegerRing
.. autoclass:: RealRing
.. autoclass:: ComplexRing
.. autoclass:: StringRing

.. data:: INTEGER
.. data:: REAL
.. data:: COMPLEX
.. data:: STRING

Functions over a ring
---------------------

.. autoclass:: Function
.. autofunction:: make_int_function
.. autofunction:: make_real_function
.. autofunction:: make_complex_function
.. autofunction:: make_string_function
"""

# }}}


ScalarT = TypeVar("ScalarT")


# {{{ ring interface

class Ring(ABC, Generic[ScalarT]):
    """
    .. attribute:: name
    .. attribute:: numpy_dtype

        The :class:`numpy.dtype` used when materializing a tensor over this
        ring with :meth:`~abstensor.Tensor.to_numpy`.

    .. automethod:: add
    .. automethod:: multiply
    .. automethod:: coerce
    """
    name: str
    numpy_dtype: np.dtype[Any]

    @abstractmethod
    def add(self, a: ScalarT, b: ScalarT) -> ScalarT:
        ...

    @abstractmethod
    def multiply(self, a: ScalarT, b: ScalarT) -> ScalarT:
        ...

    @abstractmethod
    def coerce(self, value: Any) -> ScalarT:
        """Convert *value* (e.g. a :mod:`numpy` scalar) to this ring's
        Python scalar type."""

    def __hash__(self) -> int:
        return hash(type(self))

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __str__(self) -> str:
        return self.name


class _NumberRing(Ring[ScalarT]):
    def add(self, a: ScalarT, b: ScalarT) -> ScalarT:
        return a + b  # type: ignore[operator]

    def multiply(self, a: ScalarT, b: ScalarT) -> ScalarT:
        return a * b  # type: ignore[operator]


class IntegerRing(_NumberRing[int]):
    name = "integer"
    numpy_dtype = np.dtype(np.int64)

    def coerce(self, value: Any) -> int:
        return int(value)


class RealRing(_NumberRing[float]):
    name = "real"
    numpy_dtype = np.dtype(np.float64)

    def coerce(self, value: Any) -> float:
        return float(value)


class ComplexRing(_NumberRing[complex]):
    name = "complex"
    numpy_dtype = np.dtype(np.complex128)

    def coerce(self, value: Any) -> complex:
        return complex(value)


class StringRing(Ring[str]):
    """
    A diagnostic ring over strings. Products are written as ``(x)(y)`` and
    sums as ``x + y``, so that a reified result spells out which entries
    were combined.
    """
    name = "string"
    numpy_dtype = np.dtype(object)

    def add(self, a: str, b: str) -> str:
        return f"{a} + {b}"

    def multiply(self, a: str, b: str) -> str:
        return f"({a})({b})"

    def coerce(self, value: Any) -> str:
        return str(value)


INTEGER = IntegerRing()
REAL = RealRing()
COMPLEX = ComplexRing()
STRING = StringRing()

# }}}


# {{{ unary functions bound to a ring

@dataclass(frozen=True)
class Function(Generic[ScalarT]):
    """
    A unary map over the scalars of :attr:`ring`, see
    :func:`~abstensor.apply`.

    .. attribute:: fn
    .. attribute:: ring
    """
    fn: Callable[[ScalarT], ScalarT]
    ring: Ring[ScalarT]

    def __call__(self, value: ScalarT) -> ScalarT:
        return self.fn(value)


def make_int_function(fn: Callable[[int], int]) -> Function[int]:
    return Function(fn, INTEGER)


def make_real_function(fn: Callable[[float], float]) -> Function[float]:
    """
    :arg fn: e.g. a sigmoid, applied entrywise by :func:`~abstensor.apply`.
    """
    return Function(fn, REAL)


def make_complex_function(fn: Callable[[complex], complex]) -> Function[complex]:
    return Function(fn, COMPLEX)


def make_string_function(fn: Callable[[str], str]) -> Function[str]:
    return Function(fn, STRING)

# }}}

# vim: foldmethod=marker
