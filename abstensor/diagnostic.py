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

__doc__ = """
.. currentmodule:: abstensor.diagnostic

.. autoclass:: AbstensorError
.. autoclass:: ShapeError
.. autoclass:: RingMismatchError
.. autoclass:: LabelError
.. autoclass:: SignatureError
.. autoclass:: ReshapeError
.. autoclass:: AxisError
"""


class AbstensorError(Exception):
    """Base class for all errors raised by :mod:`abstensor`."""


class ShapeError(AbstensorError, ValueError):
    """
    Raised when the dimensions of the axes involved in an operation do not
    agree, e.g. when contracting two axes of different sizes or adding
    tensors of different shapes.
    """


class RingMismatchError(AbstensorError, TypeError):
    """
    Raised when operands over different rings are combined.

    .. attribute:: left
    .. attribute:: right
    """

    def __init__(self, left: object, right: object, operation: str) -> None:
        super().__init__(
            f"{operation}: ring mismatch between '{left}' and '{right}'")
        self.left = left
        self.right = right


class LabelError(AbstensorError, ValueError):
    """
    Raised when the index labels of a :class:`~abstensor.Term` are ill-formed,
    e.g. a label occurs more than twice.
    """


class SignatureError(AbstensorError, ValueError):
    """Raised for a variance signature that does not match a tensor's axes."""


class ReshapeError(SignatureError):
    """Raised by :func:`~abstensor.reshape` for an invalid new signature."""


class AxisError(AbstensorError, IndexError):
    """Raised when an axis number is out of range for a tensor."""
