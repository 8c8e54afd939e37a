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

import dataclasses
import operator
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    ClassVar,
    Generic,
    Iterable,
    Sequence,
)

import numpy as np
from pytools import memoize_method, product

from abstensor.diagnostic import (
    AxisError,
    RingMismatchError,
    ReshapeError,
    ShapeError,
    SignatureError,
)
from abstensor.rings import (
    COMPLEX,
    INTEGER,
    REAL,
    STRING,
    Ring,
    ScalarT,
)


if TYPE_CHECKING:
    from abstensor.evaluation import LabelledExpression


# {{{ docs

__doc__ = """
.. currentmodule:: abstensor

Tensors
-------

.. autoclass:: Tensor

.. data:: UP

    Variance marker of a contravariant axis, ``"u"``.

.. data:: DOWN

    Variance marker of a covariant axis, ``"d"``.

Tensor Creation
---------------

.. autofunction:: make_tensor
.. autofunction:: make_int_tensor
.. autofunction:: make_real_tensor
.. autofunction:: make_complex_tensor
.. autofunction:: make_string_tensor
.. autofunction:: make_scalar
.. autofunction:: make_int_scalar
.. autofunction:: make_real_scalar
.. autofunction:: make_complex_scalar
.. autofunction:: make_string_scalar
.. autofunction:: make_data_tensor

Axis Manipulation and Materialization
-------------------------------------

.. autofunction:: transpose
.. autofunction:: reshape
.. autofunction:: reify
.. autofunction:: materialize
"""

# }}}


UP = "u"
DOWN = "d"

CoordinateFunction = Callable[..., Any]


# {{{ validation helpers

def _normalize_signature(signature: str | Iterable[str]) -> str:
    if not isinstance(signature, str):
        signature = "".join(signature)

    for variance in signature:
        if variance not in (UP, DOWN):
            raise SignatureError(
                f"invalid variance marker '{variance}' in signature "
                f"'{signature}' (expected '{UP}' or '{DOWN}')")

    return signature


def _normalize_dimension(dimension: Iterable[int]) -> tuple[int, ...]:
    result = []
    for axis_len in dimension:
        try:
            axis_len = operator.index(axis_len)
        except TypeError:
            raise ShapeError(
                f"axis length '{axis_len}' is not an integer") from None
        if axis_len <= 0:
            raise ShapeError(f"axis length must be positive, got {axis_len}")
        result.append(axis_len)

    return tuple(result)

# }}}


# {{{ tensor

@dataclasses.dataclass(frozen=True, repr=False)
class Tensor(Generic[ScalarT]):
    r"""
    A lazily evaluated multi-axis array. No entries are stored: every entry
    is computed on demand by calling :attr:`coordinate_fn`.

    Tensors are immutable. Operators such as :func:`product` or
    :func:`trace` return new tensors whose coordinate functions close over
    the coordinate functions of their inputs. Accessing one entry of a
    deeply derived tensor therefore costs time proportional to the length
    of that chain, see :func:`materialize` to cut it.

    .. attribute:: coordinate_fn

        Called as ``coordinate_fn(i_0, i_1, ...)`` with one in-bounds integer
        per axis, returns a scalar of :attr:`ring`.

    .. attribute:: signature

        A :class:`str` with one variance marker (:data:`UP` or :data:`DOWN`)
        per axis.

    .. attribute:: dimension

        A :class:`tuple` with the (positive) length of each axis.

    .. attribute:: ring

        The :class:`~abstensor.rings.Ring` of the entries.

    .. attribute:: rank

    .. automethod:: up
    .. automethod:: down
    .. automethod:: reshape
    .. automethod:: reify
    .. automethod:: to_numpy
    .. automethod:: __getitem__
    """
    coordinate_fn: CoordinateFunction
    signature: str
    dimension: tuple[int, ...]
    ring: Ring[ScalarT]

    _mapper_method: ClassVar[str] = "map_tensor"

    def __post_init__(self) -> None:
        object.__setattr__(self, "signature",
                           _normalize_signature(self.signature))
        object.__setattr__(self, "dimension",
                           _normalize_dimension(self.dimension))

        if len(self.signature) != len(self.dimension):
            raise SignatureError(
                f"signature '{self.signature}' has {len(self.signature)} "
                f"axes, dimension {self.dimension} has {len(self.dimension)}")

        if not isinstance(self.ring, Ring):
            raise TypeError(f"expected a Ring, got '{type(self.ring)}'")

    @property
    def rank(self) -> int:
        return len(self.dimension)

    @property
    def size(self) -> int:
        return product(self.dimension)

    @memoize_method
    def _variance_axes(self) -> tuple[tuple[int, ...], tuple[int, ...]]:
        """Return the positions of the contravariant and of the covariant
        axes, each in signature order."""
        up_axes = tuple(iaxis for iaxis, variance in enumerate(self.signature)
                        if variance == UP)
        down_axes = tuple(iaxis for iaxis, variance
                          in enumerate(self.signature) if variance == DOWN)
        return up_axes, down_axes

    def __getitem__(self, idx: int | tuple[int, ...]) -> ScalarT:
        """Evaluate the entry at *idx*, with bounds checking."""
        if not isinstance(idx, tuple):
            idx = (idx,)

        if len(idx) != self.rank:
            raise IndexError(
                f"expected {self.rank} indices, got {len(idx)}")

        idx = tuple(operator.index(i) for i in idx)
        for iaxis, (i, axis_len) in enumerate(zip(idx, self.dimension)):
            if not 0 <= i < axis_len:
                raise IndexError(
                    f"index {i} out of bounds for axis {iaxis} "
                    f"of length {axis_len}")

        return self.coordinate_fn(*idx)

    # {{{ labelling

    def up(self, labels: str) -> LabelledExpression:
        """Attach contravariant index *labels* to the next axes of *self*,
        see :class:`~abstensor.LabelledExpression`."""
        from abstensor.evaluation import LabelledExpression
        return LabelledExpression(self).up(labels)

    def down(self, labels: str) -> LabelledExpression:
        """Attach covariant index *labels* to the next axes of *self*."""
        from abstensor.evaluation import LabelledExpression
        return LabelledExpression(self).down(labels)

    # }}}

    def reshape(self, signature: str | Iterable[str]) -> Tensor[ScalarT]:
        return reshape(self, signature)

    def reify(self) -> list[list[ScalarT]]:
        return reify(self)

    def to_numpy(self) -> np.ndarray[Any, Any]:
        """
        Return all entries of *self* as a :class:`numpy.ndarray` of shape
        :attr:`dimension`, with the dtype
        :attr:`~abstensor.rings.Ring.numpy_dtype` of the ring.

        :raises OverflowError: if an entry of an integer tensor does not fit
            into :class:`numpy.int64`. Use :func:`materialize` to store
            such entries.
        """
        return _collect_entries(self, self.ring.numpy_dtype)

    def __repr__(self) -> str:
        return (f"Tensor(signature='{self.signature}', "
                f"dimension={self.dimension}, ring={self.ring})")

    def __str__(self) -> str:
        rows = "\n".join(
            " ".join(str(entry) for entry in row) for row in reify(self))
        return f"{rows}\n{self.signature} signature\n"

# }}}


# {{{ tensor creation

def make_tensor(ring: Ring[ScalarT],
                coordinate_fn: CoordinateFunction,
                signature: str | Iterable[str],
                dimension: Sequence[int]) -> Tensor[ScalarT]:
    """
    Create a :class:`Tensor` over *ring* whose entries are given by
    *coordinate_fn*.

    :arg signature: one of :data:`UP` or :data:`DOWN` per axis, e.g.
        ``"ud"`` for a matrix.
    :arg dimension: the length of each axis.
    """
    return Tensor(coordinate_fn, signature, tuple(dimension), ring)


def make_int_tensor(coordinate_fn: Callable[..., int],
                    signature: str | Iterable[str],
                    dimension: Sequence[int]) -> Tensor[int]:
    return make_tensor(INTEGER, coordinate_fn, signature, dimension)


def make_real_tensor(coordinate_fn: Callable[..., float],
                     signature: str | Iterable[str],
                     dimension: Sequence[int]) -> Tensor[float]:
    return make_tensor(REAL, coordinate_fn, signature, dimension)


def make_complex_tensor(coordinate_fn: Callable[..., complex],
                        signature: str | Iterable[str],
                        dimension: Sequence[int]) -> Tensor[complex]:
    return make_tensor(COMPLEX, coordinate_fn, signature, dimension)


def make_string_tensor(coordinate_fn: Callable[..., str],
                       signature: str | Iterable[str],
                       dimension: Sequence[int]) -> Tensor[str]:
    return make_tensor(STRING, coordinate_fn, signature, dimension)


def make_scalar(ring: Ring[ScalarT], value: ScalarT) -> Tensor[ScalarT]:
    """Create a rank-0 :class:`Tensor` with the single entry *value*."""
    return make_tensor(ring, lambda: value, "", ())


def make_int_scalar(value: int) -> Tensor[int]:
    return make_scalar(INTEGER, value)


def make_real_scalar(value: float) -> Tensor[float]:
    return make_scalar(REAL, value)


def make_complex_scalar(value: complex) -> Tensor[complex]:
    return make_scalar(COMPLEX, value)


def make_string_scalar(value: str) -> Tensor[str]:
    return make_scalar(STRING, value)


_DTYPE_KIND_TO_RING: dict[str, Ring[Any]] = {
    "b": INTEGER,
    "i": INTEGER,
    "u": INTEGER,
    "f": REAL,
    "c": COMPLEX,
    "U": STRING,
    "S": STRING,
}


def make_data_tensor(data: Any,
                     signature: str | Iterable[str]) -> Tensor[Any]:
    """
    Create a :class:`Tensor` backed by a copy of the array *data*. The ring
    is inferred from the data type: booleans and integers map to
    :data:`~abstensor.rings.INTEGER`, floating point numbers to
    :data:`~abstensor.rings.REAL`, complex numbers to
    :data:`~abstensor.rings.COMPLEX` and strings to
    :data:`~abstensor.rings.STRING`.

    :raises RingMismatchError: for any other data type, including object
        arrays, whose entries need not belong to a single ring.
    """
    data = np.array(data, copy=True)
    data.flags.writeable = False

    try:
        ring = _DTYPE_KIND_TO_RING[data.dtype.kind]
    except KeyError:
        raise RingMismatchError(data.dtype, "any known ring",
                                "make_data_tensor") from None

    def coordinate_fn(*idx: int) -> Any:
        return ring.coerce(data[idx])

    return Tensor(coordinate_fn, signature, data.shape, ring)

# }}}


# {{{ axis manipulation

def transpose(tensor: Tensor[ScalarT], a: int, b: int) -> Tensor[ScalarT]:
    """
    Return a :class:`Tensor` with axes *a* and *b* of *tensor* swapped. The
    two axes trade their variance, their length and their position in the
    arguments of the coordinate function.
    """
    for axis in (a, b):
        if not 0 <= axis < tensor.rank:
            raise AxisError(
                f"axis {axis} out of range for a tensor of rank {tensor.rank}")

    if b < a:
        a, b = b, a

    signature = list(tensor.signature)
    signature[a], signature[b] = signature[b], signature[a]
    dimension = list(tensor.dimension)
    dimension[a], dimension[b] = dimension[b], dimension[a]

    inner_fn = tensor.coordinate_fn

    def coordinate_fn(*idx: int) -> ScalarT:
        swapped = list(idx)
        swapped[a], swapped[b] = swapped[b], swapped[a]
        return inner_fn(*swapped)

    return Tensor(coordinate_fn, "".join(signature), tuple(dimension),
                  tensor.ring)


def reshape(tensor: Tensor[ScalarT],
            signature: str | Iterable[str]) -> Tensor[ScalarT]:
    """
    Return a :class:`Tensor` with the entries and dimension of *tensor* but
    the variance markers of *signature*. Useful to change the role of an
    axis after a contraction, e.g. before :func:`reify`.

    :raises ReshapeError: if *signature* does not have one valid marker per
        axis of *tensor*.
    """
    try:
        signature = _normalize_signature(signature)
    except SignatureError as err:
        raise ReshapeError(str(err)) from err

    if len(signature) != tensor.rank:
        raise ReshapeError(
            f"cannot reshape a tensor of rank {tensor.rank} to signature "
            f"'{signature}'")

    return dataclasses.replace(tensor, signature=signature)

# }}}


# {{{ materialization

def _collect_entries(tensor: Tensor[Any],
                     dtype: np.dtype[Any]) -> np.ndarray[Any, Any]:
    result = np.empty(tensor.dimension, dtype=dtype)
    for idx in np.ndindex(*tensor.dimension):
        result[idx] = tensor.coordinate_fn(*idx)

    return result


def reify(tensor: Tensor[ScalarT]) -> list[list[ScalarT]]:
    """
    Evaluate every entry of *tensor* into a two-dimensional table.

    The contravariant axes, in signature order, are flattened (row-major)
    into the row index, the covariant axes into the column index. A rank-0
    tensor gives a 1x1 table, an all-contravariant tensor a column and an
    all-covariant tensor a row.

    For example, three contravariant axes of lengths 1, 2 and 3 and one
    covariant axis of length 4 give a table of 6 rows and 4 columns.

    .. note::

        This is merely one of many ways of showing a tensor as a matrix, it
        carries no meaning beyond display and testing.
    """
    up_axes, down_axes = tensor._variance_axes()
    up_dims = [tensor.dimension[iaxis] for iaxis in up_axes]
    down_dims = [tensor.dimension[iaxis] for iaxis in down_axes]

    idx = [0] * tensor.rank
    table = []
    for row_idx in np.ndindex(*up_dims):
        for iaxis, i in zip(up_axes, row_idx):
            idx[iaxis] = i

        row = []
        for col_idx in np.ndindex(*down_dims):
            for iaxis, i in zip(down_axes, col_idx):
                idx[iaxis] = i
            row.append(tensor.coordinate_fn(*idx))

        table.append(row)

    return table


def materialize(tensor: Tensor[ScalarT]) -> Tensor[ScalarT]:
    """
    Evaluate every entry of *tensor* once and return an equivalent
    :class:`Tensor` backed by the stored entries. Subsequent accesses no
    longer go through the chain of coordinate functions *tensor* was
    derived from.
    """
    data = _collect_entries(tensor, np.dtype(object))
    data.flags.writeable = False

    def coordinate_fn(*idx: int) -> ScalarT:
        return data[idx]

    return Tensor(coordinate_fn, tensor.signature, tensor.dimension,
                  tensor.ring)

# }}}

# vim: foldmethod=marker
