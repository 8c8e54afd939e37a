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
from typing import Any, Union

from immutabledict import immutabledict

from abstensor.array import Tensor
from abstensor.diagnostic import AxisError, RingMismatchError, ShapeError
from abstensor.rings import Function, ScalarT


__doc__ = """
.. currentmodule:: abstensor

Structural Operators
--------------------

All operators are lazy: they return a new :class:`Tensor` whose coordinate
function calls into the coordinate functions of the operands. No entry is
computed before it is queried.

.. autofunction:: product
.. autofunction:: trace
.. autofunction:: apply
.. autofunction:: plus

.. autoclass:: Profiler
"""


# {{{ profiler

@dataclasses.dataclass
class Profiler:
    """
    Counts the ring operations performed on behalf of one evaluation. Since
    tensors are lazy, the counts grow whenever entries of the resulting
    tensor are queried, e.g. by :func:`reify`.

    .. attribute:: multiplies
    .. attribute:: adds
    .. attribute:: cache_hits

        Number of entries of a contraction that were served from the
        contraction's cache instead of being summed again.

    .. automethod:: as_dict
    """
    multiplies: int = 0
    adds: int = 0
    cache_hits: int = 0

    def as_dict(self) -> immutabledict[str, int]:
        return immutabledict(dataclasses.asdict(self))

    def __str__(self) -> str:
        return (f"{self.multiplies} multiplies, {self.adds} adds, "
                f"{self.cache_hits} cache hits")

# }}}


def _check_same_ring(t1: Tensor[Any], ring: Any, operation: str) -> None:
    if t1.ring != ring:
        raise RingMismatchError(t1.ring, ring, operation)


# {{{ product

def product(t1: Tensor[ScalarT], t2: Tensor[ScalarT],
            profiler: Profiler | None = None) -> Tensor[ScalarT]:
    """
    Return the outer product of *t1* and *t2*: its axes are the axes of *t1*
    followed by the axes of *t2*, and each entry is the ring product of the
    corresponding entries. No summation takes place.

    :arg profiler: if given, its :attr:`Profiler.multiplies` is incremented
        on each evaluated entry.
    """
    _check_same_ring(t1, t2.ring, "product")

    ring = t1.ring
    rank1 = t1.rank
    f1 = t1.coordinate_fn
    f2 = t2.coordinate_fn

    def coordinate_fn(*idx: int) -> ScalarT:
        if profiler is not None:
            profiler.multiplies += 1
        return ring.multiply(f1(*idx[:rank1]), f2(*idx[rank1:]))

    return Tensor(coordinate_fn,
                  t1.signature + t2.signature,
                  t1.dimension + t2.dimension,
                  ring)

# }}}


# {{{ trace

def trace(tensor: Tensor[ScalarT], a: int, b: int,
          profiler: Profiler | None = None,
          *, memoize: bool = True) -> Tensor[ScalarT]:
    """
    Contract axes *a* and *b* of *tensor*, i.e. sum the entries along the
    diagonal of the two axes. The result has rank two less than *tensor*,
    the remaining axes keep their order. The order of *a* and *b* does not
    matter.

    :arg memoize: if *True*, every entry of the result is summed only once
        and then served from a cache private to the returned tensor.
    :raises ShapeError: if the two axes have different lengths.
    """
    rank = tensor.rank
    for axis in (a, b):
        if not 0 <= axis < rank:
            raise AxisError(
                f"axis {axis} out of range for a tensor of rank {rank}")
    if a == b:
        raise AxisError(f"cannot contract axis {a} with itself")

    if b < a:
        a, b = b, a

    axis_len = tensor.dimension[a]
    if axis_len != tensor.dimension[b]:
        raise ShapeError(
            f"cannot contract axis {a} (length {axis_len}) with axis {b} "
            f"(length {tensor.dimension[b]})")

    ring = tensor.ring
    inner_fn = tensor.coordinate_fn
    cache: dict[tuple[int, ...], ScalarT] = {}

    def coordinate_fn(*idx: int) -> ScalarT:
        if memoize:
            try:
                result = cache[idx]
            except KeyError:
                pass
            else:
                if profiler is not None:
                    profiler.cache_hits += 1
                return result

        # idx is missing the two contracted axes, 'a' then 'b' in the full
        # index since a < b
        inner = [*idx[:a], 0, *idx[a:b-1], 0, *idx[b-1:]]

        result = inner_fn(*inner)
        for k in range(1, axis_len):
            inner[a] = inner[b] = k
            result = ring.add(result, inner_fn(*inner))
            if profiler is not None:
                profiler.adds += 1

        if memoize:
            cache[idx] = result
        return result

    signature = "".join(variance for iaxis, variance
                        in enumerate(tensor.signature) if iaxis not in (a, b))
    dimension = tuple(length for iaxis, length
                      in enumerate(tensor.dimension) if iaxis not in (a, b))

    return Tensor(coordinate_fn, signature, dimension, ring)

# }}}


# {{{ elementwise operations

def apply(function: Union[Function[ScalarT], Tensor[ScalarT]],
          tensor: Tensor[ScalarT]) -> Tensor[ScalarT]:
    """
    Apply *function* to every entry of *tensor*.

    :arg function: a :class:`~abstensor.rings.Function` over the ring of
        *tensor*, or a rank-0 :class:`Tensor` over that ring by whose entry
        every entry of *tensor* is multiplied.
    :raises RingMismatchError: if *function* belongs to a different ring.
    """
    if isinstance(function, Tensor):
        _check_same_ring(function, tensor.ring, "apply")
        if function.rank != 0:
            raise ShapeError(
                f"can only scale by a rank-0 tensor, got rank {function.rank}")

        ring = tensor.ring
        scalar_fn = function.coordinate_fn

        def fn(value: ScalarT) -> ScalarT:
            return ring.multiply(scalar_fn(), value)
    elif isinstance(function, Function):
        if function.ring != tensor.ring:
            raise RingMismatchError(function.ring, tensor.ring, "apply")
        fn = function.fn
    else:
        raise TypeError(
            f"expected a Function or a rank-0 Tensor, got '{type(function)}'")

    inner_fn = tensor.coordinate_fn

    def coordinate_fn(*idx: int) -> ScalarT:
        return fn(inner_fn(*idx))

    return dataclasses.replace(tensor, coordinate_fn=coordinate_fn)


def plus(t1: Tensor[ScalarT], t2: Tensor[ScalarT]) -> Tensor[ScalarT]:
    """
    Return the entrywise sum of *t1* and *t2*, which must be over the same
    ring and have the same signature and dimension. Nothing is broadcast.
    """
    _check_same_ring(t1, t2.ring, "plus")

    if t1.dimension != t2.dimension:
        raise ShapeError(
            f"cannot add tensors of dimension {t1.dimension} and "
            f"{t2.dimension}")
    if t1.signature != t2.signature:
        raise ShapeError(
            f"cannot add tensors of signature '{t1.signature}' and "
            f"'{t2.signature}'")

    ring = t1.ring
    f1 = t1.coordinate_fn
    f2 = t2.coordinate_fn

    def coordinate_fn(*idx: int) -> ScalarT:
        return ring.add(f1(*idx), f2(*idx))

    return dataclasses.replace(t1, coordinate_fn=coordinate_fn)

# }}}

# vim: foldmethod=marker
