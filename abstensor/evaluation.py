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
import logging
from collections import Counter
from typing import Any, Callable, ClassVar, Union

from abstensor.array import DOWN, UP, Tensor, reshape
from abstensor.diagnostic import LabelError
from abstensor.operations import Profiler, apply, plus, product, trace
from abstensor.rings import Function


logger = logging.getLogger(__name__)


# {{{ docs

__doc__ = """
.. currentmodule:: abstensor

Abstract Index Notation
-----------------------

Tensors are combined by attaching one label character to each of their axes,
with :meth:`Tensor.up` and :meth:`Tensor.down`, and multiplying the labelled
tensors into a :class:`Term`. Following the Einstein summation convention, a
label that occurs twice in a term denotes a contraction over the two axes it
is attached to::

    cross, _ = evaluate(eps.down("ijk") * v.up("j") * w.up("k"))

.. autoclass:: LabelledExpression
.. autoclass:: Term
.. autoclass:: ApplyExpression
.. autoclass:: PlusExpression

.. autofunction:: term
.. autofunction:: evaluate

.. currentmodule:: abstensor.evaluation

.. autoclass:: EvaluationMapper
"""

# }}}


# {{{ expression nodes

@dataclasses.dataclass(frozen=True)
class LabelledExpression:
    """
    A view of :attr:`tensor` with one index label and one variance marker per
    axis. Build these with :meth:`Tensor.up` and :meth:`Tensor.down`, which
    can be chained to mix variances on one tensor::

        t.up("ij").down("k")

    The variance given here overrides the tensor's own signature in the
    result of :func:`evaluate`.

    .. attribute:: tensor
    .. attribute:: labels
    .. attribute:: signature

    .. automethod:: up
    .. automethod:: down
    """
    tensor: Tensor[Any]
    labels: str = ""
    signature: str = ""

    _mapper_method: ClassVar[str] = "map_labelled_expression"

    def _with_labels(self, labels: str, variance: str) -> LabelledExpression:
        if not isinstance(labels, str):
            raise TypeError(f"labels must be a string, got '{type(labels)}'")

        return dataclasses.replace(self,
                                   labels=self.labels + labels,
                                   signature=self.signature
                                   + variance * len(labels))

    def up(self, labels: str) -> LabelledExpression:
        return self._with_labels(labels, UP)

    def down(self, labels: str) -> LabelledExpression:
        return self._with_labels(labels, DOWN)

    def __mul__(self, other: object) -> Term:
        return Term((self,)) * other

    def evaluate(self, *, memoize: bool = True) -> tuple[Tensor[Any], Profiler]:
        return evaluate(self, memoize=memoize)


@dataclasses.dataclass(frozen=True)
class Term:
    """
    A product of labelled tensors, with implicit summation over every label
    occurring twice.

    .. attribute:: factors

        A :class:`tuple` of :class:`LabelledExpression`, in product order.
    """
    factors: tuple[LabelledExpression, ...]

    _mapper_method: ClassVar[str] = "map_term"

    def __post_init__(self) -> None:
        object.__setattr__(self, "factors", tuple(self.factors))
        for factor in self.factors:
            if not isinstance(factor, LabelledExpression):
                raise TypeError(
                    f"factors of a term must be labelled, got '{type(factor)}'")

    def __mul__(self, other: object) -> Term:
        if isinstance(other, LabelledExpression):
            return Term((*self.factors, other))
        elif isinstance(other, Term):
            return Term((*self.factors, *other.factors))
        else:
            return NotImplemented

    def __len__(self) -> int:
        return len(self.factors)

    def evaluate(self, *, memoize: bool = True) -> tuple[Tensor[Any], Profiler]:
        return evaluate(self, memoize=memoize)


Operand = Union[Tensor[Any], LabelledExpression, Term,
                "ApplyExpression", "PlusExpression"]


@dataclasses.dataclass(frozen=True)
class ApplyExpression:
    """
    Entrywise application of :attr:`function` to the evaluated
    :attr:`operand`, see :func:`~abstensor.apply`.

    .. attribute:: function

        A :class:`~abstensor.rings.Function`, or an operand evaluating to a
        rank-0 tensor which then scales every entry.

    .. attribute:: operand
    """
    function: Union[Function[Any], Operand]
    operand: Operand

    _mapper_method: ClassVar[str] = "map_apply"

    def evaluate(self, *, memoize: bool = True) -> tuple[Tensor[Any], Profiler]:
        return evaluate(self, memoize=memoize)


@dataclasses.dataclass(frozen=True)
class PlusExpression:
    """
    Entrywise sum of the evaluated :attr:`left` and :attr:`right`, see
    :func:`~abstensor.plus`.

    .. attribute:: left
    .. attribute:: right
    """
    left: Operand
    right: Operand

    _mapper_method: ClassVar[str] = "map_plus"

    def evaluate(self, *, memoize: bool = True) -> tuple[Tensor[Any], Profiler]:
        return evaluate(self, memoize=memoize)


def term(*factors: LabelledExpression) -> Term:
    """Return the :class:`Term` multiplying *factors* in order."""
    return Term(factors)

# }}}


# {{{ term contraction

def _find_contraction(labels: str) -> tuple[int, int] | None:
    """Return the positions of the leftmost label occurring exactly twice in
    *labels*, or *None*."""
    counts = Counter(labels)
    for a, label in enumerate(labels):
        if counts[label] == 2:
            return a, labels.index(label, a + 1)

    return None


def _contract_term(expr: Term, profiler: Profiler,
                   memoize: bool) -> Tensor[Any]:
    if not expr.factors:
        raise LabelError("cannot evaluate an empty term")

    for factor in expr.factors:
        if len(factor.labels) != factor.tensor.rank:
            raise LabelError(
                f"labels '{factor.labels}' do not match the "
                f"{factor.tensor.rank} axes of {factor.tensor!r}")

    result = expr.factors[0].tensor
    for factor in expr.factors[1:]:
        result = product(result, factor.tensor, profiler)

    labels = "".join(factor.labels for factor in expr.factors)
    signature = "".join(factor.signature for factor in expr.factors)

    over_repeated = sorted(label for label, count in Counter(labels).items()
                           if count > 2)
    if over_repeated:
        raise LabelError(
            "index repeated more than twice: "
            + ", ".join(f"'{label}'" for label in over_repeated))

    from abstensor import DEBUG_ENABLED
    if DEBUG_ENABLED:
        logger.debug("tensor signature: '%s', requested signature: '%s', "
                     "indices: '%s'", result.signature, signature, labels)

    # contracted pairs may carry the same variance, e.g. Hadamard products
    # through a Dirac tensor
    while (contraction := _find_contraction(labels)) is not None:
        a, b = contraction
        logger.debug("contracting index '%s' over axes %d and %d",
                     labels[a], a, b)

        result = trace(result, a, b, profiler, memoize=memoize)
        labels = labels[:a] + labels[a+1:b] + labels[b+1:]
        signature = signature[:a] + signature[a+1:b] + signature[b+1:]

    result = reshape(result, signature)

    if DEBUG_ENABLED:
        free_labels = [label for label, count in Counter(labels).items()
                       if count == 1]
        logger.debug("result signature: '%s', free indices: '%s'",
                     result.signature, "".join(free_labels))
        if result.rank != len(free_labels):
            logger.warning("result has rank %d, expected %d free indices",
                           result.rank, len(free_labels))

    return result

# }}}


# {{{ evaluation

class EvaluationMapper:
    """
    Recursively evaluates an expression tree into a single
    :class:`~abstensor.Tensor`, counting ring operations in one shared
    :class:`~abstensor.Profiler`.

    .. automethod:: rec
    """

    def __init__(self, profiler: Profiler, memoize: bool = True) -> None:
        self.profiler = profiler
        self.memoize = memoize

    def rec(self, expr: Any) -> Tensor[Any]:
        method: Callable[[Any], Tensor[Any]]
        try:
            method = getattr(self, expr._mapper_method)
        except AttributeError:
            raise TypeError(
                f"{type(self).__name__} cannot evaluate objects of type "
                f"'{type(expr).__name__}'") from None

        return method(expr)

    __call__ = rec

    def map_tensor(self, expr: Tensor[Any]) -> Tensor[Any]:
        return expr

    def map_labelled_expression(self, expr: LabelledExpression) -> Tensor[Any]:
        return self.map_term(Term((expr,)))

    def map_term(self, expr: Term) -> Tensor[Any]:
        return _contract_term(expr, self.profiler, self.memoize)

    def map_apply(self, expr: ApplyExpression) -> Tensor[Any]:
        function = expr.function
        if not isinstance(function, Function):
            function = self.rec(function)

        return apply(function, self.rec(expr.operand))

    def map_plus(self, expr: PlusExpression) -> Tensor[Any]:
        return plus(self.rec(expr.left), self.rec(expr.right))


def evaluate(expr: Operand, *,
             memoize: bool = True) -> tuple[Tensor[Any], Profiler]:
    """
    Evaluate *expr* in abstract index notation.

    For a :class:`Term`, the outer product of all factors is formed first.
    Then, as long as some label occurs exactly twice, the two axes carrying
    the leftmost such label are contracted with :func:`~abstensor.trace`.
    The remaining axes keep their order and the variance given by the
    labels.

    Nothing is computed here beyond checking the labels; the returned tensor
    evaluates entries on demand.

    :arg memoize: passed to :func:`~abstensor.trace`.
    :returns: a tuple of the resulting :class:`~abstensor.Tensor` and a fresh
        :class:`~abstensor.Profiler` counting the ring operations performed
        on its behalf.
    :raises LabelError: if a label occurs more than twice, or if a tensor
        is not labelled once per axis.
    """
    profiler = Profiler()
    result = EvaluationMapper(profiler, memoize)(expr)
    return result, profiler

# }}}

# vim: foldmethod=marker
