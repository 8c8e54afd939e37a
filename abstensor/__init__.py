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

# {{{ debug control

import os


def _parse_debug_flag(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in ("1", "true", "yes", "on")


DEBUG_ENABLED = _parse_debug_flag(os.environ.get("ABSTENSOR_DEBUG"))


def set_debug_enabled(flag: bool) -> None:
    """Set whether :mod:`abstensor` should log and verify additional
    information during evaluation."""
    global DEBUG_ENABLED
    DEBUG_ENABLED = flag

# }}}


from abstensor.array import (
        DOWN, UP, Tensor,

        make_tensor, make_int_tensor, make_real_tensor, make_complex_tensor,
        make_string_tensor,

        make_scalar, make_int_scalar, make_real_scalar, make_complex_scalar,
        make_string_scalar,

        make_data_tensor,

        transpose, reshape, reify, materialize,
        )
from abstensor.diagnostic import (
        AbstensorError, AxisError, LabelError, ReshapeError, RingMismatchError,
        ShapeError, SignatureError,
        )
from abstensor.evaluation import (
        ApplyExpression, LabelledExpression, PlusExpression, Term,
        evaluate, term,
        )
from abstensor.operations import Profiler, apply, plus, product, trace
from abstensor.rings import (
        COMPLEX, INTEGER, REAL, STRING,
        ComplexRing, Function, IntegerRing, RealRing, Ring, StringRing,
        make_complex_function, make_int_function, make_real_function,
        make_string_function,
        )
from abstensor.visualization import get_ascii_table, show_ascii_table


__all__ = (
        "DEBUG_ENABLED", "set_debug_enabled",

        "UP", "DOWN", "Tensor",

        "make_tensor", "make_int_tensor", "make_real_tensor",
        "make_complex_tensor", "make_string_tensor",

        "make_scalar", "make_int_scalar", "make_real_scalar",
        "make_complex_scalar", "make_string_scalar",

        "make_data_tensor",

        "transpose", "reshape", "reify", "materialize",

        "Profiler", "product", "trace", "apply", "plus",

        "LabelledExpression", "Term", "ApplyExpression", "PlusExpression",
        "term", "evaluate",

        "Ring", "IntegerRing", "RealRing", "ComplexRing", "StringRing",
        "INTEGER", "REAL", "COMPLEX", "STRING",

        "Function", "make_int_function", "make_real_function",
        "make_complex_function", "make_string_function",

        "AbstensorError", "ShapeError", "RingMismatchError", "LabelError",
        "SignatureError", "ReshapeError", "AxisError",

        "get_ascii_table", "show_ascii_table",
        )
