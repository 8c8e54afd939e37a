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

from typing import Any

import numpy as np

from abstensor.array import Tensor, reify


__doc__ = """
.. currentmodule:: abstensor

Text Rendering
--------------

.. autofunction:: get_ascii_table
.. autofunction:: show_ascii_table
"""


# {{{ show reified tensor as ASCII table

def _index_labels(tensor: Tensor[Any], axes: tuple[int, ...]) -> list[str]:
    dims = [tensor.dimension[iaxis] for iaxis in axes]
    return [",".join(str(i) for i in idx) for idx in np.ndindex(*dims)]


def get_ascii_table(tensor: Tensor[Any], tablefmt: str = "simple") -> str:
    """Return a string showing the entries of *tensor* as laid out by
    :func:`~abstensor.reify`, using the `tabulate
    <https://pypi.org/project/tabulate/>`_ package.

    Each row is headed by the values of the contravariant indices it
    corresponds to, each column by the values of the covariant indices.

    :arg tablefmt: any table format understood by :func:`tabulate.tabulate`.
    """
    from tabulate import tabulate

    up_axes, down_axes = tensor._variance_axes()
    table = tabulate(reify(tensor),
                     headers=_index_labels(tensor, down_axes),
                     showindex=_index_labels(tensor, up_axes),
                     tablefmt=tablefmt,
                     disable_numparse=True)

    return (f"signature '{tensor.signature}', "
            f"dimension {tensor.dimension}\n{table}")


def show_ascii_table(tensor: Tensor[Any]) -> None:
    """Print the table of *tensor* (cf. :func:`get_ascii_table`) to stdout."""
    print(get_ascii_table(tensor))

# }}}

# vim: foldmethod=marker
