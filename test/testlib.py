from __future__ import annotations

import cmath
import itertools
from typing import Any, Sequence

import abstensor as at


# {{{ tensor fixtures

def make_vec(*entries: int) -> at.Tensor[int]:
    return at.make_int_tensor(lambda i: entries[i], "u", [len(entries)])


def make_row(*entries: int) -> at.Tensor[int]:
    return at.make_int_tensor(lambda i: entries[i], "d", [len(entries)])


def make_real_vec(*entries: float) -> at.Tensor[float]:
    return at.make_real_tensor(lambda i: entries[i], "u", [len(entries)])


def make_matrix(rows: Sequence[Sequence[Any]],
                ring: at.Ring[Any] = at.INTEGER) -> at.Tensor[Any]:
    vals = [list(row) for row in rows]
    return at.make_tensor(ring, lambda i, j: vals[i][j], "ud",
                          [len(vals), len(vals[0])])


def make_string_matrix(rows: Sequence[Sequence[str]]) -> at.Tensor[str]:
    return make_matrix(rows, at.STRING)


def make_real_matrix(rows: Sequence[Sequence[float]]) -> at.Tensor[float]:
    return make_matrix(rows, at.REAL)


def _levi_civita(*idx: int) -> int:
    if sorted(idx) != list(range(len(idx))):
        return 0
    inversions = sum(1 for a, b in itertools.combinations(idx, 2) if a > b)
    return -1 if inversions % 2 else 1


def make_levi_civita() -> at.Tensor[int]:
    """Levi-Civita symbol on three letters."""
    return at.make_int_tensor(_levi_civita, "ddd", [3, 3, 3])


def make_diagonal(*entries: int) -> at.Tensor[int]:
    def coordinate_fn(i: int, j: int) -> int:
        return entries[i] if i == j else 0

    return at.make_int_tensor(coordinate_fn, "ud", [len(entries)]*2)


def _all_equal(*idx: int) -> bool:
    return all(i == idx[0] for i in idx)


def make_dirac3(size: int, signature: str = "udd") -> at.Tensor[int]:
    """The rank-3 tensor that is 1 where all three indices agree."""
    return at.make_int_tensor(lambda *idx: int(_all_equal(*idx)),
                              signature, [size]*3)


def make_complex_dirac3(size: int) -> at.Tensor[complex]:
    return at.make_complex_tensor(lambda *idx: complex(_all_equal(*idx)),
                                  "dud", [size]*3)


def make_digits_tensor(signature: str,
                       dimension: Sequence[int]) -> at.Tensor[int]:
    """Each entry spells out its own index, prefixed by a 9, e.g. the entry
    at ``(1, 0, 2)`` is ``9102``."""
    def coordinate_fn(*idx: int) -> int:
        return int("9" + "".join(str(i) for i in idx))

    return at.make_int_tensor(coordinate_fn, signature, dimension)


def make_dft(n: int) -> at.Tensor[complex]:
    roots = [cmath.exp(-2j*cmath.pi*k/n) for k in range(n)]
    return at.make_complex_tensor(lambda i, j: roots[i*j % n], "ud", [n, n])


def make_idft(n: int) -> at.Tensor[complex]:
    """Inverse of :func:`make_dft`: its conjugate, scaled by *1/n*."""
    roots = [cmath.exp(2j*cmath.pi*k/n) / n for k in range(n)]
    return at.make_complex_tensor(lambda i, j: roots[i*j % n], "ud", [n, n])


def make_embedding(input_dim: int, output_dim: int) -> at.Tensor[complex]:
    """Zero-pads a vector of length *input_dim* to length *output_dim*."""
    return at.make_complex_tensor(lambda i, j: complex(i == j), "ud",
                                  [output_dim, input_dim])


def make_complex_vec(*entries: complex) -> at.Tensor[complex]:
    return at.make_complex_tensor(lambda i: complex(entries[i]), "u",
                                  [len(entries)])

# }}}

# vim: foldmethod=marker
