#!/usr/bin/env python
"""Computes a cross product and a determinant with the Levi-Civita symbol."""

import itertools
import logging

import abstensor as at


logger = logging.getLogger(__name__)


def levi_civita(*idx):
    if sorted(idx) != list(range(len(idx))):
        return 0
    inversions = sum(1 for a, b in itertools.combinations(idx, 2) if a > b)
    return -1 if inversions % 2 else 1


def main():
    eps = at.make_int_tensor(levi_civita, "ddd", [3, 3, 3])
    v = at.make_int_tensor(lambda i: (2, 3, 4)[i], "u", [3])
    w = at.make_int_tensor(lambda i: (5, 6, 7)[i], "u", [3])

    cross, profiler = at.evaluate(eps.down("ijk") * v.up("j") * w.up("k"))
    at.show_ascii_table(cross)
    logger.info("cross product: %s", profiler)

    diag = at.make_int_tensor(lambda i, j: i + 1 if i == j else 0, "ud", [3, 3])
    det, profiler = at.evaluate(at.term(
        eps.down("ijk"), eps.down("pqr"),
        diag.up("p").down("i"),
        diag.up("q").down("j"),
        diag.up("r").down("k")))

    # 3! times the determinant, the expression is not normalized
    at.show_ascii_table(det)
    logger.info("determinant: %s", profiler)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
