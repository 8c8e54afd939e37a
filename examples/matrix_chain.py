#!/usr/bin/env python
"""Multiplies the same 2x2 matrix many times and reports the work done."""

import logging
import string
import time

import abstensor as at


logger = logging.getLogger(__name__)


def main(nfactors=10, memoize=True):
    entries = [[1, 2], [3, 4]]
    two_by_two = at.make_int_tensor(lambda i, j: entries[i][j], "ud", [2, 2])

    labels = string.ascii_letters[:nfactors + 1]
    expr = at.term(*[two_by_two.up(labels[i]).down(labels[i+1])
                     for i in range(nfactors)])

    start = time.perf_counter()
    result, profiler = at.evaluate(expr, memoize=memoize)
    table = result.reify()
    elapsed = time.perf_counter() - start

    print(table)
    logger.info("memoize=%s: %s in %.3f s", memoize, profiler, elapsed)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
    main(nfactors=6, memoize=False)
