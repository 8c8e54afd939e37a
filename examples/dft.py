#!/usr/bin/env python
"""Multiplies two polynomials through their discrete Fourier transforms."""

import cmath
import logging

import numpy as np

import abstensor as at


logger = logging.getLogger(__name__)


def make_dft(n, inverse=False):
    sign = 1 if inverse else -1
    scale = n if inverse else 1
    roots = [cmath.exp(sign*2j*cmath.pi*k/n) / scale for k in range(n)]
    return at.make_complex_tensor(lambda i, j: roots[i*j % n], "ud", [n, n])


def make_embedding(input_dim, output_dim):
    return at.make_complex_tensor(lambda i, j: complex(i == j), "ud",
                                  [output_dim, input_dim])


def make_vec(coeffs):
    return at.make_complex_tensor(lambda i: complex(coeffs[i]), "u",
                                  [len(coeffs)])


def main():
    p = [5, 4, 3, 2, 1]
    q = [5, 6, 7, 8, 9]
    n = len(p) + len(q) - 1

    for size in (2, 3, 4, 8):
        print(f"DFT matrix of size {size}:")
        at.show_ascii_table(make_dft(size))

    # ties the transforms of p and q together entrywise
    dirac = at.make_complex_tensor(
        lambda h, f, g: complex(h == f == g), "dud", [n, n, n])

    transforms = []
    for coeffs in (p, q):
        transform, _ = at.evaluate(at.term(
            make_dft(n).up("f").down("a"),
            make_embedding(len(coeffs), n).up("a").down("b"),
            make_vec(coeffs).up("b")))
        transforms.append(at.materialize(transform))

    fp, fq = transforms
    product, profiler = at.evaluate(at.term(
        make_dft(n, inverse=True).up("z").down("h"),
        dirac.up("h").down("f").down("g"),
        fp.up("f"),
        fq.up("g")))

    coeffs = product.to_numpy()
    print("product coefficients:", np.round(coeffs.real, 6))
    logger.info("%s", profiler)
    assert np.allclose(coeffs, np.convolve(p, q))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
