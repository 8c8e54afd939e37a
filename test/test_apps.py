#!/usr/bin/env python

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


import math
import sys

import numpy as np

from testlib import (
    make_complex_dirac3,
    make_complex_vec,
    make_dft,
    make_embedding,
    make_idft,
    make_matrix,
    make_real_matrix,
    make_real_vec,
    make_string_matrix,
    make_vec,
)

import abstensor as at


# {{{ discrete Fourier transform

def test_dft_inverse():
    n = 5
    result, _ = at.evaluate(
        make_dft(n).up("i").down("j") * make_idft(n).up("j").down("k"))

    assert result.signature == "ud"
    np.testing.assert_allclose(result.to_numpy(), np.eye(n), atol=1e-12)


def test_dft_matches_numpy():
    n = 8
    np.testing.assert_allclose(make_dft(n).to_numpy(),
                               np.fft.fft(np.eye(n)), atol=1e-12)


def test_polynomial_product_via_dft():
    # Multiply two polynomials by transforming them, multiplying the
    # transforms entrywise and transforming back.
    p = (1, 2, 3)
    q = (4, 5, 6)
    n = len(p) + len(q) - 1

    def transform(coeffs):
        result, _ = at.evaluate(at.term(
            make_dft(n).up("f").down("a"),
            make_embedding(len(coeffs), n).up("a").down("b"),
            make_complex_vec(*coeffs).up("b")))
        return at.materialize(result)

    result, profiler = at.evaluate(at.term(
        make_idft(n).up("z").down("h"),
        make_complex_dirac3(n).up("h").down("f").down("g"),
        transform(p).up("f"),
        transform(q).up("g")))

    assert result.signature == "u"
    assert result.dimension == (n,)
    np.testing.assert_allclose(result.to_numpy(), np.convolve(p, q),
                               atol=1e-9)
    assert profiler.multiplies > 0


def test_polynomial_product_via_dft_single_term():
    n = 3
    result, _ = at.evaluate(at.term(
        make_idft(n).up("z").down("h"),
        make_complex_dirac3(n).up("h").down("f").down("g"),
        make_dft(n).up("f").down("a"),
        make_dft(n).up("g").down("x"),
        make_embedding(2, n).up("a").down("b"), make_complex_vec(1, 2).up("b"),
        make_embedding(2, n).up("x").down("y"), make_complex_vec(3, 4).up("y")))

    np.testing.assert_allclose(result.to_numpy(), [3, 10, 8], atol=1e-9)

# }}}


# {{{ polynomials

def test_polynomial_derivative():
    # coefficients of x^2, x, 1
    derivative = make_matrix([[0, 0, 0], [2, 0, 0], [0, 1, 0]])
    poly = make_vec(3, 5, 10)

    first, _ = at.evaluate(derivative.up("i").down("j") * poly.up("j"))
    assert first.reify() == [[0], [6], [5]]

    second, _ = at.evaluate(at.term(
        derivative.up("i").down("j"),
        derivative.up("j").down("k"),
        poly.up("k")))
    assert second.reify() == [[0], [0], [6]]

# }}}


# {{{ neural network layer

def test_dense_layer():
    def sigmoid(r):
        return 1. / (1. + math.exp(-r))

    weights_data = [[.15, .20], [.25, .30]]
    inputs_data = [.05, .10]
    bias_data = [.35, .35]

    expr = at.ApplyExpression(
        at.make_real_function(sigmoid),
        at.PlusExpression(
            make_real_vec(*bias_data),
            at.term(make_real_matrix(weights_data).up("i").down("j"),
                    make_real_vec(*inputs_data).up("j"))))
    result, _ = at.evaluate(expr)

    expected = 1. / (1. + np.exp(
        -(np.array(weights_data) @ np.array(inputs_data) + bias_data)))
    np.testing.assert_allclose(result.to_numpy(), expected)

# }}}


# {{{ text rendering

def test_ascii_table():
    text = at.get_ascii_table(make_matrix([[1, 2], [3, 4]]))
    assert text.splitlines()[0] == "signature 'ud', dimension (2, 2)"
    assert "3" in text and "4" in text

    text = at.get_ascii_table(
        at.trace(make_string_matrix([["a", "b"], ["c", "d"]]), 0, 1))
    assert text.splitlines()[0] == "signature '', dimension ()"
    assert "a + d" in text


def test_show_ascii_table(capsys):
    at.show_ascii_table(make_vec(7, 8))
    out = capsys.readouterr().out
    assert out.startswith("signature 'u', dimension (2,)")
    assert "8" in out

# }}}


if __name__ == "__main__":
    if len(sys.argv) > 1:
        exec(sys.argv[1])
    else:
        from pytest import main
        main([__file__])

# vim: fdm=marker
