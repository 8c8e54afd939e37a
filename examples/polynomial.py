#!/usr/bin/env python
"""Differentiates polynomials stored as coefficient tensors."""

import abstensor as at


# 3x^2 + 5x + 10, coefficients of x^2, x, 1
P1 = at.make_int_tensor(lambda i: (3, 5, 10)[i], "u", [3])

# x^2y^2 + 3x^2y + x^2 + 5xy^2 + 4xy + y^2 + 2
_P2_COEFFS = [
    # y^2 y  1
    [1, 3, 1],  # x^2
    [5, 4, 0],  # x
    [1, 0, 2],  # 1
    ]
P2 = at.make_int_tensor(lambda i, j: _P2_COEFFS[i][j], "ud", [3, 3])

# derivative of polynomials of degree 2
_D_ENTRIES = [
    [0, 0, 0],
    [2, 0, 0],
    [0, 1, 0],
    ]
D = at.make_int_tensor(lambda i, j: _D_ENTRIES[i][j], "ud", [3, 3])


def main():
    print("d/dx (3x^2 + 5x + 10):")
    result, _ = at.evaluate(D.up("i").down("j") * P1.up("j"))
    at.show_ascii_table(result)

    print("d/dx of P2, rows are powers of x:")
    result, _ = at.evaluate(D.up("i").down("j") * P2.up("j").down("y"))
    at.show_ascii_table(result)

    print("d/dy of P2, columns are powers of y:")
    result, _ = at.evaluate(P2.up("x").down("j") * D.up("y").down("j"))
    at.show_ascii_table(result.reshape("ud"))


if __name__ == "__main__":
    main()
