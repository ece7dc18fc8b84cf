# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix arithmetic.

Each operator has exactly one implementation here, taking read-only
operands and returning a new matrix:

    add(A, B)   add(A, s)
    sub(A, B)   sub(A, s)
    mul(A, B)   mul(A, s)
    div(A, B)   div(A, s)     -> always float64
    neg(A)

`MatrixOperators` maps the Python operators (+, -, *, /, unary -,
reflected and augmented forms) onto these functions.
"""

import functools
import logging
import numbers
import operator

import numpy as np

from .utils import identity_elements, infer_dtype, to_float64

logger = logging.getLogger(__name__)


def _is_matrix(x) -> bool:
    return isinstance(x, MatrixOperators)


def _new(like, rows, cols, data, dtype=None):
    if dtype is None:
        dtype = infer_dtype(data) if data else like.dtype
    return type(like)(rows, cols, data, dtype=dtype)


def _check_same_shape(A, B, name: str) -> None:
    if A.rows != B.rows or A.cols != B.cols:
        logger.debug(f"{name}: shape mismatch {A.shape} vs {B.shape}")
        raise ValueError(
            f"{name} requires matrices of equal shape, got {A.shape} and {B.shape}"
        )


def _elementwise(A, B, op, name: str):
    _check_same_shape(A, B, name)
    data = [op(a, b) for a, b in zip(A.data, B.data)]
    return _new(A, A.rows, A.cols, data)


def _with_scalar(A, s, op):
    data = [op(a, s) for a in A.data]
    return _new(A, A.rows, A.cols, data)


def add(A, B):
    """A + B for a matrix or scalar B. Shapes must match for matrices."""
    if _is_matrix(B):
        return _elementwise(A, B, operator.add, "add")
    return _with_scalar(A, B, operator.add)


def sub(A, B):
    """A - B for a matrix or scalar B. Shapes must match for matrices."""
    if _is_matrix(B):
        return _elementwise(A, B, operator.sub, "sub")
    return _with_scalar(A, B, operator.sub)


def _matmul(A, B):
    """
    Standard product of an (m, n) and an (n, p) matrix.

    Each cell is accumulated with the element type's own + and *,
    starting from the first product, so no separate zero is needed
    unless the inner dimension is empty.
    """
    if A.cols != B.rows:
        logger.debug(f"mul: inner dimensions differ {A.shape} @ {B.shape}")
        raise ValueError(
            f"cannot multiply {A.shape} by {B.shape}: "
            f"lhs columns must equal rhs rows"
        )
    m, n, p = A.rows, A.cols, B.cols
    if n == 0:
        zero, _one = identity_elements(A.dtype)
        return _new(A, m, p, [zero] * (m * p), dtype=A.dtype)

    data = []
    for i in range(m):
        row = A.data[i * n : (i + 1) * n]
        for j in range(p):
            products = (row[k] * B.data[k * p + j] for k in range(n))
            data.append(functools.reduce(operator.add, products))
    return _new(A, m, p, data)


def mul(A, B):
    """Matrix product for a matrix B, cell-wise scaling for a scalar B."""
    if _is_matrix(B):
        return _matmul(A, B)
    return _with_scalar(A, B, operator.mul)


def div(A, B):
    """
    A / B, element-wise for a matrix B (equal shapes) or by a scalar.

    Both operands are promoted to float64 first and the result is always
    a float64 matrix, so integer inputs are never truncated. Division by
    zero yields inf/nan per IEEE 754 instead of raising.
    """
    if _is_matrix(B):
        _check_same_shape(A, B, "div")
        pairs = zip(A.data, B.data)
    else:
        pairs = ((a, B) for a in A.data)
    with np.errstate(divide="ignore", invalid="ignore"):
        data = [to_float64(a) / to_float64(b) for a, b in pairs]
    return _new(A, A.rows, A.cols, data, dtype=np.float64)


def neg(A):
    return _new(A, A.rows, A.cols, [-a for a in A.data])


def _binary(op):
    def forward(self, other):
        if not (_is_matrix(other) or isinstance(other, numbers.Number)):
            return NotImplemented
        return op(self, other)

    forward.__name__ = op.__name__
    forward.__doc__ = op.__doc__
    return forward


class MatrixOperators:
    """
    Operator surface for matrices.

    Plain, reflected and augmented forms all forward to the functions
    above; augmented assignment rebinds to a new matrix rather than
    mutating. Reflected forms are only provided where the operation
    commutes with a scalar (scalar + A, scalar * A).
    """

    __slots__ = ()

    # numpy scalars on the left must defer to the reflected methods
    __array_ufunc__ = None

    __add__ = __radd__ = __iadd__ = _binary(add)
    __sub__ = __isub__ = _binary(sub)
    __mul__ = __rmul__ = __imul__ = _binary(mul)
    __truediv__ = __itruediv__ = _binary(div)

    def __neg__(self):
        return neg(self)
