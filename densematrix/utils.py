# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import Any, Dict, Tuple

import numpy as np

OPEN_BRACKET: str = "["
CLOSE_BRACKET: str = "]"
ROW_SEPARATOR: str = ";"
COLUMN_SEPARATOR: str = ","

DEFAULT_DTYPE = int

# (additive identity, multiplicative identity) for every element type
# is_identity() is defined on.
IDENTITY_ELEMENTS: Dict[type, Tuple[Any, Any]] = {
    int: (0, 1),
    float: (0.0, 1.0),
}
for _t in (
    np.int8,
    np.int16,
    np.int32,
    np.int64,
    np.intp,
    np.uint8,
    np.uint16,
    np.uint32,
    np.uint64,
    np.uintp,
):
    IDENTITY_ELEMENTS[_t] = (_t(0), _t(1))
for _t in (np.float32, np.float64):
    IDENTITY_ELEMENTS[_t] = (_t(0.0), _t(1.0))
del _t


def identity_elements(dtype: type) -> Tuple[Any, Any]:
    """Return the (zero, one) pair for dtype, or raise TypeError."""
    try:
        return IDENTITY_ELEMENTS[dtype]
    except KeyError:
        raise TypeError(
            f"no additive/multiplicative identity known for {dtype!r}"
        ) from None


def infer_dtype(values) -> type:
    """Element type of a flat sequence, taken from its first element."""
    for v in values:
        return type(v)
    return DEFAULT_DTYPE


def is_floating(value) -> bool:
    return isinstance(value, (float, np.floating))


def to_float64(value) -> np.float64:
    """
    Promote a single element to a 64-bit float.

    Division always runs on float64 so that integer operands are never
    truncated.
    """
    return np.float64(value)
