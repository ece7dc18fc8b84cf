# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Parse matrices written in bracket notation.

    Matrix  ::= "[" Rows "]" | "[" "]"
    Rows    ::= Row | Row ";" Rows
    Row     ::= element | element "," Row

Whitespace is ignored around brackets, separators and elements.
"""

import logging
from typing import List, Optional

from .matrix import Matrix
from .utils import (
    CLOSE_BRACKET,
    COLUMN_SEPARATOR,
    DEFAULT_DTYPE,
    OPEN_BRACKET,
    ROW_SEPARATOR,
)

logger = logging.getLogger(__name__)


class ParseMatrixError(ValueError):
    """Base class for the three ways a matrix string can be rejected."""

    kind: str = "ParseMatrixError"


class WrongBracketFormat(ParseMatrixError):
    """Raised when the input is not wrapped in [ ... ]"""

    kind = "WrongBracketFormat"


class ColumnsNotAligned(ParseMatrixError):
    """Raised when rows do not all have the same number of elements"""

    kind = "ColumnsNotAligned"


class ParseNumberError(ParseMatrixError):
    """Raised when an element cannot be read as the requested type"""

    kind = "ParseNumberError"


def _parse_token(token: str, dtype: type):
    # int("1_000") and int("٣") are legal Python but not numeric literals here
    if "_" in token:
        raise ValueError(f"digit separators are not allowed: {token!r}")
    if not token.isascii():
        raise ValueError(f"non-ASCII characters are not allowed: {token!r}")
    return dtype(token)


def _parse_row(row: str, dtype: type) -> List:
    values = []
    for token in row.split(COLUMN_SEPARATOR):
        token = token.strip()
        try:
            values.append(_parse_token(token, dtype))
        except (ValueError, TypeError, OverflowError) as e:
            logger.debug(f"ParseNumberError: {token!r} is not a valid {dtype.__name__}")
            raise ParseNumberError(
                f"cannot parse {token!r} as {dtype.__name__}"
            ) from e
    return values


def parse_matrix(
    text: str,
    dtype: type = DEFAULT_DTYPE,
    matrix_cls: Optional[type] = None,
) -> Matrix:
    """
    Build a matrix from its bracket notation, e.g. "[1,2,3; 4,5,6]".

    Parameters
    ----------
    text : str
        Matrix in bracket notation.
    dtype : type
        Callable turning one token into an element (int, float,
        numpy.float32, ...).
    matrix_cls : type | None
        Matrix subclass to build, defaults to `Matrix`.

    Returns
    -------
    Matrix
        rows x cols matrix; "[]" gives the empty 0 x 0 matrix.

    Raises
    ------
    WrongBracketFormat : if the text is not wrapped in brackets.
    ParseNumberError   : on the first token that does not parse, checked
                         before any alignment check.
    ColumnsNotAligned  : if every token parses but rows differ in length.
    """
    matrix_cls = matrix_cls or Matrix
    s = text.strip()

    if len(s) < 2 or s[0] != OPEN_BRACKET or s[-1] != CLOSE_BRACKET:
        logger.debug(f"WrongBracketFormat: {text!r}")
        raise WrongBracketFormat(f"expected [ ... ], got {text!r}")

    body = s[1:-1]
    if not body.strip():
        return matrix_cls(0, 0, [], dtype=dtype)

    rows = [_parse_row(row, dtype) for row in body.split(ROW_SEPARATOR)]

    cols = len(rows[0])
    for idx, row in enumerate(rows[1:], start=1):
        if len(row) != cols:
            logger.debug(
                f"ColumnsNotAligned: row 0 has {cols} elements, row {idx} has {len(row)}"
            )
            raise ColumnsNotAligned(
                f"row {idx} has {len(row)} elements, expected {cols}"
            )

    data = [v for row in rows for v in row]
    return matrix_cls(len(rows), cols, data, dtype=dtype)
