# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
densematrix
===========

A small dense, row-major matrix type with a plain-text bracket notation.

Public API
~~~~~~~~~~
- Container
    - `Matrix` (shape, indexing, `is_square`, `is_identity`,
      `transposition`, equality, numpy conversion)
- Text notation
    - `parse_matrix`, `format_matrix`, `format_element`
    - errors: `ParseMatrixError`, `WrongBracketFormat`,
      `ColumnsNotAligned`, `ParseNumberError`
- Arithmetic
    - `add`, `sub`, `mul`, `div`, `neg` (also available as operators)

Example
-------
>>> import densematrix as dm
>>> x = dm.parse_matrix("[1,2,3; 4,5,6; 7,8,9]")
>>> str(x * x.transposition())
'[14,32,50;32,77,122;50,122,194]'
>>> str(x / 2)
'[0.5,1,1.5;2,2.5,3;3.5,4,4.5]'
"""

from importlib.metadata import version as _pkg_version

from .arithmetic import add, div, mul, neg, sub
from .formatter import format_element, format_matrix
from .matrix import Matrix
from .parser import (
    ColumnsNotAligned,
    ParseMatrixError,
    ParseNumberError,
    WrongBracketFormat,
    parse_matrix,
)
from .utils import IDENTITY_ELEMENTS

__all__ = [
    "Matrix",
    "parse_matrix",
    "format_matrix",
    "format_element",
    "ParseMatrixError",
    "WrongBracketFormat",
    "ColumnsNotAligned",
    "ParseNumberError",
    "add",
    "sub",
    "mul",
    "div",
    "neg",
    "IDENTITY_ELEMENTS",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show densematrix”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Optional: lightweight default logging config so users see debug
# records only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
