# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Render matrices back into the bracket grammar, e.g. ``[1,2;3,4]``.
"""

import numpy as np

from .utils import (
    CLOSE_BRACKET,
    COLUMN_SEPARATOR,
    OPEN_BRACKET,
    ROW_SEPARATOR,
    is_floating,
)


def format_element(value) -> str:
    """
    Text for a single cell.

    Floats print in shortest round-trip positional form with no trailing
    ".0", so 12.0 -> "12" and 25.5 -> "25.5".
    """
    if is_floating(value):
        if np.isnan(value):
            return "NaN"
        if not isinstance(value, np.floating):
            value = np.float64(value)
        return np.format_float_positional(value, trim="-")
    return str(value)


def format_matrix(m) -> str:
    """
    Rows separated by ';', cells by ',', wrapped in brackets.
    The output never contains whitespace. Any matrix without cells
    (0 x n or n x 0) renders as "[]".
    """
    if m.rows == 0 or m.cols == 0:
        return OPEN_BRACKET + CLOSE_BRACKET
    cells = [format_element(v) for v in m.data]
    rows = [
        COLUMN_SEPARATOR.join(cells[r * m.cols : (r + 1) * m.cols])
        for r in range(m.rows)
    ]
    return OPEN_BRACKET + ROW_SEPARATOR.join(rows) + CLOSE_BRACKET
