# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from .arithmetic import MatrixOperators
from .formatter import format_matrix
from .utils import DEFAULT_DTYPE, identity_elements, infer_dtype


class Matrix(MatrixOperators):
    """
    Dense rows-by-cols matrix stored as one flat row-major list.

    Cell (r, c) lives at data[r * cols + c]. The shape is fixed at
    construction; individual cells can be overwritten with m[r, c] = v.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        data: Flat list of the rows * cols elements.
        dtype: Element type, given or taken from the first element.
            Arithmetic results take it from their first cell, so a
            mixed int/float matrix is labelled by whichever comes first.
    """

    __hash__ = None

    def __init__(
        self,
        rows: int,
        cols: int,
        values: Sequence[Any],
        dtype: Optional[type] = None,
    ) -> None:
        # len(values) == rows * cols is left to the caller
        self.rows = rows
        self.cols = cols
        self.data: List[Any] = list(values)
        self.dtype = dtype if dtype is not None else infer_dtype(self.data)

    @classmethod
    def new(cls, rows: int, cols: int, values: Sequence[Any]) -> "Matrix":
        return cls(rows, cols, values)

    @classmethod
    def from_str(cls, text: str, dtype: type = DEFAULT_DTYPE) -> "Matrix":
        """Parse the bracket grammar, see `densematrix.parser.parse_matrix`."""
        from .parser import parse_matrix

        return parse_matrix(text, dtype=dtype, matrix_cls=cls)

    @classmethod
    def from_numpy(cls, A: np.ndarray) -> "Matrix":
        A = np.asarray(A)
        if A.ndim != 2:
            raise ValueError(f"expected a 2-D array, got ndim={A.ndim}")
        m, n = A.shape
        return cls(m, n, list(A.ravel()), dtype=A.dtype.type)

    def to_numpy(self) -> np.ndarray:
        return np.array(self.data, dtype=self.dtype).reshape(self.rows, self.cols)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def _offset(self, r: int, c: int) -> int:
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise IndexError(
                f"index ({r}, {c}) out of bounds for matrix of shape {self.shape}"
            )
        return r * self.cols + c

    def get(self, r: int, c: int):
        return self.data[self._offset(r, c)]

    def set(self, r: int, c: int, value) -> None:
        self.data[self._offset(r, c)] = value

    @staticmethod
    def _key(key) -> Tuple[int, int]:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError(f"matrix indices must be (row, col) pairs, not {key!r}")
        return key

    def __getitem__(self, key):
        return self.get(*self._key(key))

    def __setitem__(self, key, value) -> None:
        self.set(*self._key(key), value)

    def is_square(self) -> bool:
        return self.rows == self.cols

    def is_identity(self) -> bool:
        """
        True if square with ones on the diagonal and zeros elsewhere.

        Only defined for the numeric element types listed in
        `densematrix.utils.IDENTITY_ELEMENTS`; any other dtype raises
        TypeError.
        """
        zero, one = identity_elements(self.dtype)
        if not self.is_square():
            return False
        idx = 0
        for i in range(self.rows):
            for j in range(self.cols):
                expected = one if i == j else zero
                if self.data[idx] != expected:
                    return False
                idx += 1
        return True

    def transposition(self) -> "Matrix":
        """Return the transpose: cell (i, j) of the result is cell (j, i) here."""
        data = [
            self.data[j * self.cols + i]
            for i in range(self.cols)
            for j in range(self.rows)
        ]
        return type(self)(self.cols, self.rows, data, dtype=self.dtype)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.cols == other.cols
            and len(self.data) == len(other.data)
            and all(a == b for a, b in zip(self.data, other.data))
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.rows}, {self.cols}, {self.data!r})"

    def __str__(self) -> str:
        return format_matrix(self)
