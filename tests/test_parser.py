# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np
import pytest

from densematrix.matrix import Matrix
from densematrix.parser import (
    ColumnsNotAligned,
    ParseMatrixError,
    ParseNumberError,
    WrongBracketFormat,
    parse_matrix,
)

TEST_ITERATIONS = 50
logger = logging.getLogger(__name__)


def test_parse_square():
    x = parse_matrix(" [1,2,3; 4,5,6; 7,8,9]")
    assert x == Matrix.new(3, 3, [1, 2, 3, 4, 5, 6, 7, 8, 9])
    assert x.shape == (3, 3)
    assert str(x) == "[1,2,3;4,5,6;7,8,9]"


def test_parse_rectangular():
    x = parse_matrix("[-2,-1,0;1,2,3]")
    assert x.shape == (2, 3)
    assert x == Matrix.new(2, 3, [-2, -1, 0, 1, 2, 3])


def test_parse_whitespace_everywhere():
    x = parse_matrix("  [ 1 ,\t2 ;\n 3 , 4 ]  ")
    assert x == Matrix.new(2, 2, [1, 2, 3, 4])


def test_parse_floats():
    x = parse_matrix("[1.5, -2; 3e2, 0.25]", dtype=float)
    assert x.dtype is float
    assert x.data == [1.5, -2.0, 300.0, 0.25]
    assert str(x) == "[1.5,-2;300,0.25]"


def test_parse_numpy_dtype():
    x = parse_matrix("[1,0;0,1]", dtype=np.float32)
    assert x.dtype is np.float32
    assert all(isinstance(v, np.float32) for v in x.data)


@pytest.mark.parametrize("text", ["[]", "[ ]", "  [\n]  "])
def test_parse_empty(text):
    x = parse_matrix(text)
    assert x.shape == (0, 0)
    assert x.data == []
    assert str(x) == "[]"


@pytest.mark.parametrize(
    "text",
    [
        "1,2,3; 4,5,6; 7,8,9]",
        "[1,2,3; 4,5,6; 7,8,9",
        "(1,2;3,4)",
        "",
        "   ",
        "[",
        "]",
        "][",
        # bracket check wins over bad numbers and misaligned rows
        "[1,x; 4,5,6",
        "1,2; 4,5,6]",
    ],
)
def test_wrong_bracket_format(text):
    with pytest.raises(WrongBracketFormat):
        parse_matrix(text)


@pytest.mark.parametrize(
    "text",
    [
        "[1,2,x; 4,5,6; 7,8,9]",
        "[1,2,; 4,5,6; 7,8,9]",
        "[1,2,3; 4,5,6;]",
        "[,]",
        "[1.5]",
        "[1_000]",
        "[1 2]",
        "[٣]",
        "[４]",
        "[1,2; ٣,４]",
    ],
)
def test_parse_number_error(text):
    with pytest.raises(ParseNumberError):
        parse_matrix(text)


def test_parse_number_error_beats_alignment():
    # row 1 is shorter than row 0, but row 2 holds a bad token
    with pytest.raises(ParseNumberError):
        parse_matrix("[1,2,3; 4,5; 7,8,y]")
    # bad token in a row that is itself misaligned
    with pytest.raises(ParseNumberError):
        parse_matrix("[1,2; 4,5,x]")


@pytest.mark.parametrize(
    "text",
    ["[1,2; 4,5,6; 7,8,9]", "[1,2,3; 4,5]", "[1; 2,3]"],
)
def test_columns_not_aligned(text):
    with pytest.raises(ColumnsNotAligned):
        parse_matrix(text)


def test_error_taxonomy():
    for cls in (WrongBracketFormat, ColumnsNotAligned, ParseNumberError):
        assert issubclass(cls, ParseMatrixError)
        assert issubclass(cls, ValueError)
        assert cls.kind == cls.__name__

    with pytest.raises(ParseMatrixError) as excinfo:
        parse_matrix("[1,2; 3]")
    assert excinfo.value.kind == "ColumnsNotAligned"


def test_parse_number_error_chains_cause():
    with pytest.raises(ParseNumberError) as excinfo:
        parse_matrix("[1,two]")
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_from_str_matches_parse_matrix():
    text = "[1,2,3; 4,5,6;7,8,9]"
    assert Matrix.from_str(text) == parse_matrix(text)
    assert Matrix.from_str("[0.5]", dtype=float).data == [0.5]


def test_failed_parse_logs_classification(caplog):
    caplog.set_level(logging.DEBUG, logger="densematrix.parser")
    with pytest.raises(ColumnsNotAligned):
        parse_matrix("[1,2; 3]")
    assert any("ColumnsNotAligned" in r.getMessage() for r in caplog.records)


def test_round_trip_random_int():
    rng = np.random.default_rng(0)
    for _ in range(TEST_ITERATIONS):
        m, n = rng.integers(1, 6, size=2)
        A = Matrix.from_numpy(rng.integers(-50, 50, size=(m, n)))
        text = str(A)
        logger.debug(f"round trip {text}")
        assert str(parse_matrix(text)) == text
        assert parse_matrix(text) == A


def test_round_trip_random_float():
    rng = np.random.default_rng(1)
    for _ in range(TEST_ITERATIONS):
        m, n = rng.integers(1, 6, size=2)
        A = Matrix.from_numpy(rng.normal(scale=100.0, size=(m, n)))
        B = parse_matrix(str(A), dtype=np.float64)
        assert B == A
        assert str(B) == str(A)
