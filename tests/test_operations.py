from fractions import Fraction

import pytest

from rowops.matrix import Matrix
from rowops.operations import (
    ROW_OPERATIONS,
    ClearScreen,
    ExitProgram,
    Multiply,
    OperationParseError,
    ReplaceWithMultiple,
    Restart,
    ShowHelp,
    ShowMatrix,
    SwapRows,
    parse_operation,
    parse_row_index,
)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("S R1 R2", SwapRows(1, 2)),
        ("s 0 r3", SwapRows(0, 3)),
        ("S 2 2\n", SwapRows(2, 2)),
        ("m -1/2 0", Multiply(row=0, scaler=Fraction(-1, 2))),
        ("M 1.5 R2", Multiply(row=2, scaler=Fraction(3, 2))),
        ("R 2 R1 R0", ReplaceWithMultiple(scaler=Fraction(2), scaler_row=1, target_row=0)),
        ("r -1/3 2 2", ReplaceWithMultiple(scaler=Fraction(-1, 3), scaler_row=2, target_row=2)),
        ("M 0 1", Multiply(row=1, scaler=Fraction(0))),
    ],
)
def test_parse_row_operations(line, expected):
    assert parse_operation(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("h", ShowHelp()),
        ("HELP", ShowHelp()),
        ("c", ClearScreen()),
        ("clear", ClearScreen()),
        ("show", ShowMatrix()),
        ("Show", ShowMatrix()),
        ("q", ExitProgram()),
        ("exit\n", ExitProgram()),
        ("restart", Restart()),
    ],
)
def test_parse_session_keywords(line, expected):
    assert parse_operation(line) == expected


@pytest.mark.parametrize(
    "line, message",
    [
        ("bogus", r'"bogus" is not a complete instruction'),
        ("", r'"" is not a complete instruction'),
        ("S", r'"S" is not a complete instruction'),
        ("S 1", r"Expected two space separated row indices"),
        ("S 1 x", r'Failed to parse "x" as a row index'),
        ("S -1 2", r'Failed to parse "-1"'),
        ("S rr1 2", r'Failed to parse "rr1"'),
        ("S 1 2 3", r'Unexpected trailing input "3"'),
        ("M 2", r"Expected a scaler and a row index"),
        ("M half 1", r"Invalid scaler"),
        ("M 1/0 1", r"zero denominator"),
        ("R 2 1", r"Expected a scaler and two row indices"),
        ("R two 1 0", r"Invalid scaler"),
        ("X 1 2", r'"X" is not a valid operation'),
    ],
)
def test_parse_errors_are_descriptive(line, message):
    with pytest.raises(OperationParseError, match=message):
        parse_operation(line)


def test_parse_row_index():
    assert parse_row_index("R12") == 12
    assert parse_row_index("r0") == 0
    assert parse_row_index("7") == 7
    with pytest.raises(OperationParseError):
        parse_row_index("R")
    with pytest.raises(OperationParseError):
        parse_row_index("²")


def test_canonical_rendering():
    assert str(SwapRows(0, 2)) == "R0 <-> R2"
    assert str(Multiply(row=1, scaler=Fraction(-3, 2))) == "-3/2 * R1 -> R1"
    assert str(ReplaceWithMultiple(Fraction(2), 1, 0)) == "2 * R1 + R0 -> R0"
    assert str(ExitProgram()) == "exit"


def test_rendering_parses_back_for_swaps():
    op = SwapRows(3, 1)
    lhs, _, rhs = str(op).split(" ")
    assert parse_operation(f"S {lhs} {rhs}") == op


def test_row_operations_apply_to_matrix():
    M = Matrix.from_rows([[1, 2], [3, 4]])
    for line in ["S R0 R1", "M 1/3 R0", "R -2 R0 R1"]:
        op = parse_operation(line)
        assert isinstance(op, ROW_OPERATIONS)
        op.apply(M)

    assert M.elements == [[1, Fraction(4, 3)], [-1, Fraction(-2, 3)]]
    assert M.checksum == M.recompute_checksum()


def test_operations_are_immutable_values():
    op = SwapRows(0, 1)
    with pytest.raises(AttributeError):
        op.lhs = 5
    assert hash(op) == hash(SwapRows(0, 1))


@pytest.mark.parametrize(
    "line, expected",
    [
        ("S\t1\t2", SwapRows(1, 2)),
        ("M  -1/2   R0", Multiply(row=0, scaler=Fraction(-1, 2))),
        ("R\t2 R1\tR0", ReplaceWithMultiple(scaler=Fraction(2), scaler_row=1, target_row=0)),
    ],
)
def test_operands_split_on_any_whitespace(line, expected):
    assert parse_operation(line) == expected


def test_scaler_in_exponent_notation_is_rejected():
    with pytest.raises(OperationParseError, match="Invalid scaler.*exponent notation"):
        parse_operation("M 1e999999999 R0")
