"""Operation values and the line parser that produces them.

An operation is plain data: parsing never looks at a matrix, so row and
column indices are only checked once the operation reaches
:class:`rowops.matrix.Matrix`.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Tuple, Union

from .rational import RationalParseError, format_rational, parse_rational


class OperationParseError(ValueError):
    """A command line could not be parsed into an operation."""


@dataclass(frozen=True)
class SwapRows:
    lhs: int
    rhs: int

    def apply(self, matrix) -> None:
        matrix.swap_rows(self.lhs, self.rhs)

    def __str__(self) -> str:
        return f"R{self.lhs} <-> R{self.rhs}"


@dataclass(frozen=True)
class Multiply:
    row: int
    scaler: Fraction

    def apply(self, matrix) -> None:
        matrix.multiply_row(self.row, self.scaler)

    def __str__(self) -> str:
        return f"{format_rational(self.scaler)} * R{self.row} -> R{self.row}"


@dataclass(frozen=True)
class ReplaceWithMultiple:
    scaler: Fraction
    scaler_row: int
    target_row: int

    def apply(self, matrix) -> None:
        matrix.replace_row_with_multiple(self.scaler, self.scaler_row, self.target_row)

    def __str__(self) -> str:
        return (
            f"{format_rational(self.scaler)} * R{self.scaler_row} "
            f"+ R{self.target_row} -> R{self.target_row}"
        )


@dataclass(frozen=True)
class ShowHelp:
    def __str__(self) -> str:
        return "help"


@dataclass(frozen=True)
class ShowMatrix:
    def __str__(self) -> str:
        return "show"


@dataclass(frozen=True)
class ClearScreen:
    def __str__(self) -> str:
        return "clear"


@dataclass(frozen=True)
class Restart:
    def __str__(self) -> str:
        return "restart"


@dataclass(frozen=True)
class ExitProgram:
    def __str__(self) -> str:
        return "exit"


Operation = Union[
    SwapRows, Multiply, ReplaceWithMultiple,
    ShowHelp, ShowMatrix, ClearScreen, Restart, ExitProgram,
]

ROW_OPERATIONS = (SwapRows, Multiply, ReplaceWithMultiple)

_KEYWORDS = {
    "h": ShowHelp,
    "help": ShowHelp,
    "c": ClearScreen,
    "clear": ClearScreen,
    "show": ShowMatrix,
    "q": ExitProgram,
    "exit": ExitProgram,
    "restart": Restart,
}


def _split_operands(rest: str, count: int, expected: str) -> Tuple[str, ...]:
    tokens = rest.split()
    if len(tokens) < count:
        raise OperationParseError(f"Expected {expected}. Got: \"{rest}\"")
    if len(tokens) > count:
        extra = " ".join(tokens[count:])
        raise OperationParseError(f"Unexpected trailing input \"{extra}\". Expected {expected}.")
    return tuple(tokens)


def parse_row_index(token: str) -> int:
    """Parse a row index such as ``2``, ``r2`` or ``R2``."""
    digits = token[1:] if token[:1] in ("r", "R") else token
    if not (digits.isascii() and digits.isdigit()):
        raise OperationParseError(
            f"Failed to parse \"{token}\" as a row index "
            "(expected a non-negative integer, optionally prefixed with R)."
        )
    return int(digits)


def _parse_scaler(token: str) -> Fraction:
    try:
        return parse_rational(token)
    except RationalParseError as exc:
        raise OperationParseError(f"Invalid scaler: {exc}") from None


def parse_operation(line: str) -> Operation:
    """Parse one command line.

    Grammar (keywords are case-insensitive)::

        S <row> <row>             swap two rows
        M <scaler> <row>          multiply a row
        R <scaler> <row> <row>    add scaler * first row into second row
        h | help, c | clear, show, q | exit, restart

    Raises:
        OperationParseError: the message names the offending token.
    """
    text = line.strip()
    parts = text.split(None, 1)
    op = parts[0] if parts else ""
    rest = parts[1] if len(parts) > 1 else ""
    keyword = op.lower()

    if keyword in _KEYWORDS:
        return _KEYWORDS[keyword]()
    if len(parts) < 2:
        raise OperationParseError(f"\"{text}\" is not a complete instruction.")

    if keyword == "s":
        lhs, rhs = _split_operands(rest, 2, "two space separated row indices")
        return SwapRows(parse_row_index(lhs), parse_row_index(rhs))
    if keyword == "m":
        scaler, row = _split_operands(
            rest, 2, "a scaler and a row index separated by a space"
        )
        return Multiply(row=parse_row_index(row), scaler=_parse_scaler(scaler))
    if keyword == "r":
        scaler, scaler_row, target_row = _split_operands(
            rest, 3, "a scaler and two row indices separated by spaces"
        )
        return ReplaceWithMultiple(
            scaler=_parse_scaler(scaler),
            scaler_row=parse_row_index(scaler_row),
            target_row=parse_row_index(target_row),
        )

    raise OperationParseError(f"\"{op}\" is not a valid operation.")
