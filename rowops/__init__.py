import logging as _logging

from .matrix import Comparison, Matrix, MatrixIndexError, ShapeError
from .operations import (
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
)
from .rational import RationalParseError, format_rational, parse_rational, parse_row
from .session import Session

__all__ = [
    "Matrix",
    "Comparison",
    "ShapeError",
    "MatrixIndexError",
    "SwapRows",
    "Multiply",
    "ReplaceWithMultiple",
    "ShowHelp",
    "ShowMatrix",
    "ClearScreen",
    "Restart",
    "ExitProgram",
    "parse_operation",
    "OperationParseError",
    "parse_rational",
    "parse_row",
    "format_rational",
    "RationalParseError",
    "Session",
]

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
