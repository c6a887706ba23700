"""Line-based interactive session around a single :class:`Matrix`.

The session has two phases. While building, every line is a row of
numbers and an empty line moves on. After that every line is one
command for :func:`rowops.operations.parse_operation`. Errors are
printed and the loop keeps reading; only ``exit``/``q`` or end of input
stop it.
"""

import enum
import logging
import sys
from typing import Optional, TextIO

from .matrix import Matrix, MatrixIndexError, ShapeError
from .operations import (
    ROW_OPERATIONS,
    ClearScreen,
    ExitProgram,
    Multiply,
    OperationParseError,
    ReplaceWithMultiple,
    Restart,
    ShowHelp,
    ShowMatrix,
    parse_operation,
)
from .rational import RationalParseError, format_rational, parse_row

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J\x1b[H"

BUILD_PROMPT = (
    "Enter the matrix one row at a time, numbers separated by spaces.\n"
    "Numbers may be integers, decimals or fractions (-3/2).\n"
    "Finish with an empty line."
)

HELP_TEXT = """\
Row operations (row indices start at 0 and may be written as 2 or R2):
  S <row> <row>              swap two rows             S R0 R2
  M <scaler> <row>           multiply a row            M -1/2 R1
  R <scaler> <row> <row>     add scaler * first row    R 2 R1 R0
                             into the second row
Other commands:
  show                       print the matrix
  h, help                    print this help
  c, clear                   clear the screen
  restart                    discard the matrix and enter a new one
  q, exit                    quit"""


class Phase(enum.Enum):
    BUILDING = "building"
    COMMANDS = "commands"
    FINISHED = "finished"


class Session:
    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.matrix = Matrix()
        self.phase = Phase.BUILDING

    def _write(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def _prompt(self) -> None:
        self.stdout.write("> ")
        self.stdout.flush()

    def _error(self, exc: Exception) -> None:
        self._write(f"Error: {exc}")

    def show_matrix(self) -> None:
        self._write("Matrix:")
        if self.matrix.height:
            self._write(str(self.matrix))
        self._write(f"Checksum: {format_rational(self.matrix.checksum)}")

    def run(self) -> Matrix:
        """Read lines until exit or end of input; return the final matrix."""
        self._write(BUILD_PROMPT)
        self._prompt()
        for line in self.stdin:
            self.handle_line(line)
            if self.phase is Phase.FINISHED:
                break
            self._prompt()
        else:
            self._write()
        return self.matrix

    def handle_line(self, line: str) -> None:
        line = line.rstrip("\r\n")
        if self.phase is Phase.BUILDING:
            self._build(line)
        elif self.phase is Phase.COMMANDS:
            self._command(line)

    def _build(self, line: str) -> None:
        text = line.strip()
        if text.lower() in ("q", "exit"):
            self.phase = Phase.FINISHED
            return
        if text.lower() in ("h", "help"):
            self._write(HELP_TEXT)
            return
        if not text:
            if self.matrix.height == 0:
                self._write("The matrix has no rows yet. Enter at least one row.")
                return
            self.phase = Phase.COMMANDS
            self.show_matrix()
            self._write("Enter row operations, 'help' lists them.")
            return

        try:
            self.matrix.insert_row(parse_row(text))
        except (RationalParseError, ShapeError) as exc:
            self._error(exc)

    def _command(self, line: str) -> None:
        try:
            op = parse_operation(line)
        except OperationParseError as exc:
            self._error(exc)
            return

        if isinstance(op, ROW_OPERATIONS):
            self._write(f"$ {op}")
            if isinstance(op, (Multiply, ReplaceWithMultiple)) and op.scaler == 0:
                self._write("Caution: a zero scaler is not an invertible row operation.")
            try:
                op.apply(self.matrix)
            except MatrixIndexError as exc:
                self._error(exc)
                return
            logger.debug("Applied %s, checksum %s", op, self.matrix.checksum)
            self.show_matrix()
        elif isinstance(op, ShowMatrix):
            self.show_matrix()
        elif isinstance(op, ShowHelp):
            self._write(HELP_TEXT)
        elif isinstance(op, ClearScreen):
            self.stdout.write(CLEAR_SCREEN)
        elif isinstance(op, Restart):
            self.matrix = Matrix()
            self.phase = Phase.BUILDING
            self._write(BUILD_PROMPT)
        elif isinstance(op, ExitProgram):
            self.phase = Phase.FINISHED
