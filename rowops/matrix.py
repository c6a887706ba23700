import enum
import logging
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Iterable, List, Optional, Tuple

from .rational import Rational, checksum_term, format_rational, to_rational

logger = logging.getLogger(__name__)


class ShapeError(ValueError):
    """A row was inserted whose width differs from the matrix width."""

    def __init__(self, expected: int, got: int, row: List[Fraction]):
        self.expected = expected
        self.got = got
        self.row = row
        cells = ", ".join(format_rational(x) for x in row)
        super().__init__(
            f"Invalid row length. Expected: {expected}, Got: {got} "
            f"when inserting: [{cells}]"
        )


class MatrixIndexError(IndexError):
    """A row or column index lies outside the matrix."""


class Comparison(enum.Enum):
    EQUAL = "equal"
    # Checksums disagree. Either the matrices differ or one of them has a
    # checksum that no longer matches its elements.
    CHECKSUM_MISMATCH = "checksum mismatch"
    ELEMENTS_DIFFER = "elements differ"


@dataclass(eq=False)
class Matrix:
    """A rectangular grid of exact rationals with a running checksum.

    The checksum is ``sum((r + c) * value)`` over every cell. Mutators
    never recompute it; each one adds exactly the delta its change
    produces, so a mismatch against :meth:`recompute_checksum` exposes a
    bookkeeping bug in that mutator.
    """

    elements: List[List[Fraction]] = field(default_factory=list)
    _checksum: Fraction = field(default=Fraction(0), init=False, repr=False)

    def __post_init__(self):
        rows, self.elements = self.elements, []
        for row in rows:
            self.insert_row(row)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Rational]]) -> "Matrix":
        return cls(elements=[list(row) for row in rows])

    @property
    def width(self) -> Optional[int]:
        """Length of the first row, ``None`` while the matrix has no rows."""
        if not self.elements:
            return None
        return len(self.elements[0])

    @property
    def height(self) -> int:
        return len(self.elements)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width or 0

    @property
    def checksum(self) -> Fraction:
        return self._checksum

    def insert_row(self, values: Iterable[Rational]) -> None:
        """Append a row; raises :class:`ShapeError` on a width mismatch.

        The new cells contribute to the checksum with the row index the
        row is about to occupy, i.e. the current height.
        """
        row = [to_rational(x) for x in values]
        width = self.width
        if width is not None and width != len(row):
            raise ShapeError(width, len(row), row)

        index = self.height
        for col, value in enumerate(row):
            self._checksum += checksum_term(index, col, value)
        self.elements.append(row)
        logger.debug("Inserted row %d, checksum now %s", index, self._checksum)

    def _check_row(self, row: int) -> None:
        if self.height == 0:
            raise MatrixIndexError(f"Matrix has no rows. Got row index: {row}.")
        if not 0 <= row < self.height:
            raise MatrixIndexError(
                f"Invalid row. Matrix max row index is {self.height - 1}, "
                f"Got: {row}."
            )

    def check_bounds(self, row: int, col: int) -> None:
        """Raise :class:`MatrixIndexError` unless ``(row, col)`` is a cell."""
        if self.height == 0:
            raise MatrixIndexError(
                f"Matrix has no rows. Got row index: {row}, column index: {col}."
            )
        self._check_row(row)
        width = self.width
        if width == 0:
            raise MatrixIndexError(
                f"Row with index {row} is empty. Got column index: {col}."
            )
        if not 0 <= col < width:
            raise MatrixIndexError(
                f"Invalid column. Matrix max column index is {width - 1}, "
                f"Got: {col}."
            )

    def get(self, row: int, col: int) -> Fraction:
        self.check_bounds(row, col)
        return self.elements[row][col]

    def set(self, row: int, col: int, value: Rational) -> None:
        self.check_bounds(row, col)
        value = to_rational(value)
        old = self.elements[row][col]
        self.elements[row][col] = value
        self._checksum += checksum_term(row, col, value) - checksum_term(row, col, old)

    def swap_rows(self, lhs: int, rhs: int) -> None:
        """Exchange rows ``lhs`` and ``rhs`` in place."""
        self._check_row(lhs)
        self._check_row(rhs)

        self.elements[lhs], self.elements[rhs] = self.elements[rhs], self.elements[lhs]

        # Every cell changed row index, so each one moves its checksum
        # contribution from its old row to its new row.
        for col, value in enumerate(self.elements[lhs]):
            self._checksum += checksum_term(lhs, col, value) - checksum_term(rhs, col, value)
        for col, value in enumerate(self.elements[rhs]):
            self._checksum += checksum_term(rhs, col, value) - checksum_term(lhs, col, value)

        logger.debug("Swapped rows %d and %d", lhs, rhs)

    def multiply_row(self, row: int, scaler: Rational) -> None:
        """Multiply every cell of ``row`` by ``scaler``.

        A zero scaler is allowed but makes the operation non-invertible,
        so it is logged as a warning.
        """
        self._check_row(row)
        scaler = to_rational(scaler)
        if scaler == 0:
            logger.warning("Multiplying row %d by zero is not an invertible row operation", row)

        for col in range(len(self.elements[row])):
            self.set(row, col, self.get(row, col) * scaler)

        logger.debug("Multiplied row %d by %s", row, scaler)

    def replace_row_with_multiple(self, scaler: Rational, scaler_row: int, target_row: int) -> None:
        """Add ``scaler * scaler_row`` into ``target_row``.

        The scaled source row is taken before ``target_row`` is touched,
        so ``scaler_row == target_row`` yields ``(1 + scaler) * row``.
        """
        self._check_row(scaler_row)
        self._check_row(target_row)
        scaler = to_rational(scaler)
        if scaler == 0:
            logger.warning("Adding zero times row %d to row %d has no effect", scaler_row, target_row)

        scaled = [scaler * x for x in self.elements[scaler_row]]
        for col, addend in enumerate(scaled):
            self.set(target_row, col, self.get(target_row, col) + addend)

        logger.debug("Added %s * R%d into R%d", scaler, scaler_row, target_row)

    def recompute_checksum(self) -> Fraction:
        """Checksum computed from scratch. Never stored."""
        return sum(
            (checksum_term(r, c, value)
             for r, row in enumerate(self.elements)
             for c, value in enumerate(row)),
            Fraction(0),
        )

    def compare(self, other: "Matrix") -> Comparison:
        if self._checksum != other._checksum:
            logger.warning(
                "Different checksums: %s != %s", self._checksum, other._checksum
            )
            return Comparison.CHECKSUM_MISMATCH
        if self.elements != other.elements:
            return Comparison.ELEMENTS_DIFFER
        return Comparison.EQUAL

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.compare(other) is Comparison.EQUAL

    def copy(self) -> "Matrix":
        # Carries the checksum over as-is instead of recomputing it.
        new = Matrix()
        new.elements = [row[:] for row in self.elements]
        new._checksum = self._checksum
        return new

    def __str__(self) -> str:
        lines = []
        for i, row in enumerate(self.elements):
            cells = ", ".join(format_rational(x) for x in row)
            lines.append(f"[{i}] [{cells}]")
        return "\n".join(lines)

    def to_sympy(self):
        import sympy as sp
        return sp.Matrix(self.height, self.width or 0, lambda i, j: self.elements[i][j])
