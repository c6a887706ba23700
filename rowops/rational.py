"""Exact rational arithmetic helpers.

Every number the calculator touches is a :class:`fractions.Fraction`, so
row operations never round and the matrix checksum can be compared for
exact equality.
"""

from fractions import Fraction
from typing import List, Union

Rational = Union[Fraction, int]


class RationalParseError(ValueError):
    """Raised when a token cannot be read as an exact rational."""


def parse_rational(token: str) -> Fraction:
    """Parse ``token`` into a Fraction.

    Accepts integers (``-2``), decimals (``1.25``) and fractions
    (``-3/2``). Decimals are converted exactly, never through a float.
    Exponent forms such as ``1e5`` are rejected: a large exponent would
    expand into an enormous integer.
    """
    text = token.strip()
    if not text:
        raise RationalParseError("Expected a number, got an empty token.")
    if "e" in text.lower():
        raise RationalParseError(
            f"\"{token}\" uses exponent notation, which is not supported."
        )
    try:
        return Fraction(text)
    except ZeroDivisionError:
        raise RationalParseError(f"\"{token}\" has a zero denominator.") from None
    except ValueError:
        raise RationalParseError(
            f"Failed to parse \"{token}\" as a number "
            "(expected an integer, decimal or fraction like -3/2)."
        ) from None


def parse_row(line: str) -> List[Fraction]:
    """Parse a whitespace separated line of numbers into a row."""
    return [parse_rational(token) for token in line.split()]


def to_rational(value: Rational) -> Fraction:
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Fraction(value)
    raise TypeError(
        f"Expected an exact rational (int or Fraction), got {type(value).__name__}"
    )


def format_rational(value: Rational) -> str:
    """Render ``value`` as ``n`` or ``n/d`` in lowest terms."""
    value = Fraction(value)
    if value.denominator == 1:
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"


def checksum_term(row: int, col: int, value: Fraction) -> Fraction:
    # Contribution of one cell to the matrix checksum.
    return (row + col) * value
