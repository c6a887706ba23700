import random
from fractions import Fraction

import numpy as np

from rowops.matrix import Matrix
from rowops.operations import Multiply, ReplaceWithMultiple, SwapRows


def independent_checksum(M: Matrix) -> Fraction:
    """
    Checksum from scratch: weights (r + c) times the cells, summed.
    Uses object arrays so the Fractions stay exact.
    """
    if M.height == 0 or not M.width:
        return Fraction(0)
    cells = np.array(M.elements, dtype=object)
    weights = np.add.outer(np.arange(M.height), np.arange(M.width)).astype(object)
    return Fraction(sum((weights * cells).flat, Fraction(0)))


def assert_checksum_consistent(M: Matrix) -> None:
    expected = independent_checksum(M)
    assert M.checksum == expected, (
        f"checksum {M.checksum} drifted from elements ({expected}):\n{M}"
    )


def random_row_operation(height: int):
    """A random valid row operation for a matrix with ``height`` rows."""
    kind = random.choice([SwapRows, Multiply, ReplaceWithMultiple])
    scaler = Fraction(random.randint(-5, 5), random.randint(1, 4))
    if kind is SwapRows:
        return SwapRows(random.randrange(height), random.randrange(height))
    if kind is Multiply:
        return Multiply(row=random.randrange(height), scaler=scaler)
    return ReplaceWithMultiple(
        scaler=scaler,
        scaler_row=random.randrange(height),
        target_row=random.randrange(height),
    )


def random_fraction(bound: int = 9) -> Fraction:
    return Fraction(random.randint(-bound, bound), random.randint(1, bound))


def make_random_matrix(nrows: int, ncols: int) -> Matrix:
    """Generate a random matrix of small fractions."""
    return Matrix.from_rows(
        [[random_fraction() for _ in range(ncols)] for _ in range(nrows)]
    )
