# matrix.py

"""
4x4 matrix algebra.

Matrix values are immutable; every operation builds a new value, so a destination
register that is also an operand is never partially overwritten.
"""

from typing import Iterable, List, Sequence, Tuple

SIZE = 4
CELL_COUNT = SIZE * SIZE

# Any cell above this magnitude switches the whole matrix to scientific notation.
SCIENTIFIC_THRESHOLD = 1000.0


class Matrix:
    """A 4x4 grid of floats stored row-major."""

    __slots__ = ('_cells',)

    def __init__(self, cells: Iterable[float] = ()):
        cells = tuple(float(v) for v in cells)
        if len(cells) != CELL_COUNT:
            raise ValueError(f"A matrix needs {CELL_COUNT} cells, got {len(cells)}")
        self._cells: Tuple[float, ...] = cells

    @classmethod
    def zeros(cls) -> "Matrix":
        return cls([0.0] * CELL_COUNT)

    @property
    def cells(self) -> Tuple[float, ...]:
        return self._cells

    def get(self, row: int, col: int) -> float:
        return self._cells[row * SIZE + col]

    def rows(self) -> List[Tuple[float, ...]]:
        return [self._cells[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self):
        return hash(self._cells)

    def __repr__(self):
        return f"Matrix({self.rows()})"


def load(values: Sequence[float]) -> Matrix:
    """
    Builds a matrix from values in row-major order.

    Values past the sixteenth are ignored and missing cells are zero.
    """
    cells = list(values[:CELL_COUNT])
    cells.extend([0.0] * (CELL_COUNT - len(cells)))
    return Matrix(cells)


def add(a: Matrix, b: Matrix) -> Matrix:
    return Matrix(x + y for x, y in zip(a.cells, b.cells))


def sub(a: Matrix, b: Matrix) -> Matrix:
    return Matrix(x - y for x, y in zip(a.cells, b.cells))


def mul(a: Matrix, b: Matrix) -> Matrix:
    """Standard matrix product a x b."""
    temp = [0.0] * CELL_COUNT
    for row in range(SIZE):
        for col in range(SIZE):
            total = 0.0
            for k in range(SIZE):
                total += a.get(row, k) * b.get(k, col)
            temp[row * SIZE + col] = total
    return Matrix(temp)


def mul_scalar(a: Matrix, scalar: float) -> Matrix:
    return Matrix(x * scalar for x in a.cells)


def transpose(a: Matrix) -> Matrix:
    return Matrix(a.get(col, row) for row in range(SIZE) for col in range(SIZE))


def needs_scientific(a: Matrix) -> bool:
    return any(abs(x) > SCIENTIFIC_THRESHOLD for x in a.cells)


def render(a: Matrix) -> str:
    """
    Formats the matrix as four tab-separated rows.

    The notation is chosen for the whole matrix: scientific with two fractional
    digits when any cell exceeds the threshold in magnitude, fixed-point otherwise.
    """
    cell_format = "{:10.2e}" if needs_scientific(a) else "{:7.2f}"
    return "\n".join(
        "\t".join(cell_format.format(x) for x in row)
        for row in a.rows()
    )
