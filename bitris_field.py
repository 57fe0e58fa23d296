"""Bit-packed playing field"""
from typing import Iterator, Tuple

COLS, ROWS = 10, 20


class OutOfBounds(IndexError):
    """Raised when a cell outside the field is addressed."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"cell ({x}, {y}) outside {width}x{height} field")
        self.x, self.y = x, y


def allocation_size(width: int, height: int) -> int:
    """Number of bytes needed to hold width*height cells, one bit each."""
    bits = width * height
    return bits // 8 + (1 if bits % 8 else 0)


class Field:
    """
    Grid of width x height binary cells stored as a bit vector.

    Cell (x, y) lives at bit index y*width + x: byte index // 8, bit index % 8.
    Row 0 is the top of the field, row height-1 the floor.
    """

    def __init__(self, width: int = COLS, height: int = ROWS):
        self.width = width
        self.height = height
        self.bits = bytearray(allocation_size(width, height))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return y * self.width + x

    def get(self, x: int, y: int) -> bool:
        i = self._index(x, y)
        return bool(self.bits[i // 8] & 1 << i % 8)

    def set(self, x: int, y: int, occupied: bool) -> None:
        i = self._index(x, y)
        if occupied:
            self.bits[i // 8] |= 1 << i % 8
        else:
            self.bits[i // 8] &= ~(1 << i % 8) & 0xFF

    def is_row_full(self, y: int) -> bool:
        return all(self.get(x, y) for x in range(self.width))

    def copy_row(self, dst: int, src: int) -> None:
        """Overwrite row dst with row src; a src outside the field reads as empty."""
        inside = 0 <= src < self.height
        for x in range(self.width):
            self.set(x, dst, inside and self.get(x, src))

    def clear_row(self, y: int) -> None:
        for x in range(self.width):
            self.set(x, y, False)

    def row(self, y: int) -> Tuple[bool, ...]:
        return tuple(self.get(x, y) for x in range(self.width))

    def rows(self) -> Iterator[Tuple[bool, ...]]:
        for y in range(self.height):
            yield self.row(y)

    def copy(self) -> "Field":
        f = Field(self.width, self.height)
        f.bits[:] = self.bits
        return f

    def __eq__(self, other):
        if not isinstance(other, Field):
            return NotImplemented
        return (self.width, self.height, self.bits) == (other.width, other.height, other.bits)

    def __repr__(self):
        return f"Field({self.width}x{self.height})"
