from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Generic, Iterable, Iterator, List, Sequence, Tuple, TypeVar

from .zipper import Direction, Zipper

T = TypeVar('T')
Coord = Tuple[int, int]  # (x, y): column, row


class Compass(Enum):
    NORTH = 'north'  # y - 1
    EAST = 'east'    # x + 1
    SOUTH = 'south'  # y + 1
    WEST = 'west'    # x - 1


class Grid(Generic[T]):
    """
    A toroidal 2D zipper: a zipper of columns, each column a zipper over rows.

    Every column keeps the same height and the same row focus, so the focused
    cell is the cursor of the focused column. Vertical shifts are applied to
    every column alike to keep it that way.
    """

    __slots__ = ('_columns',)

    def __init__(self, columns: Zipper[Zipper[T]]):
        self._columns = columns

    # ---- construction ----

    @classmethod
    def from_columns(cls, columns: Sequence[Sequence[T]]) -> 'Grid[T]':
        """Dense construction from equally tall columns, focused at (0, 0)."""
        return cls(Zipper.from_list([Zipper.from_list(col) for col in columns]))

    @classmethod
    def filled(cls, width: int, height: int, value: T) -> 'Grid[T]':
        if width < 1 or height < 1:
            raise ValueError(f'grid dimensions must be positive, got {width}x{height}')
        return cls.from_columns([[value] * height for _ in range(width)])

    @classmethod
    def from_map(cls, default: T, pairs: Iterable[Tuple[Coord, T]]) -> 'Grid[T]':
        """
        Builds a grid from sparse ((x, y), value) pairs, focused at (0, 0).

        The extent comes from the largest x and y given; the far corner is
        filled with default when absent so every column gets the full height.
        """
        entries = list(pairs)
        max_x = max((x for (x, _), _ in entries), default=0)
        max_y = max((y for (_, y), _ in entries), default=0)
        if (max_x, max_y) not in {c for c, _ in entries}:
            entries.append(((max_x, max_y), default))
        width, height = max_x + 1, max_y + 1
        by_column: Dict[int, List[Tuple[int, T]]] = {}
        for (x, y), v in entries:
            by_column.setdefault(x % width, []).append((y, v))
        columns = [
            Zipper.from_map(default, by_column.get(x, []), size=height)
            for x in range(width)
        ]
        return cls(Zipper.from_list(columns))

    def copy(self) -> 'Grid[T]':
        return Grid(Zipper.from_list([col.copy() for col in self._columns], self._columns.index))

    # ---- queries ----

    @property
    def cursor(self) -> T:
        return self._columns.cursor.cursor

    @property
    def index(self) -> Coord:
        return self._columns.index, self._columns.cursor.index

    @property
    def size(self) -> Tuple[int, int]:
        return self._columns.size, self._columns.cursor.size

    @property
    def width(self) -> int:
        return self._columns.size

    @property
    def height(self) -> int:
        return self._columns.cursor.size

    def neighborhood(self) -> List[T]:
        """
        The Moore neighbourhood of the focus.

        Vertical neighbours of the focused column first, then for each side
        column its cursor and its own vertical neighbours. A width or height
        below 3 leaves fewer than 8 cells; nothing is padded or deduplicated.
        """
        cells = self._columns.cursor.neighborhood()
        for side in self._columns.neighborhood():
            cells.append(side.cursor)
            cells.extend(side.neighborhood())
        return cells

    def lookup(self, coord: Coord) -> T:
        x, y = coord
        return self._columns.lookup(x).lookup(y)

    def __getitem__(self, coord: Coord) -> T:
        return self.lookup(coord)

    def to_lists(self) -> List[List[T]]:
        """Columns in x order, each listed in y order."""
        return [col.to_list() for col in self._columns]

    def items(self) -> Iterator[Tuple[Coord, T]]:
        for x, col in enumerate(self._columns):
            for y, v in enumerate(col):
                yield (x, y), v

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._columns == other._columns

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        w, h = self.size
        return f"Grid(size={w}x{h}, index={self.index})"

    # ---- focus movement ----

    def shift(self, compass: Compass) -> None:
        """Moves the focus one cell, in place, wrapping at the edges."""
        if compass is Compass.NORTH or compass is Compass.SOUTH:
            direction = Direction.LEFT if compass is Compass.NORTH else Direction.RIGHT
            for col in self._columns:
                col.shift(direction)
        elif compass is Compass.EAST:
            self._columns.shift(Direction.RIGHT)
        else:
            self._columns.shift(Direction.LEFT)

    def seek(self, coord: Coord) -> None:
        x, y = coord
        self._columns.seek(x)
        for col in self._columns:
            col.seek(y)

    # ---- edits ----

    def adjust(self, f: Callable[[T], T], coord: Coord) -> None:
        x, y = coord
        self._columns.lookup(x).adjust(f, y)

    def update(self, value: T, coord: Coord) -> None:
        self.adjust(lambda _: value, coord)

    def resize(self, dwidth: int, dheight: int, fill: T) -> None:
        """
        Adds or removes columns and rows in place.

        Negative amounts drop the last columns or rows, positive amounts
        append fill-valued ones after them. The focus keeps its coordinate
        unless its column or row is dropped. The two axes are independent.
        """
        width, height = self.size
        if width + dwidth < 1 or height + dheight < 1:
            raise ValueError(
                f'cannot resize a {width}x{height} grid by ({dwidth}, {dheight})'
            )
        for col in self._columns:
            col.resize(dheight, lambda: fill)
        row = self._columns.cursor.index
        new_height = height + dheight

        def blank_column() -> Zipper[T]:
            return Zipper.from_list([fill] * new_height, row)

        self._columns.resize(dwidth, blank_column)
