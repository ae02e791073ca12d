"""
Plain row-major torus board behind the same board/step/population/gameover
contract as toruslife.life. Every step looks up each neighbour by wrapped
coordinates; it is the straightforward version the zipper board is checked
against.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .grid import Coord
from .life import Cell

_OFFSETS: Tuple[Coord, ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


@dataclass(frozen=True)
class FlatBoard:
    """A width x height grid of cells stored row by row."""
    width: int
    height: int
    grid: Tuple[Cell, ...]  # row-major, length == width * height

    def index(self, x: int, y: int) -> int:
        """Calculates the flat index for a given column and row."""
        return y * self.width + x

    def at(self, x: int, y: int) -> Cell:
        """Gets the cell at a given column and row with wrap-around logic."""
        return self.grid[self.index(x % self.width, y % self.height)]

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def neighbors(self, coord: Coord) -> List[Cell]:
        x, y = coord
        return [self.at(x + dx, y + dy) for dx, dy in _OFFSETS]


def board(width: int, height: int, alive: Iterable[Coord] = ()) -> FlatBoard:
    if width < 1 or height < 1:
        raise ValueError(f'board dimensions must be positive, got {width}x{height}')
    cells = [Cell.DEAD] * (width * height)
    for x, y in alive:
        cells[(y % height) * width + (x % width)] = Cell.ALIVE
    return FlatBoard(width=width, height=height, grid=tuple(cells))


def _next(current: Cell, live: int) -> Cell:
    if current is Cell.DEAD:
        return Cell.ALIVE if live == 3 else Cell.DEAD
    return Cell.ALIVE if live in (2, 3) else Cell.DEAD


def step(b: FlatBoard) -> FlatBoard:
    cells = []
    for coord in b.coords():
        live = sum(1 for c in b.neighbors(coord) if c is Cell.ALIVE)
        cells.append(_next(b.at(*coord), live))
    return FlatBoard(width=b.width, height=b.height, grid=tuple(cells))


def population(b: FlatBoard) -> int:
    return sum(1 for c in b.grid if c is Cell.ALIVE)


def gameover(b: FlatBoard) -> bool:
    return population(b) == 0


def alive_cells(b: FlatBoard) -> List[Coord]:
    return sorted(coord for coord in b.coords() if b.at(*coord) is Cell.ALIVE)
