from __future__ import annotations

from typing import Callable, Generic, List, Tuple, TypeVar

from .grid import Compass, Coord, Grid

T = TypeVar('T')
U = TypeVar('U')


class View(Generic[T]):
    """Read-only window on a grid focused at one position."""

    __slots__ = ('_grid',)

    def __init__(self, grid: Grid[T]):
        self._grid = grid

    def cursor(self) -> T:
        return self._grid.cursor

    def neighborhood(self) -> List[T]:
        return self._grid.neighborhood()

    def index(self) -> Coord:
        return self._grid.index

    def size(self) -> Tuple[int, int]:
        return self._grid.size


Rule = Callable[[View[T]], U]


def extend(grid: Grid[T], rule: Rule) -> Grid[U]:
    """
    Applies a local rule at every position of the grid at once.

    The rule sees a View focused on each cell in turn and returns that cell's
    new value; the results form a new grid with the same size and focus.
    Every rule call reads the original values, never earlier results, and
    the input grid is left untouched.

    The views come from walking a single working copy with shift(): EAST for
    each cell of a row, SOUTH once per row, so a whole pass costs about
    width * height shifts. A View is only meaningful while the rule runs.
    """
    width, height = grid.size
    work = grid.copy()
    work.seek((0, 0))
    view = View(work)
    columns: List[List[U]] = [[] for _ in range(width)]
    for _ in range(height):
        for x in range(width):
            columns[x].append(rule(view))
            work.shift(Compass.EAST)
        work.shift(Compass.SOUTH)
    out = Grid.from_columns(columns)
    out.seek(grid.index)
    return out
