from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List

from .grid import Coord, Grid
from .stencil import View, extend


class Cell(Enum):
    ALIVE = 'alive'
    DEAD = 'dead'


Board = Grid[Cell]


def board(width: int, height: int, alive: Iterable[Coord] = ()) -> Board:
    """Creates a width x height board with the given cells alive; coordinates wrap."""
    b = Grid.filled(width, height, Cell.DEAD)
    for coord in alive:
        b.update(Cell.ALIVE, coord)
    return b


def live_neighbors(view: View[Cell]) -> int:
    return sum(1 for c in view.neighborhood() if c is Cell.ALIVE)


def rule(view: View[Cell]) -> Cell:
    """Conway's B3/S23 rule for the focused cell."""
    n = live_neighbors(view)
    if view.cursor() is Cell.DEAD:
        return Cell.ALIVE if n == 3 else Cell.DEAD
    return Cell.ALIVE if n in (2, 3) else Cell.DEAD


def step(b: Board) -> Board:
    """Computes the next generation; the given board is not modified."""
    return extend(b, rule)


def population(b: Board) -> int:
    """Returns the total number of living cells on the board."""
    return sum(1 for _, c in b.items() if c is Cell.ALIVE)


def gameover(b: Board) -> bool:
    """Checks whether every cell is dead."""
    return population(b) == 0


def resize(dwidth: int, dheight: int, b: Board) -> Board:
    """Returns a copy of the board with columns/rows added (Dead) or removed."""
    out = b.copy()
    out.resize(dwidth, dheight, Cell.DEAD)
    return out


def alive_cells(b: Board) -> List[Coord]:
    return sorted(coord for coord, c in b.items() if c is Cell.ALIVE)


def render(b: Board, alive: str = '#', dead: str = '.') -> str:
    """Generates a human-readable picture of the board, one line per row."""
    width, height = b.size
    lines: List[str] = []
    for y in range(height):
        row = [alive if b.lookup((x, y)) is Cell.ALIVE else dead for x in range(width)]
        lines.append(' '.join(row))
    return '\n'.join(lines)


@dataclass(frozen=True)
class Game:
    """
    A board together with the number of generations it has run.

    Games compare by value but cannot be hashed, since the board inside is
    a mutable grid.
    """
    time: int
    board: Board

    __hash__ = None  # type: ignore[assignment]


def step_game(game: Game) -> Game:
    return Game(game.time + 1, step(game.board))


def run(b: Board, generations: int) -> Iterator[Game]:
    """Yields the starting game and each of the next generations."""
    game = Game(0, b)
    yield game
    for _ in range(generations):
        game = step_game(game)
        yield game
