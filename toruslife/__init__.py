"""
Game of Life on a torus, built on a two-dimensional zipper.

Modules:
- zipper.py: Zipper, a circular sequence with a movable focus
- grid.py: Grid, a zipper of column zippers (toroidal 2D focus)
- stencil.py: View and extend(), the "look around, produce a value" transform
- life.py: Cell, board/step/population/gameover/resize, Game
- flat.py: plain row-major board with the same contract, for cross-checks
- patterns.py: named seed patterns
- cli.py: command line driver
"""
from .zipper import Direction, Zipper
from .grid import Compass, Coord, Grid
from .stencil import View, extend
from .life import (
    Board,
    Cell,
    Game,
    alive_cells,
    board,
    gameover,
    population,
    render,
    resize,
    run,
    step,
    step_game,
)

__version__ = '0.1.0'
