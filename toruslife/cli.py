from __future__ import annotations

import argparse
import os
import random
import time
from typing import List, Optional, Sequence

from . import flat, life
from .grid import Coord
from .patterns import PATTERNS, get_pattern, centered


def env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def debug_enabled() -> bool:
    return os.getenv('TORUSLIFE_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


def _parse_coord(text: str) -> Coord:
    sep = ',' if ',' in text else ' '
    x_s, y_s = [t for t in text.split(sep) if t != '']
    return int(x_s), int(y_s)


def random_cells(width: int, height: int, density: float, seed: Optional[int] = None) -> List[Coord]:
    """Picks each cell alive with the given probability."""
    rng = random.Random(seed)
    return [(x, y) for y in range(height) for x in range(width) if rng.random() < density]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Conway's Game of Life on a torus")
    parser.add_argument('--width', type=int, default=env_int('TORUSLIFE_WIDTH', 20), help='Board width (columns)')
    parser.add_argument('--height', type=int, default=env_int('TORUSLIFE_HEIGHT', 10), help='Board height (rows)')
    parser.add_argument('--generations', '-n', type=int, default=10, help='Number of generations to run')
    parser.add_argument('--pattern', choices=sorted(PATTERNS), default=None, help='Named seed pattern')
    parser.add_argument('--at', default=None, help='Top-left corner for --pattern as x,y (default: centered)')
    parser.add_argument('--random', type=float, default=None, metavar='DENSITY', help='Seed cells at random with this density')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for --random')
    parser.add_argument('--flat', action='store_true', help='Run on the plain row-major board')
    parser.add_argument('--until-gameover', action='store_true', help='Stop early once every cell is dead')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    debug = debug_enabled()

    if args.width < 1 or args.height < 1:
        parser.error('--width and --height must be positive')
    if args.generations < 0:
        parser.error('--generations must not be negative')

    cells: List[Coord] = []
    if args.pattern:
        if args.at:
            try:
                origin = _parse_coord(args.at)
            except ValueError:
                parser.error(f'could not parse --at {args.at!r}; expected x,y')
            cells.extend(get_pattern(args.pattern, origin))
        else:
            cells.extend(centered(args.pattern, args.width, args.height))
    if args.random is not None:
        if not 0.0 <= args.random <= 1.0:
            parser.error('--random must be between 0 and 1')
        cells.extend(random_cells(args.width, args.height, args.random, args.seed))
    if debug:
        print(f"[life] {args.width}x{args.height} board, {len(cells)} seed cells, flat={args.flat}")

    if args.flat:
        b = flat.board(args.width, args.height, cells)
        for t in range(args.generations + 1):
            print(f"Generation {t} (population {flat.population(b)}):")
            print(life.render(life.board(b.width, b.height, flat.alive_cells(b))))
            if args.until_gameover and flat.gameover(b):
                print('All cells are dead.')
                break
            if t < args.generations:
                b = flat.step(b)
        return

    started = time.time()
    for game in life.run(life.board(args.width, args.height, cells), args.generations):
        print(f"Generation {game.time} (population {life.population(game.board)}):")
        print(life.render(game.board))
        if args.until_gameover and life.gameover(game.board):
            print('All cells are dead.')
            break
    if debug:
        print(f"[life] elapsed_sec={time.time() - started:.3f}")


if __name__ == '__main__':
    main()
