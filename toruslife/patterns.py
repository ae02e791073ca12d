"""Named Game of Life seeds, drawn as rows of text ('#' alive, '.' dead)."""
from __future__ import annotations

from typing import Dict, List, Tuple

from .grid import Coord

PATTERNS: Dict[str, Tuple[str, ...]] = {
    # Still lifes (period 1)
    'block': (
        '##',
        '##',
    ),
    'beehive': (
        '.##.',
        '#..#',
        '.##.',
    ),
    'boat': (
        '##.',
        '#.#',
        '.#.',
    ),
    'loaf': (
        '.##.',
        '#..#',
        '.#.#',
        '..#.',
    ),
    # Oscillators (period 2)
    'blinker': (
        '###',
    ),
    'toad': (
        '.###',
        '###.',
    ),
    'beacon': (
        '##..',
        '##..',
        '..##',
        '..##',
    ),
    # Spaceships (period 4)
    'glider': (
        '.#.',
        '..#',
        '###',
    ),
    'lwss': (
        '.#..#',
        '#....',
        '#...#',
        '####.',
    ),
}


def pattern_size(name: str) -> Tuple[int, int]:
    rows = PATTERNS[name]
    return max(len(r) for r in rows), len(rows)


def get_pattern(name: str, origin: Coord = (0, 0)) -> List[Coord]:
    """Live cells of a named pattern with its top-left corner at origin."""
    if name not in PATTERNS:
        raise KeyError(f"unknown pattern {name!r}; choose from {', '.join(sorted(PATTERNS))}")
    ox, oy = origin
    return [
        (ox + x, oy + y)
        for y, row in enumerate(PATTERNS[name])
        for x, ch in enumerate(row)
        if ch == '#'
    ]


def centered(name: str, width: int, height: int) -> List[Coord]:
    """Places a named pattern in the middle of a width x height board."""
    pw, ph = pattern_size(name)
    return get_pattern(name, ((width - pw) // 2, (height - ph) // 2))
