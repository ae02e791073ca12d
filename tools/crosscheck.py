import random
import time
import sys
from typing import List, Tuple
sys.path.append('.')
from toruslife import flat, life  # noqa: E402


def run_zipper(width: int, height: int, cells: List[Tuple[int, int]], generations: int) -> Tuple[List[Tuple[int, int]], int]:
    b = life.board(width, height, cells)
    t0 = time.time()
    for _ in range(generations):
        b = life.step(b)
    took = int((time.time() - t0) * 1000)
    return life.alive_cells(b), took


def run_flat(width: int, height: int, cells: List[Tuple[int, int]], generations: int) -> Tuple[List[Tuple[int, int]], int]:
    b = flat.board(width, height, cells)
    t0 = time.time()
    for _ in range(generations):
        b = flat.step(b)
    took = int((time.time() - t0) * 1000)
    return flat.alive_cells(b), took


def main():
    random.seed(0)
    total = 10
    generations = 20
    mismatches = 0
    for _ in range(total):
        seed = random.randrange(1_000_000)
        rng = random.Random(seed)
        width = rng.randint(3, 24)
        height = rng.randint(3, 24)
        cells = [(x, y) for y in range(height) for x in range(width) if rng.random() < 0.35]
        zip_cells, ms_zip = run_zipper(width, height, cells, generations)
        flat_cells, ms_flat = run_flat(width, height, cells, generations)
        print(f"seed={seed} size={width}x{height} zipper={len(zip_cells)} ({ms_zip}ms) flat={len(flat_cells)} ({ms_flat}ms)")
        if zip_cells != flat_cells:
            mismatches += 1
    print(f"Checked {total} seeds, mismatches={mismatches}")


if __name__ == '__main__':
    main()
