from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Callable, Deque, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar('T')


class Direction(Enum):
    LEFT = 'left'
    RIGHT = 'right'


class Zipper(Generic[T]):
    """
    A non-empty circular sequence with one focused element.

    The non-focus elements live in a deque in traversal order starting just
    right of the focus: for a focus at index i of n, ``_rest`` holds the
    values at i+1, i+2, ..., i+n-1 (mod n). So ``_rest[0]`` is the right
    neighbour and ``_rest[-1]`` the left one, and shifting the focus only
    moves one element between the two ends of the deque.

    All indexed operations take any int and reduce it modulo the size.
    """

    __slots__ = ('_rest', '_focus', '_index')

    def __init__(self, focus: T, rest: Iterable[T] = (), index: int = 0):
        self._focus = focus
        self._rest: Deque[T] = deque(rest)
        self._index = index % (len(self._rest) + 1)

    # ---- construction ----

    @classmethod
    def from_list(cls, values: Iterable[T], index: int = 0) -> 'Zipper[T]':
        """Builds a zipper over values in index order, focused at index."""
        items = list(values)
        if not items:
            raise ValueError('cannot build an empty zipper')
        n = len(items)
        i = index % n
        return cls(items[i], items[i + 1:] + items[:i], i)

    @classmethod
    def from_map(
        cls,
        default: T,
        pairs: Iterable[Tuple[int, T]],
        size: Optional[int] = None,
    ) -> 'Zipper[T]':
        """
        Builds a zipper from sparse (index, value) pairs, focused at index 0.

        The size is the largest index plus one unless given explicitly; an
        empty list gives a single default cell. Missing indices hold default.
        """
        entries = list(pairs)
        if size is None:
            size = max((k for k, _ in entries), default=0) + 1
        if size < 1:
            raise ValueError('cannot build an empty zipper')
        items: List[T] = [default] * size
        for k, v in entries:
            items[k % size] = v
        return cls.from_list(items)

    def copy(self) -> 'Zipper[T]':
        return Zipper(self._focus, self._rest, self._index)

    # ---- queries ----

    @property
    def cursor(self) -> T:
        return self._focus

    @property
    def index(self) -> int:
        return self._index

    @property
    def size(self) -> int:
        return len(self._rest) + 1

    def __len__(self) -> int:
        return len(self._rest) + 1

    def neighborhood(self) -> List[T]:
        """Left and right neighbours of the focus; the whole rest when size <= 2."""
        if len(self._rest) <= 1:
            return list(self._rest)
        return [self._rest[-1], self._rest[0]]

    def _position(self, k: int) -> int:
        # Deque slot for logical index k; -1 means the focus itself.
        return (k - self._index) % self.size - 1

    def lookup(self, k: int) -> T:
        pos = self._position(k)
        if pos < 0:
            return self._focus
        return self._rest[pos]

    def __getitem__(self, k: int) -> T:
        return self.lookup(k)

    def to_list(self) -> List[T]:
        n = self.size
        out: List[T] = [self._focus] * n
        for p, v in enumerate(self._rest):
            out[(self._index + 1 + p) % n] = v
        return out

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Zipper):
            return NotImplemented
        return (
            self.size == other.size
            and self._index == other._index
            and self.to_list() == other.to_list()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Zipper(index={self._index}, values={self.to_list()!r})"

    # ---- focus movement ----

    def shift(self, direction: Direction) -> None:
        """Moves the focus one step left or right, in place."""
        if not self._rest:
            return
        if direction is Direction.RIGHT:
            self._rest.append(self._focus)
            self._focus = self._rest.popleft()
            self._index = (self._index + 1) % self.size
        else:
            self._rest.appendleft(self._focus)
            self._focus = self._rest.pop()
            self._index = (self._index - 1) % self.size

    def seek(self, k: int) -> None:
        """Moves the focus to logical index k by the shorter way round."""
        n = self.size
        ahead = (k - self._index) % n
        if ahead <= n - ahead:
            for _ in range(ahead):
                self.shift(Direction.RIGHT)
        else:
            for _ in range(n - ahead):
                self.shift(Direction.LEFT)

    # ---- edits ----

    def adjust(self, f: Callable[[T], T], k: int) -> None:
        pos = self._position(k)
        if pos < 0:
            self._focus = f(self._focus)
        else:
            self._rest[pos] = f(self._rest[pos])

    def update(self, value: T, k: int) -> None:
        self.adjust(lambda _: value, k)

    def resize(self, delta: int, fill: Callable[[], T]) -> None:
        """
        Grows or shrinks the circle by delta elements, in place.

        Both directions act on the highest logical indices: shrinking drops
        indices size+delta..size-1 and growing appends fresh fill() values
        after index size-1. The focus keeps its index unless it was dropped,
        in which case it lands on the new last index.
        """
        n = self.size
        if n + delta < 1:
            raise ValueError(f'cannot resize a zipper of size {n} by {delta}')
        values = self.to_list()
        if delta < 0:
            del values[n + delta:]
        else:
            values.extend(fill() for _ in range(delta))
        i = min(self._index, len(values) - 1)
        self._focus = values[i]
        self._rest = deque(values[i + 1:] + values[:i])
        self._index = i
