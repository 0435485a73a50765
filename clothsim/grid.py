"""Flat, row-major storage addressed by (x, y) grid coordinates."""

from typing import Generic, Iterator, List, Sequence, Tuple, TypeVar

T = TypeVar("T")

GridIdx = Tuple[int, int]


class Grid(Generic[T]):
    """
    A fixed-size 2-D view over a flat list.

    ``index = y * width + x``. Coordinates outside ``0 <= x < width`` and
    ``0 <= y < height`` raise ``IndexError``; there is no wrap-around for
    negative values and no resizing after construction.
    """

    def __init__(self, data: Sequence[T], width: int):
        if width <= 0:
            raise ValueError(f"grid width must be positive, got {width}")
        if len(data) % width != 0:
            raise ValueError(f"{len(data)} cells do not fill rows of width {width}")
        self.data: List[T] = list(data)
        self._width = int(width)
        self._height = len(self.data) // self._width

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def index_of(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"grid coordinate ({x}, {y}) outside {self._width}x{self._height}")
        return y * self._width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> T:
        return self.data[self.index_of(x, y)]

    # Python hands out references, so the mutable accessor is the same lookup.
    get_mut = get

    def __getitem__(self, idx: GridIdx) -> T:
        return self.data[self.index_of(*idx)]

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self):
        return f"<Grid {self._width}x{self._height}>"
