from typing import Generic, Iterator, Sequence, Self, TypeVar

maxsize = 9223372036854775807
imm32_min = -2147483648
imm32_max = 2147483647

T = TypeVar("T")


class Peekable(Generic[T], Iterator[T]):
    """
    Cursor over a materialized sequence with one item of lookahead.

    The last item is a sentinel: ``next`` returns it but never moves past it.
    """

    def __init__(self, items: Sequence[T]):
        if not items:
            raise ValueError("Peekable needs at least one item")
        self._items = items
        self._index = 0

    def __iter__(self) -> Self:
        return self

    def peek(self) -> T:
        return self._items[self._index]

    def __next__(self) -> T:
        item = self._items[self._index]
        if self._index < len(self._items) - 1:
            self._index += 1
        return item
