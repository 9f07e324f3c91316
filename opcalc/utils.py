from typing import TypeVar, Generic, Iterator, Iterable, Self, Optional


maxsize = 9223372036854775807
minsize = -maxsize - 1

T = TypeVar("T")

_MISSING = object()


class Peekable(Generic[T], Iterator[T]):
    """Single-pass stream with exactly one item of lookahead.

    ``peek()`` returns ``None`` once the stream is exhausted, so the
    wrapped iterable must not yield ``None`` itself. An exhausted stream
    stays exhausted; iterating it again resumes from the current position.
    """

    def __init__(self, iterable: Iterable[T]):
        self._it = iter(iterable)
        self._peeked: T | object = _MISSING

    def __iter__(self) -> Self:
        return self

    def _fill(self) -> bool:
        if self._peeked is _MISSING:
            try:
                self._peeked = next(self._it)
            except StopIteration:
                return False
        return True

    def __bool__(self) -> bool:
        return self._fill()

    def peek(self) -> Optional[T]:
        if not self._fill():
            return None
        return self._peeked

    def __next__(self) -> T:
        if self._peeked is not _MISSING:
            item, self._peeked = self._peeked, _MISSING
            return item
        return next(self._it)


def in_i64_range(value: int) -> bool:
    return minsize <= value <= maxsize
