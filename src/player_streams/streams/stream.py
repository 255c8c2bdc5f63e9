"""
Lazy, pull-based asynchronous streams.
"""

import inspect
from typing import (
    Any, AsyncIterable, AsyncIterator, Callable, Generic, List, Optional,
    TypeVar, Union
)

from player_streams.streams.operators import (
    StreamOperator, MapOperator, FilterOperator, TakeOperator, SkipOperator,
    aclose_quietly
)

T = TypeVar('T')
U = TypeVar('U')


class Stream(Generic[T]):
    """
    A lazy asynchronous stream.

    Every ``async for`` over a stream builds a fresh pipeline from the source,
    so independent drains never share state. Transformations return a new
    stream and leave the receiver untouched.
    """

    def __init__(self, source: Union[AsyncIterable[T], Callable[[], AsyncIterator[T]]]):
        """
        Initialize stream.

        Args:
            source: Async iterable, or callable returning an async iterator
        """
        if callable(source):
            self._source = source
        elif hasattr(source, '__aiter__'):
            self._source = lambda: source.__aiter__()
        else:
            raise TypeError("Source must be an async iterable or callable")

        self._operators: List[StreamOperator] = []

    def __aiter__(self) -> AsyncIterator[T]:
        """Create iterator with all operators applied."""
        iterator = self._source()

        for op in self._operators:
            iterator = op.apply(iterator)

        return iterator

    def _with(self, operator: StreamOperator) -> 'Stream[Any]':
        new_stream = Stream(self._source)
        new_stream._operators = self._operators.copy()
        new_stream._operators.append(operator)
        return new_stream

    # Transformation operators

    def map(self, func: Callable[[T], U]) -> 'Stream[U]':
        """Apply function to each element."""
        return self._with(MapOperator(func))

    def filter(self, predicate: Callable[[T], bool]) -> 'Stream[T]':
        """Keep only elements matching predicate."""
        return self._with(FilterOperator(predicate))

    def take(self, n: int) -> 'Stream[T]':
        """Take first n elements."""
        return self._with(TakeOperator(n))

    def skip(self, n: int) -> 'Stream[T]':
        """Skip first n elements."""
        return self._with(SkipOperator(n))

    # Terminal operators

    async def collect(self) -> List[T]:
        """Collect all elements into a list."""
        iterator = self.__aiter__()
        try:
            return [item async for item in iterator]
        finally:
            await aclose_quietly(iterator)

    async def count(self) -> int:
        """Count elements."""
        total = 0
        iterator = self.__aiter__()
        try:
            async for _ in iterator:
                total += 1
        finally:
            await aclose_quietly(iterator)
        return total

    async def first(self) -> Optional[T]:
        """Get first element, or None if the stream is empty."""
        iterator = self.__aiter__()
        try:
            async for item in iterator:
                return item
            return None
        finally:
            await aclose_quietly(iterator)

    async def reduce(self, func: Callable[[U, T], U], initial: U) -> U:
        """Reduce stream to single value."""
        result = initial
        iterator = self.__aiter__()
        try:
            async for item in iterator:
                result = func(result, item)
        finally:
            await aclose_quietly(iterator)
        return result

    async def foreach(self, func: Callable[[T], Any]) -> None:
        """Apply a sync or async function to each element."""
        iterator = self.__aiter__()
        try:
            async for item in iterator:
                result = func(item)
                if inspect.isawaitable(result):
                    await result
        finally:
            await aclose_quietly(iterator)

    # Factory methods

    @classmethod
    def from_iterable(cls, iterable: AsyncIterable[T]) -> 'Stream[T]':
        """Create stream from an async iterable."""
        return cls(iterable)
