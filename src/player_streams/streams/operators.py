"""
Stream operators for transformation.

Each operator wraps exactly one upstream async iterator and pulls from it on
demand. Nothing is buffered beyond the element currently in flight.
"""

from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Callable, TypeVar

T = TypeVar('T')
U = TypeVar('U')


async def aclose_quietly(iterator: AsyncIterator[Any]) -> None:
    """Close an upstream iterator if it supports ``aclose``."""
    aclose = getattr(iterator, 'aclose', None)
    if aclose is not None:
        await aclose()


class StreamOperator(ABC):
    """Base class for stream operators."""

    @abstractmethod
    def apply(self, iterator: AsyncIterator[T]) -> AsyncIterator[Any]:
        """Apply operator to iterator."""
        pass


class MapOperator(StreamOperator):
    """Map each element to a new value."""

    def __init__(self, func: Callable[[T], U]):
        self.func = func

    async def apply(self, iterator: AsyncIterator[T]) -> AsyncIterator[U]:
        try:
            async for item in iterator:
                yield self.func(item)
        finally:
            await aclose_quietly(iterator)


class FilterOperator(StreamOperator):
    """Filter elements by predicate."""

    def __init__(self, predicate: Callable[[T], bool]):
        self.predicate = predicate

    async def apply(self, iterator: AsyncIterator[T]) -> AsyncIterator[T]:
        try:
            async for item in iterator:
                if self.predicate(item):
                    yield item
        finally:
            await aclose_quietly(iterator)


class TakeOperator(StreamOperator):
    """Take first n elements."""

    def __init__(self, n: int):
        if n < 0:
            raise ValueError(f"take count must be non-negative, got {n}")
        self.n = n

    async def apply(self, iterator: AsyncIterator[T]) -> AsyncIterator[T]:
        try:
            if self.n == 0:
                return
            taken = 0
            async for item in iterator:
                yield item
                taken += 1
                if taken >= self.n:
                    break
        finally:
            await aclose_quietly(iterator)


class SkipOperator(StreamOperator):
    """Skip first n elements."""

    def __init__(self, n: int):
        if n < 0:
            raise ValueError(f"skip count must be non-negative, got {n}")
        self.n = n

    async def apply(self, iterator: AsyncIterator[T]) -> AsyncIterator[T]:
        try:
            skipped = 0
            async for item in iterator:
                if skipped < self.n:
                    skipped += 1
                    continue
                yield item
        finally:
            await aclose_quietly(iterator)
