"""Fan-in of several iterables into one stream, each source drained by its own thread."""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class _Done:
    pass


@dataclass(frozen=True)
class _Failure:
    error: BaseException


_DONE = _Done()


def _drain(source: Iterable[Any], sink: queue.SimpleQueue) -> None:
    try:
        for item in source:
            sink.put(item)
    except Exception as err:
        sink.put(_Failure(err))
    finally:
        sink.put(_DONE)


def merge_iterables(*args: Iterable[T]) -> Iterator[T]:
    """Merge ``args`` into one iterator, yielding items as soon as any source produces them.

    Items from one source keep their relative order; the interleaving between
    sources is unspecified. An exception raised by a source is re-raised by
    the merged iterator.
    """
    sink: queue.SimpleQueue = queue.SimpleQueue()
    for source in args:
        threading.Thread(target=_drain, args=(source, sink), daemon=True).start()
    return _collect(sink, len(args))


def _collect(sink: queue.SimpleQueue, sources: int) -> Iterator[Any]:
    remaining = sources
    while remaining:
        item = sink.get()
        if item is _DONE:
            remaining -= 1
        elif isinstance(item, _Failure):
            raise item.error
        else:
            yield item


def _produce(values: list[int]) -> Iterator[int]:
    yield from values


def merge_channel_pattern() -> list[int]:
    """Merge three producers of 1-3, 4-6 and 7-9 and return the sorted result."""
    merged = merge_iterables(
        _produce([1, 2, 3]), _produce([4, 5, 6]), _produce([7, 8, 9])
    )
    return sorted(merged)