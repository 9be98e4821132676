import threading
from collections import deque
from typing import Deque, Generic, Iterator, TypeVar

from scass.core.constants import RESULT_CHANNEL_CAPACITY
from scass.core.errors import ChannelClosedError

T = TypeVar("T")


class ResultChannel(Generic[T]):
    """
    A thread-safe bounded FIFO with an explicit end-of-stream.

    Producers block in put() while the channel is full. Consumers iterate the
    channel; iteration ends only after close() has been called and every
    buffered item has been handed out.
    """
    def __init__(self, capacity: int = RESULT_CHANNEL_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: Deque[T] = deque()
        self._cond = threading.Condition()
        self._closed = False
        self._aborted = False

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    @property
    def aborted(self) -> bool:
        with self._cond:
            return self._aborted

    def put(self, item: T) -> None:
        """
        Append item, waiting for room. Raises ChannelClosedError if the
        channel is closed before or while waiting.
        """
        with self._cond:
            while len(self._items) >= self.capacity and not self._closed:
                self._cond.wait()
            if self._closed:
                raise ChannelClosedError("result channel is closed")
            self._items.append(item)
            self._cond.notify_all()

    def get(self) -> T:
        """
        Remove the oldest item, waiting for one. Raises ChannelClosedError once
        the channel is closed and drained.
        """
        with self._cond:
            while not self._items and not self._closed:
                self._cond.wait()
            if not self._items:
                raise ChannelClosedError("result channel is closed")
            item = self._items.popleft()
            self._cond.notify_all()
            return item

    def close(self) -> None:
        """Stop accepting items. Buffered items remain readable."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def abort(self) -> None:
        """Close and discard buffered items, releasing blocked producers."""
        with self._cond:
            self._closed = True
            self._aborted = True
            self._items.clear()
            self._cond.notify_all()

    def qsize(self) -> int:
        with self._cond:
            return len(self._items)

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.get()
            except ChannelClosedError:
                return
