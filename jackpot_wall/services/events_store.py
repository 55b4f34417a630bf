from __future__ import annotations

import threading
from collections import deque
from datetime import datetime, timezone
from typing import Any, Callable, Deque, List, Mapping, Union

from jackpot_wall.schemas.event import ChainEvent, NewChainEvent

# Recent chain activity only; the chain itself stays the source of truth
MAX_EVENTS = 50


def _now_ms() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)


class EventStore:
    """Bounded in-memory buffer of ingested chain events, newest first.

    One instance lives for the whole process (see ``jackpot_wall.application.create_app``). Sync route
    handlers run in a thread pool, so mutations are serialized with a lock.
    """

    def __init__(self, maxlen: int = MAX_EVENTS, clock: Callable[[], int] = _now_ms):
        if maxlen < 1:
            raise ValueError("maxlen must be positive")
        self._events: Deque[ChainEvent] = deque(maxlen=maxlen)
        self._clock = clock
        self._lock = threading.Lock()

    def add(self, event: Union[NewChainEvent, Mapping[str, Any]]) -> ChainEvent:
        """Stamp, prepend and return the stored entry.

        Once the buffer is full the oldest entry (the tail) is dropped.
        """
        if isinstance(event, NewChainEvent):
            fields = event.model_dump()
        else:
            fields = NewChainEvent.model_validate(dict(event)).model_dump()
        with self._lock:
            stored = ChainEvent(**fields, timestamp=self._clock())
            self._events.appendleft(stored)
        return stored

    def get_all(self) -> List[ChainEvent]:
        with self._lock:
            return list(self._events)

    def count(self) -> int:
        with self._lock:
            return len(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()
