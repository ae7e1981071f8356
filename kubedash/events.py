"""Background event loop delivering input events and periodic ticks."""

from __future__ import annotations

import queue
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class EventConfig:
    """Event handling settings; ``tick_rate`` is in seconds."""

    tick_rate: float = 0.25

    def __post_init__(self) -> None:
        if self.tick_rate <= 0:
            raise ValueError("tick_rate must be positive")


class EventKind(Enum):
    """What an event represents."""

    INPUT = "input"
    MOUSE_INPUT = "mouse_input"
    TICK = "tick"


@dataclass(frozen=True)
class Event:
    """An occurred event with its optional payload."""

    kind: EventKind
    payload: Any = None


Reader = Callable[[float], "Event | None"]

_FORWARDED = (EventKind.INPUT, EventKind.MOUSE_INPUT)


class Events:
    """Collects input and tick events from a background thread.

    ``reader(timeout)`` waits at most ``timeout`` seconds for terminal input and
    returns an input or mouse :class:`Event`, or None when nothing arrived.
    A tick event is emitted every ``tick_rate`` seconds.
    """

    def __init__(self, config: EventConfig | None, reader: Reader) -> None:
        self._config = config or EventConfig()
        self._reader = reader
        self._queue: queue.Queue[Event | BaseException] = queue.Queue()
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, name="events", daemon=True)
        self._thread.start()

    def _run(self) -> None:
        tick_rate = self._config.tick_rate
        last_tick = time.monotonic()
        while not self._stop.is_set():
            timeout = max(0.0, tick_rate - (time.monotonic() - last_tick))
            try:
                event = self._reader(timeout)
            except Exception as exc:  # surfaced to the consumer by next()
                self._queue.put(exc)
                return
            if isinstance(event, Event) and event.kind in _FORWARDED:
                self._queue.put(event)
            if time.monotonic() - last_tick >= tick_rate:
                self._queue.put(Event(EventKind.TICK))
                last_tick = time.monotonic()

    def next(self, timeout: float | None = None) -> Event:
        """Wait for the next event; raise TimeoutError if none arrives in time."""
        try:
            item = self._queue.get(timeout=timeout)
        except queue.Empty:
            raise TimeoutError("no event received") from None
        if isinstance(item, BaseException):
            raise item
        return item

    def close(self) -> None:
        """Stop the background thread and wait for it to finish."""
        self._stop.set()
        if self._thread is not threading.current_thread():
            self._thread.join()

    def __enter__(self) -> Events:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()