"""Queued events delivered to listeners when the event manager runs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Generic, Optional, TypeVar

E = TypeVar("E")


class QueueEvent:
    """Base class for events placed on an event queue."""


class EventListener(ABC, Generic[E]):
    """Receives events from an event queue."""

    @abstractmethod
    def on_event(self, event: E) -> None:
        """Handle one event."""


class EventQueue(Generic[E]):
    """A growing ring buffer of events, delivered in order to all listeners."""

    _INITIAL_SIZE = 5

    def __init__(self) -> None:
        self._size = self._INITIAL_SIZE
        self._slots: list[Optional[E]] = [None] * self._size
        self._head = 0
        self._tail = 0
        self._listeners: list[EventListener[E]] = []

    def add_listener(self, listener: EventListener[E]) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: EventListener[E]) -> None:
        self._listeners = [item for item in self._listeners if item is not listener]

    def add_event(self, event: E) -> None:
        if self._is_full():
            self.resize(self._size * 2)
        self._slots[self._tail] = event
        self._tail = (self._tail + 1) % self._size

    def process_events(self) -> None:
        """Deliver every queued event to every listener, oldest first."""
        while not self.is_empty():
            event = self._slots[self._head]
            for listener in list(self._listeners):
                listener.on_event(event)
            self._slots[self._head] = None
            self._head = (self._head + 1) % self._size

    def resize(self, new_size: int) -> None:
        """Grow the ring buffer to ``new_size`` slots, keeping event order."""
        if new_size < self._size:
            raise ValueError(f"cannot shrink event queue from {self._size} to {new_size}")
        self._slots.extend([None] * (new_size - self._size))
        if self._head > self._tail:
            count = self._size - self._head
            moved = self._slots[self._head:self._size]
            self._slots[self._head:self._size] = [None] * count
            self._slots[new_size - count:new_size] = moved
            self._head = new_size - count
        self._size = new_size

    def is_empty(self) -> bool:
        return self._head == self._tail

    def _is_full(self) -> bool:
        return (self._tail + 1) % self._size == self._head

    def __len__(self) -> int:
        return (self._tail - self._head) % self._size


class EventManager:
    """Owns one event queue per event type and processes them when dirty."""

    _instance: ClassVar[Optional["EventManager"]] = None

    def __init__(self) -> None:
        self._queues: dict[type, EventQueue] = {}
        self._new_queues: dict[type, EventQueue] = {}
        self._dirty = False

    @classmethod
    def instance(cls) -> "EventManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def add_queue(self, event_type: type, queue: Optional[EventQueue] = None) -> EventQueue:
        """Register a queue for ``event_type``; it becomes active on the next handling."""
        if queue is None:
            queue = EventQueue()
        self._new_queues[event_type] = queue
        return queue

    def get_queue(self, event_type: type) -> EventQueue:
        if event_type in self._new_queues:
            return self._new_queues[event_type]
        try:
            return self._queues[event_type]
        except KeyError:
            raise KeyError(f"no event queue for {event_type.__name__}") from None

    def mark_dirty(self) -> None:
        self._dirty = True

    def handle_events(self) -> None:
        """Activate new queues and process all queues, if marked dirty."""
        if not self._dirty:
            return
        self._queues.update(self._new_queues)
        self._new_queues.clear()
        for queue in self._queues.values():
            queue.process_events()
        self._dirty = False