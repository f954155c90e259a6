"""A list of handlers that are all called with the same arguments."""

from __future__ import annotations

from typing import Any, Callable


class MulticastDelegate:
    """Calls every registered handler, in the order added, on broadcast."""

    def __init__(self) -> None:
        self._handlers: list[Callable[..., Any]] = []

    def add(self, handler: Callable[..., Any]) -> None:
        self._handlers.append(handler)

    def broadcast(self, *args: Any) -> None:
        for handler in self._handlers:
            handler(*args)

    def clear(self) -> None:
        self._handlers.clear()

    def __len__(self) -> int:
        return len(self._handlers)