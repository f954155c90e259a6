"""Logging service with a swappable backend."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import ClassVar, Optional, TextIO


class LoggingSystem(ABC):
    """A destination for log messages."""

    @abstractmethod
    def log(self, message: str) -> None:
        """Record one message."""


class NullLoggingSystem(LoggingSystem):
    """Drops messages, or echoes them to a stream when ``echo`` is set."""

    def __init__(self, echo: bool = False, stream: Optional[TextIO] = None) -> None:
        self.echo = echo
        self._stream = stream

    def log(self, message: str) -> None:
        if self.echo:
            print(f"Log: {message}", file=self._stream or sys.stdout)


class Logger:
    """Service locator for the active logging system."""

    _instance: ClassVar[LoggingSystem] = NullLoggingSystem()

    @classmethod
    def get(cls) -> LoggingSystem:
        return cls._instance

    @classmethod
    def register_service(cls, service: Optional[LoggingSystem]) -> None:
        """Install ``service``; ``None`` restores the silent default."""
        cls._instance = NullLoggingSystem() if service is None else service