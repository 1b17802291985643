"""Pluggable sinks for coarse simulation lifecycle events."""
import logging
from typing import Any, Dict, List, Protocol, Tuple

logger = logging.getLogger(__name__)


class EventSink(Protocol):
    """Anything that accepts ``emit(event, **fields)``."""

    def emit(self, event: str, **fields: Any) -> None:
        ...


class NullEventSink:
    """Drops every event."""

    def emit(self, event: str, **fields: Any) -> None:
        pass


class LoggingEventSink:
    """Forwards events to a standard library logger."""

    def __init__(self, log: logging.Logger = logger, level: int = logging.DEBUG):
        self.log = log
        self.level = level

    def emit(self, event: str, **fields: Any) -> None:
        if self.log.isEnabledFor(self.level):
            details = ' '.join(f"{key}={value}" for key, value in fields.items())
            self.log.log(self.level, "%s %s", event, details)


class RecordingEventSink:
    """Keeps every event in memory, in emission order."""

    def __init__(self):
        self.events: List[Tuple[str, Dict[str, Any]]] = []

    def emit(self, event: str, **fields: Any) -> None:
        self.events.append((event, fields))

    def names(self) -> List[str]:
        return [name for name, _ in self.events]
