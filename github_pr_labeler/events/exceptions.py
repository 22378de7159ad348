"""Contains exceptions raised when reading repository events."""

from typing import Any


class EventPayloadError(Exception):
    """Raised when an event payload cannot be read or does not have the expected shape."""

    def __init__(self, event_name: str, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        """Initializes the exception with the event name and validation errors."""
        super().__init__(f"Invalid payload for {event_name} event: {message}")
        self.event_name = event_name
        self.errors = errors or []
