"""Contains results of application execution."""


class EventRunResult:
    """Contains results of handling one repository event."""

    def __init__(self, event_name: str, outputs: dict[str, str] | None = None, error: Exception | None = None) -> None:
        """Initialize the result with the outputs reported and the fatal error, if any."""
        self.event_name = event_name
        self.outputs = outputs or {}
        self.error = error

    @property
    def succeeded(self) -> bool:
        """Whether the event was handled without a fatal error."""
        return self.error is None
