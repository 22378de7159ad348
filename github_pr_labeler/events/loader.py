"""Validates raw repository event payloads into typed events."""

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import TypeAdapter, ValidationError

from github_pr_labeler.events.exceptions import EventPayloadError
from github_pr_labeler.events.models import Event, SupportedEvent, UnsupportedEvent

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

SUPPORTED_EVENT_NAMES = frozenset({"pull_request", "push", "pull_request_review"})

_supported_event_adapter: TypeAdapter[SupportedEvent] = TypeAdapter(SupportedEvent)


def parse_event(event_name: str, payload: dict[str, Any]) -> Event:
    """Validate a payload against the model for its event name.

    Raises:
        EventPayloadError: If a supported event's payload has the wrong shape.
    """
    if event_name not in SUPPORTED_EVENT_NAMES:
        return UnsupportedEvent(event_name=event_name)
    try:
        return _supported_event_adapter.validate_python({"event_name": event_name, "payload": payload})
    except ValidationError as exc:
        errors: list[dict[str, Any]] = [dict(error) for error in exc.errors(include_url=False)]
        logger.error("Event payload failed validation", event_name=event_name, errors=errors)
        raise EventPayloadError(event_name, f"{exc.error_count()} validation error(s)", errors) from exc


def load_event(event_name: str, event_path: Path | None) -> Event:
    """Read the event payload file written by the workflow runner and validate it.

    Raises:
        EventPayloadError: If a supported event's payload file is missing, unreadable or malformed.
    """
    if event_name not in SUPPORTED_EVENT_NAMES:
        return UnsupportedEvent(event_name=event_name)
    if event_path is None:
        raise EventPayloadError(event_name, "no event payload path configured")
    try:
        payload = json.loads(event_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise EventPayloadError(event_name, f"could not read {event_path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise EventPayloadError(event_name, f"expected a JSON object in {event_path}")
    return parse_event(event_name, payload)
