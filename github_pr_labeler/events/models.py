"""Pydantic models for the repository events the labeler reacts to.

Each supported event is one variant of a tagged union keyed on ``event_name``.
Payload fields the labeler does not use are ignored.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class PayloadLabel(BaseModel):
    """A label as embedded in an event payload."""

    name: str
    color: str | None = None


class PayloadUser(BaseModel):
    """A GitHub user as embedded in an event payload."""

    login: str


class PullRequestDetails(BaseModel):
    """The pull request object of an event payload."""

    number: int
    title: str = ""
    labels: list[PayloadLabel] = Field(default_factory=list)
    additions: int = 0
    deletions: int = 0


class Review(BaseModel):
    """The review object of a pull_request_review payload."""

    id: int | None = None
    state: str
    user: PayloadUser | None = None


class PullRequestPayload(BaseModel):
    """Payload of a pull_request event."""

    pull_request: PullRequestDetails


class PushPayload(BaseModel):
    """Payload of a push event."""

    before: str
    after: str
    ref: str = ""


class PullRequestReviewPayload(BaseModel):
    """Payload of a pull_request_review event."""

    pull_request: PullRequestDetails
    review: Review


class PullRequestEvent(BaseModel):
    """A pull request was opened, reopened or updated."""

    event_name: Literal["pull_request"] = "pull_request"
    payload: PullRequestPayload


class PushEvent(BaseModel):
    """Commits were pushed, typically a squash merge into the default branch."""

    event_name: Literal["push"] = "push"
    payload: PushPayload


class PullRequestReviewEvent(BaseModel):
    """A review was submitted on a pull request."""

    event_name: Literal["pull_request_review"] = "pull_request_review"
    payload: PullRequestReviewPayload


class UnsupportedEvent(BaseModel):
    """Any event the labeler has no handler for."""

    event_name: str


SupportedEvent = Annotated[PullRequestEvent | PushEvent | PullRequestReviewEvent, Field(discriminator="event_name")]

Event = PullRequestEvent | PushEvent | PullRequestReviewEvent | UnsupportedEvent
