"""Parameterized GraphQL queries sent to the GitHub API."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ReviewDecision(str, Enum):
    """Aggregate review decision of a pull request as computed by GitHub."""

    APPROVED = "APPROVED"
    CHANGES_REQUESTED = "CHANGES_REQUESTED"
    REVIEW_REQUIRED = "REVIEW_REQUIRED"


@dataclass(frozen=True)
class ReviewDecisionQuery:
    """Query for the aggregate review decision of one pull request.

    Identifiers travel as GraphQL variables and are never interpolated into the document.
    """

    owner: str
    name: str
    number: int

    document = """
query PullRequestReviewDecision($owner: String!, $name: String!, $number: Int!) {
  repository(owner: $owner, name: $name) {
    pullRequest(number: $number) {
      title
      reviewDecision
      url
    }
  }
}
"""

    @property
    def variables(self) -> dict[str, Any]:
        """Variables bound to the query document."""
        return {"owner": self.owner, "name": self.name, "number": self.number}

    @staticmethod
    def parse(data: dict[str, Any]) -> str | None:
        """Extract the review decision from a query response.

        ``None`` means GitHub computed no decision, e.g. when reviews are not required.
        """
        pull_request = ((data or {}).get("repository") or {}).get("pullRequest")
        if pull_request is None:
            raise ValueError("GraphQL response did not contain a pull request")
        return pull_request.get("reviewDecision")
