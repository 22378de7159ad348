"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from typing import Any

from github_pr_labeler.labels.models import ChangedFile


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients.

    Lookups of resources that do not exist raise GitHubResourceNotFoundError.
    """

    # Pull request files
    @abstractmethod
    async def list_files_in_pull_request(self, pull_number: int) -> list[ChangedFile]:
        """List files changed in a pull request."""
        pass

    @abstractmethod
    async def compare_commits(self, base_sha: str, head_sha: str) -> list[ChangedFile]:
        """List files changed between two commits."""
        pass

    # Issue labels
    @abstractmethod
    async def list_labels_on_issue(self, issue_number: int) -> list[Any]:
        """List labels attached to an issue (or pull request)."""
        pass

    @abstractmethod
    async def add_labels_to_issue(self, issue_number: int, labels: list[str]) -> None:
        """Add labels to an issue (or pull request) in a single call."""
        pass

    @abstractmethod
    async def remove_label_from_issue(self, issue_number: int, name: str) -> None:
        """Remove a single label from an issue (or pull request)."""
        pass

    # Label CRUD
    @abstractmethod
    async def get_label(self, name: str) -> Any:
        """Get a label from the repository's label catalog."""
        pass

    @abstractmethod
    async def create_label(self, name: str, color: str, description: str | None = None) -> Any:
        """Create a label for a repository."""
        pass

    # Repository content
    @abstractmethod
    async def get_file_content(self, file_path: str, ref: str | None = None) -> str:
        """Get the decoded content of a file in the repository."""
        pass

    # Reviews
    @abstractmethod
    async def get_review_decision(self, pull_number: int) -> str | None:
        """Get the aggregate review decision for a pull request."""
        pass
