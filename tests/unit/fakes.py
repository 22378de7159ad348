"""In-memory GitHub collaborator used by unit tests."""

from typing import Any

from github_pr_labeler.github.abc import GitHubClientBase
from github_pr_labeler.github.exceptions import GitHubResourceNotFoundError
from github_pr_labeler.labels.models import ChangedFile


class FakeGitHub(GitHubClientBase):
    """In-memory stand-in for a single GitHub repository.

    Every mutating call is recorded in ``calls`` in the order it was made.
    """

    def __init__(self) -> None:
        """Initialize an empty repository."""
        self.repo_labels: dict[str, str] = {}
        self.issue_labels: dict[int, list[str]] = {}
        self.pull_request_files: dict[int, list[ChangedFile]] = {}
        self.comparisons: dict[tuple[str, str], list[ChangedFile]] = {}
        self.file_contents: dict[str, str] = {}
        self.review_decisions: dict[int, str | None] = {}
        self.failing_removals: set[str] = set()
        self.calls: list[tuple[Any, ...]] = []

    async def list_files_in_pull_request(self, pull_number: int) -> list[ChangedFile]:
        return list(self.pull_request_files.get(pull_number, []))

    async def compare_commits(self, base_sha: str, head_sha: str) -> list[ChangedFile]:
        return list(self.comparisons.get((base_sha, head_sha), []))

    async def list_labels_on_issue(self, issue_number: int) -> list[Any]:
        return [{"name": name} for name in self.issue_labels.get(issue_number, [])]

    async def add_labels_to_issue(self, issue_number: int, labels: list[str]) -> None:
        self.calls.append(("add_labels_to_issue", issue_number, tuple(labels)))
        attached = self.issue_labels.setdefault(issue_number, [])
        for name in labels:
            self.repo_labels.setdefault(name, "ededed")
            if name not in attached:
                attached.append(name)

    async def remove_label_from_issue(self, issue_number: int, name: str) -> None:
        self.calls.append(("remove_label_from_issue", issue_number, name))
        if name in self.failing_removals:
            raise RuntimeError(f"Server error removing {name}")
        attached = self.issue_labels.get(issue_number, [])
        if name not in attached:
            raise GitHubResourceNotFoundError("issue label", name)
        attached.remove(name)

    async def get_label(self, name: str) -> Any:
        if name not in self.repo_labels:
            raise GitHubResourceNotFoundError("label", name)
        return {"name": name, "color": self.repo_labels[name]}

    async def create_label(self, name: str, color: str, description: str | None = None) -> Any:
        self.calls.append(("create_label", name, color))
        self.repo_labels[name] = color
        return {"name": name, "color": color}

    async def get_file_content(self, file_path: str, ref: str | None = None) -> str:
        if file_path not in self.file_contents:
            raise GitHubResourceNotFoundError("file", file_path)
        return self.file_contents[file_path]

    async def get_review_decision(self, pull_number: int) -> str | None:
        self.calls.append(("get_review_decision", pull_number))
        return self.review_decisions.get(pull_number)

    @property
    def mutations(self) -> list[tuple[Any, ...]]:
        """Recorded calls that changed labels."""
        return [call for call in self.calls if call[0] != "get_review_decision"]
