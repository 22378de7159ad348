"""GitHub client adapter for the githubkit library."""

import base64
import inspect
from functools import wraps
from pathlib import Path
from typing import Any, Awaitable, Callable, Self, TypeVar
from urllib.parse import quote

import structlog
from githubkit import Response
from githubkit.exception import RequestFailed
from githubkit.versions.latest.models import CommitComparison, DiffEntry, Label

from github_pr_labeler.configuration.models import GitHubAuthenticationType
from github_pr_labeler.github.queries import ReviewDecisionQuery
from github_pr_labeler.labels.models import ChangedFile
from github_pr_labeler.utils.github import split_repository_in_configuration

from .abc import GitHubClientBase
from .client import GitHubClient, get_github_client
from .exceptions import GitHubResourceNotFoundError

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_github_422(func: F) -> F:
    """Decorator to handle GitHub 422 Unprocessable Entity errors, logging and raising with details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            if exc.response.status_code == 422:
                try:
                    error_data = exc.response.json()
                except Exception:
                    error_data = {}
                message = error_data.get("message", "Unprocessable Entity")
                errors = error_data.get("errors", [])
                logger.error(
                    "GitHub 422 Unprocessable Entity",
                    function=func.__name__,
                    message=message,
                    errors=errors,
                    url=getattr(exc.response, "url", None),
                    status_code=422,
                )
                raise ValueError(
                    f"GitHub 422 error in {func.__name__}: {message} | errors: {errors} | url: {getattr(exc.response, 'url', None)}"
                ) from exc
            raise

    return wrapper  # type: ignore


def handle_github_404(resource: str, name_param: str) -> Callable[[F], F]:
    """Decorator translating GitHub 404 Not Found errors into GitHubResourceNotFoundError.

    Args:
        resource: Human readable kind of resource (label, file, ...)
        name_param: Name of the decorated function's parameter identifying the resource
    """

    def decorator(func: F) -> F:
        signature = inspect.signature(func)

        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except RequestFailed as exc:
                if exc.response.status_code != 404:
                    raise
                name = signature.bind(*args, **kwargs).arguments.get(name_param)
                logger.debug("GitHub 404 Not Found", function=func.__name__, resource=resource, name=name)
                raise GitHubResourceNotFoundError(resource, str(name)) from exc

        return wrapper  # type: ignore

    return decorator


class GitHubKitAdapter(GitHubClientBase):
    """GitHub client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @staticmethod
    def _quote_path_parameter(value: str) -> str:
        """Percent-encode a value githubkit interpolates into the URL path, e.g. size/S -> size%2FS."""
        return quote(value, safe="")

    @staticmethod
    def _to_changed_file(diff_entry: DiffEntry) -> ChangedFile:
        """Convert a githubkit diff entry into a ChangedFile."""
        return ChangedFile(
            path=diff_entry.filename,
            status=str(diff_entry.status),
            lines_added=diff_entry.additions or 0,
            lines_removed=diff_entry.deletions or 0,
        )

    @classmethod
    async def create(
        cls,
        repo: str,
        github_auth_type: GitHubAuthenticationType,
        github_pat_token: str | None = None,
        github_app_id: int | None = None,
        github_app_private_key_path: Path | None = None,
        github_app_installation_id: int | None = None,
        github_api_url: str = "https://api.github.com",
    ) -> Self:
        """Create a new GitHub client adapter.

        Args:
            repo: Repository in 'owner/repo' format
            github_auth_type: Type of authentication (PAT or APP)
            github_pat_token: Personal access token (required for PAT auth)
            github_app_id: GitHub App ID (required for APP auth)
            github_app_private_key_path: Path to private key file (required for APP auth)
            github_app_installation_id: Installation ID (required for APP auth)
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance

        Raises:
            ValueError: If required parameters for the chosen auth type are missing
        """
        owner, repo_name = await split_repository_in_configuration(repo=repo)
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
        )
        client = await get_github_client(
            repo=repo,
            github_auth_type=github_auth_type,
            github_pat_token=github_pat_token,
            github_app_id=github_app_id,
            github_app_private_key_path=github_app_private_key_path,
            github_app_installation_id=github_app_installation_id,
            github_api_url=github_api_url,
        )
        return cls(client, owner, repo_name)

    # Pull request files
    async def list_files_in_pull_request(self, pull_number: int, per_page: int = 100) -> list[ChangedFile]:
        """List all files changed in a pull request, handling pagination."""
        all_files: list[ChangedFile] = []
        page: int = 1
        while True:
            response: Response[list[DiffEntry]] = await self.client.rest.pulls.async_list_files(
                owner=self.owner,
                repo=self.repo_name,
                pull_number=pull_number,
                per_page=per_page,
                page=page,
            )
            files: list[DiffEntry] = response.parsed_data
            if not files:
                break
            all_files.extend(self._to_changed_file(file) for file in files)
            if len(files) < per_page:
                break
            page += 1
        logger.debug("Listed files in pull request", pull_number=pull_number, file_count=len(all_files))
        return all_files

    async def compare_commits(self, base_sha: str, head_sha: str) -> list[ChangedFile]:
        """List files changed between two commits using the compare API."""
        response: Response[CommitComparison] = await self.client.rest.repos.async_compare_commits(
            owner=self.owner,
            repo=self.repo_name,
            basehead=f"{base_sha}...{head_sha}",
        )
        files = response.parsed_data.files or []
        return [self._to_changed_file(file) for file in files]

    # Issue labels
    async def list_labels_on_issue(self, issue_number: int, per_page: int = 100) -> list[Label]:
        """List all labels attached to an issue, handling pagination."""
        all_labels: list[Label] = []
        page: int = 1
        while True:
            response: Response[list[Label]] = await self.client.rest.issues.async_list_labels_on_issue(
                owner=self.owner,
                repo=self.repo_name,
                issue_number=issue_number,
                per_page=per_page,
                page=page,
            )
            labels: list[Label] = response.parsed_data
            if not labels:
                break
            all_labels.extend(labels)
            if len(labels) < per_page:
                break
            page += 1
        return all_labels

    @handle_github_422
    async def add_labels_to_issue(self, issue_number: int, labels: list[str]) -> None:
        """Add labels to an issue (or pull request - GitHub considers them the same for label purposes).

        Adding a label that is already attached is not an error.
        """
        if not labels:
            return
        await self.client.rest.issues.async_add_labels(
            owner=self.owner,
            repo=self.repo_name,
            issue_number=issue_number,
            labels=labels,
        )

    @handle_github_404("issue label", "name")
    async def remove_label_from_issue(self, issue_number: int, name: str) -> None:
        """Remove a single label from an issue (or pull request)."""
        await self.client.rest.issues.async_remove_label(
            owner=self.owner,
            repo=self.repo_name,
            issue_number=issue_number,
            name=self._quote_path_parameter(name),
        )

    # Label CRUD
    @handle_github_404("label", "name")
    async def get_label(self, name: str) -> Label:
        """Get a label from the repository's label catalog."""
        response: Response[Label] = await self.client.rest.issues.async_get_label(
            owner=self.owner, repo=self.repo_name, name=self._quote_path_parameter(name)
        )
        return response.parsed_data

    @handle_github_422
    async def create_label(self, name: str, color: str, description: str | None = None) -> Label:
        """Create a label for a repository."""
        params = self._omit_null_parameters(
            name=name,
            color=color,
            description=description,
        )
        response: Response[Label] = await self.client.rest.issues.async_create_label(
            owner=self.owner,
            repo=self.repo_name,
            **params,
        )
        return response.parsed_data

    # Repository content
    @handle_github_404("file", "file_path")
    async def get_file_content(self, file_path: str, ref: str | None = None) -> str:
        """Get the content of a file, from the default branch unless a ref is given."""
        params = self._omit_null_parameters(ref=ref)
        response = await self.client.rest.repos.async_get_content(
            owner=self.owner,
            repo=self.repo_name,
            path=file_path,
            **params,
        )
        content = getattr(response.parsed_data, "content", None)
        if content is None:
            raise ValueError(f"Path {file_path} is not a file")
        return base64.b64decode(content).decode("utf-8")

    # Reviews
    async def get_review_decision(self, pull_number: int) -> str | None:
        """Get the aggregate review decision for a pull request through GraphQL."""
        query = ReviewDecisionQuery(owner=self.owner, name=self.repo_name, number=pull_number)
        data: dict[str, Any] = await self.client.async_graphql(query.document, variables=query.variables)
        review_decision = query.parse(data)
        logger.debug("Fetched review decision", pull_number=pull_number, review_decision=review_decision)
        return review_decision
