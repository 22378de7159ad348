"""Contains utility functions for GitHub interactions."""


async def split_repository_in_configuration(repo: str | None) -> tuple[str, str]:
    """Splits an 'owner/repo' string such as GITHUB_REPOSITORY into owner and repository name.

    Surrounding slashes are ignored.
    """
    if repo is None:
        raise ValueError("Repository is required in config (GITHUB_REPOSITORY).")
    owner, separator, repository = repo.strip("/").partition("/")
    if not separator or not owner or not repository or "/" in repository:
        raise ValueError(f"Repository must be in the format 'owner/repo', got {repo!r}.")
    return owner, repository
