# This file is intended to hold the setup for the authenticated githubkit client.

"""Sets up the authenticated githubkit client."""

from pathlib import Path
from typing import TypeAlias

from githubkit import GitHub
from githubkit.auth import (
    AppInstallationAuthStrategy,
    TokenAuthStrategy,
)

from github_pr_labeler.configuration.models import GitHubAuthenticationType

GitHubClient: TypeAlias = GitHub[AppInstallationAuthStrategy] | GitHub[TokenAuthStrategy]


async def get_github_app_client(
    github_app_id: int,
    github_app_private_key_path: Path,
    github_app_installation_id: int,
    github_api_url: str,
) -> GitHub[AppInstallationAuthStrategy]:
    """Returns an authenticated GitHub client for a GitHub App installation."""
    if not (github_app_id and github_app_private_key_path and github_app_installation_id):
        raise RuntimeError("GitHub App authentication requires app_id, private_key_path, and installation_id in config.")
    try:
        with open(github_app_private_key_path) as f:
            private_key = f.read()
    except OSError as e:
        raise ValueError(f"Failed to read GitHub App private key: {e}") from e
    auth = AppInstallationAuthStrategy(
        app_id=github_app_id,
        private_key=private_key,
        installation_id=github_app_installation_id,
    )
    # Disable HTTP caching to always get fresh labels
    return GitHub(auth=auth, base_url=github_api_url, http_cache=False)


async def get_github_pat_client(github_pat_token: str, github_api_url: str) -> GitHub[TokenAuthStrategy]:
    """Returns an authenticated GitHub client using a token (PAT or workflow GITHUB_TOKEN)."""
    if not github_pat_token:
        raise RuntimeError("GitHub PAT authentication requires github_pat_token in config.")
    # Disable HTTP caching to always get fresh labels
    return GitHub(auth=TokenAuthStrategy(github_pat_token), base_url=github_api_url, http_cache=False)


async def get_github_client(
    repo: str,
    github_auth_type: GitHubAuthenticationType,
    github_pat_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
    github_api_url: str,
) -> GitHubClient:
    """Returns an authenticated GitHub client using either GitHub App or PAT credentials.

    Supports custom base URL for GitHub Enterprise Server (GHES).
    Raises RuntimeError if no valid credentials are found.
    """
    if github_auth_type == GitHubAuthenticationType.APP:
        if not (github_app_id and github_app_private_key_path and github_app_installation_id):
            raise RuntimeError(f"GitHub App authentication for {repo} requires app_id, private_key_path, and installation_id in config.")
        return await get_github_app_client(github_app_id, github_app_private_key_path, github_app_installation_id, github_api_url)
    elif github_auth_type == GitHubAuthenticationType.PAT:
        if not github_pat_token:
            raise RuntimeError(f"GitHub PAT authentication for {repo} requires github_pat_token in config.")
        return await get_github_pat_client(github_pat_token, github_api_url)
    raise RuntimeError(f"Unsupported GitHub authentication type: {github_auth_type}")
