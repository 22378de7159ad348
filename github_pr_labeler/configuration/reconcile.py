"""Reconcile configuration between CLI arguments and environment variables."""

from pathlib import Path

from github_pr_labeler.configuration.env import Settings
from github_pr_labeler.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError, RequiredConfigurationElementError
from github_pr_labeler.configuration.models import GitHubAuthenticationType, LabelerConfig


async def validate_github_authentication_configuration(
    github_pat_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
) -> GitHubAuthenticationType:
    """Validates the GitHub authentication configuration.

    Args:
        github_pat_token (str | None): The GitHub PAT or workflow token.
        github_app_id (int | None): The GitHub App ID.
        github_app_private_key_path (Path | None): The path to the GitHub App private key.
        github_app_installation_id (int | None): The GitHub App installation ID.

    Raises:
        GitHubAuthenticationConfigurationUndefinedError: If both or neither of the PAT and App configurations are defined.

    Returns:
        GitHubAuthenticationType: The type of GitHub authentication used.
    """
    if github_pat_token and (github_app_id or github_app_private_key_path or github_app_installation_id):
        raise GitHubAuthenticationConfigurationUndefinedError("Both PAT and GitHub App configurations are defined. Please use one or the other.")

    if github_pat_token:
        return GitHubAuthenticationType.PAT

    if github_app_id and github_app_private_key_path and github_app_installation_id:
        return GitHubAuthenticationType.APP
    elif github_app_id or github_app_private_key_path or github_app_installation_id:
        missing_settings: list[dict[str, str]] = []
        if not github_app_id:
            missing_settings.append({"name": "GitHub App ID", "cli_name": "--github-app-id", "env_name": "GITHUB_APP_ID"})
        if not github_app_private_key_path:
            missing_settings.append(
                {"name": "GitHub App private key path", "cli_name": "--github-app-private-key-path", "env_name": "GITHUB_APP_PRIVATE_KEY_PATH"}
            )
        if not github_app_installation_id:
            missing_settings.append(
                {"name": "GitHub App installation ID", "cli_name": "--github-app-installation-id", "env_name": "GITHUB_APP_INSTALLATION_ID"}
            )
        msg = "Incomplete GitHub App configuration - missing settings include " + ", ".join(
            f"{setting['name']} (command line option {setting['cli_name']}, environment variable {setting['env_name']})"
            for setting in missing_settings
        )
        raise GitHubAuthenticationConfigurationUndefinedError(msg)
    else:
        raise GitHubAuthenticationConfigurationUndefinedError(
            "No GitHub authentication configuration provided. Please provide either a token (INPUT_TOKEN, GITHUB_TOKEN) "
            "or a GitHub App configuration."
        )


async def reconcile_labeler_configuration(
    settings: Settings,
    cli_debug: bool = False,
    cli_github_api_url: str | None = None,
    cli_github_pat_token: str | None = None,
    cli_github_app_id: int | None = None,
    cli_github_app_private_key_path: Path | None = None,
    cli_github_app_installation_id: int | None = None,
    cli_repo: str | None = None,
    cli_event_name: str | None = None,
    cli_event_path: Path | None = None,
    cli_output_path: Path | None = None,
) -> LabelerConfig:
    """Merge command line values over environment settings; command line values win.

    Raises:
        RequiredConfigurationElementError: If the repository or event name is missing.
        GitHubAuthenticationConfigurationUndefinedError: If the authentication configuration is invalid.
    """
    repo = cli_repo or settings.GITHUB_REPOSITORY
    if not repo:
        raise RequiredConfigurationElementError("Repository", "--repo", "GITHUB_REPOSITORY")
    event_name = cli_event_name or settings.GITHUB_EVENT_NAME
    if not event_name:
        raise RequiredConfigurationElementError("Event name", "--event-name", "GITHUB_EVENT_NAME")

    github_pat_token = cli_github_pat_token or settings.GITHUB_PAT_TOKEN
    github_app_id = cli_github_app_id or settings.GITHUB_APP_ID
    github_app_private_key_path = cli_github_app_private_key_path or settings.GITHUB_APP_PRIVATE_KEY_PATH
    github_app_installation_id = cli_github_app_installation_id or settings.GITHUB_APP_INSTALLATION_ID
    github_auth_type = await validate_github_authentication_configuration(
        github_pat_token=github_pat_token,
        github_app_id=github_app_id,
        github_app_private_key_path=github_app_private_key_path,
        github_app_installation_id=github_app_installation_id,
    )

    return LabelerConfig(
        debug=cli_debug or settings.DEBUG,
        github_api_url=cli_github_api_url or settings.GITHUB_API_URL,
        github_authentication_type=github_auth_type,
        github_pat_token=github_pat_token,
        github_app_id=github_app_id,
        github_app_private_key_path=github_app_private_key_path,
        github_app_installation_id=github_app_installation_id,
        repo=repo,
        event_name=event_name,
        event_path=cli_event_path or settings.GITHUB_EVENT_PATH,
        output_path=cli_output_path or settings.GITHUB_OUTPUT,
    )
