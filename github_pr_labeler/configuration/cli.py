"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from github_pr_labeler.configuration.env import Settings
from github_pr_labeler.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError, RequiredConfigurationElementError
from github_pr_labeler.configuration.reconcile import reconcile_labeler_configuration
from github_pr_labeler.driver import run_event_workflow
from github_pr_labeler.utils.log_config import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False)


@typer_app.callback()
def main_callback() -> None:
    """Label pull requests by size, server-only changes and review state."""


@typer_app.command(name="run")
def run_cli(
    repo: Annotated[str | None, Option(help="Repository name (owner/repo). Defaults to GITHUB_REPOSITORY.")] = None,
    event_name: Annotated[str | None, Option(help="Triggering event name. Defaults to GITHUB_EVENT_NAME.")] = None,
    event_path: Annotated[Path | None, Option(help="Path to the event payload JSON. Defaults to GITHUB_EVENT_PATH.")] = None,
    output_path: Annotated[Path | None, Option(help="File step outputs are appended to. Defaults to GITHUB_OUTPUT.")] = None,
    github_api_url: Annotated[str | None, Option(help="GitHub API URL. Defaults to GITHUB_API_URL.")] = None,
    github_pat_token: Annotated[str | None, Option(help="GitHub token. Defaults to INPUT_TOKEN, GITHUB_PAT_TOKEN or GITHUB_TOKEN.")] = None,
    github_app_id: Annotated[int | None, Option(help="GitHub App ID.")] = None,
    github_app_private_key_path: Annotated[Path | None, Option(help="Path to GitHub App private key.")] = None,
    github_app_installation_id: Annotated[int | None, Option(help="GitHub App Installation ID.")] = None,
    debug: Annotated[bool, Option(help="Enable debug logging. Also enabled by DEBUG=true.")] = False,
) -> None:
    """Handle the event that triggered the workflow run and report step outputs."""
    settings = Settings()
    try:
        config = asyncio.run(
            reconcile_labeler_configuration(
                settings,
                cli_debug=debug,
                cli_github_api_url=github_api_url,
                cli_github_pat_token=github_pat_token,
                cli_github_app_id=github_app_id,
                cli_github_app_private_key_path=github_app_private_key_path,
                cli_github_app_installation_id=github_app_installation_id,
                cli_repo=repo,
                cli_event_name=event_name,
                cli_event_path=event_path,
                cli_output_path=output_path,
            )
        )
    except (RequiredConfigurationElementError, GitHubAuthenticationConfigurationUndefinedError) as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(2)

    configure_logging(config.debug)
    result = asyncio.run(run_event_workflow(config))
    if not result.succeeded:
        typer.echo("Something went wrong", err=True)
        sys.exit(1)


if __name__ == "__main__":
    typer_app()
