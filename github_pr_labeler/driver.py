"""Orchestrates handling of a single repository event."""

import time

import structlog

from github_pr_labeler.actions.outputs import ActionOutputs
from github_pr_labeler.configuration.models import LabelerConfig
from github_pr_labeler.events.handlers import dispatch_event
from github_pr_labeler.events.loader import load_event
from github_pr_labeler.github.abc import GitHubClientBase
from github_pr_labeler.github.adapter import GitHubKitAdapter
from github_pr_labeler.results import EventRunResult

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def run_event_workflow(config: LabelerConfig, github_adapter: GitHubClientBase | None = None) -> EventRunResult:
    """Load the triggering event, apply the labeling policy and report outputs.

    Any error escaping the event handlers is logged and recorded on the result instead of raised.
    """
    outputs = ActionOutputs(config.output_path)
    start_time = time.time()
    try:
        event = load_event(config.event_name, config.event_path)
        if github_adapter is None:
            github_adapter = await GitHubKitAdapter.create(
                repo=config.repo,
                github_auth_type=config.github_authentication_type,
                github_pat_token=config.github_pat_token,
                github_app_id=config.github_app_id,
                github_app_private_key_path=config.github_app_private_key_path,
                github_app_installation_id=config.github_app_installation_id,
                github_api_url=config.github_api_url,
            )
        logger.info("Handling event", event_name=config.event_name, repo=config.repo)
        await dispatch_event(event, github_adapter, outputs)
    except Exception as exc:
        logger.error("Failed to handle event", event_name=config.event_name, repo=config.repo, error=str(exc), exc_info=True)
        return EventRunResult(config.event_name, outputs.values, error=exc)
    logger.info("Handled event", event_name=config.event_name, duration=round(time.time() - start_time, 2))
    return EventRunResult(config.event_name, outputs.values)
