"""Routes repository events to the labeling logic for each event kind."""

import structlog

from github_pr_labeler.actions.outputs import ActionOutputs
from github_pr_labeler.events.models import (
    Event,
    PullRequestEvent,
    PullRequestReviewEvent,
    PushEvent,
    UnsupportedEvent,
)
from github_pr_labeler.github.abc import GitHubClientBase
from github_pr_labeler.labels.globs import CHROMATIC_SKIP_GLOB_PATTERNS, NON_DEPLOYMENT_GLOB_PATTERNS, first_unmatched
from github_pr_labeler.labels.models import ChangedFile
from github_pr_labeler.labels.policy import evaluate_pull_request_labels
from github_pr_labeler.labels.reconcile import reconcile_labels
from github_pr_labeler.labels.review import APPROVED_REVIEW_STATE, evaluate_review_gate
from github_pr_labeler.labels.size import calculate_size, load_excluded_globs

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

LABELS_OUTPUT = "labels"
SKIP_DEPLOY_OUTPUT = "skip-deploy"
SKIP_CHROMATIC_OUTPUT = "skip-chromatic"


async def handle_pull_request(event: PullRequestEvent, github: GitHubClientBase, outputs: ActionOutputs) -> None:
    """Reconcile the size, server-only and skip-chromatic labels of a pull request."""
    pull_request = event.payload.pull_request
    logger.info("Processing pull request", number=pull_request.number, title=pull_request.title)
    logger.debug("Existing labels", labels=[label.name for label in pull_request.labels])

    files = await github.list_files_in_pull_request(pull_request.number)
    excluded_globs = await load_excluded_globs(github)
    size = calculate_size(pull_request.additions + pull_request.deletions, files, excluded_globs)
    delta = evaluate_pull_request_labels(size, files, pull_request.labels)

    labels = await reconcile_labels(github, pull_request.number, delta)
    outputs.set_output(LABELS_OUTPUT, labels)


def _can_skip(files: list[ChangedFile], patterns: tuple[str, ...], description: str) -> bool:
    unmatched = first_unmatched((file.path for file in files), patterns)
    if unmatched is not None:
        logger.info(f"{description} file found", path=unmatched)
    return unmatched is None


async def handle_push(event: PushEvent, github: GitHubClientBase, outputs: ActionOutputs) -> None:
    """Report whether the pushed commit range can skip deployment and Chromatic.

    Meant for pushes to the default branch when pull requests are squash merged.
    """
    payload = event.payload
    logger.info("Comparing latest commit with previous commit", latest_commit=payload.after, previous_commit=payload.before, ref=payload.ref)
    files = await github.compare_commits(payload.before, payload.after)
    logger.info("Files different between commits", files=[file.path for file in files])
    logger.info("Non-deployment glob patterns", patterns=list(NON_DEPLOYMENT_GLOB_PATTERNS))
    logger.info("Skip Chromatic glob patterns", patterns=list(CHROMATIC_SKIP_GLOB_PATTERNS))

    skip_deploy = _can_skip(files, NON_DEPLOYMENT_GLOB_PATTERNS, "Deployable")
    skip_chromatic = _can_skip(files, CHROMATIC_SKIP_GLOB_PATTERNS, "Chromatic test")
    logger.info("Skip deployment of all files", skip_deploy=skip_deploy)
    logger.info("Skip chromatic run of all files", skip_chromatic=skip_chromatic)
    outputs.set_output(SKIP_DEPLOY_OUTPUT, skip_deploy)
    outputs.set_output(SKIP_CHROMATIC_OUTPUT, skip_chromatic)


async def handle_pull_request_review(event: PullRequestReviewEvent, github: GitHubClientBase, outputs: ActionOutputs) -> None:
    """Toggle the needs-one-more label on approving reviews.

    Errors are logged and never fail the run.
    """
    pull_request = event.payload.pull_request
    review = event.payload.review
    try:
        logger.info("Processing review for pull request", number=pull_request.number, title=pull_request.title)
        if review.state.lower() == APPROVED_REVIEW_STATE:
            logger.info("Approving review found", reviewer=review.user.login if review.user else None, review_id=review.id)
        delta = await evaluate_review_gate(github, pull_request.number, review.state, pull_request.labels)
        # An empty delta only re-reads the labels for the output.
        labels = await reconcile_labels(github, pull_request.number, delta)
        outputs.set_output(LABELS_OUTPUT, labels)
    except Exception as exc:
        logger.error("Error in handling pull request review event", number=pull_request.number, error=str(exc), exc_info=True)


async def dispatch_event(event: Event, github: GitHubClientBase, outputs: ActionOutputs) -> None:
    """Route the event to its handler; unsupported events are ignored."""
    match event:
        case PullRequestEvent():
            await handle_pull_request(event, github, outputs)
        case PushEvent():
            await handle_push(event, github, outputs)
        case PullRequestReviewEvent():
            await handle_pull_request_review(event, github, outputs)
        case UnsupportedEvent():
            logger.info("No relevant event found", event_name=event.event_name)
