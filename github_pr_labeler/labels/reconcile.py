"""Applies a label delta to an issue and reports the resulting labels."""

import structlog

from github_pr_labeler.github.abc import GitHubClientBase
from github_pr_labeler.github.exceptions import GitHubResourceNotFoundError
from github_pr_labeler.labels.models import LabelDelta, PolicyLabel, extract_label_names

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def ensure_label_exists(github: GitHubClientBase, label: PolicyLabel) -> None:
    """Create the label in the repository's label catalog if it does not exist yet."""
    try:
        await github.get_label(label.name)
    except GitHubResourceNotFoundError:
        logger.info("Label not found in GitHub, creating it", label_name=label.name, color=label.color)
        await github.create_label(name=label.name, color=label.color)


async def remove_labels(github: GitHubClientBase, issue_number: int, names: tuple[str, ...]) -> None:
    """Remove labels one at a time; a failed removal does not stop the others."""
    if not names:
        logger.info("No labels to remove", issue_number=issue_number)
        return
    for name in names:
        logger.info("Removing label", issue_number=issue_number, label_name=name)
        try:
            await github.remove_label_from_issue(issue_number, name)
        except Exception as exc:
            logger.warning("Failed to remove label", issue_number=issue_number, label_name=name, error=str(exc))


async def add_labels(github: GitHubClientBase, issue_number: int, labels: tuple[PolicyLabel, ...]) -> None:
    """Ensure each label exists in the repository, then attach all of them in one call."""
    if not labels:
        logger.info("No labels to add", issue_number=issue_number)
        return
    names = [label.name for label in labels]
    logger.info("Adding labels", issue_number=issue_number, labels=names)
    for label in labels:
        await ensure_label_exists(github, label)
    await github.add_labels_to_issue(issue_number, names)


async def current_label_names(github: GitHubClientBase, issue_number: int) -> list[str]:
    """Fetch the names of the labels currently attached to an issue."""
    return extract_label_names(await github.list_labels_on_issue(issue_number))


async def reconcile_labels(github: GitHubClientBase, issue_number: int, delta: LabelDelta) -> list[str]:
    """Apply the delta to the issue and return its label names afterwards.

    Removals happen before additions so a label moving between size tiers is never duplicated.
    """
    await remove_labels(github, issue_number, delta.to_remove)
    await add_labels(github, issue_number, delta.to_add)
    labels = await current_label_names(github, issue_number)
    logger.info("Labels as a result of this action", issue_number=issue_number, labels=labels)
    return labels
