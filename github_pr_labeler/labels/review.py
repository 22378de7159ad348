"""Tracks whether a pull request still needs another approving review.

The repository is assumed to require two approvals: the first approval adds the
needs-one-more label and the approval that makes GitHub's aggregate decision
APPROVED removes it. The label is the only state kept between events.
"""

from typing import Sequence

import structlog

from github_pr_labeler.github.abc import GitHubClientBase
from github_pr_labeler.github.queries import ReviewDecision
from github_pr_labeler.labels.catalog import NEEDS_ONE_MORE_LABEL
from github_pr_labeler.labels.models import LabelDelta, LabelType
from github_pr_labeler.labels.policy import toggle_label_delta

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

APPROVED_REVIEW_STATE = "approved"


def needs_one_more_label_delta(review_decision: str | None, existing_labels: Sequence[LabelType]) -> LabelDelta:
    """Remove the label once the pull request is fully approved, add it otherwise."""
    fully_approved = review_decision == ReviewDecision.APPROVED.value
    if fully_approved:
        logger.info("PR is fully approved", label_name=NEEDS_ONE_MORE_LABEL.name)
    else:
        logger.info("PR is not fully approved", label_name=NEEDS_ONE_MORE_LABEL.name, review_decision=review_decision)
    return toggle_label_delta(NEEDS_ONE_MORE_LABEL, not fully_approved, existing_labels)


async def evaluate_review_gate(
    github: GitHubClientBase,
    pull_number: int,
    review_state: str,
    existing_labels: Sequence[LabelType],
) -> LabelDelta:
    """Decide the needs-one-more label change for a submitted review.

    Only approving reviews change anything; other review states make no remote calls.
    """
    if review_state.lower() != APPROVED_REVIEW_STATE:
        logger.info("Review is not an approval, nothing to do", pull_number=pull_number, review_state=review_state)
        return LabelDelta()
    review_decision = await github.get_review_decision(pull_number)
    return needs_one_more_label_delta(review_decision, existing_labels)
