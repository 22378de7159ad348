"""Decides which policy labels a pull request should carry."""

from typing import Sequence

import structlog

from github_pr_labeler.labels.catalog import SERVER_ONLY_LABEL, SIZE_LABEL_NAMES, SKIP_CHROMATIC_LABEL
from github_pr_labeler.labels.globs import CHROMATIC_SKIP_GLOB_PATTERNS, SERVER_ONLY_GLOB_PATTERNS, all_match
from github_pr_labeler.labels.models import ChangedFile, LabelDelta, LabelType, PolicyLabel, SizeResult, extract_label_names

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def toggle_label_delta(label: PolicyLabel, desired: bool, existing_labels: Sequence[LabelType]) -> LabelDelta:
    """Add the label if desired and absent, remove it if undesired and present."""
    present = label.name in extract_label_names(existing_labels)
    if desired and not present:
        return LabelDelta(to_add=(label,))
    if not desired and present:
        return LabelDelta(to_remove=(label.name,))
    return LabelDelta()


def size_label_delta(tier: PolicyLabel, existing_labels: Sequence[LabelType]) -> LabelDelta:
    """Attach the computed size tier and detach every other size tier.

    At most one size label is attached once the delta is applied.
    """
    existing_names = extract_label_names(existing_labels)
    to_add = () if tier.name in existing_names else (tier,)
    to_remove = tuple(name for name in existing_names if name in SIZE_LABEL_NAMES and name != tier.name)
    delta = LabelDelta(to_add=to_add, to_remove=to_remove)
    logger.debug("Size label delta", to_add=delta.names_to_add, to_remove=list(delta.to_remove))
    return delta


def _every_file_matches(files: Sequence[ChangedFile], patterns: Sequence[str], reason: str) -> bool:
    for file in files:
        logger.debug("Processing file", path=file.path, reason=reason)
    return bool(files) and all_match((file.path for file in files), patterns)


def server_only_label_delta(files: Sequence[ChangedFile], existing_labels: Sequence[LabelType]) -> LabelDelta:
    """Mark pull requests that only touch server paths."""
    server_only = _every_file_matches(files, SERVER_ONLY_GLOB_PATTERNS, reason=SERVER_ONLY_LABEL.name)
    if server_only:
        logger.info("This PR is server only and has no UI changes")
    else:
        logger.info("This PR is not server only")
    delta = toggle_label_delta(SERVER_ONLY_LABEL, server_only, existing_labels)
    logger.debug("Server-only label delta", to_add=delta.names_to_add, to_remove=list(delta.to_remove))
    return delta


def skip_chromatic_label_delta(files: Sequence[ChangedFile], existing_labels: Sequence[LabelType]) -> LabelDelta:
    """Mark pull requests whose changes cannot affect visual regression snapshots."""
    skip_chromatic = _every_file_matches(files, CHROMATIC_SKIP_GLOB_PATTERNS, reason=SKIP_CHROMATIC_LABEL.name)
    if skip_chromatic:
        logger.info("This PR can skip chromatic")
    else:
        logger.info("This PR needs to run chromatic")
    delta = toggle_label_delta(SKIP_CHROMATIC_LABEL, skip_chromatic, existing_labels)
    logger.debug("Skip-chromatic label delta", to_add=delta.names_to_add, to_remove=list(delta.to_remove))
    return delta


def evaluate_pull_request_labels(size: SizeResult, files: Sequence[ChangedFile], existing_labels: Sequence[LabelType]) -> LabelDelta:
    """Merge the size, server-only and skip-chromatic deltas for one pull request."""
    delta = (
        size_label_delta(size.tier, existing_labels)
        + server_only_label_delta(files, existing_labels)
        + skip_chromatic_label_delta(files, existing_labels)
    )
    logger.debug("Labels to add", labels=delta.names_to_add)
    logger.debug("Labels to remove", labels=list(delta.to_remove))
    return delta
