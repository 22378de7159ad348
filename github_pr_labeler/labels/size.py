"""Computes the size tier of a change set."""

from typing import Sequence

import structlog

from github_pr_labeler.github.abc import GitHubClientBase
from github_pr_labeler.labels.catalog import SORTED_SIZE_LABELS
from github_pr_labeler.labels.globs import matches
from github_pr_labeler.labels.models import ChangedFile, PolicyLabel, SizeResult

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

ATTRIBUTES_FILE_PATH = ".gitattributes"
EXCLUSION_ATTRIBUTES = ("linguist-generated=true", "pr-size-ignore=true")


def parse_excluded_globs(content: str) -> list[str]:
    """Extract excluded path globs from .gitattributes content.

    Every line carrying one of the exclusion attributes contributes its first token.
    """
    excluded_globs: list[str] = []
    for line in content.splitlines():
        if not any(attribute in line for attribute in EXCLUSION_ATTRIBUTES):
            continue
        tokens = line.split()
        if tokens:
            excluded_globs.append(tokens[0])
    return excluded_globs


async def load_excluded_globs(github: GitHubClientBase, path: str = ATTRIBUTES_FILE_PATH) -> list[str]:
    """Load excluded path globs from the repository's attributes file.

    Any failure to read the file means there are no exclusions.
    """
    try:
        content = await github.get_file_content(path)
    except Exception as exc:
        logger.info("No custom file exclusions found", path=path, reason=str(exc))
        return []
    excluded_globs = parse_excluded_globs(content)
    if excluded_globs:
        logger.info("Custom file exclusions found", path=path, excluded_globs=excluded_globs)
    else:
        logger.info("No custom file exclusions found", path=path)
    return excluded_globs


def size_tier_for(line_count: int) -> PolicyLabel:
    """Return the smallest size tier whose line limit covers the line count."""
    for label in SORTED_SIZE_LABELS:
        if label.max_lines is None or line_count <= label.max_lines:
            return label
    # Unreachable: the catalog always ends with an unbounded tier.
    raise ValueError(f"No size tier found for {line_count} lines")


def calculate_size(total_changes: int, files: Sequence[ChangedFile], excluded_globs: Sequence[str]) -> SizeResult:
    """Size a change set, discounting lines from files matching an excluded glob."""
    adjusted_total = total_changes
    excluded_total = 0
    for file in files:
        if matches(file.path, excluded_globs):
            logger.info("Excluding file", path=file.path, lines_changed=file.lines_changed)
            adjusted_total -= file.lines_changed
            excluded_total += file.lines_changed

    logger.info("Total number of additions and deletions in excluded files", excluded_total=excluded_total)
    logger.info("Total number of additions and deletions that will count towards PR size", adjusted_total=adjusted_total)
    return SizeResult(tier=size_tier_for(adjusted_total), adjusted_total=adjusted_total, excluded_total=excluded_total)
