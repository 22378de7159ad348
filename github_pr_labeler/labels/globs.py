"""Classifies changed file paths against named sets of glob patterns."""

from typing import Iterable, Sequence

from wcmatch import glob

# minimatch semantics: `*` stays within a path segment while `**` spans directories.
# Dot-files only match when named explicitly.
GLOB_FLAGS = glob.GLOBSTAR | glob.EXTGLOB | glob.BRACE | glob.CASE | glob.FORCEUNIX

MOCK_GLOB_PATTERN = "**/*.+(mocks|mock-data).ts"
STORY_GLOB_PATTERN = "**/*.story.ts?(x)"
GITHUB_GLOB_PATTERN = ".github/**"
HUSKY_GLOB_PATTERN = ".husky/**"
OUTFILE_GLOB_PATTERN = ".out/**"
STORYBOOK_GLOB_PATTERN = ".storybook/**"
VSCODE_GLOB_PATTERN = ".vscode/**"
FERGY_TEMPLATES_GLOB_PATTERN = "fergy-templates/**"
DOCS_GLOB_PATTERN = "**/*.md"
DOCS_MISC_GLOB_PATTERN = "doc*/**"
TESTS_GLOB_PATTERN = "**/*.test.ts?(x)"
YAML_GLOB_PATTERN = "**/*.y?(a)ml"
SERVER_ONLY_GLOB_PATTERN = "**/src/server/**"

NON_DEPLOYMENT_GLOB_PATTERNS: tuple[str, ...] = (
    MOCK_GLOB_PATTERN,
    STORY_GLOB_PATTERN,
    GITHUB_GLOB_PATTERN,
    HUSKY_GLOB_PATTERN,
    OUTFILE_GLOB_PATTERN,
    STORYBOOK_GLOB_PATTERN,
    VSCODE_GLOB_PATTERN,
    FERGY_TEMPLATES_GLOB_PATTERN,
    DOCS_GLOB_PATTERN,
    DOCS_MISC_GLOB_PATTERN,
    TESTS_GLOB_PATTERN,
)
"""Paths whose changes never require a deployment."""

CHROMATIC_SKIP_GLOB_PATTERNS: tuple[str, ...] = (
    GITHUB_GLOB_PATTERN,
    HUSKY_GLOB_PATTERN,
    OUTFILE_GLOB_PATTERN,
    VSCODE_GLOB_PATTERN,
    FERGY_TEMPLATES_GLOB_PATTERN,
    DOCS_GLOB_PATTERN,
    DOCS_MISC_GLOB_PATTERN,
    TESTS_GLOB_PATTERN,
    YAML_GLOB_PATTERN,
    SERVER_ONLY_GLOB_PATTERN,
)
"""Paths whose changes cannot affect visual regression (Chromatic) snapshots."""

SERVER_ONLY_GLOB_PATTERNS: tuple[str, ...] = (SERVER_ONLY_GLOB_PATTERN,)
"""Paths that belong to the server and carry no UI."""


def matches(path: str, patterns: Sequence[str]) -> bool:
    """Return True if the path matches any of the glob patterns."""
    if not patterns:
        return False
    return glob.globmatch(path, list(patterns), flags=GLOB_FLAGS)


def first_unmatched(paths: Iterable[str], patterns: Sequence[str]) -> str | None:
    """Return the first path matching none of the patterns, or None if every path matches."""
    return next((path for path in paths if not matches(path, patterns)), None)


def all_match(paths: Iterable[str], patterns: Sequence[str]) -> bool:
    """Return True if every path matches at least one pattern (True for no paths)."""
    return first_unmatched(paths, patterns) is None
