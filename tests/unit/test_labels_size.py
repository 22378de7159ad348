"""Unit tests for size tier calculation."""

import pytest

from github_pr_labeler.labels.catalog import SIZE_LABELS, SORTED_SIZE_LABELS, sorted_size_labels
from github_pr_labeler.labels.models import ChangedFile, LabelKind, PolicyLabel
from github_pr_labeler.labels.size import calculate_size, load_excluded_globs, parse_excluded_globs, size_tier_for
from tests.unit.fakes import FakeGitHub


@pytest.mark.parametrize(
    "line_count, expected_tier",
    [
        pytest.param(0, "size/XS", id="no lines"),
        pytest.param(10, "size/XS", id="XS upper bound"),
        pytest.param(11, "size/S", id="S lower bound"),
        pytest.param(30, "size/S", id="S upper bound"),
        pytest.param(31, "size/M", id="M lower bound"),
        pytest.param(100, "size/M", id="M upper bound"),
        pytest.param(101, "size/L", id="L lower bound"),
        pytest.param(500, "size/L", id="L upper bound"),
        pytest.param(501, "size/XL", id="XL lower bound"),
        pytest.param(800, "size/XL", id="XL upper bound"),
        pytest.param(801, "size/XXL", id="XXL lower bound"),
        pytest.param(1_000_000, "size/XXL", id="unbounded tier"),
    ],
)
def test_size_tier_for(line_count: int, expected_tier: str) -> None:
    """Test that line counts map to the smallest covering tier."""
    assert size_tier_for(line_count).name == expected_tier


def test_size_tier_is_monotonic() -> None:
    """Test that more changed lines never yields a smaller tier."""
    ranks = {label.name: rank for rank, label in enumerate(SORTED_SIZE_LABELS)}
    previous_rank = 0
    for line_count in range(0, 1200):
        rank = ranks[size_tier_for(line_count).name]
        assert rank >= previous_rank
        previous_rank = rank


def test_sorted_size_labels_puts_unbounded_tier_last() -> None:
    """Test that tiers are ordered by limit with the catch-all tier last."""
    assert [label.name for label in sorted_size_labels(tuple(reversed(SIZE_LABELS)))] == [
        "size/XS",
        "size/S",
        "size/M",
        "size/L",
        "size/XL",
        "size/XXL",
    ]


def test_sorted_size_labels_requires_one_unbounded_tier() -> None:
    """Test that a catalog without exactly one catch-all tier is rejected."""
    extra = PolicyLabel(name="size/XXXL", color="000000", kind=LabelKind.SIZE)
    with pytest.raises(ValueError, match="exactly one unbounded tier"):
        sorted_size_labels(SIZE_LABELS + (extra,))


def test_parse_excluded_globs() -> None:
    """Test that only lines carrying an exclusion attribute contribute their first token."""
    content = "\n".join(
        [
            "* text=auto",
            "package-lock.json linguist-generated=true",
            "src/generated/**  -diff pr-size-ignore=true",
            "*.png binary",
            "",
        ]
    )
    assert parse_excluded_globs(content) == ["package-lock.json", "src/generated/**"]


def test_calculate_size_subtracts_excluded_files() -> None:
    """Test that excluded files do not count towards the size."""
    files = [
        ChangedFile(path="src/App.tsx", lines_added=20, lines_removed=5),
        ChangedFile(path="package-lock.json", lines_added=400, lines_removed=100),
    ]
    result = calculate_size(525, files, ["package-lock.json"])
    assert result.adjusted_total == 25
    assert result.excluded_total == 500
    assert result.tier.name == "size/S"


def test_calculate_size_exclusion_never_increases_total() -> None:
    """Test that excluding a file leaves the total lower or unchanged."""
    files = [
        ChangedFile(path="src/generated/schema.ts", lines_added=3, lines_removed=4),
        ChangedFile(path="src/generated/empty.ts", status="renamed"),
    ]
    without_exclusions = calculate_size(7, files, [])
    with_exclusions = calculate_size(7, files, ["src/generated/**"])
    assert with_exclusions.adjusted_total == without_exclusions.adjusted_total - 7
    assert calculate_size(0, files[1:], ["src/generated/**"]).adjusted_total == 0


def test_calculate_size_no_files() -> None:
    """Test that an empty change set is the smallest tier."""
    result = calculate_size(0, [], [])
    assert result.tier.name == "size/XS"
    assert result.excluded_total == 0


@pytest.mark.asyncio
async def test_load_excluded_globs_reads_attributes_file() -> None:
    """Test that exclusions are read from the repository's .gitattributes."""
    github = FakeGitHub()
    github.file_contents[".gitattributes"] = "yarn.lock linguist-generated=true\n"
    assert await load_excluded_globs(github) == ["yarn.lock"]


@pytest.mark.asyncio
async def test_load_excluded_globs_missing_file() -> None:
    """Test that a missing .gitattributes means no exclusions."""
    assert await load_excluded_globs(FakeGitHub()) == []
