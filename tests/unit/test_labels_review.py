"""Unit tests for the needs-one-more review gate."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from github_pr_labeler.labels.review import evaluate_review_gate, needs_one_more_label_delta


@pytest.mark.parametrize(
    "review_decision, existing, expected_add, expected_remove",
    [
        pytest.param("REVIEW_REQUIRED", [], ["needs-one-more"], (), id="first approval adds label"),
        pytest.param("REVIEW_REQUIRED", ["needs-one-more"], [], (), id="label already attached"),
        pytest.param(None, [], ["needs-one-more"], (), id="no decision adds label"),
        pytest.param("APPROVED", ["needs-one-more", "bug"], [], ("needs-one-more",), id="fully approved removes label"),
        pytest.param("APPROVED", ["bug"], [], (), id="fully approved without label"),
    ],
)
def test_needs_one_more_label_delta(review_decision: str | None, existing: list[str], expected_add: list[str], expected_remove: tuple[str, ...]) -> None:
    """Test the label transition for each aggregate review decision."""
    delta = needs_one_more_label_delta(review_decision, existing)
    assert delta.names_to_add == expected_add
    assert delta.to_remove == expected_remove


@pytest.mark.asyncio
async def test_approved_review_queries_review_decision() -> None:
    """Test that an approving review asks GitHub for the aggregate decision."""
    github = MagicMock()
    github.get_review_decision = AsyncMock(return_value="REVIEW_REQUIRED")
    delta = await evaluate_review_gate(github, 12, "APPROVED", [])
    github.get_review_decision.assert_awaited_once_with(12)
    assert delta.names_to_add == ["needs-one-more"]


@pytest.mark.asyncio
@pytest.mark.parametrize("review_state", ["commented", "changes_requested", "dismissed"])
async def test_non_approving_review_changes_nothing(review_state: str) -> None:
    """Test that reviews other than approvals make no remote calls and no changes."""
    github = MagicMock()
    github.get_review_decision = AsyncMock()
    delta = await evaluate_review_gate(github, 12, review_state, ["needs-one-more"])
    github.get_review_decision.assert_not_awaited()
    assert delta.is_empty
