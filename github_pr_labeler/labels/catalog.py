"""Static catalog of the labels managed by the labeling policy."""

from github_pr_labeler.labels.models import LabelKind, PolicyLabel

SIZE_LABELS: tuple[PolicyLabel, ...] = (
    PolicyLabel(name="size/XS", color="3CBF00", kind=LabelKind.SIZE, max_lines=10),
    PolicyLabel(name="size/S", color="5D9801", kind=LabelKind.SIZE, max_lines=30),
    PolicyLabel(name="size/M", color="7F7203", kind=LabelKind.SIZE, max_lines=100),
    PolicyLabel(name="size/L", color="A14C05", kind=LabelKind.SIZE, max_lines=500),
    PolicyLabel(name="size/XL", color="C32607", kind=LabelKind.SIZE, max_lines=800),
    PolicyLabel(name="size/XXL", color="E50009", kind=LabelKind.SIZE),
)

SERVER_ONLY_LABEL = PolicyLabel(name="server-only", color="66E5A2", kind=LabelKind.SERVER_ONLY)
SKIP_CHROMATIC_LABEL = PolicyLabel(name="skip-chromatic", color="FC521F", kind=LabelKind.SKIP_CHROMATIC)
NEEDS_ONE_MORE_LABEL = PolicyLabel(name="needs-one-more", color="FBCA04", kind=LabelKind.REVIEW)


def sorted_size_labels(labels: tuple[PolicyLabel, ...] = SIZE_LABELS) -> list[PolicyLabel]:
    """Sort size tiers by ascending line limit with the unbounded tier last.

    Raises:
        ValueError: If the tiers do not include exactly one unbounded tier.
    """
    unbounded = [label for label in labels if label.max_lines is None]
    if len(unbounded) != 1:
        raise ValueError(f"Size tiers must include exactly one unbounded tier, found {len(unbounded)}")
    bounded = sorted((label for label in labels if label.max_lines is not None), key=lambda label: label.max_lines or 0)
    return bounded + unbounded


SORTED_SIZE_LABELS: list[PolicyLabel] = sorted_size_labels()
SIZE_LABEL_NAMES: frozenset[str] = frozenset(label.name for label in SIZE_LABELS)
