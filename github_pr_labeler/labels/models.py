"""Pydantic models and type hints for labeling decisions."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Protocol, Sequence, runtime_checkable

from pydantic import BaseModel, ConfigDict


class ChangedFile(BaseModel):
    """A file changed by a pull request or commit range."""

    model_config = ConfigDict(frozen=True)

    path: str
    status: str = "modified"
    lines_added: int = 0
    lines_removed: int = 0

    @property
    def lines_changed(self) -> int:
        """Number of lines added plus lines removed."""
        return self.lines_added + self.lines_removed


class LabelKind(str, Enum):
    """Enum for the kinds of labels managed by the labeling policy."""

    SIZE = "size"
    SERVER_ONLY = "server-only"
    SKIP_CHROMATIC = "skip-chromatic"
    REVIEW = "review"


class PolicyLabel(BaseModel):
    """Pydantic model for a label the labeling policy may attach."""

    model_config = ConfigDict(frozen=True)

    name: str
    color: str
    kind: LabelKind
    max_lines: int | None = None


class SizeResult(BaseModel):
    """Outcome of sizing a change set."""

    tier: PolicyLabel
    adjusted_total: int
    excluded_total: int


@runtime_checkable
class HasName(Protocol):
    """Protocol for objects that have a name attribute."""

    name: str


LabelType = str | dict[str, Any] | HasName


def extract_label_names(labels: Sequence[LabelType]) -> list[str]:
    """Extract label names from a list of GitHub label objects, strings, or dicts, keeping order."""
    names: list[str] = []
    for label in labels:
        if isinstance(label, str):
            name = label
        elif isinstance(label, dict) and "name" in label:
            name = label["name"]
        elif isinstance(label, HasName):
            name = label.name
        else:
            continue
        if name not in names:
            names.append(name)
    return names


def _unique(items: Iterable[Any], key: Any) -> tuple[Any, ...]:
    seen: set[str] = set()
    unique = []
    for item in items:
        if key(item) in seen:
            continue
        seen.add(key(item))
        unique.append(item)
    return tuple(unique)


@dataclass(frozen=True)
class LabelDelta:
    """Labels to add to and remove from an issue.

    A label name never appears in both ``to_add`` and ``to_remove``.
    """

    to_add: tuple[PolicyLabel, ...] = field(default_factory=tuple)
    to_remove: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Normalize both sides and reject contradictory deltas."""
        object.__setattr__(self, "to_add", _unique(self.to_add, key=lambda label: label.name))
        object.__setattr__(self, "to_remove", _unique(self.to_remove, key=lambda name: name))
        overlap = {label.name for label in self.to_add} & set(self.to_remove)
        if overlap:
            raise ValueError(f"Labels cannot be both added and removed: {sorted(overlap)}")

    def __add__(self, other: "LabelDelta") -> "LabelDelta":
        """Merge two deltas, keeping first-seen order."""
        return LabelDelta(to_add=self.to_add + other.to_add, to_remove=self.to_remove + other.to_remove)

    @property
    def is_empty(self) -> bool:
        """Whether applying this delta would change nothing."""
        return not self.to_add and not self.to_remove

    @property
    def names_to_add(self) -> list[str]:
        """Names of the labels to add."""
        return [label.name for label in self.to_add]
