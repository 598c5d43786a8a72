from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from operator_spacing_linter.domain.rules import Violation


class EditType(Enum):
    """Single-token edits a rule may propose."""
    INSERT_BEFORE = "insert_before"
    INSERT_AFTER = "insert_after"
    REPLACE = "replace"


@dataclass(frozen=True)
class Edit:
    """
    Pure data structure describing one token-level edit.

    Rules never build these directly; the fixer records them while a
    changeset is open and applies the whole changeset or none of it.
    """
    edit_type: EditType
    index: int
    text: str

    @classmethod
    def insert_before(cls, index: int, text: str) -> "Edit":
        return cls(edit_type=EditType.INSERT_BEFORE, index=index, text=text)

    @classmethod
    def insert_after(cls, index: int, text: str) -> "Edit":
        return cls(edit_type=EditType.INSERT_AFTER, index=index, text=text)

    @classmethod
    def replace(cls, index: int, text: str) -> "Edit":
        return cls(edit_type=EditType.REPLACE, index=index, text=text)


@dataclass(frozen=True)
class Changeset:
    """An atomic group of edits: applied together or not at all."""
    edits: tuple[Edit, ...] = ()

    @property
    def indices(self) -> frozenset[int]:
        return frozenset(edit.index for edit in self.edits)

    def is_empty(self) -> bool:
        return not self.edits


@dataclass(frozen=True)
class ScanResult:
    """Outcome of one scan pass over a token stream."""
    filename: str
    violations: list[Violation] = field(default_factory=list)

    def has_violations(self) -> bool:
        return bool(self.violations)

    def counts_by_code(self) -> dict[str, int]:
        """Number of violations per short code, e.g. {'NoSpaceBefore': 2}."""
        counts: dict[str, int] = {}
        for violation in self.violations:
            counts[violation.short_code] = counts.get(violation.short_code, 0) + 1
        return counts

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.filename,
            "violations": [v.to_dict() for v in self.violations],
        }


@dataclass(frozen=True)
class FixResult:
    """Outcome of the fix loop: the fixed text and what is left over."""
    filename: str
    original_content: str
    content: str
    passes: int
    fixed: int
    rejected: int = 0
    remaining: list[Violation] = field(default_factory=list)
    converged: bool = True

    @property
    def changed(self) -> bool:
        return self.content != self.original_content
