"""In-memory token fixer: records changesets and materializes the fixed token stream."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from operator_spacing_linter.domain.entities import Changeset, Edit, EditType
from operator_spacing_linter.domain.token_stream import TokenStream
from operator_spacing_linter.domain.tokens import TokenKind

logger = logging.getLogger(__name__)


class ChangesetError(RuntimeError):
    """Changeset used out of order: nested begin, edit or end without begin."""


@dataclass
class _Slot:
    """Committed state of one token position: inserted text around new content."""

    before: str
    content: str
    after: str


class TokenFixer:
    """
    Gateway for applying token-level edits in atomic changesets.

    One fixer serves one pass over one stream. A position may be changed by
    a single changeset per pass; a later changeset touching an already
    changed position is rejected whole and left for the next pass. The
    fixer does not re-lex: inserted whitespace becomes its own whitespace
    token, any other inserted text joins the neighbouring token.
    """

    def __init__(self, stream: TokenStream) -> None:
        self._stream = stream
        self._slots: dict[int, _Slot] = {}
        self._pending: list[Edit] | None = None
        self._committed: list[Changeset] = []
        self._rejected = 0

    @property
    def stream(self) -> TokenStream:
        return self._stream

    @property
    def in_changeset(self) -> bool:
        return self._pending is not None

    @property
    def changesets(self) -> list[Changeset]:
        """Changesets committed so far, in order."""
        return list(self._committed)

    @property
    def changesets_applied(self) -> int:
        return len(self._committed)

    @property
    def changesets_rejected(self) -> int:
        return self._rejected

    def has_changes(self) -> bool:
        return bool(self._committed)

    def begin_changeset(self) -> None:
        if self._pending is not None:
            raise ChangesetError("A changeset is already open; changesets cannot be nested.")
        self._pending = []

    def end_changeset(self) -> bool:
        """Commit the open changeset. Returns False when it conflicts and is discarded."""
        if self._pending is None:
            raise ChangesetError("end_changeset() called without begin_changeset().")
        changeset = Changeset(edits=tuple(self._pending))
        self._pending = None
        if changeset.is_empty():
            return True

        conflicts = changeset.indices & self._slots.keys()
        if conflicts:
            self._rejected += 1
            logger.debug(
                "Rejected changeset touching already changed tokens %s in %s",
                sorted(conflicts),
                self._stream.filename or "<stream>",
            )
            return False

        for edit in changeset.edits:
            self._apply(edit)
        self._committed.append(changeset)
        return True

    def rollback_changeset(self) -> None:
        if self._pending is None:
            raise ChangesetError("rollback_changeset() called without begin_changeset().")
        self._pending = None

    @contextmanager
    def changeset(self) -> Iterator[None]:
        """Begin on enter; end on normal exit; roll back if the body raises."""
        self.begin_changeset()
        try:
            yield
        except BaseException:
            self.rollback_changeset()
            raise
        self.end_changeset()

    def add_content_before(self, index: int, text: str) -> None:
        self._record(Edit.insert_before(index, text))

    def add_content(self, index: int, text: str) -> None:
        self._record(Edit.insert_after(index, text))

    def replace_token(self, index: int, text: str) -> None:
        self._record(Edit.replace(index, text))

    def _record(self, edit: Edit) -> None:
        if self._pending is None:
            raise ChangesetError("Edits must be made inside a changeset.")
        if not 0 <= edit.index < len(self._stream):
            raise ValueError(f"Token index {edit.index} out of range (0..{len(self._stream) - 1}).")
        self._pending.append(edit)

    def _apply(self, edit: Edit) -> None:
        slot = self._slots.get(edit.index)
        if slot is None:
            slot = _Slot(before="", content=self._stream[edit.index].content, after="")
            self._slots[edit.index] = slot
        if edit.edit_type is EditType.INSERT_BEFORE:
            slot.before = edit.text + slot.before
        elif edit.edit_type is EditType.INSERT_AFTER:
            slot.after += edit.text
        elif edit.edit_type is EditType.REPLACE:
            slot.before, slot.content, slot.after = "", edit.text, ""
        else:
            raise ValueError(f"Unknown edit type: {edit.edit_type}")

    def token_content(self, index: int) -> str:
        """Current text at index including committed edits."""
        slot = self._slots.get(index)
        if slot is None:
            return self._stream[index].content
        return slot.before + slot.content + slot.after

    def get_contents(self) -> str:
        """The source text with every committed changeset applied."""
        return "".join(self.token_content(i) for i in range(len(self._stream)))

    def fixed_stream(self) -> TokenStream:
        """Re-derive a stream (positions and bracket index) from the fixed tokens."""
        return TokenStream.from_contents(self._fixed_pairs(), self._stream.filename)

    def _fixed_pairs(self) -> Iterator[tuple[TokenKind, str]]:
        for index, token in enumerate(self._stream):
            slot = self._slots.get(index)
            if slot is None:
                yield token.kind, token.content
                continue
            content = slot.content
            if slot.before.isspace():
                yield TokenKind.WHITESPACE, slot.before
            else:
                content = slot.before + content
            after = ""
            if slot.after.isspace():
                after = slot.after
            else:
                content += slot.after
            yield token.kind, content
            if after:
                yield TokenKind.WHITESPACE, after
