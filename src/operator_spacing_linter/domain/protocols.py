"""Ports the domain depends on. Implementations live in infrastructure/ and interface/."""

from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from operator_spacing_linter.domain.entities import FixResult, ScanResult
    from operator_spacing_linter.domain.token_stream import TokenStream


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class FixerProtocol(Protocol):
    """
    Scoped edit capability handed to rules.

    Every begin_changeset() must be matched by end_changeset() or
    rollback_changeset(); changeset() does the pairing for the caller.
    """

    def begin_changeset(self) -> None: ...

    def end_changeset(self) -> bool:
        """Commit the open changeset. Returns False when it was rejected."""
        ...

    def rollback_changeset(self) -> None: ...

    def changeset(self) -> AbstractContextManager[None]:
        """Context manager: begin on enter, end on exit, rollback on error."""
        ...

    def add_content_before(self, index: int, text: str) -> None:
        """Insert text immediately before the token at index."""
        ...

    def add_content(self, index: int, text: str) -> None:
        """Insert text immediately after the token at index."""
        ...

    def replace_token(self, index: int, text: str) -> None:
        """Replace the token at index with text."""
        ...


class StreamFixerProtocol(FixerProtocol, Protocol):
    """A fixer bound to one stream for one pass of the fix loop."""

    @property
    def changesets_applied(self) -> int: ...

    @property
    def changesets_rejected(self) -> int: ...

    def has_changes(self) -> bool: ...

    def get_contents(self) -> str: ...

    def fixed_stream(self) -> "TokenStream":
        """Stream re-derived from the fixed tokens, ready for the next pass."""
        ...


class ReportingFileProtocol(Protocol):
    """What a rule sees of the file being scanned."""

    filename: str

    @property
    def tokens(self) -> "TokenStream": ...

    @property
    def fixer(self) -> FixerProtocol: ...

    def add_fixable_error(
        self, message: str, index: int, code: str, data: tuple[str, ...] = ()
    ) -> bool:
        """
        Record a fixable violation at index.

        Returns True when the caller should emit its fix (fixing is enabled
        for this run and the code is not ignored).
        """
        ...


class TokenDumpGatewayProtocol(Protocol):
    """Loads an already-tokenized file."""

    def load(self, path: str) -> "TokenStream":
        """Read a token dump and build a stream. Raises OSError or ValueError on bad input."""
        ...


class ViolationReporterProtocol(Protocol):
    """Renders scan and fix outcomes for the user."""

    def report_scan(self, result: "ScanResult", output_format: str = "text") -> None: ...

    def report_fix(self, result: "FixResult") -> None: ...
