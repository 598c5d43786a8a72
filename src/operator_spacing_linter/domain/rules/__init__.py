"""Domain models for rules and violations."""

from dataclasses import dataclass

__all__ = [
    "Sniff",
    "Violation",
]

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from operator_spacing_linter.domain.protocols import ReportingFileProtocol
    from operator_spacing_linter.domain.tokens import Token, TokenKind


@dataclass(frozen=True)
class Violation:
    """A rule violation with code, message, location, and fixability."""

    code: str
    message: str
    location: str
    index: int
    line: int = 0
    column: int = 0
    fixable: bool = False
    severity: int = 5
    message_args: tuple[str, ...] | None = None
    """Placeholder values the message template was filled with (operator, found count)."""

    @property
    def short_code(self) -> str:
        """Last segment of the code, e.g. 'NoSpaceBefore'."""
        return self.code.rsplit(".", 1)[-1]

    @classmethod
    def from_token(
        cls,
        *,
        code: str,
        message: str,
        filename: str,
        index: int,
        token: "Token",
        fixable: bool = False,
        severity: int = 5,
        message_args: tuple[str, ...] | None = None,
    ) -> "Violation":
        """Build a Violation with location derived from the token. Prefer over manual location=."""
        return cls(
            code=code,
            message=message,
            location=f"{filename}:{token.line}:{token.column}",
            index=index,
            line=token.line,
            column=token.column,
            fixable=fixable,
            severity=severity,
            message_args=message_args,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "location": self.location,
            "line": self.line,
            "column": self.column,
            "fixable": self.fixable,
            "severity": self.severity,
        }


class Sniff(Protocol):
    """
    A token rule: declares which kinds it listens for and inspects one
    occurrence per call. Stateless across calls and files.
    """

    code: str
    description: str

    def register(self) -> frozenset["TokenKind"]:
        """Token kinds the host must dispatch to process()."""
        ...

    def process(self, file: "ReportingFileProtocol", index: int) -> None:
        """Inspect the token at index, reporting and fixing through file."""
        ...
