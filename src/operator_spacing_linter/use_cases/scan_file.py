"""Use Case: Scan a token stream and dispatch registered tokens to rules."""

from collections import defaultdict
from collections.abc import Sequence
from typing import TYPE_CHECKING

from operator_spacing_linter.domain.entities import ScanResult
from operator_spacing_linter.domain.rules import Sniff, Violation

if TYPE_CHECKING:
    from operator_spacing_linter.domain.config import ConfigurationLoader
    from operator_spacing_linter.domain.protocols import FixerProtocol, TelemetryPort
    from operator_spacing_linter.domain.token_stream import TokenStream
    from operator_spacing_linter.domain.tokens import TokenKind


class ScannedFile:
    """
    The file a rule is handed: token stream, violation sink and fixer.

    Implements ReportingFileProtocol. Lives for one scan pass only.
    """

    def __init__(
        self,
        stream: "TokenStream",
        config: "ConfigurationLoader",
        fixer: "FixerProtocol | None" = None,
    ) -> None:
        self.filename = stream.filename
        self._stream = stream
        self._config = config
        self._fixer = fixer
        self.violations: list[Violation] = []

    @property
    def tokens(self) -> "TokenStream":
        return self._stream

    @property
    def fixer(self) -> "FixerProtocol":
        if self._fixer is None:
            raise RuntimeError(f"No fixer attached while scanning {self.filename or '<stream>'}.")
        return self._fixer

    @property
    def fixing(self) -> bool:
        """True when a fixer is attached and fixing is enabled in config."""
        return self._fixer is not None and self._config.fix_enabled

    def add_fixable_error(
        self, message: str, index: int, code: str, data: tuple[str, ...] = ()
    ) -> bool:
        """Record the violation; tell the rule whether to emit its fix."""
        if self._config.is_ignored(code):
            return False
        self.violations.append(
            Violation.from_token(
                code=code,
                message=message % data if data else message,
                filename=self.filename,
                index=index,
                token=self._stream[index],
                fixable=True,
                severity=self._config.severity,
                message_args=tuple(data),
            )
        )
        return self.fixing


class ScanFileUseCase:
    """Walk a stream once, handing each registered token to its rules."""

    def __init__(
        self,
        rules: Sequence[Sniff],
        config: "ConfigurationLoader",
        telemetry: "TelemetryPort | None" = None,
    ) -> None:
        self.rules = list(rules)
        self.config = config
        self.telemetry = telemetry
        self._listeners: dict["TokenKind", list[Sniff]] = defaultdict(list)
        for rule in self.rules:
            for kind in rule.register():
                self._listeners[kind].append(rule)

    def listens_for(self, kind: "TokenKind") -> bool:
        return kind in self._listeners

    def execute(self, stream: "TokenStream", fixer: "FixerProtocol | None" = None) -> ScanResult:
        """Run every rule over stream. With a fixer attached, rules also record edits."""
        file = ScannedFile(stream, self.config, fixer)
        for index, token in enumerate(stream):
            for rule in self._listeners.get(token.kind, ()):
                rule.process(file, index)

        if self.telemetry is not None:
            self.telemetry.debug(
                f"Scanned {stream.filename or '<stream>'}: {len(stream)} tokens, "
                f"{len(file.violations)} violation(s)."
            )
        return ScanResult(filename=stream.filename, violations=file.violations)
