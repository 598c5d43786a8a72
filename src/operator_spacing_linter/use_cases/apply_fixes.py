"""Use Case: Apply Fixes to a token stream until it stops changing."""

from collections.abc import Callable
from typing import TYPE_CHECKING

from operator_spacing_linter.domain.entities import FixResult

if TYPE_CHECKING:
    from operator_spacing_linter.domain.config import ConfigurationLoader
    from operator_spacing_linter.domain.protocols import StreamFixerProtocol, TelemetryPort
    from operator_spacing_linter.domain.token_stream import TokenStream
    from operator_spacing_linter.use_cases.scan_file import ScanFileUseCase


class ApplyFixesUseCase:
    """
    Orchestrate the fix loop.

    Each pass scans the current stream with a fresh fixer, then rebuilds the
    stream from the fixed tokens so the next pass sees correct positions and
    bracket data. Stops when a pass commits nothing or after max_fix_passes.
    Nothing is written to disk; the caller decides what to do with the text.
    """

    def __init__(
        self,
        scan_use_case: "ScanFileUseCase",
        config: "ConfigurationLoader",
        telemetry: "TelemetryPort",
        fixer_factory: Callable[["TokenStream"], "StreamFixerProtocol"],
    ) -> None:
        self.scan_use_case = scan_use_case
        self.config = config
        self.telemetry = telemetry
        self.fixer_factory = fixer_factory

    def execute(self, stream: "TokenStream") -> FixResult:
        name = stream.filename or "<stream>"
        current = stream
        fixed = 0
        rejected = 0
        passes = 0
        converged = False

        while passes < self.config.max_fix_passes:
            passes += 1
            fixer = self.fixer_factory(current)
            self.scan_use_case.execute(current, fixer)
            rejected += fixer.changesets_rejected
            if not fixer.has_changes():
                converged = True
                break
            fixed += fixer.changesets_applied
            self.telemetry.debug(
                f"Pass {passes} on {name}: {fixer.changesets_applied} changeset(s) applied, "
                f"{fixer.changesets_rejected} deferred."
            )
            current = fixer.fixed_stream()

        if not converged:
            self.telemetry.warning(
                f"Fix loop for {name} did not settle after {self.config.max_fix_passes} passes."
            )

        remaining = self.scan_use_case.execute(current).violations
        return FixResult(
            filename=stream.filename,
            original_content=stream.content,
            content=current.content,
            passes=passes,
            fixed=fixed,
            rejected=rejected,
            remaining=remaining,
            converged=converged,
        )
