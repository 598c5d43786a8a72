"""Terminal reporter implementation - lives in infrastructure (writes to a stream)."""

import json
import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from operator_spacing_linter.domain.entities import FixResult, ScanResult


class TerminalViolationReporter:
    """Prints violations per line plus a summary table grouped by code. Implements ViolationReporterProtocol."""

    RED: str = "\033[38;2;196;30;58m"
    BLUE: str = "\033[38;2;0;123;255m"
    GOLD: str = "\033[38;2;249;166;2m"
    RESET: str = "\033[0m"
    BOLD: str = "\033[1m"

    def __init__(
        self,
        output: TextIO | None = None,
        color: bool | None = None,
        summary_output: TextIO | None = None,
    ) -> None:
        self._output = output
        self._summary_output = summary_output
        self._color = color

    @property
    def out(self) -> TextIO:
        return self._output or sys.stdout

    @property
    def summary_out(self) -> TextIO:
        """Where fix summaries go; stderr by default so stdout carries only fixed text."""
        return self._summary_output or sys.stderr

    @property
    def color(self) -> bool:
        if self._color is not None:
            return self._color
        isatty = getattr(self.out, "isatty", None)
        return bool(isatty and isatty())

    def _paint(self, text: str, *styles: str) -> str:
        if not self.color:
            return text
        return f"{''.join(styles)}{text}{self.RESET}"

    def report_scan(self, result: "ScanResult", output_format: str = "text") -> None:
        """Render one file's violations as text or JSON."""
        if output_format == "json":
            print(json.dumps(result.to_dict(), indent=2), file=self.out)
            return
        if output_format != "text":
            raise ValueError(f"Unknown output format: {output_format!r} (expected 'text' or 'json').")

        if not result.has_violations():
            print(self._paint(f"No operator spacing violations in {result.filename}.", self.BOLD, self.GOLD), file=self.out)
            return

        for violation in result.violations:
            fix = " [fixable]" if violation.fixable else ""
            print(
                f"{violation.location}: {self._paint(violation.short_code, self.RED)} "
                f"{violation.message}{fix}",
                file=self.out,
            )
        self._print_summary(result.counts_by_code())

    def _print_summary(self, counts: dict[str, int]) -> None:
        headers = ("Code", "Count")
        width = max(len(headers[0]), *(len(code) for code in counts))
        count_width = max(len(headers[1]), *(len(str(n)) for n in counts.values()))
        print(file=self.out)
        print(self._paint(f"{headers[0]:<{width}} | {headers[1]:<{count_width}}", self.BOLD, self.BLUE), file=self.out)
        print(self._paint(f"{'-' * width}-|-{'-' * count_width}", self.BLUE), file=self.out)
        for code, count in sorted(counts.items(), key=lambda item: (-item[1], item[0])):
            print(f"{code:<{width}} | {count:<{count_width}}", file=self.out)
        total = sum(counts.values())
        print(self._paint(f"{'Total':<{width}} | {total:<{count_width}}", self.BOLD, self.GOLD), file=self.out)

    def report_fix(self, result: "FixResult") -> None:
        """Summarize a fix run. The fixed text itself is written by the caller."""
        status = "settled" if result.converged else "did not settle"
        print(
            f"{result.filename}: {result.fixed} fix(es) in {result.passes} pass(es), {status}; "
            f"{len(result.remaining)} violation(s) remaining.",
            file=self.summary_out,
        )
        for violation in result.remaining:
            print(f"  {violation.location}: {violation.short_code} {violation.message}", file=self.summary_out)
