"""CLI entry points for operator-spacing - Thin Controller using Typer."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import typer

from operator_spacing_linter.domain.config import ConfigurationLoader
from operator_spacing_linter.domain.constants import BANNER
from operator_spacing_linter.domain.protocols import (
    TelemetryPort,
    TokenDumpGatewayProtocol,
    ViolationReporterProtocol,
)
from operator_spacing_linter.domain.rules import Sniff
from operator_spacing_linter.use_cases.apply_fixes import ApplyFixesUseCase
from operator_spacing_linter.use_cases.scan_file import ScanFileUseCase

if TYPE_CHECKING:
    from operator_spacing_linter.domain.protocols import StreamFixerProtocol
    from operator_spacing_linter.domain.token_stream import TokenStream

EXIT_VIOLATIONS: int = 1
EXIT_USAGE: int = 2


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    token_gateway: TokenDumpGatewayProtocol
    reporter: ViolationReporterProtocol
    rules: list[Sniff]
    fixer_factory: "Callable[[TokenStream], StreamFixerProtocol]"


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def load_stream(deps: CLIDependencies, path: Path) -> "TokenStream":
        """Load a token dump or exit with a usage error."""
        try:
            return deps.token_gateway.load(str(path))
        except (OSError, ValueError) as exc:
            deps.telemetry.error(f"Cannot load token dump: {exc}")
            raise typer.Exit(code=EXIT_USAGE) from exc

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="operator-spacing",
            help="Check and fix spacing around operators in pre-tokenized source files.",
            add_completion=False,
        )

        @app.callback()
        def main(
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug detail to stderr."),
        ) -> None:
            """operator-spacing: one space on both sides of every operator."""
            logging.basicConfig(
                level=logging.DEBUG if verbose else logging.WARNING,
                format="%(levelname)s %(name)s: %(message)s",
            )

        @app.command()
        def check(
            path: Path = typer.Argument(..., help="Token dump (JSON) to check."),
            output_format: str = typer.Option("text", "--format", "-f", help="Output format: text or json."),
        ) -> None:
            """Report operator spacing violations. Exits 1 when any are found."""
            if output_format not in ("text", "json"):
                deps.telemetry.error(f"Unknown format {output_format!r}; use 'text' or 'json'.")
                raise typer.Exit(code=EXIT_USAGE)
            stream = CLIAppFactory.load_stream(deps, path)
            if output_format == "text":
                deps.telemetry.handshake()
                deps.telemetry.step(BANNER)
            use_case = ScanFileUseCase(deps.rules, deps.config_loader, deps.telemetry)
            result = use_case.execute(stream)
            deps.reporter.report_scan(result, output_format=output_format)
            if result.has_violations():
                raise typer.Exit(code=EXIT_VIOLATIONS)

        @app.command()
        def fix(
            path: Path = typer.Argument(..., help="Token dump (JSON) to fix."),
        ) -> None:
            """Apply all fixes in memory and print the fixed source to stdout."""
            stream = CLIAppFactory.load_stream(deps, path)
            deps.telemetry.handshake()
            if not deps.config_loader.fix_enabled:
                deps.telemetry.warning("Fixing is disabled in [tool.operator-spacing]; output is unchanged.")
            scan = ScanFileUseCase(deps.rules, deps.config_loader, deps.telemetry)
            use_case = ApplyFixesUseCase(
                scan_use_case=scan,
                config=deps.config_loader,
                telemetry=deps.telemetry,
                fixer_factory=deps.fixer_factory,
            )
            result = use_case.execute(stream)
            typer.echo(result.content, nl=False)
            deps.reporter.report_fix(result)
            if result.remaining:
                raise typer.Exit(code=EXIT_VIOLATIONS)

        return app
