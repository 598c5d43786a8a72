"""Project telemetry: styled console lines mirrored to a logger. Implements TelemetryPort."""

import logging

import typer


class ProjectTelemetry:
    """User-facing status output. Console lines go to stderr so stdout stays clean for fixed text."""

    def __init__(self, project_name: str, color: str, welcome_message: str) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome_message = welcome_message
        self.echo = typer.secho
        self.logger = logging.getLogger(project_name.lower())

    def handshake(self) -> None:
        self.echo(f"[{self.project_name}] {self.welcome_message}", fg=self.color, bold=True, err=True)
        self.logger.info("%s session started", self.project_name)

    def step(self, message: str) -> None:
        self.echo(f"[{self.project_name}] {message}", err=True)
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.echo(f"[{self.project_name}] WARNING: {message}", fg=typer.colors.YELLOW, err=True)
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.echo(f"[{self.project_name}] ERROR: {message}", fg=typer.colors.RED, err=True)
        self.logger.error(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)
