"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from operator_spacing_linter.infrastructure.di.container import OperatorSpacingContainer
from operator_spacing_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = OperatorSpacingContainer()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        token_gateway=container.get_token_gateway(),
        reporter=container.get_reporter(),
        rules=container.get_rules(),
        fixer_factory=container.get_fixer_factory(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
