from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

from operator_spacing_linter.domain.config import ConfigurationLoader
from operator_spacing_linter.domain.rules.operator_spacing import OperatorSpacingRule
from operator_spacing_linter.infrastructure.config_file_loader import ConfigFileLoader
from operator_spacing_linter.infrastructure.gateways.token_dump_gateway import TokenDumpGateway
from operator_spacing_linter.infrastructure.gateways.token_fixer import TokenFixer
from operator_spacing_linter.infrastructure.reporters import TerminalViolationReporter
from operator_spacing_linter.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from operator_spacing_linter.domain.protocols import (
        StreamFixerProtocol,
        TelemetryPort,
        TokenDumpGatewayProtocol,
        ViolationReporterProtocol,
    )
    from operator_spacing_linter.domain.rules import Sniff
    from operator_spacing_linter.domain.token_stream import TokenStream


class OperatorSpacingContainer:
    """Dependency Injection Container for the operator spacing linter."""

    def __init__(self, config_root: Path | None = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_root)

    def _register_defaults(self, config_root: Path | None) -> None:
        """Register default implementations for protocols."""
        config_dict = ConfigFileLoader.load_config_from_fs(config_root)
        config_loader = ConfigurationLoader(config_dict)
        self.register_singleton("ConfigurationLoader", config_loader)

        telemetry = ProjectTelemetry("OPERATOR-SPACING", "cyan", "Operator spacing check online")
        self.register_singleton("TelemetryPort", telemetry)
        self.register_singleton("TokenDumpGateway", TokenDumpGateway())
        self.register_singleton("ViolationReporter", TerminalViolationReporter())
        self.register_singleton(
            "Rules",
            [OperatorSpacingRule(allow_assignment_alignment=config_loader.allow_assignment_alignment)],
        )
        self.register_singleton("FixerFactory", TokenFixer)

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loader (created at composition root)."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_token_gateway(self) -> "TokenDumpGatewayProtocol":
        """Return the token dump gateway."""
        return cast("TokenDumpGatewayProtocol", self.get("TokenDumpGateway"))

    def get_reporter(self) -> "ViolationReporterProtocol":
        """Return the violation reporter."""
        return cast("ViolationReporterProtocol", self.get("ViolationReporter"))

    def get_rules(self) -> "list[Sniff]":
        """Return the registered rules, in dispatch order."""
        return cast("list[Sniff]", self.get("Rules"))

    def get_fixer_factory(self) -> "Callable[[TokenStream], StreamFixerProtocol]":
        """Return the callable that builds a fixer for one pass."""
        return cast("Callable[[TokenStream], StreamFixerProtocol]", self.get("FixerFactory"))
