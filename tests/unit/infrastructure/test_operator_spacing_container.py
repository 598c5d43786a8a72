from pathlib import Path

import pytest

from operator_spacing_linter.domain.rules.operator_spacing import OperatorSpacingRule
from operator_spacing_linter.infrastructure.di.container import OperatorSpacingContainer
from operator_spacing_linter.infrastructure.gateways.token_dump_gateway import TokenDumpGateway
from operator_spacing_linter.infrastructure.gateways.token_fixer import TokenFixer
from operator_spacing_linter.infrastructure.reporters import TerminalViolationReporter


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "pyproject.toml").write_text(
        "[tool.operator-spacing]\nallow_assignment_alignment = false\nseverity = 4\n",
        encoding="utf-8",
    )
    return tmp_path


class TestOperatorSpacingContainer:
    def test_initialization_registers_telemetry(self, project: Path) -> None:
        container = OperatorSpacingContainer(project)
        telemetry = container.get("TelemetryPort")
        assert telemetry is not None
        assert telemetry.project_name == "OPERATOR-SPACING"
        assert container.get_telemetry_port() is telemetry

    def test_config_comes_from_pyproject(self, project: Path) -> None:
        config = OperatorSpacingContainer(project).get_config_loader()
        assert config.severity == 4
        assert config.allow_assignment_alignment is False

    def test_rules_follow_config(self, project: Path) -> None:
        [rule] = OperatorSpacingContainer(project).get_rules()
        assert isinstance(rule, OperatorSpacingRule)
        assert rule.allow_assignment_alignment is False

    def test_gateways_and_reporter(self, project: Path) -> None:
        container = OperatorSpacingContainer(project)
        assert isinstance(container.get_token_gateway(), TokenDumpGateway)
        assert isinstance(container.get_reporter(), TerminalViolationReporter)
        assert container.get_fixer_factory() is TokenFixer

    def test_register_and_get_singleton(self, project: Path) -> None:
        container = OperatorSpacingContainer(project)
        mock_dep = {"foo": "bar"}
        container.register_singleton("MockDep", mock_dep)

        retrieved = container.get("MockDep")
        assert retrieved is mock_dep  # Same instance

    def test_get_missing_dependency_raises_error(self, project: Path) -> None:
        container = OperatorSpacingContainer(project)
        with pytest.raises(ValueError, match=r"Dependency 'Missing' not registered\."):
            container.get("Missing")
