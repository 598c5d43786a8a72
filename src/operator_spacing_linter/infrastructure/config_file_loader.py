"""Load [tool.operator-spacing] from pyproject.toml. Infrastructure I/O only."""

import sys
from pathlib import Path

from operator_spacing_linter.domain.constants import CONFIG_SECTION

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib


class ConfigFileLoader:
    """
    Loads config from the nearest pyproject.toml, walking up from start.
    """

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Load the [tool.operator-spacing] table; empty when no pyproject.toml has one."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.is_file():
                continue
            try:
                with config_file.open("rb") as f:
                    data = toml_lib.load(f)
            except (OSError, toml_lib.TOMLDecodeError):
                # Unreadable or broken file: keep looking in parent dirs
                continue
            tool_section = data.get("tool", {}) or {}
            return dict(tool_section.get(CONFIG_SECTION, {}) or {})
        return {}
