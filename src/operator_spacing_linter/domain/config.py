"""Configuration for linter settings. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from operator_spacing_linter.domain.constants import (
    ALL_CODES,
    DEFAULT_MAX_FIX_PASSES,
    DEFAULT_SEVERITY,
)

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """
    Immutable configuration for the operator spacing rule and its host.

    Created by Infrastructure from the [tool.operator-spacing] table. Domain does not
    read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict) at composition root.
    """

    def __init__(
        self,
        config_dict: dict[str, object] | None = None,
    ) -> None:
        """Set config once at construction. No mutable class or instance state after init."""
        self._config: dict[str, object] = dict(config_dict or {})
        if self._config:
            self.validate_config(self._config)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about values that will be ignored in favour of defaults."""
        for key in ("fix", "allow_assignment_alignment"):
            if key in config and not isinstance(config[key], bool):
                logger.warning("Configuration Warning: '%s' must be true or false; using default.", key)

        for key in ("max_fix_passes", "severity"):
            value = config.get(key)
            if key in config and (isinstance(value, bool) or not isinstance(value, int) or value < 1):
                logger.warning("Configuration Warning: '%s' must be a positive integer; using default.", key)

        ignore = config.get("ignore_codes", [])
        if not isinstance(ignore, list):
            logger.warning("Configuration Warning: 'ignore_codes' must be a list of codes.")
            return
        unknown = [c for c in ignore if not isinstance(c, str) or c.rsplit(".", 1)[-1] not in ALL_CODES]
        if unknown:
            logger.warning(
                "Configuration Warning: unknown codes in 'ignore_codes': %s. Known: %s.",
                ", ".join(map(str, unknown)),
                ", ".join(ALL_CODES),
            )

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    def _bool(self, key: str, default: bool) -> bool:
        value = self._config.get(key, default)
        return value if isinstance(value, bool) else default

    def _positive_int(self, key: str, default: int) -> int:
        value = self._config.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            return default
        return value

    @property
    def fix_enabled(self) -> bool:
        """Whether add_fixable_error() tells rules to emit fixes."""
        return self._bool("fix", True)

    @property
    def allow_assignment_alignment(self) -> bool:
        """Multiple spaces before an assignment operator are permitted (alignment)."""
        return self._bool("allow_assignment_alignment", True)

    @property
    def max_fix_passes(self) -> int:
        return self._positive_int("max_fix_passes", DEFAULT_MAX_FIX_PASSES)

    @property
    def severity(self) -> int:
        return self._positive_int("severity", DEFAULT_SEVERITY)

    @property
    def ignore_codes(self) -> frozenset[str]:
        """Short codes (e.g. 'SpacingBefore') whose violations are not reported."""
        raw = self._config.get("ignore_codes", [])
        if isinstance(raw, list):
            return frozenset(c.rsplit(".", 1)[-1] for c in raw if isinstance(c, str))
        return frozenset()

    def is_ignored(self, code: str) -> bool:
        return code.rsplit(".", 1)[-1] in self.ignore_codes
