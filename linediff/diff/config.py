"""Diff configuration dataclass with validation."""

from __future__ import annotations

__all__ = ["DiffConfig", "DiffConfigError"]

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..constants import CONTEXT_LINES, DEFAULT_ENGINE, LOOKAHEAD_WINDOW


class DiffConfigError(Exception):
    """Raised when diff configuration is invalid."""

    def __init__(self, errors: list[str]):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        message = "Diff configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)


@dataclass
class DiffConfig:
    """Diff configuration loaded from config dict with validation."""

    engine: str = DEFAULT_ENGINE
    context_lines: int = CONTEXT_LINES
    lookahead_window: int = LOOKAHEAD_WINDOW

    def _validate_engine(self) -> list[str]:
        """Validate engine names a registered engine."""
        from .engines import ENGINES

        errors: list[str] = []

        if not isinstance(self.engine, str) or self.engine not in ENGINES:
            errors.append(
                f"diff.engine must be one of {', '.join(sorted(ENGINES))} "
                f"(found: {type(self.engine).__name__} = {self.engine!r})"
            )

        return errors

    def _validate_context_lines(self) -> list[str]:
        """Validate context_lines is a non-negative int."""
        errors: list[str] = []

        # bool is an int subclass; reject it explicitly
        if isinstance(self.context_lines, bool) or not isinstance(self.context_lines, int) or self.context_lines < 0:
            errors.append(
                f"diff.context_lines must be a non-negative int "
                f"(found: {type(self.context_lines).__name__} = {self.context_lines!r}, "
                f"expected: integer like 3)"
            )

        return errors

    def _validate_lookahead_window(self) -> list[str]:
        """Validate lookahead_window is a positive int."""
        errors: list[str] = []

        if (
            isinstance(self.lookahead_window, bool)
            or not isinstance(self.lookahead_window, int)
            or self.lookahead_window <= 0
        ):
            errors.append(
                f"diff.lookahead_window must be a positive int "
                f"(found: {type(self.lookahead_window).__name__} = {self.lookahead_window!r}, "
                f"expected: integer like 10)"
            )

        return errors

    def __post_init__(self):
        """Validate diff configuration after initialization.

        Collects all validation errors and raises a single DiffConfigError
        with all errors, so the user can see everything that needs fixing.
        """
        errors: list[str] = []
        errors.extend(self._validate_engine())
        errors.extend(self._validate_context_lines())
        errors.extend(self._validate_lookahead_window())

        if errors:
            raise DiffConfigError(errors)

    @property
    def options(self) -> dict[str, Any]:
        """Engine options derived from this configuration."""
        return {"lookahead_window": self.lookahead_window}

    @classmethod
    def from_config_dict(cls, config: dict) -> DiffConfig:
        """Load diff config from config dict.

        Args:
            config: Host configuration dictionary; only its ``diff`` section is read

        Returns:
            DiffConfig instance (defaults when the section is absent)

        Raises:
            DiffConfigError: If the diff section or its values are invalid
        """
        diff_config = config.get("diff")
        if diff_config is None:
            return cls()

        if not isinstance(diff_config, dict):
            raise DiffConfigError(
                [
                    f"diff section must be a dict "
                    f"(found: {type(diff_config).__name__}, "
                    f"expected: dict with 'engine', 'context_lines', 'lookahead_window')"
                ]
            )

        unknown = sorted(set(diff_config) - {"engine", "context_lines", "lookahead_window"})
        if unknown:
            raise DiffConfigError([f"diff section has unknown keys: {', '.join(unknown)}"])

        return cls(
            engine=diff_config.get("engine", DEFAULT_ENGINE),
            context_lines=diff_config.get("context_lines", CONTEXT_LINES),
            lookahead_window=diff_config.get("lookahead_window", LOOKAHEAD_WINDOW),
        )

    @classmethod
    def load(cls, path: Path) -> DiffConfig:
        """Load diff config from a JSON file.

        Raises:
            DiffConfigError: If the file cannot be read or parsed
        """
        try:
            config = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise DiffConfigError([f"cannot load config from {path}: {exc}"]) from exc

        if not isinstance(config, dict):
            raise DiffConfigError([f"config file {path} must contain a JSON object (found: {type(config).__name__})"])

        return cls.from_config_dict(config)
