"""Configuration loader for ClauseGloss.

Configuration precedence (highest to lowest):
1. Environment variables (CLAUSEGLOSS_*)
2. Explicit config file passed on the command line
3. Project-level .clausegloss.yml|yaml in the working directory
4. User-level ~/.clausegloss/config.yml|yaml
5. Built-in defaults
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from clausegloss.config.defaults import (
    CONFIG_EXTENSIONS,
    DEFAULT_GLOSSARY_CONFIG,
    PROJECT_CONFIG_STEM,
    USER_CONFIG_DIRNAME,
)
from clausegloss.lib.errors import ConfigError, FileNotFoundError
from clausegloss.models.config import GlossaryConfig

logger = logging.getLogger(__name__)

# Environment variable to field name mapping
ENV_VAR_MAP = {
    "max_definition_length": "CLAUSEGLOSS_MAX_DEFINITION_LENGTH",
    "min_definition_length": "CLAUSEGLOSS_MIN_DEFINITION_LENGTH",
    "min_phrase_length": "CLAUSEGLOSS_MIN_PHRASE_LENGTH",
    "verbose": "CLAUSEGLOSS_VERBOSE",
    "quiet": "CLAUSEGLOSS_QUIET",
}

_BOOL_FIELDS = ("verbose", "quiet")


def _parse_env_value(field_name: str, value: str) -> Any:
    """Parse environment variable value to the field's type.

    Raises:
        ValueError: If an integer field receives a non-integer value
    """
    if field_name in _BOOL_FIELDS:
        return value.strip().lower() in ("true", "1", "yes", "on")
    return int(value)


def _format_validation_errors(exc: PydanticValidationError) -> str:
    """Render pydantic errors as one line per offending field."""
    lines = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ())) or "config"
        lines.append(f"Field '{loc}': {error.get('msg', 'invalid value')}")
    return "\n".join(lines) or "Validation failed with unknown error"


class ConfigLoader:
    """Loads GlossaryConfig from YAML files and the environment.

    Attributes:
        env: Environment mapping consulted for CLAUSEGLOSS_* overrides
        project_dir: Directory searched for a project-level config file
    """

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        project_dir: Path | None = None,
    ) -> None:
        """Initialize the loader.

        Args:
            env: Environment variables; defaults to os.environ.
            project_dir: Project directory; defaults to the working directory.
        """
        self.env = env if env is not None else os.environ
        self.project_dir = project_dir or Path.cwd()

    def parse_yaml(self, file_path: str | Path) -> dict[str, Any]:
        """Parse a YAML config file into a dictionary.

        Args:
            file_path: Path to the YAML file

        Returns:
            Parsed mapping (empty for an empty file)

        Raises:
            FileNotFoundError: If the file cannot be read
            ConfigError: If the YAML is malformed or not a mapping
        """
        path = Path(file_path)
        try:
            with open(path, encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except OSError as e:
            raise FileNotFoundError(
                str(path),
                f"Configuration file not found at {path}. "
                "Please ensure the file exists at this path.",
            ) from e
        except yaml.YAMLError as e:
            raise ConfigError(
                "yaml_parse", f"Failed to parse YAML file {path}: {e}"
            ) from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigError(
                "yaml_parse",
                f"Expected a mapping in {path}, got {type(content).__name__}",
            )
        return content

    def find_config_file(self, config_dir: Path, stem: str) -> Path | None:
        """Return the first existing ``<stem>.yml`` / ``<stem>.yaml`` in a directory.

        The .yml extension is preferred when both exist.
        """
        found = [
            config_dir / f"{stem}{ext}"
            for ext in CONFIG_EXTENSIONS
            if (config_dir / f"{stem}{ext}").exists()
        ]
        if len(found) > 1:
            logger.info(f"Both {found[0]} and {found[1]} exist. Using {found[0]}.")
        return found[0] if found else None

    def env_overrides(self) -> dict[str, Any]:
        """Collect CLAUSEGLOSS_* overrides from the environment.

        Raises:
            ConfigError: If a numeric override is not an integer
        """
        overrides: dict[str, Any] = {}
        for field_name, env_name in ENV_VAR_MAP.items():
            if env_name not in self.env:
                continue
            try:
                overrides[field_name] = _parse_env_value(
                    field_name, self.env[env_name]
                )
            except ValueError as e:
                raise ConfigError(
                    field_name,
                    f"{env_name} must be an integer, got {self.env[env_name]!r}",
                ) from e
        return overrides

    def load(self, config_path: str | Path | None = None) -> GlossaryConfig:
        """Load and validate the effective configuration.

        Args:
            config_path: Explicit config file. When given, it replaces the
                project-level file and must exist.

        Returns:
            Validated GlossaryConfig

        Raises:
            FileNotFoundError: If config_path does not exist
            ConfigError: If a file is malformed or values are invalid
        """
        merged: dict[str, Any] = dict(DEFAULT_GLOSSARY_CONFIG)
        sources: list[Path] = []

        user_file = self.find_config_file(
            Path.home() / USER_CONFIG_DIRNAME, "config"
        )
        if user_file is not None:
            sources.append(user_file)

        if config_path is not None:
            sources.append(Path(config_path))
        else:
            project_file = self.find_config_file(
                self.project_dir, PROJECT_CONFIG_STEM
            )
            if project_file is not None:
                sources.append(project_file)

        for source in sources:
            logger.debug(f"Loading configuration from {source}")
            merged.update(self.parse_yaml(source))

        merged.update(self.env_overrides())

        try:
            return GlossaryConfig(**merged)
        except PydanticValidationError as e:
            raise ConfigError(
                "glossary_config",
                f"Invalid configuration:\n{_format_validation_errors(e)}",
            ) from e


def load_config(config_path: str | Path | None = None) -> GlossaryConfig:
    """Load configuration with the default environment and working directory."""
    return ConfigLoader().load(config_path)
