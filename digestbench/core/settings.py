"""
Pydantic Settings for digestbench configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigValidationError
from .models.config import (
    DigestBenchConfig,
    DispatchConfig,
    LoggingConfig,
    OutputConfig,
    TextConfig,
)

CONFIG_DIR_NAME = ".digestbench"
CONFIG_FILE_NAME = "config.toml"


def _get_logger():
    from ..services.logging import NullLogger
    from .di import resolve_or_default
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)


def _describe(error: Any) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error.get('msg', 'invalid')}"


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .digestbench/config.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.digestbench] section also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if "digestbench" in data.get("tool", {}):
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                _get_logger().debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                _get_logger().debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir)

        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            if path.name == "pyproject.toml":
                data = data.get("tool", {}).get("digestbench", {})

            self._data = data
            self._data["_config_file"] = str(path)

        except tomllib.TOMLDecodeError as e:
            _get_logger().warning("Failed to parse config file %s: %s", path, e)
            self._data["_config_error"] = f"Failed to parse config file: {e}"
        except OSError as e:
            _get_logger().warning("Failed to read config file %s: %s", path, e)
            self._data["_config_error"] = f"Failed to read config file: {e}"

        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        return data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return TOML data for settings initialization, minus bookkeeping keys."""
        return {k: v for k, v in self._load_toml().items() if not k.startswith("_")}


class DigestBenchSettings(BaseSettings):
    """digestbench configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (DIGESTBENCH_<section>__<field>)
    3. TOML config file (.digestbench/config.toml or pyproject.toml [tool.digestbench])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "DIGESTBENCH_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    dispatch: DispatchConfig = DispatchConfig()
    output: OutputConfig = OutputConfig()
    text: TextConfig = TextConfig()
    logging: LoggingConfig = LoggingConfig()

    # Internal fields (not from config)
    _config_file: str | None = None
    _config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading.

        The config path cannot be threaded through here, so load_settings()
        sets it on module-level variables for the duration of the call.
        """
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    @property
    def config_file(self) -> str | None:
        return self._config_file

    @property
    def config_error(self) -> str | None:
        return self._config_error

    def to_config(self) -> DigestBenchConfig:
        """Convert settings to the plain configuration model."""
        return DigestBenchConfig(
            dispatch=self.dispatch,
            output=self.output,
            text=self.text,
            logging=self.logging,
        )


# Module-level variables for passing to settings_customise_sources
_current_config_path: Path | None = None
_current_start_dir: str | None = None


def load_settings(config_path: Path | None = None, start_dir: str | None = None) -> DigestBenchSettings:
    """Load digestbench settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        DigestBenchSettings instance with all sources merged
    """
    global _current_config_path, _current_start_dir

    _current_config_path = config_path
    _current_start_dir = start_dir

    try:
        try:
            settings = DigestBenchSettings()
        except ValidationError as e:
            raise ConfigValidationError(
                f"Invalid configuration: {e.error_count()} error(s)",
                context={"errors": "; ".join(_describe(err) for err in e.errors())},
                cause=e,
            ) from e

        toml_data = TomlConfigSource(DigestBenchSettings, config_path, start_dir)._load_toml()
        if "_config_file" in toml_data:
            settings._config_file = toml_data["_config_file"]
        if "_config_error" in toml_data:
            settings._config_error = toml_data["_config_error"]

        return settings
    finally:
        _current_config_path = None
        _current_start_dir = None
