"""Unified settings: init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: overrides passed by the host application
  2. Env vars: ``CLEANCORE_*`` prefix, ``__`` for nested sections
  3. TOML file: ``cleancore.toml`` discovered via walk-up
  4. Code defaults: baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`cleancore.config.discovery`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from cleancore.config.discovery import find_config, read_toml
from cleancore.config.logging import configure_logging
from cleancore.config.models import LoggingConfig, ValidationConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``cleancore.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class CoreSettings(BaseSettings):
    """Settings a host application loads once and hands to cleancore.

    Attributes:
        config_path: The TOML file that was merged, or None.
        validation: Options for the request validator.
        logging: Options for :func:`configure_logging`.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CLEANCORE_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_path(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> CoreSettings:
        """Construct settings for a host application.

        Uses the explicit *config_path* when given, otherwise discovers
        ``cleancore.toml`` by walking up from *start*. *overrides* win over
        every other source.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None

    def configure_logging(self) -> None:
        """Apply the ``[logging]`` section via :func:`configure_logging`."""
        configure_logging(verbose=self.logging.verbose, log_json=self.logging.log_json)
