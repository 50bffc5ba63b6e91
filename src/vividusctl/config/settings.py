"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``VIVIDUSCTL_*`` prefix
  3. TOML file    — ``vividusctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Project properties (``-P key=value``) are kept apart from the TOML
``[properties]`` table and layered over it, so a single ``-P`` never wipes
the rest of the table.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from vividusctl.config.discovery import find_config
from vividusctl.config.models import (
    JavaConfig,
    ProjectConfig,
    StatisticsConfig,
    StoriesOptions,
)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``vividusctl.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class VividusSettings(BaseSettings):
    """Unified settings for the entire vividusctl CLI.

    Stored on the :class:`AppContext` at the CLI root level.

    Attributes:
        project_root: Directory holding ``vividusctl.toml`` (or CWD if no
            config found). Relative paths in the config resolve against it.
        config_path: Config file in use, or None when running on defaults.
        cli_properties: ``-P`` project properties, layered over ``properties``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "VIVIDUSCTL_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    cli_properties: dict[str, str] = Field(default_factory=dict)

    # --- TOML sections ---
    project: ProjectConfig = Field(default_factory=ProjectConfig)
    java: JavaConfig = Field(default_factory=JavaConfig)
    stories: StoriesOptions = Field(default_factory=StoriesOptions)
    statistics: StatisticsConfig = Field(default_factory=StatisticsConfig)
    properties: dict[str, str] = Field(default_factory=dict)

    @property
    def project_properties(self) -> dict[str, str]:
        """TOML ``[properties]`` overridden by ``-P`` values."""
        return {**self.properties, **self.cli_properties}

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
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> VividusSettings:
        """Construct settings from CLI invocation.

        Discovers ``vividusctl.toml`` via walk-up (or explicit *config_path*),
        resolves *project_root* from the config file's parent directory,
        and merges CLI flags as highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(project_root)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None
