"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``SOCIALTRACK_*`` prefix (``SOCIALTRACK_GRAPH__DATA_FILE``)
  3. TOML file    — ``socialtrack.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from socialtrack.config.discovery import find_config
from socialtrack.config.models import GraphConfig, ReportConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``socialtrack.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class SocialTrackSettings(BaseSettings):
    """Settings for the socialtrack CLI, frozen after construction.

    Attributes:
        config_path: The TOML file that was applied, if any.
        data_file: Data file resolved against the config file's directory
            (see :meth:`resolved_data_file`).
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SOCIALTRACK_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    graph: GraphConfig = Field(default_factory=GraphConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

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
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> SocialTrackSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* if it names a file, otherwise walks
        up from *start* (default: cwd) for ``socialtrack.toml``. Values that
        fail validation raise :class:`click.ClickException`.
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
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            source = toml_path or "environment"
            msg = f"Invalid configuration ({source}): {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.toml_path = None

    def resolved_data_file(self) -> Path | None:
        """``graph.data_file`` made absolute relative to the config file."""
        if not self.graph.data_file:
            return None
        p = Path(self.graph.data_file).expanduser()
        if not p.is_absolute() and self.config_path is not None:
            p = self.config_path.parent / p
        return p
