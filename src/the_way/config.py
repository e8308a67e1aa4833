"""
The configuration record and its lifecycle.

`ConfigManager` resolves the active config file, reads or creates it, makes
sure the database and theme directories exist, and writes changes back.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from pydantic import BaseModel, Field

from . import store
from .errors import ConfigError, NoDefaultCopyCommand, StoreError, with_suggestion
from .location import ENV_CONFIG_PATH, ConfigLocator
from .utils import NAME, get_default_copy_cmd


DEFAULT_THEME = "base16-ocean.dark"

LOAD_SUGGESTION = (
    "Couldn't load from the default config location, maybe you don't have access? "
    f"Try running `{NAME} config default config_file.toml`, modify the generated file "
    f"if necessary, then `export {ENV_CONFIG_PATH}=<full/path/to/config_file.toml>`"
)
STORE_SUGGESTION = (
    "The current config_file location does not seem to have write access. "
    f"Use `export {ENV_CONFIG_PATH}=<full/path/to/config_file.toml>` to set a new location"
)

logger = logging.getLogger(__name__)


class TheWayConfig(BaseModel):
    """Settings shared by the snippet database, theme engine and Gist sync"""

    theme: str = Field(description="Selected theme")
    db_dir: Path = Field(description="Directory containing the snippet database files")
    themes_dir: Path = Field(description="Directory containing theme files")
    copy_cmd: str | None = Field(
        default_factory=get_default_copy_cmd,
        description="Command used to copy snippets to the clipboard",
    )
    github_access_token: str | None = Field(
        default=None, description="Github token for the Gist API (i.e 'gist' scope set)"
    )
    gist_id: str | None = Field(default=None, description="ID of Gist used for sync")

    @classmethod
    def default(cls, data_dir: Path) -> "TheWayConfig":
        return cls(
            theme=DEFAULT_THEME,
            db_dir=data_dir / "the_way_db",
            themes_dir=data_dir / "themes",
            copy_cmd=get_default_copy_cmd(),
        )


def provision_dirs(config: TheWayConfig) -> None:
    """Create the database and themes directories if they are missing."""
    for label, directory in (("db", config.db_dir), ("themes", config.themes_dir)):
        if directory.exists():
            continue
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigError(
                f"Couldn't create {label} dir {str(directory)!r}, {exc}"
            ) from exc
        logger.info("created %s dir %s", label, directory)


def default_config_text(copy_cmd: str) -> str:
    return (
        f"theme = '{DEFAULT_THEME}'\n"
        "db_dir = 'the_way_db'\n"
        "themes_dir = 'the_way_themes'\n"
        f"copy_cmd = '{copy_cmd}'"
    )


class ConfigManager:
    """Load, store and describe the active configuration."""

    def __init__(self, locator: ConfigLocator | None = None) -> None:
        self.locator = locator or ConfigLocator()

    def default_record(self) -> TheWayConfig:
        return TheWayConfig.default(self.locator.data_dir())

    def load(self) -> TheWayConfig:
        location = self.locator.resolve()
        if location.overridden:
            try:
                config = store.read_path(location.path, TheWayConfig)
            except (OSError, StoreError) as exc:
                raise ConfigError(str(exc)) from exc
        else:
            try:
                config = store.load_path(location.path, TheWayConfig, self.default_record)
            except (OSError, StoreError) as exc:
                error = ConfigError(f"Couldn't load config from {location.path}: {exc}")
                raise with_suggestion(error, LOAD_SUGGESTION) from exc

        provision_dirs(config)
        logger.debug("loaded config from %s", location.path)
        return config

    def store(self, config: TheWayConfig) -> None:
        """Write a possibly modified config back to the active location."""
        location = self.locator.resolve()
        try:
            store.store_path(location.path, config)
        except OSError as exc:
            error = ConfigError(f"Couldn't write config to {location.path}: {exc}")
            raise with_suggestion(error, STORE_SUGGESTION) from exc

    def default_config(self, file: Path | None = None, out: TextIO | None = None) -> None:
        """Write the default configuration to *file*, or to *out* (stdout)."""
        copy_cmd = get_default_copy_cmd()
        if copy_cmd is None:
            raise NoDefaultCopyCommand()
        contents = default_config_text(copy_cmd)
        if file is not None:
            try:
                with open(file, "w", encoding="utf-8") as f:
                    f.write(contents)
            except OSError as exc:
                error = ConfigError(f"Couldn't write default config to {file}: {exc}")
                raise with_suggestion(
                    error, "Pass a path whose directory exists and is writable."
                ) from exc
            logger.info("wrote default config to %s", file)
            return
        stream = out or sys.stdout
        stream.write(contents)
        stream.flush()

    def print_config_location(self, out: TextIO | None = None) -> None:
        """Print the filename of the currently active configuration file."""
        print(self.locator.get(), file=out or sys.stdout)
