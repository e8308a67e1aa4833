"""
Resolution of the active configuration file path.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_path, user_data_path

from .errors import ConfigError, Homeless
from .utils import NAME


ENV_CONFIG_PATH = "THE_WAY_CONFIG"
DEFAULT_CONFIG_FILE = "default-config.toml"

logger = logging.getLogger(__name__)


def _project_path(lookup: Callable[..., Path]) -> Path:
    try:
        path = lookup(NAME, appauthor=False)
    except (KeyError, RuntimeError) as exc:
        raise Homeless() from exc
    if path.parts and path.parts[0].startswith("~"):
        # platformdirs hands back "~/..." untouched when no home is known
        raise Homeless()
    return path


def default_config_file() -> Path:
    """Platform-standard config file path (XDG on Linux)."""
    return _project_path(user_config_path) / DEFAULT_CONFIG_FILE


def default_data_dir() -> Path:
    """Platform-standard per-user data directory."""
    return _project_path(user_data_path)


@dataclass(frozen=True)
class ConfigLocation:
    """A resolved config file path and whether it came from the override."""

    path: Path
    overridden: bool


class ConfigLocator:
    """
    Decide which file holds the active configuration.

    Precedence:
    1) THE_WAY_CONFIG, which must name an existing file
    2) the platform default path, which may not exist yet
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        *,
        default_path: Callable[[], Path] = default_config_file,
        data_dir: Callable[[], Path] = default_data_dir,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._default_path = default_path
        self._data_dir = data_dir

    @property
    def override(self) -> str | None:
        raw = self._environ.get(ENV_CONFIG_PATH)
        if raw is None or not raw.strip():
            return None
        return raw

    def resolve(self) -> ConfigLocation:
        file = self.override
        if file is None:
            path = self._default_path()
            logger.debug("using default config location %s", path)
            return ConfigLocation(path=path, overridden=False)

        path = Path(file)
        if not path.exists():
            raise ConfigError(
                f"No such file {file}",
                suggestion=(
                    f"Use `{NAME} config default {file}` "
                    "to write out the default configuration"
                ),
            )
        logger.debug("using %s from %s", path, ENV_CONFIG_PATH)
        return ConfigLocation(path=path, overridden=True)

    def get(self) -> Path:
        """Return the active config file path."""
        return self.resolve().path

    def data_dir(self) -> Path:
        return self._data_dir()
