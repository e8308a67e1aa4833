"""
TOML load/store for pydantic records.

Files are written with parent directories created on demand. Reading a
missing file through `load_path` writes and returns the default record.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

import toml
from pydantic import BaseModel, ValidationError

from .errors import StoreError


M = TypeVar("M", bound=BaseModel)

logger = logging.getLogger(__name__)


def dumps(record: BaseModel) -> str:
    # TOML has no null, so unset optionals are left out
    return toml.dumps(record.model_dump(mode="json", exclude_none=True))


def read_path(path: Path, model: type[M]) -> M:
    """Parse an existing TOML file into *model*."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = toml.load(f)
        return model.model_validate(data)
    except (UnicodeDecodeError, toml.TomlDecodeError, ValidationError) as exc:
        raise StoreError(path, exc) from exc


def store_path(path: Path, record: BaseModel) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(dumps(record))
    logger.debug("wrote %s", path)


def load_path(path: Path, model: type[M], default_factory: Callable[[], M]) -> M:
    """Read *path*, or create it from *default_factory* when it does not exist."""
    if path.exists():
        return read_path(path, model)
    record = default_factory()
    store_path(path, record)
    logger.info("created default config file %s", path)
    return record
