from pathlib import Path

import pytest

from the_way import store
from the_way.config import TheWayConfig
from the_way.errors import StoreError
from the_way.utils import get_default_copy_cmd


def _record(tmp_path: Path, **overrides) -> TheWayConfig:
    fields = {
        "theme": "base16-ocean.dark",
        "db_dir": tmp_path / "db",
        "themes_dir": tmp_path / "themes",
        "copy_cmd": "pbcopy",
    }
    fields.update(overrides)
    return TheWayConfig(**fields)


def test_dumps_leaves_out_unset_optionals(tmp_path: Path) -> None:
    text = store.dumps(_record(tmp_path, copy_cmd=None))

    assert 'theme = "base16-ocean.dark"' in text
    assert "copy_cmd" not in text
    assert "github_access_token" not in text
    assert "gist_id" not in text


def test_missing_copy_cmd_gets_platform_default(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("theme = 'x'\ndb_dir = '/a'\nthemes_dir = '/b'\n")

    record = store.read_path(path, TheWayConfig)

    assert record.copy_cmd == get_default_copy_cmd()
    assert record.db_dir == Path("/a")


def test_read_path_wraps_parse_errors(tmp_path: Path) -> None:
    path = tmp_path / "broken.toml"
    path.write_text("theme = \n")

    with pytest.raises(StoreError) as excinfo:
        store.read_path(path, TheWayConfig)

    assert excinfo.value.path == path
    assert excinfo.value.__cause__ is excinfo.value.cause


def test_read_path_wraps_missing_fields(tmp_path: Path) -> None:
    path = tmp_path / "partial.toml"
    path.write_text("theme = 'x'\n")

    with pytest.raises(StoreError, match="Couldn't parse config file"):
        store.read_path(path, TheWayConfig)


def test_load_path_creates_missing_file(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.toml"
    default = _record(tmp_path)

    record = store.load_path(path, TheWayConfig, lambda: default)

    assert record == default
    assert path.exists()
    assert store.read_path(path, TheWayConfig) == default


def test_load_path_does_not_overwrite_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    existing = _record(tmp_path, theme="Solarized (dark)", gist_id="abc123")
    store.store_path(path, existing)

    record = store.load_path(path, TheWayConfig, lambda: _record(tmp_path))

    assert record == existing


def test_read_path_wraps_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "binary.toml"
    path.write_bytes(b"theme = '\xff\xfe'\n")

    with pytest.raises(StoreError) as excinfo:
        store.read_path(path, TheWayConfig)

    assert isinstance(excinfo.value.cause, UnicodeDecodeError)
