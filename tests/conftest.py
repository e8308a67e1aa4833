from pathlib import Path

import pytest

from the_way.config import ConfigManager
from the_way.location import ConfigLocator


class LocatorFactory:
    """Builds locators bound to a temporary home instead of the real one."""

    def __init__(self, root: Path) -> None:
        self.default_path = root / "config" / "the-way" / "default-config.toml"
        self.data_dir = root / "data" / "the-way"

    def __call__(self, environ: dict[str, str] | None = None) -> ConfigLocator:
        return ConfigLocator(
            environ or {},
            default_path=lambda: self.default_path,
            data_dir=lambda: self.data_dir,
        )


@pytest.fixture
def locators(tmp_path: Path) -> LocatorFactory:
    return LocatorFactory(tmp_path)


@pytest.fixture
def manager(locators: LocatorFactory) -> ConfigManager:
    return ConfigManager(locators())
