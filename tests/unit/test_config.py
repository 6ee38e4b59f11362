# ABOUTME: Unit tests for configuration loading, saving, and library root resolution.
# ABOUTME: Uses temporary config files; never touches the real ~/.gihon directory.

from pathlib import Path

import pytest

from gihon.config import (
    DEFAULT_LIBRARY_ROOT,
    AppConfig,
    ConfigManager,
    resolve_library_root,
)
from gihon.errors import SerializationError


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        manager = ConfigManager(tmp_path / "config.json")
        assert manager.load() == AppConfig()

    def test_save_then_load(self, tmp_path: Path) -> None:
        manager = ConfigManager(tmp_path / "nested" / "config.json")
        manager.save(AppConfig(library_root="/srv/comics"))
        assert manager.load() == AppConfig(library_root="/srv/comics")

    def test_saved_file_is_pretty_json(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        ConfigManager(path).save(AppConfig(library_root="/x"))
        assert path.read_text() == '{\n  "library_root": "/x"\n}'

    def test_empty_object_is_valid(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{}")
        assert ConfigManager(path).load() == AppConfig()

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{broken")
        with pytest.raises(SerializationError):
            ConfigManager(path).load()

    def test_wrong_type_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text('{"library_root": 42}')
        with pytest.raises(SerializationError):
            ConfigManager(path).load()


class TestResolveLibraryRoot:
    """Tests for resolve_library_root precedence."""

    def test_explicit_path_wins(self, tmp_path: Path) -> None:
        config = AppConfig(library_root="/from/config")
        assert resolve_library_root(tmp_path, config) == tmp_path

    def test_config_over_default(self) -> None:
        config = AppConfig(library_root="/from/config")
        assert resolve_library_root(None, config) == Path("/from/config")

    def test_default(self) -> None:
        assert resolve_library_root(None, AppConfig()) == DEFAULT_LIBRARY_ROOT
        assert DEFAULT_LIBRARY_ROOT.name == "comics"
