# ABOUTME: Application configuration and default locations for the Gihon data directory.
# ABOUTME: Loads and saves config.json and resolves which library root to use.

import json
from dataclasses import asdict, dataclass
from pathlib import Path

from gihon.errors import SerializationError, StorageIOError

DEFAULT_DATA_DIR = Path.home() / ".gihon"
DEFAULT_LIBRARY_ROOT = DEFAULT_DATA_DIR / "comics"
DEFAULT_CONFIG_PATH = DEFAULT_DATA_DIR / "config.json"


@dataclass
class AppConfig:
    """User settings persisted in config.json."""

    library_root: str | None = None


class ConfigManager:
    """Reads and writes AppConfig as pretty-printed JSON at a fixed path."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or DEFAULT_CONFIG_PATH

    def load(self) -> AppConfig:
        """Load the configuration, returning defaults if the file is absent.

        Raises:
            SerializationError: If the file is not a JSON object of settings.
            StorageIOError: If the file exists but cannot be read.
        """
        if not self.config_path.exists():
            return AppConfig()

        try:
            text = self.config_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageIOError(f"Failed to read config {self.config_path}: {exc}") from exc

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SerializationError(f"Failed to parse config {self.config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise SerializationError(f"Config {self.config_path} must contain a JSON object")

        library_root = data.get("library_root")
        if library_root is not None and not isinstance(library_root, str):
            raise SerializationError("Config field 'library_root' must be a string")
        return AppConfig(library_root=library_root)

    def save(self, config: AppConfig) -> None:
        """Write the configuration, creating the parent directory if needed."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            self.config_path.write_text(
                json.dumps(asdict(config), indent=2), encoding="utf-8",
            )
        except OSError as exc:
            raise StorageIOError(f"Failed to write config {self.config_path}: {exc}") from exc


def resolve_library_root(explicit: Path | None, config: AppConfig) -> Path:
    """Pick the library root: explicit path, then config, then the default."""
    if explicit is not None:
        return explicit
    if config.library_root:
        return Path(config.library_root).expanduser()
    return DEFAULT_LIBRARY_ROOT
