"""Configuration loading and saving.

Config file location: ~/.config/rofi-bookmarks/config.toml

Schema:
    [source]
    bookmarks_file = "~/Documents/obsidian-vault/Bookmarks.md"

The config file is optional. Without it the default bookmarks file is used.
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomli_w

CONFIG_DIR = Path.home() / ".config" / "rofi-bookmarks"
CONFIG_FILE = CONFIG_DIR / "config.toml"

DEFAULT_BOOKMARKS_FILE = "~/Documents/obsidian-vault/Bookmarks.md"


@dataclass
class AppConfig:
    bookmarks_file: Path = Path(DEFAULT_BOOKMARKS_FILE)

    @property
    def source_path(self) -> Path:
        return resolve_bookmarks_path(self.bookmarks_file)


def resolve_bookmarks_path(value: str | Path) -> Path:
    """Expand a leading ~ to the user's home directory.

    Path.expanduser also resolves ~user/... to that user's home. A ~ anywhere
    but the start of the path is left alone.
    """
    return Path(value).expanduser()


def load_config(config_path: Path = CONFIG_FILE) -> AppConfig:
    """Load and validate config from TOML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    source_data = data.get("source", {})
    if not isinstance(source_data, dict):
        raise ValueError("[source] must be a table")

    bookmarks_file = source_data.get("bookmarks_file", DEFAULT_BOOKMARKS_FILE)
    if not isinstance(bookmarks_file, str) or not bookmarks_file:
        raise ValueError("source.bookmarks_file must be a non-empty string")

    return AppConfig(bookmarks_file=Path(bookmarks_file))


def save_config(config: AppConfig, config_path: Path = CONFIG_FILE) -> None:
    """Write config to TOML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "source": {
            "bookmarks_file": str(config.bookmarks_file),
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)


def config_exists(config_path: Path = CONFIG_FILE) -> bool:
    """Check if config file exists."""
    return config_path.exists()
