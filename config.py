"""Configuration management for Account Book.

Reads configuration from ~/.config/account-book.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
import tomllib
import tomli_w

DEFAULT_CATEGORY_NAME = "其他"


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    log_level: str
    log_dir: Path
    categories_file: Path
    default_category_name: str = DEFAULT_CATEGORY_NAME

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "account-book"
        return cls(
            base_dir=base_dir,
            log_level="INFO",
            log_dir=base_dir / "logs",
            categories_file=get_seed_categories_path(),
            default_category_name=DEFAULT_CATEGORY_NAME,
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "account-book.toml"


def get_seed_categories_path() -> Path:
    """Get the path to the bundled category seed file.

    This is always relative to the code location, not configurable.
    """
    return Path(__file__).parent / "seed" / "categories.json"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    # Parse with defaults for any missing values
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "account-book"))

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    categories_config = data.get("categories", {})
    categories_file = Path(
        categories_config.get("file", get_seed_categories_path())
    )
    default_category_name = categories_config.get(
        "default_name", DEFAULT_CATEGORY_NAME
    )

    return Config(
        base_dir=base_dir,
        log_level=log_level,
        log_dir=log_dir,
        categories_file=categories_file,
        default_category_name=default_category_name,
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "categories": {
            "file": str(config.categories_file),
            "default_name": config.default_category_name,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
