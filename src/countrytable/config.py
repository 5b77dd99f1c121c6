"""Configuration management for countrytable."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import toml

from countrytable.ui.constants import PAGE_SIZE, SCROLL_DEBOUNCE_MS

ALLOWED_THEMES = ["textual-dark", "textual-light", "nord", "gruvbox", "dracula", "tokyo-night"]
ALLOWED_LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
CONFIG_FILE_PATH = Path.home() / ".countrytable.config"
DEFAULT_ENDPOINT_URL = "https://restcountries.com/v2/all?fields=name,population,area,gini"
DEFAULT_LOG_FILE = str(Path.home() / ".countrytable.log")


@dataclass
class CountryTableConfig:
    """Country table configuration settings."""

    endpoint_url: str = DEFAULT_ENDPOINT_URL
    timeout: float = 10.0
    page_size: int = PAGE_SIZE
    scroll_debounce_ms: int = SCROLL_DEBOUNCE_MS
    theme: str = "textual-dark"
    log_file: Optional[str] = DEFAULT_LOG_FILE
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self):
        """Validate configuration settings."""
        parsed = urlparse(self.endpoint_url or "")
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"Invalid endpoint_url '{self.endpoint_url}'. Expected an http(s) URL")

        if self.timeout <= 0:
            raise ValueError(f"Invalid timeout {self.timeout}. Must be greater than 0")

        if self.page_size < 1:
            raise ValueError(f"Invalid page_size {self.page_size}. Must be at least 1")

        if self.scroll_debounce_ms < 0:
            raise ValueError(f"Invalid scroll_debounce_ms {self.scroll_debounce_ms}. Must not be negative")

        if self.theme not in ALLOWED_THEMES:
            raise ValueError(f"Invalid theme '{self.theme}'. Allowed themes: {', '.join(ALLOWED_THEMES)}")

        if self.log_level.upper() not in ALLOWED_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level '{self.log_level}'. Allowed levels: {', '.join(ALLOWED_LOG_LEVELS)}"
            )


def load_config(config_file_path: Optional[str] = None) -> CountryTableConfig:
    """Load configuration from file."""
    if config_file_path:
        config_path = Path(config_file_path)
    else:
        config_path = CONFIG_FILE_PATH

    if not config_path.exists():
        return CountryTableConfig()

    try:
        with open(config_path, "r") as f:
            config_data = toml.load(f)

        # Extract only the fields that belong to CountryTableConfig
        valid_fields = {field.name for field in CountryTableConfig.__dataclass_fields__.values()}

        filtered_config = {key: value for key, value in config_data.items() if key in valid_fields}

        return CountryTableConfig(**filtered_config)

    except Exception as e:
        raise ValueError(f"Error loading config file {config_path}: {e}")


def merge_config_with_cli_args(config: CountryTableConfig, **cli_args) -> CountryTableConfig:
    """Merge configuration with CLI arguments, giving priority to CLI args."""
    merged_config = {}

    for field_name in CountryTableConfig.__dataclass_fields__:
        merged_config[field_name] = getattr(config, field_name)

    # Override with CLI args where provided (not None)
    for key, value in cli_args.items():
        if value is not None:
            merged_config[key] = value

    return CountryTableConfig(**merged_config)
