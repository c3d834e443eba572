"""Configuration loading and default locations."""

from .config import MODE_CHOICES, Config
from .paths import default_config_path, default_log_file

__all__ = ["Config", "MODE_CHOICES", "default_config_path", "default_log_file"]
