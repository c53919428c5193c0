"""CLI components for loading pipeline declarations and formatting output."""

from .config_loader import ConfigLoader, YAMLConfigLoader
from .output_formatter import ColoredFormatter, OutputFormatter

__all__ = [
    "ColoredFormatter",
    "ConfigLoader",
    "OutputFormatter",
    "YAMLConfigLoader",
]
