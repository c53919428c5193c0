from .cli_config import CLIConfig
from .errors import (
    CheckError,
    ConfigurationError,
    DaggerGhaError,
    InvalidSecretNameError,
    PipelineNotFoundError,
)
from .settings import ConcurrencyPolicy, Settings

__all__ = [
    "CLIConfig",
    "CheckError",
    "ConcurrencyPolicy",
    "ConfigurationError",
    "DaggerGhaError",
    "InvalidSecretNameError",
    "PipelineNotFoundError",
    "Settings",
]
