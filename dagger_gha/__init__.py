"""dagger-gha: generate GitHub Actions workflows from Dagger pipelines.

Daggerizing a CI makes its YAML configuration smaller, but the YAML still
exists and is still a pain to maintain by hand. This package generates it
from a declarative description of the pipelines. It can be used both as a
CLI tool and as a Python library.

Example:
    CLI usage:
        $ dagger-gha                          # Generate from dagger-gha.yml
        $ dagger-gha pipelines.yml --check    # Check pipelines first

    Library usage:
        from dagger_gha import Gha, Settings

        gha = Gha(Settings(runner="ubuntu-24.04"))
        gha.with_pipeline("build", "build --source=.")
        gha.on_push("build", branches=["main"])
        gha.config().export(".")
"""

from .cli import CLI, StandardCLI
from .gha import Gha
from .globals import (
    CheckError,
    ConcurrencyPolicy,
    ConfigurationError,
    DaggerGhaError,
    InvalidSecretNameError,
    PipelineNotFoundError,
    Settings,
)
from .overlay import Overlay
from .pipeline import Pipeline


# High-level generation function for library usage
def generate(config_file: str, prefix: str = "") -> Overlay:
    """Generate workflows from a pipeline declaration file.

    Args:
        config_file: Path to the YAML declaration
        prefix: Prefix for generated workflow filenames

    Returns:
        Overlay: Generated files, keyed by path relative to the repository root
    """
    from pathlib import Path
    from .cli_components import YAMLConfigLoader

    gha = YAMLConfigLoader().load(Path(config_file))
    return gha.config(prefix)


__all__ = [
    # Main generation function
    "generate",

    # Core types
    "Gha",
    "Pipeline",
    "Overlay",
    "Settings",
    "ConcurrencyPolicy",

    # Errors
    "DaggerGhaError",
    "ConfigurationError",
    "InvalidSecretNameError",
    "PipelineNotFoundError",
    "CheckError",

    # CLI interface
    "CLI",
    "StandardCLI",
]
