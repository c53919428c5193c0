from dataclasses import dataclass
from typing import Optional


@dataclass
class CLIConfig:
    """
    Configuration for CLI operations.

    Attributes:
        config_file: Path to the YAML file declaring settings and pipelines
        output_dir: Directory the generated overlay is written to
        prefix: Prefix for generated workflow filenames
        check: Whether to check every pipeline against the repository first
        repository: Repository used by the check, defaults to the current directory
        as_json: Force JSON output regardless of the config file
    """

    config_file: str
    output_dir: str = "."
    prefix: str = ""
    check: bool = False
    repository: Optional[str] = None
    as_json: bool = False
