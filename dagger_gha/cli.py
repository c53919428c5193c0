from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from rich.progress import Progress, SpinnerColumn, TextColumn

from dagger_gha.cli_components.config_loader import ConfigLoader, YAMLConfigLoader
from dagger_gha.cli_components.output_formatter import ColoredFormatter, OutputFormatter
from dagger_gha.gha import Gha
from dagger_gha.globals.cli_config import CLIConfig
from dagger_gha.globals.errors import DaggerGhaError


class CLI(ABC):
    """Interface for CLI implementations."""

    @abstractmethod
    def run(self) -> int:
        """
        Run the CLI and return exit code.

        Returns:
            int: Exit code (0=success, 1=errors)
        """
        pass


class StandardCLI(CLI):
    """
    Standard CLI implementation with separated concerns.

    Coordinates generation using pluggable components:
    - ConfigLoader: reads the pipeline declaration file
    - OutputFormatter: handles display formatting
    """

    def __init__(
        self,
        config: CLIConfig,
        formatter: Optional[OutputFormatter] = None,
        loader: Optional[ConfigLoader] = None,
    ):
        """
        Initialize CLI with configuration and optional component overrides.

        Args:
            config: CLI configuration (config file, output directory, check mode)
            formatter: Output formatter (defaults to ColoredFormatter)
            loader: Declaration loader (defaults to YAMLConfigLoader)
        """
        self.config = config
        self.formatter = formatter or ColoredFormatter()
        self.loader = loader or YAMLConfigLoader()

    def run(self) -> int:
        """Main CLI execution method.

        Loads the declaration file, optionally checks every pipeline against
        the repository, then renders and writes the workflow overlay. Nothing
        is written unless every step before it succeeded.

        Returns:
            int: Exit code indicating results:
                - 0: Workflows generated
                - 1: Configuration or check errors
        """
        try:
            gha = self.loader.load(
                Path(self.config.config_file), as_json=self.config.as_json or None
            )
            if self.config.check and not self._run_check(gha):
                return 1
            overlay = gha.config(self.config.prefix)
        except DaggerGhaError as e:
            print(self.formatter.format_error(e))
            print(self.formatter.format_summary(0, 1))
            return 1

        written = overlay.export(Path(self.config.output_dir))
        for file in written:
            print(self.formatter.format_written_file(file))
        print(self.formatter.format_summary(len(written), 0))
        return 0

    def _run_check(self, gha: Gha) -> bool:
        """Check all pipelines and report failures. Returns True if all passed."""
        repository = Path(self.config.repository) if self.config.repository else Path.cwd()

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(
                description=f"Checking {len(gha.pipelines)} pipelines...", total=None
            )
            failures = gha.check(repository)

        if failures:
            for failure in failures:
                print(self.formatter.format_check_failure(failure))
            print(self.formatter.format_summary(0, len(failures)))
            return False

        print(self.formatter.format_check_passed(len(gha.pipelines)))
        return True
