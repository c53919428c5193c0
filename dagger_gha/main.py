import logging
import sys

import typer
from rich.logging import RichHandler

from dagger_gha.cli import CLI, StandardCLI
from dagger_gha.globals.cli_config import CLIConfig

app = typer.Typer()


@app.callback(invoke_without_command=True, context_settings={"allow_interspersed_args": True})
def main(
    config_file: str = typer.Argument(
        default="dagger-gha.yml", help="Path to the YAML file declaring pipelines"
    ),
    output: str = typer.Option(default=".", help="Directory to write the .github overlay into"),
    prefix: str = typer.Option(default="", help="Prefix for generated workflow filenames"),
    check: bool = typer.Option(
        default=False, help="Check every pipeline against the repository before generating"
    ),
    repository: str = typer.Option(
        default=None, help="Repository used by --check (defaults to the current directory)"
    ),
    json: bool = typer.Option(default=False, help="Encode workflows as JSON (also valid YAML)"),
    verbose: bool = typer.Option(default=False, help="Log debug information"),
):
    """Main CLI entry point for dagger-gha.

    Generates GitHub Actions workflows running Dagger pipelines, one file
    per pipeline under .github/workflows/.

    Examples:
        Generate from dagger-gha.yml into the current repository:
            $ dagger-gha

        Check the pipelines first:
            $ dagger-gha ci/pipelines.yml --check

        Write JSON workflows with a filename prefix:
            $ dagger-gha --json --prefix dagger-
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )

    config = CLIConfig(
        config_file=config_file,
        output_dir=output,
        prefix=prefix,
        check=check,
        repository=repository,
        as_json=json,
    )

    cli: CLI = StandardCLI(config)
    exit_code = cli.run()
    sys.exit(exit_code)
