import logging
import shlex
import shutil
import subprocess
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from dagger_gha.building.identifiers import validate_secret_names, workflow_filename
from dagger_gha.building.workflow_builder import DefaultWorkflowBuilder, WorkflowBuilder
from dagger_gha.domain_model import ast
from dagger_gha.domain_model.triggers import Triggers
from dagger_gha.globals.errors import CheckError
from dagger_gha.globals.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_RUNTIME = "dagger"


@dataclass
class Pipeline:
    """
    A Dagger pipeline to be called from a GitHub Actions workflow.

    Attributes:
        name: Pipeline name, also the workflow name and the source of its
            filename and job ID
        command: The Dagger command to execute, e.g. 'build --source=.'
        settings: Snapshot of the global settings with per-pipeline overrides
        module: The Dagger module to load, or None for the repository's own
        secrets: GitHub secrets injected as env variables of the same name
        sparse_checkout: Only check out these paths, or everything if empty
        lfs: Check out Git LFS objects
        triggers: Events that run the pipeline
    """

    name: str
    command: str
    settings: Settings = field(default_factory=Settings)
    module: Optional[str] = None
    secrets: List[str] = field(default_factory=list)
    sparse_checkout: List[str] = field(default_factory=list)
    lfs: bool = False
    triggers: Triggers = field(default_factory=Triggers)

    def __post_init__(self) -> None:
        validate_secret_names(self.secrets)

    @property
    def filename(self) -> str:
        return workflow_filename(self.name)

    def as_workflow(self, builder: Optional[WorkflowBuilder] = None) -> ast.Workflow:
        """Generate a GitHub Actions workflow from this pipeline definition.

        Raises:
            ConfigurationError: The pull request concurrency policy is unknown.
        """
        return (builder or DefaultWorkflowBuilder()).build(self)

    def check(self, repository: Union[str, Path], runtime: str = DEFAULT_RUNTIME) -> None:
        """
        Check that the command resolves against the given repository.

        Runs `<runtime> call [-m module] <command> --help` in a throwaway copy
        of the repository. This is best-effort: it only proves the command
        and module can be loaded, not that the pipeline succeeds.

        Args:
            repository: Directory standing in for the target repository.
            runtime: Dagger CLI executable.

        Raises:
            InvalidSecretNameError: A secret name is invalid.
            CheckError: The check could not run or the call failed; the error
                carries the output verbatim.
        """
        validate_secret_names(self.secrets)

        args = [runtime, "call"]
        if self.module:
            args += ["-m", self.module]
        try:
            args += shlex.split(self.command) + ["--help"]
        except ValueError as e:
            raise CheckError(self.name, f"cannot parse command {self.command!r}: {e}") from e

        with tempfile.TemporaryDirectory() as temp_dir:
            workdir = Path(temp_dir) / "repository"
            logger.debug(f"Checking pipeline '{self.name}': {shlex.join(args)}")
            try:
                shutil.copytree(repository, workdir, symlinks=True)
                subprocess.run(args, cwd=workdir, capture_output=True, text=True, check=True)
            except subprocess.CalledProcessError as e:
                raise CheckError(self.name, e.stderr or e.stdout or "", e.returncode) from e
            except OSError as e:
                # Missing repository or runtime binary
                raise CheckError(self.name, str(e)) from e
