import copy
import dataclasses
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from dagger_gha.building.identifiers import validate_permissions
from dagger_gha.globals.errors import CheckError, PipelineNotFoundError
from dagger_gha.globals.settings import Settings
from dagger_gha.overlay import Overlay
from dagger_gha.pipeline import DEFAULT_RUNTIME, Pipeline

logger = logging.getLogger(__name__)

WORKFLOWS_DIR = ".github/workflows"

Names = Union[str, Iterable[str]]


class Gha:
    """
    Generate GitHub Actions workflows from Dagger pipelines.

    Pipelines are registered by name, triggers are attached to them by name,
    and `config` renders one workflow file per pipeline.

    Example:
        gha = Gha(Settings(dagger_version="v0.13.0"))
        gha.with_pipeline("build", "build --source=.")
        gha.on_push("build", branches=["main"])
        gha.config().export(".")
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()
        validate_permissions(self.settings.permissions)
        self.pipelines: List[Pipeline] = []

    def with_pipeline(
        self,
        name: str,
        command: str,
        module: Optional[str] = None,
        runner: Optional[str] = None,
        secrets: Optional[List[str]] = None,
        sparse_checkout: Optional[List[str]] = None,
        lfs: bool = False,
        no_dispatch: bool = False,
        pull_request_concurrency: Optional[str] = None,
        timeout_minutes: Optional[int] = None,
        permissions: Optional[Dict[str, str]] = None,
    ) -> Pipeline:
        """
        Register a pipeline.

        Unless `no_dispatch` is set, the pipeline can be triggered manually
        from the start. Empty overrides fall back to the global settings.

        Raises:
            InvalidSecretNameError: A secret name is not alphanumeric/underscore.
            ConfigurationError: A permission scope or level is invalid.
        """
        validate_permissions(permissions)
        overrides = {
            "runner": runner,
            "pull_request_concurrency": pull_request_concurrency,
            "timeout_minutes": timeout_minutes,
            "permissions": permissions,
        }
        settings = dataclasses.replace(
            copy.deepcopy(self.settings),
            **{k: v for k, v in overrides.items() if v},
        )
        pipeline = Pipeline(
            name=name,
            command=command,
            settings=settings,
            module=module or None,
            secrets=list(secrets or []),
            sparse_checkout=list(sparse_checkout or []),
            lfs=lfs,
        )
        if not no_dispatch:
            pipeline.triggers.add_dispatch()

        if any(p.name == name for p in self.pipelines):
            logger.warning(f"Pipeline '{name}' is already registered; lookups return the first one")
        self.pipelines.append(pipeline)
        logger.debug(f"Registered pipeline '{name}': {command}")
        return pipeline

    def get_pipeline(self, name: str) -> Pipeline:
        """Return the first pipeline registered under `name`.

        Raises:
            PipelineNotFoundError: No pipeline has this name.
        """
        for pipeline in self.pipelines:
            if pipeline.name == name:
                return pipeline
        raise PipelineNotFoundError(name)

    def on_push(
        self,
        names: Names,
        branches: Optional[List[str]] = None,
        tags: Optional[List[str]] = None,
        paths: Optional[List[str]] = None,
    ) -> "Gha":
        """Run the named pipelines on git push, filtered by branch, tag or path."""
        for pipeline in self._resolve(names):
            pipeline.triggers.add_push(branches=branches, tags=tags, paths=paths)
        return self

    def on_pull_request(
        self,
        names: Names,
        types: Optional[List[str]] = None,
        branches: Optional[List[str]] = None,
        paths: Optional[List[str]] = None,
    ) -> "Gha":
        """Run the named pipelines on pull request events.

        See https://docs.github.com/en/actions/writing-workflows/choosing-when-your-workflow-runs/events-that-trigger-workflows#pull_request
        """
        for pipeline in self._resolve(names):
            pipeline.triggers.add_pull_request(types=types, branches=branches, paths=paths)
        return self

    def on_issue_comment(self, names: Names, types: Optional[List[str]] = None) -> "Gha":
        for pipeline in self._resolve(names):
            pipeline.triggers.add_issue_comment(types=types)
        return self

    def on_schedule(self, names: Names, crons: List[str]) -> "Gha":
        """Run the named pipelines on a schedule, one entry per cron expression."""
        for pipeline in self._resolve(names):
            pipeline.triggers.add_schedule(crons)
        return self

    def on_dispatch(self, names: Names) -> "Gha":
        for pipeline in self._resolve(names):
            pipeline.triggers.add_dispatch()
        return self

    def check(
        self, repository: Union[str, Path], runtime: str = DEFAULT_RUNTIME
    ) -> List[CheckError]:
        """Check every pipeline against `repository` and return the failures.

        Unlike `Pipeline.check`, nothing is raised for a failed call so that
        all pipelines are checked before any file is generated.
        """
        failures = []
        for pipeline in self.pipelines:
            try:
                pipeline.check(repository, runtime=runtime)
            except CheckError as e:
                failures.append(e)
        return failures

    def config(self, prefix: str = "") -> Overlay:
        """
        Generate a GitHub config directory, usable as an overlay on the
        repository root.

        Args:
            prefix: Prefix for the generated workflow filenames.

        Raises:
            ConfigurationError: A pipeline cannot be rendered.
        """
        overlay = Overlay()
        for pipeline in self.pipelines:
            workflow = pipeline.as_workflow()
            path = f"{WORKFLOWS_DIR}/{prefix}{pipeline.filename}"
            overlay.with_new_file(path, workflow.render(as_json=pipeline.settings.as_json))
        logger.debug(f"Generated {len(overlay)} workflow files")
        return overlay

    def _resolve(self, names: Names) -> List[Pipeline]:
        # Resolve every name before touching anything so a typo leaves all pipelines as they were
        if isinstance(names, str):
            names = [names]
        return [self.get_pipeline(name) for name in names]
