import copy
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, Optional

from dagger_gha.building.identifiers import job_id
from dagger_gha.building.steps_builder import EXEC_STEP_ID, DefaultStepsBuilder, StepsBuilder
from dagger_gha.domain_model import ast
from dagger_gha.domain_model.contexts import expression
from dagger_gha.globals.settings import ConcurrencyPolicy

if TYPE_CHECKING:
    from dagger_gha.pipeline import Pipeline

logger = logging.getLogger(__name__)

# Outside of pull requests head_ref is empty, so every run gets its own group
CONCURRENCY_GROUP = (
    expression("github.workflow") + "-" + expression("github.head_ref || github.run_id")
)


class WorkflowBuilder(ABC):
    @abstractmethod
    def build(self, pipeline: "Pipeline") -> ast.Workflow:
        """
        Build the workflow document running a pipeline.

        Args:
            pipeline: The pipeline to render.

        Returns:
            ast.Workflow: A complete workflow, triggers included.

        Raises:
            ConfigurationError: The pipeline settings cannot be rendered.
        """
        pass


class DefaultWorkflowBuilder(WorkflowBuilder):
    """Renders a pipeline as a single-job workflow."""

    def __init__(self, steps_builder: Optional[StepsBuilder] = None) -> None:
        self.steps_builder = steps_builder or DefaultStepsBuilder()

    def build(self, pipeline: "Pipeline") -> ast.Workflow:
        concurrency = self.build_concurrency(pipeline.settings.pull_request_concurrency)
        job = ast.Job(
            name_=pipeline.name,
            runs_on_=pipeline.settings.runner,
            permissions_=dict(pipeline.settings.permissions or {}),
            steps_=self.steps_builder.build(pipeline),
            timeout_minutes_=pipeline.settings.timeout_minutes,
            outputs_=self.build_outputs(),
        )
        workflow = ast.Workflow(
            name_=pipeline.name,
            on_=copy.deepcopy(pipeline.triggers),
            concurrency_=concurrency,
            jobs_={job_id(pipeline.name): job},
        )
        if workflow.on_.is_empty():
            logger.warning(f"Pipeline '{pipeline.name}' has no triggers and will never run")
        return workflow

    def build_concurrency(self, policy_value: Optional[str]) -> Optional[ast.Concurrency]:
        policy = ConcurrencyPolicy.parse(policy_value)
        match policy:
            case ConcurrencyPolicy.allow:
                return None
            case ConcurrencyPolicy.queue:
                return ast.Concurrency(group_=CONCURRENCY_GROUP)
            case ConcurrencyPolicy.preempt:
                return ast.Concurrency(group_=CONCURRENCY_GROUP, cancel_in_progress_=True)

    def build_outputs(self) -> Dict[str, str]:
        return {
            "stdout": expression(f"steps.{EXEC_STEP_ID}.outputs.stdout"),
            "stderr": expression(f"steps.{EXEC_STEP_ID}.outputs.stderr"),
        }
