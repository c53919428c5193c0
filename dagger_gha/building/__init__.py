from .identifiers import job_id, validate_permissions, validate_secret_names, workflow_filename
from .steps_builder import DefaultStepsBuilder, StepsBuilder
from .workflow_builder import DefaultWorkflowBuilder, WorkflowBuilder

__all__ = [
    "DefaultStepsBuilder",
    "DefaultWorkflowBuilder",
    "StepsBuilder",
    "WorkflowBuilder",
    "job_id",
    "validate_permissions",
    "validate_secret_names",
    "workflow_filename",
]
