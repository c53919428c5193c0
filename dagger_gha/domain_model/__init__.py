from .ast import GEN_HEADER, Concurrency, Job, Step, Strategy, Workflow
from .triggers import (
    IssueCommentEvent,
    PullRequestEvent,
    PushEvent,
    ScheduleEvent,
    Triggers,
    WorkflowDispatchEvent,
)

__all__ = [
    "GEN_HEADER",
    "Concurrency",
    "IssueCommentEvent",
    "Job",
    "PullRequestEvent",
    "PushEvent",
    "ScheduleEvent",
    "Step",
    "Strategy",
    "Triggers",
    "Workflow",
    "WorkflowDispatchEvent",
]
