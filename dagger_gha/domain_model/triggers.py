"""Trigger registry: the `on` block of a generated workflow.

Every sub-event is created the first time something is registered for it,
and later registrations append to what is already there. Nothing is
deduplicated; GitHub accepts repeated filter values.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from dagger_gha.domain_model.node import Node, keep, key


@dataclass
class PushEvent(Node):
    branches_: List[str] = field(default_factory=list)
    tags_: List[str] = field(default_factory=list)
    paths_: List[str] = field(default_factory=list)


@dataclass
class PullRequestEvent(Node):
    types_: List[str] = field(default_factory=list)
    branches_: List[str] = field(default_factory=list)
    paths_: List[str] = field(default_factory=list)


@dataclass
class WorkflowDispatchEvent(Node):
    # Inputs are not supported: the event is only ever present or absent.
    pass


@dataclass
class IssueCommentEvent(Node):
    types_: List[str] = field(default_factory=list)


@dataclass
class ScheduleEvent(Node):
    cron_: str = field(default="", metadata=keep())


@dataclass
class Triggers(Node):
    push_: Optional[PushEvent] = field(default=None, metadata=key("push", keep_empty=True))
    pull_request_: Optional[PullRequestEvent] = field(
        default=None, metadata=key("pull_request", keep_empty=True)
    )
    workflow_dispatch_: Optional[WorkflowDispatchEvent] = field(
        default=None, metadata=key("workflow_dispatch", keep_empty=True)
    )
    issue_comment_: Optional[IssueCommentEvent] = field(
        default=None, metadata=key("issue_comment", keep_empty=True)
    )
    schedule_: List[ScheduleEvent] = field(default_factory=list)

    def add_push(
        self,
        branches: Optional[Iterable[str]] = None,
        tags: Optional[Iterable[str]] = None,
        paths: Optional[Iterable[str]] = None,
    ) -> PushEvent:
        if self.push_ is None:
            self.push_ = PushEvent()
        self.push_.branches_.extend(branches or [])
        self.push_.tags_.extend(tags or [])
        self.push_.paths_.extend(paths or [])
        return self.push_

    def add_pull_request(
        self,
        types: Optional[Iterable[str]] = None,
        branches: Optional[Iterable[str]] = None,
        paths: Optional[Iterable[str]] = None,
    ) -> PullRequestEvent:
        if self.pull_request_ is None:
            self.pull_request_ = PullRequestEvent()
        self.pull_request_.types_.extend(types or [])
        self.pull_request_.branches_.extend(branches or [])
        self.pull_request_.paths_.extend(paths or [])
        return self.pull_request_

    def add_issue_comment(self, types: Optional[Iterable[str]] = None) -> IssueCommentEvent:
        if self.issue_comment_ is None:
            self.issue_comment_ = IssueCommentEvent()
        self.issue_comment_.types_.extend(types or [])
        return self.issue_comment_

    def add_dispatch(self) -> WorkflowDispatchEvent:
        if self.workflow_dispatch_ is None:
            self.workflow_dispatch_ = WorkflowDispatchEvent()
        return self.workflow_dispatch_

    def add_schedule(self, crons: Iterable[str]) -> List[ScheduleEvent]:
        self.schedule_.extend(ScheduleEvent(cron) for cron in crons)
        return self.schedule_

    def is_empty(self) -> bool:
        return not self.to_dict()
