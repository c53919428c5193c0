import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import yaml

from dagger_gha.domain_model.node import Node, keep, key
from dagger_gha.domain_model.triggers import Triggers

GEN_HEADER = "# This file was generated by dagger-gha. Do not edit it by hand."


@dataclass
class Concurrency(Node):
    group_: str = field(default="", metadata=keep())
    cancel_in_progress_: bool = False


@dataclass
class Strategy(Node):
    matrix_: Dict[str, List[str]] = field(default_factory=dict)
    max_parallel_: Optional[int] = None
    fail_fast_: bool = False


@dataclass
class Step(Node):
    """A single job step. Either `uses_` or `run_` is set, never both."""

    name_: Optional[str] = None
    id_: Optional[str] = None
    uses_: Optional[str] = None
    with_: Dict[str, str] = field(default_factory=dict)
    shell_: Optional[str] = None
    run_: Optional[str] = None
    env_: Dict[str, str] = field(default_factory=dict)
    timeout_minutes_: Optional[int] = None


@dataclass
class Job(Node):
    name_: Optional[str] = None
    runs_on_: str = field(default="", metadata=keep())
    permissions_: Dict[str, str] = field(default_factory=dict)
    steps_: List[Step] = field(default_factory=list, metadata=keep())
    env_: Dict[str, str] = field(default_factory=dict)
    strategy_: Optional[Strategy] = None
    timeout_minutes_: Optional[int] = None
    outputs_: Dict[str, str] = field(default_factory=dict)


@dataclass
class Workflow(Node):
    name_: Optional[str] = None
    on_: Triggers = field(default_factory=Triggers, metadata=keep())
    permissions_: Dict[str, str] = field(default_factory=dict)
    concurrency_: Optional[Concurrency] = None
    env_: Dict[str, str] = field(default_factory=dict)
    jobs_: Dict[str, Job] = field(default_factory=dict, metadata=key("jobs", keep_empty=True))

    def to_yaml(self) -> str:
        return yaml.dump(
            self.to_dict(),
            Dumper=WorkflowDumper,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
            width=4096,
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False) + "\n"

    def render(self, as_json: bool = False) -> str:
        """Serialize the workflow and prefix the generated-file header.

        JSON output is valid YAML, so the header comment is kept either way.
        """
        contents = self.to_json() if as_json else self.to_yaml()
        return GEN_HEADER + "\n" + contents


class WorkflowDumper(yaml.SafeDumper):
    """Safe dumper that writes multi-line strings (embedded scripts) as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


WorkflowDumper.add_representer(str, _represent_str)
