from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from dagger_gha.globals.errors import ConfigurationError

DEFAULT_DAGGER_VERSION = "latest"
DEFAULT_RUNNER = "ubuntu-latest"


class ConcurrencyPolicy(str, Enum):
    """How GitHub schedules overlapping runs of a pull request workflow."""

    allow = "allow"
    queue = "queue"
    preempt = "preempt"

    @classmethod
    def parse(cls, value: Optional[str]) -> "ConcurrencyPolicy":
        if not value:
            return cls.allow
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(policy.value for policy in cls)
            raise ConfigurationError(
                f"unsupported pull request concurrency policy: '{value}' "
                f"(expected one of: {allowed})"
            ) from None


@dataclass
class Settings:
    """
    Global defaults applied to every pipeline.

    Attributes:
        dagger_version: Dagger version installed by the generated workflows
        public_token: Public Dagger Cloud token, safe to commit. Never pass a private token.
        no_traces: Disable sending traces to Dagger Cloud
        stop_engine: Explicitly stop the Dagger engine after the pipeline
        as_json: Encode files as JSON, which is also valid YAML
        runner: Default runner label
        pull_request_concurrency: One of 'allow', 'queue' or 'preempt'
        timeout_minutes: Default job timeout, or None for GitHub's default
        permissions: Default job permissions, or None to inherit the repository's
    """

    dagger_version: str = DEFAULT_DAGGER_VERSION
    public_token: Optional[str] = None
    no_traces: bool = False
    stop_engine: bool = False
    as_json: bool = False
    runner: str = DEFAULT_RUNNER
    pull_request_concurrency: str = ConcurrencyPolicy.allow.value
    timeout_minutes: Optional[int] = None
    permissions: Optional[Dict[str, str]] = field(default=None)
