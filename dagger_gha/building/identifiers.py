"""Identifier sanitization and validation.

Workflow filenames and job IDs are both derived from the human-readable
pipeline name. Distinct names may map to the same slug; callers are expected
to keep them apart.
"""

import re
from typing import Iterable, Mapping, Optional

from dagger_gha.globals.errors import ConfigurationError, InvalidSecretNameError

SECRET_NAME_PATTERN = re.compile(r"[A-Za-z0-9_]+")
JOB_ID_MAX_LENGTH = 99
DEFAULT_WORKFLOW_SLUG = "workflow"


def workflow_filename(name: str) -> str:
    """
    Turns a pipeline name into a workflow filename.

    Examples:
        >>> workflow_filename("Deploy docs")
        'deploy-docs.yml'
        >>> workflow_filename("  Build & Test!  ")
        'build-test.yml'
    """
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return (slug or DEFAULT_WORKFLOW_SLUG) + ".yml"


def job_id(name: str) -> str:
    """
    Turns a pipeline name into a job ID accepted by GitHub Actions.

    Job IDs must start with a letter or underscore and contain only
    alphanumerics, hyphens and underscores.
    """
    result = re.sub(r"[^A-Za-z0-9_-]", "", name.replace(" ", "-"))
    if not re.match(r"[A-Za-z_]", result):
        result = "_" + result
    return result[:JOB_ID_MAX_LENGTH]


def validate_secret_names(secrets: Optional[Iterable[str]]) -> None:
    """Raises InvalidSecretNameError for the first name outside [A-Za-z0-9_]."""
    for secret_name in secrets or []:
        if not SECRET_NAME_PATTERN.fullmatch(secret_name):
            raise InvalidSecretNameError(secret_name)


PERMISSION_SCOPES = frozenset(
    {
        "actions",
        "attestations",
        "checks",
        "contents",
        "deployments",
        "discussions",
        "id-token",
        "issues",
        "models",
        "packages",
        "pages",
        "pull-requests",
        "security-events",
        "statuses",
    }
)
PERMISSION_LEVELS = frozenset({"read", "write", "none"})


def validate_permissions(permissions: Optional[Mapping[str, str]]) -> None:
    """Raises ConfigurationError for an unknown scope or access level."""
    for scope, level in (permissions or {}).items():
        if scope not in PERMISSION_SCOPES:
            raise ConfigurationError(f"invalid permission: '{scope}'")
        if level not in PERMISSION_LEVELS:
            raise ConfigurationError(f"invalid permission value for '{scope}': '{level}'")
