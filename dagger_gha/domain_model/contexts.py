from typing import Dict, Tuple

# Keys of the `github` context mirrored into the pipeline environment.
# `token` and `event` are left out: one is a credential, the other a full
# JSON payload.
GITHUB_CONTEXT_KEYS: Tuple[str, ...] = (
    "action",
    "action_path",
    "action_ref",
    "action_repository",
    "action_status",
    "actor",
    "actor_id",
    "api_url",
    "base_ref",
    "env",
    "event_name",
    "event_path",
    "graphql_url",
    "head_ref",
    "job",
    "path",
    "ref",
    "ref_name",
    "ref_protected",
    "ref_type",
    "repository",
    "repository_id",
    "repository_owner",
    "repository_owner_id",
    "repositoryUrl",
    "retention_days",
    "run_attempt",
    "run_id",
    "run_number",
    "secret_source",
    "server_url",
    "sha",
    "triggering_actor",
    "workflow",
    "workflow_ref",
    "workflow_sha",
    "workspace",
)


def expression(body: str) -> str:
    return "${{ " + body + " }}"


def secret_ref(name: str) -> str:
    """Reference to a repository secret, e.g. `${{ secrets.NAME }}`."""
    return expression(f"secrets.{name}")


def github_ref(context_key: str) -> str:
    return expression(f"github.{context_key}")


def github_env() -> Dict[str, str]:
    """`GITHUB_<KEY>` variables bound to their `github` context values."""
    return {f"GITHUB_{key.upper()}": github_ref(key) for key in GITHUB_CONTEXT_KEYS}
