from typing import Any, Dict

import yaml

from dagger_gha.domain_model import GEN_HEADER


def load_workflow(contents: str) -> Dict[str, Any]:
    """
    Parse a generated workflow file.

    Args:
        contents (str): File contents as written by Gha.config

    Returns:
        Dict[str, Any]: The workflow document
    """
    assert contents.startswith(GEN_HEADER + "\n")
    return yaml.safe_load(contents)


def exec_step(workflow: Dict[str, Any]) -> Dict[str, Any]:
    """Return the step running the Dagger command in a single-job workflow."""
    (job,) = workflow["jobs"].values()
    return next(step for step in job["steps"] if step.get("id") == "exec")
