"""Unit tests for the workflow document model and its serialization."""

import json

import yaml

from dagger_gha.domain_model import GEN_HEADER, Concurrency, Job, Step, Strategy, Workflow
from dagger_gha.domain_model.contexts import GITHUB_CONTEXT_KEYS, github_env, secret_ref
from dagger_gha.domain_model.node import convert_field_name


def sample_workflow() -> Workflow:
    workflow = Workflow(
        name_="build",
        jobs_={
            "build": Job(
                name_="build",
                runs_on_="ubuntu-latest",
                steps_=[
                    Step(name_="Checkout", uses_="actions/checkout@v4"),
                    Step(name_="Run", shell_="bash", run_="echo one\necho two\n"),
                ],
            )
        },
    )
    workflow.on_.add_push(branches=["main"])
    return workflow


class TestNode:
    def test_convert_field_name(self):
        assert convert_field_name("runs_on_") == "runs-on"
        assert convert_field_name("timeout_minutes_") == "timeout-minutes"
        assert convert_field_name("with_") == "with"

    def test_step_omits_unset_fields(self):
        step = Step(name_="Checkout", uses_="actions/checkout@v4")

        assert step.to_dict() == {"name": "Checkout", "uses": "actions/checkout@v4"}

    def test_job_keeps_required_fields(self):
        assert Job(runs_on_="ubuntu-latest").to_dict() == {
            "runs-on": "ubuntu-latest",
            "steps": [],
        }

    def test_job_field_order(self):
        job = Job(
            name_="build",
            runs_on_="ubuntu-latest",
            steps_=[Step(run_="true")],
            env_={"A": "1"},
            strategy_=Strategy(matrix_={"os": ["linux", "darwin"]}, fail_fast_=True),
            timeout_minutes_=30,
            outputs_={"out": "x"},
        )

        assert list(job.to_dict()) == [
            "name",
            "runs-on",
            "steps",
            "env",
            "strategy",
            "timeout-minutes",
            "outputs",
        ]
        assert job.to_dict()["strategy"] == {
            "matrix": {"os": ["linux", "darwin"]},
            "fail-fast": True,
        }

    def test_concurrency_omits_false_cancel(self):
        assert Concurrency(group_="g").to_dict() == {"group": "g"}
        assert Concurrency(group_="g", cancel_in_progress_=True).to_dict() == {
            "group": "g",
            "cancel-in-progress": True,
        }

    def test_workflow_keeps_empty_triggers_and_jobs(self):
        assert Workflow().to_dict() == {"on": {}, "jobs": {}}


class TestSerialization:
    def test_yaml_round_trip(self):
        workflow = sample_workflow()

        loaded = yaml.safe_load(workflow.to_yaml())

        assert loaded == workflow.to_dict()
        assert loaded["on"] == {"push": {"branches": ["main"]}}

    def test_yaml_on_key_is_a_string(self):
        """An unquoted `on` would load as a boolean under YAML 1.1."""
        loaded = yaml.safe_load(sample_workflow().to_yaml())

        assert "on" in loaded
        assert True not in loaded

    def test_yaml_preserves_key_order(self):
        text = sample_workflow().to_yaml()

        assert text.index("name:") < text.index("'on':") < text.index("jobs:")

    def test_yaml_multiline_strings_use_literal_blocks(self):
        text = sample_workflow().to_yaml()

        assert "run: |" in text

    def test_json(self):
        workflow = sample_workflow()

        assert json.loads(workflow.to_json()) == workflow.to_dict()

    def test_render_prefixes_header(self):
        workflow = sample_workflow()

        for as_json in (False, True):
            contents = workflow.render(as_json=as_json)
            assert contents.startswith(GEN_HEADER + "\n")
            # JSON output stays loadable as YAML, header comment included
            assert yaml.safe_load(contents) == workflow.to_dict()


class TestContexts:
    def test_secret_ref(self):
        assert secret_ref("NETLIFY_TOKEN") == "${{ secrets.NETLIFY_TOKEN }}"

    def test_github_env_mirrors_every_key(self):
        env = github_env()

        assert len(env) == len(GITHUB_CONTEXT_KEYS)
        assert env["GITHUB_ACTOR"] == "${{ github.actor }}"
        assert env["GITHUB_HEAD_REF"] == "${{ github.head_ref }}"
        assert env["GITHUB_REPOSITORYURL"] == "${{ github.repositoryUrl }}"

    def test_github_env_excludes_token(self):
        assert "GITHUB_TOKEN" not in github_env()
