"""Unit tests for the Pipeline model and its best-effort check."""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from dagger_gha.globals.errors import CheckError, InvalidSecretNameError
from dagger_gha.pipeline import Pipeline


class TestPipeline:
    def test_defaults(self):
        pipeline = Pipeline("build", "build --source=.")

        assert pipeline.module is None
        assert pipeline.secrets == []
        assert pipeline.sparse_checkout == []
        assert pipeline.lfs is False
        assert pipeline.triggers.is_empty()
        assert pipeline.filename == "build.yml"

    def test_invalid_secret_rejected_on_creation(self):
        with pytest.raises(InvalidSecretNameError):
            Pipeline("deploy", "deploy", secrets=["PROD-TOKEN"])

    def test_as_workflow(self):
        workflow = Pipeline("build", "build").as_workflow()

        assert workflow.name_ == "build"
        assert "build" in workflow.jobs_


class TestCheck:
    def test_runs_help_in_a_copy_of_the_repository(self, temp_repository):
        pipeline = Pipeline("build", "build --source=.", module="github.com/shykes/core")
        seen = {}

        def fake_run(args, cwd, **kwargs):
            seen["args"] = args
            seen["cwd"] = Path(cwd)
            seen["files"] = sorted(p.name for p in Path(cwd).iterdir())
            return subprocess.CompletedProcess(args, 0, stdout="usage", stderr="")

        with patch("dagger_gha.pipeline.subprocess.run", side_effect=fake_run) as run:
            pipeline.check(temp_repository)

        run.assert_called_once()
        assert seen["args"] == [
            "dagger",
            "call",
            "-m",
            "github.com/shykes/core",
            "build",
            "--source=.",
            "--help",
        ]
        assert seen["cwd"] != temp_repository
        assert seen["files"] == [".dagger", "dagger.json"]
        # The throwaway copy is gone once the check returns
        assert not seen["cwd"].exists()

    def test_without_module(self, temp_repository):
        pipeline = Pipeline("hello", "hello --name='pull request'")

        with patch("dagger_gha.pipeline.subprocess.run") as run:
            pipeline.check(temp_repository, runtime="/usr/local/bin/dagger")

        assert run.call_args.args[0] == [
            "/usr/local/bin/dagger",
            "call",
            "hello",
            "--name=pull request",
            "--help",
        ]

    def test_failure_surfaces_output_verbatim(self, temp_repository):
        pipeline = Pipeline("build", "biuld")
        stderr = 'Error: unknown command "biuld" for "dagger call"\n'
        error = subprocess.CalledProcessError(1, ["dagger"], output="", stderr=stderr)

        with patch("dagger_gha.pipeline.subprocess.run", side_effect=error):
            with pytest.raises(CheckError) as exc_info:
                pipeline.check(temp_repository)

        assert exc_info.value.pipeline == "build"
        assert exc_info.value.output == stderr
        assert exc_info.value.returncode == 1

    def test_missing_runtime(self, temp_repository):
        pipeline = Pipeline("build", "build")

        with patch(
            "dagger_gha.pipeline.subprocess.run",
            side_effect=FileNotFoundError("No such file or directory: 'dagger'"),
        ):
            with pytest.raises(CheckError, match="No such file or directory"):
                pipeline.check(temp_repository)

    def test_revalidates_secret_names(self, temp_repository):
        pipeline = Pipeline("deploy", "deploy", secrets=["TOKEN"])
        pipeline.secrets.append("BAD NAME")

        with patch("dagger_gha.pipeline.subprocess.run") as run:
            with pytest.raises(InvalidSecretNameError):
                pipeline.check(temp_repository)

        run.assert_not_called()

    def test_missing_repository(self, tmp_path):
        pipeline = Pipeline("build", "build")

        with patch("dagger_gha.pipeline.subprocess.run") as run:
            with pytest.raises(CheckError, match="No such file or directory") as exc_info:
                pipeline.check(tmp_path / "nope")

        assert exc_info.value.pipeline == "build"
        assert exc_info.value.returncode is None
        run.assert_not_called()

    def test_unbalanced_quote(self, temp_repository):
        pipeline = Pipeline("build", "build --msg='oops")

        with patch("dagger_gha.pipeline.subprocess.run") as run:
            with pytest.raises(CheckError, match="No closing quotation") as exc_info:
                pipeline.check(temp_repository)

        assert exc_info.value.pipeline == "build"
        run.assert_not_called()
