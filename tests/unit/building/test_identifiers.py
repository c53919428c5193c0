"""Unit tests for filename, job ID and secret name utilities."""

import re

import pytest

from dagger_gha.building.identifiers import (
    job_id,
    validate_permissions,
    validate_secret_names,
    workflow_filename,
)
from dagger_gha.globals.errors import ConfigurationError, InvalidSecretNameError

FILENAME_GRAMMAR = re.compile(r"^[a-z0-9-]+\.yml$")
JOB_ID_GRAMMAR = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]{0,98}$")

NAMES = [
    "build",
    "Deploy docs",
    "  Build & Test!  ",
    "Demo pipeline #1 (nightly)",
    "release/v1.2.3",
    "1st build",
    "-leading-hyphen",
    "héllo wörld",
    "!!!",
    "",
    "x" * 150,
]


class TestWorkflowFilename:
    def test_lowercases_and_hyphenates(self):
        assert workflow_filename("Deploy docs") == "deploy-docs.yml"

    def test_collapses_runs_of_punctuation(self):
        assert workflow_filename("  Build & Test!  ") == "build-test.yml"
        assert workflow_filename("release/v1.2.3") == "release-v1-2-3.yml"

    def test_name_without_alphanumerics(self):
        assert workflow_filename("!!!") == "workflow.yml"
        assert workflow_filename("") == "workflow.yml"

    @pytest.mark.parametrize("name", NAMES)
    def test_matches_grammar(self, name):
        assert FILENAME_GRAMMAR.match(workflow_filename(name))

    @pytest.mark.parametrize("name", NAMES)
    def test_idempotent(self, name):
        slug = workflow_filename(name)[: -len(".yml")]
        assert workflow_filename(slug) == slug + ".yml"

    def test_distinct_names_can_collide(self):
        """Collisions are not corrected: both names map to the same file."""
        assert workflow_filename("Build") == workflow_filename("build!")


class TestJobId:
    def test_spaces_become_hyphens(self):
        assert job_id("Deploy docs") == "Deploy-docs"

    def test_strips_invalid_characters(self):
        assert job_id("build (nightly)!") == "build-nightly"
        assert job_id("héllo wörld") == "hllo-wrld"

    def test_keeps_underscores_and_hyphens(self):
        assert job_id("my_job-1") == "my_job-1"

    def test_prefixes_invalid_first_character(self):
        assert job_id("1st build") == "_1st-build"
        assert job_id("-x") == "_-x"
        assert job_id("") == "_"

    def test_truncates_to_99_characters(self):
        assert job_id("x" * 150) == "x" * 99
        assert len(job_id("9" * 150)) == 99

    @pytest.mark.parametrize("name", NAMES)
    def test_matches_grammar(self, name):
        assert JOB_ID_GRAMMAR.match(job_id(name))


class TestValidateSecretNames:
    def test_accepts_valid_names(self):
        validate_secret_names(["NETLIFY_TOKEN", "key_1", "A"])
        validate_secret_names([])
        validate_secret_names(None)

    @pytest.mark.parametrize("name", ["MY-SECRET", "MY SECRET", "", "TOKEN\n", "$TOKEN"])
    def test_rejects_invalid_names(self, name):
        with pytest.raises(InvalidSecretNameError) as exc_info:
            validate_secret_names(["VALID", name])

        assert exc_info.value.secret_name == name
        assert "alphanumeric characters and underscores" in str(exc_info.value)


class TestValidatePermissions:
    def test_accepts_known_scopes(self):
        validate_permissions({"contents": "read", "id-token": "write", "pages": "none"})
        validate_permissions(None)

    def test_rejects_unknown_scope(self):
        with pytest.raises(ConfigurationError, match="invalid permission: 'contentz'"):
            validate_permissions({"contentz": "read"})

    def test_rejects_unknown_level(self):
        with pytest.raises(ConfigurationError, match="'admin'"):
            validate_permissions({"contents": "admin"})
