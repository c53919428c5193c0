"""Shared test configuration and fixtures for dagger-gha tests."""

from pathlib import Path

import pytest

from dagger_gha import Gha, Settings


@pytest.fixture
def gha():
    """Generator with default settings and no pipelines."""
    return Gha()


@pytest.fixture
def settings():
    """Settings pinned to a fixed Dagger version."""
    return Settings(dagger_version="v0.13.5", runner="ubuntu-latest")


@pytest.fixture
def temp_repository(tmp_path):
    """A minimal repository containing a Dagger module."""
    repository = tmp_path / "repository"
    (repository / ".dagger").mkdir(parents=True)
    (repository / "dagger.json").write_text('{"name": "example", "source": ".dagger"}')
    (repository / ".dagger" / "main.go").write_text("package main\n")
    return repository


@pytest.fixture
def pipelines_file(tmp_path):
    """Write a pipeline declaration file and return its path."""

    def _create(content: str) -> Path:
        path = tmp_path / "dagger-gha.yml"
        path.write_text(content)
        return path

    return _create

