"""Shared test fixtures for projdata tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from dataclasses import dataclass
from pathlib import Path

import pytest
from rich.console import Console

from projdata.cli import CLIContext
from projdata.metadata import ProjectMetadata


@dataclass(frozen=True, slots=True)
class ProjdataProject:
    """Paths for a test project with a projdata.toml."""

    root: Path
    config_file: Path
    user_config_file: Path

    @property
    def output_file(self) -> Path:
        return self.root / "build" / "generated" / "projdata" / "Project.kt"

    @property
    def state_file(self) -> Path:
        return self.root / "build" / "projdata" / "state.json"


DEFAULT_PROJECT_TOML = """[project]
group = "com.example"
name = "demo"
version = "1.2.3"
description = "Demo"
"""


@pytest.fixture
def metadata() -> ProjectMetadata:
    return ProjectMetadata(
        group="com.example",
        name="demo",
        version="1.2.3",
        description="Demo",
    )


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove PROJDATA_* variables so the host environment cannot leak in."""
    for key in list(os.environ):
        if key.startswith("PROJDATA_"):
            monkeypatch.delenv(key)


@pytest.fixture
def projdata_project(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    clean_env: None,
) -> Generator[ProjdataProject]:
    """Create an isolated project and make it the working directory.

    Structure:
        tmp_path/
            project/
                projdata.toml
            user_config/
                projdata/config.toml   # not created by default
    """
    project_root = tmp_path / "project"
    project_root.mkdir()

    config_file = project_root / "projdata.toml"
    config_file.write_text(DEFAULT_PROJECT_TOML)

    user_config_file = tmp_path / "user_config" / "projdata" / "config.toml"

    monkeypatch.setattr(
        "projdata.config._discovery.get_user_config_path",
        lambda: user_config_file,
    )
    monkeypatch.chdir(project_root)

    yield ProjdataProject(
        root=project_root,
        config_file=config_file,
        user_config_file=user_config_file,
    )

    CLIContext.reset()


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
