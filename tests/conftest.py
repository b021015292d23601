"""Shared pytest fixtures for the vite3 test suite.

Provides reusable fixtures for:
- Settings pointed at a temporary output directory
- Representative project configurations
- A quiet Rich console that writes to memory
- A mocked package-manager runner that never spawns a process
"""

from __future__ import annotations

import io
import itertools
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from rich.console import Console

from vite3.config import Settings
from vite3.models import CollectedProject, ProjectConfig, ProjectType, Variant


# ---------------------------------------------------------------------------
# Paths & settings
# ---------------------------------------------------------------------------


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory that generated projects are written into."""
    out = tmp_path / "workspace"
    out.mkdir()
    return out


@pytest.fixture
def settings(output_dir: Path) -> Settings:
    return Settings(output_dir=output_dir, package_manager="npm", install_timeout=30)


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------


@pytest.fixture(
    params=list(itertools.product(ProjectType, Variant, (False, True))),
    ids=lambda p: f"{p[0].value}-{p[1].value}-{'tailwind' if p[2] else 'plain-css'}",
)
def any_config(request: pytest.FixtureRequest) -> ProjectConfig:
    """Every one of the eight configurations, one per test instance."""
    project_type, variant, tailwind = request.param
    return ProjectConfig(
        project_name="any-scene",
        project_type=project_type,
        variant=variant,
        tailwind=tailwind,
    )


@pytest.fixture
def basic_config() -> ProjectConfig:
    """``{basic, javascript, no tailwind}``: the smallest project."""
    return ProjectConfig(
        project_name="basic-scene",
        project_type=ProjectType.BASIC,
        variant=Variant.JAVASCRIPT,
        tailwind=False,
    )


@pytest.fixture
def shaders_config() -> ProjectConfig:
    """``{shaders, typescript, tailwind}``: the largest project."""
    return ProjectConfig(
        project_name="shader-scene",
        project_type=ProjectType.SHADERS,
        variant=Variant.TYPESCRIPT,
        tailwind=True,
    )


@pytest.fixture
def basic_project(basic_config: ProjectConfig) -> CollectedProject:
    return CollectedProject(config=basic_config, overwrite=False)


@pytest.fixture
def shaders_project(shaders_config: ProjectConfig) -> CollectedProject:
    return CollectedProject(config=shaders_config, overwrite=False)


# ---------------------------------------------------------------------------
# Console & command runner
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_console() -> Console:
    """Console that renders into a string buffer instead of the terminal."""
    return Console(file=io.StringIO(), force_terminal=False, width=100)


@pytest.fixture
def mock_runner() -> AsyncMock:
    """Stand-in for ``run_command`` that always succeeds."""
    return AsyncMock(return_value=(0, "added 1 package", ""))


@pytest.fixture
def failing_runner() -> AsyncMock:
    """Stand-in for ``run_command`` that fails with npm's ERESOLVE exit code."""
    return AsyncMock(return_value=(1, "", "npm ERR! code ERESOLVE"))
