"""Data models for the vite3 scaffolder.

All values here are frozen Pydantic v2 models: a ``ProjectConfig`` is created
once by the prompt phase and never mutated, and the ``FileSpec`` / ``StepPlan``
values derived from it live only for the duration of a single run.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import PurePosixPath
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vite3.errors import ConfigValidationError

PROJECT_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")

DEFAULT_PROJECT_NAME = "vite-three-project"


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class ProjectType(str, Enum):
    """Which starter scene the entry script renders."""

    BASIC = "basic"
    SHADERS = "shaders"


class Variant(str, Enum):
    """Output language of the generated sources."""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"

    @property
    def extension(self) -> str:
        """File extension for entry script and bundler config."""
        return "ts" if self is Variant.TYPESCRIPT else "js"

    @property
    def typed(self) -> bool:
        return self is Variant.TYPESCRIPT


# ---------------------------------------------------------------------------
# Project configuration
# ---------------------------------------------------------------------------


def validate_project_name(value: str) -> str:
    """Return *value* if it is a usable project name.

    Raises:
        ConfigValidationError: If the name is empty or contains characters
            outside ``[A-Za-z0-9_-]``.
    """
    if not value:
        raise ConfigValidationError("Project name must not be empty")
    if not PROJECT_NAME_PATTERN.fullmatch(value):
        raise ConfigValidationError(
            f"Invalid project name {value!r}: use only letters, digits, '-' and '_'"
        )
    return value


class ProjectConfig(BaseModel):
    """Validated answers of the prompt phase."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Directory and package name")
    project_type: ProjectType = Field(default=ProjectType.BASIC)
    variant: Variant = Field(default=Variant.JAVASCRIPT)
    tailwind: bool = Field(default=False, description="Include Tailwind CSS")

    @field_validator("project_name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return validate_project_name(value)

    @property
    def shaders(self) -> bool:
        return self.project_type is ProjectType.SHADERS

    @property
    def typed(self) -> bool:
        return self.variant.typed


class CollectedProject(BaseModel):
    """Result of the prompt phase: the config plus the overwrite decision."""

    model_config = ConfigDict(frozen=True)

    config: ProjectConfig
    overwrite: bool = False


# ---------------------------------------------------------------------------
# Rendered files
# ---------------------------------------------------------------------------


class FileSpec(BaseModel):
    """A single rendered file, addressed relative to the project root."""

    model_config = ConfigDict(frozen=True)

    relative_path: str
    content: str

    @field_validator("relative_path")
    @classmethod
    def _check_path(cls, value: str) -> str:
        path = PurePosixPath(value)
        if not value or path.is_absolute() or value.startswith("\\"):
            raise ValueError(f"File path must be relative: {value!r}")
        if ".." in path.parts:
            raise ValueError(f"File path must not leave the project root: {value!r}")
        return value


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


class InstallCommand(BaseModel):
    """One package-manager invocation: ``<manager> install <pkgs> --save[-dev]``."""

    model_config = ConfigDict(frozen=True)

    manager: str = "npm"
    packages: tuple[str, ...]
    dev: bool = False

    @property
    def argv(self) -> list[str]:
        flag = "--save-dev" if self.dev else "--save"
        return [self.manager, "install", *self.packages, flag]

    def __str__(self) -> str:
        return " ".join(self.argv)


class CommandResult(BaseModel):
    """Captured outcome of a finished command."""

    command: str
    cwd: str
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------


class MakeDirectory(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["mkdir"] = "mkdir"
    path: str


class WriteFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["write"] = "write"
    file: FileSpec


class RunCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["command"] = "command"
    command: InstallCommand


Step = Annotated[Union[MakeDirectory, WriteFile, RunCommand], Field(discriminator="kind")]


class StepPlan(BaseModel):
    """Ordered steps for one configuration; each step weighs one progress unit."""

    model_config = ConfigDict(frozen=True)

    steps: tuple[Step, ...]

    @property
    def total(self) -> int:
        return len(self.steps)

    def describe(self) -> list[str]:
        """Human-readable one-liners, in execution order."""
        lines: list[str] = []
        for step in self.steps:
            if isinstance(step, MakeDirectory):
                lines.append(f"mkdir {step.path}")
            elif isinstance(step, WriteFile):
                lines.append(f"write {step.file.relative_path}")
            else:
                lines.append(f"run {step.command}")
        return lines
