"""Main scaffolding orchestrator.

Turns a ``ProjectConfig`` into an ordered :class:`~vite3.models.StepPlan`
and executes it: directory creation, file writes and install commands, one
at a time, in a fixed order.  There is no rollback; a failure part-way
leaves whatever was already written on disk.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from rich.console import Console

from vite3.errors import CancellationError, FileSystemError
from vite3.models import (
    FileSpec,
    InstallCommand,
    MakeDirectory,
    ProjectConfig,
    RunCommand,
    Step,
    StepPlan,
    WriteFile,
)
from vite3.progress import ProgressReporter
from vite3.utils import CancellationToken, path_occupied
from vite3.utils import console as default_console

from .installer import DependencyInstaller
from .registry import ProjectFiles


# ---------------------------------------------------------------------------
# Planning
# ---------------------------------------------------------------------------


def build_step_plan(
    config: ProjectConfig,
    files: ProjectFiles,
    commands: list[InstallCommand],
) -> StepPlan:
    """Lay out every step of a run in execution order.

    Install commands run right after ``package.json`` exists, so the package
    manager records them there.
    """
    steps: list[Step] = [
        MakeDirectory(path="."),
        WriteFile(file=files.index_html),
        MakeDirectory(path="src"),
        WriteFile(file=files.entry_script),
        WriteFile(file=files.stylesheet),
    ]

    if config.shaders:
        steps.append(MakeDirectory(path="src/shaders"))
        steps.append(WriteFile(file=_require(files.vertex_shader, "vertex shader")))
        steps.append(WriteFile(file=_require(files.fragment_shader, "fragment shader")))

    steps.append(WriteFile(file=files.package_json))
    steps.extend(RunCommand(command=command) for command in commands)

    if config.typed:
        steps.append(WriteFile(file=_require(files.tsconfig, "tsconfig")))
        steps.append(WriteFile(file=_require(files.glsl_declaration, "glsl declaration")))

    steps.append(WriteFile(file=files.bundler_config))
    steps.append(MakeDirectory(path="public"))
    steps.append(WriteFile(file=files.gitignore))

    return StepPlan(steps=tuple(steps))


def _require(spec: FileSpec | None, role: str) -> FileSpec:
    if spec is None:
        raise ValueError(f"Rendered file set is missing the {role}")
    return spec


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------


class ProjectBuilder:
    """Executes a step plan against one project root.

    Every step is awaited before the next begins; the cancellation token is
    checked before each one.
    """

    def __init__(
        self,
        root: str | Path,
        installer: DependencyInstaller,
        token: CancellationToken | None = None,
        console: Console | None = None,
        verbose: bool = False,
    ) -> None:
        root = Path(root)
        # The last component stays unresolved so a link at the project name
        # is replaced, never followed.
        self.root = root.parent.resolve() / root.name
        self.installer = installer
        self.token = token or CancellationToken()
        self.console = console or default_console
        self.verbose = verbose

    # -- Public API --------------------------------------------------------

    async def prepare_target(self, overwrite: bool) -> None:
        """Make sure nothing occupies the project root yet.

        A real directory is removed recursively.  A file or symlink (live or
        dangling) is unlinked; the target of a link is never touched.

        Raises:
            CancellationError: If the root is occupied and *overwrite* is false.
            FileSystemError: If the existing entry cannot be removed.
        """
        if not path_occupied(self.root):
            return
        if not overwrite:
            raise CancellationError("Operation terminated.")
        try:
            if self.root.is_dir() and not self.root.is_symlink():
                await asyncio.to_thread(shutil.rmtree, self.root)
            else:
                await asyncio.to_thread(self.root.unlink)
        except OSError as exc:
            raise FileSystemError(self.root, f"Could not remove existing entry ({exc})") from exc

    async def execute(self, plan: StepPlan, progress: ProgressReporter) -> Path:
        """Run every step of *plan* in order, ticking *progress* once per step.

        Returns:
            The project root.
        """
        for step in plan.steps:
            self.token.raise_if_cancelled()
            await self._run_step(step, progress)
            progress.advance()
        return self.root

    # -- Steps -------------------------------------------------------------

    async def _run_step(self, step: Step, progress: ProgressReporter) -> None:
        if isinstance(step, MakeDirectory):
            self._trace(f"mkdir {step.path}")
            await self._mkdir(step.path)
        elif isinstance(step, WriteFile):
            self._trace(f"write {step.file.relative_path}")
            await self._write(step.file)
        elif isinstance(step, RunCommand):
            self._trace(f"run {step.command}")
            progress.describe("Installing dependencies")
            await self.installer.run(step.command, self.root)
        else:
            raise TypeError(f"Unknown step: {step!r}")

    async def _mkdir(self, relative: str) -> None:
        target = self._resolve(relative)
        try:
            await asyncio.to_thread(target.mkdir)
        except OSError as exc:
            raise FileSystemError(target, f"Could not create directory ({exc.strerror or exc})") from exc

    async def _write(self, spec: FileSpec) -> None:
        target = self._resolve(spec.relative_path)
        try:
            await asyncio.to_thread(target.write_text, spec.content, "utf-8")
        except OSError as exc:
            raise FileSystemError(target, f"Could not write file ({exc.strerror or exc})") from exc

    def _resolve(self, relative: str) -> Path:
        """Absolute path for *relative*, refusing anything outside the root."""
        target = (self.root / relative).resolve()
        if not target.is_relative_to(self.root):
            raise FileSystemError(target, "Refusing to write outside the project root")
        return target

    def _trace(self, message: str) -> None:
        if self.verbose:
            self.console.log(message)
