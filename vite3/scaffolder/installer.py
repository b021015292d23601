"""Dependency installation through the project's package manager.

Commands are plain values (:class:`~vite3.models.InstallCommand`) so the
builder can put them into its step plan before anything runs.  They are
executed strictly one at a time; the first failure aborts the run.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from pathlib import Path

from vite3.errors import CommandError
from vite3.models import CommandResult, InstallCommand, ProjectConfig
from vite3.utils import run_command

CommandRunner = Callable[..., Awaitable[tuple[int, str, str]]]

RUNTIME_PACKAGES: tuple[str, ...] = ("three",)
TOOLING_PACKAGES: tuple[str, ...] = ("vite", "vite-plugin-glsl")
TAILWIND_PACKAGES: tuple[str, ...] = ("tailwindcss", "@tailwindcss/vite")
TYPESCRIPT_PACKAGES: tuple[str, ...] = ("typescript", "@types/three", "@types/node")


class DependencyInstaller:
    """Builds and runs the install commands for a project.

    Attributes:
        manager: Package-manager executable (``npm`` by default).
        timeout: Per-command timeout in seconds.
    """

    def __init__(
        self,
        manager: str = "npm",
        timeout: int = 600,
        runner: CommandRunner | None = None,
    ) -> None:
        self.manager = manager
        self.timeout = timeout
        self._runner = runner or run_command

    def commands_for(self, config: ProjectConfig) -> list[InstallCommand]:
        """Install commands for *config*, in execution order."""
        commands = [
            InstallCommand(manager=self.manager, packages=RUNTIME_PACKAGES, dev=False),
            InstallCommand(manager=self.manager, packages=TOOLING_PACKAGES, dev=True),
        ]
        if config.tailwind:
            commands.append(
                InstallCommand(manager=self.manager, packages=TAILWIND_PACKAGES, dev=True)
            )
        if config.typed:
            commands.append(
                InstallCommand(manager=self.manager, packages=TYPESCRIPT_PACKAGES, dev=True)
            )
        return commands

    async def run(self, command: InstallCommand, cwd: str | Path) -> CommandResult:
        """Run *command* inside *cwd* and wait for it to finish.

        Output is captured rather than shown; it is kept on the result for
        diagnostics.

        Raises:
            CommandError: If the command exits non-zero, times out, or the
                package manager cannot be found.
        """
        try:
            returncode, stdout, stderr = await self._runner(
                command.argv, cwd=cwd, timeout=self.timeout
            )
        except FileNotFoundError as exc:
            result = CommandResult(
                command=str(command),
                cwd=str(cwd),
                returncode=127,
                stderr=f"{command.manager}: command not found ({exc})",
            )
            raise CommandError(result) from exc

        result = CommandResult(
            command=str(command),
            cwd=str(cwd),
            returncode=returncode,
            stdout=stdout,
            stderr=stderr,
        )
        if not result.ok:
            raise CommandError(result)
        return result
