"""vite3 command-line entry point.

Usage::

    vite3
    python -m vite3

There are no flags: the project is described interactively, and the few
runtime knobs come from ``VITE3_*`` environment variables (see
:class:`vite3.config.Settings`).
"""

from __future__ import annotations

import asyncio
import signal
import sys
from pathlib import Path
from types import FrameType

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from vite3.config import Settings
from vite3.errors import CancellationError, CommandError, ScaffoldError
from vite3.models import CollectedProject
from vite3.progress import ProgressReporter
from vite3.prompts import ConfigCollector
from vite3.scaffolder import (
    DependencyInstaller,
    ProjectBuilder,
    build_step_plan,
    render_project_files,
)
from vite3.scaffolder.installer import CommandRunner
from vite3.utils import CancellationToken, console, print_error, print_warning

BANNER = r"""
  ██╗   ██╗ ██╗ ████████╗ ███████╗       ██████╗
  ██║   ██║ ██║ ╚══██╔══╝ ██╔════╝       ╚════██╗
  ██║   ██║ ██║    ██║    █████╗  █████╗  █████╔╝
  ╚██╗ ██╔╝ ██║    ██║    ██╔══╝  ╚════╝  ╚═══██╗
   ╚████╔╝  ██║    ██║    ███████╗       ██████╔╝
    ╚═══╝   ╚═╝    ╚═╝    ╚══════╝       ╚═════╝
"""


# ---------------------------------------------------------------------------
# Scaffolding run
# ---------------------------------------------------------------------------


async def run_scaffold(
    project: CollectedProject,
    settings: Settings,
    token: CancellationToken,
    *,
    runner: CommandRunner | None = None,
    output: Console | None = None,
) -> Path:
    """Render, plan and execute one project.

    The plan and the progress total are both fixed before the target
    directory is touched.

    Returns:
        The project root.
    """
    config = project.config
    installer = DependencyInstaller(
        manager=settings.package_manager,
        timeout=settings.install_timeout,
        runner=runner,
    )
    files = render_project_files(config)
    plan = build_step_plan(config, files, installer.commands_for(config))
    progress = ProgressReporter.for_config(config, console=output)
    if plan.total != progress.total:
        raise ScaffoldError(
            f"Step plan has {plan.total} steps but {progress.total} were expected"
        )

    builder = ProjectBuilder(
        settings.project_path(config.project_name),
        installer,
        token=token,
        console=output,
        verbose=settings.verbose,
    )
    await builder.prepare_target(project.overwrite)

    with progress:
        root = await builder.execute(plan, progress)
    return root


def print_summary(project_name: str, target: Console | None = None) -> None:
    """Print the closing banner with next steps."""
    out = target or console
    out.print(f"[bright_blue]{BANNER}[/bright_blue]")
    out.print(
        Panel(
            f'Created "[bright_green]{project_name}[/bright_green]" a '
            "[bright_blue]Vite[/bright_blue] + [bright_blue]ThreeJS[/bright_blue] project.\n\n"
            "[bright_blue]To run the project:[/bright_blue]\n"
            f"  cd [cyan]{project_name}[/cyan]\n"
            "  npm [magenta]run[/magenta] [bright_blue]dev[/bright_blue]",
            title="[bold]Project Ready[/bold]",
            border_style="bright_green",
        )
    )


# ---------------------------------------------------------------------------
# Interrupt handling
# ---------------------------------------------------------------------------


def install_interrupt_handler(token: CancellationToken) -> None:
    """Turn Ctrl+C into a ``CancellationError`` wherever the flow is blocked.

    The token is cancelled first so any later suspension point also stops.
    """

    def _handler(signum: int, frame: FrameType | None) -> None:
        token.cancel("Operation cancelled")
        raise CancellationError("Operation cancelled")

    signal.signal(signal.SIGINT, _handler)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """CLI entry point for ``vite3`` and ``python -m vite3``."""
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        print_error(f"Invalid VITE3_* environment: {escape(str(exc))}")
        sys.exit(1)

    token = CancellationToken()
    install_interrupt_handler(token)

    try:
        project = ConfigCollector(settings, token=token).collect()
        console.print()
        asyncio.run(run_scaffold(project, settings, token))
        console.clear()
        print_summary(project.config.project_name)
    except CancellationError as exc:
        console.print(f"\n[yellow]✖ {exc}[/yellow]")
        return
    except CommandError as exc:
        print_error(f"An error occurred: {escape(str(exc))}")
        if exc.result.stderr:
            print_warning(escape(exc.result.stderr))
        sys.exit(1)
    except ScaffoldError as exc:
        print_error(f"An error occurred: {escape(str(exc))}")
        sys.exit(1)
    except Exception:
        console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
