"""Progress accounting for a scaffolding run.

The total is known before the first side effect: it is a closed-form
function of the configuration flags.  During the run the builder calls
:meth:`ProgressReporter.advance` exactly once per executed step, so a
successful run ends with ``completed == total``.
"""

from __future__ import annotations

from types import TracebackType

from rich.console import Console
from rich.progress import Progress, TaskID

from vite3.models import ProjectConfig
from vite3.utils import create_progress

# Root, index.html, src/, entry script, stylesheet, package.json,
# bundler config, public/, .gitignore.
BASE_STEPS = 9
# Runtime install and tooling install.
DEPENDENCY_STEPS = 2
# mkdir src/shaders is a step of its own, plus the two shader sources.
SHADER_STEPS = 3
# The tailwind install command.
TAILWIND_STEPS = 1
# The typescript install command, tsconfig.json and the glsl shim.
TYPESCRIPT_STEPS = 3


def expected_total_steps(config: ProjectConfig) -> int:
    """Number of progress units a full run of *config* issues."""
    return (
        BASE_STEPS
        + DEPENDENCY_STEPS
        + (SHADER_STEPS if config.shaders else 0)
        + (TAILWIND_STEPS if config.tailwind else 0)
        + (TYPESCRIPT_STEPS if config.typed else 0)
    )


class ProgressReporter:
    """Percentage bar that counts the increments it issues.

    Usable as a context manager; the bar is shown on enter and removed on
    exit.
    """

    def __init__(
        self,
        total: int,
        console: Console | None = None,
        description: str = "Creating project",
    ) -> None:
        self.total = total
        self.completed = 0
        self.description = description
        self._progress: Progress = create_progress(console)
        self._task: TaskID | None = None

    @classmethod
    def for_config(
        cls, config: ProjectConfig, console: Console | None = None
    ) -> "ProgressReporter":
        return cls(expected_total_steps(config), console=console)

    @property
    def finished(self) -> bool:
        return self.completed == self.total

    def start(self) -> None:
        self._progress.start()
        self._task = self._progress.add_task(self.description, total=self.total)

    def advance(self) -> None:
        """Record one executed step."""
        self.completed += 1
        if self._task is not None:
            self._progress.advance(self._task, 1)

    def describe(self, description: str) -> None:
        """Change the label shown next to the bar."""
        self.description = description
        if self._task is not None:
            self._progress.update(self._task, description=description)

    def stop(self) -> None:
        self._progress.stop()

    def __enter__(self) -> "ProgressReporter":
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()
