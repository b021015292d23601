"""Interactive collection of the project configuration.

Prompts are asked in a fixed order through ``rich.prompt``.  Invalid answers
are re-asked in place; nothing outside this module is touched until a
complete, validated :class:`~vite3.models.ProjectConfig` exists.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from vite3.config import Settings
from vite3.errors import CancellationError, ConfigValidationError
from vite3.models import (
    DEFAULT_PROJECT_NAME,
    CollectedProject,
    ProjectConfig,
    ProjectType,
    Variant,
    validate_project_name,
)
from vite3.utils import CancellationToken, path_occupied
from vite3.utils import console as default_console

AskFn = Callable[..., Any]


class ConfigCollector:
    """Runs the prompt sequence and returns a ``CollectedProject``.

    *ask* and *confirm* default to ``Prompt.ask`` and ``Confirm.ask``; tests
    swap in scripted answers.
    """

    def __init__(
        self,
        settings: Settings,
        token: CancellationToken | None = None,
        console: Console | None = None,
        ask: AskFn = Prompt.ask,
        confirm: AskFn = Confirm.ask,
    ) -> None:
        self.settings = settings
        self.token = token or CancellationToken()
        self.console = console or default_console
        self._ask = ask
        self._confirm = confirm

    def collect(self) -> CollectedProject:
        """Ask every question and return the validated answers.

        Raises:
            CancellationError: If the user declines to overwrite an existing
                directory, closes the input stream, or the token is cancelled.
        """
        project_name = self._ask_project_name()
        project_type = ProjectType(
            self._prompt(
                "Select a project type",
                choices=[t.value for t in ProjectType],
                default=ProjectType.BASIC.value,
            )
        )
        variant = Variant(
            self._prompt(
                "Select a variant",
                choices=[v.value for v in Variant],
                default=Variant.JAVASCRIPT.value,
            )
        )
        tailwind = bool(
            self._prompt("Include Tailwind CSS?", default=False, confirm=True)
        )

        config = ProjectConfig(
            project_name=project_name,
            project_type=project_type,
            variant=variant,
            tailwind=tailwind,
        )

        overwrite = False
        if path_occupied(self.settings.project_path(project_name)):
            overwrite = bool(
                self._prompt(
                    f"Directory {project_name} already exists. Do you want to overwrite it?",
                    default=False,
                    confirm=True,
                )
            )
            if not overwrite:
                raise CancellationError("Operation terminated.")

        return CollectedProject(config=config, overwrite=overwrite)

    # -- Individual prompts ------------------------------------------------

    def _ask_project_name(self) -> str:
        while True:
            answer = self._prompt("Project name", default=DEFAULT_PROJECT_NAME)
            try:
                return validate_project_name(str(answer).strip())
            except ConfigValidationError as exc:
                self.console.print(f"[bold red]{escape(str(exc))}[/bold red]")

    def _prompt(self, message: str, *, confirm: bool = False, **kwargs: Any) -> Any:
        self.token.raise_if_cancelled()
        ask = self._confirm if confirm else self._ask
        try:
            return ask(message, console=self.console, **kwargs)
        except EOFError as exc:
            raise CancellationError("Operation cancelled") from exc
