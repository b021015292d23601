"""vite3 runtime settings.

The scaffolder itself takes no command-line flags; everything the user
chooses is asked interactively.  The few knobs that are not part of the
project itself (where to write, which package manager to call, how long to
wait for it) come from environment variables and are held in a Pydantic v2
model so they are validated once at start-up.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Process-wide settings for one scaffolding run."""

    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Parent directory in which the project folder is created",
    )
    package_manager: str = Field(default="npm", min_length=1)
    install_timeout: int = Field(
        default=600, ge=10, description="Per-command timeout in seconds"
    )
    verbose: bool = Field(default=False, description="Log every step to the console")

    def project_path(self, project_name: str) -> Path:
        """Absolute path of the project root for *project_name*.

        Only the output directory is resolved; a symlink sitting at the
        project name itself is not followed.
        """
        return self.output_dir.resolve() / project_name

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            VITE3_OUTPUT_DIR, VITE3_PACKAGE_MANAGER, VITE3_INSTALL_TIMEOUT,
            VITE3_VERBOSE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("VITE3_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["VITE3_OUTPUT_DIR"])
        if os.environ.get("VITE3_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["VITE3_PACKAGE_MANAGER"]
        if os.environ.get("VITE3_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = int(os.environ["VITE3_INSTALL_TIMEOUT"])
        if os.environ.get("VITE3_VERBOSE"):
            kwargs["verbose"] = os.environ["VITE3_VERBOSE"].strip().lower() in _TRUTHY
        return cls(**kwargs)
