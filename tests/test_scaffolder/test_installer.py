"""Tests for the DependencyInstaller (vite3.scaffolder.installer).

Covers:
- Command list and order per configuration
- Arguments, working directory and timeout handed to the runner
- Failure handling: non-zero exit, timeout, missing package manager
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from vite3.errors import CommandError
from vite3.models import InstallCommand, ProjectConfig
from vite3.scaffolder.installer import DependencyInstaller

pytestmark = pytest.mark.unit


class TestCommandsFor:
    def test_basic_javascript(self, basic_config: ProjectConfig):
        commands = DependencyInstaller().commands_for(basic_config)
        assert [c.argv for c in commands] == [
            ["npm", "install", "three", "--save"],
            ["npm", "install", "vite", "vite-plugin-glsl", "--save-dev"],
        ]

    def test_tailwind_and_typescript(self, shaders_config: ProjectConfig):
        commands = DependencyInstaller().commands_for(shaders_config)
        assert [str(c) for c in commands] == [
            "npm install three --save",
            "npm install vite vite-plugin-glsl --save-dev",
            "npm install tailwindcss @tailwindcss/vite --save-dev",
            "npm install typescript @types/three @types/node --save-dev",
        ]

    def test_tailwind_only(self):
        config = ProjectConfig(project_name="tw", tailwind=True)
        commands = DependencyInstaller().commands_for(config)
        assert len(commands) == 3
        assert commands[-1].packages == ("tailwindcss", "@tailwindcss/vite")

    def test_custom_manager(self, basic_config: ProjectConfig):
        commands = DependencyInstaller(manager="pnpm").commands_for(basic_config)
        assert all(c.manager == "pnpm" for c in commands)
        assert commands[0].argv[0] == "pnpm"


class TestRun:
    @pytest.mark.asyncio
    async def test_success_passes_cwd_and_timeout(self, tmp_path: Path, mock_runner: AsyncMock):
        installer = DependencyInstaller(timeout=42, runner=mock_runner)
        command = InstallCommand(packages=("three",))

        result = await installer.run(command, tmp_path)

        mock_runner.assert_awaited_once_with(
            ["npm", "install", "three", "--save"], cwd=tmp_path, timeout=42
        )
        assert result.ok
        assert result.cwd == str(tmp_path)
        assert result.stdout == "added 1 package"

    @pytest.mark.asyncio
    async def test_nonzero_exit_raises(self, tmp_path: Path, failing_runner: AsyncMock):
        installer = DependencyInstaller(runner=failing_runner)
        with pytest.raises(CommandError) as excinfo:
            await installer.run(InstallCommand(packages=("three",)), tmp_path)
        assert excinfo.value.result.returncode == 1
        assert "ERESOLVE" in excinfo.value.result.stderr
        assert "npm install three --save" in str(excinfo.value)

    @pytest.mark.asyncio
    async def test_timeout_raises(self, tmp_path: Path):
        runner = AsyncMock(return_value=(-1, "", "Command timed out after 5s"))
        installer = DependencyInstaller(runner=runner)
        with pytest.raises(CommandError, match="exit code -1"):
            await installer.run(InstallCommand(packages=("three",)), tmp_path)

    @pytest.mark.asyncio
    async def test_missing_manager_raises(self, tmp_path: Path):
        runner = AsyncMock(side_effect=FileNotFoundError("npm"))
        installer = DependencyInstaller(runner=runner)
        with pytest.raises(CommandError) as excinfo:
            await installer.run(InstallCommand(packages=("three",)), tmp_path)
        assert excinfo.value.result.returncode == 127
        assert "command not found" in excinfo.value.result.stderr

    @pytest.mark.asyncio
    async def test_no_retry(self, tmp_path: Path, failing_runner: AsyncMock):
        installer = DependencyInstaller(runner=failing_runner)
        with pytest.raises(CommandError):
            await installer.run(InstallCommand(packages=("three",)), tmp_path)
        assert failing_runner.await_count == 1
