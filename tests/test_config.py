"""Unit tests for Settings (vite3.config).

Tests cover:
- Defaults
- Field validation
- project_path resolution
- from_env with and without VITE3_* variables
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from vite3.config import Settings


class TestSettings:
    @pytest.mark.unit
    def test_defaults(self):
        settings = Settings()
        assert settings.output_dir == Path.cwd()
        assert settings.package_manager == "npm"
        assert settings.install_timeout == 600
        assert settings.verbose is False

    @pytest.mark.unit
    def test_timeout_lower_bound(self):
        with pytest.raises(ValidationError):
            Settings(install_timeout=1)

    @pytest.mark.unit
    def test_empty_package_manager_rejected(self):
        with pytest.raises(ValidationError):
            Settings(package_manager="")

    @pytest.mark.unit
    def test_project_path(self, tmp_path: Path):
        settings = Settings(output_dir=tmp_path)
        assert settings.project_path("scene") == tmp_path.resolve() / "scene"

    @pytest.mark.unit
    def test_project_path_does_not_follow_link(self, tmp_path: Path):
        (tmp_path / "elsewhere").mkdir()
        (tmp_path / "scene").symlink_to(tmp_path / "elsewhere", target_is_directory=True)
        settings = Settings(output_dir=tmp_path)
        assert settings.project_path("scene") == tmp_path.resolve() / "scene"


class TestFromEnv:
    @pytest.mark.unit
    def test_without_variables(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()
        assert settings.package_manager == "npm"
        assert settings.verbose is False

    @pytest.mark.unit
    def test_with_variables(self, tmp_path: Path):
        env = {
            "VITE3_OUTPUT_DIR": str(tmp_path),
            "VITE3_PACKAGE_MANAGER": "pnpm",
            "VITE3_INSTALL_TIMEOUT": "120",
            "VITE3_VERBOSE": "yes",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        assert settings.output_dir == tmp_path
        assert settings.package_manager == "pnpm"
        assert settings.install_timeout == 120
        assert settings.verbose is True

    @pytest.mark.unit
    def test_verbose_falsy(self):
        with patch.dict(os.environ, {"VITE3_VERBOSE": "0"}, clear=True):
            assert Settings.from_env().verbose is False

    @pytest.mark.unit
    def test_bad_timeout(self):
        with patch.dict(os.environ, {"VITE3_INSTALL_TIMEOUT": "soon"}, clear=True):
            with pytest.raises(ValueError):
                Settings.from_env()
