"""vite3 scaffolder -- renders and writes a Vite + three.js project.

This package takes a ``ProjectConfig`` and turns it into files on disk:
templates are rendered by the registry, laid out as a step plan, and the
plan is executed by the builder together with the dependency installer.

Quick usage::

    from vite3.models import ProjectConfig
    from vite3.scaffolder import (
        DependencyInstaller, ProjectBuilder, build_step_plan, render_project_files,
    )

    config = ProjectConfig(project_name="my-scene")
    installer = DependencyInstaller()
    plan = build_step_plan(
        config, render_project_files(config), installer.commands_for(config)
    )
    builder = ProjectBuilder("./my-scene", installer)
    await builder.prepare_target(overwrite=False)
    await builder.execute(plan, progress)
"""

from vite3.scaffolder.generator import ProjectBuilder, build_step_plan
from vite3.scaffolder.installer import DependencyInstaller
from vite3.scaffolder.registry import ProjectFiles, render_project_files
from vite3.scaffolder.templates import TemplateRenderer

__all__ = [
    "DependencyInstaller",
    "ProjectBuilder",
    "ProjectFiles",
    "TemplateRenderer",
    "build_step_plan",
    "render_project_files",
]
