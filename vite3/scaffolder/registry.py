"""Template registry: pure mapping from ``ProjectConfig`` to file contents.

Nothing in this module touches the filesystem.  Calling
:func:`render_project_files` twice with equal configs yields equal
``ProjectFiles`` values, byte for byte.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict

from vite3.models import FileSpec, ProjectConfig, ProjectType, Variant

from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Dispatch tables
# ---------------------------------------------------------------------------

ENTRY_SCRIPT_TEMPLATES: dict[ProjectType, str] = {
    ProjectType.BASIC: "src/main.basic.j2",
    ProjectType.SHADERS: "src/main.shaders.j2",
}

BUILD_SCRIPTS: dict[Variant, str] = {
    Variant.JAVASCRIPT: "vite build",
    Variant.TYPESCRIPT: "tsc && vite build",
}

TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2020",
        "useDefineForClassFields": True,
        "module": "ESNext",
        "lib": ["ES2020", "DOM", "DOM.Iterable"],
        "skipLibCheck": True,
        "moduleResolution": "bundler",
        "allowImportingTsExtensions": True,
        "isolatedModules": True,
        "moduleDetection": "force",
        "noEmit": True,
        "strict": True,
        "noUnusedLocals": True,
        "noUnusedParameters": True,
        "noFallthroughCasesInSwitch": True,
    },
    "include": ["src"],
}


# ---------------------------------------------------------------------------
# Rendered file set
# ---------------------------------------------------------------------------


class ProjectFiles(BaseModel):
    """Every file the scaffolder writes, by role.

    Optional roles are ``None`` when the configuration does not call for them.
    """

    model_config = ConfigDict(frozen=True)

    index_html: FileSpec
    entry_script: FileSpec
    stylesheet: FileSpec
    vertex_shader: FileSpec | None = None
    fragment_shader: FileSpec | None = None
    package_json: FileSpec
    tsconfig: FileSpec | None = None
    glsl_declaration: FileSpec | None = None
    bundler_config: FileSpec
    gitignore: FileSpec

    def all(self) -> tuple[FileSpec, ...]:
        """Present files, in the order the builder writes them."""
        ordered = (
            self.index_html,
            self.entry_script,
            self.stylesheet,
            self.vertex_shader,
            self.fragment_shader,
            self.package_json,
            self.tsconfig,
            self.glsl_declaration,
            self.bundler_config,
            self.gitignore,
        )
        return tuple(f for f in ordered if f is not None)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def build_context(config: ProjectConfig) -> dict[str, Any]:
    """Build the Jinja2 template context from the project config."""
    return {
        "project_name": config.project_name,
        "project_type": config.project_type.value,
        "typed": config.typed,
        "tailwind": config.tailwind,
        "script_ext": config.variant.extension,
    }


def package_manifest(config: ProjectConfig) -> dict[str, Any]:
    """The ``package.json`` document; dependencies are added by the installer."""
    return {
        "name": npm_package_name(config.project_name),
        "private": True,
        "version": "1.0.0",
        "description": "Vite Three.js Project",
        "type": "module",
        "scripts": {
            "dev": "vite",
            "build": BUILD_SCRIPTS[config.variant],
            "preview": "vite preview",
        },
    }


def render_project_files(
    config: ProjectConfig, renderer: TemplateRenderer | None = None
) -> ProjectFiles:
    """Render every file for *config*.

    Raises:
        KeyError: If a project type has no entry-script template registered.
    """
    renderer = renderer or TemplateRenderer()
    ctx = build_context(config)
    ext = config.variant.extension

    files: dict[str, FileSpec | None] = {
        "index_html": FileSpec(
            relative_path="index.html",
            content=renderer.render("index.html.j2", ctx),
        ),
        "entry_script": FileSpec(
            relative_path=f"src/main.{ext}",
            content=renderer.render(ENTRY_SCRIPT_TEMPLATES[config.project_type], ctx),
        ),
        "stylesheet": FileSpec(
            relative_path="src/styles.css",
            content=renderer.render("src/styles.css.j2", ctx),
        ),
        "package_json": FileSpec(
            relative_path="package.json",
            content=_dump_json(package_manifest(config)),
        ),
        "bundler_config": FileSpec(
            relative_path=f"vite.config.{ext}",
            content=renderer.render("vite.config.j2", ctx),
        ),
        "gitignore": FileSpec(
            relative_path=".gitignore",
            content=renderer.render("gitignore.j2", ctx),
        ),
    }

    if config.shaders:
        files["vertex_shader"] = FileSpec(
            relative_path="src/shaders/vertex.glsl",
            content=renderer.render("src/shaders/vertex.glsl.j2", ctx),
        )
        files["fragment_shader"] = FileSpec(
            relative_path="src/shaders/fragment.glsl",
            content=renderer.render("src/shaders/fragment.glsl.j2", ctx),
        )

    # The shim declares the shape of any ``*.glsl`` import, so every typed
    # build gets it whether or not it ships shaders.
    if config.typed:
        files["tsconfig"] = FileSpec(
            relative_path="tsconfig.json",
            content=_dump_json(TSCONFIG),
        )
        files["glsl_declaration"] = FileSpec(
            relative_path="src/glsl.d.ts",
            content=renderer.render("src/glsl.d.ts.j2", ctx),
        )

    return ProjectFiles(**files)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def npm_package_name(project_name: str) -> str:
    """npm rejects upper-case package names; the directory keeps its casing."""
    return project_name.lower()


def _dump_json(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2) + "\n"
