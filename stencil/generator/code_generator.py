"""CRUD code generation on top of the template engine.

The :class:`CodeGenerator` registers the built-in templates on an
:class:`~stencil.engine.Engine`, renders them with contexts assembled from a
:class:`CrudModuleOptions` request, and writes the results into a frontend
project::

    generator = CodeGenerator(Config())
    result = await generator.generate_crud_module({
        "module": "user-profile",
        "model": "UserProfile",
        "project_path": "/work/my-app",
        "fields": [{"name": "email", "type": "email", "required": True}],
    })
"""

from __future__ import annotations

import asyncio
import json
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from stencil.config import Config
from stencil.engine import Engine, RenderResult
from stencil.engine.helpers import Helper, kebab_case, pascal_case
from stencil.utils import console, print_warning, write_file

from .models import CrudModuleOptions, CrudModuleResult, GeneratedFile
from .project_index import (
    INDEX_FILE,
    module_slug,
    update_api_index,
    update_mock_index,
    update_pages_index,
    update_routes_index,
)
from .templates import REQUIRED_FIELDS, register_builtin_templates


CRUD_OPERATIONS = ["create", "read", "update", "delete"]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class CodeGenerationError(Exception):
    """Raised when a generation request cannot be completed."""

    def __init__(self, message: str, *, module: str | None = None) -> None:
        self.module = module
        super().__init__(message)


class ProjectNotFound(CodeGenerationError):
    """Raised when the target project directory does not exist."""

    def __init__(self, project_path: Path) -> None:
        self.project_path = project_path
        super().__init__(f"Project path does not exist: {project_path}")


class InvalidTemplateContext(CodeGenerationError):
    """Raised when a context lacks fields a built-in template requires."""

    def __init__(self, template_name: str, missing: list[str], provided: list[str]) -> None:
        self.template_name = template_name
        self.missing = missing
        self.provided = provided
        super().__init__(
            f"Missing required fields for template '{template_name}': {', '.join(missing)}"
        )


# ---------------------------------------------------------------------------
# CodeGenerator
# ---------------------------------------------------------------------------


class CodeGenerator:
    """Renders built-in and custom templates into project files."""

    def __init__(self, config: Config | None = None, engine: Engine | None = None) -> None:
        self.config = config or Config()
        if engine is None:
            engine = Engine()
            register_builtin_templates(engine)
        else:
            register_builtin_templates(engine, replace=False)
        self.engine = engine
        if self.config.template_dir is not None:
            loaded = self.engine.load_directory(
                self.config.template_dir, self.config.default_extension
            )
            self._log(f"Loaded {len(loaded)} templates from {self.config.template_dir}")

    # -- Registration ------------------------------------------------------

    def register_template(self, name: str, body: str, extension: str | None = None) -> None:
        self.engine.register_template(name, body, extension or self.config.default_extension)
        self._log(f"Registered template: {name}")

    def register_helper(self, name: str, fn: Helper) -> None:
        self.engine.register_helper(name, fn)
        self._log(f"Registered helper: {name}")

    # -- Rendering ---------------------------------------------------------

    def render(self, name: str, context: Mapping[str, Any] | None = None) -> RenderResult:
        """Render *name*, applying :func:`format_code` when configured."""
        rendered = self.engine.render(name, context)
        if not self.config.format_output:
            return rendered
        content = format_code(rendered.content, _file_type(rendered.extension))
        return RenderResult(content=content, extension=rendered.extension)

    def validate_context(self, name: str, context: Mapping[str, Any]) -> None:
        """Check *context* carries every field template *name* needs.

        Templates without declared requirements always pass.

        Raises:
            InvalidTemplateContext: Listing the missing field names.
        """
        required = REQUIRED_FIELDS.get(name, [])
        missing = [field for field in required if field not in context]
        if missing:
            raise InvalidTemplateContext(name, missing, sorted(context))

    async def generate_from_template(
        self,
        name: str,
        context: Mapping[str, Any],
        output_path: str | Path,
    ) -> GeneratedFile:
        """Render template *name* and write it to *output_path*.

        Parent directories are created automatically.
        """
        rendered = self.render(name, context)
        out = Path(output_path)
        await asyncio.to_thread(write_file, out, rendered.content)
        self._log(f"Generated file from template '{name}': {out}")
        return GeneratedFile(path=out, template=name, content=rendered.content)

    # -- CRUD modules ------------------------------------------------------

    async def generate_crud_module(
        self, options: CrudModuleOptions | Mapping[str, Any]
    ) -> CrudModuleResult:
        """Generate model config, pages, API config, routes and mock data.

        Files land under the directories named by ``config.paths``; the
        project index files are then updated through
        :meth:`update_project_structure`.

        Raises:
            ProjectNotFound: If ``project_path`` is not an existing directory.
            CodeGenerationError: Wrapping any other failure, with the original
                exception as ``__cause__``.
        """
        if not isinstance(options, CrudModuleOptions):
            options = CrudModuleOptions.model_validate(options)

        module = options.module
        project = options.project_path
        if not await asyncio.to_thread(project.is_dir):
            raise ProjectNotFound(project)

        console_prefix = f"[cyan]{module}[/cyan]"
        self._log(f"{console_prefix} generating CRUD module for model {options.model}")

        try:
            context = self.build_crud_context(options)
            paths = self.config.paths
            slug = module_slug(module)
            model_slug = module_slug(options.model)

            plan: list[tuple[str, str, dict[str, Any], Path]] = [
                ("model_config", "model-config",
                 {**context, "name": pascal_case(options.model)},
                 project / paths.configs / model_slug),
                ("list_page", "vue-list-page", context,
                 project / paths.pages / slug / f"{slug}-list"),
                ("detail_page", "vue-detail-page", context,
                 project / paths.pages / slug / f"{slug}-detail"),
                ("api_config", "api-config", context, project / paths.apis / slug),
                ("routes", "route-config", context, project / paths.routes / slug),
                ("mock_data", "mock-data", context, project / paths.mock / slug),
            ]

            files: list[GeneratedFile] = []
            written: dict[str, Path] = {}
            for key, template_name, ctx, stem in plan:
                self.validate_context(template_name, ctx)
                extension = self.engine.templates.get(template_name).extension
                target = stem.with_name(stem.name + extension)
                generated = await self.generate_from_template(template_name, ctx, target)
                files.append(generated)
                written[key] = generated.path
        except CodeGenerationError:
            raise
        except Exception as exc:
            raise CodeGenerationError(
                f"Failed to generate CRUD module {module}: {exc}", module=module
            ) from exc

        indexes = await self.update_project_structure(project, module)
        self._log(f"{console_prefix} generated {len(files)} files")
        return CrudModuleResult(
            module=module,
            model=options.model,
            endpoint=context["endpoint"],
            files=files,
            summary={
                "model_config": str(written["model_config"]),
                "pages": [str(written["list_page"]), str(written["detail_page"])],
                "api_config": str(written["api_config"]),
                "routes": str(written["routes"]),
                "mock_data": str(written["mock_data"]),
                "indexes": [str(path) for path in indexes],
                "total_files": len(files),
            },
        )

    async def update_project_structure(self, project: Path, module: str) -> list[Path]:
        """Add *module* to the project's API, routes, mock and pages indexes.

        Failures are reported as warnings and never raised.  The pages index
        is only extended, so a project without one gets a warning.

        Returns:
            The index files that were created or changed.
        """
        paths = self.config.paths
        mock_dir = Path(paths.mock)
        steps = [
            ("API", update_api_index, (project / paths.apis / INDEX_FILE, module)),
            ("routes", update_routes_index, (project / paths.routes / INDEX_FILE, module)),
            ("mock", update_mock_index,
             (project / mock_dir.parent / INDEX_FILE, module, mock_dir.name)),
            ("pages", update_pages_index, (project / paths.pages / INDEX_FILE, module)),
        ]

        updated: list[Path] = []
        for label, update, args in steps:
            index_path = args[0]
            try:
                changed = await asyncio.to_thread(update, *args)
            except OSError as exc:
                print_warning(f"Failed to update {label} index {index_path}: {exc}")
                continue
            if changed:
                updated.append(index_path)
                self._log(f"Updated {label} index: {index_path}")
        return updated

    def build_crud_context(self, options: CrudModuleOptions) -> dict[str, Any]:
        """Assemble the shared template context for one CRUD module."""
        endpoint = options.endpoint or f"/api/{kebab_case(options.model)}"
        custom_methods = [m.model_dump() for m in options.custom_methods]
        return {
            "name": options.module,
            "model": options.model,
            "title": options.title or options.module,
            "endpoint": endpoint,
            "fields": [f.model_dump(exclude_none=True) for f in options.fields],
            "operations": list(CRUD_OPERATIONS),
            "customActionsConfig": json.dumps(
                {m["key"]: m["description"] for m in custom_methods}, ensure_ascii=False
            ),
            "customMethods": custom_methods,
            "requiresAuth": options.requires_auth,
            "permissions": list(options.permissions),
            "hasModelConfig": True,
            "inlineConfig": False,
            "hasCustomActions": options.has_custom_actions,
            "noCustomActions": not options.has_custom_actions,
            "validationRules": options.validation_rules,
            "formLayout": options.form_layout,
            "submitText": options.submit_text,
            "cancelText": options.cancel_text,
        }

    # -- Internal ----------------------------------------------------------

    def _log(self, message: str) -> None:
        if self.config.verbose:
            console.print(f"  [dim]{message}[/dim]")


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

_FILE_TYPES: dict[str, str] = {
    ".js": "javascript",
    ".mjs": "javascript",
    ".ts": "javascript",
    ".vue": "vue",
    ".json": "json",
}


def _file_type(extension: str) -> str:
    return _FILE_TYPES.get(extension.lower(), "text")


def format_code(content: str, file_type: str = "javascript") -> str:
    """Tidy generated code.

    ``javascript`` and ``vue`` collapse runs of blank lines and re-indent
    brace blocks with two spaces; ``json`` is re-serialised when it parses;
    anything else is returned unchanged.
    """
    if file_type in ("javascript", "vue"):
        return _format_javascript(content)
    if file_type == "json":
        try:
            return json.dumps(json.loads(content), indent=2, ensure_ascii=False)
        except json.JSONDecodeError:
            return content
    return content


def _format_javascript(content: str) -> str:
    content = re.sub(r"\n\s*\n\s*\n", "\n\n", content)

    indent = 0
    lines: list[str] = []
    for line in content.split("\n"):
        stripped = line.strip()
        if "}" in stripped and "{" not in stripped:
            indent = max(0, indent - 1)
        lines.append("  " * indent + stripped if stripped else "")
        if "{" in stripped and "}" not in stripped:
            indent += 1
    return "\n".join(lines)
