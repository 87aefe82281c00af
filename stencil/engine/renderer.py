"""Template engine entry point.

:class:`Engine` owns a :class:`TemplateStore` and a :class:`HelperRegistry`
and renders registered templates against plain-data contexts::

    engine = Engine()
    engine.register_template("greeting", "Hello {{pascalCase name}}!", ".txt")
    engine.render("greeting", {"name": "user-profile"}).content
    # -> "Hello UserProfile!"

Each engine is an isolated instance; nothing is shared at module level.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .helpers import Helper, HelperRegistry, register_builtin_helpers
from .resolver import Scope
from .stages import Pipeline
from .store import DEFAULT_EXTENSION, Template, TemplateStore


TEMPLATE_SUFFIX = ".tmpl"


@dataclass(frozen=True)
class RenderResult:
    """Output of a single render call."""

    content: str
    extension: str


class Engine:
    """Directive template engine.

    Args:
        builtin_helpers: Install ``camelCase``, ``pascalCase``, ``kebabCase``,
            ``snakeCase``, ``json`` and ``mockValue`` on construction.
    """

    def __init__(self, *, builtin_helpers: bool = True) -> None:
        self.templates = TemplateStore()
        self.helpers = HelperRegistry()
        if builtin_helpers:
            register_builtin_helpers(self.helpers)

    # -- Configuration -----------------------------------------------------

    def register_template(
        self, name: str, body: str, extension: str = DEFAULT_EXTENSION
    ) -> Template:
        """Register (or replace) the template called *name*."""
        template = Template(name=name, body=body, extension=extension)
        self.templates.register(template)
        return template

    def register_helper(self, name: str, fn: Helper) -> None:
        """Register (or replace) the helper called *name*."""
        self.helpers.register(name, fn)

    def load_directory(
        self, directory: str | Path, default_extension: str = DEFAULT_EXTENSION
    ) -> list[str]:
        """Register every ``*.tmpl`` file found under *directory*.

        ``user-card.vue.tmpl`` becomes template ``user-card`` with extension
        ``.vue``; a file without an inner extension gets *default_extension*.
        Nested directories are scanned too and the relative directory is kept
        in the name (``pages/list.vue.tmpl`` -> ``pages/list``).

        Returns:
            Sorted names of the templates registered.
        """
        root = Path(directory)
        if not root.is_dir():
            return []

        names: list[str] = []
        for path in sorted(root.rglob(f"*{TEMPLATE_SUFFIX}")):
            rel = path.relative_to(root).as_posix()[: -len(TEMPLATE_SUFFIX)]
            stem, dot, ext = rel.rpartition(".")
            if dot and "/" not in ext:
                name, extension = stem, f".{ext}"
            else:
                name, extension = rel, default_extension
            self.register_template(name, path.read_text(encoding="utf-8"), extension)
            names.append(name)
        return sorted(names)

    def clear(self) -> None:
        """Drop every registered template.  Helpers are kept."""
        self.templates.clear()

    def list_templates(self) -> list[str]:
        return self.templates.list()

    def list_helpers(self) -> list[str]:
        return self.helpers.list()

    # -- Rendering ---------------------------------------------------------

    def render(self, name: str, context: Mapping[str, Any] | None = None) -> RenderResult:
        """Render the template called *name* against *context*.

        Raises:
            TemplateNotFound: If *name* is not registered.
            RenderError: If a helper raises while rendering.
        """
        template = self.templates.get(name)
        content = Pipeline(self.helpers, template.name).run(
            template.body, Scope.root(context)
        )
        return RenderResult(content=content, extension=template.extension)

    def render_string(self, source: str, context: Mapping[str, Any] | None = None) -> str:
        """Render an unregistered template body and return the text."""
        return Pipeline(self.helpers).run(source, Scope.root(context))
