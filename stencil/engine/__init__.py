"""Directive template engine.

Supports ``{{path}}`` interpolation, ``{{helper path}}`` helper calls,
``{{#if path}}...{{/if}}`` conditionals and ``{{#each path}}...{{/each}}``
iteration with ``@index``, ``@key``, ``@first`` and ``@last`` bindings.
"""

from stencil.engine.errors import RenderError, TemplateEngineError, TemplateNotFound
from stencil.engine.helpers import BUILTIN_HELPERS, HelperRegistry
from stencil.engine.renderer import Engine, RenderResult
from stencil.engine.resolver import MISSING, Scope, resolve
from stencil.engine.store import Template, TemplateStore

__all__ = [
    "BUILTIN_HELPERS",
    "Engine",
    "HelperRegistry",
    "MISSING",
    "RenderError",
    "RenderResult",
    "Scope",
    "Template",
    "TemplateEngineError",
    "TemplateNotFound",
    "TemplateStore",
    "resolve",
]
