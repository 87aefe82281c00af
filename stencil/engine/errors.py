"""Exceptions raised by the template engine."""

from __future__ import annotations


class TemplateEngineError(Exception):
    """Base exception for template engine errors."""


class TemplateNotFound(TemplateEngineError):
    """Raised when a render is requested for an unregistered template name."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        listing = ", ".join(available) if available else "none"
        super().__init__(f"Template '{name}' not found (available: {listing})")


class RenderError(TemplateEngineError):
    """Raised when a helper fails during rendering.

    The helper's original exception is kept as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        template_name: str | None = None,
        helper_name: str | None = None,
    ) -> None:
        self.template_name = template_name
        self.helper_name = helper_name
        super().__init__(message)
