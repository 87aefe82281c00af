"""Shared pytest fixtures for the stencil test suite.

Provides reusable fixtures for:
- Fresh, isolated template engines
- A code generator bound to a temporary configuration
- Temporary frontend project directories
- Sample CRUD field definitions and module requests
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from stencil.config import Config
from stencil.engine import Engine
from stencil.generator import CodeGenerator


# ---------------------------------------------------------------------------
# Engines
# ---------------------------------------------------------------------------

@pytest.fixture
def engine() -> Engine:
    """A new engine with only the built-in helpers registered."""
    return Engine()


@pytest.fixture
def render(engine: Engine):
    """Render an inline template body through a registered template.

    Registers the body as template ``"t"`` so the full ``render`` path,
    including extension handling, is exercised.
    """

    def _render(body: str, context: dict[str, Any] | None = None) -> str:
        engine.register_template("t", body)
        return engine.render("t", context or {}).content

    return _render


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Temporary frontend project directory (auto-cleanup)."""
    project_dir = tmp_path / "demo-app"
    (project_dir / "src").mkdir(parents=True)
    yield project_dir


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Configuration writing into the temporary directory."""
    return Config(output_dir=tmp_path)


@pytest.fixture
def generator(config: Config) -> CodeGenerator:
    """A code generator with the built-in templates registered."""
    return CodeGenerator(config)


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_fields() -> list[dict[str, Any]]:
    """Field definitions for a small user-profile model."""
    return [
        {"name": "username", "label": "Username", "type": "string", "required": True, "sortable": True},
        {"name": "email", "label": "Email", "type": "email", "required": True},
        {"name": "age", "label": "Age", "type": "number", "width": 80},
        {
            "name": "status",
            "label": "Status",
            "type": "string",
            "component": "ui-select",
            "options": [{"label": "Active", "value": 1}, {"label": "Disabled", "value": 0}],
        },
    ]


@pytest.fixture
def crud_request(tmp_project_dir: Path, sample_fields) -> dict[str, Any]:
    """A complete CRUD module request for ``user-profile``."""
    return {
        "module": "user-profile",
        "model": "UserProfile",
        "project_path": str(tmp_project_dir),
        "title": "User Profile",
        "fields": sample_fields,
        "permissions": ["user:read", "user:write"],
    }
