"""stencil configuration.

Typed configuration for the code generator.  All settings use Pydantic v2
models so they are validated at construction time and can be serialised to
and from JSON or environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


class OutputPaths(BaseModel):
    """Project-relative directories the CRUD generator writes into.

    Paths are joined onto the project root.  Each directory may hold an
    ``index.js`` that is updated with the generated module; the mock index
    lives one level above ``mock``.
    """

    pages: str = Field(default="src/scripts/pages")
    configs: str = Field(default="src/scripts/model-config")
    apis: str = Field(default="src/scripts/config/api")
    routes: str = Field(default="src/scripts/routes")
    mock: str = Field(default="mock-server/apis")


class Config(BaseModel):
    """Global stencil configuration.

    Instances are created once by the CLI (or by the embedding server) and
    then handed to :class:`~stencil.generator.CodeGenerator`.
    """

    output_dir: Path = Field(
        default=Path("."),
        description="Base for relative CLI output paths and the default CRUD project",
    )
    template_dir: Path | None = Field(
        default=None,
        description="Directory of *.tmpl files registered on top of the built-ins",
    )
    default_extension: str = Field(default=".txt")
    format_output: bool = Field(
        default=False, description="Run generated JS/Vue/JSON through format_code"
    )
    verbose: bool = Field(default=False)
    paths: OutputPaths = Field(default_factory=OutputPaths)

    @field_validator("default_extension")
    @classmethod
    def _dotted_extension(cls, value: str) -> str:
        if value and not value.startswith("."):
            return f".{value}"
        return value

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to ``<output_dir>/stencil.json``.

        Returns:
            The path where the file was written.
        """
        target = path or (self.output_dir / "stencil.json")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            STENCIL_OUTPUT_DIR, STENCIL_TEMPLATE_DIR, STENCIL_DEFAULT_EXTENSION,
            STENCIL_FORMAT_OUTPUT, STENCIL_VERBOSE.
        """
        kwargs: dict[str, Any] = {
            "output_dir": Path(os.environ.get("STENCIL_OUTPUT_DIR", ".")),
        }
        if os.environ.get("STENCIL_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["STENCIL_TEMPLATE_DIR"])
        if os.environ.get("STENCIL_DEFAULT_EXTENSION"):
            kwargs["default_extension"] = os.environ["STENCIL_DEFAULT_EXTENSION"]
        if os.environ.get("STENCIL_FORMAT_OUTPUT"):
            kwargs["format_output"] = _env_flag(os.environ["STENCIL_FORMAT_OUTPUT"])
        if os.environ.get("STENCIL_VERBOSE"):
            kwargs["verbose"] = _env_flag(os.environ["STENCIL_VERBOSE"])
        return cls(**kwargs)


def _env_flag(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "on")
