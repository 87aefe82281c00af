"""Command-line interface for stencil.

Usage::

    python -m stencil.cli list
    python -m stencil.cli render api-config --context ctx.json -o out.js
    python -m stencil.cli crud module.json --project ./my-app
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Any

from stencil.config import Config
from stencil.engine import TemplateEngineError
from stencil.generator import CodeGenerationError, CodeGenerator
from stencil.utils import (
    console,
    load_json,
    print_error,
    print_success,
    print_summary_table,
    write_file,
)


def _cmd_list(generator: CodeGenerator, args: Any) -> int:
    for name in generator.engine.list_templates():
        extension = generator.engine.templates.get(name).extension
        console.print(f"  {name} [dim]({extension})[/dim]")
    return 0


def _cmd_render(generator: CodeGenerator, args: Any) -> int:
    context = load_json(args.context) if args.context else {}
    if args.validate:
        generator.validate_context(args.template, context)
    rendered = generator.render(args.template, context)
    if args.output:
        out = generator.config.output_dir / args.output
        write_file(out, rendered.content)
        print_success(f"Wrote {out}")
    else:
        sys.stdout.write(rendered.content)
    return 0


def _cmd_crud(generator: CodeGenerator, args: Any) -> int:
    request = load_json(args.spec)
    if args.project:
        request["project_path"] = args.project
    request.setdefault("project_path", str(generator.config.output_dir))
    result = asyncio.run(generator.generate_crud_module(request))
    print_summary_table(
        {
            "Module": result.module,
            "Model": result.model,
            "Endpoint": result.endpoint,
            "Files": result.total_files,
        },
        title="CRUD module generated",
    )
    for generated in result.files:
        console.print(f"  [green]+[/green] {generated.path}")
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``python -m stencil.cli``."""
    import argparse

    parser = argparse.ArgumentParser(
        description="stencil -- template-driven CRUD code generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m stencil.cli list\n"
            "  python -m stencil.cli render route-config --context ctx.json\n"
            "  python -m stencil.cli crud module.json --project ./my-app\n"
        ),
    )
    parser.add_argument(
        "--templates",
        default=None,
        help="Directory of *.tmpl files to register on top of the built-ins",
    )
    parser.add_argument("--format", action="store_true", help="Format generated code")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List registered templates")

    render = sub.add_parser("render", help="Render one template")
    render.add_argument("template", help="Template name")
    render.add_argument("--context", "-c", default=None, help="JSON file with the context")
    render.add_argument("--output", "-o", default=None, help="Write to a file (relative to the output directory) instead of stdout")
    render.add_argument(
        "--validate", action="store_true", help="Check required context fields first"
    )

    crud = sub.add_parser("crud", help="Generate a CRUD module")
    crud.add_argument("spec", help="JSON file describing the module")
    crud.add_argument("--project", "-p", default=None, help="Frontend project directory (defaults to the output directory)")

    args = parser.parse_args(argv)

    config = Config.from_env()
    if args.templates:
        config.template_dir = Path(args.templates)
    if args.format:
        config.format_output = True
    if args.verbose:
        config.verbose = True

    handlers = {"list": _cmd_list, "render": _cmd_render, "crud": _cmd_crud}
    try:
        generator = CodeGenerator(config)
        code = handlers[args.command](generator, args)
    except (TemplateEngineError, CodeGenerationError, OSError, ValueError) as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
