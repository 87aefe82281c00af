"""Index-file maintenance for generated CRUD modules.

A generated module only becomes reachable once the project's aggregating
``index.js`` files import it.  Each ``update_*`` function adds the module to
one index, creating the file when that kind of index may start empty, and
returns ``True`` when it wrote something.  Re-running for the same module
leaves the index untouched.
"""

from __future__ import annotations

import re
from pathlib import Path

from stencil.engine.helpers import camel_case, kebab_case, pascal_case
from stencil.utils import sanitize_name, write_file


INDEX_FILE = "index.js"

_FIRST_IMPORT = re.compile(r"(import.*\n)")


def module_slug(module: str) -> str:
    """File-system name of a module: kebab case with unsafe characters dropped."""
    return sanitize_name(kebab_case(module))


def _insert_import(content: str, statement: str) -> str:
    """Place *statement* after the first import line, or at the top."""
    if _FIRST_IMPORT.search(content):
        return _FIRST_IMPORT.sub(lambda m: m.group(1) + statement + "\n", content, count=1)
    return f"{statement}\n\n{content}"


def update_api_index(index_path: Path, module: str) -> bool:
    slug = module_slug(module)
    statement = f"export {{ default as {camel_case(module)} }} from './{slug}.js';"
    if not index_path.exists():
        write_file(index_path, statement + "\n")
        return True

    content = index_path.read_text(encoding="utf-8")
    if f"from './{slug}.js'" in content:
        return False
    write_file(index_path, content + "\n" + statement)
    return True


def update_routes_index(index_path: Path, module: str) -> bool:
    """Import ``<module>Routes`` and spread it into ``export const routes``."""
    slug = module_slug(module)
    routes = f"{camel_case(module)}Routes"
    statement = f"import {{ {routes} }} from './{slug}.js';"
    if not index_path.exists():
        write_file(
            index_path,
            f"{statement}\n\nexport const routes = [\n  ...{routes}\n];\n",
        )
        return True

    content = index_path.read_text(encoding="utf-8")
    if f"from './{slug}.js'" in content:
        return False

    updated = _insert_import(content, statement)
    if "export const routes = [" in content:
        updated = updated.replace(
            "export const routes = [", f"export const routes = [\n  ...{routes},", 1
        )
    else:
        updated += f"\nexport const routes = [\n  ...{routes}\n];\n"
    write_file(index_path, updated)
    return True


def update_mock_index(index_path: Path, module: str, mock_dir: str = "apis") -> bool:
    """Register ``get<Module>Apis`` inside ``setupMockServer``.

    *mock_dir* is the directory of the mock modules relative to the index.
    """
    slug = module_slug(module)
    setup = f"get{pascal_case(module)}Apis"
    source = f"./{mock_dir}/{slug}.js"
    statement = f"import {{ {setup} }} from '{source}';"
    if not index_path.exists():
        write_file(
            index_path,
            f"{statement}\n\nexport function setupMockServer(server) {{\n"
            f"  {setup}(server);\n}}\n",
        )
        return True

    content = index_path.read_text(encoding="utf-8")
    if f"from '{source}'" in content:
        return False

    updated = _insert_import(content, statement)
    opener = "export function setupMockServer(server) {"
    if opener in content:
        updated = updated.replace(opener, f"{opener}\n  {setup}(server);", 1)
    else:
        updated += f"\n{opener}\n  {setup}(server);\n}}\n"
    write_file(index_path, updated)
    return True


def update_pages_index(index_path: Path, module: str) -> bool:
    """Re-export the module's pages from an existing pages index.

    Raises:
        FileNotFoundError: If the project has no pages index.
    """
    slug = module_slug(module)
    content = index_path.read_text(encoding="utf-8")
    if f"from './{slug}'" in content:
        return False
    write_file(index_path, content + "\n" + f"export * from './{slug}';")
    return True
