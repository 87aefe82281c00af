"""Helper registry and the built-in template helpers.

Helpers are plain callables taking the resolved directive argument(s) and
returning something the renderer coerces to text.  ``{{pascalCase name}}``
calls ``pascal_case(<value of name>)``; extra arguments are passed
positionally, e.g. ``{{mockValue type @index}}``.
"""

from __future__ import annotations

import json
import random
import re
from typing import Any, Callable

from .resolver import MISSING, to_text


Helper = Callable[..., Any]


# ---------------------------------------------------------------------------
# HelperRegistry
# ---------------------------------------------------------------------------


class HelperRegistry:
    """Name-keyed map of helper functions.

    Registering an existing name replaces the previous helper.  Lookups of
    unknown names return ``None`` rather than raising, since an unknown
    helper directive is passed through to the output untouched.
    """

    def __init__(self) -> None:
        self._helpers: dict[str, Helper] = {}

    def register(self, name: str, fn: Helper) -> None:
        if not callable(fn):
            raise TypeError(f"Helper '{name}' must be callable, got {type(fn).__name__}")
        self._helpers[name] = fn

    def get(self, name: str) -> Helper | None:
        return self._helpers.get(name)

    def list(self) -> list[str]:
        return sorted(self._helpers)

    def clear(self) -> None:
        self._helpers.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._helpers

    def __len__(self) -> int:
        return len(self._helpers)


# ---------------------------------------------------------------------------
# Identifier case conversion
# ---------------------------------------------------------------------------


def _words(value: Any) -> list[str]:
    """Split an identifier into words on separators and case humps."""
    if value is MISSING or value is None:
        raise TypeError("case helpers need a string value, got undefined")
    text = to_text(value)
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1 \2", text)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", s1)
    return [w for w in re.split(r"[-_\s.]+", s2) if w]


def pascal_case(value: Any) -> str:
    """``user-profile`` / ``user_profile`` / ``userProfile`` -> ``UserProfile``."""
    return "".join(w[0].upper() + w[1:].lower() for w in _words(value))


def camel_case(value: Any) -> str:
    """``user-profile`` -> ``userProfile``."""
    pascal = pascal_case(value)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


def kebab_case(value: Any) -> str:
    """``UserProfile`` -> ``user-profile``."""
    return "-".join(w.lower() for w in _words(value))


def snake_case(value: Any) -> str:
    """``UserProfile`` -> ``user_profile``."""
    return "_".join(w.lower() for w in _words(value))


# ---------------------------------------------------------------------------
# Serialisation and mock data
# ---------------------------------------------------------------------------


def to_json(value: Any) -> str:
    """Pretty-print *value* as JSON with a 2-space indent."""
    if value is MISSING:
        raise TypeError("json helper needs a value, got undefined")
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def mock_value(field_type: Any = "string", index: Any = 0) -> str:
    """Return a JavaScript literal placeholder for a field of *field_type*.

    Output only depends on ``(field_type, index)``: numbers and booleans come
    from a generator seeded with both, so repeated renders are identical.
    """
    kind = "" if field_type is MISSING or field_type is None else to_text(field_type)
    n = 0 if index is MISSING or index is None else int(index)
    ordinal = n + 1
    rng = random.Random(f"{kind}:{n}")

    if kind == "string":
        return f"'Sample text {ordinal}'"
    if kind == "number":
        return str(rng.randint(1, 1000))
    if kind == "boolean":
        return "true" if rng.random() > 0.5 else "false"
    if kind == "date":
        return f"new Date('2024-01-{n % 28 + 1:02d}').toISOString()"
    if kind == "email":
        return f"'user{ordinal}@example.com'"
    if kind == "phone":
        return f"'138{ordinal:08d}'"
    if kind == "url":
        return f"'https://example.com/item{ordinal}'"
    return f"'Default value {ordinal}'"


BUILTIN_HELPERS: dict[str, Helper] = {
    "camelCase": camel_case,
    "pascalCase": pascal_case,
    "kebabCase": kebab_case,
    "snakeCase": snake_case,
    "json": to_json,
    "mockValue": mock_value,
}


def register_builtin_helpers(registry: HelperRegistry) -> None:
    """Install :data:`BUILTIN_HELPERS` into *registry*."""
    for name, fn in BUILTIN_HELPERS.items():
        registry.register(name, fn)
