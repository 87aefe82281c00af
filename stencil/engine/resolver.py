"""Dotted-path variable resolution and value coercion.

A :class:`Scope` is the context in effect at some point of a template.  The
root scope wraps the caller's context; every ``each`` element gets a child
scope layering the element's own fields and the synthetic ``@`` loop bindings
over its parent.  Nothing here ever writes to the caller's data.
"""

from __future__ import annotations

import json
from collections import ChainMap
from collections.abc import Mapping, Sequence
from typing import Any


# ---------------------------------------------------------------------------
# Undefined sentinel
# ---------------------------------------------------------------------------


class _Missing:
    """Marker for a path that does not resolve.  Always falsy."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


# ---------------------------------------------------------------------------
# Scope
# ---------------------------------------------------------------------------


class Scope:
    """Read-only view over a render context plus iteration bindings.

    Attributes:
        values: Name lookup chain, innermost element fields first.
        bindings: Synthetic ``@`` variables of the nearest enclosing
            ``each`` block (empty at the root).
        fields: The current element's own fields (empty at the root).
    """

    __slots__ = ("values", "bindings", "fields")

    def __init__(
        self,
        values: Mapping[str, Any] | None = None,
        bindings: Mapping[str, Any] | None = None,
        fields: Mapping[str, Any] | None = None,
    ) -> None:
        self.values: Mapping[str, Any] = values if values is not None else {}
        self.bindings: Mapping[str, Any] = dict(bindings or {})
        self.fields: Mapping[str, Any] = dict(fields or {})

    @classmethod
    def root(cls, context: Mapping[str, Any] | None) -> Scope:
        """Wrap a caller-supplied context."""
        return cls(context if isinstance(context, Mapping) else {})

    def child(self, element: Any, index: int, length: int) -> Scope:
        """Build the scope for one element of an ``each`` block."""
        own = element_fields(element)
        own["this"] = element
        bindings = {
            "@index": index,
            "@first": index == 0,
            "@last": index == length - 1,
            "@key": index if own.get("key") is None else own["key"],
        }
        return Scope(ChainMap(own, self.values), bindings, element_fields(element))


def element_fields(element: Any) -> dict[str, Any]:
    """Return a shallow copy of an element's own fields (empty for scalars)."""
    if isinstance(element, Mapping):
        return {str(k): v for k, v in element.items()}
    return {}


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def resolve(path: str, scope: Scope) -> Any:
    """Resolve a dotted *path* against *scope*.

    Returns :data:`MISSING` as soon as a segment is absent or the current
    value cannot be indexed by name.  ``@`` paths only consult the scope's
    synthetic bindings.
    """
    path = path.strip()
    if not path:
        return MISSING
    if path.startswith("@"):
        return scope.bindings.get(path, MISSING)

    value: Any = scope.values
    for part in path.split("."):
        if isinstance(value, Mapping) and part in value:
            value = value[part]
        else:
            return MISSING
    return value


def is_sequence(value: Any) -> bool:
    """Return ``True`` for values an ``each`` block may iterate."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_truthy(value: Any) -> bool:
    """Truthiness used by ``if`` blocks."""
    if value is MISSING or value is None:
        return False
    if isinstance(value, float) and value != value:  # NaN
        return False
    return bool(value)


def to_text(value: Any) -> str:
    """Coerce a resolved value to the text substituted into the output.

    Booleans and ``None`` use their JavaScript spelling since generated code
    targets JS sources.  Sequences join their items with commas, mappings are
    emitted as compact JSON.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Mapping):
        return json.dumps(value, ensure_ascii=False, default=str)
    if is_sequence(value):
        return ",".join("" if item is None else to_text(item) for item in value)
    return str(value)
