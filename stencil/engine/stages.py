"""The four rendering stages and the pipeline that chains them.

Order is fixed: iteration, conditionals, helper calls, plain variables.
Every stage re-tokenizes its input, since directives handled by a later
stage may only exist once an earlier stage has expanded a block.
"""

from __future__ import annotations

from .errors import RenderError
from .helpers import HelperRegistry
from .resolver import MISSING, Scope, is_sequence, is_truthy, resolve, to_text
from .tokenizer import TAG, Token, find_blocks, tokenize


def _splice(source: str, tokens: list[Token], kind: str, expand) -> str:
    """Replace each top-level *kind* block of *source* with ``expand(...)``.

    ``expand`` receives the block argument and the raw body between the
    markers.  Text outside the blocks is copied unchanged.
    """
    out: list[str] = []
    pos = 0
    for opener, closer in find_blocks(tokens, kind):
        out.append(source[pos:opener.start])
        out.append(expand(opener.content, source[opener.end:closer.start]))
        pos = closer.end
    out.append(source[pos:])
    return "".join(out)


class Pipeline:
    """Runs template fragments through the four stages against a scope.

    A pipeline borrows the engine's helper registry for the duration of one
    render call and holds no other state, so it can be re-entered for every
    ``each`` element.
    """

    def __init__(self, helpers: HelperRegistry, template_name: str | None = None) -> None:
        self.helpers = helpers
        self.template_name = template_name

    def run(self, source: str, scope: Scope) -> str:
        """Render *source* through all four stages."""
        text = self.expand_iterations(source, scope)
        text = self.evaluate_conditionals(text, scope)
        text = self.apply_helpers(text, scope)
        return self.substitute_variables(text, scope)

    # -- Stage 1: each blocks ---------------------------------------------

    def expand_iterations(self, source: str, scope: Scope) -> str:
        tokens = tokenize(source)

        def expand(path: str, body: str) -> str:
            items = resolve(path, scope)
            if not is_sequence(items):
                return ""
            parts: list[str] = []
            for index, element in enumerate(items):
                element_scope = scope.child(element, index, len(items))
                prepared = _bind_element(body, element_scope)
                parts.append(self.run(prepared, element_scope))
            return "".join(parts)

        return _splice(source, tokens, "each", expand)

    # -- Stage 2: if blocks -----------------------------------------------

    def evaluate_conditionals(self, source: str, scope: Scope) -> str:
        tokens = tokenize(source)

        def expand(path: str, body: str) -> str:
            if not is_truthy(resolve(path, scope)):
                return ""
            return self.evaluate_conditionals(body, scope)

        return _splice(source, tokens, "if", expand)

    # -- Stage 3: helper calls --------------------------------------------

    def apply_helpers(self, source: str, scope: Scope) -> str:
        out: list[str] = []
        for token in tokenize(source):
            raw = source[token.start:token.end]
            if token.kind != TAG:
                out.append(raw)
                continue
            parts = token.content.split()
            helper = self.helpers.get(parts[0]) if len(parts) > 1 else None
            if helper is None:
                out.append(raw)
                continue
            name, paths = parts[0], parts[1:]
            args = [resolve(path, scope) for path in paths]
            try:
                result = helper(*args)
            except Exception as exc:
                where = f" in template '{self.template_name}'" if self.template_name else ""
                raise RenderError(
                    f"Helper '{name}' failed on '{' '.join(paths)}'{where}: {exc}",
                    template_name=self.template_name,
                    helper_name=name,
                ) from exc
            out.append(to_text(result))
        return "".join(out)

    # -- Stage 4: plain variables -----------------------------------------

    def substitute_variables(self, source: str, scope: Scope) -> str:
        out: list[str] = []
        for token in tokenize(source):
            raw = source[token.start:token.end]
            if token.kind == TAG and token.content and len(token.content.split()) == 1:
                value = resolve(token.content, scope)
                out.append(raw if value is MISSING else to_text(value))
            else:
                out.append(raw)
        return "".join(out)


def _bind_element(body: str, scope: Scope) -> str:
    """Inject loop bindings and the element's own fields into *body*.

    Only plain ``{{name}}`` directives outside nested ``each`` blocks are
    touched, so inner loops keep their own ``@`` bindings and fields.
    """
    tokens = tokenize(body)
    nested = [(o.start, c.end) for o, c in find_blocks(tokens, "each")]
    own = scope.fields

    out: list[str] = []
    for token in tokens:
        raw = body[token.start:token.end]
        inside = any(start <= token.start < end for start, end in nested)
        if token.kind == TAG and not inside:
            name = token.content
            if name in scope.bindings:
                out.append(to_text(scope.bindings[name]))
                continue
            if name in own:
                out.append(to_text(own[name]))
                continue
        out.append(raw)
    return "".join(out)
