"""Directive tokenizer and paired-block matcher.

Templates are split into literal text and ``{{...}}`` directives.  Paired
directives (``#each``/``/each`` and ``#if``/``/if``) are matched with a depth
counter per directive kind, so a block always closes on its own marker no
matter how deeply blocks of the same kind are nested inside it.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass


TEXT = "text"
OPEN = "open"
CLOSE = "close"
TAG = "tag"

BLOCK_KINDS = ("each", "if")

_DIRECTIVE_RE = re.compile(r"\{\{([^{}]*)\}\}")
_OPEN_RE = re.compile(r"#(\w+)(?:\s+(.*))?$", re.DOTALL)
_CLOSE_RE = re.compile(r"/(\w+)$")


@dataclass(frozen=True)
class Token:
    """A slice of template source.

    ``content`` is the stripped directive body for ``tag`` tokens, the block
    argument for ``open`` tokens and the raw text for ``text`` tokens.
    ``block`` names the directive kind of ``open``/``close`` tokens.
    """

    kind: str
    content: str
    start: int
    end: int
    block: str = ""


def tokenize(source: str) -> list[Token]:
    """Split *source* into text and directive tokens."""
    tokens: list[Token] = []
    pos = 0
    for match in _DIRECTIVE_RE.finditer(source):
        if match.start() > pos:
            tokens.append(Token(TEXT, source[pos:match.start()], pos, match.start()))
        tokens.append(_classify(match.group(1).strip(), match.start(), match.end()))
        pos = match.end()
    if pos < len(source):
        tokens.append(Token(TEXT, source[pos:], pos, len(source)))
    return tokens


def _classify(body: str, start: int, end: int) -> Token:
    opened = _OPEN_RE.match(body)
    if opened and opened.group(1) in BLOCK_KINDS:
        return Token(OPEN, (opened.group(2) or "").strip(), start, end, opened.group(1))
    closed = _CLOSE_RE.match(body)
    if closed and closed.group(1) in BLOCK_KINDS:
        return Token(CLOSE, "", start, end, closed.group(1))
    return Token(TAG, body, start, end)


def find_blocks(tokens: list[Token], kind: str) -> Iterator[tuple[Token, Token]]:
    """Yield the outermost ``(open, close)`` token pairs of one block kind.

    Blocks of other kinds are ignored entirely.  Stray closing markers and
    opening markers that never close are skipped, leaving them as literal
    text in whatever the caller emits.
    """
    depth = 0
    opener: Token | None = None
    for token in tokens:
        if token.block != kind:
            continue
        if token.kind == OPEN:
            if depth == 0:
                opener = token
            depth += 1
        elif token.kind == CLOSE and depth > 0:
            depth -= 1
            if depth == 0 and opener is not None:
                yield opener, token
                opener = None
