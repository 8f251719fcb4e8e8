"""
  Lexer

Turns raw source text into a flat stream of (token_type, token_value) tuples:

    - digit runs       -> ("integer", int)
    - identifiers      -> ("identifier", str)   e.g. define, make-adder
    - operator chars   -> ("identifier", str)   e.g. +, *, =
    - ( and )          -> ("lparen", "("), ("rparen", ")")

Any other character (whitespace, stray punctuation) separates tokens and is
otherwise ignored. Decimal literals are not part of the language: a '.'
directly after a digit run is a syntax error.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

from sch.types.errors import SchSyntaxError

logger = logging.getLogger(__name__)

Token = tuple[str, object]

INTEGER_RE = re.compile(r"[0-9]+")
IDENTIFIER_RE = re.compile(r"[^\W\d_][\w\-?!*]*")
# Characters that would continue a malformed number, e.g. 1.5, 12abc or 12é
BAD_NUMBER_TAIL_RE = re.compile(r"[.\w]")

OPERATOR_CHARS = frozenset("+-*/=<>")


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)

    while pos < n:
        current_char = source[pos]

        if current_char.isdigit() and current_char.isascii():
            m = INTEGER_RE.match(source, pos)
            pos = m.end()
            if pos < n and BAD_NUMBER_TAIL_RE.match(source, pos):
                if source[pos] == ".":
                    raise SchSyntaxError(
                        f"Decimal literals are not supported at {m.start()}: "
                        f"{source[m.start():pos + 1]!r}"
                    )
                raise SchSyntaxError(
                    f"Malformed number at {m.start()}: {source[m.start():pos + 1]!r}"
                )
            yield "integer", int(m.group())
            continue

        if current_char.isalpha():
            m = IDENTIFIER_RE.match(source, pos)
            pos = m.end()
            yield "identifier", m.group()
            continue

        if current_char in OPERATOR_CHARS:
            yield "identifier", current_char
            pos += 1
            continue

        if current_char == "(":
            yield "lparen", "("
        elif current_char == ")":
            yield "rparen", ")"
        pos += 1


def tokenize(source: str) -> list[Token]:
    """Eagerly lex `source` into a list of tokens."""
    tokens = list(lex(source))
    logger.debug("Token vector from lexer: %r", tokens)
    return tokens
