"""
  Parser

Recursive descent over the token stream with an explicit nesting depth:

    expr := INTEGER | IDENTIFIER | '(' expr* ')'

Emits syntax nodes built from Python primitives:

    - integers    -> int
    - identifiers -> Identifier
    - lists       -> Python list of nodes
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Union

from sch.reader.lexer import Token, tokenize
from sch.types.errors import SchSyntaxError

logger = logging.getLogger(__name__)


class Identifier:
    """Syntax node for a name, before it becomes a runtime Symbol."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __eq__(self, other) -> bool:
        return isinstance(other, Identifier) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("identifier", self.name))

    def __repr__(self):
        return f"Identifier({self.name!r})"

    def __str__(self):
        return self.name


Node = Union[int, Identifier, list]

# Returned by parse_node when a ')' closes the list being collected
_LIST_CLOSED = object()


class Parser:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens: Iterator[Token] = iter(tokens)

    @classmethod
    def parse(cls, tokens: Iterable[Token]) -> list[Node]:
        """Parse a whole token sequence into its top-level nodes."""
        nodes = cls(tokens).parse_nodes(0)
        logger.debug("Nodes from parser: %r", nodes)
        return nodes

    def parse_nodes(self, depth: int) -> list[Node]:
        nodes: list[Node] = []
        while True:
            node = self.parse_node(depth)
            if node is None or node is _LIST_CLOSED:
                return nodes
            nodes.append(node)

    def parse_node(self, depth: int) -> Optional[Node]:
        tok_type, tok_val = next(self.tokens, (None, None))

        if tok_type is None:
            if depth > 0:
                raise SchSyntaxError(
                    f"Unbalanced parentheses: unexpected end of input at depth {depth}"
                )
            return None

        if tok_type == "integer":
            return tok_val

        if tok_type == "identifier":
            return Identifier(tok_val)

        if tok_type == "lparen":
            return self.parse_nodes(depth + 1)

        if tok_type == "rparen":
            if depth == 0:
                raise SchSyntaxError("Unmatched ')': no matching open paren")
            return _LIST_CLOSED

        raise SchSyntaxError(f"Unknown token: {tok_type} {tok_val}")


def parse(source: str) -> list[Node]:
    """Lex and parse `source` in one step."""
    return Parser.parse(tokenize(source))
