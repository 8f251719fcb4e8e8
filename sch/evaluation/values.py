"""Conversion of parsed syntax nodes into runtime values.

The transform is structural and total: identifiers become Symbols, integers
stay integers and lists are converted element by element. Nothing is
evaluated here.
"""

from __future__ import annotations

from sch import LispValue
from sch.reader.parser import Identifier, Node
from sch.types.symbol import Symbol


def from_node(node: Node) -> LispValue:
    if isinstance(node, Identifier):
        return Symbol(node.name)
    if isinstance(node, list):
        return from_nodes(node)
    return node


def from_nodes(nodes: list[Node]) -> list[LispValue]:
    return [from_node(node) for node in nodes]
