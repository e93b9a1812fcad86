"""Parsing module for the node query notation."""

from docquery.parsing.node_parser import (
    NodeEntry,
    NodeParser,
    QueryNode,
    format_literal,
    walk_nodes,
)

__all__ = [
    "NodeEntry",
    "NodeParser",
    "QueryNode",
    "format_literal",
    "walk_nodes",
]
