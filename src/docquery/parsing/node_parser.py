"""Parser for the node query notation.

A query document is a sequence of nodes. Each node has a name, zero or more
entries (positional arguments or key=value properties) and an optional block
of child nodes:

    kind "Deployment"
    metadata {
        name "@name"
    }
    spec { containers { * { image "@image" } } }
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Iterator

import ply.yacc as yacc

from docquery.parsing.node_lexer import NodeLexer

_PARSER_DIR = os.path.dirname(os.path.abspath(__file__))

_QUOTE_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}


def format_literal(value: Any) -> str:
    """Render a parsed value back to its canonical literal text.

    Strings are always double-quoted, whatever their source spelling
    (quoted, raw or bare identifier).
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    return '"' + "".join(_QUOTE_ESCAPES.get(ch, ch) for ch in value) + '"'


@dataclass(frozen=True)
class NodeEntry:
    """A value attached to a node: a positional argument or a property."""

    value: Any  # str, int, float, bool or None
    literal: str  # canonical text of the value, e.g. '"@name"'
    name: str | None = None  # property key; None for positional arguments
    type_annotation: str | None = None


@dataclass(frozen=True)
class QueryNode:
    """One node of a parsed query document."""

    name: str
    entries: tuple[NodeEntry, ...] = ()
    children: tuple[QueryNode, ...] | None = None
    type_annotation: str | None = None


def walk_nodes(nodes: tuple[QueryNode, ...]) -> Iterator[QueryNode]:
    """Yield every node depth-first, in document order."""
    for node in nodes:
        yield node
        if node.children:
            yield from walk_nodes(node.children)


class NodeParser:
    """Parser for node query documents."""

    tokens = NodeLexer.tokens

    def __init__(self) -> None:
        self.lexer = NodeLexer()
        self.lexer.build()
        self.parser: yacc.LRParser = None  # type: ignore

    # ---- Document structure ----

    def p_document(self, p: yacc.YaccProduction) -> None:
        """document : nodes"""
        p[0] = p[1]

    def p_nodes_empty(self, p: yacc.YaccProduction) -> None:
        """nodes : seps_opt"""
        p[0] = ()

    def p_nodes_list(self, p: yacc.YaccProduction) -> None:
        """nodes : seps_opt node_list seps_opt"""
        p[0] = tuple(n for n in p[2] if n is not None)

    def p_node_list_single(self, p: yacc.YaccProduction) -> None:
        """node_list : node"""
        p[0] = [p[1]]

    def p_node_list_multi(self, p: yacc.YaccProduction) -> None:
        """node_list : node_list seps node"""
        p[0] = p[1] + [p[3]]

    def p_seps(self, p: yacc.YaccProduction) -> None:
        """seps : NEWLINE
                | SEMICOLON
                | seps NEWLINE
                | seps SEMICOLON"""
        pass

    def p_seps_opt(self, p: yacc.YaccProduction) -> None:
        """seps_opt : seps
                    | """
        pass

    # ---- Nodes ----

    def p_node(self, p: yacc.YaccProduction) -> None:
        """node : node_body"""
        p[0] = p[1]

    def p_node_slashdash(self, p: yacc.YaccProduction) -> None:
        """node : SLASHDASH node_body"""
        p[0] = None

    def p_node_body(self, p: yacc.YaccProduction) -> None:
        """node_body : node_name entries children_opt"""
        p[0] = QueryNode(name=p[1], entries=tuple(p[2]), children=p[3])

    def p_node_body_typed(self, p: yacc.YaccProduction) -> None:
        """node_body : type_annotation node_name entries children_opt"""
        p[0] = QueryNode(name=p[2], entries=tuple(p[3]), children=p[4], type_annotation=p[1])

    def p_node_name(self, p: yacc.YaccProduction) -> None:
        """node_name : IDENTIFIER
                     | STRING"""
        p[0] = p[1]

    def p_type_annotation(self, p: yacc.YaccProduction) -> None:
        """type_annotation : LPAREN IDENTIFIER RPAREN
                           | LPAREN STRING RPAREN"""
        p[0] = p[2]

    # ---- Entries ----

    def p_entries_empty(self, p: yacc.YaccProduction) -> None:
        """entries : """
        p[0] = []

    def p_entries_multi(self, p: yacc.YaccProduction) -> None:
        """entries : entries entry"""
        p[0] = p[1] + [p[2]]

    def p_entries_slashdash(self, p: yacc.YaccProduction) -> None:
        """entries : entries SLASHDASH entry"""
        p[0] = p[1]

    def p_entry_argument(self, p: yacc.YaccProduction) -> None:
        """entry : value"""
        value, annotation = p[1]
        p[0] = NodeEntry(value=value, literal=format_literal(value), type_annotation=annotation)

    def p_entry_property(self, p: yacc.YaccProduction) -> None:
        """entry : IDENTIFIER EQUALS value
                 | STRING EQUALS value"""
        value, annotation = p[3]
        p[0] = NodeEntry(
            value=value, literal=format_literal(value), name=p[1], type_annotation=annotation
        )

    def p_value(self, p: yacc.YaccProduction) -> None:
        """value : literal"""
        p[0] = (p[1], None)

    def p_value_typed(self, p: yacc.YaccProduction) -> None:
        """value : type_annotation literal"""
        p[0] = (p[2], p[1])

    def p_literal(self, p: yacc.YaccProduction) -> None:
        """literal : STRING
                   | IDENTIFIER
                   | INTEGER
                   | FLOAT"""
        p[0] = p[1]

    def p_literal_true(self, p: yacc.YaccProduction) -> None:
        """literal : TRUE"""
        p[0] = True

    def p_literal_false(self, p: yacc.YaccProduction) -> None:
        """literal : FALSE"""
        p[0] = False

    def p_literal_null(self, p: yacc.YaccProduction) -> None:
        """literal : NULL"""
        p[0] = None

    # ---- Children ----

    def p_children_opt_empty(self, p: yacc.YaccProduction) -> None:
        """children_opt : """
        p[0] = None

    def p_children_opt(self, p: yacc.YaccProduction) -> None:
        """children_opt : children_block"""
        p[0] = p[1]

    def p_children_opt_slashdash(self, p: yacc.YaccProduction) -> None:
        """children_opt : SLASHDASH children_block children_opt"""
        p[0] = p[3]

    def p_children_block(self, p: yacc.YaccProduction) -> None:
        """children_block : LBRACE nodes RBRACE"""
        p[0] = p[2]

    def p_error(self, p: yacc.YaccProduction) -> None:
        if p:
            raise SyntaxError(f"Syntax error at {p.value!r} (line {p.lineno})")
        raise SyntaxError("Syntax error at end of input")

    def build(self, **kwargs: Any) -> None:
        """Build the parser."""
        kwargs.setdefault("debug", False)
        kwargs.setdefault("write_tables", True)
        kwargs.setdefault("outputdir", _PARSER_DIR)
        kwargs.setdefault("tabmodule", "docquery.parsing._node_parsetab")
        kwargs.setdefault("errorlog", yacc.NullLogger())
        self.parser = yacc.yacc(module=self, start="document", **kwargs)

    def parse(self, data: str) -> tuple[QueryNode, ...]:
        """Parse a query document into its top-level nodes."""
        if self.parser is None:
            self.build()
        self.lexer.lexer.lineno = 1
        return self.parser.parse(data, lexer=self.lexer.lexer)
