"""Compile parsed query nodes into the graph IR.

Every query node becomes a vertex plus the edge that reaches it from its
parent. A node whose first entry is a quoted "@label" also declares an
output: the value stored under the node's name, read on the parent vertex.
A node named "*" fans out over a sequence.
"""

from __future__ import annotations

import logging
from typing import Iterable

from docquery.config import DEFAULT_CONFIG, QueryConfig
from docquery.errors import CompilationError
from docquery.ir import (
    EdgeKind,
    Eid,
    IRQuery,
    NamedEdge,
    OutputBinding,
    QueryEdge,
    QueryVertex,
    Vid,
    WildcardFanOut,
)
from docquery.parsing import NodeParser, QueryNode

logger = logging.getLogger(__name__)

Vertices = dict[Vid, QueryVertex]
Edges = dict[Eid, QueryEdge]
Outputs = dict[str, OutputBinding]


class IdAllocator:
    """Hands out increasing ids starting at 1. One instance per compilation."""

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def allocate(self) -> int:
        value = self._next
        self._next += 1
        return value


def extract_label(literal: str, sigil: str = "@") -> str | None:
    """Return the output label declared by a literal such as '"@name"'.

    Works on the literal text alone: anything that does not start with a
    quote followed by the sigil is ordinary content and yields None. '"@"'
    declares the empty label.

    Literals built by the parser are always closed, so the unterminated case
    only arises for raw literal text passed in directly.
    """
    prefix = '"' + sigil
    if not literal.startswith(prefix):
        return None
    if len(literal) <= len(prefix) or not literal.endswith('"'):
        raise CompilationError(f"Unterminated output label literal {literal}")
    return literal[len(prefix):-1]


def _edge_kind(node: QueryNode, config: QueryConfig) -> EdgeKind:
    if node.name == config.wildcard:
        return WildcardFanOut(marker=config.wildcard)
    return NamedEdge(node.name)


def _add_output(outputs: Outputs, output: OutputBinding) -> None:
    # Later declarations in document order replace earlier ones
    existing = outputs.get(output.label)
    if existing is not None:
        logger.debug(
            "output %r on field %r replaces field %r",
            output.label, output.field_name, existing.field_name,
        )
    outputs[output.label] = output


def compile_nodes(
    nodes: Iterable[QueryNode],
    parent_vid: Vid,
    vids: IdAllocator,
    eids: IdAllocator,
    config: QueryConfig = DEFAULT_CONFIG,
) -> tuple[Vertices, Edges, Outputs]:
    """Compile sibling nodes hanging off parent_vid, recursing into children."""
    vertices: Vertices = {}
    edges: Edges = {}
    outputs: Outputs = {}

    for node in nodes:
        vid = Vid(vids.allocate())
        vertices[vid] = QueryVertex(vid=vid, type_name=config.vertex_type)

        if node.entries:
            # The first entry binds, whether positional or key=value
            label = extract_label(node.entries[0].literal, config.sigil)
            if label is not None:
                # Read on the parent: the node's name is a key of the parent's mapping
                _add_output(outputs, OutputBinding(
                    label=label,
                    vid=parent_vid,
                    field_name=node.name,
                    value_type=config.output_type,
                ))

        eid = Eid(eids.allocate())
        edges[eid] = QueryEdge(
            eid=eid,
            from_vid=parent_vid,
            to_vid=vid,
            kind=_edge_kind(node, config),
        )
        logger.debug("node %r -> vertex %d via edge %d from %d", node.name, vid, eid, parent_vid)

        if node.children:
            child_vertices, child_edges, child_outputs = compile_nodes(
                node.children, vid, vids, eids, config
            )
            vertices.update(child_vertices)
            edges.update(child_edges)
            for output in child_outputs.values():
                _add_output(outputs, output)

    return vertices, edges, outputs


def compile_query(nodes: Iterable[QueryNode], config: QueryConfig = DEFAULT_CONFIG) -> IRQuery:
    """Compile a parsed query document into an IRQuery rooted at vertex 1."""
    vids = IdAllocator()
    eids = IdAllocator()

    root_vid = Vid(vids.allocate())
    vertices: Vertices = {root_vid: QueryVertex(vid=root_vid, type_name=config.vertex_type)}

    child_vertices, edges, outputs = compile_nodes(nodes, root_vid, vids, eids, config)
    vertices.update(child_vertices)

    logger.debug(
        "compiled %d vertices, %d edges, outputs %s",
        len(vertices), len(edges), sorted(outputs),
    )
    return IRQuery(
        root_vid=root_vid,
        root_name=config.root_name,
        vertices=vertices,
        edges=edges,
        outputs=outputs,
    )


class QueryCompiler:
    """Parses query text and compiles it, reusing one parser."""

    def __init__(self, config: QueryConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self._parser: NodeParser | None = None

    def _get_parser(self) -> NodeParser:
        if self._parser is None:
            self._parser = NodeParser()
            self._parser.build()
        return self._parser

    def parse(self, text: str) -> tuple[QueryNode, ...]:
        return self._get_parser().parse(text)

    def compile(self, text: str) -> IRQuery:
        return compile_query(self.parse(text), self.config)
