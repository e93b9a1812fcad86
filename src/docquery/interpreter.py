"""Schema-agnostic interpreter for compiled queries.

The interpreter walks an IndexedQuery edge by edge and asks an Adapter for
the data: where to start, which neighbors a vertex has, which value a field
holds. Everything that knows about the shape of the data lives in the
adapter; everything that knows about the shape of the query lives here.

Results are produced lazily. Each in-flight row is a DataContext recording
the data bound to every vertex visited so far. A context the adapter does not
hand back is dropped, which is how missing keys prune rows.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Generic, Iterable, Iterator, Mapping, TypeVar

from docquery.errors import EngineError
from docquery.ir import EdgeKind, IndexedQuery, QueryEdge, Vid

logger = logging.getLogger(__name__)

VertexT = TypeVar("VertexT")


@dataclass(frozen=True)
class DataContext(Generic[VertexT]):
    """One partial result row.

    active_vertex is the data the next adapter call operates on. vertices
    holds the data bound to each visited query vertex and values the output
    columns resolved so far. Contexts are never mutated; every step builds
    a new one.
    """
    active_vertex: VertexT | None
    vertices: Mapping[Vid, VertexT] = field(default_factory=dict)
    values: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def at_root(cls, vid: Vid, vertex: VertexT) -> DataContext[VertexT]:
        return cls(active_vertex=vertex, vertices=MappingProxyType({vid: vertex}))

    def activate(self, vid: Vid) -> DataContext[VertexT]:
        """Make the data bound to vid the active vertex."""
        return DataContext(self.vertices.get(vid), self.vertices, self.values)

    def bind(self, vid: Vid, vertex: VertexT) -> DataContext[VertexT]:
        """Bind vertex to vid and make it active."""
        vertices = dict(self.vertices)
        vertices[vid] = vertex
        return DataContext(vertex, MappingProxyType(vertices), self.values)

    def with_value(self, label: str, value: Any) -> DataContext[VertexT]:
        values = dict(self.values)
        values[label] = value
        return DataContext(self.active_vertex, self.vertices, MappingProxyType(values))


ContextIterable = Iterable[DataContext]


class Adapter(ABC, Generic[VertexT]):
    """Data access used by the interpreter.

    Subclasses implement four methods. Each receives an iterable of contexts
    and yields (context, result) pairs for the contexts it can answer; a
    context may be left out to drop its row. Implementations must not keep
    state between calls.
    """

    @abstractmethod
    def resolve_starting_vertices(
        self, edge_name: str, parameters: Mapping[str, Any]
    ) -> Iterator[VertexT]:
        """Yield the vertices a query starts from."""

    @abstractmethod
    def resolve_property(
        self, contexts: ContextIterable, type_name: str, property_name: str
    ) -> Iterator[tuple[DataContext[VertexT], Any]]:
        """Yield (context, value of property_name on the active vertex)."""

    @abstractmethod
    def resolve_neighbors(
        self,
        contexts: ContextIterable,
        type_name: str,
        edge: EdgeKind,
        parameters: Mapping[str, Any],
    ) -> Iterator[tuple[DataContext[VertexT], Iterable[VertexT]]]:
        """Yield (context, neighbors of the active vertex along edge)."""

    @abstractmethod
    def resolve_coercion(
        self, contexts: ContextIterable, type_name: str, coerce_to_type: str
    ) -> Iterator[tuple[DataContext[VertexT], bool]]:
        """Yield (context, whether the active vertex is a coerce_to_type)."""


# ---- Interpretation ----


def _expand_edge(
    adapter: Adapter[VertexT],
    query: IndexedQuery,
    edge: QueryEdge,
    contexts: Iterator[DataContext[VertexT]],
) -> Iterator[DataContext[VertexT]]:
    source = query.ir.vertices[edge.from_vid]
    target = query.ir.vertices[edge.to_vid]
    if target.filters:
        raise EngineError(f"Vertex {target.vid} has filters, which are not supported")

    activated = (ctx.activate(edge.from_vid) for ctx in contexts)
    neighbors = adapter.resolve_neighbors(activated, source.type_name, edge.kind, edge.parameters)

    expanded = (
        ctx.bind(edge.to_vid, neighbor)
        for ctx, neighbor_iter in neighbors
        for neighbor in neighbor_iter
    )

    if target.coerced_from_type is None:
        return expanded
    coerced = adapter.resolve_coercion(expanded, target.coerced_from_type, target.type_name)
    return (ctx for ctx, can_coerce in coerced if can_coerce)


def _resolve_output(
    adapter: Adapter[VertexT],
    query: IndexedQuery,
    label: str,
    contexts: Iterator[DataContext[VertexT]],
) -> Iterator[DataContext[VertexT]]:
    output = query.ir.outputs[label]
    vertex = query.ir.vertices[output.vid]
    activated = (ctx.activate(output.vid) for ctx in contexts)
    resolved = adapter.resolve_property(activated, vertex.type_name, output.field_name)
    return (ctx.with_value(label, value) for ctx, value in resolved)


def _edges_depth_first(query: IndexedQuery) -> Iterator[QueryEdge]:
    """Yield edges from the root downwards, each parent edge before its children."""
    stack = list(reversed(query.outgoing.get(query.ir.root_vid, ())))
    while stack:
        edge = stack.pop()
        yield edge
        stack.extend(reversed(query.outgoing.get(edge.to_vid, ())))


def interpret_ir(adapter: Adapter[VertexT], query: IndexedQuery) -> Iterator[dict[str, Any]]:
    """Lazily execute query against adapter, yielding one dict per result row.

    Rows map output labels (in label order) to resolved values.
    """
    ir = query.ir
    root_vid = ir.root_vid

    starting = adapter.resolve_starting_vertices(ir.root_name, ir.root_parameters)
    contexts: Iterator[DataContext[VertexT]] = (
        DataContext.at_root(root_vid, vertex) for vertex in starting
    )

    for edge in _edges_depth_first(query):
        logger.debug("expand edge %d: %d -[%s]-> %d", edge.eid, edge.from_vid, edge.edge_name, edge.to_vid)
        contexts = _expand_edge(adapter, query, edge, contexts)

    for label in ir.outputs:
        contexts = _resolve_output(adapter, query, label, contexts)

    for ctx in contexts:
        yield {label: ctx.values[label] for label in ir.outputs}
