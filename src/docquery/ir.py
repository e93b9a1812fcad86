"""Intermediate representation of a compiled query.

A query is a tree of vertices joined by edges. Vertex 1 is the synthetic
root bound to the whole document; every other vertex is reached from its
parent by exactly one edge. Outputs name a field to read on a vertex.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, NewType, Union

from docquery.errors import CompilationError

Vid = NewType("Vid", int)
Eid = NewType("Eid", int)


# ---- Edge kinds ----


@dataclass(frozen=True)
class NamedEdge:
    """Step into the value stored under a mapping key."""
    name: str


@dataclass(frozen=True)
class WildcardFanOut:
    """Step into every element of a sequence."""
    marker: str = "*"


EdgeKind = Union[NamedEdge, WildcardFanOut]


# ---- IR records ----


@dataclass(frozen=True)
class QueryVertex:
    vid: Vid
    type_name: str
    coerced_from_type: str | None = None
    filters: tuple[Any, ...] = ()


@dataclass(frozen=True)
class QueryEdge:
    eid: Eid
    from_vid: Vid
    to_vid: Vid
    kind: EdgeKind
    parameters: Mapping[str, Any] = field(default_factory=dict)
    optional: bool = False
    recursive: int | None = None

    @property
    def edge_name(self) -> str:
        if isinstance(self.kind, WildcardFanOut):
            return self.kind.marker
        return self.kind.name


@dataclass(frozen=True)
class OutputBinding:
    """Resolving field_name on vertex vid yields the column called label."""
    label: str
    vid: Vid
    field_name: str
    value_type: str


@dataclass(frozen=True)
class IRQuery:
    root_vid: Vid
    root_name: str
    vertices: Mapping[Vid, QueryVertex]
    edges: Mapping[Eid, QueryEdge]
    outputs: Mapping[str, OutputBinding]
    root_parameters: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the maps in key order: vid, eid and label
        object.__setattr__(self, "vertices", MappingProxyType(dict(sorted(self.vertices.items()))))
        object.__setattr__(self, "edges", MappingProxyType(dict(sorted(self.edges.items()))))
        object.__setattr__(self, "outputs", MappingProxyType(dict(sorted(self.outputs.items()))))
        object.__setattr__(self, "root_parameters", MappingProxyType(dict(self.root_parameters)))


@dataclass(frozen=True)
class IndexedQuery:
    """An IRQuery plus lookup tables used by the interpreter."""
    ir: IRQuery
    outgoing: Mapping[Vid, tuple[QueryEdge, ...]]

    @classmethod
    def from_ir(cls, ir: IRQuery) -> IndexedQuery:
        """Index an IRQuery, checking that it describes a tree rooted at root_vid."""
        if ir.root_vid not in ir.vertices:
            raise CompilationError(f"Root vertex {ir.root_vid} is not defined")

        outgoing: dict[Vid, list[QueryEdge]] = {}
        incoming: dict[Vid, QueryEdge] = {}
        for eid, edge in ir.edges.items():
            if edge.eid != eid:
                raise CompilationError(f"Edge {eid} is stored under the wrong id {edge.eid}")
            for vid in (edge.from_vid, edge.to_vid):
                if vid not in ir.vertices:
                    raise CompilationError(f"Edge {eid} references undefined vertex {vid}")
            if edge.from_vid != ir.root_vid and edge.from_vid not in incoming:
                # Edges run in id order, so the source must already be reached
                raise CompilationError(
                    f"Edge {eid} leaves vertex {edge.from_vid} before any edge reaches it"
                )
            if edge.to_vid == ir.root_vid:
                raise CompilationError(f"Edge {eid} points back at the root vertex")
            if edge.to_vid in incoming:
                raise CompilationError(
                    f"Vertex {edge.to_vid} has more than one incoming edge "
                    f"({incoming[edge.to_vid].eid} and {eid})"
                )
            incoming[edge.to_vid] = edge
            outgoing.setdefault(edge.from_vid, []).append(edge)

        for vid, vertex in ir.vertices.items():
            if vertex.vid != vid:
                raise CompilationError(f"Vertex {vid} is stored under the wrong id {vertex.vid}")
            if vid != ir.root_vid and vid not in incoming:
                raise CompilationError(f"Vertex {vid} is not reachable from the root")

        for label, output in ir.outputs.items():
            if output.vid not in ir.vertices:
                raise CompilationError(f"Output '{label}' references undefined vertex {output.vid}")

        return cls(
            ir=ir,
            outgoing=MappingProxyType({vid: tuple(edges) for vid, edges in outgoing.items()}),
        )
