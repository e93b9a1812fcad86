"""Adapter exposing a document Value tree to the interpreter.

The document is a single tree and every query starts at its root. Named
edges step into mapping keys. The wildcard edge steps into each element of
a sequence, or into its own key on a mapping. Properties are string values
stored under mapping keys.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping

from docquery.interpreter import Adapter, ContextIterable, DataContext
from docquery.ir import EdgeKind, NamedEdge, WildcardFanOut
from docquery.values import (
    BoolValue,
    MappingValue,
    NullValue,
    NumberValue,
    SequenceValue,
    StringValue,
    TaggedValue,
    Value,
)

logger = logging.getLogger(__name__)


def lookup_string(value: Value | None, name: str) -> str | None:
    """Return the string stored under name if value is a mapping holding one."""
    if not isinstance(value, MappingValue):
        return None
    found = value.get(name)
    if found is None:
        return None
    if isinstance(found, StringValue):
        return found.value
    if isinstance(found, (NullValue, BoolValue, NumberValue, SequenceValue, MappingValue, TaggedValue)):
        # Present but not a string: no coercion
        return None
    raise TypeError(f"Not a document value: {found!r}")


def neighbors_of(value: Value | None, edge: EdgeKind) -> tuple[Value, ...] | None:
    """Return the children reached from value along edge, or None if there are none.

    The wildcard fans out over a sequence; on anything else it is looked up
    as an ordinary key named after its marker.
    """
    if isinstance(edge, WildcardFanOut):
        if isinstance(value, SequenceValue):
            return value.items
        key = edge.marker
    elif isinstance(edge, NamedEdge):
        key = edge.name
    else:
        raise TypeError(f"Unknown edge kind: {edge!r}")
    if isinstance(value, MappingValue) and key in value:
        return (value.get(key),)
    return None


class TreeAdapter(Adapter[Value]):
    """Answers interpreter requests from one read-only Value tree."""

    def __init__(self, root: Value) -> None:
        self.root = root

    def resolve_starting_vertices(
        self, edge_name: str, parameters: Mapping[str, Any]
    ) -> Iterator[Value]:
        yield self.root

    def resolve_property(
        self, contexts: ContextIterable, type_name: str, property_name: str
    ) -> Iterator[tuple[DataContext[Value], str]]:
        for ctx in contexts:
            node = ctx.active_vertex
            result = lookup_string(node, property_name)
            logger.debug(
                "property %r of type %s on %s: %r",
                property_name, type_name, getattr(node, "kind", None), result,
            )
            if result is not None:
                yield ctx, result

    def resolve_neighbors(
        self,
        contexts: ContextIterable,
        type_name: str,
        edge: EdgeKind,
        parameters: Mapping[str, Any],
    ) -> Iterator[tuple[DataContext[Value], Iterable[Value]]]:
        for ctx in contexts:
            children = neighbors_of(ctx.active_vertex, edge)
            if children is not None:
                yield ctx, children

    def resolve_coercion(
        self, contexts: ContextIterable, type_name: str, coerce_to_type: str
    ) -> Iterator[tuple[DataContext[Value], bool]]:
        # Every vertex has the same type, so nothing ever coerces
        for ctx in contexts:
            yield ctx, False
