"""Configuration shared by the compiler, adapter and engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QueryConfig:
    """Naming conventions for query compilation and document traversal."""
    sigil: str = "@"                # prefix marking an output label, e.g. "@name"
    wildcard: str = "*"             # bare node name fanning out over a sequence
    vertex_type: str = "node"       # type name given to every vertex
    root_name: str = "Document"     # starting edge passed to the adapter
    output_type: str = "String"     # declared type of every output column


DEFAULT_CONFIG = QueryConfig()
