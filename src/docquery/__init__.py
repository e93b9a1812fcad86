"""docquery - query YAML/JSON documents with nested node patterns."""

from docquery.adapter import TreeAdapter
from docquery.compiler import IdAllocator, QueryCompiler, compile_nodes, compile_query, extract_label
from docquery.config import DEFAULT_CONFIG, QueryConfig
from docquery.engine import QueryEngine, run
from docquery.errors import CompilationError, EngineError
from docquery.interpreter import Adapter, DataContext, interpret_ir
from docquery.ir import (
    IndexedQuery,
    IRQuery,
    NamedEdge,
    OutputBinding,
    QueryEdge,
    QueryVertex,
    WildcardFanOut,
)
from docquery.parsing import NodeParser, QueryNode
from docquery.values import load_document

__all__ = [
    # Main API
    "run",
    "QueryEngine",
    "QueryConfig",
    "DEFAULT_CONFIG",
    # Compilation
    "NodeParser",
    "QueryNode",
    "QueryCompiler",
    "IdAllocator",
    "compile_nodes",
    "compile_query",
    "extract_label",
    # IR
    "IRQuery",
    "IndexedQuery",
    "QueryVertex",
    "QueryEdge",
    "NamedEdge",
    "WildcardFanOut",
    "OutputBinding",
    # Execution
    "Adapter",
    "DataContext",
    "TreeAdapter",
    "interpret_ir",
    "load_document",
    # Errors
    "CompilationError",
    "EngineError",
]

__version__ = "0.1.0"
