"""Query engine: parses, compiles and runs node queries against documents."""

from __future__ import annotations

import logging
from typing import Any

from docquery.adapter import TreeAdapter
from docquery.compiler import QueryCompiler
from docquery.config import DEFAULT_CONFIG, QueryConfig
from docquery.errors import EngineError
from docquery.interpreter import Adapter, interpret_ir
from docquery.ir import IndexedQuery, IRQuery
from docquery.values import Value, load_document

logger = logging.getLogger(__name__)

Row = dict[str, Any]


class QueryEngine:
    """Runs node queries over YAML/JSON documents.

    One engine can be reused for many queries; it keeps only the config and
    a lazily built parser.
    """

    def __init__(self, config: QueryConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self._compiler: QueryCompiler | None = None

    def _get_compiler(self) -> QueryCompiler:
        if self._compiler is None:
            self._compiler = QueryCompiler(self.config)
        return self._compiler

    # ---- Public API ----

    def compile(self, query_text: str) -> IndexedQuery:
        """Parse and compile query text. Raises SyntaxError or CompilationError."""
        ir = self._get_compiler().compile(query_text)
        return IndexedQuery.from_ir(ir)

    def execute(self, query: IndexedQuery | IRQuery, document: Value | Adapter) -> list[Row]:
        """Run a compiled query against a loaded document (or any adapter).

        All rows are materialized before returning; a failure part way
        through raises EngineError and no rows are returned.
        """
        if isinstance(query, IRQuery):
            query = IndexedQuery.from_ir(query)
        adapter = document if isinstance(document, Adapter) else TreeAdapter(document)

        try:
            rows = [dict(row) for row in interpret_ir(adapter, query)]
        except EngineError:
            raise
        except Exception as exc:
            raise EngineError(f"Query execution failed: {exc}") from exc

        logger.info(
            "query with %d vertices, %d edges, %d outputs returned %d rows",
            len(query.ir.vertices), len(query.ir.edges), len(query.ir.outputs), len(rows),
        )
        return rows

    def run(self, query_text: str, document_text: str) -> list[Row]:
        """Parse both inputs, then execute. Parse errors abort before execution."""
        query = self.compile(query_text)
        document = load_document(document_text)
        return self.execute(query, document)


def run(query_text: str, document_text: str, config: QueryConfig | None = None) -> list[Row]:
    """Run query_text against document_text and return the result rows.

    Each row maps output labels, in label order, to string values.
    """
    return QueryEngine(config or DEFAULT_CONFIG).run(query_text, document_text)
