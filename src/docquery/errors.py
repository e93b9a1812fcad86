"""Exceptions raised by docquery.

Malformed query or document text raises the builtin SyntaxError.
"""


class CompilationError(ValueError):
    """A query tree could not be turned into a valid IR."""


class EngineError(RuntimeError):
    """Interpreting a compiled query failed."""
