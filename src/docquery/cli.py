"""Command line entry point.

Usage:
    docquery query.kdl deployment.yaml               # rows as JSON
    docquery query.kdl deployment.yaml -f table      # aligned columns
    cat deployment.yaml | docquery query.kdl -       # document from stdin
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from docquery.config import QueryConfig
from docquery.engine import QueryEngine, Row
from docquery.errors import CompilationError, EngineError


def _format_table(rows: list[Row]) -> str:
    if not rows:
        return "(no rows)"
    columns = list(rows[0])
    widths = {c: max(len(c), *(len(str(r.get(c, ""))) for r in rows)) for c in columns}
    lines = [
        "  ".join(c.ljust(widths[c]) for c in columns).rstrip(),
        "  ".join("-" * widths[c] for c in columns),
    ]
    for row in rows:
        lines.append("  ".join(str(row.get(c, "")).ljust(widths[c]) for c in columns).rstrip())
    return "\n".join(lines)


def format_rows(rows: list[Row], fmt: str) -> str:
    if fmt == "json":
        return json.dumps(rows, indent=2)
    if fmt == "yaml":
        return yaml.safe_dump(rows, sort_keys=False, default_flow_style=False).rstrip()
    if fmt == "table":
        return _format_table(rows)
    raise ValueError(f"Unknown output format '{fmt}'")


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="docquery",
        description="Run a node query against a YAML or JSON document",
    )
    parser.add_argument("query", help="Query file in node notation")
    parser.add_argument("document", help="YAML/JSON document file, or - for stdin")
    parser.add_argument(
        "-f", "--format",
        choices=["json", "yaml", "table"],
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--sigil",
        default="@",
        help='Prefix marking output labels in the query (default: "@")',
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        query_text = Path(args.query).read_text(encoding="utf-8")
        document_text = _read(args.document)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    engine = QueryEngine(QueryConfig(sigil=args.sigil))
    try:
        rows = engine.run(query_text, document_text)
    except (SyntaxError, CompilationError, EngineError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_rows(rows, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
