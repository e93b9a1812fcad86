"""Lexer for the node query notation (a KDL subset)."""

from __future__ import annotations

import re

import ply.lex as lex

_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    "/": "/",
    '"': '"',
    "b": "\b",
    "f": "\f",
    "s": " ",
}

_ESCAPE_RE = re.compile(r"\\(u\{[0-9a-fA-F]{1,6}\}|\s+|.)", re.DOTALL)


def unescape(body: str) -> str:
    """Decode the escapes of a quoted string body (without the quotes)."""

    def replace(match: re.Match[str]) -> str:
        esc = match.group(1)
        if esc.startswith("u{"):
            return chr(int(esc[2:-1], 16))
        if esc.isspace():
            # Whitespace escape: the backslash swallows the following whitespace
            return ""
        if esc in _SIMPLE_ESCAPES:
            return _SIMPLE_ESCAPES[esc]
        raise SyntaxError(f"Invalid escape '\\{esc}' in string literal")

    return _ESCAPE_RE.sub(replace, body)


class NodeLexer:
    """Lexer for tokenizing node query documents."""

    # Bare keywords (KDL v1 spelling); '#true' style keywords are handled by t_KEYWORD
    reserved = {
        "true": "TRUE",
        "false": "FALSE",
        "null": "NULL",
    }

    tokens = [
        "IDENTIFIER",
        "STRING",
        "INTEGER",
        "FLOAT",
        "LBRACE",
        "RBRACE",
        "LPAREN",
        "RPAREN",
        "EQUALS",
        "SEMICOLON",
        "NEWLINE",
        "SLASHDASH",
    ] + list(reserved.values())

    t_LBRACE = r"\{"
    t_RBRACE = r"\}"
    t_LPAREN = r"\("
    t_RPAREN = r"\)"
    t_EQUALS = r"="
    t_SEMICOLON = r";"

    t_ignore = " \t\r\ufeff"

    def __init__(self) -> None:
        self.lexer: lex.Lexer = None  # type: ignore

    # Function rules are tried in definition order, so comments and
    # raw strings must precede the identifier rule.

    def t_ESCLINE(self, t: lex.LexToken) -> None:
        r"\\[ \t]*(//[^\n]*)?\r?\n"
        t.lexer.lineno += 1

    def t_BLOCK_COMMENT(self, t: lex.LexToken) -> None:
        r"/\*(.|\n)*?\*/"
        t.lexer.lineno += t.value.count("\n")

    def t_LINE_COMMENT(self, t: lex.LexToken) -> None:
        r"//[^\n]*"
        pass

    def t_SLASHDASH(self, t: lex.LexToken) -> lex.LexToken:
        r"/-"
        return t

    def t_RAW_STRING(self, t: lex.LexToken) -> lex.LexToken:
        r'r\#"(.|\n)*?"\#|r"[^"]*"'
        t.lexer.lineno += t.value.count("\n")
        t.type = "STRING"
        t.value = t.value.lstrip("r").strip("#")[1:-1]
        return t

    def t_STRING(self, t: lex.LexToken) -> lex.LexToken:
        r'"([^"\\]|\\(.|\n))*"'
        t.lexer.lineno += t.value.count("\n")
        t.value = unescape(t.value[1:-1])
        return t

    def t_KEYWORD(self, t: lex.LexToken) -> lex.LexToken:
        r"\#(true|false|null)"
        t.type = self.reserved[t.value[1:]]
        return t

    def t_FLOAT(self, t: lex.LexToken) -> lex.LexToken:
        r"[+-]?[0-9][0-9_]*(\.[0-9][0-9_]*([eE][+-]?[0-9][0-9_]*)?|[eE][+-]?[0-9][0-9_]*)"
        t.value = float(t.value.replace("_", ""))
        return t

    def t_INTEGER(self, t: lex.LexToken) -> lex.LexToken:
        r"[+-]?(0x[0-9a-fA-F][0-9a-fA-F_]*|0o[0-7][0-7_]*|0b[01][01_]*|[0-9][0-9_]*)"
        digits = t.value.replace("_", "")
        # Base 0 honours 0x/0o/0b prefixes but rejects leading zeros like "007"
        if digits.lstrip("+-")[:2] in ("0x", "0o", "0b"):
            t.value = int(digits, 0)
        else:
            t.value = int(digits)
        return t

    def t_IDENTIFIER(self, t: lex.LexToken) -> lex.LexToken:
        r'[^\s\\/(){}<>;\[\]=,"0-9\#][^\s\\/(){}<>;\[\]=,"]*'
        t.type = self.reserved.get(t.value, "IDENTIFIER")
        return t

    def t_NEWLINE(self, t: lex.LexToken) -> lex.LexToken:
        r"(\r?\n)+"
        t.lexer.lineno += t.value.count("\n")
        return t

    def t_error(self, t: lex.LexToken) -> None:
        raise SyntaxError(f"Illegal character '{t.value[0]}' at line {t.lexer.lineno}")

    # --- Lexer methods ---

    def build(self, **kwargs) -> None:  # type: ignore
        """Build the lexer."""
        self.lexer = lex.lex(module=self, **kwargs)

    def input(self, data: str) -> None:
        """Set the input string to tokenize."""
        self.lexer.lineno = 1
        self.lexer.input(data)

    def token(self) -> lex.LexToken | None:
        """Return the next token."""
        return self.lexer.token()

    def tokenize(self, data: str) -> list[lex.LexToken]:
        """Tokenize the input and return all tokens."""
        self.input(data)
        tokens = []
        while True:
            tok = self.token()
            if tok is None:
                break
            tokens.append(tok)
        return tokens
