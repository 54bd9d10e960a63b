"""Tokenizer for WHERE-clause filter text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, List, Optional

from ..errors import FilterSyntaxError

KEYWORDS = frozenset(
    {"AND", "OR", "NOT", "BETWEEN", "IN", "LIKE", "ESCAPE", "TRUE", "FALSE"}
)

# Longest operators first so ">=" is not read as ">" followed by "=".
_TOKEN_RE = re.compile(
    r"""
    (?P<ws>\s+)
  | (?P<number>-?(?:\d+(?:\.\d*)?|\.\d+))
  | (?P<string>'(?:[^']|'')*'|"(?:[^"]|"")*")
  | (?P<ident>[A-Za-z_][A-Za-z0-9_]*)
  | (?P<op>>=|<=|!=|<>|==|=|<|>)
  | (?P<lparen>\()
  | (?P<rparen>\))
  | (?P<comma>,)
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class Token:
    """A lexical token.

    ``kind`` is one of IDENT, KEYWORD, STRING, NUMBER, OP, LPAREN, RPAREN,
    COMMA or EOF. ``value`` holds the decoded literal for STRING/NUMBER,
    the upper-cased word for KEYWORD and the operator text for OP.
    """

    kind: str
    text: str
    value: Any
    pos: int


_NUMBER_RE = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def _number(text: str) -> int | float:
    if "." in text:
        return float(text)
    return int(text)


def parse_number(text: str) -> Optional[int | float]:
    """Return ``text`` as int/float if it is a plain numeric literal, else None."""
    text = text.strip()
    if _NUMBER_RE.fullmatch(text):
        return _number(text)
    return None


def _unquote(text: str) -> str:
    quote = text[0]
    return text[1:-1].replace(quote * 2, quote)


def tokenize(text: str) -> List[Token]:
    """Split ``text`` into tokens, ending with a single EOF token.

    Raises:
        FilterSyntaxError: On an unterminated string or unknown character
    """
    tokens: List[Token] = []
    pos = 0
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            ch = text[pos]
            if ch in "'\"":
                raise FilterSyntaxError(
                    "unterminated string literal", text[pos:], pos
                )
            raise FilterSyntaxError("unexpected character", ch, pos)

        kind = match.lastgroup
        raw = match.group()
        if kind == "number":
            tokens.append(Token("NUMBER", raw, _number(raw), pos))
        elif kind == "string":
            tokens.append(Token("STRING", raw, _unquote(raw), pos))
        elif kind == "ident":
            upper = raw.upper()
            if upper in KEYWORDS:
                tokens.append(Token("KEYWORD", raw, upper, pos))
            else:
                tokens.append(Token("IDENT", raw, raw, pos))
        elif kind == "op":
            tokens.append(Token("OP", raw, raw, pos))
        elif kind != "ws":
            tokens.append(Token(kind.upper(), raw, raw, pos))
        pos = match.end()

    tokens.append(Token("EOF", "", None, len(text)))
    return tokens


__all__ = ["KEYWORDS", "Token", "parse_number", "tokenize"]
