"""Translate convenience flags into WHERE-clause fragments."""

from __future__ import annotations

from typing import List, Optional

from ..errors import ConfigError, FilterSyntaxError
from .lexer import tokenize


def quote_literal(value: str) -> str:
    """Render ``value`` as a single-quoted string literal."""
    return "'" + value.replace("'", "''") + "'"


def check_grouping(where: str) -> None:
    """Reject free text whose parentheses would not stay inside one group.

    Raises:
        FilterSyntaxError: On a stray ')' or an unclosed '('
    """
    depth = 0
    for tok in tokenize(where):
        if tok.kind == "LPAREN":
            depth += 1
        elif tok.kind == "RPAREN":
            depth -= 1
            if depth < 0:
                raise FilterSyntaxError(
                    "unbalanced parentheses: unexpected ')'", tok.text, tok.pos
                )
    if depth:
        raise FilterSyntaxError("unbalanced parentheses: expected ')'")


def build_where_clause(
    wired: bool = False,
    wireless: bool = False,
    blocked: bool = False,
    ap_mac: Optional[str] = None,
    where: Optional[str] = None,
) -> str:
    """Combine flag fragments and free text with AND.

    Fragment order: wired/wireless, blocked, access point, free text. The
    free text is parenthesized so its own OR/AND precedence is preserved.

    Args:
        wired: Only wired clients (``is_wired = 1``)
        wireless: Only wireless clients (``is_wired = 0``)
        blocked: Only blocked clients (``blocked = 1``)
        ap_mac: Only clients attached to this access point MAC
        where: Free-text WHERE clause

    Returns:
        Combined clause, or "" when nothing is active

    Raises:
        ConfigError: If both ``wired`` and ``wireless`` are set
        FilterSyntaxError: If ``where`` has unbalanced parentheses

    Examples:
        >>> build_where_clause(wireless=True, where="signal >= -60")
        'is_wired = 0 AND (signal >= -60)'
    """
    if wired and wireless:
        raise ConfigError("--wired and --wireless are mutually exclusive")

    conditions: List[str] = []
    if wired:
        conditions.append("is_wired = 1")
    if wireless:
        conditions.append("is_wired = 0")
    if blocked:
        conditions.append("blocked = 1")
    if ap_mac:
        conditions.append(f"ap_mac = {quote_literal(ap_mac)}")
    if where and where.strip():
        check_grouping(where)
        conditions.append(f"({where})")

    return " AND ".join(conditions)


__all__ = ["build_where_clause", "check_grouping", "quote_literal"]
