"""Recursive-descent parser for WHERE-clause filter expressions.

Precedence, lowest first: OR, AND, NOT, comparison, primary.

    expr      := and_expr ("OR" and_expr)*
    and_expr  := not_expr ("AND" not_expr)*
    not_expr  := "NOT" not_expr | predicate
    predicate := "(" expr ")"
               | operand cmp_op operand
               | operand ["NOT"] "BETWEEN" operand "AND" operand
               | operand ["NOT"] "IN" "(" literal ("," literal)* ")"
               | operand ["NOT"] "LIKE" string ["ESCAPE" string]
    operand   := field | literal

Field names and operand types are checked while parsing. Semantic errors
(unknown field, type mismatch) are held back until the whole text has been
parsed, so malformed input always reports its syntax error first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, NoReturn, Optional, Tuple

from ..errors import (
    FilterSemanticError,
    FilterSyntaxError,
    FilterTypeError,
    UnknownFieldError,
)
from ..models import Client
from .lexer import Token, parse_number, tokenize
from .nodes import (
    And,
    Between,
    Comparison,
    FieldRef,
    InList,
    Like,
    Literal,
    Node,
    Not,
    Operand,
    Or,
    like_to_regex,
)
from .schema import FieldType, lookup_field

# Combined nesting limit for parentheses and NOT.
MAX_DEPTH = 100


@dataclass(frozen=True)
class Predicate:
    """A compiled filter expression."""

    text: str
    root: Node

    def matches(self, client: Client) -> bool:
        return self.root.evaluate(client)


class Parser:
    def __init__(self, text: str):
        self.text = text
        self.tokens: List[Token] = tokenize(text)
        self.pos = 0
        self.depth = 0
        self._deferred: Optional[FilterSemanticError] = None

    # -- token helpers -----------------------------------------------------

    def _peek(self) -> Token:
        return self.tokens[self.pos]

    def _advance(self) -> Token:
        tok = self.tokens[self.pos]
        if tok.kind != "EOF":
            self.pos += 1
        return tok

    def _at_keyword(self, *words: str) -> bool:
        tok = self._peek()
        return tok.kind == "KEYWORD" and tok.value in words

    def _expect_keyword(self, word: str) -> Token:
        if not self._at_keyword(word):
            self._fail(f"expected {word}")
        return self._advance()

    def _expect(self, kind: str, message: str) -> Token:
        if self._peek().kind != kind:
            self._fail(message)
        return self._advance()

    def _fail(self, message: str, tok: Optional[Token] = None) -> NoReturn:
        tok = tok or self._peek()
        raise FilterSyntaxError(message, tok.text, tok.pos)

    def _nest(self, tok: Token) -> None:
        self.depth += 1
        if self.depth > MAX_DEPTH:
            self._fail("expression nested too deeply", tok)

    def _defer(self, error: FilterSemanticError) -> None:
        if self._deferred is None:
            self._deferred = error

    # -- grammar -----------------------------------------------------------

    def parse(self) -> Predicate:
        root = self._parse_or()
        tok = self._peek()
        if tok.kind == "RPAREN":
            self._fail("unbalanced parentheses: unexpected ')'")
        if tok.kind != "EOF":
            self._fail("unexpected token")
        if self._deferred is not None:
            raise self._deferred
        return Predicate(self.text, root)

    def _parse_or(self) -> Node:
        children = [self._parse_and()]
        while self._at_keyword("OR"):
            self._advance()
            children.append(self._parse_and())
        return children[0] if len(children) == 1 else Or(tuple(children))

    def _parse_and(self) -> Node:
        children = [self._parse_not()]
        while self._at_keyword("AND"):
            self._advance()
            children.append(self._parse_not())
        return children[0] if len(children) == 1 else And(tuple(children))

    def _parse_not(self) -> Node:
        if self._at_keyword("NOT"):
            self._nest(self._advance())
            node = Not(self._parse_not())
            self.depth -= 1
            return node
        return self._parse_predicate()

    def _parse_predicate(self) -> Node:
        if self._peek().kind == "LPAREN":
            self._nest(self._advance())
            node = self._parse_or()
            self._expect("RPAREN", "unbalanced parentheses: expected ')'")
            self.depth -= 1
            return node

        left = self._parse_operand()

        negated = False
        if self._at_keyword("NOT"):
            self._advance()
            negated = True
            if not self._at_keyword("BETWEEN", "IN", "LIKE"):
                self._fail("expected BETWEEN, IN or LIKE after NOT")

        if self._at_keyword("BETWEEN"):
            self._advance()
            low = self._parse_operand()
            self._expect_keyword("AND")
            high = self._parse_operand()
            left, low = self._unify(left, low)
            left, high = self._unify(left, high)
            return Between(left, low, high, negated)

        if self._at_keyword("IN"):
            self._advance()
            return self._parse_in(left, negated)

        if self._at_keyword("LIKE"):
            self._advance()
            return self._parse_like(left, negated)

        tok = self._peek()
        if tok.kind != "OP":
            self._fail("expected comparison operator")
        self._advance()
        right = self._parse_operand()
        left, right = self._unify(left, right)
        return Comparison(left, tok.value, right)

    def _parse_in(self, left: Operand, negated: bool) -> Node:
        self._expect("LPAREN", "expected '(' after IN")
        values = []
        while True:
            item = self._parse_operand()
            if not isinstance(item, Literal):
                prev = self.tokens[self.pos - 1]
                self._fail("IN list accepts literals only", prev)
            left, item = self._unify(left, item)
            values.append(item.value)
            if self._peek().kind == "COMMA":
                self._advance()
                continue
            self._expect("RPAREN", "unbalanced parentheses: expected ')'")
            break
        return InList(left, tuple(values), negated)

    def _parse_like(self, left: Operand, negated: bool) -> Node:
        pattern_tok = self._expect(
            "STRING", "LIKE pattern must be a string literal"
        )
        escape = "\\"
        if self._at_keyword("ESCAPE"):
            self._advance()
            escape_tok = self._expect(
                "STRING", "ESCAPE requires a string literal"
            )
            if len(escape_tok.value) != 1:
                self._fail("ESCAPE must be a single character", escape_tok)
            escape = escape_tok.value
        try:
            regex = like_to_regex(pattern_tok.value, escape)
        except ValueError as e:
            self._fail(str(e), pattern_tok)
        if left.type is not FieldType.STRING:
            self._defer(
                FilterTypeError(
                    left.label, FieldType.STRING.value, left.type.value,
                    "LIKE requires a string operand",
                )
            )
        return Like(left, pattern_tok.value, regex, negated)

    def _parse_operand(self) -> Operand:
        tok = self._peek()
        if tok.kind == "IDENT":
            self._advance()
            try:
                return FieldRef(lookup_field(tok.value))
            except UnknownFieldError as e:
                self._defer(e)
                # Placeholder keeps parsing going; the deferred error wins.
                return Literal(None, FieldType.STRING, tok.text)
        if tok.kind == "NUMBER":
            self._advance()
            return Literal(tok.value, _number_type(tok.value), tok.text)
        if tok.kind == "STRING":
            self._advance()
            return Literal(tok.value, FieldType.STRING, tok.text)
        if tok.kind == "KEYWORD" and tok.value in ("TRUE", "FALSE"):
            self._advance()
            value = 1 if tok.value == "TRUE" else 0
            return Literal(value, FieldType.BOOLEAN, tok.text)
        if tok.kind == "EOF":
            self._fail("missing operand")
        self._fail("expected field name or literal")

    def _unify(self, a: Operand, b: Operand) -> Tuple[Operand, Operand]:
        """Make two operands comparable, coercing quoted numbers if needed."""
        if self._deferred is not None:
            return a, b
        if a.type.is_numeric == b.type.is_numeric:
            return a, b
        if a.type.is_numeric:
            return a, self._coerce(b, a)
        return self._coerce(a, b), b

    def _coerce(self, literal: Operand, other: Operand) -> Operand:
        """Turn a quoted numeric string into a number to match ``other``."""
        if isinstance(literal, Literal):
            number = parse_number(literal.value)
            if number is not None:
                return Literal(number, _number_type(number), literal.text)
        field, expected, actual = _mismatch(other, literal)
        self._defer(FilterTypeError(field, expected, actual))
        return literal


def _number_type(value: int | float) -> FieldType:
    return FieldType.NUMERIC if isinstance(value, float) else FieldType.INTEGER


def _mismatch(numeric: Operand, text: Operand) -> Tuple[str, str, str]:
    """Name the offending field, preferring a field over a literal."""
    if isinstance(numeric, FieldRef):
        return numeric.label, numeric.type.value, FieldType.STRING.value
    if isinstance(text, FieldRef):
        return text.label, FieldType.STRING.value, numeric.type.value
    return text.label, numeric.type.value, FieldType.STRING.value


def compile_predicate(text: str) -> Optional[Predicate]:
    """Compile WHERE-clause ``text``; blank text compiles to ``None``.

    Raises:
        FilterSyntaxError: Malformed text
        UnknownFieldError: Reference to a field outside the schema
        FilterTypeError: Operands whose types cannot be compared
    """
    if not text or not text.strip():
        return None
    return Parser(text).parse()


__all__ = ["MAX_DEPTH", "Parser", "Predicate", "compile_predicate"]
