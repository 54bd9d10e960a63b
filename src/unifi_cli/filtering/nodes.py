"""Expression tree for compiled filter predicates.

Nodes are frozen dataclasses; a compiled tree holds no per-record state and
may be evaluated against any number of clients.
"""

from __future__ import annotations

import operator
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Pattern, Tuple, Union

from ..models import Client
from .schema import FieldSpec, FieldType

COMPARATORS: Dict[str, Callable[[Any, Any], bool]] = {
    "=": operator.eq,
    "==": operator.eq,
    "!=": operator.ne,
    "<>": operator.ne,
    ">": operator.gt,
    "<": operator.lt,
    ">=": operator.ge,
    "<=": operator.le,
}


@dataclass(frozen=True)
class FieldRef:
    spec: FieldSpec

    @property
    def type(self) -> FieldType:
        return self.spec.type

    @property
    def label(self) -> str:
        return self.spec.name

    def resolve(self, client: Client) -> Any:
        return self.spec.value(client)


@dataclass(frozen=True)
class Literal:
    value: Any
    type: FieldType
    text: str

    @property
    def label(self) -> str:
        return self.text

    def resolve(self, client: Client) -> Any:
        return self.value


Operand = Union[FieldRef, Literal]


@dataclass(frozen=True)
class Comparison:
    left: Operand
    op: str
    right: Operand

    def evaluate(self, client: Client) -> bool:
        return COMPARATORS[self.op](
            self.left.resolve(client), self.right.resolve(client)
        )


@dataclass(frozen=True)
class Between:
    """Inclusive range test: ``low <= operand <= high``."""

    operand: Operand
    low: Operand
    high: Operand
    negated: bool = False

    def evaluate(self, client: Client) -> bool:
        value = self.operand.resolve(client)
        inside = self.low.resolve(client) <= value <= self.high.resolve(client)
        return inside != self.negated


@dataclass(frozen=True)
class InList:
    operand: Operand
    values: Tuple[Any, ...]
    negated: bool = False

    def evaluate(self, client: Client) -> bool:
        return (self.operand.resolve(client) in self.values) != self.negated


@dataclass(frozen=True)
class Like:
    """Case-sensitive pattern match; ``regex`` is the translated pattern."""

    operand: Operand
    pattern: str
    regex: Pattern[str]
    negated: bool = False

    def evaluate(self, client: Client) -> bool:
        matched = self.regex.fullmatch(self.operand.resolve(client)) is not None
        return matched != self.negated


@dataclass(frozen=True)
class Not:
    child: "Node"

    def evaluate(self, client: Client) -> bool:
        return not self.child.evaluate(client)


@dataclass(frozen=True)
class And:
    children: Tuple["Node", ...]

    def evaluate(self, client: Client) -> bool:
        return all(child.evaluate(client) for child in self.children)


@dataclass(frozen=True)
class Or:
    children: Tuple["Node", ...]

    def evaluate(self, client: Client) -> bool:
        return any(child.evaluate(client) for child in self.children)


Node = Union[Comparison, Between, InList, Like, Not, And, Or]


def like_to_regex(pattern: str, escape: str = "\\") -> Pattern[str]:
    """Translate a LIKE pattern into a regular expression for ``fullmatch``.

    ``%`` matches any run of characters, ``_`` exactly one character and
    ``escape`` makes the following character literal.

    Raises:
        ValueError: If the pattern ends with a lone escape character
    """
    parts = []
    chars = iter(pattern)
    for ch in chars:
        if ch == escape:
            try:
                parts.append(re.escape(next(chars)))
            except StopIteration:
                raise ValueError("LIKE pattern ends with escape character") from None
        elif ch == "%":
            parts.append(".*")
        elif ch == "_":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    return re.compile("".join(parts), re.DOTALL)


__all__ = [
    "And",
    "Between",
    "COMPARATORS",
    "Comparison",
    "FieldRef",
    "InList",
    "Like",
    "Literal",
    "Node",
    "Not",
    "Operand",
    "Or",
    "like_to_regex",
]
