"""Filter engine: WHERE-clause predicates over connected clients."""

from .engine import apply_filter
from .flags import build_where_clause, quote_literal
from .parser import Predicate, compile_predicate
from .schema import FIELDS, FieldSpec, FieldType, field_names, lookup_field

__all__ = [
    "FIELDS",
    "FieldSpec",
    "FieldType",
    "Predicate",
    "apply_filter",
    "build_where_clause",
    "compile_predicate",
    "field_names",
    "lookup_field",
    "quote_literal",
]
