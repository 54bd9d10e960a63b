"""Closed schema of client attributes that filter expressions may reference.

Each field has a fixed ``FieldType``. Boolean attributes are surfaced as the
integers 0/1 so they compare like SQL booleans (``is_wired = 1``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List

from ..errors import UnknownFieldError
from ..models import Client


class FieldType(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"

    @property
    def is_numeric(self) -> bool:
        """Integers, floats and 0/1 booleans all compare as numbers."""
        return self is not FieldType.STRING


@dataclass(frozen=True)
class FieldSpec:
    """One filterable attribute: predicate name, type and model attribute."""

    name: str
    type: FieldType
    attribute: str

    def value(self, client: Client) -> Any:
        raw = getattr(client, self.attribute)
        if self.type is FieldType.BOOLEAN:
            return 1 if raw else 0
        return raw


def _specs(names: str, field_type: FieldType) -> List[FieldSpec]:
    return [FieldSpec(n, field_type, n) for n in names.split()]


FIELDS: Dict[str, FieldSpec] = {
    spec.name: spec
    for spec in (
        _specs("mac name hostname ip essid ap_mac sw_mac", FieldType.STRING)
        + _specs(
            "is_wired blocked use_fixed_ip qos_policy_applied",
            FieldType.BOOLEAN,
        )
        + _specs(
            "signal uptime tx_rate rx_rate channel rssi satisfaction sw_port",
            FieldType.INTEGER,
        )
        + _specs("tx_bytes rx_bytes tx_bytes_r rx_bytes_r", FieldType.NUMERIC)
    )
}


def field_names() -> List[str]:
    """Return filterable field names in sorted order."""
    return sorted(FIELDS)


def lookup_field(name: str) -> FieldSpec:
    """Resolve a field name (case-insensitive) to its spec.

    Raises:
        UnknownFieldError: If ``name`` is not part of the schema
    """
    spec = FIELDS.get(name.lower())
    if spec is None:
        raise UnknownFieldError(name, FIELDS)
    return spec


__all__ = ["FIELDS", "FieldSpec", "FieldType", "field_names", "lookup_field"]
