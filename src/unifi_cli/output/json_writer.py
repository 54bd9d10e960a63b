"""JSON writer for clients and raw API records."""

import json
import sys
from typing import Any, Dict, Iterable, TextIO

from pydantic import BaseModel


def to_records(items: Iterable[Any]) -> list[Dict[str, Any]]:
    """Convert models to dicts using the controller's field names."""
    return [
        item.model_dump(mode="json", by_alias=True)
        if isinstance(item, BaseModel)
        else item
        for item in items
    ]


def write_json(
    items: Iterable[Any],
    output: TextIO | None = None,
    pretty: bool = True,
) -> None:
    """Write records as a JSON array.

    Args:
        items: Pydantic models or plain dicts
        output: Destination stream, or None for stdout
        pretty: Whether to pretty-print with indentation (default: True)

    Notes:
        - Buffers all records in memory (must collect to write array brackets)
    """
    output = output or sys.stdout
    records = to_records(items)

    if pretty:
        json.dump(records, output, indent=2)
    else:
        json.dump(records, output)
    output.write("\n")  # Add trailing newline
