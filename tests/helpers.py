"""Shared helpers for filter and CLI tests."""

from __future__ import annotations

import json
from typing import Iterable, List

from unifi_cli.models import Client


def names(clients: Iterable[Client]) -> List[str]:
    """Return client names in order."""
    return [c.name for c in clients]


def clients_payload(clients: Iterable[Client], rc: str = "ok") -> bytes:
    """Encode clients the way the controller's stat/sta endpoint does."""
    data = [c.model_dump(mode="json", by_alias=True) for c in clients]
    return json.dumps({"meta": {"rc": rc}, "data": data}).encode()
