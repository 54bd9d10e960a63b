"""Apply a WHERE clause to an in-memory list of clients."""

from __future__ import annotations

import logging
from typing import List, Sequence

from ..errors import FilterApplyError, FilterError
from ..models import Client
from .parser import compile_predicate

logger = logging.getLogger(__name__)


def apply_filter(clients: Sequence[Client], where: str) -> List[Client]:
    """Return the clients matching ``where``, in input order.

    A blank clause returns the input unchanged without compiling anything.
    Filtering is all-or-nothing: any compile or evaluation error aborts the
    pass and no partial result is returned.

    Raises:
        FilterApplyError: Wrapping the underlying FilterError as ``cause``
    """
    if not where or not where.strip():
        return list(clients)

    try:
        predicate = compile_predicate(where)
        matched = [client for client in clients if predicate.matches(client)]
    except FilterError as e:
        raise FilterApplyError(e, where) from e

    logger.debug(
        "filter %r matched %d of %d clients", where, len(matched), len(clients)
    )
    return matched


__all__ = ["apply_filter"]
