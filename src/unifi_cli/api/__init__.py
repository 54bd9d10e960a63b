"""Controller API collaborator."""

from .client import CLIENTS_PATH, SITES_PATH, APIClient

__all__ = ["APIClient", "CLIENTS_PATH", "SITES_PATH"]
