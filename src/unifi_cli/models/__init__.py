"""Pydantic models for controller payloads and CLI settings."""

from .client import Client, ClientsResponse, Meta, SitesResponse
from .settings import Settings

__all__ = [
    "Client",
    "ClientsResponse",
    "Meta",
    "Settings",
    "SitesResponse",
]
