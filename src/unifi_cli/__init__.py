"""unifi-cli: query connected clients on a UniFi Network controller."""

__all__ = ["__version__"]

__version__ = "0.1.0"
