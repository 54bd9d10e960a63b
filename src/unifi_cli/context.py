"""CLI context for passing global option state between commands."""

from pathlib import Path
from typing import Any, Dict, Optional

import click

from .config import load_settings, validate_settings
from .models import Settings


class UnifiContext:
    def __init__(self):
        self.config_path: Optional[Path] = None
        self.overrides: Dict[str, Any] = {}
        self.verbose = False

    def settings(self) -> Settings:
        """Resolve and validate settings for a command that calls the API.

        Raises:
            ConfigError: Missing host/API key or unreadable config
        """
        settings = load_settings(self.config_path, self.overrides)
        return validate_settings(settings)


pass_context = click.make_pass_decorator(UnifiContext, ensure=True)
