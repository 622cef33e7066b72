"""Shared utilities for Ferry CLI commands."""

import json
import logging
from typing import Optional

import click
from rich.console import Console

from ferry.config import FerrySettings
from ferry.markup import ResolutionContext

console = Console()

_log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(settings: FerrySettings):
    """Send log records to stderr; debug mode forces DEBUG level."""
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=_log_format)
    logging.getLogger("ferry").setLevel(level)


def load_context(path: Optional[str]) -> Optional[ResolutionContext]:
    """Load a JSON resolution context file.

    Expected shape::

        {"users": {"123": "alice"}, "roles": {...}, "channels": {...}}
    """
    if not path:
        return None
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return ResolutionContext.from_dict(data)
    except (OSError, ValueError) as e:
        raise click.BadParameter(f"{path}: {e}", param_hint="--context")
