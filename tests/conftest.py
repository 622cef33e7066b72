"""Pytest configuration and shared fixtures."""

import pytest

from ferry.config import FerrySettings
from ferry.markup import MarkupEngine, ResolutionContext, SliceConverter


@pytest.fixture
def settings():
    """Default settings, isolated from any local .env file."""
    return FerrySettings(_env_file=None)


@pytest.fixture
def engine(settings):
    """Engine built from the isolated default settings."""
    return MarkupEngine(settings)


@pytest.fixture
def converter(settings):
    """Slice converter built from the isolated default settings."""
    return SliceConverter(settings)


@pytest.fixture
def context():
    """Resolution tables shaped like a forwarded Discord message's mentions."""
    return ResolutionContext(
        users={"123456789": "JohnDoe", "987654321": "AliceSmith"},
        roles={"111111111": "Admin", "222222222": "Moderator"},
        channels={"444444444": "general", "555555555": "announcements"},
    )
