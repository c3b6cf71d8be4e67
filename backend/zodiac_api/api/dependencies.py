"""Route Dependencies - resolve per-app collaborators from app.state.

Invariants:
    - The entry store and settings are attached to app.state by create_app()
    - Routes never construct stores or read settings from the environment directly
"""

from fastapi import Request

from zodiac_api.config import Settings
from zodiac_api.core.repository_protocols import EntryStore


def get_entry_store(request: Request) -> EntryStore:
    return request.app.state.entry_store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
