"""Recent Entries - read side of the entry log.

Invariants:
    - Returns at most the configured recent window, newest first
    - Store read failures surface as 500 {"error": "Failed to fetch entries"}
"""

import logging

from fastapi import APIRouter, Depends

from zodiac_api.api.dependencies import get_entry_store
from zodiac_api.core.errors import PersistenceError
from zodiac_api.core.repository_protocols import EntryStore
from zodiac_api.schemas.zodiac import EntriesResponse, ErrorResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/entries", tags=["entries"])


@router.get(
    "", response_model=EntriesResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_recent_entries(store: EntryStore = Depends(get_entry_store)):
    """Most recent submissions, newest first."""
    try:
        entries = await store.recent()
    except PersistenceError as e:
        raise PersistenceError("Failed to fetch entries", e.operation) from e
    return {"success": True, "entries": [e.to_dict() for e in entries]}
