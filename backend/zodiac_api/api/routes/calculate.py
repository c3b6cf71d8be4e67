"""Calculate - POST a name + date of birth, get back the stored sign.

Invariants:
    - 200 only after the entry is persisted
    - 400 {"error": "Validation failed", "details": [...]} lists every violation
    - 500 {"error": ...} on persistence failure; no partial success body
"""

import logging

from fastapi import APIRouter, Depends

from zodiac_api.api.dependencies import get_app_settings, get_entry_store
from zodiac_api.config import Settings
from zodiac_api.core.repository_protocols import EntryStore
from zodiac_api.schemas.zodiac import CalculateRequest, CalculateResponse, ErrorResponse
from zodiac_api.services.calculate_sign import calculate_and_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/calculate", tags=["calculate"])


@router.post(
    "", response_model=CalculateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def calculate_sign(
    body: CalculateRequest,
    store: EntryStore = Depends(get_entry_store),
    settings: Settings = Depends(get_app_settings),
):
    """Validate, classify and persist one submission."""
    result = await calculate_and_store(
        store, body.name, body.date_of_birth,
        max_age_years=settings.max_age_years,
    )
    return {"success": True, "result": result.to_dict()}
