"""Sign Catalog - display profiles for the twelve signs, in classifier order."""

from fastapi import APIRouter

from zodiac_api.core.sign_profiles import SIGN_PROFILES
from zodiac_api.schemas.zodiac import SignsResponse

router = APIRouter(prefix="/api/signs", tags=["signs"])


@router.get("", response_model=SignsResponse)
async def list_signs():
    return {"success": True, "signs": [p.to_dict() for p in SIGN_PROFILES]}
