"""Health Probe - liveness endpoint for uptime checks and container orchestration.

Invariants:
    - GET /api/health always returns 200 {"status": "ok", timestamp} if the process is up
    - Never touches the entry store (a broken data file must not fail liveness)
"""

import logging
from fastapi import APIRouter, status

from zodiac_api.core.domain_types import utc_timestamp
from zodiac_api.schemas.zodiac import HealthResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", response_model=HealthResponse, status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "ok", "timestamp": utc_timestamp()}
