"""
HUB Health-check proxy API

The dashboard browser client cannot reliably probe internal services itself
(CORS, mixed content, self-signed certificates), so it asks the hub to do it.

Endpoints:
- GET /api/healthcheck?url=...&expected_status=...
"""

from fastapi import APIRouter, HTTPException
import logging

from hub import healthcheck

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/healthcheck", tags=["healthcheck"])


@router.get("")
def check_health(url: str | None = None, expected_status: int | None = None):
    if not url:
        raise HTTPException(status_code=400, detail="URL is required")
    result = healthcheck.probe(url, expected_status)
    logger.debug(f"Health check {url}: {result['state']} (status={result['status']})")
    return result
