from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from jackpot_wall.api.deps import get_app_settings
from jackpot_wall.config import Settings
from jackpot_wall.services.upstream import UpstreamError, fetch_reputation

router = APIRouter(tags=["proxy"])


@router.get("/talent")
async def talent_proxy(
    address: Optional[str] = None,
    settings: Settings = Depends(get_app_settings),
):
    """Reputation score of a wallet; no passport means score 0."""
    if not address:
        raise HTTPException(status_code=400, detail="Address is required")

    if not settings.talent_protocol_api_key:
        logger.error("[PROXY] TALENT_PROTOCOL_API_KEY is not set")
        raise HTTPException(status_code=500, detail="Server configuration error")

    try:
        return await fetch_reputation(
            settings.talent_api_url,
            address,
            settings.talent_protocol_api_key,
            settings.upstream_timeout,
        )
    except UpstreamError as e:
        logger.error(f"[PROXY] Talent Protocol proxy error: address={address} status={e.status_code}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch reputation data") from e
