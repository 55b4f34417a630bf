from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from jackpot_wall.api.deps import get_app_settings
from jackpot_wall.config import Settings
from jackpot_wall.services.upstream import UpstreamError, fetch_stacks

router = APIRouter(tags=["proxy"])


@router.get("/stacks")
async def stacks_proxy(
    path: Optional[str] = None,
    mainnet: Optional[str] = None,
    settings: Settings = Depends(get_app_settings),
):
    """Forward a GET to the Hiro Stacks API (mainnet or testnet host)."""
    if not path:
        raise HTTPException(status_code=400, detail="Path is required")
    if not path.startswith("/"):
        raise HTTPException(status_code=400, detail="Path must start with /")

    selector = None if mainnet is None else mainnet.strip().lower() in ("true", "1")
    host = settings.stacks_host(selector)
    try:
        return await fetch_stacks(host, path, settings.hiro_api_key, settings.upstream_timeout)
    except UpstreamError as e:
        logger.error(f"[PROXY] Stacks API proxy error: host={host} path={path} status={e.status_code}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch from Stacks API") from e
