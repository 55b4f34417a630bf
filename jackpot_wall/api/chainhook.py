import hmac
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Request
from loguru import logger

from jackpot_wall.api.deps import get_app_settings, get_event_store
from jackpot_wall.config import Settings
from jackpot_wall.pipeline.collector import ingest_delivery
from jackpot_wall.schemas.chainhook import ChainhookPayload
from jackpot_wall.services.events_store import EventStore

router = APIRouter(tags=["chainhook"])


def _authorized(authorization: Optional[str], secret: str) -> bool:
    expected = f"Bearer {secret}"
    return hmac.compare_digest((authorization or "").encode(), expected.encode())


@router.post("/chainhook")
async def receive_delivery(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_app_settings),
    store: EventStore = Depends(get_event_store),
):
    """
    Webhook for chainhook deliveries.
    Always answers 200 once authorized so the indexer never backs off on
    batches without matching events.
    """
    if not _authorized(authorization, settings.chainhook_secret):
        logger.warning(f"[CHAINHOOK] unauthorized delivery from {request.client.host if request.client else '?'}")
        raise HTTPException(status_code=401, detail="Unauthorized")

    body = await request.json()

    if not isinstance(body, dict) or not isinstance(body.get("apply"), list) or not body["apply"]:
        logger.info("[CHAINHOOK] delivery without blocks ignored")
        return {"status": "ignored"}

    payload = ChainhookPayload.model_validate(body)
    stored = ingest_delivery(payload, store, settings.print_event_type)
    return {"status": "ok", "ingested": len(stored)}

