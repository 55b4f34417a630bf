from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from jackpot_wall.api.chainhook import receive_delivery
from jackpot_wall.api.chainhook import router as chainhook_router
from jackpot_wall.api.deps import get_event_store
from jackpot_wall.api.events import router as events_router
from jackpot_wall.api.network import router as network_router
from jackpot_wall.api.stacks import router as stacks_router
from jackpot_wall.api.talent import router as talent_router
from jackpot_wall.config import DEFAULT_CHAINHOOK_SECRET, Settings, get_settings
from jackpot_wall.logging_setup import setup_logging
from jackpot_wall.services.events_store import EventStore


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Jackpot Wall events API")
    app.state.settings = settings
    # Process-wide buffer, handed to handlers through get_event_store
    app.state.event_store = EventStore()

    app.add_exception_handler(StarletteHTTPException, _http_error)

    # APIs under /api
    app.include_router(chainhook_router, prefix="/api")
    app.include_router(events_router, prefix="/api")
    app.include_router(stacks_router, prefix="/api")
    app.include_router(talent_router, prefix="/api")
    app.include_router(network_router, prefix="/api")

    # Path used by the standalone receiver deployments
    app.add_api_route("/events", receive_delivery, methods=["POST"], tags=["chainhook"])

    @app.get("/health")
    def health(store: EventStore = Depends(get_event_store)):
        return {"status": "ok", "events": store.count()}

    if settings.chainhook_secret == DEFAULT_CHAINHOOK_SECRET:
        logger.warning("CHAINHOOK_SECRET is not set, using the default webhook secret")
    logger.info(f"Jackpot Wall API ready: network={settings.network} contract={settings.contract_address}")
    return app

