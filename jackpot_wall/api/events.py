from fastapi import APIRouter, Depends

from jackpot_wall.api.deps import get_event_store
from jackpot_wall.services.events_store import EventStore

router = APIRouter(tags=["events"])


@router.get("/events")
def get_events(store: EventStore = Depends(get_event_store)):
    return {"events": [e.model_dump() for e in store.get_all()]}
