from typing import Any, Literal

from pydantic import BaseModel

EventType = Literal["new-post", "jackpot-won", "user-tx"]


class NewChainEvent(BaseModel):
    # ----------------------------
    # Identifiers
    # ----------------------------
    id: str                              # transaction hash
    type: EventType = "new-post"

    # ----------------------------
    # Decoded print value (poster/message, winner/amount, ...)
    # ----------------------------
    data: Any = None


class ChainEvent(NewChainEvent):
    # Ingestion time in ms since epoch, assigned by the store
    timestamp: int
