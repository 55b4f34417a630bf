from typing import Iterator, List

from loguru import logger

from jackpot_wall.schemas.chainhook import ChainhookPayload, ReceiptEvent
from jackpot_wall.schemas.event import ChainEvent, NewChainEvent
from jackpot_wall.services.events_store import EventStore

PRINT_TOPIC = "print"


def is_print_event(event: ReceiptEvent, print_event_type: str) -> bool:
    if event.type != print_event_type:
        return False
    # Some indexer formats carry the topic next to the value; only "print" counts
    topic = event.topic
    return topic is None or topic == PRINT_TOPIC


def collect_print_events(payload: ChainhookPayload, print_event_type: str) -> Iterator[NewChainEvent]:
    """Yield one event per contract print found in successful transactions."""
    for block in payload.apply:
        for tx in block.transactions:
            if not tx.succeeded:
                continue
            for evt in tx.events:
                if not is_print_event(evt, print_event_type):
                    continue
                if not tx.hash:
                    logger.warning(
                        f"[CHAINHOOK] print event without tx hash skipped, block={block.block_identifier.index}"
                    )
                    continue
                # Refining the type from the value is left to the dashboard
                yield NewChainEvent(
                    id=tx.hash,
                    type="new-post",
                    data=evt.value,
                )


def ingest_delivery(payload: ChainhookPayload, store: EventStore, print_event_type: str) -> List[ChainEvent]:
    """Add the prints of one delivery to the store, newest ending up first.

    Returns the stored entries in the order they were added.
    """
    stored: List[ChainEvent] = []
    for new_event in collect_print_events(payload, print_event_type):
        entry = store.add(new_event)
        stored.append(entry)
        logger.debug(f"[INGEST] tx={entry.id} type={entry.type} data={entry.data!r}")

    heights = [b.block_identifier.index for b in payload.apply]
    logger.info(
        f"[CHAINHOOK] blocks={heights} "
        f"transactions={sum(len(b.transactions) for b in payload.apply)} "
        f"captured={len(stored)}"
    )
    return stored
