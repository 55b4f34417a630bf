"""Pydantic models for chainhook delivery payloads.

Only the fields the receiver reads are declared; everything else the indexer
sends is accepted and ignored.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Lenient(BaseModel):
    model_config = ConfigDict(extra="allow")


class BlockIdentifier(_Lenient):
    index: Optional[int] = None
    hash: Optional[str] = None


class TransactionIdentifier(_Lenient):
    hash: Optional[str] = None


class ReceiptEvent(_Lenient):
    type: Optional[str] = None
    # Shape depends on the event type; only print events are read
    data: Optional[Any] = None

    @property
    def topic(self) -> Optional[str]:
        return self.data.get("topic") if isinstance(self.data, dict) else None

    @property
    def value(self) -> Any:
        return self.data.get("value") if isinstance(self.data, dict) else None


class Receipt(_Lenient):
    events: List[ReceiptEvent] = Field(default_factory=list)


class TransactionMetadata(_Lenient):
    success: Optional[bool] = None
    # Older chainhook payloads report the outcome under kind.data.success
    kind: Optional[Any] = None
    receipt: Optional[Receipt] = None

    @property
    def succeeded(self) -> bool:
        if self.success is not None:
            return self.success
        data = self.kind.get("data") if isinstance(self.kind, dict) else None
        if isinstance(data, dict):
            return data.get("success") is True
        return False


class Transaction(_Lenient):
    transaction_identifier: Optional[TransactionIdentifier] = None
    metadata: Optional[TransactionMetadata] = None

    @property
    def hash(self) -> Optional[str]:
        return self.transaction_identifier.hash if self.transaction_identifier else None

    @property
    def succeeded(self) -> bool:
        return self.metadata is not None and self.metadata.succeeded

    @property
    def events(self) -> List[ReceiptEvent]:
        if self.metadata is None or self.metadata.receipt is None:
            return []
        return self.metadata.receipt.events


class Block(_Lenient):
    block_identifier: BlockIdentifier = Field(default_factory=BlockIdentifier)
    transactions: List[Transaction] = Field(default_factory=list)


class ChainhookPayload(_Lenient):
    apply: List[Block] = Field(default_factory=list)
