"""Result envelope returned by every operation, success or failure."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

INVALID_TRANSACTION_STATUS = "INVALID_TRANSACTION"


class RawTransactionResponse(BaseModel):
    """Receipt-derived fields of an executed transaction, or the failure reason.

    Entity ids and the transaction id are kept in their string form
    (``0.0.x`` / ``0.0.x@seconds.nanos``) so the envelope is JSON-safe.
    """

    status: str
    account_id: Optional[str] = None
    token_id: Optional[str] = None
    topic_id: Optional[str] = None
    schedule_id: Optional[str] = None
    contract_id: Optional[str] = None
    transaction_id: Optional[str] = None
    # base64 of the frozen, unsigned transaction (RETURN_BYTES mode only)
    transaction_bytes: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def failure(cls, message: str) -> "RawTransactionResponse":
        return cls(status=INVALID_TRANSACTION_STATUS, error=message)


class ToolResponse(BaseModel):
    human_message: str
    error: Optional[str] = None
    extra: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ExecutedTransactionToolResponse(ToolResponse):
    raw: RawTransactionResponse


class ReturnBytesToolResponse(ExecutedTransactionToolResponse):
    bytes: bytes

    def to_dict(self) -> Dict[str, Any]:
        # raw bytes are already carried base64-encoded in raw.transaction_bytes
        return self.model_dump(exclude_none=True, exclude={"bytes"})
