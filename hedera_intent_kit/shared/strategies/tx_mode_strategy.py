"""Execution-mode dispatch for built transactions.

``ExecuteStrategy`` signs and submits with the client operator (AUTONOMOUS);
``ReturnBytesStrategy`` freezes the body and hands the unsigned bytes back for
an external signer (RETURN_BYTES). The strategy is chosen once per call from
``Context.mode``.
"""

from __future__ import annotations

import base64
import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from hiero_sdk_python import (
    AccountId,
    Client,
    ResponseCode,
    TransactionId,
    TransactionReceipt,
)
from hiero_sdk_python.transaction.transaction import Transaction

from hedera_intent_kit.shared.configuration import AgentMode, Context
from hedera_intent_kit.shared.errors import NetworkError
from hedera_intent_kit.shared.models import (
    ExecutedTransactionToolResponse,
    RawTransactionResponse,
    ReturnBytesToolResponse,
)
from hedera_intent_kit.shared.utils.account_resolver import AccountResolver

logger = logging.getLogger(__name__)

PENDING_SIGNATURE_STATUS = "PENDING_SIGNATURE"
RETURN_BYTES_MESSAGE = (
    "Transaction bytes created. A signature is required before submission."
)

PostProcess = Callable[[RawTransactionResponse], str]


def _as_str(value) -> Optional[str]:
    return str(value) if value is not None else None


def _status_name(status) -> str:
    try:
        return ResponseCode(status).name
    except ValueError:
        return str(status)


class TxModeStrategy(ABC):
    @abstractmethod
    async def handle(
        self,
        tx: Transaction,
        client: Client,
        context: Context,
        post_process: Optional[PostProcess] = None,
    ) -> ExecutedTransactionToolResponse: ...


class ExecuteStrategy(TxModeStrategy):
    """Sign and submit with the client operator, then read the receipt."""

    @staticmethod
    def _raw_from_receipt(
        receipt: TransactionReceipt, tx: Transaction
    ) -> RawTransactionResponse:
        transaction_id = getattr(receipt, "transaction_id", None) or getattr(
            tx, "transaction_id", None
        )
        return RawTransactionResponse(
            status=_status_name(receipt.status),
            account_id=_as_str(getattr(receipt, "account_id", None)),
            token_id=_as_str(getattr(receipt, "token_id", None)),
            topic_id=_as_str(getattr(receipt, "topic_id", None)),
            schedule_id=_as_str(getattr(receipt, "schedule_id", None)),
            contract_id=_as_str(getattr(receipt, "contract_id", None)),
            transaction_id=_as_str(transaction_id),
        )

    async def handle(
        self,
        tx: Transaction,
        client: Client,
        context: Context,
        post_process: Optional[PostProcess] = None,
    ) -> ExecutedTransactionToolResponse:
        tx_name = type(tx).__name__
        receipt: TransactionReceipt = tx.execute(client)

        if receipt.status != ResponseCode.SUCCESS:
            raise NetworkError(
                f"Transaction {tx_name} failed with status {_status_name(receipt.status)}"
            )

        raw = self._raw_from_receipt(receipt, tx)
        logger.debug("Executed %s, transaction id %s", tx_name, raw.transaction_id)
        human_message = (
            post_process(raw)
            if post_process
            else raw.model_dump_json(exclude_none=True)
        )
        return ExecutedTransactionToolResponse(human_message=human_message, raw=raw)


class ReturnBytesStrategy(TxModeStrategy):
    """Freeze with the default account as payer and return the unsigned bytes.

    Nothing is submitted, so the response carries no receipt fields and no
    transaction id.
    """

    async def handle(
        self,
        tx: Transaction,
        client: Client,
        context: Context,
        post_process: Optional[PostProcess] = None,
    ) -> ReturnBytesToolResponse:
        payer = AccountId.from_string(AccountResolver.get_default_account(context, client))
        tx.set_transaction_id(TransactionId.generate(payer))
        tx.freeze_with(client)
        tx_bytes: bytes = tx.to_bytes()

        logger.debug(
            "Prepared %s for external signing by %s", type(tx).__name__, payer
        )
        raw = RawTransactionResponse(
            status=PENDING_SIGNATURE_STATUS,
            transaction_bytes=base64.b64encode(tx_bytes).decode("ascii"),
        )
        return ReturnBytesToolResponse(
            human_message=RETURN_BYTES_MESSAGE,
            raw=raw,
            bytes=tx_bytes,
        )


def get_strategy_from_context(context: Context) -> TxModeStrategy:
    if context.mode == AgentMode.RETURN_BYTES:
        return ReturnBytesStrategy()
    return ExecuteStrategy()


async def handle_transaction(
    tx: Transaction,
    client: Client,
    context: Context,
    post_process: Optional[PostProcess] = None,
) -> ExecutedTransactionToolResponse:
    """Run ``tx`` through the strategy selected by ``context.mode``.

    Args:
        tx: The built, unsigned transaction.
        client: hiero Client used to freeze (and, in AUTONOMOUS mode, submit).
        context: Execution context; only ``mode`` and ``account_id`` are read.
        post_process: Optional formatter turning the raw response into the
            human-readable message (AUTONOMOUS mode only).

    Returns:
        ExecutedTransactionToolResponse, or ReturnBytesToolResponse in RETURN_BYTES mode.

    Raises:
        NetworkError: If the receipt status is not SUCCESS.
    """
    strategy = get_strategy_from_context(context)
    return await strategy.handle(tx, client, context, post_process)
