"""Transaction record query backed by the mirror node."""

from __future__ import annotations

import logging

from hiero_sdk_python import Client

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.hedera_utils.decimals_utils import to_hbar
from hedera_intent_kit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_intent_kit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_intent_kit.shared.hedera_utils.mirrornode.types import (
    TransactionDetailsResponse,
)
from hedera_intent_kit.shared.models import ToolResponse
from hedera_intent_kit.shared.parameter_schemas import (
    TransactionRecordQueryParameters,
)
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    untyped_query_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def get_transaction_record_query_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the get transaction record query tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    return f"""
{PromptGenerator.get_context_snippet(context)}

This tool returns the transaction record for a given Hedera transaction ID.

Parameters:
- transaction_id (str, required): e.g. "0.0.4177806@1755169980.051721264" or "0.0.4177806-1755169980-051721264"
- nonce (int, optional): Nonce of a child transaction
"""


def post_process(
    transaction_record: TransactionDetailsResponse, transaction_id: str
) -> str:
    """Render the get transaction record query result for the agent.

    Args:
        transaction_record: Transaction details from the mirror node.
        transaction_id: The queried transaction ID.

    Returns:
        A formatted, human-readable message.
    """
    transactions = transaction_record.get("transactions") or []
    if not transactions:
        return f"No transaction details found for transaction ID: {transaction_id}"

    lines = [f"Transaction Details for {transaction_id}", ""]
    for i, tx in enumerate(transactions, start=1):
        if len(transactions) > 1:
            lines.append(f"Transaction {i}:")
        lines.extend(
            [
                f"Status: {tx.get('result')}",
                f"Type: {tx.get('name')}",
                f"Consensus Timestamp: {tx.get('consensus_timestamp')}",
                f"Transaction Hash: {tx.get('transaction_hash')}",
                f"Charged Fee: {to_hbar(tx.get('charged_tx_fee') or 0)} HBAR",
                f"Entity ID: {tx.get('entity_id') or 'N/A'}",
            ]
        )
        transfers = tx.get("transfers") or []
        if transfers:
            lines.append("Transfers:")
            for transfer in transfers:
                lines.append(
                    f"  Account: {transfer['account']}, "
                    f"Amount: {to_hbar(transfer['amount'])} HBAR"
                )
        lines.append("")
    return "\n".join(lines).rstrip()


async def get_transaction_record_query(
    client: Client,
    context: Context,
    params: TransactionRecordQueryParameters,
) -> ToolResponse:
    """Fetch a transaction record.

    SDK-style ids are converted to the mirror node's dash-separated form before
    the lookup.
    """
    try:
        normalised_params = (
            HederaParameterNormaliser.normalise_get_transaction_record_params(params)
        )
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )
        record = await mirrornode_service.get_transaction_record(
            normalised_params.transaction_id, normalised_params.nonce
        )
        return ToolResponse(
            human_message=post_process(record, normalised_params.transaction_id),
            extra={
                "transactionId": normalised_params.transaction_id,
                "transactionRecord": record,
            },
        )
    except Exception as e:
        message = f"Failed to get transaction record: {str(e)}"
        logger.error("[get_transaction_record_query_tool] %s", message)
        return ToolResponse(human_message=message, error=message)


GET_TRANSACTION_RECORD_QUERY_TOOL: str = "get_transaction_record_query_tool"


class GetTransactionRecordQueryTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = GET_TRANSACTION_RECORD_QUERY_TOOL
        self.name: str = "Get Transaction Record"
        self.description: str = get_transaction_record_query_prompt(context)
        self.parameters: type[TransactionRecordQueryParameters] = (
            TransactionRecordQueryParameters
        )
        self.outputParser = untyped_query_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: TransactionRecordQueryParameters,
    ) -> ToolResponse:
        """Execute the get transaction record query operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``TransactionRecordQueryParameters`` input.

        Returns:
            The result of the operation.
        """
        return await get_transaction_record_query(client, context, params)
