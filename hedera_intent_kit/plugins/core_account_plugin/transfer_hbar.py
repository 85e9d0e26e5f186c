"""HBAR transfer operation.

This module exposes:
- transfer_hbar_prompt: Description of the transfer HBAR tool.
- transfer_hbar: Normalise, build and execute an HBAR transfer.
- TransferHbarTool: Tool wrapper exposing the operation to the runtime.
"""

from __future__ import annotations

import logging

from hiero_sdk_python import Client

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.hedera_utils.hedera_builder import HederaBuilder
from hedera_intent_kit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_intent_kit.shared.models import (
    ExecutedTransactionToolResponse,
    RawTransactionResponse,
    ToolResponse,
)
from hedera_intent_kit.shared.parameter_schemas import (
    TransferHbarParameters,
    TransferHbarParametersNormalised,
)
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def transfer_hbar_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the transfer HBAR tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    context_snippet = PromptGenerator.get_context_snippet(context)
    source_account_desc = PromptGenerator.get_account_parameter_description(
        "source_account_id", context
    )
    scheduled_params_desc = (
        PromptGenerator.get_scheduled_transaction_params_description(context)
    )
    return f"""
{context_snippet}

This tool transfers HBAR to one or more accounts in a single transaction.

Parameters:
- transfers (array of {{account_id, amount}}, required): recipients and HBAR amounts
- {source_account_desc}
- transaction_memo (str, optional): memo for the transaction
- {scheduled_params_desc}
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a transfer HBAR result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message describing the outcome.
    """
    if response.schedule_id:
        return f"""Scheduled HBAR transfer created successfully.
Transaction ID: {response.transaction_id}
Schedule ID: {response.schedule_id}"""
    return f"HBAR successfully transferred.\nTransaction ID: {response.transaction_id}"


async def transfer_hbar(
    client: Client,
    context: Context,
    params: TransferHbarParameters,
) -> ToolResponse:
    """Transfer HBAR from the source account (default account if omitted).

    Returns:
        The execution result, or a failure ToolResponse if any step fails.
    """
    try:
        normalised_params: TransferHbarParametersNormalised = (
            await HederaParameterNormaliser.normalise_transfer_hbar(
                params, context, client
            )
        )
        tx = HederaBuilder.transfer_hbar(normalised_params)
        return await handle_transaction(tx, client, context, post_process)
    except Exception as e:
        message: str = f"Failed to transfer HBAR: {str(e)}"
        logger.error("[transfer_hbar_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


TRANSFER_HBAR_TOOL: str = "transfer_hbar_tool"


class TransferHbarTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = TRANSFER_HBAR_TOOL
        self.name: str = "Transfer HBAR"
        self.description: str = transfer_hbar_prompt(context)
        self.parameters: type[TransferHbarParameters] = TransferHbarParameters
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: TransferHbarParameters
    ) -> ToolResponse:
        """Execute the transfer HBAR operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``TransferHbarParameters`` input.

        Returns:
            The result of the operation.
        """
        return await transfer_hbar(client, context, params)
