"""HBAR transfer spending an allowance previously granted by the owner."""

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
    TransferHbarWithAllowanceParameters,
)
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def transfer_hbar_with_allowance_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the transfer HBAR with allowance tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    context_snippet = PromptGenerator.get_context_snippet(context)
    return f"""
{context_snippet}

This tool transfers HBAR out of an owner account using an allowance the owner granted to the spender (the default account).

Parameters:
- source_account_id (str, required): the owner account granting the allowance
- transfers (array of {{account_id, amount}}, required): recipients and HBAR amounts
- transaction_memo (str, optional): memo for the transaction
- {PromptGenerator.get_scheduled_transaction_params_description(context)}
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a transfer HBAR with allowance result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message describing the outcome.
    """
    return (
        "HBAR successfully transferred with allowance.\n"
        f"Transaction ID: {response.transaction_id}"
    )


async def transfer_hbar_with_allowance(
    client: Client,
    context: Context,
    params: TransferHbarWithAllowanceParameters,
) -> ToolResponse:
    try:
        normalised_params = (
            await HederaParameterNormaliser.normalise_transfer_hbar_with_allowance(
                params, context, client
            )
        )
        tx = HederaBuilder.transfer_hbar_with_allowance(normalised_params)
        return await handle_transaction(tx, client, context, post_process)
    except Exception as e:
        message: str = f"Failed to transfer HBAR with allowance: {str(e)}"
        logger.error("[transfer_hbar_with_allowance_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


TRANSFER_HBAR_WITH_ALLOWANCE_TOOL: str = "transfer_hbar_with_allowance_tool"


class TransferHbarWithAllowanceTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = TRANSFER_HBAR_WITH_ALLOWANCE_TOOL
        self.name: str = "Transfer HBAR with allowance"
        self.description: str = transfer_hbar_with_allowance_prompt(context)
        self.parameters: type[TransferHbarWithAllowanceParameters] = (
            TransferHbarWithAllowanceParameters
        )
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: TransferHbarWithAllowanceParameters,
    ) -> ToolResponse:
        """Execute the transfer HBAR with allowance operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``TransferHbarWithAllowanceParameters`` input.

        Returns:
            The result of the operation.
        """
        return await transfer_hbar_with_allowance(client, context, params)
