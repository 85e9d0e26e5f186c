"""ERC20 transfer operation."""

from __future__ import annotations

import logging

from hiero_sdk_python import Client

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.constants.contracts import (
    ERC20_TRANSFER_FUNCTION_ABI,
    ERC20_TRANSFER_FUNCTION_NAME,
)
from hedera_intent_kit.shared.hedera_utils.hedera_builder import HederaBuilder
from hedera_intent_kit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_intent_kit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_intent_kit.shared.models import (
    ExecutedTransactionToolResponse,
    RawTransactionResponse,
    ToolResponse,
)
from hedera_intent_kit.shared.parameter_schemas import TransferERC20Parameters
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def transfer_erc20_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the transfer ERC20 tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    recipient_desc = PromptGenerator.get_any_address_parameter_description(
        "recipient_address", context, is_required=True
    )
    return f"""
{PromptGenerator.get_context_snippet(context)}

This tool transfers ERC20 tokens from your account to a recipient.

Parameters:
- contract_id (str, required): The ERC20 contract, as a Hedera id (0.0.x) or EVM address
- {recipient_desc}
- amount (int, required): Amount to transfer in base units (no decimals applied)
- {PromptGenerator.get_scheduled_transaction_params_description(context)}
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a transfer ERC20 result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message describing the outcome.
    """
    if response.schedule_id:
        return (
            "Scheduled ERC20 transfer created successfully.\n"
            f"Transaction ID: {response.transaction_id}\n"
            f"Schedule ID: {response.schedule_id}"
        )
    return f"ERC20 tokens transferred successfully. Transaction ID: {response.transaction_id}"


async def transfer_erc20(
    client: Client,
    context: Context,
    params: TransferERC20Parameters,
) -> ToolResponse:
    try:
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )
        normalised_params = await HederaParameterNormaliser.normalise_transfer_erc20_params(
            params,
            ERC20_TRANSFER_FUNCTION_ABI,
            ERC20_TRANSFER_FUNCTION_NAME,
            context,
            client,
            mirrornode_service,
        )
        tx = HederaBuilder.execute_transaction(normalised_params)
        return await handle_transaction(tx, client, context, post_process)
    except Exception as e:
        message: str = f"Failed to transfer ERC20: {str(e)}"
        logger.error("[transfer_erc20_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


TRANSFER_ERC20_TOOL: str = "transfer_erc20_tool"


class TransferERC20Tool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = TRANSFER_ERC20_TOOL
        self.name: str = "Transfer ERC20"
        self.description: str = transfer_erc20_prompt(context)
        self.parameters: type[TransferERC20Parameters] = TransferERC20Parameters
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: TransferERC20Parameters
    ) -> ToolResponse:
        """Execute the transfer ERC20 operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``TransferERC20Parameters`` input.

        Returns:
            The result of the operation.
        """
        return await transfer_erc20(client, context, params)
