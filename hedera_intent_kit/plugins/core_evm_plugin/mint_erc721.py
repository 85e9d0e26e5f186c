from __future__ import annotations

import logging

from hiero_sdk_python import Client

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.constants.contracts import (
    ERC721_MINT_FUNCTION_ABI,
    ERC721_MINT_FUNCTION_NAME,
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
from hedera_intent_kit.shared.parameter_schemas import MintERC721Parameters
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def mint_erc721_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the mint ERC721 tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    to_desc = PromptGenerator.get_any_address_parameter_description("to_address", context)
    return f"""
{PromptGenerator.get_context_snippet(context)}

This tool mints a new ERC721 token (NFT) on an existing ERC721 contract.

Parameters:
- contract_id (str, required): The ERC721 contract, as a Hedera id (0.0.x) or EVM address
- {to_desc}
- {PromptGenerator.get_scheduled_transaction_params_description(context)}
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a mint ERC721 result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message describing the outcome.
    """
    if response.schedule_id:
        return (
            "Scheduled ERC721 mint created successfully.\n"
            f"Transaction ID: {response.transaction_id}\n"
            f"Schedule ID: {response.schedule_id}"
        )
    return f"ERC721 token minted successfully. Transaction ID: {response.transaction_id}"


async def mint_erc721(
    client: Client,
    context: Context,
    params: MintERC721Parameters,
) -> ToolResponse:
    try:
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )
        normalised_params = await HederaParameterNormaliser.normalise_mint_erc721_params(
            params,
            ERC721_MINT_FUNCTION_ABI,
            ERC721_MINT_FUNCTION_NAME,
            context,
            client,
            mirrornode_service,
        )
        tx = HederaBuilder.execute_transaction(normalised_params)
        return await handle_transaction(tx, client, context, post_process)
    except Exception as e:
        message: str = f"Failed to mint ERC721: {str(e)}"
        logger.error("[mint_erc721_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


MINT_ERC721_TOOL: str = "mint_erc721_tool"


class MintERC721Tool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = MINT_ERC721_TOOL
        self.name: str = "Mint ERC721"
        self.description: str = mint_erc721_prompt(context)
        self.parameters: type[MintERC721Parameters] = MintERC721Parameters
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: MintERC721Parameters
    ) -> ToolResponse:
        """Execute the mint ERC721 operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``MintERC721Parameters`` input.

        Returns:
            The result of the operation.
        """
        return await mint_erc721(client, context, params)
