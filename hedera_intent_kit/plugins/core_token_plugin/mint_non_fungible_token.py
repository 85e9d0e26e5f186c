"""NFT minting operation."""

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
from hedera_intent_kit.shared.parameter_schemas import MintNonFungibleTokenParameters
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def mint_non_fungible_token_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the mint non fungible token tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    return f"""
{PromptGenerator.get_context_snippet(context)}

This tool mints NFTs with the given metadata URIs for an existing NFT class.

Parameters:
- token_id (str, required): The id of the NFT class
- uris (array of strings, required): One URI per NFT, at most 10, each at most 100 characters
- {PromptGenerator.get_scheduled_transaction_params_description(context)}
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a mint non fungible token result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message describing the outcome.
    """
    if response.schedule_id:
        return (
            "Scheduled mint transaction created successfully.\n"
            f"Transaction ID: {response.transaction_id}\n"
            f"Schedule ID: {response.schedule_id}"
        )
    return f"NFTs successfully minted.\nTransaction ID: {response.transaction_id}"


async def mint_non_fungible_token(
    client: Client,
    context: Context,
    params: MintNonFungibleTokenParameters,
) -> ToolResponse:
    try:
        normalised_params = (
            await HederaParameterNormaliser.normalise_mint_non_fungible_token_params(
                params, context, client
            )
        )
        tx = HederaBuilder.mint_non_fungible_token(normalised_params)
        return await handle_transaction(tx, client, context, post_process)
    except Exception as e:
        message: str = f"Failed to mint non-fungible token: {str(e)}"
        logger.error("[mint_non_fungible_token_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


MINT_NON_FUNGIBLE_TOKEN_TOOL: str = "mint_non_fungible_token_tool"


class MintNonFungibleTokenTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = MINT_NON_FUNGIBLE_TOKEN_TOOL
        self.name: str = "Mint Non-Fungible Token"
        self.description: str = mint_non_fungible_token_prompt(context)
        self.parameters: type[MintNonFungibleTokenParameters] = (
            MintNonFungibleTokenParameters
        )
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: MintNonFungibleTokenParameters,
    ) -> ToolResponse:
        """Execute the mint non fungible token operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``MintNonFungibleTokenParameters`` input.

        Returns:
            The result of the operation.
        """
        return await mint_non_fungible_token(client, context, params)
