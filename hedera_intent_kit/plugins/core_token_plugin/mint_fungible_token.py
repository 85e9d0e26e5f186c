"""Fungible token minting operation.

This module exposes:
- mint_fungible_token_prompt: Description of the mint fungible token tool.
- mint_fungible_token: Execute a token minting transaction.
- MintFungibleTokenTool: Tool wrapper exposing the token minting operation to the runtime.
"""

from __future__ import annotations

import logging

from hiero_sdk_python import Client
from hiero_sdk_python.transaction.transaction import Transaction

from hedera_intent_kit.shared.configuration import Context
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
from hedera_intent_kit.shared.parameter_schemas import (
    MintFungibleTokenParameters,
    MintFungibleTokenParametersNormalised,
)
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def mint_fungible_token_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the mint fungible token tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    context_snippet: str = PromptGenerator.get_context_snippet(context)

    return f"""
{context_snippet}

This tool mints additional supply of an existing fungible token. The amount is given in display units and converted using the token's decimals.

Parameters:
- token_id (str, required): The id of the token
- amount (number, required): The amount to be minted
- {PromptGenerator.get_scheduled_transaction_params_description(context)}
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a token minting result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A concise message describing the status and any relevant identifiers.
    """
    if response.schedule_id:
        return (
            f"Scheduled mint transaction created successfully.\n"
            f"Transaction ID: {response.transaction_id}\n"
            f"Schedule ID: {response.schedule_id}"
        )
    return f"Tokens successfully minted.\nTransaction ID: {response.transaction_id}"


async def mint_fungible_token(
    client: Client,
    context: Context,
    params: MintFungibleTokenParameters,
) -> ToolResponse:
    """Execute a token minting using normalised parameters and a built transaction.

    Args:
        client: Ledger client used to execute transactions.
        context: Runtime context providing configuration and defaults.
        params: User-supplied parameters describing the token mint.

    Returns:
        A ToolResponse wrapping the raw transaction response and a human-friendly
        message indicating success or failure.
    """
    try:
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )
        normalised_params: MintFungibleTokenParametersNormalised = (
            await HederaParameterNormaliser.normalise_mint_fungible_token_params(
                params, context, client, mirrornode_service
            )
        )

        tx: Transaction = HederaBuilder.mint_fungible_token(normalised_params)

        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to mint fungible token: {str(e)}"
        logger.error("[mint_fungible_token_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


MINT_FUNGIBLE_TOKEN_TOOL: str = "mint_fungible_token_tool"


class MintFungibleTokenTool(Tool):
    """Tool wrapper that exposes the fungible token minting capability to the runtime."""

    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = MINT_FUNGIBLE_TOKEN_TOOL
        self.name: str = "Mint Fungible Token"
        self.description: str = mint_fungible_token_prompt(context)
        self.parameters: type[MintFungibleTokenParameters] = MintFungibleTokenParameters
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: MintFungibleTokenParameters,
    ) -> ToolResponse:
        """Execute the mint fungible token operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``MintFungibleTokenParameters`` input.

        Returns:
            The result of the operation.
        """
        return await mint_fungible_token(client, context, params)
