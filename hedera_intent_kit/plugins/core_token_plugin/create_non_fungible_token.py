"""NFT class creation operation."""

from __future__ import annotations

import logging

from hiero_sdk_python import Client

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
    CreateNonFungibleTokenParameters,
)
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def create_non_fungible_token_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the create non fungible token tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    treasury_account_desc = PromptGenerator.get_account_parameter_description(
        "treasury_account_id", context
    )
    return f"""
{PromptGenerator.get_context_snippet(context)}

This tool creates a non-fungible token (NFT) class on Hedera. The supply key is always set to the default account key so NFTs can be minted.

Parameters:
- token_name (str, required): The name of the token
- token_symbol (str, required): The symbol of the token
- max_supply (int, optional): Maximum number of NFTs, defaults to 100
- {treasury_account_desc}
- token_memo (str, optional): The memo of the token
- {PromptGenerator.get_scheduled_transaction_params_description(context)}
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a create non fungible token result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message describing the outcome.
    """
    if response.schedule_id:
        return f"""Scheduled transaction created successfully.
Transaction ID: {response.transaction_id}
Schedule ID: {response.schedule_id}"""
    return f"""Token created successfully.
Transaction ID: {response.transaction_id}
Token ID: {response.token_id or "unknown"}"""


async def create_non_fungible_token(
    client: Client,
    context: Context,
    params: CreateNonFungibleTokenParameters,
) -> ToolResponse:
    try:
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )
        normalised_params = await HederaParameterNormaliser.normalise_create_non_fungible_token_params(
            params, context, client, mirrornode_service
        )
        tx = HederaBuilder.create_non_fungible_token(normalised_params)
        return await handle_transaction(tx, client, context, post_process)
    except Exception as e:
        message: str = f"Failed to create non-fungible token: {str(e)}"
        logger.error("[create_non_fungible_token_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


CREATE_NON_FUNGIBLE_TOKEN_TOOL: str = "create_non_fungible_token_tool"


class CreateNonFungibleTokenTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = CREATE_NON_FUNGIBLE_TOKEN_TOOL
        self.name: str = "Create Non-Fungible Token"
        self.description: str = create_non_fungible_token_prompt(context)
        self.parameters: type[CreateNonFungibleTokenParameters] = (
            CreateNonFungibleTokenParameters
        )
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: CreateNonFungibleTokenParameters,
    ) -> ToolResponse:
        """Execute the create non fungible token operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``CreateNonFungibleTokenParameters`` input.

        Returns:
            The result of the operation.
        """
        return await create_non_fungible_token(client, context, params)
