"""Utilities for building and executing fungible token creation operations.

This module exposes:
- create_fungible_token_prompt: Description of the create fungible token tool.
- create_fungible_token: Execute a token creation transaction.
- CreateFungibleTokenTool: Tool wrapper exposing the create fungible token operation to the runtime.
"""

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
    CreateFungibleTokenParameters,
    CreateFungibleTokenParametersNormalised,
)
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def create_fungible_token_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the create fungible token tool.

    Args:
        context: Contextual configuration that may influence the description.

    Returns:
        A string describing the tool and its parameters.
    """
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    treasury_account_desc: str = PromptGenerator.get_account_parameter_description(
        "treasury_account_id", context
    )
    scheduled_params_desc: str = (
        PromptGenerator.get_scheduled_transaction_params_description(context)
    )

    return f"""
{context_snippet}

This tool creates a fungible token on Hedera.

Parameters:
- token_name (str, required): The name of the token
- token_symbol (str, required): The symbol of the token
- initial_supply (number, optional): The initial supply in display units, defaults to 0
- supply_type (str, optional): "finite" or "infinite", defaults to "finite"
- max_supply (number, optional): Only for finite supply, defaults to 1,000,000
- decimals (int, optional): The number of decimals, defaults to 0
- {treasury_account_desc}
- is_supply_key (bool, optional): Set the default account key as supply key
- token_memo (str, optional): The memo of the token
- {scheduled_params_desc}
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a fungible token creation result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A concise message describing the token ID and transaction ID.
    """
    if response.schedule_id:
        return f"""Scheduled transaction created successfully.
Transaction ID: {response.transaction_id}
Schedule ID: {response.schedule_id}"""

    token_id_str = response.token_id or "unknown"
    return f"""Token created successfully.
Transaction ID: {response.transaction_id}
Token ID: {token_id_str}"""


async def create_fungible_token(
    client: Client,
    context: Context,
    params: CreateFungibleTokenParameters,
) -> ToolResponse:
    """Execute a fungible token creation using normalised parameters and a built transaction.

    Args:
        client: Ledger client used to execute transactions.
        context: Runtime context providing configuration and defaults.
        params: User-supplied parameters describing the token to create.

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

        normalised_params: CreateFungibleTokenParametersNormalised = (
            await HederaParameterNormaliser.normalise_create_fungible_token_params(
                params, context, client, mirrornode_service
            )
        )

        tx = HederaBuilder.create_fungible_token(normalised_params)

        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to create fungible token: {str(e)}"
        logger.error("[create_fungible_token_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


CREATE_FUNGIBLE_TOKEN_TOOL: str = "create_fungible_token_tool"


class CreateFungibleTokenTool(Tool):
    """Tool wrapper that exposes the fungible token creation capability to the runtime."""

    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = CREATE_FUNGIBLE_TOKEN_TOOL
        self.name: str = "Create Fungible Token"
        self.description: str = create_fungible_token_prompt(context)
        self.parameters: type[CreateFungibleTokenParameters] = (
            CreateFungibleTokenParameters
        )
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: CreateFungibleTokenParameters,
    ) -> ToolResponse:
        """Execute the create fungible token operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``CreateFungibleTokenParameters`` input.

        Returns:
            The result of the operation.
        """
        return await create_fungible_token(client, context, params)
