"""Fungible token airdrop operation.

Recipients that are not associated with the token receive a pending airdrop
they can claim later; associated recipients are credited directly.
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
    AirdropFungibleTokenParameters,
    AirdropFungibleTokenParametersNormalised,
)
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def airdrop_fungible_token_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the airdrop fungible token tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    source_account_desc: str = PromptGenerator.get_account_parameter_description(
        "source_account_id", context
    )

    return f"""
{context_snippet}

This tool airdrops a fungible token to multiple recipients on Hedera.

Parameters:
- token_id (str, required): The id of the token
- {source_account_desc}
- recipients (array, required): List of objects with account_id (str) and amount (number, display units)
- transaction_memo (str, optional): Optional memo for the transaction
- {PromptGenerator.get_scheduled_transaction_params_description(context)}
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a airdrop fungible token result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message describing the outcome.
    """
    if response.schedule_id:
        return (
            "Scheduled airdrop created successfully.\n"
            f"Transaction ID: {response.transaction_id}\n"
            f"Schedule ID: {response.schedule_id}"
        )
    return f"Token successfully airdropped with transaction id {response.transaction_id}"


async def airdrop_fungible_token(
    client: Client,
    context: Context,
    params: AirdropFungibleTokenParameters,
) -> ToolResponse:
    """Execute a fungible token airdrop.

    Args:
        client: Ledger client used to execute transactions.
        context: Runtime context providing configuration and defaults.
        params: Token, source account and recipient list.

    Returns:
        A ToolResponse wrapping the transaction result.
    """
    try:
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )
        normalised_params: AirdropFungibleTokenParametersNormalised = (
            await HederaParameterNormaliser.normalise_airdrop_fungible_token_params(
                params, context, client, mirrornode_service
            )
        )

        tx = HederaBuilder.airdrop_fungible_token(normalised_params)

        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to airdrop fungible token: {str(e)}"
        logger.error("[airdrop_fungible_token_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


AIRDROP_FUNGIBLE_TOKEN_TOOL: str = "airdrop_fungible_token_tool"


class AirdropFungibleTokenTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = AIRDROP_FUNGIBLE_TOKEN_TOOL
        self.name: str = "Airdrop Fungible Token"
        self.description: str = airdrop_fungible_token_prompt(context)
        self.parameters: type[AirdropFungibleTokenParameters] = (
            AirdropFungibleTokenParameters
        )
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: AirdropFungibleTokenParameters,
    ) -> ToolResponse:
        """Execute the airdrop fungible token operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``AirdropFungibleTokenParameters`` input.

        Returns:
            The result of the operation.
        """
        return await airdrop_fungible_token(client, context, params)
