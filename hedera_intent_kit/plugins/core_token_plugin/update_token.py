"""Token update operation.

The caller's default key must match the token's on-chain admin key, and every
key being set must already exist on the token. Both are checked against the
mirror node before a transaction is built.
"""

from __future__ import annotations

import logging

from hiero_sdk_python import Client

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.hedera_utils.authorization import AuthorizationValidator
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
    UpdateTokenParameters,
    UpdateTokenParametersNormalised,
)
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.account_resolver import AccountResolver
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def update_token_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the update token tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    treasury_desc: str = PromptGenerator.get_account_parameter_description(
        "treasury_account_id", context
    )

    return f"""
{context_snippet}

This tool updates an existing Hedera token. Only the token's admin key holder may update it, and only keys that were set at creation can be changed.

Parameters:
- token_id (str, required): The ID of the token to update
- token_name (str, optional): New name, max 100 characters
- token_symbol (str, optional): New symbol, max 100 characters
- {treasury_desc}
- auto_renew_account_id (str, optional): Account paying for auto renewal
- token_memo (str, optional): New memo, max 100 characters
- metadata (str, optional): New token metadata
- admin_key, kyc_key, freeze_key, wipe_key, supply_key, fee_schedule_key, pause_key, metadata_key (bool or str, optional):
  true sets the key to your public key, false leaves it unchanged, a string sets that public key
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a update token result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message describing the outcome.
    """
    return f"Token successfully updated. Transaction ID: {response.transaction_id}"


async def update_token(
    client: Client,
    context: Context,
    params: UpdateTokenParameters,
) -> ToolResponse:
    """Normalise, authorise and submit a token update.

    Authorization failures never reach the ledger; they are reported in the
    same failure envelope as validation errors.
    """
    try:
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )
        normalised_params: UpdateTokenParametersNormalised = (
            await HederaParameterNormaliser.normalise_update_token(
                params, context, client, mirrornode_service
            )
        )

        user_public_key = await AccountResolver.get_default_public_key(
            context, client, mirrornode_service
        )
        await AuthorizationValidator.validate_token_update(
            normalised_params, mirrornode_service, user_public_key
        )

        tx = HederaBuilder.update_token(normalised_params)
        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to update token: {str(e)}"
        logger.error("[update_token_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


UPDATE_TOKEN_TOOL: str = "update_token_tool"


class UpdateTokenTool(Tool):
    """Tool wrapper that exposes the token update capability to the runtime."""

    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = UPDATE_TOKEN_TOOL
        self.name: str = "Update Token"
        self.description: str = update_token_prompt(context)
        self.parameters: type[UpdateTokenParameters] = UpdateTokenParameters
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: UpdateTokenParameters
    ) -> ToolResponse:
        """Execute the update token operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``UpdateTokenParameters`` input.

        Returns:
            The result of the operation.
        """
        return await update_token(client, context, params)
