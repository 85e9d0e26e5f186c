"""Topic update operation, gated on the topic's current admin and submit keys."""

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
from hedera_intent_kit.shared.parameter_schemas import UpdateTopicParameters
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.account_resolver import AccountResolver
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def update_topic_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the update topic tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    return f"""
{PromptGenerator.get_context_snippet(context)}

This tool updates an existing topic on the Hedera Consensus Service. Only the topic's admin key holder may update it, and a submit key can only be changed if the topic was created with one.

Parameters:
- topic_id (str, required): The ID of the topic to update
- topic_memo (str, optional): New memo for the topic
- admin_key (bool or str, optional): true for your public key, or a public key string
- submit_key (bool or str, optional): true for your public key, or a public key string
- auto_renew_account_id (str, optional): Account paying for auto renewal
- auto_renew_period (int, optional): Auto renew period in seconds
- expiration_time (str, optional): New expiration time, ISO 8601
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a update topic result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message describing the outcome.
    """
    return f"Topic successfully updated. Transaction ID: {response.transaction_id}"


async def update_topic(
    client: Client,
    context: Context,
    params: UpdateTopicParameters,
) -> ToolResponse:
    try:
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )
        normalised_params = await HederaParameterNormaliser.normalise_update_topic(
            params, context, client, mirrornode_service
        )

        user_public_key = await AccountResolver.get_default_public_key(
            context, client, mirrornode_service
        )
        await AuthorizationValidator.validate_topic_update(
            normalised_params, mirrornode_service, user_public_key
        )

        tx = HederaBuilder.update_topic(normalised_params)
        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to update topic: {str(e)}"
        logger.error("[update_topic_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


UPDATE_TOPIC_TOOL: str = "update_topic_tool"


class UpdateTopicTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = UPDATE_TOPIC_TOOL
        self.name: str = "Update Topic"
        self.description: str = update_topic_prompt(context)
        self.parameters: type[UpdateTopicParameters] = UpdateTopicParameters
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: UpdateTopicParameters
    ) -> ToolResponse:
        """Execute the update topic operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``UpdateTopicParameters`` input.

        Returns:
            The result of the operation.
        """
        return await update_topic(client, context, params)
