"""Topic creation operation.

This module exposes:
- create_topic_prompt: Description of the create topic tool.
- create_topic: Execute a topic creation transaction.
- CreateTopicTool: Tool wrapper exposing the topic creation operation to the runtime.
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
    CreateTopicParameters,
    CreateTopicParametersNormalised,
)
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def create_topic_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the create topic tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    context_snippet: str = PromptGenerator.get_context_snippet(context)

    return f"""
{context_snippet}

This tool creates a new topic on the Hedera Consensus Service. The admin key is always set to your public key.

Parameters:
- is_submit_key (bool, optional): Restrict message submission to your key, defaults to false
- topic_memo (str, optional): Memo for the topic
- transaction_memo (str, optional): Memo for the transaction
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a topic creation result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message carrying the new topic id.
    """
    return (
        f"Topic created successfully with topic id {response.topic_id} "
        f"and transaction id {response.transaction_id}"
    )


async def create_topic(
    client: Client,
    context: Context,
    params: CreateTopicParameters,
) -> ToolResponse:
    """Execute a topic creation using normalised parameters and a built transaction.

    Args:
        client: Ledger client used to execute transactions.
        context: Runtime context providing configuration and defaults.
        params: User-supplied parameters describing the topic.

    Returns:
        A ToolResponse wrapping the transaction result.
    """
    try:
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )
        normalised_params: CreateTopicParametersNormalised = (
            await HederaParameterNormaliser.normalise_create_topic_params(
                params, context, client, mirrornode_service
            )
        )

        tx = HederaBuilder.create_topic(normalised_params)

        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to create topic: {str(e)}"
        logger.error("[create_topic_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


CREATE_TOPIC_TOOL: str = "create_topic_tool"


class CreateTopicTool(Tool):
    """Tool wrapper that exposes the topic creation capability to the runtime."""

    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = CREATE_TOPIC_TOOL
        self.name: str = "Create Topic"
        self.description: str = create_topic_prompt(context)
        self.parameters: type[CreateTopicParameters] = CreateTopicParameters
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: CreateTopicParameters
    ) -> ToolResponse:
        """Execute the create topic operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``CreateTopicParameters`` input.

        Returns:
            The result of the operation.
        """
        return await create_topic(client, context, params)
