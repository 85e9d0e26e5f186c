"""Topic message submission operation."""

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
from hedera_intent_kit.shared.parameter_schemas import (
    SubmitTopicMessageParameters,
    SubmitTopicMessageParametersNormalised,
)
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def submit_topic_message_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the submit topic message tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    return f"""
{PromptGenerator.get_context_snippet(context)}

This tool submits a message to a topic on the Hedera Consensus Service.

Parameters:
- topic_id (str, required): The ID of the topic
- message (str, required): The message to submit
- transaction_memo (str, optional): Memo for the transaction
- {PromptGenerator.get_scheduled_transaction_params_description(context)}
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a submit topic message result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message describing the outcome.
    """
    if response.schedule_id:
        return (
            "Scheduled message submission created successfully.\n"
            f"Transaction ID: {response.transaction_id}\n"
            f"Schedule ID: {response.schedule_id}"
        )
    return f"Message submitted successfully with transaction id {response.transaction_id}"


async def submit_topic_message(
    client: Client,
    context: Context,
    params: SubmitTopicMessageParameters,
) -> ToolResponse:
    """Submit a message to a topic.

    Args:
        client: Ledger client used to execute transactions.
        context: Runtime context providing configuration and defaults.
        params: Topic id and message.

    Returns:
        A ToolResponse wrapping the transaction result.
    """
    try:
        normalised_params: SubmitTopicMessageParametersNormalised = (
            await HederaParameterNormaliser.normalise_submit_topic_message(
                params, context, client
            )
        )
        tx = HederaBuilder.submit_topic_message(normalised_params)
        return await handle_transaction(tx, client, context, post_process)
    except Exception as e:
        message: str = f"Failed to submit message to topic: {str(e)}"
        logger.error("[submit_topic_message_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


SUBMIT_TOPIC_MESSAGE_TOOL: str = "submit_topic_message_tool"


class SubmitTopicMessageTool(Tool):
    """Tool wrapper that exposes topic message submission to the runtime."""

    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = SUBMIT_TOPIC_MESSAGE_TOOL
        self.name: str = "Submit Topic Message"
        self.description: str = submit_topic_message_prompt(context)
        self.parameters: type[SubmitTopicMessageParameters] = (
            SubmitTopicMessageParameters
        )
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: SubmitTopicMessageParameters,
    ) -> ToolResponse:
        """Execute the submit topic message operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``SubmitTopicMessageParameters`` input.

        Returns:
            The result of the operation.
        """
        return await submit_topic_message(client, context, params)
