"""Topic messages query.

This module exposes:
- get_topic_messages_query_prompt: Description of the topic messages query tool.
- get_topic_messages_query: Fetch messages of a topic within an optional time window.
- GetTopicMessagesQueryTool: Tool wrapper exposing the query to the runtime.
"""

from __future__ import annotations

import logging

from hiero_sdk_python import Client

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_intent_kit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_intent_kit.shared.hedera_utils.mirrornode.types import (
    TopicMessagesQueryParams,
    TopicMessagesResponse,
)
from hedera_intent_kit.shared.models import ToolResponse
from hedera_intent_kit.shared.parameter_schemas import TopicMessagesQueryParameters
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    untyped_query_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def get_topic_messages_query_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the get topic messages query tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    return f"""
{PromptGenerator.get_context_snippet(context)}

This tool returns the messages of a given Hedera topic, newest first.

Parameters:
- topic_id (str, required): The topic ID to query
- start_time (str, optional): Only messages at or after this time (ISO 8601)
- end_time (str, optional): Only messages at or before this time (ISO 8601)
- limit (int, optional): Maximum number of messages to return, defaults to 100
"""


def post_process(response: TopicMessagesResponse) -> str:
    """Render messages as a numbered list.

    Args:
        response: Messages already decoded from base64 by the mirror node service.

    Returns:
        A human-readable listing of the messages.
    """
    messages = response.get("messages") or []
    if not messages:
        return f"No messages found for topic {response.get('topic_id')}"

    lines = [f"Messages for topic {response.get('topic_id')}:"]
    for message in messages:
        lines.append(
            f"- #{message.get('sequence_number')} at "
            f"{message.get('consensus_timestamp')}: {message.get('message')}"
        )
    return "\n".join(lines)


async def get_topic_messages_query(
    client: Client,
    context: Context,
    params: TopicMessagesQueryParameters,
) -> ToolResponse:
    try:
        normalised_params = HederaParameterNormaliser.normalise_get_topic_messages(
            params
        )
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )
        query_params: TopicMessagesQueryParams = normalised_params.model_dump(
            exclude_none=True
        )
        response = await mirrornode_service.get_topic_messages(query_params)
        return ToolResponse(
            human_message=post_process(response),
            extra={"topicId": normalised_params.topic_id, "messages": response},
        )
    except Exception as e:
        message = f"Failed to get topic messages: {str(e)}"
        logger.error("[get_topic_messages_query_tool] %s", message)
        return ToolResponse(human_message=message, error=message)


GET_TOPIC_MESSAGES_QUERY_TOOL: str = "get_topic_messages_query_tool"


class GetTopicMessagesQueryTool(Tool):
    """Tool wrapper that exposes the topic messages query to the runtime."""

    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = GET_TOPIC_MESSAGES_QUERY_TOOL
        self.name: str = "Get Topic Messages"
        self.description: str = get_topic_messages_query_prompt(context)
        self.parameters: type[TopicMessagesQueryParameters] = (
            TopicMessagesQueryParameters
        )
        self.outputParser = untyped_query_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: TopicMessagesQueryParameters,
    ) -> ToolResponse:
        """Execute the get topic messages query operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``TopicMessagesQueryParameters`` input.

        Returns:
            The result of the operation.
        """
        return await get_topic_messages_query(client, context, params)
