"""Topic info query backed by the mirror node."""

from __future__ import annotations

import logging

from hiero_sdk_python import Client

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_intent_kit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_intent_kit.shared.hedera_utils.mirrornode.types import TopicInfo
from hedera_intent_kit.shared.models import ToolResponse
from hedera_intent_kit.shared.parameter_schemas import GetTopicInfoParameters
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    untyped_query_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def get_topic_info_query_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the get topic info query tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    return f"""
{PromptGenerator.get_context_snippet(context)}

This tool returns the information for a given Hedera topic.

Parameters:
- topic_id (str, required): The topic ID to query for.
"""


def _format_key(key) -> str:
    if not key:
        return "Not Set"
    return str(key.get("key") or "Present")


def post_process(topic_id: str, topic: TopicInfo) -> str:
    """Render the get topic info query result for the agent.

    Args:
        topic_id: The queried topic ID.
        topic: Topic details from the mirror node.

    Returns:
        A formatted, human-readable message.
    """
    return f"""Here are the details for topic **{topic_id}**:

- **Memo**: {topic.get("memo") or "N/A"}
- **Deleted**: {"Yes" if topic.get("deleted") else "No"}
- **Sequence Number**: {topic.get("sequence_number", "N/A")}
- **Created**: {topic.get("created_timestamp") or "N/A"}
- **Auto Renew Account**: {topic.get("auto_renew_account") or "N/A"}
- **Auto Renew Period**: {topic.get("auto_renew_period") or "N/A"}

**Keys**:
- Admin Key: {_format_key(topic.get("admin_key"))}
- Submit Key: {_format_key(topic.get("submit_key"))}
"""


async def get_topic_info_query(
    client: Client,
    context: Context,
    params: GetTopicInfoParameters,
) -> ToolResponse:
    try:
        parsed_params = HederaParameterNormaliser.normalise_get_topic_info(params)
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )
        topic_info = await mirrornode_service.get_topic_info(parsed_params.topic_id)
        return ToolResponse(
            human_message=post_process(parsed_params.topic_id, topic_info),
            extra={"topicId": parsed_params.topic_id, "topicInfo": topic_info},
        )
    except Exception as e:
        message = f"Failed to get topic info: {str(e)}"
        logger.error("[get_topic_info_query_tool] %s", message)
        return ToolResponse(human_message=message, error=message)


GET_TOPIC_INFO_QUERY_TOOL: str = "get_topic_info_query_tool"


class GetTopicInfoQueryTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = GET_TOPIC_INFO_QUERY_TOOL
        self.name: str = "Get Topic Info"
        self.description: str = get_topic_info_query_prompt(context)
        self.parameters: type[GetTopicInfoParameters] = GetTopicInfoParameters
        self.outputParser = untyped_query_output_parser

    async def execute(
        self, client: Client, context: Context, params: GetTopicInfoParameters
    ) -> ToolResponse:
        """Execute the get topic info query operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``GetTopicInfoParameters`` input.

        Returns:
            The result of the operation.
        """
        return await get_topic_info_query(client, context, params)
