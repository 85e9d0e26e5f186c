from hedera_intent_kit.shared.plugin import Plugin
from .get_topic_info_query import GET_TOPIC_INFO_QUERY_TOOL, GetTopicInfoQueryTool
from .get_topic_messages_query import (
    GET_TOPIC_MESSAGES_QUERY_TOOL,
    GetTopicMessagesQueryTool,
)

core_consensus_query_plugin = Plugin(
    name="core-consensus-query-plugin",
    version="1.0.0",
    description="A plugin for querying Hedera Consensus Service topics",
    tools=lambda context: [
        GetTopicInfoQueryTool(context),
        GetTopicMessagesQueryTool(context),
    ],
)

core_consensus_query_plugin_tool_names = {
    "GET_TOPIC_INFO_QUERY_TOOL": GET_TOPIC_INFO_QUERY_TOOL,
    "GET_TOPIC_MESSAGES_QUERY_TOOL": GET_TOPIC_MESSAGES_QUERY_TOOL,
}

__all__ = [
    "core_consensus_query_plugin",
    "core_consensus_query_plugin_tool_names",
    "GetTopicInfoQueryTool",
    "GetTopicMessagesQueryTool",
]
