from hedera_intent_kit.shared.plugin import Plugin
from .create_topic import CREATE_TOPIC_TOOL, CreateTopicTool
from .delete_topic import DELETE_TOPIC_TOOL, DeleteTopicTool
from .submit_topic_message import SUBMIT_TOPIC_MESSAGE_TOOL, SubmitTopicMessageTool
from .update_topic import UPDATE_TOPIC_TOOL, UpdateTopicTool

core_consensus_plugin = Plugin(
    name="core-consensus-plugin",
    version="1.0.0",
    description="A plugin for the Hedera Consensus Service",
    tools=lambda context: [
        CreateTopicTool(context),
        SubmitTopicMessageTool(context),
        UpdateTopicTool(context),
        DeleteTopicTool(context),
    ],
)

core_consensus_plugin_tool_names = {
    "CREATE_TOPIC_TOOL": CREATE_TOPIC_TOOL,
    "SUBMIT_TOPIC_MESSAGE_TOOL": SUBMIT_TOPIC_MESSAGE_TOOL,
    "UPDATE_TOPIC_TOOL": UPDATE_TOPIC_TOOL,
    "DELETE_TOPIC_TOOL": DELETE_TOPIC_TOOL,
}

__all__ = [
    "core_consensus_plugin",
    "core_consensus_plugin_tool_names",
    "CreateTopicTool",
    "DeleteTopicTool",
    "SubmitTopicMessageTool",
    "UpdateTopicTool",
]
