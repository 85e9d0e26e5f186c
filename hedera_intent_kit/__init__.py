from hedera_intent_kit.shared.configuration import AgentMode, Configuration, Context
from hedera_intent_kit.shared.errors import HederaAgentKitError
from hedera_intent_kit.shared.models import (
    ExecutedTransactionToolResponse,
    RawTransactionResponse,
    ReturnBytesToolResponse,
    ToolResponse,
)
from hedera_intent_kit.shared.plugin import Plugin, PluginRegistry, get_configured_tools
from hedera_intent_kit.shared.tool import Tool

__version__ = "0.1.0"

__all__ = [
    "AgentMode",
    "Configuration",
    "Context",
    "ExecutedTransactionToolResponse",
    "HederaAgentKitError",
    "Plugin",
    "PluginRegistry",
    "RawTransactionResponse",
    "ReturnBytesToolResponse",
    "Tool",
    "ToolResponse",
    "get_configured_tools",
]
