from hedera_intent_kit.shared.plugin import Plugin
from .get_exchange_rate_query import (
    GET_EXCHANGE_RATE_QUERY_TOOL,
    GetExchangeRateQueryTool,
)

core_misc_query_plugin = Plugin(
    name="core-misc-query-plugin",
    version="1.0.0",
    description="A plugin for network-level Hedera queries",
    tools=lambda context: [GetExchangeRateQueryTool(context)],
)

core_misc_query_plugin_tool_names = {
    "GET_EXCHANGE_RATE_QUERY_TOOL": GET_EXCHANGE_RATE_QUERY_TOOL,
}

__all__ = [
    "core_misc_query_plugin",
    "core_misc_query_plugin_tool_names",
    "GetExchangeRateQueryTool",
]
