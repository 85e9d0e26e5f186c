from hedera_intent_kit.shared.plugin import Plugin
from .get_pending_airdrop_query import (
    GET_PENDING_AIRDROP_QUERY_TOOL,
    GetPendingAirdropQueryTool,
)
from .get_token_info_query import GET_TOKEN_INFO_QUERY_TOOL, GetTokenInfoQueryTool

core_token_query_plugin = Plugin(
    name="core-token-query-plugin",
    version="1.0.0",
    description="A plugin for querying Hedera tokens through the mirror node",
    tools=lambda context: [
        GetTokenInfoQueryTool(context),
        GetPendingAirdropQueryTool(context),
    ],
)

core_token_query_plugin_tool_names = {
    "GET_TOKEN_INFO_QUERY_TOOL": GET_TOKEN_INFO_QUERY_TOOL,
    "GET_PENDING_AIRDROP_QUERY_TOOL": GET_PENDING_AIRDROP_QUERY_TOOL,
}

__all__ = [
    "core_token_query_plugin",
    "core_token_query_plugin_tool_names",
    "GetPendingAirdropQueryTool",
    "GetTokenInfoQueryTool",
]
