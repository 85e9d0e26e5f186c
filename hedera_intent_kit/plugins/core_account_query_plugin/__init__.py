from hedera_intent_kit.shared.plugin import Plugin
from .get_account_query import GET_ACCOUNT_QUERY_TOOL, GetAccountQueryTool
from .get_account_token_balances_query import (
    GET_ACCOUNT_TOKEN_BALANCES_QUERY_TOOL,
    GetAccountTokenBalancesQueryTool,
)
from .get_hbar_balance_query import (
    GET_HBAR_BALANCE_QUERY_TOOL,
    GetHbarBalanceQueryTool,
)

core_account_query_plugin = Plugin(
    name="core-account-query-plugin",
    version="1.0.0",
    description="A plugin for querying Hedera accounts through the mirror node",
    tools=lambda context: [
        GetAccountQueryTool(context),
        GetHbarBalanceQueryTool(context),
        GetAccountTokenBalancesQueryTool(context),
    ],
)

core_account_query_plugin_tool_names = {
    "GET_ACCOUNT_QUERY_TOOL": GET_ACCOUNT_QUERY_TOOL,
    "GET_HBAR_BALANCE_QUERY_TOOL": GET_HBAR_BALANCE_QUERY_TOOL,
    "GET_ACCOUNT_TOKEN_BALANCES_QUERY_TOOL": GET_ACCOUNT_TOKEN_BALANCES_QUERY_TOOL,
}

__all__ = [
    "core_account_query_plugin",
    "core_account_query_plugin_tool_names",
    "GetAccountQueryTool",
    "GetAccountTokenBalancesQueryTool",
    "GetHbarBalanceQueryTool",
]
