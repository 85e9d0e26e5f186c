from hedera_intent_kit.shared.plugin import Plugin
from .get_transaction_record_query import (
    GET_TRANSACTION_RECORD_QUERY_TOOL,
    GetTransactionRecordQueryTool,
)

core_transaction_query_plugin = Plugin(
    name="core-transaction-query-plugin",
    version="1.0.0",
    description="A plugin for querying Hedera transaction records",
    tools=lambda context: [GetTransactionRecordQueryTool(context)],
)

core_transaction_query_plugin_tool_names = {
    "GET_TRANSACTION_RECORD_QUERY_TOOL": GET_TRANSACTION_RECORD_QUERY_TOOL,
}

__all__ = [
    "core_transaction_query_plugin",
    "core_transaction_query_plugin_tool_names",
    "GetTransactionRecordQueryTool",
]
