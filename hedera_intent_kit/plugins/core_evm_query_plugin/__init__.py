from hedera_intent_kit.shared.plugin import Plugin
from .get_contract_info_query import (
    GET_CONTRACT_INFO_QUERY_TOOL,
    GetContractInfoQueryTool,
)

core_evm_query_plugin = Plugin(
    name="core-evm-query-plugin",
    version="1.0.0",
    description="A plugin for querying smart contracts on Hedera",
    tools=lambda context: [GetContractInfoQueryTool(context)],
)

core_evm_query_plugin_tool_names = {
    "GET_CONTRACT_INFO_QUERY_TOOL": GET_CONTRACT_INFO_QUERY_TOOL,
}

__all__ = [
    "core_evm_query_plugin",
    "core_evm_query_plugin_tool_names",
    "GetContractInfoQueryTool",
]
