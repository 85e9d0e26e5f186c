__all__ = [
    "CORE_PLUGINS",
    "core_account_plugin",
    "core_account_plugin_tool_names",
    "core_token_query_plugin_tool_names",
    "core_token_query_plugin",
    "core_transaction_query_plugin",
    "core_transaction_query_plugin_tool_names",
    "core_consensus_plugin",
    "core_consensus_plugin_tool_names",
    "core_account_query_plugin",
    "core_account_query_plugin_tool_names",
    "core_consensus_query_plugin",
    "core_consensus_query_plugin_tool_names",
    "core_evm_plugin",
    "core_evm_plugin_tool_names",
    "core_evm_query_plugin",
    "core_evm_query_plugin_tool_names",
    "core_misc_query_plugin",
    "core_misc_query_plugin_tool_names",
    "core_token_plugin_tool_names",
    "core_token_plugin",
]

from hedera_intent_kit.plugins.core_account_plugin import (
    core_account_plugin,
    core_account_plugin_tool_names,
)

from hedera_intent_kit.plugins.core_account_query_plugin import (
    core_account_query_plugin,
    core_account_query_plugin_tool_names,
)

from hedera_intent_kit.plugins.core_consensus_plugin import (
    core_consensus_plugin,
    core_consensus_plugin_tool_names,
)

from hedera_intent_kit.plugins.core_consensus_query_plugin import (
    core_consensus_query_plugin,
    core_consensus_query_plugin_tool_names,
)

from hedera_intent_kit.plugins.core_evm_plugin import (
    core_evm_plugin,
    core_evm_plugin_tool_names,
)

from hedera_intent_kit.plugins.core_evm_query_plugin import (
    core_evm_query_plugin,
    core_evm_query_plugin_tool_names,
)

from hedera_intent_kit.plugins.core_misc_query_plugin import (
    core_misc_query_plugin,
    core_misc_query_plugin_tool_names,
)

from hedera_intent_kit.plugins.core_token_query_plugin import (
    core_token_query_plugin_tool_names,
    core_token_query_plugin,
)

from hedera_intent_kit.plugins.core_transaction_query_plugin import (
    core_transaction_query_plugin,
    core_transaction_query_plugin_tool_names,
)

from hedera_intent_kit.plugins.core_token_plugin import (
    core_token_plugin_tool_names,
    core_token_plugin,
)

CORE_PLUGINS = [
    core_account_plugin,
    core_account_query_plugin,
    core_token_plugin,
    core_token_query_plugin,
    core_consensus_plugin,
    core_consensus_query_plugin,
    core_evm_plugin,
    core_evm_query_plugin,
    core_misc_query_plugin,
    core_transaction_query_plugin,
]
