"""Account info query backed by the mirror node."""

from __future__ import annotations

import logging

from hiero_sdk_python import Client

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.hedera_utils.decimals_utils import to_hbar
from hedera_intent_kit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_intent_kit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_intent_kit.shared.hedera_utils.mirrornode.types import AccountResponse
from hedera_intent_kit.shared.models import ToolResponse
from hedera_intent_kit.shared.parameter_schemas import AccountQueryParameters
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    untyped_query_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def get_account_query_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the get account query tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    return f"""
{PromptGenerator.get_context_snippet(context)}

This tool returns the account information for a given Hedera account.

Parameters:
- account_id (str, required): The account ID to query
"""


def post_process(account: AccountResponse) -> str:
    """Render the get account query result for the agent.

    Args:
        account: Account details from the mirror node.

    Returns:
        A formatted, human-readable message.
    """
    balance = (account.get("balance") or {}).get("balance") or 0
    return f"""Details for {account.get("account_id")}
Balance: {to_hbar(balance)} HBAR
Public Key: {account.get("account_public_key") or "N/A"}
EVM address: {account.get("evm_address") or "N/A"}
"""


async def get_account_query(
    client: Client,
    context: Context,
    params: AccountQueryParameters,
) -> ToolResponse:
    try:
        normalised_params = HederaParameterNormaliser.normalise_get_account_query(params)
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )
        account = await mirrornode_service.get_account(normalised_params.account_id)
        return ToolResponse(
            human_message=post_process(account),
            extra={"accountId": normalised_params.account_id, "account": account},
        )
    except Exception as e:
        message: str = f"Failed to get account query: {str(e)}"
        logger.error("[get_account_query_tool] %s", message)
        return ToolResponse(human_message=message, error=message)


GET_ACCOUNT_QUERY_TOOL: str = "get_account_query_tool"


class GetAccountQueryTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = GET_ACCOUNT_QUERY_TOOL
        self.name: str = "Get Account Query"
        self.description: str = get_account_query_prompt(context)
        self.parameters: type[AccountQueryParameters] = AccountQueryParameters
        self.outputParser = untyped_query_output_parser

    async def execute(
        self, client: Client, context: Context, params: AccountQueryParameters
    ) -> ToolResponse:
        """Execute the get account query operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``AccountQueryParameters`` input.

        Returns:
            The result of the operation.
        """
        return await get_account_query(client, context, params)
