"""HBAR balance query.

This module exposes:
- get_hbar_balance_query_prompt: Description of the HBAR balance query tool.
- get_hbar_balance_query: Fetch an account's HBAR balance from the mirror node.
- GetHbarBalanceQueryTool: Tool wrapper exposing the query to the runtime.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from hiero_sdk_python import Client

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.hedera_utils.decimals_utils import to_hbar
from hedera_intent_kit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_intent_kit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_intent_kit.shared.models import ToolResponse
from hedera_intent_kit.shared.parameter_schemas import AccountBalanceQueryParameters
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    untyped_query_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def get_hbar_balance_query_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the get HBAR balance query tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    account_desc: str = PromptGenerator.get_account_parameter_description(
        "account_id", context
    )
    return f"""
{PromptGenerator.get_context_snippet(context)}

This tool returns the HBAR balance for a given Hedera account.

Parameters:
- {account_desc}
"""


def post_process(hbar_balance: Decimal, account_id: str) -> str:
    """Format a balance already converted to HBAR.

    Args:
        hbar_balance: Balance already converted to HBAR.
        account_id: The queried account ID.

    Returns:
        A formatted, human-readable message.
    """
    return f"Account {account_id} has a balance of {hbar_balance} HBAR"


async def get_hbar_balance_query(
    client: Client,
    context: Context,
    params: AccountBalanceQueryParameters,
) -> ToolResponse:
    """Fetch the HBAR balance of an account, defaulting to the default account.

    Args:
        client: Ledger client; only used to pick the network and default account.
        context: Runtime context.
        params: Optional account id.

    Returns:
        A ToolResponse whose extra carries the balance in HBAR and tinybars.
    """
    try:
        normalised_params = HederaParameterNormaliser.normalise_get_hbar_balance(
            params, context, client
        )
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )
        tinybars = await mirrornode_service.get_account_hbar_balance(
            normalised_params.account_id
        )
        hbar_balance = to_hbar(tinybars)
        return ToolResponse(
            human_message=post_process(hbar_balance, normalised_params.account_id),
            extra={
                "accountId": normalised_params.account_id,
                "hbarBalance": str(hbar_balance),
                "tinybarBalance": str(tinybars),
            },
        )
    except Exception as e:
        message: str = f"Failed to get HBAR balance: {str(e)}"
        logger.error("[get_hbar_balance_query_tool] %s", message)
        return ToolResponse(human_message=message, error=message)


GET_HBAR_BALANCE_QUERY_TOOL: str = "get_hbar_balance_query_tool"


class GetHbarBalanceQueryTool(Tool):
    """Tool wrapper that exposes the HBAR balance query to the runtime."""

    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = GET_HBAR_BALANCE_QUERY_TOOL
        self.name: str = "Get HBAR Balance"
        self.description: str = get_hbar_balance_query_prompt(context)
        self.parameters: type[AccountBalanceQueryParameters] = (
            AccountBalanceQueryParameters
        )
        self.outputParser = untyped_query_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: AccountBalanceQueryParameters,
    ) -> ToolResponse:
        """Execute the get HBAR balance query operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``AccountBalanceQueryParameters`` input.

        Returns:
            The result of the operation.
        """
        return await get_hbar_balance_query(client, context, params)
