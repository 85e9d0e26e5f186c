"""Token balances query for an account."""

from __future__ import annotations

import logging

from hiero_sdk_python import Client

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.hedera_utils.decimals_utils import to_display_unit
from hedera_intent_kit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_intent_kit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_intent_kit.shared.hedera_utils.mirrornode.types import (
    TokenBalancesResponse,
)
from hedera_intent_kit.shared.models import ToolResponse
from hedera_intent_kit.shared.parameter_schemas import (
    AccountTokenBalancesQueryParameters,
)
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    untyped_query_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def get_account_token_balances_query_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the get account token balances query tool.

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

This tool returns the token balances for a given Hedera account.

Parameters:
- {account_desc}
- token_id (str, optional): Only return the balance of this token
"""


def post_process(token_balances: TokenBalancesResponse, account_id: str) -> str:
    """Render the get account token balances query result for the agent.

    Args:
        token_balances: Token balances from the mirror node.
        account_id: The queried account ID.

    Returns:
        A formatted, human-readable message.
    """
    tokens = token_balances.get("tokens") or []
    if not tokens:
        return f"No token balances found for account {account_id}"

    lines = [f"Details for {account_id}", "--- Token Balances ---"]
    for token in tokens:
        decimals = token.get("decimals") or 0
        balance = to_display_unit(token.get("balance") or 0, decimals)
        lines.append(f"  Token: {token.get('token_id')}")
        lines.append(f"    Balance: {balance}")
        lines.append(f"    Decimals: {decimals}")
    return "\n".join(lines)


async def get_account_token_balances_query(
    client: Client,
    context: Context,
    params: AccountTokenBalancesQueryParameters,
) -> ToolResponse:
    try:
        normalised_params = HederaParameterNormaliser.normalise_account_token_balances(
            params, context, client
        )
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )
        token_balances = await mirrornode_service.get_account_token_balances(
            normalised_params.account_id, normalised_params.token_id
        )
        return ToolResponse(
            human_message=post_process(token_balances, normalised_params.account_id),
            extra={
                "accountId": normalised_params.account_id,
                "tokenBalances": token_balances,
            },
        )
    except Exception as e:
        message: str = f"Failed to get account token balances: {str(e)}"
        logger.error("[get_account_token_balances_query_tool] %s", message)
        return ToolResponse(human_message=message, error=message)


GET_ACCOUNT_TOKEN_BALANCES_QUERY_TOOL: str = "get_account_token_balances_query_tool"


class GetAccountTokenBalancesQueryTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = GET_ACCOUNT_TOKEN_BALANCES_QUERY_TOOL
        self.name: str = "Get Account Token Balances"
        self.description: str = get_account_token_balances_query_prompt(context)
        self.parameters: type[AccountTokenBalancesQueryParameters] = (
            AccountTokenBalancesQueryParameters
        )
        self.outputParser = untyped_query_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: AccountTokenBalancesQueryParameters,
    ) -> ToolResponse:
        """Execute the get account token balances query operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``AccountTokenBalancesQueryParameters`` input.

        Returns:
            The result of the operation.
        """
        return await get_account_token_balances_query(client, context, params)
