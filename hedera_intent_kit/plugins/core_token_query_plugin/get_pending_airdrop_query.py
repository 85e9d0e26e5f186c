"""Pending airdrops query for an account."""

from __future__ import annotations

import logging

from hiero_sdk_python import Client

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_intent_kit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_intent_kit.shared.hedera_utils.mirrornode.types import (
    TokenAirdropsResponse,
)
from hedera_intent_kit.shared.models import ToolResponse
from hedera_intent_kit.shared.parameter_schemas import PendingAirdropQueryParameters
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    untyped_query_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def get_pending_airdrop_query_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the get pending airdrop query tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    account_desc = PromptGenerator.get_account_parameter_description(
        "account_id", context
    )
    return f"""
{PromptGenerator.get_context_snippet(context)}

This tool returns pending airdrops received by an account.

Parameters:
- {account_desc}
"""


def post_process(account_id: str, response: TokenAirdropsResponse) -> str:
    """Render the get pending airdrop query result for the agent.

    Args:
        account_id: The queried account ID.
        response: The mirror node response.

    Returns:
        A formatted, human-readable message.
    """
    airdrops = response.get("airdrops") or []
    if not airdrops:
        return f"No pending airdrops found for account {account_id}"

    lines = [
        f"Here are the pending airdrops for account **{account_id}** "
        f"(total: {len(airdrops)}):",
        "",
    ]
    for i, airdrop in enumerate(airdrops, start=1):
        serial = airdrop.get("serial_number")
        amount = f"serial #{serial}" if serial else f"amount {airdrop.get('amount', 0)}"
        lines.append(
            f"{i}. Token {airdrop.get('token_id', 'N/A')} from "
            f"{airdrop.get('sender_id', 'N/A')}: {amount}"
        )
    return "\n".join(lines)


async def get_pending_airdrop_query(
    client: Client,
    context: Context,
    params: PendingAirdropQueryParameters,
) -> ToolResponse:
    try:
        normalised_params = HederaParameterNormaliser.normalise_get_pending_airdrop(
            params, context, client
        )
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )
        response = await mirrornode_service.get_pending_airdrops(
            normalised_params.account_id
        )
        return ToolResponse(
            human_message=post_process(normalised_params.account_id, response),
            extra={"accountId": normalised_params.account_id, "pending": response},
        )
    except Exception as e:
        message = f"Failed to get pending airdrops: {str(e)}"
        logger.error("[get_pending_airdrop_query_tool] %s", message)
        return ToolResponse(human_message=message, error=message)


GET_PENDING_AIRDROP_QUERY_TOOL: str = "get_pending_airdrop_query_tool"


class GetPendingAirdropQueryTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = GET_PENDING_AIRDROP_QUERY_TOOL
        self.name: str = "Get Pending Airdrops"
        self.description: str = get_pending_airdrop_query_prompt(context)
        self.parameters: type[PendingAirdropQueryParameters] = (
            PendingAirdropQueryParameters
        )
        self.outputParser = untyped_query_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: PendingAirdropQueryParameters,
    ) -> ToolResponse:
        """Execute the get pending airdrop query operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``PendingAirdropQueryParameters`` input.

        Returns:
            The result of the operation.
        """
        return await get_pending_airdrop_query(client, context, params)
