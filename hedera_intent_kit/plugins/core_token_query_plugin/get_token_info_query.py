"""Token info query backed by the mirror node.

This module exposes:
- get_token_info_query_prompt: Description of the get token info query tool.
- get_token_info_query: Execute a token info query.
- GetTokenInfoQueryTool: Tool wrapper exposing the token info query operation to the runtime.
"""

from __future__ import annotations

import logging
from typing import Optional

from hiero_sdk_python import Client

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.hedera_utils.decimals_utils import to_display_unit
from hedera_intent_kit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_intent_kit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_intent_kit.shared.hedera_utils.mirrornode.types import KeyInfo, TokenInfo
from hedera_intent_kit.shared.models import ToolResponse
from hedera_intent_kit.shared.parameter_schemas import GetTokenInfoParameters
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    untyped_query_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def get_token_info_query_prompt(context: Context = Context()) -> str:
    """Describe the get token info query tool.

    Args:
        context: Runtime context that shapes the description.

    Returns:
        The tool description, including its parameters.
    """
    context_snippet: str = PromptGenerator.get_context_snippet(context)

    return f"""
{context_snippet}

This tool will return the information for a given Hedera token. Make sure to return token symbol.

Parameters:
- token_id (str, required): The token ID to query for.
"""


def format_supply(supply: Optional[str], decimals_str: Optional[str]) -> str:
    """Format a raw mirror node supply with the token's decimals applied.

    Args:
        supply: Supply in base units, as returned by the mirror node.
        decimals_str: The token decimals, as returned by the mirror node.

    Returns:
        The supply in display units with thousands separators.
    """
    if not supply:
        return "N/A"
    if not decimals_str:
        return "the token has no supplied decimals"
    try:
        amount = to_display_unit(supply, int(decimals_str))
    except (ArithmeticError, ValueError):
        return supply
    return f"{amount.normalize():,f}"


def format_key(key: Optional[KeyInfo]) -> str:
    if not key:
        return "Not Set"
    if key.get("_type"):
        return str(key.get("key", "Present"))
    return "Present"


def post_process(token_info: TokenInfo) -> str:
    """Render token details as markdown.

    Args:
        token_info: Token details from the mirror node.

    Returns:
        A formatted, human-readable message.
    """
    decimals_str = str(token_info.get("decimals", "0"))
    supply_type = "Infinite" if token_info.get("supply_type") == "INFINITE" else "Finite"

    key_lines = "\n".join(
        f"- {label}: {format_key(token_info.get(field))}"
        for label, field in (
            ("Admin Key", "admin_key"),
            ("Supply Key", "supply_key"),
            ("Wipe Key", "wipe_key"),
            ("KYC Key", "kyc_key"),
            ("Freeze Key", "freeze_key"),
            ("Fee Schedule Key", "fee_schedule_key"),
            ("Pause Key", "pause_key"),
            ("Metadata Key", "metadata_key"),
        )
    )
    memo_section = f"\n**Memo**: {token_info['memo']}" if token_info.get("memo") else ""

    return f"""Here are the details for token **{token_info.get("token_id", "N/A")}**:

- **Token Name**: {token_info.get("name", "N/A")}
- **Token Symbol**: {token_info.get("symbol", "N/A")}
- **Token Type**: {token_info.get("type", "N/A")}
- **Decimals**: {decimals_str}
- **Max Supply**: {format_supply(token_info.get("max_supply"), decimals_str)}
- **Current Supply**: {format_supply(token_info.get("total_supply"), decimals_str)}
- **Supply Type**: {supply_type}
- **Treasury Account ID**: {token_info.get("treasury_account_id", "N/A")}
- **Status (Deleted/Active)**: {"Deleted" if token_info.get("deleted") else "Active"}
- **Status (Frozen/Active)**: {"Frozen" if token_info.get("freeze_default") else "Active"}

**Keys**:
{key_lines}
{memo_section}
"""


async def get_token_info_query(
    client: Client,
    context: Context,
    params: GetTokenInfoParameters,
) -> ToolResponse:
    """Execute a token info query using the mirror node service.

    Args:
        client: Ledger client; only used to pick the network.
        context: Runtime context.
        params: Query parameters.

    Returns:
        A ToolResponse with token details.
    """
    try:
        parsed_params = HederaParameterNormaliser.normalise_get_token_info(params)

        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )
        token_info: TokenInfo = await mirrornode_service.get_token_info(
            parsed_params.token_id
        )
        if not token_info.get("token_id"):
            token_info["token_id"] = parsed_params.token_id

        return ToolResponse(
            human_message=post_process(token_info),
            extra={"tokenInfo": token_info, "tokenId": parsed_params.token_id},
        )

    except Exception as e:
        message = f"Failed to get token info: {str(e)}"
        logger.error("[get_token_info_query_tool] %s", message)
        return ToolResponse(human_message=message, error=message)


GET_TOKEN_INFO_QUERY_TOOL: str = "get_token_info_query_tool"


class GetTokenInfoQueryTool(Tool):
    """Tool wrapper that exposes the token info query capability to the runtime."""

    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = GET_TOKEN_INFO_QUERY_TOOL
        self.name: str = "Get Token Info"
        self.description: str = get_token_info_query_prompt(context)
        self.parameters: type[GetTokenInfoParameters] = GetTokenInfoParameters
        self.outputParser = untyped_query_output_parser

    async def execute(
        self, client: Client, context: Context, params: GetTokenInfoParameters
    ) -> ToolResponse:
        """Execute the get token info query operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``GetTokenInfoParameters`` input.

        Returns:
            The result of the operation.
        """
        return await get_token_info_query(client, context, params)
