"""HBAR exchange rate query.

This module exposes:
- get_exchange_rate_query_prompt: Description of the exchange rate query tool.
- get_exchange_rate_query: Fetch the current or historical HBAR/USD rate.
- GetExchangeRateQueryTool: Tool wrapper exposing the query to the runtime.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal

from hiero_sdk_python import Client

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_intent_kit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_intent_kit.shared.hedera_utils.mirrornode.types import (
    ExchangeRate,
    ExchangeRateResponse,
)
from hedera_intent_kit.shared.models import ToolResponse
from hedera_intent_kit.shared.parameter_schemas import ExchangeRateQueryParameters
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    untyped_query_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def get_exchange_rate_query_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the get exchange rate query tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    return f"""
{PromptGenerator.get_context_snippet(context)}

This tool returns the Hedera network HBAR exchange rate.

Parameters:
- timestamp (str, optional): Historical timestamp, seconds or seconds.nanos since epoch
"""


def usd_per_hbar(rate: ExchangeRate) -> Decimal:
    """Price of one HBAR in USD: cents over HBAR equivalent, divided by 100."""
    return Decimal(rate["cent_equivalent"]) / Decimal(rate["hbar_equivalent"]) / 100


def _format_rate(label: str, rate: ExchangeRate) -> str:
    expires = datetime.fromtimestamp(rate["expiration_time"], tz=timezone.utc)
    return f"""{label}:
  - hbar_equivalent: {rate["hbar_equivalent"]}
  - cent_equivalent: {rate["cent_equivalent"]}
  - USD per HBAR: {usd_per_hbar(rate):.6f}
  - expiration_time: {expires.isoformat()}"""


def post_process(response: ExchangeRateResponse) -> str:
    """Render the get exchange rate query result for the agent.

    Args:
        response: The mirror node response.

    Returns:
        A formatted, human-readable message.
    """
    return (
        f"Details for timestamp: {response.get('timestamp')}\n"
        f"{_format_rate('Current Rate', response['current_rate'])}\n"
        f"{_format_rate('Next Rate', response['next_rate'])}"
    )


async def get_exchange_rate_query(
    client: Client,
    context: Context,
    params: ExchangeRateQueryParameters,
) -> ToolResponse:
    try:
        parsed_params = HederaParameterNormaliser.normalise_get_exchange_rate(params)
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )
        response = await mirrornode_service.get_exchange_rate(parsed_params.timestamp)
        return ToolResponse(
            human_message=post_process(response),
            extra={"exchangeRate": response},
        )
    except Exception as e:
        message = f"Failed to get exchange rate: {str(e)}"
        logger.error("[get_exchange_rate_query_tool] %s", message)
        return ToolResponse(human_message=message, error=message)


GET_EXCHANGE_RATE_QUERY_TOOL: str = "get_exchange_rate_query_tool"


class GetExchangeRateQueryTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = GET_EXCHANGE_RATE_QUERY_TOOL
        self.name: str = "Get Exchange Rate"
        self.description: str = get_exchange_rate_query_prompt(context)
        self.parameters: type[ExchangeRateQueryParameters] = ExchangeRateQueryParameters
        self.outputParser = untyped_query_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: ExchangeRateQueryParameters,
    ) -> ToolResponse:
        """Execute the get exchange rate query operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``ExchangeRateQueryParameters`` input.

        Returns:
            The result of the operation.
        """
        return await get_exchange_rate_query(client, context, params)
