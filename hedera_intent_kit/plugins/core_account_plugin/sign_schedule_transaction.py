"""Adds the default account's signature to a scheduled transaction."""

from __future__ import annotations

import logging

from hiero_sdk_python import Client

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.hedera_utils.hedera_builder import HederaBuilder
from hedera_intent_kit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_intent_kit.shared.models import (
    ExecutedTransactionToolResponse,
    RawTransactionResponse,
    ToolResponse,
)
from hedera_intent_kit.shared.parameter_schemas import (
    SignScheduleTransactionParameters,
)
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def sign_schedule_transaction_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the sign schedule transaction tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    return f"""
{PromptGenerator.get_context_snippet(context)}

This tool signs a scheduled transaction on Hedera.

Parameters:
- schedule_id (str, required): the ID of the scheduled transaction to sign
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a sign schedule transaction result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message describing the outcome.
    """
    return (
        "Transaction successfully signed.\n"
        f"Transaction ID: {response.transaction_id}"
    )


async def sign_schedule_transaction(
    client: Client,
    context: Context,
    params: SignScheduleTransactionParameters,
) -> ToolResponse:
    try:
        normalised_params = HederaParameterNormaliser.normalise_sign_schedule(params)
        tx = HederaBuilder.sign_schedule_transaction(normalised_params)
        return await handle_transaction(tx, client, context, post_process)
    except Exception as e:
        message: str = f"Failed to sign scheduled transaction: {str(e)}"
        logger.error("[sign_schedule_transaction_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


SIGN_SCHEDULE_TRANSACTION_TOOL: str = "sign_schedule_transaction_tool"


class SignScheduleTransactionTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = SIGN_SCHEDULE_TRANSACTION_TOOL
        self.name: str = "Sign Scheduled Transaction"
        self.description: str = sign_schedule_transaction_prompt(context)
        self.parameters: type[SignScheduleTransactionParameters] = (
            SignScheduleTransactionParameters
        )
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: SignScheduleTransactionParameters,
    ) -> ToolResponse:
        """Execute the sign schedule transaction operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``SignScheduleTransactionParameters`` input.

        Returns:
            The result of the operation.
        """
        return await sign_schedule_transaction(client, context, params)
