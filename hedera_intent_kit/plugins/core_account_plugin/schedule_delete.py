"""Deletes a scheduled transaction before it executes."""

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
    ScheduleDeleteTransactionParameters,
)
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def schedule_delete_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the schedule delete tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    return f"""
{PromptGenerator.get_context_snippet(context)}

This tool deletes a scheduled transaction. The schedule must have an admin key that the default account controls.

Parameters:
- schedule_id (str, required): the ID of the scheduled transaction to delete
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a schedule delete result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message describing the outcome.
    """
    return (
        "Scheduled transaction successfully deleted.\n"
        f"Transaction ID: {response.transaction_id}"
    )


async def schedule_delete(
    client: Client,
    context: Context,
    params: ScheduleDeleteTransactionParameters,
) -> ToolResponse:
    try:
        normalised_params = HederaParameterNormaliser.normalise_delete_schedule(params)
        tx = HederaBuilder.delete_schedule_transaction(normalised_params)
        return await handle_transaction(tx, client, context, post_process)
    except Exception as e:
        message: str = f"Failed to delete scheduled transaction: {str(e)}"
        logger.error("[schedule_delete_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


SCHEDULE_DELETE_TOOL: str = "schedule_delete_tool"


class ScheduleDeleteTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = SCHEDULE_DELETE_TOOL
        self.name: str = "Delete Scheduled Transaction"
        self.description: str = schedule_delete_prompt(context)
        self.parameters: type[ScheduleDeleteTransactionParameters] = (
            ScheduleDeleteTransactionParameters
        )
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: ScheduleDeleteTransactionParameters,
    ) -> ToolResponse:
        """Execute the schedule delete operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``ScheduleDeleteTransactionParameters`` input.

        Returns:
            The result of the operation.
        """
        return await schedule_delete(client, context, params)
