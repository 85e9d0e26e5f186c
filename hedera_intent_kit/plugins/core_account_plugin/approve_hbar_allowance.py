"""HBAR allowance approval operation."""

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
from hedera_intent_kit.shared.parameter_schemas import ApproveHbarAllowanceParameters
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def approve_hbar_allowance_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the approve HBAR allowance tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    context_snippet = PromptGenerator.get_context_snippet(context)
    owner_desc = PromptGenerator.get_account_parameter_description(
        "owner_account_id", context
    )
    return f"""
{context_snippet}

This tool approves an HBAR allowance from the owner account to a spender account. An amount of 0 removes the allowance.

Parameters:
- {owner_desc}
- spender_account_id (str, required): the spender account ID
- amount (number, required): allowance in HBAR
- transaction_memo (str, optional): memo for the transaction
- {PromptGenerator.get_scheduled_transaction_params_description(context)}
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a approve HBAR allowance result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message describing the outcome.
    """
    return (
        "HBAR allowance approved successfully.\n"
        f"Transaction ID: {response.transaction_id}"
    )


async def approve_hbar_allowance(
    client: Client,
    context: Context,
    params: ApproveHbarAllowanceParameters,
) -> ToolResponse:
    try:
        normalised_params = (
            await HederaParameterNormaliser.normalise_approve_hbar_allowance(
                params, context, client
            )
        )
        tx = HederaBuilder.approve_hbar_allowance(normalised_params)
        return await handle_transaction(tx, client, context, post_process)
    except Exception as e:
        message: str = f"Failed to approve hbar allowance: {str(e)}"
        logger.error("[approve_hbar_allowance_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


APPROVE_HBAR_ALLOWANCE_TOOL: str = "approve_hbar_allowance_tool"


class ApproveHbarAllowanceTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = APPROVE_HBAR_ALLOWANCE_TOOL
        self.name: str = "Approve HBAR Allowance"
        self.description: str = approve_hbar_allowance_prompt(context)
        self.parameters: type[ApproveHbarAllowanceParameters] = (
            ApproveHbarAllowanceParameters
        )
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: ApproveHbarAllowanceParameters,
    ) -> ToolResponse:
        """Execute the approve HBAR allowance operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``ApproveHbarAllowanceParameters`` input.

        Returns:
            The result of the operation.
        """
        return await approve_hbar_allowance(client, context, params)
