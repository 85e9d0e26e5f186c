"""Account update operation."""

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
from hedera_intent_kit.shared.parameter_schemas import UpdateAccountParameters
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def update_account_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the update account tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    context_snippet = PromptGenerator.get_context_snippet(context)
    account_desc = PromptGenerator.get_account_parameter_description(
        "account_id", context
    )
    return f"""
{context_snippet}

This tool updates an existing Hedera account. Only the fields provided are changed.

Parameters:
- {account_desc}
- max_automatic_token_associations (int, optional): -1 for unlimited
- staked_account_id (str, optional): account to stake to
- account_memo (str, optional): new account memo
- decline_staking_reward (bool, optional): whether to decline staking rewards
- {PromptGenerator.get_scheduled_transaction_params_description(context)}
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a update account result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message describing the outcome.
    """
    if response.schedule_id:
        return f"""Scheduled account update created successfully.
Transaction ID: {response.transaction_id}
Schedule ID: {response.schedule_id}"""
    return f"Account successfully updated.\nTransaction ID: {response.transaction_id}"


async def update_account(
    client: Client,
    context: Context,
    params: UpdateAccountParameters,
) -> ToolResponse:
    try:
        normalised_params = await HederaParameterNormaliser.normalise_update_account(
            params, context, client
        )
        tx = HederaBuilder.update_account(normalised_params)
        return await handle_transaction(tx, client, context, post_process)
    except Exception as e:
        message: str = f"Failed to update account: {str(e)}"
        logger.error("[update_account_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


UPDATE_ACCOUNT_TOOL: str = "update_account_tool"


class UpdateAccountTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = UPDATE_ACCOUNT_TOOL
        self.name: str = "Update Account"
        self.description: str = update_account_prompt(context)
        self.parameters: type[UpdateAccountParameters] = UpdateAccountParameters
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: UpdateAccountParameters
    ) -> ToolResponse:
        """Execute the update account operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``UpdateAccountParameters`` input.

        Returns:
            The result of the operation.
        """
        return await update_account(client, context, params)
