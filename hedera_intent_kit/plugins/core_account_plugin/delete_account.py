"""Account deletion operation."""

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
from hedera_intent_kit.shared.parameter_schemas import DeleteAccountParameters
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def delete_account_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the delete account tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    context_snippet = PromptGenerator.get_context_snippet(context)
    transfer_desc = PromptGenerator.get_account_parameter_description(
        "transfer_account_id", context
    )
    return f"""
{context_snippet}

This tool deletes an existing Hedera account and moves its remaining HBAR to another account.

Parameters:
- account_id (str, required): the account ID to delete
- {transfer_desc}
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a delete account result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message describing the outcome.
    """
    return f"Account successfully deleted.\nTransaction ID: {response.transaction_id}"


async def delete_account(
    client: Client,
    context: Context,
    params: DeleteAccountParameters,
) -> ToolResponse:
    try:
        normalised_params = HederaParameterNormaliser.normalise_delete_account(
            params, context, client
        )
        tx = HederaBuilder.delete_account(normalised_params)
        return await handle_transaction(tx, client, context, post_process)
    except Exception as e:
        message: str = f"Failed to delete account: {str(e)}"
        logger.error("[delete_account_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


DELETE_ACCOUNT_TOOL: str = "delete_account_tool"


class DeleteAccountTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = DELETE_ACCOUNT_TOOL
        self.name: str = "Delete Account"
        self.description: str = delete_account_prompt(context)
        self.parameters: type[DeleteAccountParameters] = DeleteAccountParameters
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: DeleteAccountParameters
    ) -> ToolResponse:
        """Execute the delete account operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``DeleteAccountParameters`` input.

        Returns:
            The result of the operation.
        """
        return await delete_account(client, context, params)
