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
from hedera_intent_kit.shared.parameter_schemas import DeleteTokenParameters
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def delete_token_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the delete token tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    return f"""
{PromptGenerator.get_context_snippet(context)}

This tool deletes a token on Hedera. The token must have an admin key and the transaction must be signed by it.

Parameters:
- token_id (str, required): The ID of the token to delete
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a delete token result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message describing the outcome.
    """
    return f"Token successfully deleted. Transaction ID: {response.transaction_id}"


async def delete_token(
    client: Client,
    context: Context,
    params: DeleteTokenParameters,
) -> ToolResponse:
    try:
        normalised_params = HederaParameterNormaliser.normalise_delete_token(params)
        tx = HederaBuilder.delete_token(normalised_params)
        return await handle_transaction(tx, client, context, post_process)
    except Exception as e:
        message: str = f"Failed to delete token: {str(e)}"
        logger.error("[delete_token_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


DELETE_TOKEN_TOOL: str = "delete_token_tool"


class DeleteTokenTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = DELETE_TOKEN_TOOL
        self.name: str = "Delete Token"
        self.description: str = delete_token_prompt(context)
        self.parameters: type[DeleteTokenParameters] = DeleteTokenParameters
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: DeleteTokenParameters
    ) -> ToolResponse:
        """Execute the delete token operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``DeleteTokenParameters`` input.

        Returns:
            The result of the operation.
        """
        return await delete_token(client, context, params)
