"""Token association operation.

This module exposes:
- associate_token_prompt: Description of the associate token tool.
- associate_token: Execute a token association transaction.
- AssociateTokenTool: Tool wrapper exposing the token association operation to the runtime.
"""

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
    AssociateTokenParameters,
    AssociateTokenParametersNormalised,
)
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def associate_token_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the associate token tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    account_desc: str = PromptGenerator.get_account_parameter_description(
        "account_id", context
    )

    return f"""
{context_snippet}

This tool associates one or more tokens with a Hedera account.

Parameters:
- {account_desc}
- token_ids (List[str], required): Token IDs to associate
- {PromptGenerator.get_scheduled_transaction_params_description(context)}
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a associate token result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message describing the outcome.
    """
    return (
        f"Tokens successfully associated with transaction id {response.transaction_id}"
    )


async def associate_token(
    client: Client,
    context: Context,
    params: AssociateTokenParameters,
) -> ToolResponse:
    """Execute a token association using normalised parameters and a built transaction.

    Args:
        client: Ledger client used to execute transactions.
        context: Runtime context providing configuration and defaults.
        params: User-supplied parameters describing the association.

    Returns:
        A ToolResponse wrapping the raw transaction response and a human-friendly
        message indicating success or failure.
    """
    try:
        normalised_params: AssociateTokenParametersNormalised = (
            await HederaParameterNormaliser.normalise_associate_token_params(
                params, context, client
            )
        )

        tx = HederaBuilder.associate_token(normalised_params)

        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to associate token(s): {str(e)}"
        logger.error("[associate_token_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


ASSOCIATE_TOKEN_TOOL: str = "associate_token_tool"


class AssociateTokenTool(Tool):
    """Tool wrapper that exposes the token association capability to the runtime."""

    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = ASSOCIATE_TOKEN_TOOL
        self.name: str = "Associate Token(s)"
        self.description: str = associate_token_prompt(context)
        self.parameters: type[AssociateTokenParameters] = AssociateTokenParameters
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: AssociateTokenParameters
    ) -> ToolResponse:
        """Execute the associate token operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``AssociateTokenParameters`` input.

        Returns:
            The result of the operation.
        """
        return await associate_token(client, context, params)
