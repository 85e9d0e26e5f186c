"""Account creation operation.

This module exposes:
- create_account_prompt: Description of the create account tool.
- create_account: Normalise, build and execute an account creation.
- CreateAccountTool: Tool wrapper exposing the operation to the runtime.
"""

from __future__ import annotations

import logging

from hiero_sdk_python import Client

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.hedera_utils.hedera_builder import HederaBuilder
from hedera_intent_kit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_intent_kit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_intent_kit.shared.models import (
    ExecutedTransactionToolResponse,
    RawTransactionResponse,
    ToolResponse,
)
from hedera_intent_kit.shared.parameter_schemas import (
    CreateAccountParameters,
    CreateAccountParametersNormalised,
)
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def create_account_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the create account tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    context_snippet = PromptGenerator.get_context_snippet(context)
    scheduled_params_desc = (
        PromptGenerator.get_scheduled_transaction_params_description(context)
    )
    return f"""
{context_snippet}

This tool creates a new Hedera account.

Parameters:
- public_key (str, optional): public key of the new account. Defaults to the public key of the default account
- account_memo (str, optional): memo of the account (at most 100 characters)
- initial_balance (number, optional): initial HBAR balance, defaults to 0
- max_automatic_token_associations (int, optional): -1 for unlimited, defaults to -1
- {scheduled_params_desc}
"""


def post_process(response: RawTransactionResponse) -> str:
    """Summarise the creation result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message with the new account ID (or schedule ID) and the transaction ID.
    """
    if response.schedule_id:
        return f"""Scheduled account creation created successfully.
Transaction ID: {response.transaction_id}
Schedule ID: {response.schedule_id}"""

    account_id_str = response.account_id or "unknown"
    return f"""Account created successfully.
Transaction ID: {response.transaction_id}
New Account ID: {account_id_str}"""


async def create_account(
    client: Client,
    context: Context,
    params: CreateAccountParameters,
) -> ToolResponse:
    try:
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )

        normalised_params: CreateAccountParametersNormalised = (
            await HederaParameterNormaliser.normalise_create_account(
                params, context, client, mirrornode_service
            )
        )

        tx = HederaBuilder.create_account(normalised_params)

        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to create account: {str(e)}"
        logger.error("[create_account_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


CREATE_ACCOUNT_TOOL: str = "create_account_tool"


class CreateAccountTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = CREATE_ACCOUNT_TOOL
        self.name: str = "Create Account"
        self.description: str = create_account_prompt(context)
        self.parameters: type[CreateAccountParameters] = CreateAccountParameters
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: CreateAccountParameters
    ) -> ToolResponse:
        """Execute the create account operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``CreateAccountParameters`` input.

        Returns:
            The result of the operation.
        """
        return await create_account(client, context, params)
