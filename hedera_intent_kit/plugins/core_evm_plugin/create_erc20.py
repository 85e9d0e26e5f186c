"""ERC20 token deployment through the network's token factory contract.

This module exposes:
- create_erc20_prompt: Description of the create ERC20 tool.
- create_erc20: Call the factory's ``deployToken`` for an ERC20 token.
- CreateERC20Tool: Tool wrapper exposing the operation to the runtime.
"""

from __future__ import annotations

import logging

from hiero_sdk_python import Client

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.constants.contracts import (
    ERC20_FACTORY_ABI,
    FACTORY_FUNCTION_NAME,
    get_erc20_factory_address,
)
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
    ContractExecuteTransactionParametersNormalised,
    CreateERC20Parameters,
)
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils import ledger_id_from_network
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def create_erc20_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the create ERC20 tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    context_snippet: str = PromptGenerator.get_context_snippet(context)

    return f"""
{context_snippet}

This tool deploys a new ERC20 token by calling the ERC20 factory contract on Hedera.

Parameters:
- token_name (str, required): The name of the token
- token_symbol (str, required): The symbol of the token
- decimals (int, optional): The number of decimals, defaults to 18
- initial_supply (int, optional): Initial supply in base units, defaults to 0
- {PromptGenerator.get_scheduled_transaction_params_description(context)}
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a create ERC20 result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message describing the outcome.
    """
    if response.schedule_id:
        return (
            "Scheduled ERC20 creation created successfully.\n"
            f"Transaction ID: {response.transaction_id}\n"
            f"Schedule ID: {response.schedule_id}"
        )
    return f"ERC20 token creation submitted. Transaction ID: {response.transaction_id}"


async def create_erc20(
    client: Client,
    context: Context,
    params: CreateERC20Parameters,
) -> ToolResponse:
    """Deploy an ERC20 token through the factory contract of the client's network.

    Args:
        client: Ledger client used to execute transactions.
        context: Runtime context providing configuration and defaults.
        params: Token name, symbol, decimals and initial supply.

    Returns:
        A ToolResponse wrapping the contract call result.
    """
    try:
        factory_address = get_erc20_factory_address(ledger_id_from_network(client))
        normalised_params: ContractExecuteTransactionParametersNormalised = (
            await HederaParameterNormaliser.normalise_create_erc20_params(
                params,
                factory_address,
                ERC20_FACTORY_ABI,
                FACTORY_FUNCTION_NAME,
                context,
                client,
            )
        )

        tx = HederaBuilder.execute_transaction(normalised_params)

        return await handle_transaction(tx, client, context, post_process)

    except Exception as e:
        message: str = f"Failed to create ERC20 token: {str(e)}"
        logger.error("[create_erc20_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


CREATE_ERC20_TOOL: str = "create_erc20_tool"


class CreateERC20Tool(Tool):
    """Tool wrapper that exposes ERC20 deployment to the runtime."""

    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = CREATE_ERC20_TOOL
        self.name: str = "Create ERC20 Token"
        self.description: str = create_erc20_prompt(context)
        self.parameters: type[CreateERC20Parameters] = CreateERC20Parameters
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: CreateERC20Parameters
    ) -> ToolResponse:
        """Execute the create ERC20 operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``CreateERC20Parameters`` input.

        Returns:
            The result of the operation.
        """
        return await create_erc20(client, context, params)
