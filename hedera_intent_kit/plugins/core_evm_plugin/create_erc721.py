"""ERC721 collection deployment through the network's token factory contract."""

from __future__ import annotations

import logging

from hiero_sdk_python import Client

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.constants.contracts import (
    ERC721_FACTORY_ABI,
    FACTORY_FUNCTION_NAME,
    get_erc721_factory_address,
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
from hedera_intent_kit.shared.parameter_schemas import CreateERC721Parameters
from hedera_intent_kit.shared.strategies.tx_mode_strategy import handle_transaction
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils import ledger_id_from_network
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def create_erc721_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the create ERC721 tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    return f"""
{PromptGenerator.get_context_snippet(context)}

This tool deploys a new ERC721 (NFT) contract by calling the ERC721 factory contract on Hedera.

Parameters:
- token_name (str, required): The name of the collection
- token_symbol (str, required): The symbol of the collection
- base_uri (str, optional): Base URI for token metadata
- {PromptGenerator.get_scheduled_transaction_params_description(context)}
"""


def post_process(response: RawTransactionResponse) -> str:
    """Produce a human-readable summary for a create ERC721 result.

    Args:
        response: The raw response returned by the transaction execution.

    Returns:
        A message describing the outcome.
    """
    if response.schedule_id:
        return (
            "Scheduled ERC721 creation created successfully.\n"
            f"Transaction ID: {response.transaction_id}\n"
            f"Schedule ID: {response.schedule_id}"
        )
    return f"ERC721 token creation submitted. Transaction ID: {response.transaction_id}"


async def create_erc721(
    client: Client,
    context: Context,
    params: CreateERC721Parameters,
) -> ToolResponse:
    try:
        factory_address = get_erc721_factory_address(ledger_id_from_network(client))
        normalised_params = await HederaParameterNormaliser.normalise_create_erc721_params(
            params,
            factory_address,
            ERC721_FACTORY_ABI,
            FACTORY_FUNCTION_NAME,
            context,
            client,
        )
        tx = HederaBuilder.execute_transaction(normalised_params)
        return await handle_transaction(tx, client, context, post_process)
    except Exception as e:
        message: str = f"Failed to create ERC721 token: {str(e)}"
        logger.error("[create_erc721_tool] %s", message)
        return ExecutedTransactionToolResponse(
            human_message=message,
            error=message,
            raw=RawTransactionResponse.failure(message),
        )


CREATE_ERC721_TOOL: str = "create_erc721_tool"


class CreateERC721Tool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = CREATE_ERC721_TOOL
        self.name: str = "Create ERC721 Token"
        self.description: str = create_erc721_prompt(context)
        self.parameters: type[CreateERC721Parameters] = CreateERC721Parameters
        self.outputParser = transaction_tool_output_parser

    async def execute(
        self, client: Client, context: Context, params: CreateERC721Parameters
    ) -> ToolResponse:
        """Execute the create ERC721 operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``CreateERC721Parameters`` input.

        Returns:
            The result of the operation.
        """
        return await create_erc721(client, context, params)
