"""Contract info query backed by the mirror node."""

from __future__ import annotations

import logging

from hiero_sdk_python import Client

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_intent_kit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_intent_kit.shared.hedera_utils.mirrornode.types import ContractInfo
from hedera_intent_kit.shared.models import ToolResponse
from hedera_intent_kit.shared.parameter_schemas import ContractInfoQueryParameters
from hedera_intent_kit.shared.tool import Tool
from hedera_intent_kit.shared.utils.default_tool_output_parsing import (
    untyped_query_output_parser,
)
from hedera_intent_kit.shared.utils.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


def get_contract_info_query_prompt(context: Context = Context()) -> str:
    """Generate a human-readable description of the get contract info query tool.

    Args:
        context: Optional contextual configuration.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    return f"""
{PromptGenerator.get_context_snippet(context)}

This tool returns the information for a given smart contract on Hedera.

Parameters:
- contract_id (str, required): The contract, as a Hedera id (0.0.x) or EVM address
"""


def post_process(contract: ContractInfo) -> str:
    """Render the get contract info query result for the agent.

    Args:
        contract: Contract details from the mirror node.

    Returns:
        A formatted, human-readable message.
    """
    admin_key = contract.get("admin_key")
    return f"""Here are the details for contract **{contract.get("contract_id", "N/A")}**:

- **EVM Address**: {contract.get("evm_address") or "N/A"}
- **Memo**: {contract.get("memo") or "N/A"}
- **Deleted**: {"Yes" if contract.get("deleted") else "No"}
- **Created**: {contract.get("created_timestamp") or "N/A"}
- **Expiration**: {contract.get("expiration_timestamp") or "N/A"}
- **Auto Renew Account**: {contract.get("auto_renew_account") or "N/A"}
- **Admin Key**: {admin_key.get("key") if admin_key else "Not Set"}
"""


async def get_contract_info_query(
    client: Client,
    context: Context,
    params: ContractInfoQueryParameters,
) -> ToolResponse:
    try:
        parsed_params = HederaParameterNormaliser.normalise_get_contract_info(params)
        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )
        # the mirror node accepts both native ids and EVM addresses here
        contract_info = await mirrornode_service.get_contract_info(
            parsed_params.contract_id
        )
        return ToolResponse(
            human_message=post_process(contract_info),
            extra={"contractId": parsed_params.contract_id, "contractInfo": contract_info},
        )
    except Exception as e:
        message = f"Failed to get contract info: {str(e)}"
        logger.error("[get_contract_info_query_tool] %s", message)
        return ToolResponse(human_message=message, error=message)


GET_CONTRACT_INFO_QUERY_TOOL: str = "get_contract_info_query_tool"


class GetContractInfoQueryTool(Tool):
    def __init__(self, context: Context):
        """Initialize the tool metadata.

        Args:
            context: Runtime context.
        """
        self.method: str = GET_CONTRACT_INFO_QUERY_TOOL
        self.name: str = "Get Contract Info"
        self.description: str = get_contract_info_query_prompt(context)
        self.parameters: type[ContractInfoQueryParameters] = ContractInfoQueryParameters
        self.outputParser = untyped_query_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: ContractInfoQueryParameters,
    ) -> ToolResponse:
        """Execute the get contract info query operation using the provided client, context, and params.

        Args:
            client: Hedera client.
            context: Runtime context.
            params: Raw ``ContractInfoQueryParameters`` input.

        Returns:
            The result of the operation.
        """
        return await get_contract_info_query(client, context, params)
