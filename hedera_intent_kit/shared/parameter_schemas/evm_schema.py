from typing import Annotated, Optional

from hiero_sdk_python.contract.contract_id import ContractId
from pydantic import Field

from hedera_intent_kit.shared.parameter_schemas.base_schema import (
    BaseModelWithArbitraryTypes,
    OptionalScheduledTransactionParams,
    OptionalScheduledTransactionParamsNormalised,
)


class CreateERC20Parameters(OptionalScheduledTransactionParams):
    token_name: Annotated[str, Field(description="The name of the token.")]
    token_symbol: Annotated[str, Field(description="The symbol of the token.")]
    decimals: Annotated[
        int, Field(ge=0, le=255, description="The number of decimals.")
    ] = 18
    initial_supply: Annotated[
        int, Field(ge=0, description="Initial supply in base units.")
    ] = 0


class CreateERC721Parameters(OptionalScheduledTransactionParams):
    token_name: Annotated[str, Field(description="The name of the token.")]
    token_symbol: Annotated[str, Field(description="The symbol of the token.")]
    base_uri: Annotated[
        str, Field(description="Base URI for token metadata.")
    ] = ""


class TransferERC20Parameters(OptionalScheduledTransactionParams):
    contract_id: Annotated[
        str, Field(description="The ERC20 contract, as 0.0.x or EVM address.")
    ]
    recipient_address: Annotated[
        str, Field(description="Recipient, as 0.0.x account ID or EVM address.")
    ]
    amount: Annotated[
        int, Field(gt=0, description="Amount to transfer, in base units.")
    ]


class TransferERC721Parameters(OptionalScheduledTransactionParams):
    contract_id: Annotated[
        str, Field(description="The ERC721 contract, as 0.0.x or EVM address.")
    ]
    from_address: Annotated[
        Optional[str],
        Field(description="Current owner. Defaults to the default account."),
    ] = None
    to_address: Annotated[
        str, Field(description="Recipient, as 0.0.x account ID or EVM address.")
    ]
    token_id: Annotated[int, Field(ge=0, description="The NFT serial / token id.")]


class MintERC721Parameters(OptionalScheduledTransactionParams):
    contract_id: Annotated[
        str, Field(description="The ERC721 contract, as 0.0.x or EVM address.")
    ]
    to_address: Annotated[
        Optional[str],
        Field(description="Recipient. Defaults to the default account."),
    ] = None


class ContractExecuteTransactionParametersNormalised(
    OptionalScheduledTransactionParamsNormalised
):
    contract_id: ContractId
    function_parameters: bytes
    gas: int


class ContractInfoQueryParameters(BaseModelWithArbitraryTypes):
    contract_id: Annotated[
        str, Field(description="The contract, as 0.0.x or EVM address.")
    ]
