from typing import Annotated, List, Literal, Optional, Union

from hiero_sdk_python import AccountId, TokenId
from hiero_sdk_python.tokens.token_create_transaction import TokenKeys, TokenParams
from hiero_sdk_python.tokens.token_transfer import TokenTransfer
from pydantic import Field

from hedera_intent_kit.shared.parameter_schemas.base_schema import (
    BaseModelWithArbitraryTypes,
    OptionalScheduledTransactionParams,
    OptionalScheduledTransactionParamsNormalised,
)

KeyParam = Optional[Union[bool, str]]

_KEY_DESCRIPTION = "true to use your key, or a public key string to set it explicitly"


class AirdropRecipient(BaseModelWithArbitraryTypes):
    account_id: Annotated[
        str, Field(description='Recipient account ID (e.g., "0.0.xxxx").')
    ]
    amount: Annotated[
        Union[int, float, str], Field(description="Amount in display units.")
    ]


class CreateFungibleTokenParameters(OptionalScheduledTransactionParams):
    token_name: Annotated[str, Field(description="The name of the token.")]
    token_symbol: Annotated[str, Field(description="The symbol of the token.")]
    initial_supply: Annotated[
        float, Field(ge=0, description="The initial supply of the token.")
    ] = 0
    supply_type: Annotated[
        Literal["finite", "infinite"],
        Field(description="Supply type of the token."),
    ] = "finite"
    max_supply: Annotated[
        Optional[float], Field(description="The maximum supply of the token.")
    ] = None
    decimals: Annotated[
        int, Field(ge=0, le=18, description="The number of decimals.")
    ] = 0
    treasury_account_id: Annotated[
        Optional[str], Field(description="The treasury account of the token.")
    ] = None
    is_supply_key: Annotated[
        Optional[bool],
        Field(description="Determines if the token supply key should be set."),
    ] = None
    token_memo: Annotated[
        Optional[str], Field(description="The memo of the token.")
    ] = None


class CreateFungibleTokenParametersNormalised(
    OptionalScheduledTransactionParamsNormalised
):
    token_params: TokenParams
    keys: Optional[TokenKeys] = None


class CreateNonFungibleTokenParameters(OptionalScheduledTransactionParams):
    token_name: Annotated[str, Field(description="The name of the token")]
    token_symbol: Annotated[str, Field(description="The symbol of the token")]
    max_supply: Annotated[
        int, Field(gt=0, description="Maximum supply of NFTs")
    ] = 100
    treasury_account_id: Annotated[
        Optional[str], Field(description="Treasury account ID")
    ] = None
    token_memo: Annotated[Optional[str], Field(description="The memo of the token.")] = (
        None
    )


class CreateNonFungibleTokenParametersNormalised(
    OptionalScheduledTransactionParamsNormalised
):
    token_params: TokenParams
    keys: Optional[TokenKeys] = None


class AirdropFungibleTokenParameters(OptionalScheduledTransactionParams):
    token_id: Annotated[str, Field(description="The id of the token.")]
    source_account_id: Annotated[
        Optional[str], Field(description="The account to airdrop the token from.")
    ] = None
    recipients: Annotated[
        List[AirdropRecipient], Field(min_length=1, description="Array of recipients.")
    ]
    transaction_memo: Annotated[
        Optional[str], Field(description="Optional transaction memo.")
    ] = None


class AirdropFungibleTokenParametersNormalised(
    OptionalScheduledTransactionParamsNormalised
):
    token_transfers: List[TokenTransfer]
    transaction_memo: Optional[str] = None


class MintFungibleTokenParameters(OptionalScheduledTransactionParams):
    token_id: Annotated[str, Field(description="The id of the token.")]
    amount: Annotated[float, Field(gt=0, description="Amount of tokens to mint.")]


class MintFungibleTokenParametersNormalised(
    OptionalScheduledTransactionParamsNormalised
):
    token_id: TokenId
    amount: int


class MintNonFungibleTokenParameters(OptionalScheduledTransactionParams):
    token_id: Annotated[str, Field(description="The id of the NFT class.")]
    uris: Annotated[
        List[Annotated[str, Field(max_length=100)]],
        Field(
            min_length=1,
            max_length=10,
            description="An array of URIs hosting NFT metadata.",
        ),
    ]


class MintNonFungibleTokenParametersNormalised(
    OptionalScheduledTransactionParamsNormalised
):
    token_id: TokenId
    metadata: List[bytes]


class AssociateTokenParameters(OptionalScheduledTransactionParams):
    account_id: Annotated[
        Optional[str], Field(description="Account to associate tokens with")
    ] = None
    token_ids: Annotated[
        List[str], Field(min_length=1, description="Token IDs to associate")
    ]


class AssociateTokenParametersNormalised(OptionalScheduledTransactionParamsNormalised):
    account_id: AccountId
    token_ids: List[TokenId]


class DissociateTokenParameters(OptionalScheduledTransactionParams):
    token_ids: Annotated[
        List[str],
        Field(min_length=1, description="List of Hedera token IDs to dissociate"),
    ]
    account_id: Annotated[
        Optional[str],
        Field(description="Account to dissociate from, defaults to the default account"),
    ] = None
    transaction_memo: Annotated[
        Optional[str], Field(description="Optional transaction memo")
    ] = None


class DissociateTokenParametersNormalised(OptionalScheduledTransactionParamsNormalised):
    token_ids: List[TokenId]
    account_id: AccountId
    transaction_memo: Optional[str] = None


class UpdateTokenParameters(BaseModelWithArbitraryTypes):
    token_id: Annotated[str, Field(description="Token ID to update")]
    token_name: Annotated[
        Optional[str], Field(max_length=100, description="New token name")
    ] = None
    token_symbol: Annotated[
        Optional[str], Field(max_length=100, description="New token symbol")
    ] = None
    token_memo: Annotated[
        Optional[str], Field(max_length=100, description="New token memo")
    ] = None
    metadata: Annotated[
        Optional[str], Field(description="New token metadata (UTF-8 text)")
    ] = None
    treasury_account_id: Annotated[
        Optional[str], Field(description="New treasury account ID")
    ] = None
    auto_renew_account_id: Annotated[
        Optional[str], Field(description="Auto renew account ID")
    ] = None
    admin_key: Annotated[KeyParam, Field(description=f"Admin key: {_KEY_DESCRIPTION}")] = (
        None
    )
    kyc_key: Annotated[KeyParam, Field(description=f"KYC key: {_KEY_DESCRIPTION}")] = None
    freeze_key: Annotated[
        KeyParam, Field(description=f"Freeze key: {_KEY_DESCRIPTION}")
    ] = None
    wipe_key: Annotated[KeyParam, Field(description=f"Wipe key: {_KEY_DESCRIPTION}")] = (
        None
    )
    supply_key: Annotated[
        KeyParam, Field(description=f"Supply key: {_KEY_DESCRIPTION}")
    ] = None
    fee_schedule_key: Annotated[
        KeyParam, Field(description=f"Fee schedule key: {_KEY_DESCRIPTION}")
    ] = None
    pause_key: Annotated[KeyParam, Field(description=f"Pause key: {_KEY_DESCRIPTION}")] = (
        None
    )
    metadata_key: Annotated[
        KeyParam, Field(description=f"Metadata key: {_KEY_DESCRIPTION}")
    ] = None


class TokenUpdateFields(BaseModelWithArbitraryTypes):
    """Non-key token properties to change; ``None`` leaves a property untouched."""

    token_name: Optional[str] = None
    token_symbol: Optional[str] = None
    token_memo: Optional[str] = None
    metadata: Optional[bytes] = None
    treasury_account_id: Optional[AccountId] = None
    auto_renew_account_id: Optional[AccountId] = None


class UpdateTokenParametersNormalised(BaseModelWithArbitraryTypes):
    token_id: TokenId
    token_params: TokenUpdateFields
    token_keys: TokenKeys


class DeleteTokenParameters(BaseModelWithArbitraryTypes):
    token_id: Annotated[str, Field(description="The ID of the token to delete")]


class DeleteTokenParametersNormalised(BaseModelWithArbitraryTypes):
    token_id: TokenId


class GetTokenInfoParameters(BaseModelWithArbitraryTypes):
    token_id: Annotated[
        Optional[str], Field(description="The token ID to query (e.g., 0.0.12345).")
    ] = None


class PendingAirdropQueryParameters(BaseModelWithArbitraryTypes):
    account_id: Annotated[
        Optional[str],
        Field(description="The account ID to query. Defaults to the default account."),
    ] = None


class PendingAirdropQueryParametersNormalised(BaseModelWithArbitraryTypes):
    account_id: str
