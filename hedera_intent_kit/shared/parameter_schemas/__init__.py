from .base_schema import (
    BaseModelWithArbitraryTypes,
    OptionalScheduledTransactionParams,
    OptionalScheduledTransactionParamsNormalised,
    SchedulingParams,
)
from .account_schema import (
    AccountBalanceQueryParameters,
    AccountBalanceQueryParametersNormalised,
    AccountQueryParameters,
    AccountQueryParametersNormalised,
    AccountTokenBalancesQueryParameters,
    AccountTokenBalancesQueryParametersNormalised,
    ApproveHbarAllowanceParameters,
    ApproveHbarAllowanceParametersNormalised,
    CreateAccountParameters,
    CreateAccountParametersNormalised,
    DeleteAccountParameters,
    DeleteAccountParametersNormalised,
    ScheduleDeleteTransactionParameters,
    ScheduleDeleteTransactionParametersNormalised,
    SignScheduleTransactionParameters,
    SignScheduleTransactionParametersNormalised,
    TransferHbarEntry,
    TransferHbarParameters,
    TransferHbarParametersNormalised,
    TransferHbarWithAllowanceParameters,
    TransferHbarWithAllowanceParametersNormalised,
    UpdateAccountParameters,
    UpdateAccountParametersNormalised,
)
from .consensus_schema import (
    CreateTopicParameters,
    CreateTopicParametersNormalised,
    DeleteTopicParameters,
    DeleteTopicParametersNormalised,
    GetTopicInfoParameters,
    SubmitTopicMessageParameters,
    SubmitTopicMessageParametersNormalised,
    TopicMessagesQueryParameters,
    TopicMessagesQueryParametersNormalised,
    UpdateTopicParameters,
    UpdateTopicParametersNormalised,
)
from .evm_schema import (
    ContractExecuteTransactionParametersNormalised,
    ContractInfoQueryParameters,
    CreateERC20Parameters,
    CreateERC721Parameters,
    MintERC721Parameters,
    TransferERC20Parameters,
    TransferERC721Parameters,
)
from .misc_schema import ExchangeRateQueryParameters
from .token_schema import (
    AirdropFungibleTokenParameters,
    AirdropFungibleTokenParametersNormalised,
    AirdropRecipient,
    AssociateTokenParameters,
    AssociateTokenParametersNormalised,
    CreateFungibleTokenParameters,
    CreateFungibleTokenParametersNormalised,
    CreateNonFungibleTokenParameters,
    CreateNonFungibleTokenParametersNormalised,
    DeleteTokenParameters,
    DeleteTokenParametersNormalised,
    DissociateTokenParameters,
    DissociateTokenParametersNormalised,
    GetTokenInfoParameters,
    MintFungibleTokenParameters,
    MintFungibleTokenParametersNormalised,
    MintNonFungibleTokenParameters,
    MintNonFungibleTokenParametersNormalised,
    PendingAirdropQueryParameters,
    PendingAirdropQueryParametersNormalised,
    UpdateTokenParameters,
    TokenUpdateFields,
    UpdateTokenParametersNormalised,
)
from .transaction_schema import (
    TransactionRecordQueryParameters,
    TransactionRecordQueryParametersNormalised,
)

__all__ = [
    "AccountBalanceQueryParameters",
    "AccountBalanceQueryParametersNormalised",
    "AccountQueryParameters",
    "AccountQueryParametersNormalised",
    "AccountTokenBalancesQueryParameters",
    "AccountTokenBalancesQueryParametersNormalised",
    "AirdropFungibleTokenParameters",
    "AirdropFungibleTokenParametersNormalised",
    "AirdropRecipient",
    "ApproveHbarAllowanceParameters",
    "ApproveHbarAllowanceParametersNormalised",
    "AssociateTokenParameters",
    "AssociateTokenParametersNormalised",
    "BaseModelWithArbitraryTypes",
    "ContractExecuteTransactionParametersNormalised",
    "ContractInfoQueryParameters",
    "CreateAccountParameters",
    "CreateAccountParametersNormalised",
    "CreateERC20Parameters",
    "CreateERC721Parameters",
    "CreateFungibleTokenParameters",
    "CreateFungibleTokenParametersNormalised",
    "CreateNonFungibleTokenParameters",
    "CreateNonFungibleTokenParametersNormalised",
    "CreateTopicParameters",
    "CreateTopicParametersNormalised",
    "DeleteAccountParameters",
    "DeleteAccountParametersNormalised",
    "DeleteTokenParameters",
    "DeleteTokenParametersNormalised",
    "DeleteTopicParameters",
    "DeleteTopicParametersNormalised",
    "DissociateTokenParameters",
    "DissociateTokenParametersNormalised",
    "ExchangeRateQueryParameters",
    "GetTokenInfoParameters",
    "GetTopicInfoParameters",
    "MintERC721Parameters",
    "MintFungibleTokenParameters",
    "MintFungibleTokenParametersNormalised",
    "MintNonFungibleTokenParameters",
    "MintNonFungibleTokenParametersNormalised",
    "OptionalScheduledTransactionParams",
    "OptionalScheduledTransactionParamsNormalised",
    "PendingAirdropQueryParameters",
    "PendingAirdropQueryParametersNormalised",
    "ScheduleDeleteTransactionParameters",
    "ScheduleDeleteTransactionParametersNormalised",
    "SchedulingParams",
    "SignScheduleTransactionParameters",
    "SignScheduleTransactionParametersNormalised",
    "SubmitTopicMessageParameters",
    "SubmitTopicMessageParametersNormalised",
    "TopicMessagesQueryParameters",
    "TopicMessagesQueryParametersNormalised",
    "TransactionRecordQueryParameters",
    "TransactionRecordQueryParametersNormalised",
    "TransferERC20Parameters",
    "TransferERC721Parameters",
    "TransferHbarEntry",
    "TransferHbarParameters",
    "TransferHbarParametersNormalised",
    "TransferHbarWithAllowanceParameters",
    "TransferHbarWithAllowanceParametersNormalised",
    "UpdateAccountParameters",
    "UpdateAccountParametersNormalised",
    "UpdateTokenParameters",
    "TokenUpdateFields",
    "UpdateTokenParametersNormalised",
    "UpdateTopicParameters",
    "UpdateTopicParametersNormalised",
]
