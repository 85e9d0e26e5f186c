from typing import Annotated, Dict, List, Optional

from hiero_sdk_python import AccountId, Hbar, PublicKey
from hiero_sdk_python.schedule.schedule_id import ScheduleId
from hiero_sdk_python.tokens.hbar_allowance import HbarAllowance
from pydantic import Field

from hedera_intent_kit.shared.parameter_schemas.base_schema import (
    BaseModelWithArbitraryTypes,
    OptionalScheduledTransactionParams,
    OptionalScheduledTransactionParamsNormalised,
)


class TransferHbarEntry(BaseModelWithArbitraryTypes):
    account_id: Annotated[str, Field(description="Recipient account ID.")]
    amount: Annotated[float, Field(description="Amount of HBAR to transfer.")]


class TransferHbarParameters(OptionalScheduledTransactionParams):
    transfers: Annotated[
        List[TransferHbarEntry], Field(description="Array of HBAR transfers.")
    ]
    source_account_id: Annotated[
        Optional[str], Field(description="Sender account ID.")
    ] = None
    transaction_memo: Annotated[
        Optional[str], Field(description="Memo to include with the transaction.")
    ] = None


class TransferHbarParametersNormalised(OptionalScheduledTransactionParamsNormalised):
    hbar_transfers: Dict[AccountId, int]
    transaction_memo: Optional[str] = None


class TransferHbarWithAllowanceParameters(OptionalScheduledTransactionParams):
    source_account_id: Annotated[
        str, Field(description="Account ID of the HBAR owner (the allowance granter).")
    ]
    transfers: Annotated[
        List[TransferHbarEntry],
        Field(min_length=1, description="Array of HBAR transfers."),
    ]
    transaction_memo: Annotated[
        Optional[str], Field(description="Memo to include with the transaction.")
    ] = None


class TransferHbarWithAllowanceParametersNormalised(
    OptionalScheduledTransactionParamsNormalised
):
    hbar_transfers: Dict[AccountId, int]
    hbar_approved_transfers: Dict[AccountId, int]
    transaction_memo: Optional[str] = None


class CreateAccountParameters(OptionalScheduledTransactionParams):
    public_key: Annotated[
        Optional[str],
        Field(
            description="Account public key. If not provided, the default account key is used."
        ),
    ] = None
    account_memo: Annotated[
        Optional[str], Field(description="Optional memo for the account.")
    ] = None
    initial_balance: Annotated[
        float, Field(ge=0, description="Initial HBAR balance to fund the account.")
    ] = 0
    max_automatic_token_associations: Annotated[
        int,
        Field(ge=-1, description="Max automatic token associations (-1 for unlimited)."),
    ] = -1


class CreateAccountParametersNormalised(OptionalScheduledTransactionParamsNormalised):
    key: PublicKey
    initial_balance: Hbar
    memo: Optional[str] = None
    max_automatic_token_associations: Optional[int] = None


class UpdateAccountParameters(OptionalScheduledTransactionParams):
    account_id: Annotated[
        Optional[str],
        Field(description="Account ID to update. Defaults to the default account."),
    ] = None
    max_automatic_token_associations: Annotated[
        Optional[int],
        Field(ge=-1, description="Max automatic token associations, or -1 if unlimited."),
    ] = None
    staked_account_id: Annotated[
        Optional[str], Field(description="Staked account ID.")
    ] = None
    account_memo: Annotated[Optional[str], Field(description="Account memo.")] = None
    decline_staking_reward: Annotated[
        Optional[bool], Field(description="Decline staking rewards.")
    ] = None


class UpdateAccountParametersNormalised(OptionalScheduledTransactionParamsNormalised):
    account_id: AccountId
    max_automatic_token_associations: Optional[int] = None
    staked_account_id: Optional[AccountId] = None
    account_memo: Optional[str] = None
    decline_staking_reward: Optional[bool] = None


class DeleteAccountParameters(BaseModelWithArbitraryTypes):
    account_id: Annotated[str, Field(description="The account ID to delete.")]
    transfer_account_id: Annotated[
        Optional[str],
        Field(
            description="Account receiving the remaining balance. Defaults to the default account."
        ),
    ] = None


class DeleteAccountParametersNormalised(BaseModelWithArbitraryTypes):
    account_id: AccountId
    transfer_account_id: AccountId


class ApproveHbarAllowanceParameters(OptionalScheduledTransactionParams):
    owner_account_id: Annotated[
        Optional[str],
        Field(description="Owner account ID. Defaults to the default account."),
    ] = None
    spender_account_id: Annotated[str, Field(description="Spender account ID.")]
    amount: Annotated[float, Field(description="Amount of HBAR to approve.")]
    transaction_memo: Annotated[
        Optional[str], Field(description="Optional transaction memo.")
    ] = None


class ApproveHbarAllowanceParametersNormalised(
    OptionalScheduledTransactionParamsNormalised
):
    hbar_allowances: List[HbarAllowance]
    transaction_memo: Optional[str] = None


class AccountQueryParameters(BaseModelWithArbitraryTypes):
    account_id: Annotated[str, Field(description="The account ID to query.")]


class AccountQueryParametersNormalised(BaseModelWithArbitraryTypes):
    account_id: str


class AccountBalanceQueryParameters(BaseModelWithArbitraryTypes):
    account_id: Annotated[
        Optional[str], Field(description="The account ID to query.")
    ] = None


class AccountBalanceQueryParametersNormalised(BaseModelWithArbitraryTypes):
    account_id: str


class AccountTokenBalancesQueryParameters(BaseModelWithArbitraryTypes):
    account_id: Annotated[
        Optional[str], Field(description="The account ID to query.")
    ] = None
    token_id: Annotated[
        Optional[str], Field(description="Only return the balance of this token.")
    ] = None


class AccountTokenBalancesQueryParametersNormalised(BaseModelWithArbitraryTypes):
    account_id: str
    token_id: Optional[str] = None


class SignScheduleTransactionParameters(BaseModelWithArbitraryTypes):
    schedule_id: Annotated[
        str, Field(description="The ID of the scheduled transaction to sign.")
    ]


class SignScheduleTransactionParametersNormalised(BaseModelWithArbitraryTypes):
    schedule_id: ScheduleId


class ScheduleDeleteTransactionParameters(BaseModelWithArbitraryTypes):
    schedule_id: Annotated[
        str, Field(description="The ID of the scheduled transaction to delete.")
    ]


class ScheduleDeleteTransactionParametersNormalised(BaseModelWithArbitraryTypes):
    schedule_id: ScheduleId
