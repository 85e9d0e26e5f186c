from typing import Any, Dict, List, Optional, TypedDict

from hedera_intent_kit.shared.utils.ledger_id import LedgerId

DEFAULT_MIRRORNODE_URLS: Dict[str, str] = {
    LedgerId.MAINNET.value: "https://mainnet-public.mirrornode.hedera.com/api/v1",
    LedgerId.TESTNET.value: "https://testnet.mirrornode.hedera.com/api/v1",
    LedgerId.PREVIEWNET.value: "https://previewnet.mirrornode.hedera.com/api/v1",
}


class KeyInfo(TypedDict):
    _type: str
    key: str


class TopicMessagesQueryParams(TypedDict, total=False):
    topic_id: str
    lower_timestamp: str
    upper_timestamp: str
    limit: int


class TopicMessage(TypedDict, total=False):
    topic_id: str
    message: str
    consensus_timestamp: str
    sequence_number: int


class TopicMessagesResponse(TypedDict):
    topic_id: str
    messages: List[TopicMessage]


class TokenBalance(TypedDict, total=False):
    automatic_association: bool
    created_timestamp: str
    token_id: str
    freeze_status: str
    kyc_status: str
    balance: int
    decimals: int


class TokenBalancesResponse(TypedDict):
    tokens: List[TokenBalance]


class AccountBalanceResponse(TypedDict, total=False):
    balance: int
    timestamp: str
    tokens: List[TokenBalance]


class AccountResponse(TypedDict):
    account_id: str
    account_public_key: Optional[str]
    evm_address: Optional[str]
    balance: AccountBalanceResponse


class TokenInfo(TypedDict, total=False):
    """Token as reported by ``/tokens/{id}``."""

    token_id: Optional[str]
    name: str
    symbol: str
    type: str
    memo: str
    decimals: str
    initial_supply: str
    total_supply: str
    max_supply: str
    supply_type: str
    treasury_account_id: str
    auto_renew_account: str
    auto_renew_period: int
    deleted: bool
    freeze_default: bool
    pause_status: str
    created_timestamp: str
    modified_timestamp: str
    expiry_timestamp: int
    admin_key: Optional[KeyInfo]
    supply_key: Optional[KeyInfo]
    kyc_key: Optional[KeyInfo]
    freeze_key: Optional[KeyInfo]
    wipe_key: Optional[KeyInfo]
    pause_key: Optional[KeyInfo]
    fee_schedule_key: Optional[KeyInfo]
    metadata_key: Optional[KeyInfo]
    metadata: str


class TopicInfo(TypedDict, total=False):
    """Topic as reported by ``/topics/{id}``."""

    topic_id: str
    memo: str
    admin_key: Optional[KeyInfo]
    submit_key: Optional[KeyInfo]
    auto_renew_account: Optional[str]
    auto_renew_period: Optional[int]
    created_timestamp: str
    deleted: bool
    sequence_number: int


class ContractInfo(TypedDict, total=False):
    admin_key: Optional[KeyInfo]
    auto_renew_account: Optional[str]
    auto_renew_period: Optional[int]
    contract_id: Optional[str]
    created_timestamp: Optional[str]
    deleted: bool
    evm_address: str
    expiration_timestamp: Optional[str]
    file_id: Optional[str]
    max_automatic_token_associations: Optional[int]
    memo: str
    nonce: Optional[int]
    obtainer_id: Optional[str]
    permanent_removal: Optional[bool]
    proxy_account_id: Optional[str]
    timestamp: Dict[str, Optional[str]]


class TransferData(TypedDict):
    account: str
    amount: int
    is_approval: bool


class TransactionData(TypedDict, total=False):
    charged_tx_fee: int
    consensus_timestamp: str
    entity_id: Optional[str]
    max_fee: str
    memo_base64: str
    name: str
    node: str
    nonce: int
    result: str
    scheduled: bool
    token_transfers: List[Dict[str, Any]]
    nft_transfers: List[Dict[str, Any]]
    transaction_hash: str
    transaction_id: str
    transfers: List[TransferData]
    valid_duration_seconds: str
    valid_start_timestamp: str


class TransactionDetailsResponse(TypedDict):
    transactions: List[TransactionData]


class ExchangeRate(TypedDict):
    hbar_equivalent: int
    cent_equivalent: int
    expiration_time: int


class ExchangeRateResponse(TypedDict):
    current_rate: ExchangeRate
    next_rate: ExchangeRate
    timestamp: str


# "from" is a keyword, so the functional form is required
TimestampRange = TypedDict("TimestampRange", {"from": str, "to": Optional[str]})


class TokenAirdrop(TypedDict, total=False):
    amount: int
    receiver_id: Optional[str]
    sender_id: Optional[str]
    serial_number: Optional[int]
    timestamp: TimestampRange
    token_id: Optional[str]


class TokenAirdropsResponse(TypedDict):
    airdrops: List[TokenAirdrop]
    links: Dict[str, Optional[str]]
