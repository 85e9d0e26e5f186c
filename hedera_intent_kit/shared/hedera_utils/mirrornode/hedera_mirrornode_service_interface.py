from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from hedera_intent_kit.shared.hedera_utils.mirrornode.types import (
    AccountResponse,
    ContractInfo,
    ExchangeRateResponse,
    TokenAirdropsResponse,
    TokenBalancesResponse,
    TokenInfo,
    TopicInfo,
    TopicMessagesQueryParams,
    TopicMessagesResponse,
    TransactionDetailsResponse,
)


class IHederaMirrornodeService(ABC):
    """Read-only view of ledger state.

    Implementations raise ``NotFoundError`` for unknown entities and
    ``NetworkError`` for any other failed lookup.
    """

    @abstractmethod
    async def get_account(self, account_id: str) -> AccountResponse: ...

    @abstractmethod
    async def get_account_hbar_balance(self, account_id: str) -> Decimal:
        """Balance in tinybars."""

    @abstractmethod
    async def get_account_token_balances(
        self, account_id: str, token_id: Optional[str] = None
    ) -> TokenBalancesResponse: ...

    @abstractmethod
    async def get_topic_messages(
        self, query_params: TopicMessagesQueryParams
    ) -> TopicMessagesResponse: ...

    @abstractmethod
    async def get_topic_info(self, topic_id: str) -> TopicInfo: ...

    @abstractmethod
    async def get_token_info(self, token_id: str) -> TokenInfo: ...

    @abstractmethod
    async def get_contract_info(self, contract_id: str) -> ContractInfo: ...

    @abstractmethod
    async def get_transaction_record(
        self, transaction_id: str, nonce: Optional[int] = None
    ) -> TransactionDetailsResponse: ...

    @abstractmethod
    async def get_exchange_rate(
        self, timestamp: Optional[str] = None
    ) -> ExchangeRateResponse: ...

    @abstractmethod
    async def get_pending_airdrops(self, account_id: str) -> TokenAirdropsResponse: ...
