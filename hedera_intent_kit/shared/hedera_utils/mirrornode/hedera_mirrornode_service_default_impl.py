"""HTTP implementation of the mirror node service over the public REST API."""

from __future__ import annotations

import base64
import binascii
import logging
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

import httpx

from hedera_intent_kit.shared.errors import NetworkError, NotFoundError
from hedera_intent_kit.shared.hedera_utils.mirrornode.hedera_mirrornode_service_interface import (
    IHederaMirrornodeService,
)
from hedera_intent_kit.shared.hedera_utils.mirrornode.types import (
    DEFAULT_MIRRORNODE_URLS,
    AccountResponse,
    ContractInfo,
    ExchangeRateResponse,
    TokenAirdropsResponse,
    TokenBalancesResponse,
    TokenInfo,
    TopicInfo,
    TopicMessage,
    TopicMessagesQueryParams,
    TopicMessagesResponse,
    TransactionDetailsResponse,
)
from hedera_intent_kit.shared.utils.ledger_id import LedgerId

logger = logging.getLogger(__name__)

DEFAULT_TOPIC_MESSAGES_LIMIT = 100
MAX_PAGE_SIZE = 100


class HederaMirrornodeServiceDefaultImpl(IHederaMirrornodeService):
    """Mirror node client backed by ``httpx.AsyncClient``.

    Args:
        ledger_id: Network whose mirror node is queried.
        base_urls: Mapping of ledger id to REST base URL (``.../api/v1``).
        http_client: Optional shared client. When omitted, a short-lived client
            is opened per request.
        timeout: Request timeout in seconds for self-managed clients.
    """

    def __init__(
        self,
        ledger_id: LedgerId,
        base_urls: Optional[Mapping[str, str]] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ):
        urls = DEFAULT_MIRRORNODE_URLS if base_urls is None else base_urls
        key = ledger_id.value if isinstance(ledger_id, LedgerId) else str(ledger_id)
        if key not in urls:
            raise ValueError(f"Network type {key} not supported")
        self.ledger_id = ledger_id
        self.base_url = urls[key].rstrip("/")
        self._http_client = http_client
        self._timeout = timeout

    async def _get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        not_found_message: str = "Resource not found",
    ) -> Dict[str, Any]:
        logger.debug("GET %s params=%s", url, params)
        try:
            if self._http_client is not None:
                response = await self._http_client.get(url, params=params)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(url, params=params)
            if response.status_code == 404:
                raise NotFoundError(not_found_message)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"Mirror node request failed with HTTP {e.response.status_code}: {url}"
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Mirror node request failed: {e}") from e

    async def get_account(self, account_id: str) -> AccountResponse:
        data = await self._get_json(
            f"{self.base_url}/accounts/{account_id}",
            not_found_message=f"Account {account_id} not found",
        )
        key = data.get("key") or {}
        return {
            "account_id": data.get("account", account_id),
            "account_public_key": key.get("key"),
            "evm_address": data.get("evm_address"),
            "balance": data.get("balance") or {},
        }

    async def get_account_hbar_balance(self, account_id: str) -> Decimal:
        account = await self.get_account(account_id)
        return Decimal(str(account["balance"].get("balance", 0)))

    async def get_account_token_balances(
        self, account_id: str, token_id: Optional[str] = None
    ) -> TokenBalancesResponse:
        params = {"token.id": token_id} if token_id else None
        data = await self._get_json(
            f"{self.base_url}/accounts/{account_id}/tokens",
            params=params,
            not_found_message=f"Account {account_id} not found",
        )
        return {"tokens": data.get("tokens", [])}

    async def get_topic_messages(
        self, query_params: TopicMessagesQueryParams
    ) -> TopicMessagesResponse:
        """Fetch messages in the requested window, following ``links.next``."""
        topic_id = query_params["topic_id"]
        limit = query_params.get("limit") or DEFAULT_TOPIC_MESSAGES_LIMIT

        timestamps: List[str] = []
        if query_params.get("lower_timestamp"):
            timestamps.append(f"gte:{query_params['lower_timestamp']}")
        if query_params.get("upper_timestamp"):
            timestamps.append(f"lte:{query_params['upper_timestamp']}")
        params: Optional[Dict[str, Any]] = {
            "limit": min(limit, MAX_PAGE_SIZE),
            "order": "desc",
        }
        if timestamps:
            params["timestamp"] = timestamps

        url = f"{self.base_url}/topics/{topic_id}/messages"
        messages: List[TopicMessage] = []
        while url and len(messages) < limit:
            data = await self._get_json(
                url, params=params, not_found_message=f"Topic {topic_id} not found"
            )
            for item in data.get("messages", []):
                messages.append(
                    {
                        "topic_id": item.get("topic_id", topic_id),
                        "message": _decode_message(item.get("message", "")),
                        "consensus_timestamp": item.get("consensus_timestamp"),
                        "sequence_number": item.get("sequence_number"),
                    }
                )
            next_link = (data.get("links") or {}).get("next")
            # next links are absolute paths carrying their own query string
            url = str(httpx.URL(self.base_url).join(next_link)) if next_link else ""
            params = None

        return {"topic_id": topic_id, "messages": messages[:limit]}

    async def get_topic_info(self, topic_id: str) -> TopicInfo:
        return await self._get_json(
            f"{self.base_url}/topics/{topic_id}",
            not_found_message="Topic not found",
        )

    async def get_token_info(self, token_id: str) -> TokenInfo:
        return await self._get_json(
            f"{self.base_url}/tokens/{token_id}",
            not_found_message="Token not found",
        )

    async def get_contract_info(self, contract_id: str) -> ContractInfo:
        return await self._get_json(
            f"{self.base_url}/contracts/{contract_id}",
            not_found_message=f"Contract {contract_id} not found",
        )

    async def get_transaction_record(
        self, transaction_id: str, nonce: Optional[int] = None
    ) -> TransactionDetailsResponse:
        params = {"nonce": nonce} if nonce is not None else None
        data = await self._get_json(
            f"{self.base_url}/transactions/{transaction_id}",
            params=params,
            not_found_message=f"Transaction {transaction_id} not found",
        )
        return {"transactions": data.get("transactions", [])}

    async def get_exchange_rate(
        self, timestamp: Optional[str] = None
    ) -> ExchangeRateResponse:
        params = {"timestamp": timestamp} if timestamp else None
        return await self._get_json(
            f"{self.base_url}/network/exchangerate",
            params=params,
            not_found_message="Exchange rate not found",
        )

    async def get_pending_airdrops(self, account_id: str) -> TokenAirdropsResponse:
        data = await self._get_json(
            f"{self.base_url}/accounts/{account_id}/airdrops/pending",
            not_found_message=f"Account {account_id} not found",
        )
        return {
            "airdrops": data.get("airdrops", []),
            "links": data.get("links") or {"next": None},
        }


def _decode_message(encoded: str) -> str:
    try:
        return base64.b64decode(encoded, validate=True).decode("utf-8", "replace")
    except (binascii.Error, ValueError):
        return encoded
