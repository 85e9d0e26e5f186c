from datetime import datetime, timezone
from decimal import Decimal

import pytest
from unittest.mock import AsyncMock, MagicMock

from hiero_sdk_python import AccountId, Client

from hedera_intent_kit.plugins.core_account_query_plugin.get_hbar_balance_query import (
    get_hbar_balance_query,
)
from hedera_intent_kit.plugins.core_consensus_query_plugin.get_topic_messages_query import (
    get_topic_messages_query,
)
from hedera_intent_kit.plugins.core_transaction_query_plugin.get_transaction_record_query import (
    get_transaction_record_query,
)
from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.errors import NotFoundError, ValidationError
from hedera_intent_kit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)


@pytest.fixture
def mock_mirrornode():
    return AsyncMock()


@pytest.fixture
def mock_context(mock_mirrornode):
    return Context(account_id="0.0.1001", mirrornode_service=mock_mirrornode)


@pytest.fixture
def mock_client():
    client = MagicMock(spec=Client)
    client.operator_account_id = AccountId.from_string("0.0.1001")
    client.network = MagicMock(network="testnet")
    return client


@pytest.mark.asyncio
async def test_hbar_balance_defaults_to_context_account(
    mock_context, mock_client, mock_mirrornode
):
    mock_mirrornode.get_account_hbar_balance.return_value = Decimal("250000000")

    result = await get_hbar_balance_query(mock_client, mock_context, {})

    assert result.error is None
    mock_mirrornode.get_account_hbar_balance.assert_awaited_once_with("0.0.1001")
    assert result.extra["accountId"] == "0.0.1001"
    assert result.extra["tinybarBalance"] == "250000000"
    assert Decimal(result.extra["hbarBalance"]) == Decimal("2.5")
    assert result.human_message.startswith("Account 0.0.1001 has a balance of 2.5")


@pytest.mark.asyncio
async def test_hbar_balance_for_unknown_account_returns_error(
    mock_context, mock_client, mock_mirrornode
):
    mock_mirrornode.get_account_hbar_balance.side_effect = NotFoundError(
        "Account 0.0.404 not found"
    )

    result = await get_hbar_balance_query(
        mock_client, mock_context, {"account_id": "0.0.404"}
    )

    assert result.error == "Failed to get HBAR balance: Account 0.0.404 not found"
    assert result.extra == {}


def test_sdk_transaction_id_is_converted_to_mirror_format():
    result = HederaParameterNormaliser.normalise_get_transaction_record_params(
        {"transaction_id": "0.0.4177806@1755169980.051721264"}
    )
    assert result.transaction_id == "0.0.4177806-1755169980-051721264"


def test_mirror_transaction_id_is_kept():
    result = HederaParameterNormaliser.normalise_get_transaction_record_params(
        {"transaction_id": "0.0.4177806-1755169980-051721264", "nonce": 1}
    )
    assert result.transaction_id == "0.0.4177806-1755169980-051721264"
    assert result.nonce == 1


def test_malformed_transaction_id_is_rejected():
    with pytest.raises(ValidationError, match="Invalid transactionId format"):
        HederaParameterNormaliser.normalise_get_transaction_record_params(
            {"transaction_id": "0.0.1@abc"}
        )


@pytest.mark.asyncio
async def test_transaction_record_query_uses_converted_id(
    mock_context, mock_client, mock_mirrornode
):
    mock_mirrornode.get_transaction_record.return_value = {
        "transactions": [
            {
                "result": "SUCCESS",
                "name": "CRYPTOTRANSFER",
                "consensus_timestamp": "1755169981.000000001",
                "transaction_hash": "abc",
                "charged_tx_fee": 100000,
                "entity_id": None,
                "transfers": [{"account": "0.0.2002", "amount": 150000000}],
            }
        ]
    }

    result = await get_transaction_record_query(
        mock_client,
        mock_context,
        {"transaction_id": "0.0.1001@1755169980.000000007"},
    )

    mock_mirrornode.get_transaction_record.assert_awaited_once_with(
        "0.0.1001-1755169980-000000007", None
    )
    assert "Status: SUCCESS" in result.human_message
    assert "Entity ID: N/A" in result.human_message
    assert "Account: 0.0.2002" in result.human_message
    assert result.extra["transactionId"] == "0.0.1001-1755169980-000000007"


def test_topic_message_window_is_converted_to_mirror_timestamps():
    result = HederaParameterNormaliser.normalise_get_topic_messages(
        {
            "topic_id": "0.0.6006",
            "start_time": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "end_time": "2024-01-02T00:00:00.5Z",
        }
    )

    assert result.lower_timestamp == "1704067200.000000000"
    assert result.upper_timestamp == "1704153600.500000000"
    assert result.limit == 100


def test_topic_message_window_must_be_ordered():
    with pytest.raises(ValidationError, match="start_time must not be after end_time"):
        HederaParameterNormaliser.normalise_get_topic_messages(
            {
                "topic_id": "0.0.6006",
                "start_time": "2024-01-02T00:00:00Z",
                "end_time": "2024-01-01T00:00:00Z",
            }
        )


@pytest.mark.asyncio
async def test_topic_messages_query_passes_only_given_bounds(
    mock_context, mock_client, mock_mirrornode
):
    mock_mirrornode.get_topic_messages.return_value = {
        "topic_id": "0.0.6006",
        "messages": [],
    }

    result = await get_topic_messages_query(
        mock_client, mock_context, {"topic_id": "0.0.6006", "limit": 5}
    )

    mock_mirrornode.get_topic_messages.assert_awaited_once_with(
        {"topic_id": "0.0.6006", "limit": 5}
    )
    assert result.human_message == "No messages found for topic 0.0.6006"


@pytest.mark.asyncio
async def test_injected_service_works_on_unrecognised_network(
    mock_context, mock_client, mock_mirrornode
):
    """Queries should not resolve the ledger when the context carries a service."""
    mock_client.network = MagicMock(network="customnet")
    mock_mirrornode.get_account_hbar_balance.return_value = Decimal("100000000")

    result = await get_hbar_balance_query(
        mock_client, mock_context, {"account_id": "0.0.2002"}
    )

    assert result.error is None
    mock_mirrornode.get_account_hbar_balance.assert_awaited_once_with("0.0.2002")
