import pytest
from unittest.mock import MagicMock, patch

from hiero_sdk_python import (
    AccountId,
    Client,
    ResponseCode,
    ScheduleCreateTransaction,
    TransferTransaction,
)
from hiero_sdk_python.transaction.transaction import Transaction

from hedera_intent_kit.plugins.core_account_plugin.transfer_hbar import (
    TRANSFER_HBAR_TOOL,
    TransferHbarTool,
    transfer_hbar,
)
from hedera_intent_kit.shared.configuration import AgentMode, Context
from hedera_intent_kit.shared.models import INVALID_TRANSACTION_STATUS
from hedera_intent_kit.shared.parameter_schemas import TransferHbarParameters

TX_ID = "0.0.1001@1700000000.000000123"


@pytest.fixture
def mock_context():
    return Context(account_id="0.0.1001")


@pytest.fixture
def mock_client():
    client = MagicMock(spec=Client)
    client.operator_account_id = AccountId.from_string("0.0.1001")
    client.network = MagicMock(network="testnet")
    return client


@pytest.fixture
def mock_execute():
    receipt = MagicMock(
        status=ResponseCode.SUCCESS,
        transaction_id=TX_ID,
        account_id=None,
        token_id=None,
        topic_id=None,
        schedule_id=None,
        contract_id=None,
    )
    with patch.object(
        Transaction, "execute", autospec=True, return_value=receipt
    ) as mock:
        yield mock


@pytest.mark.asyncio
async def test_transfer_executes_balanced_transaction(
    mock_context, mock_client, mock_execute
):
    """Should submit a two-leg transfer and report the transaction id."""
    params = TransferHbarParameters(
        transfers=[{"account_id": "0.0.2002", "amount": 1.5}]
    )

    with patch(
        "hedera_intent_kit.shared.hedera_utils.hedera_builder.TransferTransaction",
        wraps=TransferTransaction,
    ) as spy:
        result = await transfer_hbar(mock_client, mock_context, params)

    assert result.error is None
    assert result.raw.status == "SUCCESS"
    assert result.raw.transaction_id == TX_ID
    assert result.human_message == f"HBAR successfully transferred.\nTransaction ID: {TX_ID}"

    (tx, client), _ = mock_execute.call_args
    assert isinstance(tx, TransferTransaction)
    assert client is mock_client
    legs = spy.call_args.kwargs["hbar_transfers"]
    assert {str(k): v for k, v in legs.items()} == {
        "0.0.2002": 150_000_000,
        "0.0.1001": -150_000_000,
    }


@pytest.mark.asyncio
async def test_scheduled_transfer_is_wrapped(mock_context, mock_client, mock_execute):
    """Should wrap the transfer in a schedule when scheduling is requested."""
    params = TransferHbarParameters(
        transfers=[{"account_id": "0.0.2002", "amount": 1}],
        scheduling_params={"is_scheduled": True, "admin_key": False},
    )

    with patch.object(
        ScheduleCreateTransaction,
        "set_scheduled_transaction",
        autospec=True,
        side_effect=lambda self, tx: self,
    ) as mock_wrap:
        result = await transfer_hbar(mock_client, mock_context, params)

    assert result.error is None
    (schedule_tx, inner), _ = mock_wrap.call_args
    assert isinstance(inner, TransferTransaction)
    (executed, _client), _ = mock_execute.call_args
    assert executed is schedule_tx


@pytest.mark.asyncio
async def test_return_bytes_mode_does_not_submit(mock_client, mock_execute):
    context = Context(account_id="0.0.3003", mode=AgentMode.RETURN_BYTES)
    params = TransferHbarParameters(
        transfers=[{"account_id": "0.0.2002", "amount": 1}]
    )

    with patch.object(
        Transaction, "freeze_with", autospec=True, side_effect=lambda self, c: self
    ), patch.object(Transaction, "to_bytes", autospec=True, return_value=b"\x0a\x0b"):
        result = await transfer_hbar(mock_client, context, params)

    assert result.bytes == b"\x0a\x0b"
    assert result.raw.transaction_id is None
    mock_execute.assert_not_called()


@pytest.mark.asyncio
async def test_invalid_amount_returns_failure_envelope(
    mock_context, mock_client, mock_execute
):
    """Should never raise; the error is carried in the response."""
    params = TransferHbarParameters(
        transfers=[{"account_id": "0.0.2002", "amount": -0.1}]
    )

    result = await transfer_hbar(mock_client, mock_context, params)

    assert result.error == "Failed to transfer HBAR: Invalid transfer amount: -0.1"
    assert result.human_message == result.error
    assert result.raw.status == INVALID_TRANSACTION_STATUS
    assert result.raw.error == result.error
    mock_execute.assert_not_called()


@pytest.mark.asyncio
async def test_bad_account_and_bad_amount_both_reported(
    mock_context, mock_client, mock_execute
):
    params = TransferHbarParameters(
        transfers=[
            {"account_id": "alice", "amount": 1},
            {"account_id": "0.0.3", "amount": -0.1},
        ]
    )

    result = await transfer_hbar(mock_client, mock_context, params)

    assert 'Field "account_id"' in result.error
    assert "Invalid transfer amount: -0.1" in result.error
    mock_execute.assert_not_called()


@pytest.mark.asyncio
async def test_failed_receipt_returns_failure_envelope(
    mock_context, mock_client, mock_execute
):
    mock_execute.return_value = MagicMock(
        status=ResponseCode.INVALID_ACCOUNT_ID, transaction_id=TX_ID
    )
    params = TransferHbarParameters(
        transfers=[{"account_id": "0.0.2002", "amount": 1}]
    )

    result = await transfer_hbar(mock_client, mock_context, params)

    assert "failed with status INVALID_ACCOUNT_ID" in result.error
    assert result.raw.status == INVALID_TRANSACTION_STATUS


def test_tool_metadata(mock_context):
    tool = TransferHbarTool(mock_context)

    assert tool.method == TRANSFER_HBAR_TOOL
    assert tool.parameters is TransferHbarParameters
    assert tool.name == "Transfer HBAR"
    parsed = tool.outputParser('{"raw": {"status": "SUCCESS"}, "human_message": "ok"}')
    assert parsed["raw"] == {"status": "SUCCESS"}
