import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from hiero_sdk_python import (
    AccountAllowanceApproveTransaction,
    AccountDeleteTransaction,
    AccountId,
    AccountUpdateTransaction,
    Client,
    PrivateKey,
    ResponseCode,
    ScheduleDeleteTransaction,
    ScheduleSignTransaction,
)
from hiero_sdk_python.transaction.transaction import Transaction

from hedera_intent_kit.plugins.core_account_plugin.approve_hbar_allowance import (
    approve_hbar_allowance,
)
from hedera_intent_kit.plugins.core_account_plugin.create_account import (
    create_account,
)
from hedera_intent_kit.plugins.core_account_plugin.delete_account import (
    delete_account,
)
from hedera_intent_kit.plugins.core_account_plugin.schedule_delete import (
    schedule_delete,
)
from hedera_intent_kit.plugins.core_account_plugin.sign_schedule_transaction import (
    sign_schedule_transaction,
)
from hedera_intent_kit.plugins.core_account_plugin.update_account import (
    update_account,
)
from hedera_intent_kit.shared.configuration import AgentMode, Context
from hedera_intent_kit.shared.hedera_utils.keys import public_key_to_raw_hex
from hedera_intent_kit.shared.models import INVALID_TRANSACTION_STATUS

BUILDER = "hedera_intent_kit.shared.hedera_utils.hedera_builder"
OPERATOR_PRIVATE_KEY = PrivateKey.generate_ed25519()
USER_KEY = PrivateKey.generate_ed25519().public_key()
TX_ID = "0.0.1001@1700000003.000000000"


def _receipt(**fields):
    values = dict(
        status=ResponseCode.SUCCESS,
        transaction_id=TX_ID,
        account_id=None,
        token_id=None,
        topic_id=None,
        schedule_id=None,
        contract_id=None,
    )
    values.update(fields)
    return MagicMock(**values)


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
    client.operator_private_key = OPERATOR_PRIVATE_KEY
    client.network = MagicMock(network="testnet")
    return client


@pytest.fixture
def mock_execute():
    with patch.object(
        Transaction, "execute", autospec=True, return_value=_receipt()
    ) as mock:
        yield mock


@pytest.mark.asyncio
async def test_create_account_defaults_to_operator_key(
    mock_context, mock_client, mock_mirrornode
):
    """Should fund the account in tinybars and report the new account id."""
    with patch(f"{BUILDER}.AccountCreateTransaction") as mock_tx_cls:
        mock_tx_cls.return_value.execute.return_value = _receipt(account_id="0.0.4321")
        result = await create_account(
            mock_client,
            mock_context,
            {"initial_balance": 2.5, "account_memo": "m" * 120},
        )

    assert result.human_message == (
        f"Account created successfully.\nTransaction ID: {TX_ID}\nNew Account ID: 0.0.4321"
    )
    kwargs = mock_tx_cls.call_args.kwargs
    assert public_key_to_raw_hex(kwargs["key"]) == public_key_to_raw_hex(
        OPERATOR_PRIVATE_KEY.public_key()
    )
    assert kwargs["initial_balance"].to_tinybars() == 250_000_000
    assert kwargs["memo"] == "m" * 100
    mock_tx_cls.return_value.set_max_automatic_token_associations.assert_called_once_with(
        -1
    )
    mock_mirrornode.get_account.assert_not_called()


@pytest.mark.asyncio
async def test_create_account_in_return_bytes_mode_uses_user_key(
    mock_client, mock_mirrornode
):
    context = Context(
        account_id="0.0.2002",
        mode=AgentMode.RETURN_BYTES,
        mirrornode_service=mock_mirrornode,
    )
    mock_mirrornode.get_account.return_value = {
        "account_public_key": public_key_to_raw_hex(USER_KEY)
    }

    with patch(f"{BUILDER}.AccountCreateTransaction") as mock_tx_cls:
        mock_tx_cls.return_value.to_bytes.return_value = b"account-create"
        result = await create_account(mock_client, context, {})

    assert result.bytes == b"account-create"
    key = mock_tx_cls.call_args.kwargs["key"]
    assert public_key_to_raw_hex(key) == public_key_to_raw_hex(USER_KEY)
    mock_tx_cls.return_value.execute.assert_not_called()


@pytest.mark.asyncio
async def test_create_account_with_bad_public_key_fails(mock_context, mock_client):
    result = await create_account(mock_client, mock_context, {"public_key": "zz"})

    assert result.error.startswith(
        'Failed to create account: Invalid parameters: Field "public_key"'
    )
    assert result.raw.status == INVALID_TRANSACTION_STATUS


@pytest.mark.asyncio
async def test_update_account_defaults_to_context_account(
    mock_context, mock_client, mock_execute
):
    with patch(
        f"{BUILDER}.AccountUpdateTransaction", wraps=AccountUpdateTransaction
    ) as spy:
        result = await update_account(
            mock_client, mock_context, {"account_memo": "updated"}
        )

    assert result.human_message == (
        f"Account successfully updated.\nTransaction ID: {TX_ID}"
    )
    (account_params,), _ = spy.call_args
    assert str(account_params.account_id) == "0.0.1001"
    assert account_params.account_memo == "updated"
    (tx, _client), _ = mock_execute.call_args
    assert isinstance(tx, AccountUpdateTransaction)


@pytest.mark.asyncio
async def test_delete_account_transfers_balance_to_default_account(
    mock_context, mock_client, mock_execute
):
    with patch(
        f"{BUILDER}.AccountDeleteTransaction", wraps=AccountDeleteTransaction
    ) as spy:
        result = await delete_account(
            mock_client, mock_context, {"account_id": "0.0.2002"}
        )

    assert result.human_message == (
        f"Account successfully deleted.\nTransaction ID: {TX_ID}"
    )
    kwargs = spy.call_args.kwargs
    assert str(kwargs["account_id"]) == "0.0.2002"
    assert str(kwargs["transfer_account_id"]) == "0.0.1001"


@pytest.mark.asyncio
async def test_delete_account_rejects_evm_address(
    mock_context, mock_client, mock_execute
):
    result = await delete_account(
        mock_client, mock_context, {"account_id": "0x" + "ab" * 20}
    )

    assert result.error == (
        "Failed to delete account: Account ID must be a Hedera address"
    )
    mock_execute.assert_not_called()


@pytest.mark.asyncio
async def test_approve_hbar_allowance_converts_to_tinybars(
    mock_context, mock_client, mock_execute
):
    with patch(
        f"{BUILDER}.AccountAllowanceApproveTransaction",
        wraps=AccountAllowanceApproveTransaction,
    ) as spy:
        result = await approve_hbar_allowance(
            mock_client,
            mock_context,
            {"spender_account_id": "0.0.3003", "amount": 1.25},
        )

    assert result.human_message == (
        f"HBAR allowance approved successfully.\nTransaction ID: {TX_ID}"
    )
    (allowance,) = spy.call_args.kwargs["hbar_allowances"]
    assert str(allowance.owner_account_id) == "0.0.1001"
    assert str(allowance.spender_account_id) == "0.0.3003"
    assert allowance.amount == 125_000_000


@pytest.mark.asyncio
async def test_approve_negative_allowance_is_rejected(
    mock_context, mock_client, mock_execute
):
    result = await approve_hbar_allowance(
        mock_client,
        mock_context,
        {"spender_account_id": "0.0.3003", "amount": -1},
    )

    assert result.error == (
        "Failed to approve hbar allowance: Invalid allowance amount: -1.0"
    )
    mock_execute.assert_not_called()


@pytest.mark.asyncio
async def test_sign_schedule_builds_sign_transaction(
    mock_context, mock_client, mock_execute
):
    with patch(
        f"{BUILDER}.ScheduleSignTransaction", wraps=ScheduleSignTransaction
    ) as spy:
        result = await sign_schedule_transaction(
            mock_client, mock_context, {"schedule_id": "0.0.8008"}
        )

    assert result.human_message == (
        f"Transaction successfully signed.\nTransaction ID: {TX_ID}"
    )
    assert str(spy.call_args.kwargs["schedule_id"]) == "0.0.8008"


@pytest.mark.asyncio
async def test_schedule_delete_builds_delete_transaction(
    mock_context, mock_client, mock_execute
):
    with patch(
        f"{BUILDER}.ScheduleDeleteTransaction", wraps=ScheduleDeleteTransaction
    ) as spy:
        result = await schedule_delete(
            mock_client, mock_context, {"schedule_id": "0.0.8008"}
        )

    assert result.human_message == (
        f"Scheduled transaction successfully deleted.\nTransaction ID: {TX_ID}"
    )
    assert str(spy.call_args.kwargs["schedule_id"]) == "0.0.8008"


@pytest.mark.asyncio
async def test_schedule_delete_with_malformed_id_fails(
    mock_context, mock_client, mock_execute
):
    result = await schedule_delete(
        mock_client, mock_context, {"schedule_id": "not-an-id"}
    )

    assert result.error.startswith(
        'Failed to delete scheduled transaction: Invalid parameters: Field "schedule_id"'
    )
    mock_execute.assert_not_called()
