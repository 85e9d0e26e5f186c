import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from hiero_sdk_python import (
    AccountId,
    Client,
    PrivateKey,
    ResponseCode,
    TokenAirdropTransaction,
    TokenDissociateTransaction,
    TokenMintTransaction,
    TokenUpdateTransaction,
)
from hiero_sdk_python.transaction.transaction import Transaction

from hedera_intent_kit.plugins.core_token_plugin.airdrop_fungible_token import (
    airdrop_fungible_token,
)
from hedera_intent_kit.plugins.core_token_plugin.dissociate_token import (
    dissociate_token,
)
from hedera_intent_kit.plugins.core_token_plugin.mint_fungible_token import (
    mint_fungible_token,
)
from hedera_intent_kit.plugins.core_token_plugin.update_token import update_token
from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.hedera_utils.keys import public_key_to_raw_hex
from hedera_intent_kit.shared.models import INVALID_TRANSACTION_STATUS

BUILDER = "hedera_intent_kit.shared.hedera_utils.hedera_builder"
OPERATOR_PRIVATE_KEY = PrivateKey.generate_ed25519()
OPERATOR_KEY = OPERATOR_PRIVATE_KEY.public_key()
OTHER_KEY = PrivateKey.generate_ed25519().public_key()
TX_ID = "0.0.1001@1700000001.000000000"


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


def _key_info(key):
    return {"_type": "ED25519", "key": public_key_to_raw_hex(key)}


@pytest.mark.asyncio
async def test_dissociate_with_empty_token_list_fails_locally(
    mock_context, mock_client, mock_mirrornode, mock_execute
):
    """An empty token list is rejected before any mirror node or ledger call."""
    result = await dissociate_token(mock_client, mock_context, {"token_ids": []})

    assert result.error.startswith(
        'Failed to dissociate token: Invalid parameters: Field "token_ids"'
    )
    assert result.raw.status == INVALID_TRANSACTION_STATUS
    assert mock_mirrornode.mock_calls == []
    mock_execute.assert_not_called()


@pytest.mark.asyncio
async def test_dissociate_defaults_to_context_account(
    mock_context, mock_client, mock_execute
):
    with patch(
        f"{BUILDER}.TokenDissociateTransaction", wraps=TokenDissociateTransaction
    ) as spy:
        result = await dissociate_token(
            mock_client, mock_context, {"token_ids": ["0.0.11", "0.0.12"]}
        )

    assert result.human_message == (
        f"Token(s) successfully dissociated with transaction id {TX_ID}"
    )
    kwargs = spy.call_args.kwargs
    assert str(kwargs["account_id"]) == "0.0.1001"
    assert [str(t) for t in kwargs["token_ids"]] == ["0.0.11", "0.0.12"]
    (tx, _client), _ = mock_execute.call_args
    assert isinstance(tx, TokenDissociateTransaction)


@pytest.mark.asyncio
async def test_mint_uses_decimals_from_injected_mirror(
    mock_context, mock_client, mock_mirrornode, mock_execute
):
    mock_mirrornode.get_token_info.return_value = {"decimals": "2"}

    with patch(f"{BUILDER}.TokenMintTransaction", wraps=TokenMintTransaction) as spy:
        result = await mint_fungible_token(
            mock_client, mock_context, {"token_id": "0.0.5005", "amount": 7.25}
        )

    assert result.error is None
    assert spy.call_args.kwargs["amount"] == 725
    assert str(spy.call_args.kwargs["token_id"]) == "0.0.5005"
    mock_mirrornode.get_token_info.assert_awaited_once_with("0.0.5005")


@pytest.mark.asyncio
async def test_update_token_with_foreign_admin_key_is_not_submitted(
    mock_context, mock_client, mock_mirrornode, mock_execute
):
    """An admin key mismatch yields a failure envelope and no transaction."""
    mock_mirrornode.get_token_info.return_value = {"admin_key": _key_info(OTHER_KEY)}

    result = await update_token(
        mock_client, mock_context, {"token_id": "0.0.5005", "token_name": "New"}
    )

    assert result.error == (
        "Failed to update token: You do not have permission to update this token. "
        "The adminKey does not match your public key."
    )
    mock_execute.assert_not_called()


@pytest.mark.asyncio
async def test_update_token_by_admin_sets_only_given_fields(
    mock_context, mock_client, mock_mirrornode, mock_execute
):
    mock_mirrornode.get_token_info.return_value = {
        "admin_key": _key_info(OPERATOR_KEY),
        "supply_key": _key_info(OTHER_KEY),
    }

    with patch.object(
        TokenUpdateTransaction,
        "set_token_memo",
        autospec=True,
        side_effect=lambda self, memo: self,
    ) as set_memo, patch.object(
        TokenUpdateTransaction,
        "set_supply_key",
        autospec=True,
        side_effect=lambda self, key: self,
    ) as set_supply, patch.object(
        TokenUpdateTransaction,
        "set_token_name",
        autospec=True,
        side_effect=lambda self, name: self,
    ) as set_name:
        result = await update_token(
            mock_client,
            mock_context,
            {"token_id": "0.0.5005", "token_memo": "v2", "supply_key": True},
        )

    assert result.human_message == (
        f"Token successfully updated. Transaction ID: {TX_ID}"
    )
    (_tx, memo), _ = set_memo.call_args
    assert memo == "v2"
    (_tx, supply_key), _ = set_supply.call_args
    assert public_key_to_raw_hex(supply_key) == public_key_to_raw_hex(OPERATOR_KEY)
    set_name.assert_not_called()
    (tx, _client), _ = mock_execute.call_args
    assert isinstance(tx, TokenUpdateTransaction)


@pytest.mark.asyncio
async def test_airdrop_legs_are_balanced_by_source(
    mock_context, mock_client, mock_mirrornode, mock_execute
):
    """Recipient legs use the token decimals and the source pays the total."""
    mock_mirrornode.get_token_info.return_value = {"decimals": "2"}

    with patch(
        f"{BUILDER}.TokenAirdropTransaction", wraps=TokenAirdropTransaction
    ) as spy:
        result = await airdrop_fungible_token(
            mock_client,
            mock_context,
            {
                "token_id": "0.0.5005",
                "recipients": [
                    {"account_id": "0.0.2002", "amount": 1.5},
                    {"account_id": "0.0.3003", "amount": "2"},
                ],
            },
        )

    assert result.human_message == (
        f"Token successfully airdropped with transaction id {TX_ID}"
    )
    transfers = spy.call_args.kwargs["token_transfers"]
    assert [(str(t.account_id), t.amount) for t in transfers] == [
        ("0.0.2002", 150),
        ("0.0.3003", 200),
        ("0.0.1001", -350),
    ]
    assert sum(t.amount for t in transfers) == 0
    assert {str(t.token_id) for t in transfers} == {"0.0.5005"}
    assert {t.expected_decimals for t in transfers} == {2}


@pytest.mark.asyncio
async def test_airdrop_reports_bad_recipient_and_amount_together(
    mock_context, mock_client, mock_mirrornode, mock_execute
):
    result = await airdrop_fungible_token(
        mock_client,
        mock_context,
        {
            "token_id": "0.0.5005",
            "recipients": [
                {"account_id": "alice", "amount": 1},
                {"account_id": "0.0.3003", "amount": -1},
            ],
        },
    )

    assert result.error.startswith("Failed to airdrop fungible token: ")
    assert 'Field "recipients.account_id"' in result.error
    assert "Invalid recipient amount: -1" in result.error
    mock_mirrornode.get_token_info.assert_not_called()
    mock_execute.assert_not_called()
