import base64

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from hiero_sdk_python import (
    AccountId,
    Client,
    PrivateKey,
    ResponseCode,
    TopicCreateTransaction,
    TopicUpdateTransaction,
)
from hiero_sdk_python.transaction.transaction import Transaction

from hedera_intent_kit.plugins.core_consensus_plugin.create_topic import (
    CREATE_TOPIC_TOOL,
    CreateTopicTool,
    create_topic,
)
from hedera_intent_kit.plugins.core_consensus_plugin.update_topic import update_topic
from hedera_intent_kit.shared.configuration import AgentMode, Context
from hedera_intent_kit.shared.hedera_utils.keys import public_key_to_raw_hex
from hedera_intent_kit.shared.models import INVALID_TRANSACTION_STATUS
from hedera_intent_kit.shared.parameter_schemas import CreateTopicParameters
from hedera_intent_kit.shared.strategies.tx_mode_strategy import (
    PENDING_SIGNATURE_STATUS,
)

BUILDER = "hedera_intent_kit.shared.hedera_utils.hedera_builder"
OPERATOR_PRIVATE_KEY = PrivateKey.generate_ed25519()
OPERATOR_KEY = OPERATOR_PRIVATE_KEY.public_key()
USER_KEY = PrivateKey.generate_ed25519().public_key()
OTHER_KEY = PrivateKey.generate_ed25519().public_key()
TX_ID = "0.0.1001@1700000002.000000000"


def _raw(key):
    return public_key_to_raw_hex(key)


def _key_info(key):
    return {"_type": "ED25519", "key": _raw(key)}


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
        topic_id="0.0.6006",
        schedule_id=None,
        contract_id=None,
    )
    with patch.object(
        Transaction, "execute", autospec=True, return_value=receipt
    ) as mock:
        yield mock


@pytest.mark.asyncio
async def test_create_topic_uses_operator_key_as_admin(
    mock_context, mock_client, mock_mirrornode, mock_execute
):
    """The admin key is always set; the submit key only on request."""
    with patch(
        f"{BUILDER}.TopicCreateTransaction", wraps=TopicCreateTransaction
    ) as spy:
        result = await create_topic(
            mock_client, mock_context, {"topic_memo": "greetings"}
        )

    assert result.error is None
    assert result.raw.topic_id == "0.0.6006"
    assert result.human_message == (
        f"Topic created successfully with topic id 0.0.6006 and transaction id {TX_ID}"
    )
    kwargs = spy.call_args.kwargs
    assert kwargs["memo"] == "greetings"
    assert _raw(kwargs["admin_key"]) == _raw(OPERATOR_KEY)
    assert kwargs["submit_key"] is None
    assert mock_mirrornode.mock_calls == []


@pytest.mark.asyncio
async def test_create_topic_with_submit_key(mock_context, mock_client, mock_execute):
    with patch(
        f"{BUILDER}.TopicCreateTransaction", wraps=TopicCreateTransaction
    ) as spy:
        await create_topic(
            mock_client,
            mock_context,
            CreateTopicParameters(is_submit_key=True, transaction_memo="memo"),
        )

    kwargs = spy.call_args.kwargs
    assert _raw(kwargs["submit_key"]) == _raw(OPERATOR_KEY)
    (tx, _client), _ = mock_execute.call_args
    assert isinstance(tx, TopicCreateTransaction)


@pytest.mark.asyncio
async def test_create_topic_failure_is_reported(mock_context, mock_client, mock_execute):
    mock_execute.return_value = MagicMock(status=ResponseCode.INVALID_SIGNATURE)

    result = await create_topic(mock_client, mock_context, {})

    assert result.error.startswith("Failed to create topic")
    assert "INVALID_SIGNATURE" in result.error
    assert result.raw.status == INVALID_TRANSACTION_STATUS


def test_create_topic_tool_metadata(mock_context):
    tool = CreateTopicTool(mock_context)

    assert tool.method == CREATE_TOPIC_TOOL
    assert tool.parameters is CreateTopicParameters


@pytest.mark.asyncio
async def test_update_topic_by_admin_is_executed(
    mock_context, mock_client, mock_mirrornode, mock_execute
):
    mock_mirrornode.get_topic_info.return_value = {
        "admin_key": _key_info(OPERATOR_KEY),
        "submit_key": _key_info(OTHER_KEY),
    }

    with patch(
        f"{BUILDER}.TopicUpdateTransaction", wraps=TopicUpdateTransaction
    ) as spy:
        result = await update_topic(
            mock_client,
            mock_context,
            {"topic_id": "0.0.6006", "topic_memo": "renamed", "submit_key": True},
        )

    assert result.error is None
    assert result.human_message == f"Topic successfully updated. Transaction ID: {TX_ID}"
    kwargs = spy.call_args.kwargs
    assert str(kwargs["topic_id"]) == "0.0.6006"
    assert kwargs["memo"] == "renamed"
    assert _raw(kwargs["submit_key"]) == _raw(OPERATOR_KEY)
    assert "admin_key" not in kwargs
    mock_mirrornode.get_topic_info.assert_awaited_once_with("0.0.6006")


@pytest.mark.asyncio
async def test_update_topic_with_foreign_admin_key_is_not_submitted(
    mock_context, mock_client, mock_mirrornode, mock_execute
):
    mock_mirrornode.get_topic_info.return_value = {"admin_key": _key_info(OTHER_KEY)}

    result = await update_topic(
        mock_client, mock_context, {"topic_id": "0.0.6006", "topic_memo": "x"}
    )

    assert result.error == (
        "Failed to update topic: You do not have permission to update this topic. "
        "The adminKey does not match your public key."
    )
    mock_execute.assert_not_called()


@pytest.mark.asyncio
async def test_update_topic_returns_bytes_for_user_signature(
    mock_client, mock_mirrornode, mock_execute
):
    """RETURN_BYTES checks the user's key from the mirror node and never submits."""
    context = Context(
        account_id="0.0.2002",
        mode=AgentMode.RETURN_BYTES,
        mirrornode_service=mock_mirrornode,
    )
    mock_mirrornode.get_account.return_value = {"account_public_key": _raw(USER_KEY)}
    mock_mirrornode.get_topic_info.return_value = {"admin_key": _key_info(USER_KEY)}

    with patch.object(
        Transaction, "freeze_with", autospec=True, side_effect=lambda self, c: self
    ) as mock_freeze, patch.object(
        Transaction, "to_bytes", autospec=True, return_value=b"topic-update"
    ):
        result = await update_topic(
            mock_client, context, {"topic_id": "0.0.6006", "topic_memo": "v2"}
        )

    assert result.error is None
    assert result.raw.status == PENDING_SIGNATURE_STATUS
    assert result.raw.transaction_bytes == base64.b64encode(b"topic-update").decode(
        "ascii"
    )
    (tx, _client), _ = mock_freeze.call_args
    assert isinstance(tx, TopicUpdateTransaction)
    assert str(tx.transaction_id.account_id) == "0.0.2002"
    mock_mirrornode.get_account.assert_awaited_with("0.0.2002")
    mock_execute.assert_not_called()


@pytest.mark.asyncio
async def test_update_topic_works_with_injected_service_on_unknown_network(
    mock_context, mock_client, mock_mirrornode, mock_execute
):
    mock_client.network = MagicMock(network="customnet")
    mock_mirrornode.get_topic_info.return_value = {"admin_key": _key_info(OPERATOR_KEY)}

    result = await update_topic(
        mock_client, mock_context, {"topic_id": "0.0.6006", "topic_memo": "x"}
    )

    assert result.error is None
