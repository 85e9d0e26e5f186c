import pytest
from unittest.mock import AsyncMock, MagicMock

from hiero_sdk_python import AccountId, Client, PrivateKey

from hedera_intent_kit.shared.configuration import AgentMode, Context
from hedera_intent_kit.shared.errors import ResolutionError
from hedera_intent_kit.shared.utils.account_resolver import AccountResolver

OPERATOR_PRIVATE_KEY = PrivateKey.generate_ed25519()
USER_KEY = PrivateKey.generate_ed25519().public_key()


def _raw(key):
    return key.to_bytes_raw().hex()


@pytest.fixture
def mock_client():
    client = MagicMock(spec=Client)
    client.operator_account_id = AccountId.from_string("0.0.1001")
    client.operator_private_key = OPERATOR_PRIVATE_KEY
    client.network = MagicMock(network="testnet")
    return client


@pytest.fixture
def mock_mirrornode():
    service = AsyncMock()
    service.get_account = AsyncMock(
        return_value={
            "account_id": "0.0.2002",
            "account_public_key": USER_KEY.to_string_der(),
            "evm_address": "0x" + "ab" * 20,
        }
    )
    return service


def test_default_account_prefers_context(mock_client):
    context = Context(account_id="0.0.2002")
    assert AccountResolver.get_default_account(context, mock_client) == "0.0.2002"


def test_default_account_falls_back_to_operator(mock_client):
    assert AccountResolver.get_default_account(Context(), mock_client) == "0.0.1001"


def test_default_account_without_any_source_raises():
    client = MagicMock()
    client.operator_account_id = None

    with pytest.raises(ResolutionError):
        AccountResolver.get_default_account(Context(), client)


def test_resolve_account_keeps_provided_value(mock_client):
    context = Context(account_id="0.0.2002")
    assert AccountResolver.resolve_account("0.0.3003", context, mock_client) == "0.0.3003"
    assert AccountResolver.resolve_account(None, context, mock_client) == "0.0.2002"


@pytest.mark.asyncio
async def test_autonomous_default_key_is_operator_key(mock_client, mock_mirrornode):
    """Should return the operator key without any mirror node call."""
    key = await AccountResolver.get_default_public_key(
        Context(account_id="0.0.2002"), mock_client, mock_mirrornode
    )

    assert _raw(key) == _raw(OPERATOR_PRIVATE_KEY.public_key())
    mock_mirrornode.get_account.assert_not_called()


@pytest.mark.asyncio
async def test_autonomous_without_operator_key_raises(mock_client):
    mock_client.operator_private_key = None

    with pytest.raises(ResolutionError):
        await AccountResolver.get_default_public_key(Context(), mock_client)


@pytest.mark.asyncio
async def test_return_bytes_default_key_comes_from_mirror(mock_client, mock_mirrornode):
    """Should read the default account's key on every call."""
    context = Context(account_id="0.0.2002", mode=AgentMode.RETURN_BYTES)

    first = await AccountResolver.get_default_public_key(
        context, mock_client, mock_mirrornode
    )
    second = await AccountResolver.get_default_public_key(
        context, mock_client, mock_mirrornode
    )

    assert _raw(first) == _raw(USER_KEY)
    assert _raw(second) == _raw(USER_KEY)
    assert mock_mirrornode.get_account.await_count == 2


@pytest.mark.asyncio
async def test_return_bytes_uses_injected_context_service(mock_client, mock_mirrornode):
    """Should fall back to the service carried by the context."""
    context = Context(
        account_id="0.0.2002",
        mode=AgentMode.RETURN_BYTES,
        mirrornode_service=mock_mirrornode,
    )

    key = await AccountResolver.get_default_public_key(context, mock_client)

    assert _raw(key) == _raw(USER_KEY)
    mock_mirrornode.get_account.assert_awaited_once_with("0.0.2002")


@pytest.mark.asyncio
async def test_return_bytes_without_key_on_record_raises(mock_client, mock_mirrornode):
    mock_mirrornode.get_account.return_value = {"account_id": "0.0.2002"}
    context = Context(account_id="0.0.2002", mode=AgentMode.RETURN_BYTES)

    with pytest.raises(ResolutionError, match="No public key available"):
        await AccountResolver.get_default_public_key(
            context, mock_client, mock_mirrornode
        )


@pytest.mark.asyncio
async def test_evm_address_lookup(mock_mirrornode):
    assert (
        await AccountResolver.get_hedera_evm_address("0.0.2002", mock_mirrornode)
        == "0x" + "ab" * 20
    )
    # already an EVM address: passed through untouched
    address = "0x" + "cd" * 20
    assert await AccountResolver.get_hedera_evm_address(address, mock_mirrornode) == address
    mock_mirrornode.get_account.assert_awaited_once_with("0.0.2002")


@pytest.mark.asyncio
async def test_injected_service_skips_network_lookup(mock_client, mock_mirrornode):
    """Should not need a known ledger when a mirror node service is injected."""
    mock_client.network = MagicMock(network="customnet")
    context = Context(
        account_id="0.0.2002",
        mode=AgentMode.RETURN_BYTES,
        mirrornode_service=mock_mirrornode,
    )

    key = await AccountResolver.get_default_public_key(context, mock_client)

    assert _raw(key) == _raw(USER_KEY)


@pytest.mark.asyncio
async def test_return_bytes_with_malformed_key_on_record_raises(
    mock_client, mock_mirrornode
):
    mock_mirrornode.get_account.return_value = {"account_public_key": "not-a-key"}
    context = Context(account_id="0.0.2002", mode=AgentMode.RETURN_BYTES)

    with pytest.raises(ResolutionError, match="is not supported"):
        await AccountResolver.get_default_public_key(
            context, mock_client, mock_mirrornode
        )
