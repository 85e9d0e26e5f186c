import pytest
from unittest.mock import AsyncMock, MagicMock

from hiero_sdk_python import AccountId, Client, PrivateKey

from hedera_intent_kit.shared.configuration import AgentMode, Context
from hedera_intent_kit.shared.errors import ValidationError
from hedera_intent_kit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_intent_kit.shared.hedera_utils.keys import (
    UNSET,
    USE_DEFAULT,
    Explicit,
    key_spec_from_raw,
    parse_public_key,
    public_key_to_raw_hex,
    resolve_key_spec,
)

OPERATOR_PRIVATE_KEY = PrivateKey.generate_ed25519()
ED25519_KEY = OPERATOR_PRIVATE_KEY.public_key()
ECDSA_KEY = PrivateKey.generate_ecdsa().public_key()
MIRROR_KEY = PrivateKey.generate_ed25519().public_key()


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
        return_value={"account_public_key": public_key_to_raw_hex(MIRROR_KEY)}
    )
    return service


def test_ed25519_raw_and_der_forms_parse_to_same_key():
    raw = public_key_to_raw_hex(ED25519_KEY)

    assert len(raw) == 64
    assert public_key_to_raw_hex(parse_public_key(raw)) == raw
    assert public_key_to_raw_hex(parse_public_key(ED25519_KEY.to_string_der())) == raw


def test_ecdsa_der_form_parses():
    raw = public_key_to_raw_hex(ECDSA_KEY)

    parsed = parse_public_key(ECDSA_KEY.to_string_der())

    assert public_key_to_raw_hex(parsed) == raw


@pytest.mark.parametrize("value", ["", "not-a-key", "abcd"])
def test_invalid_key_strings_raise_value_error(value):
    with pytest.raises(ValueError, match="Invalid public key"):
        parse_public_key(value)


def test_key_spec_classification():
    assert key_spec_from_raw(True) is USE_DEFAULT
    assert key_spec_from_raw(False) is UNSET
    assert key_spec_from_raw(None) is UNSET
    assert key_spec_from_raw("302a") == Explicit("302a")


@pytest.mark.asyncio
async def test_resolve_key_spec_only_awaits_default_when_requested():
    default_key = AsyncMock(return_value=MIRROR_KEY)

    assert await resolve_key_spec(UNSET, default_key) is None
    explicit = await resolve_key_spec(
        Explicit(ED25519_KEY.to_string_der()), default_key
    )
    default_key.assert_not_awaited()

    assert public_key_to_raw_hex(explicit) == public_key_to_raw_hex(ED25519_KEY)
    assert await resolve_key_spec(USE_DEFAULT, default_key) is MIRROR_KEY
    default_key.assert_awaited_once()


@pytest.mark.asyncio
async def test_resolve_keys_mixes_explicit_default_and_unset(mock_client):
    """True resolves to the operator key, strings are parsed, False is left out."""
    result = await HederaParameterNormaliser.resolve_keys(
        {
            "admin_key": True,
            "supply_key": ECDSA_KEY.to_string_der(),
            "freeze_key": False,
            "wipe_key": None,
        },
        Context(account_id="0.0.1001"),
        mock_client,
    )

    assert set(result) == {"admin_key", "supply_key"}
    assert public_key_to_raw_hex(result["admin_key"]) == public_key_to_raw_hex(
        ED25519_KEY
    )
    assert public_key_to_raw_hex(result["supply_key"]) == public_key_to_raw_hex(
        ECDSA_KEY
    )


@pytest.mark.asyncio
async def test_resolve_keys_reports_every_malformed_key(mock_client, mock_mirrornode):
    """Should aggregate explicit key errors and skip default key resolution."""
    context = Context(account_id="0.0.1001", mode=AgentMode.RETURN_BYTES)

    with pytest.raises(ValidationError) as excinfo:
        await HederaParameterNormaliser.resolve_keys(
            {"admin_key": "nope", "kyc_key": True, "pause_key": "zz"},
            context,
            mock_client,
            mock_mirrornode,
        )

    message = str(excinfo.value)
    assert 'Field "admin_key"' in message
    assert 'Field "pause_key"' in message
    assert "kyc_key" not in message
    mock_mirrornode.get_account.assert_not_called()


@pytest.mark.asyncio
async def test_default_key_is_fetched_once_per_normalisation(
    mock_client, mock_mirrornode
):
    """Several True flags share one mirror node lookup in RETURN_BYTES mode."""
    context = Context(account_id="0.0.2002", mode=AgentMode.RETURN_BYTES)

    result = await HederaParameterNormaliser.resolve_keys(
        {"admin_key": True, "supply_key": True, "pause_key": True},
        context,
        mock_client,
        mock_mirrornode,
    )

    assert set(result) == {"admin_key", "supply_key", "pause_key"}
    assert {public_key_to_raw_hex(key) for key in result.values()} == {
        public_key_to_raw_hex(MIRROR_KEY)
    }
    mock_mirrornode.get_account.assert_awaited_once_with("0.0.2002")
