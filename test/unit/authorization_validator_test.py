import pytest
from unittest.mock import AsyncMock

from hiero_sdk_python import PrivateKey, PublicKey, TokenId, TopicId
from hiero_sdk_python.tokens.token_create_transaction import TokenKeys

from hedera_intent_kit.shared.errors import AuthorizationError, NotFoundError
from hedera_intent_kit.shared.hedera_utils.authorization import AuthorizationValidator
from hedera_intent_kit.shared.hedera_utils.keys import public_key_to_raw_hex
from hedera_intent_kit.shared.parameter_schemas import (
    TokenUpdateFields,
    UpdateTokenParametersNormalised,
    UpdateTopicParametersNormalised,
)

USER_KEY = PrivateKey.generate_ed25519().public_key()
OTHER_KEY = PrivateKey.generate_ed25519().public_key()


def _key_info(key: PublicKey, der: bool = False):
    return {
        "_type": "ED25519",
        "key": key.to_string_der() if der else public_key_to_raw_hex(key),
    }


def _token_update(**keys) -> UpdateTokenParametersNormalised:
    return UpdateTokenParametersNormalised(
        token_id=TokenId.from_string("0.0.5005"),
        token_params=TokenUpdateFields(token_name="Renamed"),
        token_keys=TokenKeys(**keys),
    )


@pytest.fixture
def mock_mirrornode():
    return AsyncMock()


@pytest.mark.asyncio
async def test_token_update_with_matching_admin_key_passes(mock_mirrornode):
    mock_mirrornode.get_token_info.return_value = {
        "admin_key": _key_info(USER_KEY),
        "supply_key": _key_info(OTHER_KEY),
    }

    await AuthorizationValidator.validate_token_update(
        _token_update(supply_key=USER_KEY), mock_mirrornode, USER_KEY
    )

    mock_mirrornode.get_token_info.assert_awaited_once_with("0.0.5005")


@pytest.mark.asyncio
async def test_der_encoded_admin_key_matches_raw_user_key(mock_mirrornode):
    """The on-chain key may be reported DER encoded; comparison uses raw bytes."""
    mock_mirrornode.get_token_info.return_value = {
        "admin_key": _key_info(USER_KEY, der=True)
    }

    await AuthorizationValidator.validate_token_update(
        _token_update(), mock_mirrornode, USER_KEY
    )


@pytest.mark.asyncio
async def test_token_update_with_foreign_admin_key_is_rejected(mock_mirrornode):
    """An update signed by anyone but the admin key holder is refused before building."""
    mock_mirrornode.get_token_info.return_value = {"admin_key": _key_info(OTHER_KEY)}

    with pytest.raises(AuthorizationError) as excinfo:
        await AuthorizationValidator.validate_token_update(
            _token_update(), mock_mirrornode, USER_KEY
        )

    assert str(excinfo.value) == (
        "You do not have permission to update this token. "
        "The adminKey does not match your public key."
    )


@pytest.mark.asyncio
async def test_immutable_token_is_rejected(mock_mirrornode):
    mock_mirrornode.get_token_info.return_value = {"admin_key": None}

    with pytest.raises(AuthorizationError, match="does not have an admin key"):
        await AuthorizationValidator.validate_token_update(
            _token_update(), mock_mirrornode, USER_KEY
        )


@pytest.mark.asyncio
async def test_setting_key_absent_on_chain_is_rejected(mock_mirrornode):
    mock_mirrornode.get_token_info.return_value = {"admin_key": _key_info(USER_KEY)}

    with pytest.raises(AuthorizationError) as excinfo:
        await AuthorizationValidator.validate_token_update(
            _token_update(pause_key=USER_KEY), mock_mirrornode, USER_KEY
        )

    assert str(excinfo.value) == (
        "Cannot update pauseKey: token was created without a pauseKey"
    )


@pytest.mark.asyncio
async def test_unknown_token_raises_not_found(mock_mirrornode):
    mock_mirrornode.get_token_info.return_value = {}

    with pytest.raises(NotFoundError, match="Token not found"):
        await AuthorizationValidator.validate_token_update(
            _token_update(), mock_mirrornode, USER_KEY
        )


@pytest.mark.asyncio
async def test_topic_submit_key_cannot_be_added(mock_mirrornode):
    """A topic created without a submit key cannot gain one through an update."""
    mock_mirrornode.get_topic_info.return_value = {
        "admin_key": _key_info(USER_KEY),
        "submit_key": None,
    }
    params = UpdateTopicParametersNormalised(
        topic_id=TopicId.from_string("0.0.6006"), submit_key=USER_KEY
    )

    with pytest.raises(AuthorizationError) as excinfo:
        await AuthorizationValidator.validate_topic_update(
            params, mock_mirrornode, USER_KEY
        )

    assert str(excinfo.value) == (
        "Cannot update submitKey: topic was created without a submitKey"
    )
    mock_mirrornode.get_topic_info.assert_awaited_once_with("0.0.6006")


@pytest.mark.asyncio
async def test_topic_memo_update_by_admin_passes(mock_mirrornode):
    mock_mirrornode.get_topic_info.return_value = {"admin_key": _key_info(USER_KEY)}
    params = UpdateTopicParametersNormalised(
        topic_id=TopicId.from_string("0.0.6006"), memo="new memo"
    )

    await AuthorizationValidator.validate_topic_update(params, mock_mirrornode, USER_KEY)
