import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from hiero_sdk_python import AccountId, Client, PrivateKey, SupplyType, TokenType
from hiero_sdk_python.schedule.schedule_create_transaction import ScheduleCreateParams

from hedera_intent_kit.shared.configuration import AgentMode, Context
from hedera_intent_kit.shared.errors import ValidationError
from hedera_intent_kit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_intent_kit.shared.hedera_utils.keys import public_key_to_raw_hex
from hedera_intent_kit.shared.parameter_schemas import SchedulingParams
from hedera_intent_kit.shared.parameter_schemas.token_schema import (
    CreateFungibleTokenParameters,
    CreateFungibleTokenParametersNormalised,
    TokenParams,
)

# Test constants
TEST_OPERATOR_ID = "0.0.1001"
TEST_PRIVATE_KEY = PrivateKey.generate_ed25519()
TEST_MIRROR_KEY = PrivateKey.generate_ed25519().public_key()


@pytest.fixture
def mock_context():
    return Context(account_id=TEST_OPERATOR_ID)


@pytest.fixture
def mock_client():
    client = MagicMock(spec=Client)
    client.operator_account_id = AccountId.from_string(TEST_OPERATOR_ID)
    client.operator_private_key = TEST_PRIVATE_KEY
    client.network = MagicMock(network="testnet")
    return client


@pytest.fixture
def mock_mirrornode():
    service = AsyncMock()
    service.get_account = AsyncMock(
        return_value={"account_public_key": TEST_MIRROR_KEY.to_string_der()}
    )
    return service


@pytest.mark.asyncio
async def test_normalise_create_fungible_token_defaults(
    mock_context, mock_client, mock_mirrornode
):
    """Should use finite supply, operator treasury and 1,000,000 display units as max supply."""
    params = CreateFungibleTokenParameters(
        token_name="Test Token",
        token_symbol="TEST",
        decimals=2,
        initial_supply=100,
    )

    result = await HederaParameterNormaliser.normalise_create_fungible_token_params(
        params, mock_context, mock_client, mock_mirrornode
    )

    assert isinstance(result, CreateFungibleTokenParametersNormalised)
    assert isinstance(result.token_params, TokenParams)

    tp = result.token_params
    assert tp.token_name == "Test Token"
    assert tp.token_symbol == "TEST"
    assert tp.token_type == TokenType.FUNGIBLE_COMMON
    assert tp.decimals == 2
    assert tp.initial_supply == 10000
    assert str(tp.treasury_account_id) == TEST_OPERATOR_ID
    assert str(tp.auto_renew_account_id) == TEST_OPERATOR_ID
    assert tp.supply_type == SupplyType.FINITE
    assert tp.max_supply == 100_000_000  # 10^6 * 10^2

    # no supply key unless requested
    assert result.keys is None
    assert result.scheduling_params is None
    mock_mirrornode.get_account.assert_not_called()


@pytest.mark.asyncio
async def test_normalise_finite_supply_math(mock_context, mock_client, mock_mirrornode):
    """Should scale both initial and max supply by the token decimals."""
    params = CreateFungibleTokenParameters(
        token_name="Finite Token",
        token_symbol="FIN",
        decimals=3,
        initial_supply=1.5,
        max_supply=500,
        supply_type="finite",
    )

    result = await HederaParameterNormaliser.normalise_create_fungible_token_params(
        params, mock_context, mock_client, mock_mirrornode
    )

    tp = result.token_params
    assert tp.supply_type == SupplyType.FINITE
    assert tp.max_supply == 500_000
    assert tp.initial_supply == 1500


@pytest.mark.asyncio
async def test_normalise_infinite_supply_has_no_max(
    mock_context, mock_client, mock_mirrornode
):
    """Should use a zero max_supply for an infinite supply token."""
    params = CreateFungibleTokenParameters(
        token_name="Infinite",
        token_symbol="INF",
        decimals=0,
        supply_type="infinite",
        initial_supply=50,
    )

    result = await HederaParameterNormaliser.normalise_create_fungible_token_params(
        params, mock_context, mock_client, mock_mirrornode
    )

    tp = result.token_params
    assert tp.supply_type == SupplyType.INFINITE
    assert tp.max_supply == 0
    assert tp.initial_supply == 50


@pytest.mark.asyncio
async def test_initial_supply_exceeding_max_raises(
    mock_context, mock_client, mock_mirrornode
):
    """Should reject an initial supply greater than the max supply."""
    params = CreateFungibleTokenParameters(
        token_name="Bad",
        token_symbol="BAD",
        decimals=1,
        initial_supply=200,
        max_supply=100,
    )

    with pytest.raises(ValidationError) as excinfo:
        await HederaParameterNormaliser.normalise_create_fungible_token_params(
            params, mock_context, mock_client, mock_mirrornode
        )

    assert "Initial supply (2000) cannot exceed max supply (1000)" in str(
        excinfo.value
    )


@pytest.mark.asyncio
async def test_supply_key_uses_operator_key_in_autonomous_mode(
    mock_context, mock_client, mock_mirrornode
):
    """Should set the supply key to the operator key without asking the mirror node."""
    params = CreateFungibleTokenParameters(
        token_name="Keyed",
        token_symbol="KEY",
        is_supply_key=True,
    )

    result = await HederaParameterNormaliser.normalise_create_fungible_token_params(
        params, mock_context, mock_client, mock_mirrornode
    )

    assert result.keys is not None
    assert public_key_to_raw_hex(result.keys.supply_key) == public_key_to_raw_hex(
        TEST_PRIVATE_KEY.public_key()
    )
    mock_mirrornode.get_account.assert_not_called()


@pytest.mark.asyncio
async def test_supply_key_uses_mirror_key_in_return_bytes_mode(
    mock_client, mock_mirrornode
):
    """Should read the default account key from the mirror node in RETURN_BYTES mode."""
    context = Context(account_id="0.0.2002", mode=AgentMode.RETURN_BYTES)
    params = CreateFungibleTokenParameters(
        token_name="Keyed",
        token_symbol="KEY",
        is_supply_key=True,
    )

    result = await HederaParameterNormaliser.normalise_create_fungible_token_params(
        params, context, mock_client, mock_mirrornode
    )

    mock_mirrornode.get_account.assert_awaited_once_with("0.0.2002")
    assert public_key_to_raw_hex(result.keys.supply_key) == public_key_to_raw_hex(
        TEST_MIRROR_KEY
    )
    assert str(result.token_params.treasury_account_id) == "0.0.2002"


@pytest.mark.asyncio
async def test_explicit_treasury_account(mock_context, mock_client, mock_mirrornode):
    """Should keep an explicit treasury while auto-renew stays on the default account."""
    params = CreateFungibleTokenParameters(
        token_name="Treasury",
        token_symbol="TRS",
        treasury_account_id="0.0.7777",
    )

    result = await HederaParameterNormaliser.normalise_create_fungible_token_params(
        params, mock_context, mock_client, mock_mirrornode
    )

    assert str(result.token_params.treasury_account_id) == "0.0.7777"
    assert str(result.token_params.auto_renew_account_id) == TEST_OPERATOR_ID


@pytest.mark.asyncio
async def test_invalid_decimals_are_rejected(mock_context, mock_client, mock_mirrornode):
    """Should report out-of-range decimals as a validation error."""
    with pytest.raises(ValidationError) as excinfo:
        await HederaParameterNormaliser.normalise_create_fungible_token_params(
            {"token_name": "X", "token_symbol": "X", "decimals": 19},
            mock_context,
            mock_client,
            mock_mirrornode,
        )

    assert 'Field "decimals"' in str(excinfo.value)


@pytest.mark.asyncio
async def test_scheduling_params_normalisation(
    mock_context, mock_client, mock_mirrornode
):
    """Should delegate scheduling params normalisation when is_scheduled is True."""
    params = CreateFungibleTokenParameters(
        token_name="Sched",
        token_symbol="SCH",
        scheduling_params=SchedulingParams(is_scheduled=True),
    )

    mock_schedule_result = ScheduleCreateParams(wait_for_expiry=True)

    with patch.object(
        HederaParameterNormaliser,
        "normalise_scheduled_transaction_params",
        new_callable=AsyncMock,
        return_value=mock_schedule_result,
    ) as mock_schedule_norm:
        result = await HederaParameterNormaliser.normalise_create_fungible_token_params(
            params, mock_context, mock_client, mock_mirrornode
        )

        mock_schedule_norm.assert_awaited_once()
        assert result.scheduling_params == mock_schedule_result
