import pytest
from unittest.mock import MagicMock

from hiero_sdk_python import AccountId, Client

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.errors import ValidationError
from hedera_intent_kit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_intent_kit.shared.parameter_schemas import (
    TransferHbarParameters,
    TransferHbarWithAllowanceParameters,
)


@pytest.fixture
def mock_context():
    return Context(account_id="0.0.1001")


@pytest.fixture
def mock_client():
    client = MagicMock(spec=Client)
    client.operator_account_id = AccountId.from_string("0.0.9")
    client.network = MagicMock(network="testnet")
    return client


def _legs(transfers):
    return {str(account_id): amount for account_id, amount in transfers.items()}


@pytest.mark.asyncio
async def test_single_transfer_is_balanced_by_source_leg(mock_context, mock_client):
    """Should add one negative leg on the default account equal to the total."""
    params = TransferHbarParameters(
        transfers=[{"account_id": "0.0.2002", "amount": 1.5}]
    )

    result = await HederaParameterNormaliser.normalise_transfer_hbar(
        params, mock_context, mock_client
    )

    assert _legs(result.hbar_transfers) == {
        "0.0.2002": 150_000_000,
        "0.0.1001": -150_000_000,
    }
    assert sum(result.hbar_transfers.values()) == 0
    assert result.scheduling_params is None


@pytest.mark.asyncio
async def test_multiple_transfers_from_explicit_source(mock_context, mock_client):
    """Should debit the explicit source with the sum of all recipient legs."""
    params = TransferHbarParameters(
        transfers=[
            {"account_id": "0.0.2002", "amount": 0.1},
            {"account_id": "0.0.3003", "amount": 2},
        ],
        source_account_id="0.0.4004",
        transaction_memo="rent",
    )

    result = await HederaParameterNormaliser.normalise_transfer_hbar(
        params, mock_context, mock_client
    )

    assert _legs(result.hbar_transfers) == {
        "0.0.2002": 10_000_000,
        "0.0.3003": 200_000_000,
        "0.0.4004": -210_000_000,
    }
    assert result.transaction_memo == "rent"


@pytest.mark.asyncio
async def test_repeated_recipient_is_summed(mock_context, mock_client):
    params = TransferHbarParameters(
        transfers=[
            {"account_id": "0.0.2002", "amount": 1},
            {"account_id": "0.0.2002", "amount": 2},
        ]
    )

    result = await HederaParameterNormaliser.normalise_transfer_hbar(
        params, mock_context, mock_client
    )

    assert _legs(result.hbar_transfers) == {
        "0.0.2002": 300_000_000,
        "0.0.1001": -300_000_000,
    }


@pytest.mark.asyncio
async def test_source_falls_back_to_operator_account(mock_client):
    """Should use the client operator when neither source nor context account is set."""
    params = TransferHbarParameters(
        transfers=[{"account_id": "0.0.2002", "amount": 1}]
    )

    result = await HederaParameterNormaliser.normalise_transfer_hbar(
        params, Context(), mock_client
    )

    assert _legs(result.hbar_transfers)["0.0.9"] == -100_000_000


@pytest.mark.asyncio
async def test_all_invalid_amounts_are_reported(mock_context, mock_client):
    """Should list every non-positive amount in one error."""
    params = TransferHbarParameters(
        transfers=[
            {"account_id": "0.0.2002", "amount": 0},
            {"account_id": "0.0.3003", "amount": 1},
            {"account_id": "0.0.4004", "amount": -5},
        ]
    )

    with pytest.raises(ValidationError) as excinfo:
        await HederaParameterNormaliser.normalise_transfer_hbar(
            params, mock_context, mock_client
        )

    message = str(excinfo.value)
    assert message.count("Invalid transfer amount") == 2
    assert "; " in message


@pytest.mark.asyncio
async def test_negative_fraction_reports_exact_amount(mock_context, mock_client):
    params = TransferHbarParameters(
        transfers=[{"account_id": "0.0.3", "amount": -0.1}]
    )

    with pytest.raises(ValidationError) as excinfo:
        await HederaParameterNormaliser.normalise_transfer_hbar(
            params, mock_context, mock_client
        )

    assert str(excinfo.value) == "Invalid transfer amount: -0.1"


@pytest.mark.asyncio
async def test_bad_recipient_and_bad_amount_are_reported_together(
    mock_context, mock_client
):
    """A malformed account id does not hide an invalid amount elsewhere."""
    params = TransferHbarParameters(
        transfers=[
            {"account_id": "alice", "amount": 1},
            {"account_id": "0.0.3", "amount": -0.1},
        ]
    )

    with pytest.raises(ValidationError) as excinfo:
        await HederaParameterNormaliser.normalise_transfer_hbar(
            params, mock_context, mock_client
        )

    message = str(excinfo.value)
    assert 'Field "account_id"' in message
    assert "Invalid transfer amount: -0.1" in message


@pytest.mark.asyncio
async def test_single_leg_with_bad_recipient_and_amount_reports_both(
    mock_context, mock_client
):
    params = TransferHbarParameters(
        transfers=[{"account_id": "alice", "amount": -0.1}]
    )

    with pytest.raises(ValidationError) as excinfo:
        await HederaParameterNormaliser.normalise_transfer_hbar(
            params, mock_context, mock_client
        )

    message = str(excinfo.value)
    assert 'Field "account_id"' in message
    assert message.endswith("; Invalid transfer amount: -0.1")


@pytest.mark.asyncio
async def test_amount_below_one_tinybar_is_invalid(mock_context, mock_client):
    """Should reject amounts that truncate to zero tinybars."""
    params = TransferHbarParameters(
        transfers=[{"account_id": "0.0.2002", "amount": 0.000000001}]
    )

    with pytest.raises(ValidationError, match="Invalid transfer amount"):
        await HederaParameterNormaliser.normalise_transfer_hbar(
            params, mock_context, mock_client
        )


@pytest.mark.asyncio
async def test_malformed_recipient_is_reported_with_field(mock_context, mock_client):
    """Should name the offending field for an unparsable account id."""
    params = TransferHbarParameters(
        transfers=[{"account_id": "alice", "amount": 1}]
    )

    with pytest.raises(ValidationError, match='Field "account_id"'):
        await HederaParameterNormaliser.normalise_transfer_hbar(
            params, mock_context, mock_client
        )


@pytest.mark.asyncio
async def test_missing_transfers_field(mock_context, mock_client):
    """Should fail schema validation when transfers are absent."""
    with pytest.raises(ValidationError, match='Field "transfers"'):
        await HederaParameterNormaliser.normalise_transfer_hbar(
            {"source_account_id": "0.0.1001"}, mock_context, mock_client
        )


@pytest.mark.asyncio
async def test_allowance_transfer_marks_owner_leg_approved(mock_context, mock_client):
    """Should debit the owner through an approved leg and credit recipients normally."""
    params = TransferHbarWithAllowanceParameters(
        source_account_id="0.0.5005",
        transfers=[{"account_id": "0.0.2002", "amount": 3}],
    )

    result = await HederaParameterNormaliser.normalise_transfer_hbar_with_allowance(
        params, mock_context, mock_client
    )

    assert _legs(result.hbar_transfers) == {"0.0.2002": 300_000_000}
    assert _legs(result.hbar_approved_transfers) == {"0.0.5005": -300_000_000}


@pytest.mark.asyncio
async def test_allowance_transfer_aggregates_recipient_errors(
    mock_context, mock_client
):
    params = TransferHbarWithAllowanceParameters(
        source_account_id="0.0.5005",
        transfers=[
            {"account_id": "bob", "amount": 1},
            {"account_id": "0.0.2002", "amount": 0},
        ],
    )

    with pytest.raises(ValidationError) as excinfo:
        await HederaParameterNormaliser.normalise_transfer_hbar_with_allowance(
            params, mock_context, mock_client
        )

    message = str(excinfo.value)
    assert 'Field "account_id"' in message
    assert "Invalid transfer amount: 0" in message


@pytest.mark.asyncio
async def test_empty_transfer_list_yields_single_zero_leg(mock_context, mock_client):
    params = TransferHbarParameters(transfers=[])

    result = await HederaParameterNormaliser.normalise_transfer_hbar(
        params, mock_context, mock_client
    )

    assert _legs(result.hbar_transfers) == {"0.0.1001": 0}
