import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type, TypeVar, Union, cast

from hiero_sdk_python import (
    AccountId,
    Client,
    Hbar,
    PublicKey,
    SupplyType,
    Timestamp,
    TokenId,
    TokenType,
    TopicId,
)
from hiero_sdk_python.contract.contract_id import ContractId
from hiero_sdk_python.schedule.schedule_create_transaction import ScheduleCreateParams
from hiero_sdk_python.schedule.schedule_id import ScheduleId
from hiero_sdk_python.tokens.hbar_allowance import HbarAllowance
from hiero_sdk_python.tokens.token_create_transaction import TokenKeys, TokenParams
from hiero_sdk_python.tokens.token_transfer import TokenTransfer
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from web3 import Web3

from hedera_intent_kit.shared.configuration import Context
from hedera_intent_kit.shared.errors import ResolutionError, ValidationError
from hedera_intent_kit.shared.hedera_utils import to_base_unit, to_tinybars
from hedera_intent_kit.shared.hedera_utils.evm_address import (
    contract_id_from_evm_address,
    is_evm_address,
    is_long_zero_address,
)
from hedera_intent_kit.shared.hedera_utils.keys import (
    Explicit,
    UseDefault,
    key_spec_from_raw,
    resolve_key_spec,
)
from hedera_intent_kit.shared.hedera_utils.mirrornode.hedera_mirrornode_service_interface import (
    IHederaMirrornodeService,
)
from hedera_intent_kit.shared.parameter_schemas import (
    AccountBalanceQueryParameters,
    AccountBalanceQueryParametersNormalised,
    AccountQueryParameters,
    AccountQueryParametersNormalised,
    AccountTokenBalancesQueryParameters,
    AccountTokenBalancesQueryParametersNormalised,
    AirdropFungibleTokenParameters,
    AirdropFungibleTokenParametersNormalised,
    ApproveHbarAllowanceParameters,
    ApproveHbarAllowanceParametersNormalised,
    AssociateTokenParameters,
    AssociateTokenParametersNormalised,
    ContractExecuteTransactionParametersNormalised,
    ContractInfoQueryParameters,
    CreateAccountParameters,
    CreateAccountParametersNormalised,
    CreateERC20Parameters,
    CreateERC721Parameters,
    CreateFungibleTokenParameters,
    CreateFungibleTokenParametersNormalised,
    CreateNonFungibleTokenParameters,
    CreateNonFungibleTokenParametersNormalised,
    CreateTopicParameters,
    CreateTopicParametersNormalised,
    DeleteAccountParameters,
    DeleteAccountParametersNormalised,
    DeleteTokenParameters,
    DeleteTokenParametersNormalised,
    DeleteTopicParameters,
    DeleteTopicParametersNormalised,
    DissociateTokenParameters,
    DissociateTokenParametersNormalised,
    ExchangeRateQueryParameters,
    GetTokenInfoParameters,
    GetTopicInfoParameters,
    MintERC721Parameters,
    MintFungibleTokenParameters,
    MintFungibleTokenParametersNormalised,
    MintNonFungibleTokenParameters,
    MintNonFungibleTokenParametersNormalised,
    PendingAirdropQueryParameters,
    PendingAirdropQueryParametersNormalised,
    ScheduleDeleteTransactionParameters,
    ScheduleDeleteTransactionParametersNormalised,
    SchedulingParams,
    SignScheduleTransactionParameters,
    SignScheduleTransactionParametersNormalised,
    SubmitTopicMessageParameters,
    SubmitTopicMessageParametersNormalised,
    TokenUpdateFields,
    TopicMessagesQueryParameters,
    TopicMessagesQueryParametersNormalised,
    TransactionRecordQueryParameters,
    TransactionRecordQueryParametersNormalised,
    TransferERC20Parameters,
    TransferERC721Parameters,
    TransferHbarParameters,
    TransferHbarParametersNormalised,
    TransferHbarWithAllowanceParameters,
    TransferHbarWithAllowanceParametersNormalised,
    UpdateAccountParameters,
    UpdateAccountParametersNormalised,
    UpdateTokenParameters,
    UpdateTokenParametersNormalised,
    UpdateTopicParameters,
    UpdateTopicParametersNormalised,
)
from hedera_intent_kit.shared.utils.account_resolver import AccountResolver

E = TypeVar("E")

DEFAULT_FINITE_MAX_SUPPLY = 1_000_000
DEFAULT_TOPIC_MESSAGES_LIMIT = 100
ERC_FACTORY_GAS = 3_000_000
ERC_CALL_GAS = 100_000
MAX_MEMO_LENGTH = 100

_MIRROR_NODE_TX_ID_REGEX = re.compile(r"^\d+\.\d+\.\d+-\d+-\d+$")
_SDK_TX_ID_REGEX = re.compile(r"^(\d+\.\d+\.\d+)@(\d+)\.(\d+)$")

_TOKEN_KEY_FIELDS = (
    "admin_key",
    "kyc_key",
    "freeze_key",
    "wipe_key",
    "supply_key",
    "fee_schedule_key",
    "pause_key",
    "metadata_key",
)


class HederaParameterNormaliser:
    """Utility class to normalise and validate Hedera transaction parameters.

    This class provides static methods for:
        - Validating and parsing parameters against Pydantic schemas.
        - Converting display amounts to tinybars / token base units.
        - Resolving account IDs and public keys through ``AccountResolver``.
        - Converting scheduling parameters to ``ScheduleCreateParams``.

    Every problem that can be detected locally raises ``ValidationError`` before
    any mirror node or ledger call is made.
    """

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    @staticmethod
    def parse_params_with_schema(
        params: Any,
        schema: Type[BaseModel],
    ) -> BaseModel:
        """Validate and parse parameters using a Pydantic schema.

        Args:
            params: The raw input parameters (a dict or a model instance).
            schema: The Pydantic model to validate against.

        Returns:
            BaseModel: An instance of the validated Pydantic model.

        Raises:
            ValidationError: If validation fails. Every field violation is listed.
        """
        try:
            return schema.model_validate(params)
        except PydanticValidationError as e:
            issues: str = HederaParameterNormaliser.format_validation_errors(e)
            raise ValidationError(f"Invalid parameters: {issues}") from e

    @staticmethod
    def format_validation_errors(error: PydanticValidationError) -> str:
        """Format Pydantic validation errors into a single human-readable string.

        Nested locations are joined with dots, e.g. ``Field "transfers.0.amount"``.
        """
        return "; ".join(
            f'Field "{".".join(str(part) for part in err["loc"])}" - {err["msg"]}'
            for err in error.errors()
        )

    @staticmethod
    def parse_entity_id(id_type: Type[E], value: str, field: str) -> E:
        """Parse ``shard.realm.num`` into ``id_type``, reporting the field on failure.

        ``id_type`` is any hiero id class exposing ``from_string``.
        """
        try:
            return id_type.from_string(value)
        except Exception as e:
            raise ValidationError(f'Invalid parameters: Field "{field}" - {e}') from e

    @staticmethod
    async def resolve_keys(
        raw_keys: Dict[str, Union[str, bool, None]],
        context: Context,
        client: Client,
        mirrornode_service: Optional[IHederaMirrornodeService] = None,
    ) -> Dict[str, PublicKey]:
        """Resolve tri-state key fields to public keys.

        Explicit keys are parsed first and all malformed ones are reported in a
        single ``ValidationError``. The default public key is fetched at most
        once and only if some field is ``True``. Unset fields are left out of
        the result.
        """
        cached: List[PublicKey] = []

        async def default_key() -> PublicKey:
            if not cached:
                cached.append(
                    await AccountResolver.get_default_public_key(
                        context, client, mirrornode_service
                    )
                )
            return cached[0]

        specs = {field: key_spec_from_raw(raw) for field, raw in raw_keys.items()}
        resolved: Dict[str, PublicKey] = {}
        issues: List[str] = []

        for field, spec in specs.items():
            if isinstance(spec, Explicit):
                try:
                    resolved[field] = await resolve_key_spec(spec, default_key)
                except ValueError as e:
                    issues.append(f'Field "{field}" - {e}')
        if issues:
            raise ValidationError(f"Invalid parameters: {'; '.join(issues)}")

        for field, spec in specs.items():
            if isinstance(spec, UseDefault):
                resolved[field] = await resolve_key_spec(spec, default_key)
        return resolved

    @staticmethod
    async def _scheduling_params_for(
        parsed_params: BaseModel, context: Context, client: Client
    ) -> Optional[ScheduleCreateParams]:
        scheduling = getattr(parsed_params, "scheduling_params", None)
        if scheduling and scheduling.is_scheduled:
            return await HederaParameterNormaliser.normalise_scheduled_transaction_params(
                scheduling, context, client
            )
        return None

    @staticmethod
    async def normalise_scheduled_transaction_params(
        scheduling: SchedulingParams,
        context: Context,
        client: Client,
    ) -> ScheduleCreateParams:
        """Convert SchedulingParams to ScheduleCreateParams.

        The admin key follows the tri-state key rule; payer account and
        expiration time are passed through when given.

        Args:
            scheduling: Raw scheduling parameters.
            context: Application context for key/account resolution.
            client: Ledger client used for key resolution.

        Returns:
            ScheduleCreateParams: Normalised scheduling parameters.
        """
        keys = await HederaParameterNormaliser.resolve_keys(
            {"admin_key": scheduling.admin_key}, context, client
        )

        payer_account_id: Optional[AccountId] = (
            HederaParameterNormaliser.parse_entity_id(
                AccountId, scheduling.payer_account_id, "payer_account_id"
            )
            if scheduling.payer_account_id
            else None
        )

        return ScheduleCreateParams(
            admin_key=keys.get("admin_key"),
            payer_account_id=payer_account_id,
            expiration_time=(
                Timestamp.from_date(scheduling.expiration_time)
                if scheduling.expiration_time
                else None
            ),
            wait_for_expiry=scheduling.wait_for_expiry or False,
            schedule_memo=scheduling.schedule_memo,
        )

    @staticmethod
    async def resolve_contract_id(
        contract_id: str, mirrornode_service: IHederaMirrornodeService
    ) -> ContractId:
        """Return the native contract id for a ``0.0.x`` id or an EVM address.

        Long-zero addresses are decoded locally; any other EVM address is looked
        up through the mirror node.
        """
        if AccountResolver.is_hedera_address(contract_id):
            return HederaParameterNormaliser.parse_entity_id(
                ContractId, contract_id, "contract_id"
            )
        if not is_evm_address(contract_id):
            raise ValidationError(
                f'Invalid parameters: Field "contract_id" - Invalid contract address: {contract_id}'
            )
        if is_long_zero_address(contract_id):
            return contract_id_from_evm_address(contract_id)

        info = await mirrornode_service.get_contract_info(contract_id)
        native_id = (info or {}).get("contract_id")
        if not native_id:
            raise ResolutionError(f"No contract id on record for {contract_id}")
        return HederaParameterNormaliser.parse_entity_id(
            ContractId, native_id, "contract_id"
        )

    @staticmethod
    async def resolve_evm_address(
        address: str, mirrornode_service: IHederaMirrornodeService
    ) -> str:
        evm_address = await AccountResolver.get_hedera_evm_address(
            address, mirrornode_service
        )
        if not is_evm_address(evm_address):
            raise ValidationError(f"Invalid EVM address: {evm_address}")
        return Web3.to_checksum_address(evm_address)

    @staticmethod
    def encode_function_call(
        abi: Sequence[Dict[str, Any]], function_name: str, args: List[Any]
    ) -> bytes:
        """ABI-encode a contract call, selector included."""
        contract = Web3().eth.contract(abi=abi)
        encoded_data = contract.encode_abi(
            abi_element_identifier=function_name, args=args
        )
        return bytes.fromhex(encoded_data[2:])

    # ------------------------------------------------------------------
    # Account service
    # ------------------------------------------------------------------

    @staticmethod
    async def normalise_transfer_hbar(
        params: TransferHbarParameters,
        context: Context,
        client: Client,
    ) -> TransferHbarParametersNormalised:
        """Normalise HBAR transfer parameters into signed tinybar legs.

        Each requested transfer becomes a positive leg, followed by one balancing
        leg on the resolved source account, so the legs always sum to zero.

        Args:
            params: Raw HBAR transfer parameters.
            context: Application context for resolving accounts.
            client: Ledger client used for account resolution.

        Returns:
            TransferHbarParametersNormalised: Legs in tinybars plus optional scheduling.

        Raises:
            ValidationError: If any transfer amount is <= 0 after conversion or
                any recipient id is malformed. All offending transfers are listed.
        """
        parsed_params: TransferHbarParameters = cast(
            TransferHbarParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, TransferHbarParameters
            ),
        )

        source_account_id: str = AccountResolver.resolve_account(
            parsed_params.source_account_id, context, client
        )

        recipients, total_tinybars = HederaParameterNormaliser._hbar_recipient_legs(
            parsed_params.transfers
        )
        source_id = HederaParameterNormaliser.parse_entity_id(
            AccountId, source_account_id, "source_account_id"
        )

        hbar_transfers: Dict[AccountId, int] = dict(recipients)
        hbar_transfers[source_id] = hbar_transfers.get(source_id, 0) - total_tinybars

        return TransferHbarParametersNormalised(
            hbar_transfers=hbar_transfers,
            scheduling_params=await HederaParameterNormaliser._scheduling_params_for(
                parsed_params, context, client
            ),
            transaction_memo=parsed_params.transaction_memo,
        )

    @staticmethod
    def _hbar_recipient_legs(
        transfers: Sequence[Any],
    ) -> Tuple[Dict[AccountId, int], int]:
        """Convert requested transfers into positive tinybar legs keyed by recipient.

        Invalid amounts and unparseable account ids are collected across all
        transfers and reported together.

        Returns:
            The recipient legs (duplicates summed, first-seen order) and their total.

        Raises:
            ValidationError: If any transfer is invalid.
        """
        legs: Dict[AccountId, int] = {}
        issues: List[str] = []
        total_tinybars = 0

        for transfer in transfers:
            try:
                account_id = HederaParameterNormaliser.parse_entity_id(
                    AccountId, transfer.account_id, "account_id"
                )
            except ValidationError as e:
                issues.append(str(e))
                account_id = None

            tinybars = to_tinybars(transfer.amount)
            if tinybars <= 0:
                issues.append(f"Invalid transfer amount: {transfer.amount}")
                continue
            if account_id is None:
                continue
            legs[account_id] = legs.get(account_id, 0) + tinybars
            total_tinybars += tinybars

        if issues:
            raise ValidationError("; ".join(issues))
        return legs, total_tinybars

    @staticmethod
    async def normalise_transfer_hbar_with_allowance(
        params: TransferHbarWithAllowanceParameters,
        context: Context,
        client: Client,
    ) -> TransferHbarWithAllowanceParametersNormalised:
        """Normalise an allowance-based HBAR transfer.

        Recipients get positive legs; the owner (``source_account_id``) gets one
        approved debit leg equal to the negated total.
        """
        parsed_params: TransferHbarWithAllowanceParameters = cast(
            TransferHbarWithAllowanceParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, TransferHbarWithAllowanceParameters
            ),
        )

        owner_id = HederaParameterNormaliser.parse_entity_id(
            AccountId, parsed_params.source_account_id, "source_account_id"
        )
        recipients, total_tinybars = HederaParameterNormaliser._hbar_recipient_legs(
            parsed_params.transfers
        )

        return TransferHbarWithAllowanceParametersNormalised(
            hbar_transfers=recipients,
            hbar_approved_transfers={owner_id: -total_tinybars},
            transaction_memo=parsed_params.transaction_memo,
            scheduling_params=await HederaParameterNormaliser._scheduling_params_for(
                parsed_params, context, client
            ),
        )

    @staticmethod
    async def normalise_create_account(
        params: CreateAccountParameters,
        context: Context,
        client: Client,
        mirrornode_service: Optional[IHederaMirrornodeService] = None,
    ) -> CreateAccountParametersNormalised:
        """Normalise account-creation input.

        Actions performed:
        - Converts ``initial_balance`` to an exact tinybar ``Hbar`` amount.
        - Truncates ``account_memo`` to 100 characters.
        - Uses ``public_key`` when given, otherwise the caller's default public key.
        - Normalises scheduling parameters when ``is_scheduled`` is True.

        Raises:
            ValidationError: If ``public_key`` is not a valid public key.
            ResolutionError: If no default public key can be resolved.
        """
        parsed_params: CreateAccountParameters = cast(
            CreateAccountParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, CreateAccountParameters
            ),
        )

        account_memo: Optional[str] = parsed_params.account_memo
        if account_memo and len(account_memo) > MAX_MEMO_LENGTH:
            account_memo = account_memo[:MAX_MEMO_LENGTH]

        keys = await HederaParameterNormaliser.resolve_keys(
            {"public_key": parsed_params.public_key or True},
            context,
            client,
            mirrornode_service,
        )

        return CreateAccountParametersNormalised(
            key=keys["public_key"],
            initial_balance=Hbar(
                to_tinybars(parsed_params.initial_balance), in_tinybars=True
            ),
            memo=account_memo,
            max_automatic_token_associations=parsed_params.max_automatic_token_associations,
            scheduling_params=await HederaParameterNormaliser._scheduling_params_for(
                parsed_params, context, client
            ),
        )

    @staticmethod
    async def normalise_update_account(
        params: UpdateAccountParameters,
        context: Context,
        client: Client,
    ) -> UpdateAccountParametersNormalised:
        """Normalise account-update input.

        Only fields present in the raw params are carried over; ``account_id``
        defaults to the default account.
        """
        parsed_params: UpdateAccountParameters = cast(
            UpdateAccountParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, UpdateAccountParameters
            ),
        )

        account_id = HederaParameterNormaliser.parse_entity_id(
            AccountId,
            AccountResolver.resolve_account(parsed_params.account_id, context, client),
            "account_id",
        )

        updates: Dict[str, Any] = {}
        present = parsed_params.model_fields_set
        for field in (
            "max_automatic_token_associations",
            "account_memo",
            "decline_staking_reward",
        ):
            value = getattr(parsed_params, field)
            if field in present and value is not None:
                updates[field] = value
        if "staked_account_id" in present and parsed_params.staked_account_id:
            updates["staked_account_id"] = HederaParameterNormaliser.parse_entity_id(
                AccountId, parsed_params.staked_account_id, "staked_account_id"
            )

        return UpdateAccountParametersNormalised(
            account_id=account_id,
            scheduling_params=await HederaParameterNormaliser._scheduling_params_for(
                parsed_params, context, client
            ),
            **updates,
        )

    @staticmethod
    def normalise_delete_account(
        params: DeleteAccountParameters,
        context: Context,
        client: Client,
    ) -> DeleteAccountParametersNormalised:
        """Normalise delete account parameters.

        Raises:
            ValidationError: If ``account_id`` is not a native ``0.0.x`` id.
        """
        parsed_params: DeleteAccountParameters = cast(
            DeleteAccountParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, DeleteAccountParameters
            ),
        )

        if not AccountResolver.is_hedera_address(parsed_params.account_id):
            raise ValidationError("Account ID must be a Hedera address")

        transfer_account_id: str = AccountResolver.resolve_account(
            parsed_params.transfer_account_id, context, client
        )

        return DeleteAccountParametersNormalised(
            account_id=HederaParameterNormaliser.parse_entity_id(
                AccountId, parsed_params.account_id, "account_id"
            ),
            transfer_account_id=HederaParameterNormaliser.parse_entity_id(
                AccountId, transfer_account_id, "transfer_account_id"
            ),
        )

    @staticmethod
    async def normalise_approve_hbar_allowance(
        params: ApproveHbarAllowanceParameters,
        context: Context,
        client: Client,
    ) -> ApproveHbarAllowanceParametersNormalised:
        """Normalise an HBAR allowance approval. An amount of 0 revokes the allowance."""
        parsed_params: ApproveHbarAllowanceParameters = cast(
            ApproveHbarAllowanceParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, ApproveHbarAllowanceParameters
            ),
        )

        tinybars = to_tinybars(parsed_params.amount)
        if tinybars < 0:
            raise ValidationError(f"Invalid allowance amount: {parsed_params.amount}")

        owner_account_id = AccountResolver.resolve_account(
            parsed_params.owner_account_id, context, client
        )
        allowance = HbarAllowance(
            owner_account_id=HederaParameterNormaliser.parse_entity_id(
                AccountId, owner_account_id, "owner_account_id"
            ),
            spender_account_id=HederaParameterNormaliser.parse_entity_id(
                AccountId, parsed_params.spender_account_id, "spender_account_id"
            ),
            amount=tinybars,
        )

        return ApproveHbarAllowanceParametersNormalised(
            hbar_allowances=[allowance],
            transaction_memo=parsed_params.transaction_memo,
            scheduling_params=await HederaParameterNormaliser._scheduling_params_for(
                parsed_params, context, client
            ),
        )

    @staticmethod
    def normalise_sign_schedule(
        params: SignScheduleTransactionParameters,
    ) -> SignScheduleTransactionParametersNormalised:
        parsed_params: SignScheduleTransactionParameters = cast(
            SignScheduleTransactionParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, SignScheduleTransactionParameters
            ),
        )
        return SignScheduleTransactionParametersNormalised(
            schedule_id=HederaParameterNormaliser.parse_entity_id(
                ScheduleId, parsed_params.schedule_id, "schedule_id"
            )
        )

    @staticmethod
    def normalise_delete_schedule(
        params: ScheduleDeleteTransactionParameters,
    ) -> ScheduleDeleteTransactionParametersNormalised:
        parsed_params: ScheduleDeleteTransactionParameters = cast(
            ScheduleDeleteTransactionParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, ScheduleDeleteTransactionParameters
            ),
        )
        return ScheduleDeleteTransactionParametersNormalised(
            schedule_id=HederaParameterNormaliser.parse_entity_id(
                ScheduleId, parsed_params.schedule_id, "schedule_id"
            )
        )

    @staticmethod
    def normalise_get_hbar_balance(
        params: AccountBalanceQueryParameters,
        context: Context,
        client: Client,
    ) -> AccountBalanceQueryParametersNormalised:
        """Normalise HBAR balance query parameters.

        If an account_id is provided, it is used directly.
        Otherwise, the default account from AccountResolver is used.
        """
        parsed_params: AccountBalanceQueryParameters = cast(
            AccountBalanceQueryParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, AccountBalanceQueryParameters
            ),
        )
        return AccountBalanceQueryParametersNormalised(
            account_id=AccountResolver.resolve_account(
                parsed_params.account_id, context, client
            )
        )

    @staticmethod
    def normalise_account_token_balances(
        params: AccountTokenBalancesQueryParameters,
        context: Context,
        client: Client,
    ) -> AccountTokenBalancesQueryParametersNormalised:
        parsed_params: AccountTokenBalancesQueryParameters = cast(
            AccountTokenBalancesQueryParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, AccountTokenBalancesQueryParameters
            ),
        )
        return AccountTokenBalancesQueryParametersNormalised(
            account_id=AccountResolver.resolve_account(
                parsed_params.account_id, context, client
            ),
            token_id=parsed_params.token_id,
        )

    @staticmethod
    def normalise_get_account_query(params) -> AccountQueryParametersNormalised:
        """Parse and validate account query parameters"""
        parsed_params: AccountQueryParameters = cast(
            AccountQueryParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, AccountQueryParameters
            ),
        )
        return AccountQueryParametersNormalised(account_id=parsed_params.account_id)

    # ------------------------------------------------------------------
    # Token service
    # ------------------------------------------------------------------

    @staticmethod
    async def normalise_create_fungible_token_params(
        params: CreateFungibleTokenParameters,
        context: Context,
        client: Client,
        mirrornode_service: Optional[IHederaMirrornodeService] = None,
    ) -> CreateFungibleTokenParametersNormalised:
        """Normalise fungible token creation parameters.

        Actions performed:
        - Treasury defaults to the default account, as does the auto-renew account.
        - ``initial_supply`` and ``max_supply`` are converted to base units.
        - A finite supply without ``max_supply`` gets 1,000,000 display units.
        - ``is_supply_key=True`` sets the supply key to the default public key.

        Raises:
            ValidationError: If the initial supply exceeds the max supply.
        """
        parsed_params: CreateFungibleTokenParameters = cast(
            CreateFungibleTokenParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, CreateFungibleTokenParameters
            ),
        )

        default_account_id = AccountResolver.get_default_account(context, client)
        treasury_account_id = parsed_params.treasury_account_id or default_account_id

        decimals = parsed_params.decimals
        initial_supply = to_base_unit(parsed_params.initial_supply, decimals)

        is_finite = parsed_params.supply_type == "finite"
        max_supply: int = 0
        if is_finite:
            max_supply = to_base_unit(
                parsed_params.max_supply
                if parsed_params.max_supply is not None
                else DEFAULT_FINITE_MAX_SUPPLY,
                decimals,
            )
            if initial_supply > max_supply:
                raise ValidationError(
                    f"Initial supply ({initial_supply}) cannot exceed max supply ({max_supply})"
                )

        keys = await HederaParameterNormaliser.resolve_keys(
            {"supply_key": parsed_params.is_supply_key},
            context,
            client,
            mirrornode_service,
        )

        token_params = TokenParams(
            token_name=parsed_params.token_name,
            token_symbol=parsed_params.token_symbol,
            token_type=TokenType.FUNGIBLE_COMMON,
            supply_type=SupplyType.FINITE if is_finite else SupplyType.INFINITE,
            decimals=decimals,
            initial_supply=initial_supply,
            max_supply=max_supply,
            treasury_account_id=HederaParameterNormaliser.parse_entity_id(
                AccountId, treasury_account_id, "treasury_account_id"
            ),
            auto_renew_account_id=AccountId.from_string(default_account_id),
            memo=parsed_params.token_memo,
        )

        return CreateFungibleTokenParametersNormalised(
            token_params=token_params,
            keys=TokenKeys(**keys) if keys else None,
            scheduling_params=await HederaParameterNormaliser._scheduling_params_for(
                parsed_params, context, client
            ),
        )

    @staticmethod
    async def normalise_create_non_fungible_token_params(
        params: CreateNonFungibleTokenParameters,
        context: Context,
        client: Client,
        mirrornode_service: Optional[IHederaMirrornodeService] = None,
    ) -> CreateNonFungibleTokenParametersNormalised:
        """Normalise NFT class creation parameters.

        NFT classes are always finite supply, and the supply key is mandatory
        (set to the default public key).
        """
        parsed_params: CreateNonFungibleTokenParameters = cast(
            CreateNonFungibleTokenParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, CreateNonFungibleTokenParameters
            ),
        )

        default_account_id = AccountResolver.get_default_account(context, client)
        treasury_account_id = parsed_params.treasury_account_id or default_account_id

        supply_key = await AccountResolver.get_default_public_key(
            context, client, mirrornode_service
        )

        token_params = TokenParams(
            token_name=parsed_params.token_name,
            token_symbol=parsed_params.token_symbol,
            token_type=TokenType.NON_FUNGIBLE_UNIQUE,
            supply_type=SupplyType.FINITE,
            decimals=0,
            initial_supply=0,
            max_supply=parsed_params.max_supply,
            treasury_account_id=HederaParameterNormaliser.parse_entity_id(
                AccountId, treasury_account_id, "treasury_account_id"
            ),
            auto_renew_account_id=AccountId.from_string(default_account_id),
            memo=parsed_params.token_memo,
        )

        return CreateNonFungibleTokenParametersNormalised(
            token_params=token_params,
            keys=TokenKeys(supply_key=supply_key),
            scheduling_params=await HederaParameterNormaliser._scheduling_params_for(
                parsed_params, context, client
            ),
        )

    @staticmethod
    async def _get_token_decimals(
        token_id: str, mirrornode_service: IHederaMirrornodeService
    ) -> int:
        token_info = await mirrornode_service.get_token_info(token_id)
        raw_decimals = (token_info or {}).get("decimals")
        if raw_decimals is None:
            raise ValidationError(f"Unable to retrieve token decimals for token {token_id}")
        try:
            return int(raw_decimals)
        except (TypeError, ValueError) as e:
            raise ValidationError(
                f"Invalid token decimals for token {token_id}: {raw_decimals}"
            ) from e

    @staticmethod
    async def normalise_mint_fungible_token_params(
        params: MintFungibleTokenParameters,
        context: Context,
        client: Client,
        mirrornode_service: IHederaMirrornodeService,
    ) -> MintFungibleTokenParametersNormalised:
        """Normalise fungible token mint parameters.

        The amount is converted to base units using the token's decimals as
        reported by the mirror node.

        Raises:
            ValidationError: If the token decimals cannot be retrieved.
        """
        parsed_params: MintFungibleTokenParameters = cast(
            MintFungibleTokenParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, MintFungibleTokenParameters
            ),
        )
        token_id = HederaParameterNormaliser.parse_entity_id(
            TokenId, parsed_params.token_id, "token_id"
        )

        decimals = await HederaParameterNormaliser._get_token_decimals(
            parsed_params.token_id, mirrornode_service
        )

        return MintFungibleTokenParametersNormalised(
            token_id=token_id,
            amount=to_base_unit(parsed_params.amount, decimals),
            scheduling_params=await HederaParameterNormaliser._scheduling_params_for(
                parsed_params, context, client
            ),
        )

    @staticmethod
    async def normalise_mint_non_fungible_token_params(
        params: MintNonFungibleTokenParameters,
        context: Context,
        client: Client,
    ) -> MintNonFungibleTokenParametersNormalised:
        parsed_params: MintNonFungibleTokenParameters = cast(
            MintNonFungibleTokenParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, MintNonFungibleTokenParameters
            ),
        )
        return MintNonFungibleTokenParametersNormalised(
            token_id=HederaParameterNormaliser.parse_entity_id(
                TokenId, parsed_params.token_id, "token_id"
            ),
            metadata=[uri.encode("utf-8") for uri in parsed_params.uris],
            scheduling_params=await HederaParameterNormaliser._scheduling_params_for(
                parsed_params, context, client
            ),
        )

    @staticmethod
    async def normalise_associate_token_params(
        params: AssociateTokenParameters,
        context: Context,
        client: Client,
    ) -> AssociateTokenParametersNormalised:
        parsed_params: AssociateTokenParameters = cast(
            AssociateTokenParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, AssociateTokenParameters
            ),
        )
        account_id = AccountResolver.resolve_account(
            parsed_params.account_id, context, client
        )
        return AssociateTokenParametersNormalised(
            account_id=HederaParameterNormaliser.parse_entity_id(
                AccountId, account_id, "account_id"
            ),
            token_ids=[
                HederaParameterNormaliser.parse_entity_id(TokenId, t_id, "token_ids")
                for t_id in parsed_params.token_ids
            ],
            scheduling_params=await HederaParameterNormaliser._scheduling_params_for(
                parsed_params, context, client
            ),
        )

    @staticmethod
    async def normalise_dissociate_token_params(
        params: DissociateTokenParameters,
        context: Context,
        client: Client,
    ) -> DissociateTokenParametersNormalised:
        """Normalise parameters for dissociating tokens.

        Args:
            params: The raw input parameters. ``token_ids`` must not be empty.
            context: The runtime context.
            client: The ledger client.

        Returns:
            The normalised parameters, ready for transaction building.
        """
        parsed_params: DissociateTokenParameters = cast(
            DissociateTokenParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, DissociateTokenParameters
            ),
        )
        account_id = AccountResolver.resolve_account(
            parsed_params.account_id, context, client
        )
        return DissociateTokenParametersNormalised(
            token_ids=[
                HederaParameterNormaliser.parse_entity_id(TokenId, t_id, "token_ids")
                for t_id in parsed_params.token_ids
            ],
            account_id=HederaParameterNormaliser.parse_entity_id(
                AccountId, account_id, "account_id"
            ),
            transaction_memo=parsed_params.transaction_memo,
            scheduling_params=await HederaParameterNormaliser._scheduling_params_for(
                parsed_params, context, client
            ),
        )

    @staticmethod
    async def normalise_update_token(
        params: UpdateTokenParameters,
        context: Context,
        client: Client,
        mirrornode_service: Optional[IHederaMirrornodeService] = None,
    ) -> UpdateTokenParametersNormalised:
        """Normalise token update parameters.

        Only fields present in the raw params are set on the result. Key fields
        follow the tri-state rule: ``True`` is the caller's default key, a string
        is parsed as a public key, ``False``/omitted leaves the key untouched.

        Raises:
            ValidationError: If any explicit key is malformed (all are reported).
        """
        parsed_params: UpdateTokenParameters = cast(
            UpdateTokenParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, UpdateTokenParameters
            ),
        )
        present = parsed_params.model_fields_set

        token_id = HederaParameterNormaliser.parse_entity_id(
            TokenId, parsed_params.token_id, "token_id"
        )

        updates: Dict[str, Any] = {}
        for field in ("token_name", "token_symbol", "token_memo"):
            value = getattr(parsed_params, field)
            if field in present and value is not None:
                updates[field] = value
        if "metadata" in present and parsed_params.metadata is not None:
            updates["metadata"] = parsed_params.metadata.encode("utf-8")
        for field in ("treasury_account_id", "auto_renew_account_id"):
            value = getattr(parsed_params, field)
            if field in present and value:
                updates[field] = HederaParameterNormaliser.parse_entity_id(
                    AccountId, value, field
                )

        keys = await HederaParameterNormaliser.resolve_keys(
            {
                field: getattr(parsed_params, field)
                for field in _TOKEN_KEY_FIELDS
                if field in present
            },
            context,
            client,
            mirrornode_service,
        )

        return UpdateTokenParametersNormalised(
            token_id=token_id,
            token_params=TokenUpdateFields(**updates),
            token_keys=TokenKeys(**keys),
        )

    @staticmethod
    def normalise_delete_token(
        params: DeleteTokenParameters,
    ) -> DeleteTokenParametersNormalised:
        parsed_params: DeleteTokenParameters = cast(
            DeleteTokenParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, DeleteTokenParameters
            ),
        )
        return DeleteTokenParametersNormalised(
            token_id=HederaParameterNormaliser.parse_entity_id(
                TokenId, parsed_params.token_id, "token_id"
            )
        )

    @staticmethod
    async def normalise_airdrop_fungible_token_params(
        params: AirdropFungibleTokenParameters,
        context: Context,
        client: Client,
        mirrornode_service: IHederaMirrornodeService,
    ) -> AirdropFungibleTokenParametersNormalised:
        """Normalise an airdrop into balanced token transfer legs.

        Recipient amounts are converted with the token's decimals; the source
        account gets one leg equal to the negated total.

        Raises:
            ValidationError: If any recipient amount is <= 0 or any recipient id
                is malformed (all are reported), or the token decimals cannot be
                determined.
        """
        parsed_params: AirdropFungibleTokenParameters = cast(
            AirdropFungibleTokenParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, AirdropFungibleTokenParameters
            ),
        )

        source_account_id = AccountResolver.resolve_account(
            parsed_params.source_account_id, context, client
        )
        token_id = HederaParameterNormaliser.parse_entity_id(
            TokenId, parsed_params.token_id, "token_id"
        )

        issues: List[str] = []
        recipient_ids: List[AccountId] = []
        for recipient in parsed_params.recipients:
            try:
                recipient_ids.append(
                    HederaParameterNormaliser.parse_entity_id(
                        AccountId, recipient.account_id, "recipients.account_id"
                    )
                )
            except ValidationError as e:
                issues.append(str(e))
            try:
                if float(recipient.amount) <= 0:
                    issues.append(f"Invalid recipient amount: {recipient.amount}")
            except ValueError:
                issues.append(f"Invalid recipient amount: {recipient.amount}")
        if issues:
            raise ValidationError("; ".join(issues))

        decimals = await HederaParameterNormaliser._get_token_decimals(
            parsed_params.token_id, mirrornode_service
        )

        token_transfers: List[TokenTransfer] = []
        total_amount = 0
        for recipient, account_id in zip(parsed_params.recipients, recipient_ids):
            amount = to_base_unit(recipient.amount, decimals)
            if amount <= 0:
                issues.append(f"Invalid recipient amount: {recipient.amount}")
                continue
            token_transfers.append(
                TokenTransfer(
                    token_id=token_id,
                    account_id=account_id,
                    amount=amount,
                    expected_decimals=decimals,
                )
            )
            total_amount += amount
        if issues:
            raise ValidationError("; ".join(issues))

        token_transfers.append(
            TokenTransfer(
                token_id=token_id,
                account_id=HederaParameterNormaliser.parse_entity_id(
                    AccountId, source_account_id, "source_account_id"
                ),
                amount=-total_amount,
                expected_decimals=decimals,
            )
        )

        return AirdropFungibleTokenParametersNormalised(
            token_transfers=token_transfers,
            transaction_memo=parsed_params.transaction_memo,
            scheduling_params=await HederaParameterNormaliser._scheduling_params_for(
                parsed_params, context, client
            ),
        )

    @staticmethod
    def normalise_get_token_info(
        params: GetTokenInfoParameters,
    ) -> GetTokenInfoParameters:
        """Validate token info query parameters.

        Raises:
            ValidationError: If token_id is missing.
        """
        parsed_params: GetTokenInfoParameters = cast(
            GetTokenInfoParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, GetTokenInfoParameters
            ),
        )
        if not parsed_params.token_id:
            raise ValidationError("Token ID is required to fetch token info.")
        return parsed_params

    @staticmethod
    def normalise_get_pending_airdrop(
        params: PendingAirdropQueryParameters,
        context: Context,
        client: Client,
    ) -> PendingAirdropQueryParametersNormalised:
        parsed_params: PendingAirdropQueryParameters = cast(
            PendingAirdropQueryParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, PendingAirdropQueryParameters
            ),
        )
        return PendingAirdropQueryParametersNormalised(
            account_id=AccountResolver.resolve_account(
                parsed_params.account_id, context, client
            )
        )

    # ------------------------------------------------------------------
    # Consensus service
    # ------------------------------------------------------------------

    @staticmethod
    async def normalise_create_topic_params(
        params: CreateTopicParameters,
        context: Context,
        client: Client,
        mirrornode_service: Optional[IHederaMirrornodeService] = None,
    ) -> CreateTopicParametersNormalised:
        """Normalise 'create topic' parameters.

        The admin key is always the caller's default public key, so the topic
        stays updatable by its creator. The submit key is set to the same key
        only when ``is_submit_key`` is True. The auto-renew account is the
        default account.
        """
        parsed_params: CreateTopicParameters = cast(
            CreateTopicParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, CreateTopicParameters
            ),
        )

        default_account_id = AccountResolver.get_default_account(context, client)
        keys = await HederaParameterNormaliser.resolve_keys(
            {"admin_key": True, "submit_key": parsed_params.is_submit_key},
            context,
            client,
            mirrornode_service,
        )

        return CreateTopicParametersNormalised(
            memo=parsed_params.topic_memo,
            transaction_memo=parsed_params.transaction_memo,
            admin_key=keys.get("admin_key"),
            submit_key=keys.get("submit_key"),
            auto_renew_account_id=AccountId.from_string(default_account_id),
        )

    @staticmethod
    async def normalise_update_topic(
        params: UpdateTopicParameters,
        context: Context,
        client: Client,
        mirrornode_service: Optional[IHederaMirrornodeService] = None,
    ) -> UpdateTopicParametersNormalised:
        """Normalise parameters for updating a topic.

        Only fields present in the raw params are set on the result.
        """
        parsed_params: UpdateTopicParameters = cast(
            UpdateTopicParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, UpdateTopicParameters
            ),
        )
        present = parsed_params.model_fields_set

        topic_id = HederaParameterNormaliser.parse_entity_id(
            TopicId, parsed_params.topic_id, "topic_id"
        )

        updates: Dict[str, Any] = {}
        if "topic_memo" in present and parsed_params.topic_memo is not None:
            updates["memo"] = parsed_params.topic_memo
        if "auto_renew_account_id" in present and parsed_params.auto_renew_account_id:
            updates["auto_renew_account_id"] = HederaParameterNormaliser.parse_entity_id(
                AccountId, parsed_params.auto_renew_account_id, "auto_renew_account_id"
            )
        if "auto_renew_period" in present and parsed_params.auto_renew_period:
            updates["auto_renew_period"] = parsed_params.auto_renew_period
        if "expiration_time" in present and parsed_params.expiration_time:
            updates["expiration_time"] = parsed_params.expiration_time

        keys = await HederaParameterNormaliser.resolve_keys(
            {
                field: getattr(parsed_params, field)
                for field in ("admin_key", "submit_key")
                if field in present
            },
            context,
            client,
            mirrornode_service,
        )

        return UpdateTopicParametersNormalised(topic_id=topic_id, **updates, **keys)

    @staticmethod
    def normalise_delete_topic(
        params: DeleteTopicParameters,
    ) -> DeleteTopicParametersNormalised:
        """Normalise delete topic parameters.

        Raises:
            ValidationError: If ``topic_id`` is not a native ``0.0.x`` id.
        """
        parsed_params: DeleteTopicParameters = cast(
            DeleteTopicParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, DeleteTopicParameters
            ),
        )

        if not AccountResolver.is_hedera_address(parsed_params.topic_id):
            raise ValidationError("Topic ID must be a Hedera address")

        return DeleteTopicParametersNormalised(
            topic_id=HederaParameterNormaliser.parse_entity_id(
                TopicId, parsed_params.topic_id, "topic_id"
            )
        )

    @staticmethod
    async def normalise_submit_topic_message(
        params: SubmitTopicMessageParameters,
        context: Context,
        client: Client,
    ) -> SubmitTopicMessageParametersNormalised:
        parsed_params: SubmitTopicMessageParameters = cast(
            SubmitTopicMessageParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, SubmitTopicMessageParameters
            ),
        )
        return SubmitTopicMessageParametersNormalised(
            topic_id=HederaParameterNormaliser.parse_entity_id(
                TopicId, parsed_params.topic_id, "topic_id"
            ),
            message=parsed_params.message,
            transaction_memo=parsed_params.transaction_memo,
            scheduling_params=await HederaParameterNormaliser._scheduling_params_for(
                parsed_params, context, client
            ),
        )

    @staticmethod
    def normalise_get_topic_info(
        params: GetTopicInfoParameters,
    ) -> GetTopicInfoParameters:
        return cast(
            GetTopicInfoParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, GetTopicInfoParameters
            ),
        )

    @staticmethod
    def normalise_get_topic_messages(
        params: TopicMessagesQueryParameters,
    ) -> TopicMessagesQueryParametersNormalised:
        """Convert the optional time window to mirror node ``seconds.nanos`` bounds."""
        parsed_params: TopicMessagesQueryParameters = cast(
            TopicMessagesQueryParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, TopicMessagesQueryParameters
            ),
        )
        if (
            parsed_params.start_time
            and parsed_params.end_time
            and _as_utc(parsed_params.start_time) > _as_utc(parsed_params.end_time)
        ):
            raise ValidationError("start_time must not be after end_time")

        return TopicMessagesQueryParametersNormalised(
            topic_id=parsed_params.topic_id,
            lower_timestamp=_to_mirrornode_timestamp(parsed_params.start_time),
            upper_timestamp=_to_mirrornode_timestamp(parsed_params.end_time),
            limit=parsed_params.limit or DEFAULT_TOPIC_MESSAGES_LIMIT,
        )

    # ------------------------------------------------------------------
    # EVM
    # ------------------------------------------------------------------

    @staticmethod
    async def normalise_create_erc20_params(
        params: CreateERC20Parameters,
        factory_address: str,
        factory_abi: Sequence[Dict[str, Any]],
        factory_contract_function_name: str,
        context: Context,
        client: Client,
    ) -> ContractExecuteTransactionParametersNormalised:
        """Normalise ERC20 creation parameters into a factory contract call.

        Args:
            params: Raw ERC20 creation parameters.
            factory_address: The ``0.0.x`` id of the ERC20 factory contract.
            factory_abi: ABI of the factory contract.
            factory_contract_function_name: Function to invoke (``deployToken``).
            context: Application context.
            client: Active ledger client.

        Returns:
            ContractExecuteTransactionParametersNormalised: Call ready for execution.
        """
        parsed_params: CreateERC20Parameters = cast(
            CreateERC20Parameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, CreateERC20Parameters
            ),
        )

        function_parameters = HederaParameterNormaliser.encode_function_call(
            factory_abi,
            factory_contract_function_name,
            [
                parsed_params.token_name,
                parsed_params.token_symbol,
                parsed_params.decimals,
                parsed_params.initial_supply,
            ],
        )

        return ContractExecuteTransactionParametersNormalised(
            contract_id=ContractId.from_string(factory_address),
            function_parameters=function_parameters,
            gas=ERC_FACTORY_GAS,
            scheduling_params=await HederaParameterNormaliser._scheduling_params_for(
                parsed_params, context, client
            ),
        )

    @staticmethod
    async def normalise_create_erc721_params(
        params: CreateERC721Parameters,
        factory_address: str,
        factory_abi: Sequence[Dict[str, Any]],
        factory_contract_function_name: str,
        context: Context,
        client: Client,
    ) -> ContractExecuteTransactionParametersNormalised:
        parsed_params: CreateERC721Parameters = cast(
            CreateERC721Parameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, CreateERC721Parameters
            ),
        )

        function_parameters = HederaParameterNormaliser.encode_function_call(
            factory_abi,
            factory_contract_function_name,
            [parsed_params.token_name, parsed_params.token_symbol, parsed_params.base_uri],
        )

        return ContractExecuteTransactionParametersNormalised(
            contract_id=ContractId.from_string(factory_address),
            function_parameters=function_parameters,
            gas=ERC_FACTORY_GAS,
            scheduling_params=await HederaParameterNormaliser._scheduling_params_for(
                parsed_params, context, client
            ),
        )

    @staticmethod
    async def normalise_transfer_erc20_params(
        params: TransferERC20Parameters,
        abi: Sequence[Dict[str, Any]],
        function_name: str,
        context: Context,
        client: Client,
        mirrornode_service: IHederaMirrornodeService,
    ) -> ContractExecuteTransactionParametersNormalised:
        """Encode ``transfer(recipient, amount)`` against the token contract.

        The recipient may be a native id (resolved to its EVM address) or an EVM
        address; the contract may be a native id or an EVM address.
        """
        parsed_params: TransferERC20Parameters = cast(
            TransferERC20Parameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, TransferERC20Parameters
            ),
        )

        recipient_address = await HederaParameterNormaliser.resolve_evm_address(
            parsed_params.recipient_address, mirrornode_service
        )
        contract_id = await HederaParameterNormaliser.resolve_contract_id(
            parsed_params.contract_id, mirrornode_service
        )

        return ContractExecuteTransactionParametersNormalised(
            contract_id=contract_id,
            function_parameters=HederaParameterNormaliser.encode_function_call(
                abi, function_name, [recipient_address, parsed_params.amount]
            ),
            gas=ERC_CALL_GAS,
            scheduling_params=await HederaParameterNormaliser._scheduling_params_for(
                parsed_params, context, client
            ),
        )

    @staticmethod
    async def normalise_transfer_erc721_params(
        params: TransferERC721Parameters,
        abi: Sequence[Dict[str, Any]],
        function_name: str,
        context: Context,
        client: Client,
        mirrornode_service: IHederaMirrornodeService,
    ) -> ContractExecuteTransactionParametersNormalised:
        """Encode ``transferFrom(from, to, token_id)``; ``from`` defaults to the default account."""
        parsed_params: TransferERC721Parameters = cast(
            TransferERC721Parameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, TransferERC721Parameters
            ),
        )

        from_address = await HederaParameterNormaliser.resolve_evm_address(
            AccountResolver.resolve_account(parsed_params.from_address, context, client),
            mirrornode_service,
        )
        to_address = await HederaParameterNormaliser.resolve_evm_address(
            parsed_params.to_address, mirrornode_service
        )
        contract_id = await HederaParameterNormaliser.resolve_contract_id(
            parsed_params.contract_id, mirrornode_service
        )

        return ContractExecuteTransactionParametersNormalised(
            contract_id=contract_id,
            function_parameters=HederaParameterNormaliser.encode_function_call(
                abi, function_name, [from_address, to_address, parsed_params.token_id]
            ),
            gas=ERC_CALL_GAS,
            scheduling_params=await HederaParameterNormaliser._scheduling_params_for(
                parsed_params, context, client
            ),
        )

    @staticmethod
    async def normalise_mint_erc721_params(
        params: MintERC721Parameters,
        abi: Sequence[Dict[str, Any]],
        function_name: str,
        context: Context,
        client: Client,
        mirrornode_service: IHederaMirrornodeService,
    ) -> ContractExecuteTransactionParametersNormalised:
        parsed_params: MintERC721Parameters = cast(
            MintERC721Parameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, MintERC721Parameters
            ),
        )

        to_address = await HederaParameterNormaliser.resolve_evm_address(
            AccountResolver.resolve_account(parsed_params.to_address, context, client),
            mirrornode_service,
        )
        contract_id = await HederaParameterNormaliser.resolve_contract_id(
            parsed_params.contract_id, mirrornode_service
        )

        return ContractExecuteTransactionParametersNormalised(
            contract_id=contract_id,
            function_parameters=HederaParameterNormaliser.encode_function_call(
                abi, function_name, [to_address]
            ),
            gas=ERC_CALL_GAS,
            scheduling_params=await HederaParameterNormaliser._scheduling_params_for(
                parsed_params, context, client
            ),
        )

    @staticmethod
    def normalise_get_contract_info(
        params: ContractInfoQueryParameters,
    ) -> ContractInfoQueryParameters:
        return cast(
            ContractInfoQueryParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, ContractInfoQueryParameters
            ),
        )

    # ------------------------------------------------------------------
    # Misc / transactions
    # ------------------------------------------------------------------

    @staticmethod
    def normalise_get_exchange_rate(
        params: ExchangeRateQueryParameters,
    ) -> ExchangeRateQueryParameters:
        return cast(
            ExchangeRateQueryParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, ExchangeRateQueryParameters
            ),
        )

    @staticmethod
    def normalise_get_transaction_record_params(
        params: TransactionRecordQueryParameters,
    ) -> TransactionRecordQueryParametersNormalised:
        """Normalise transaction record query parameters.

        Transaction IDs in SDK style (``0.0.4177806@1755169980.051721264``) are
        converted to mirror node style (``0.0.4177806-1755169980-051721264``);
        mirror node style ids are kept as-is.

        Raises:
            ValidationError: If transaction_id is missing or has an invalid format.
        """
        parsed_params: TransactionRecordQueryParameters = cast(
            TransactionRecordQueryParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, TransactionRecordQueryParameters
            ),
        )

        raw_id = parsed_params.transaction_id.strip()
        if not raw_id:
            raise ValidationError("transaction_id is required")

        if _MIRROR_NODE_TX_ID_REGEX.match(raw_id):
            transaction_id = raw_id
        else:
            match = _SDK_TX_ID_REGEX.match(raw_id)
            if not match:
                raise ValidationError(f"Invalid transactionId format: {raw_id}")
            account_id, seconds, nanos = match.groups()
            transaction_id = f"{account_id}-{seconds}-{nanos}"

        return TransactionRecordQueryParametersNormalised(
            transaction_id=transaction_id,
            nonce=parsed_params.nonce,
        )


def _as_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def _to_mirrornode_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    value = _as_utc(value)
    return f"{int(value.timestamp())}.{value.microsecond * 1000:09d}"
