from typing import Optional

from hiero_sdk_python import (
    AccountAllowanceApproveTransaction,
    AccountCreateTransaction,
    AccountDeleteTransaction,
    AccountUpdateTransaction,
    ContractExecuteTransaction,
    Duration,
    ScheduleCreateTransaction,
    ScheduleDeleteTransaction,
    ScheduleSignTransaction,
    Timestamp,
    TokenAirdropTransaction,
    TokenAssociateTransaction,
    TokenCreateTransaction,
    TokenDeleteTransaction,
    TokenDissociateTransaction,
    TokenMintTransaction,
    TokenUpdateTransaction,
    TopicCreateTransaction,
    TopicDeleteTransaction,
    TopicMessageSubmitTransaction,
    TopicUpdateTransaction,
    TransferTransaction,
)
from hiero_sdk_python.account.account_update_transaction import AccountUpdateParams
from hiero_sdk_python.schedule.schedule_create_transaction import ScheduleCreateParams
from hiero_sdk_python.tokens.token_create_transaction import TokenKeys
from hiero_sdk_python.transaction.transaction import Transaction

from hedera_intent_kit.shared.parameter_schemas import (
    AirdropFungibleTokenParametersNormalised,
    ApproveHbarAllowanceParametersNormalised,
    AssociateTokenParametersNormalised,
    ContractExecuteTransactionParametersNormalised,
    CreateAccountParametersNormalised,
    CreateFungibleTokenParametersNormalised,
    CreateNonFungibleTokenParametersNormalised,
    CreateTopicParametersNormalised,
    DeleteAccountParametersNormalised,
    DeleteTokenParametersNormalised,
    DeleteTopicParametersNormalised,
    DissociateTokenParametersNormalised,
    MintFungibleTokenParametersNormalised,
    MintNonFungibleTokenParametersNormalised,
    ScheduleDeleteTransactionParametersNormalised,
    SignScheduleTransactionParametersNormalised,
    SubmitTopicMessageParametersNormalised,
    TransferHbarParametersNormalised,
    TransferHbarWithAllowanceParametersNormalised,
    UpdateAccountParametersNormalised,
    UpdateTokenParametersNormalised,
    UpdateTopicParametersNormalised,
)

_TOKEN_UPDATE_FIELDS = (
    "token_name",
    "token_symbol",
    "token_memo",
    "metadata",
    "treasury_account_id",
    "auto_renew_account_id",
)

_TOKEN_UPDATE_KEYS = (
    "admin_key",
    "kyc_key",
    "freeze_key",
    "wipe_key",
    "supply_key",
    "fee_schedule_key",
    "pause_key",
    "metadata_key",
)


class HederaBuilder:
    """Maps normalised parameters onto unsigned hiero transactions.

    Every method is a pure mapping: no I/O, no validation. Mutating transactions
    are wrapped in a ScheduleCreateTransaction when scheduling parameters are
    present.
    """

    @staticmethod
    def maybe_wrap_in_schedule(
        tx: Transaction, scheduling_params: Optional[ScheduleCreateParams] = None
    ) -> Transaction:
        """Wrap a transaction in a schedule if scheduling parameters are provided.

        Args:
            tx: The transaction to wrap.
            scheduling_params (Optional[ScheduleCreateParams]): Optional schedule creation parameters.

        Returns:
            Transaction: Either the original transaction or a ScheduleCreateTransaction.
        """
        if scheduling_params is not None:
            return ScheduleCreateTransaction(
                scheduling_params
            ).set_scheduled_transaction(tx)
        return tx

    @staticmethod
    def _with_memo(tx: Transaction, params) -> Transaction:
        if getattr(params, "transaction_memo", None):
            tx.set_transaction_memo(params.transaction_memo)
        return tx

    # Crypto service

    @staticmethod
    def transfer_hbar(params: TransferHbarParametersNormalised) -> Transaction:
        """Build a TransferTransaction for transferring HBAR.

        Args:
            params: Normalised HBAR transfer parameters.

        Returns:
            Transaction: TransferTransaction, optionally wrapped in a schedule.
        """
        tx = TransferTransaction(hbar_transfers=params.hbar_transfers)
        HederaBuilder._with_memo(tx, params)
        return HederaBuilder.maybe_wrap_in_schedule(
            tx, getattr(params, "scheduling_params", None)
        )

    @staticmethod
    def transfer_hbar_with_allowance(
        params: TransferHbarWithAllowanceParametersNormalised,
    ) -> Transaction:
        """Build a TransferTransaction that debits the owner through an allowance.

        Recipient legs are plain transfers; the owner's debit is an approved transfer.
        """
        tx = TransferTransaction()
        for account_id, amount in params.hbar_transfers.items():
            tx.add_hbar_transfer(account_id, amount)
        for owner_account_id, amount in params.hbar_approved_transfers.items():
            tx.add_approved_hbar_transfer(owner_account_id, amount)
        HederaBuilder._with_memo(tx, params)
        return HederaBuilder.maybe_wrap_in_schedule(
            tx, getattr(params, "scheduling_params", None)
        )

    @staticmethod
    def create_account(params: CreateAccountParametersNormalised) -> Transaction:
        tx = AccountCreateTransaction(
            key=params.key,
            initial_balance=params.initial_balance,
            memo=params.memo,
        )
        if params.max_automatic_token_associations is not None:
            tx.set_max_automatic_token_associations(
                params.max_automatic_token_associations
            )
        return HederaBuilder.maybe_wrap_in_schedule(
            tx, getattr(params, "scheduling_params", None)
        )

    @staticmethod
    def update_account(params: UpdateAccountParametersNormalised) -> Transaction:
        """Build an AccountUpdateTransaction carrying only the fields that were set.

        Args:
            params: Normalised account update parameters.

        Returns:
            Transaction: Transaction optionally wrapped in a schedule.
        """
        account_params = AccountUpdateParams(account_id=params.account_id)
        if params.account_memo is not None:
            account_params.account_memo = params.account_memo
        if params.max_automatic_token_associations is not None:
            account_params.max_automatic_token_associations = (
                params.max_automatic_token_associations
            )
        if params.staked_account_id is not None:
            account_params.staked_account_id = params.staked_account_id
        if params.decline_staking_reward is not None:
            account_params.decline_reward = params.decline_staking_reward
        tx = AccountUpdateTransaction(account_params)
        return HederaBuilder.maybe_wrap_in_schedule(
            tx, getattr(params, "scheduling_params", None)
        )

    @staticmethod
    def delete_account(
        params: DeleteAccountParametersNormalised,
    ) -> AccountDeleteTransaction:
        return AccountDeleteTransaction(
            account_id=params.account_id,
            transfer_account_id=params.transfer_account_id,
        )

    @staticmethod
    def approve_hbar_allowance(
        params: ApproveHbarAllowanceParametersNormalised,
    ) -> Transaction:
        """Build an AccountAllowanceApproveTransaction for HBAR allowances.

        Args:
            params: Normalised HBAR allowance parameters.

        Returns:
            Transaction: AccountAllowanceApproveTransaction, optionally wrapped in a schedule.
        """
        tx = AccountAllowanceApproveTransaction(hbar_allowances=params.hbar_allowances)
        HederaBuilder._with_memo(tx, params)
        return HederaBuilder.maybe_wrap_in_schedule(
            tx, getattr(params, "scheduling_params", None)
        )

    # Token service

    @staticmethod
    def create_fungible_token(
        params: CreateFungibleTokenParametersNormalised,
    ) -> Transaction:
        """Build a TokenCreateTransaction for a fungible token.

        Args:
            params: Normalised parameters for creating a fungible token.

        Returns:
            Transaction: TokenCreateTransaction, optionally wrapped in a schedule.
        """
        tx = TokenCreateTransaction(
            token_params=params.token_params,
            keys=params.keys or TokenKeys(),
        )
        return HederaBuilder.maybe_wrap_in_schedule(
            tx, getattr(params, "scheduling_params", None)
        )

    @staticmethod
    def create_non_fungible_token(
        params: CreateNonFungibleTokenParametersNormalised,
    ) -> Transaction:
        """Build a TokenCreateTransaction for a non-fungible token.

        Args:
            params: Normalised parameters for creating a non-fungible token.

        Returns:
            Transaction: TokenCreateTransaction, optionally wrapped in a schedule.
        """
        tx = TokenCreateTransaction(
            token_params=params.token_params,
            keys=params.keys or TokenKeys(),
        )
        return HederaBuilder.maybe_wrap_in_schedule(
            tx, getattr(params, "scheduling_params", None)
        )

    @staticmethod
    def mint_fungible_token(params: MintFungibleTokenParametersNormalised) -> Transaction:
        tx = TokenMintTransaction(token_id=params.token_id, amount=params.amount)
        return HederaBuilder.maybe_wrap_in_schedule(
            tx, getattr(params, "scheduling_params", None)
        )

    @staticmethod
    def mint_non_fungible_token(
        params: MintNonFungibleTokenParametersNormalised,
    ) -> Transaction:
        tx = TokenMintTransaction(token_id=params.token_id, metadata=params.metadata)
        return HederaBuilder.maybe_wrap_in_schedule(
            tx, getattr(params, "scheduling_params", None)
        )

    @staticmethod
    def associate_token(params: AssociateTokenParametersNormalised) -> Transaction:
        tx = TokenAssociateTransaction(
            account_id=params.account_id, token_ids=params.token_ids
        )
        return HederaBuilder.maybe_wrap_in_schedule(
            tx, getattr(params, "scheduling_params", None)
        )

    @staticmethod
    def dissociate_token(params: DissociateTokenParametersNormalised) -> Transaction:
        """Build a TokenDissociateTransaction.

        Args:
            params: Normalised dissociation parameters.

        Returns:
            Transaction: TokenDissociateTransaction, optionally wrapped in a schedule.
        """
        tx = TokenDissociateTransaction(
            account_id=params.account_id, token_ids=params.token_ids
        )
        HederaBuilder._with_memo(tx, params)
        return HederaBuilder.maybe_wrap_in_schedule(
            tx, getattr(params, "scheduling_params", None)
        )

    @staticmethod
    def update_token(params: UpdateTokenParametersNormalised) -> TokenUpdateTransaction:
        """Build a TokenUpdateTransaction.

        Only properties and keys that are set on ``params`` are applied, each
        through its ``set_<name>`` setter.

        Args:
            params: Normalised token update parameters.

        Returns:
            TokenUpdateTransaction: Transaction ready for submission.
        """
        tx = TokenUpdateTransaction().set_token_id(params.token_id)
        for field in _TOKEN_UPDATE_FIELDS:
            value = getattr(params.token_params, field)
            if value is not None:
                getattr(tx, f"set_{field}")(value)
        for field in _TOKEN_UPDATE_KEYS:
            key = getattr(params.token_keys, field, None)
            if key is not None:
                getattr(tx, f"set_{field}")(key)
        return tx

    @staticmethod
    def delete_token(params: DeleteTokenParametersNormalised) -> TokenDeleteTransaction:
        return TokenDeleteTransaction(token_id=params.token_id)

    @staticmethod
    def airdrop_fungible_token(
        params: AirdropFungibleTokenParametersNormalised,
    ) -> Transaction:
        """Build a TokenAirdropTransaction for fungible tokens.

        Args:
            params: Normalised airdrop parameters.

        Returns:
            Transaction: TokenAirdropTransaction, optionally wrapped in a schedule.
        """
        tx = TokenAirdropTransaction(token_transfers=params.token_transfers)
        HederaBuilder._with_memo(tx, params)
        return HederaBuilder.maybe_wrap_in_schedule(
            tx, getattr(params, "scheduling_params", None)
        )

    # Consensus service

    @staticmethod
    def create_topic(params: CreateTopicParametersNormalised) -> TopicCreateTransaction:
        """Build a TopicCreateTransaction.

        Args:
            params: Normalised topic creation parameters.

        Returns:
            TopicCreateTransaction: Transaction ready for submission.
        """
        tx = TopicCreateTransaction(
            memo=params.memo,
            submit_key=params.submit_key,
            admin_key=params.admin_key,
        )
        if params.auto_renew_account_id is not None:
            tx.set_auto_renew_account(params.auto_renew_account_id)
        HederaBuilder._with_memo(tx, params)
        return tx

    @staticmethod
    def update_topic(params: UpdateTopicParametersNormalised) -> TopicUpdateTransaction:
        """Build a TopicUpdateTransaction from the fields that are set.

        ``auto_renew_period`` is given in seconds and ``expiration_time`` as a datetime.
        """
        fields = {
            "topic_id": params.topic_id,
            "memo": params.memo,
            "admin_key": params.admin_key,
            "submit_key": params.submit_key,
            "auto_renew_account": params.auto_renew_account_id,
            "auto_renew_period": (
                Duration(params.auto_renew_period)
                if params.auto_renew_period is not None
                else None
            ),
            "expiration_time": (
                Timestamp.from_date(params.expiration_time)
                if params.expiration_time is not None
                else None
            ),
        }
        return TopicUpdateTransaction(
            **{name: value for name, value in fields.items() if value is not None}
        )

    @staticmethod
    def delete_topic(params: DeleteTopicParametersNormalised) -> TopicDeleteTransaction:
        return TopicDeleteTransaction(topic_id=params.topic_id)

    @staticmethod
    def submit_topic_message(
        params: SubmitTopicMessageParametersNormalised,
    ) -> Transaction:
        """Build a TopicMessageSubmitTransaction.

        Args:
            params: Normalised topic message parameters.

        Returns:
            Transaction: TopicMessageSubmitTransaction, optionally wrapped in a schedule.
        """
        tx = TopicMessageSubmitTransaction(
            topic_id=params.topic_id, message=params.message
        )
        HederaBuilder._with_memo(tx, params)
        return HederaBuilder.maybe_wrap_in_schedule(
            tx, getattr(params, "scheduling_params", None)
        )

    # Smart contract service

    @staticmethod
    def execute_transaction(
        params: ContractExecuteTransactionParametersNormalised,
    ) -> Transaction:
        """Build a ContractExecuteTransaction.

        Used by every EVM operation, including factory deployments.

        Args:
            params: Normalised contract call (target, gas, encoded call data).

        Returns:
            Transaction: ContractExecuteTransaction, optionally wrapped in a schedule.
        """
        tx = ContractExecuteTransaction(
            contract_id=params.contract_id,
            gas=params.gas,
            function_parameters=params.function_parameters,
        )
        return HederaBuilder.maybe_wrap_in_schedule(
            tx, getattr(params, "scheduling_params", None)
        )

    # Schedule service

    @staticmethod
    def sign_schedule_transaction(
        params: SignScheduleTransactionParametersNormalised,
    ) -> ScheduleSignTransaction:
        return ScheduleSignTransaction(schedule_id=params.schedule_id)

    @staticmethod
    def delete_schedule_transaction(
        params: ScheduleDeleteTransactionParametersNormalised,
    ) -> ScheduleDeleteTransaction:
        return ScheduleDeleteTransaction(schedule_id=params.schedule_id)
