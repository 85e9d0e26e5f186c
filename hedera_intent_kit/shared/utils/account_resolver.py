import logging
from typing import Optional

from hiero_sdk_python import Client, PublicKey

from hedera_intent_kit.shared.configuration import AgentMode, Context
from hedera_intent_kit.shared.errors import ResolutionError
from hedera_intent_kit.shared.hedera_utils.keys import parse_public_key
from hedera_intent_kit.shared.hedera_utils.mirrornode import (
    IHederaMirrornodeService,
    get_mirrornode_service,
)

logger = logging.getLogger(__name__)


class AccountResolver:
    """Resolves the caller's default account and public key."""

    @staticmethod
    def get_default_account(context: Context, client: Client) -> str:
        """Return ``context.account_id`` if set, else the client's operator account.

        Raises:
            ResolutionError: If neither is available.
        """
        if context.account_id:
            return context.account_id

        operator_account = getattr(client, "operator_account_id", None)
        if not operator_account:
            raise ResolutionError(
                "No account available: neither context.account_id nor operator account"
            )
        return str(operator_account)

    @staticmethod
    async def get_default_public_key(
        context: Context,
        client: Client,
        mirrornode_service: Optional[IHederaMirrornodeService] = None,
    ) -> PublicKey:
        """Return the public key that ``True`` key flags resolve to.

        In AUTONOMOUS mode this is the operator key, with no I/O. In RETURN_BYTES
        mode the operator only relays bytes, so the default account's key is read
        from the mirror node on every call.

        Raises:
            ResolutionError: If no key can be determined.
        """
        if context.mode == AgentMode.AUTONOMOUS:
            operator_key = getattr(client, "operator_private_key", None)
            if operator_key is None:
                raise ResolutionError("No operator key configured on the client")
            return operator_key.public_key()

        default_account = AccountResolver.get_default_account(context, client)
        service = mirrornode_service or get_mirrornode_service(
            context.mirrornode_service,
            client,
            context.mirrornode_base_urls,
        )
        account = await service.get_account(default_account)
        public_key = (account or {}).get("account_public_key")
        if not public_key:
            raise ResolutionError("No public key available for the default account")

        logger.debug("Resolved public key of %s from mirror node", default_account)
        try:
            return parse_public_key(public_key)
        except ValueError as e:
            raise ResolutionError(
                f"Public key on record for {default_account} is not supported: {e}"
            ) from e

    @staticmethod
    def resolve_account(
        provided_account: Optional[str], context: Context, client: Client
    ) -> str:
        """Resolve an account ID, using the provided account or falling back to the default."""
        return provided_account or AccountResolver.get_default_account(context, client)

    @staticmethod
    def get_default_account_description(context: Context) -> str:
        """Describe which account is used by default, for tool descriptions."""
        if context.mode == AgentMode.RETURN_BYTES and context.account_id:
            return f"user account ({context.account_id})"
        return "operator account"

    @staticmethod
    def is_hedera_address(address: str) -> bool:
        return address.startswith("0.")

    @staticmethod
    async def get_hedera_evm_address(
        address: str, mirrornode_service: IHederaMirrornodeService
    ) -> str:
        """Return the EVM address for a native ``0.0.x`` account; pass others through."""
        if not AccountResolver.is_hedera_address(address):
            return address
        account = await mirrornode_service.get_account(address)
        evm_address = account.get("evm_address")
        if not evm_address:
            raise ResolutionError(f"No EVM address on record for account {address}")
        return evm_address
