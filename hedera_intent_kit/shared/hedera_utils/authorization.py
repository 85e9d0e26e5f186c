"""Client-side permission checks for token and topic updates.

The ledger itself rejects an update signed by the wrong admin key, or one that
sets a key category the entity was created without. Both conditions are
checked here against mirror node state so the caller gets a precise error
before a transaction is built or paid for.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional

from hiero_sdk_python import PublicKey

from hedera_intent_kit.shared.errors import AuthorizationError, NotFoundError
from hedera_intent_kit.shared.hedera_utils.keys import (
    parse_public_key,
    public_key_to_raw_hex,
)
from hedera_intent_kit.shared.hedera_utils.mirrornode.hedera_mirrornode_service_interface import (
    IHederaMirrornodeService,
)
from hedera_intent_kit.shared.parameter_schemas import (
    UpdateTokenParametersNormalised,
    UpdateTopicParametersNormalised,
)

logger = logging.getLogger(__name__)

TOKEN_KEY_NAMES: Dict[str, str] = {
    "admin_key": "adminKey",
    "kyc_key": "kycKey",
    "freeze_key": "freezeKey",
    "wipe_key": "wipeKey",
    "supply_key": "supplyKey",
    "fee_schedule_key": "feeScheduleKey",
    "pause_key": "pauseKey",
    "metadata_key": "metadataKey",
}

TOPIC_KEY_NAMES: Dict[str, str] = {
    "admin_key": "adminKey",
    "submit_key": "submitKey",
}


@dataclass(frozen=True)
class EntityKeySnapshot:
    """Key category -> raw on-chain key string (``None`` when absent)."""

    entity: str
    keys: Mapping[str, Optional[str]] = field(default_factory=dict)

    @classmethod
    def from_mirrornode(
        cls,
        entity: str,
        info: Optional[Mapping[str, Any]],
        categories: Iterable[str],
    ) -> Optional["EntityKeySnapshot"]:
        if not info:
            return None
        keys: Dict[str, Optional[str]] = {}
        for category in categories:
            key_info = info.get(category)
            keys[category] = key_info.get("key") if key_info else None
        return cls(entity=entity, keys=keys)

    def get(self, category: str) -> Optional[str]:
        return self.keys.get(category)


def _raw_key(key: str) -> str:
    try:
        return public_key_to_raw_hex(parse_public_key(key))
    except ValueError:
        return key.lower()


class AuthorizationValidator:
    """Rejects updates the caller's default key cannot sign, before building."""

    @staticmethod
    async def validate_token_update(
        params: UpdateTokenParametersNormalised,
        mirrornode_service: IHederaMirrornodeService,
        user_public_key: PublicKey,
    ) -> None:
        """Check an update-token request against the token's current keys.

        Args:
            params: Normalised update parameters; only keys that were set are checked.
            mirrornode_service: Source of the token's on-chain key state.
            user_public_key: The caller's resolved default public key.

        Raises:
            NotFoundError: If the mirror node has no record of the token.
            AuthorizationError: If the token is immutable, the admin key does
                not match, or a key category absent on chain is being set.
        """
        info = await mirrornode_service.get_token_info(str(params.token_id))
        snapshot = EntityKeySnapshot.from_mirrornode(
            "token", info, TOKEN_KEY_NAMES.keys()
        )
        requested = [
            name
            for name in TOKEN_KEY_NAMES
            if getattr(params.token_keys, name, None) is not None
        ]
        AuthorizationValidator._check(
            snapshot, "token", user_public_key, requested, TOKEN_KEY_NAMES
        )

    @staticmethod
    async def validate_topic_update(
        params: UpdateTopicParametersNormalised,
        mirrornode_service: IHederaMirrornodeService,
        user_public_key: PublicKey,
    ) -> None:
        """Same checks as ``validate_token_update``, for topics (admin and submit keys)."""
        info = await mirrornode_service.get_topic_info(str(params.topic_id))
        snapshot = EntityKeySnapshot.from_mirrornode(
            "topic", info, TOPIC_KEY_NAMES.keys()
        )
        requested = [
            name for name in TOPIC_KEY_NAMES if getattr(params, name) is not None
        ]
        AuthorizationValidator._check(
            snapshot, "topic", user_public_key, requested, TOPIC_KEY_NAMES
        )

    @staticmethod
    def _check(
        snapshot: Optional[EntityKeySnapshot],
        entity: str,
        user_public_key: PublicKey,
        requested_keys: Iterable[str],
        key_names: Mapping[str, str],
    ) -> None:
        label = entity.capitalize()
        if snapshot is None:
            raise NotFoundError(f"{label} not found")

        admin_key = snapshot.get("admin_key")
        if not admin_key:
            raise AuthorizationError(
                f"{label} does not have an admin key. It cannot be updated."
            )

        user_key = public_key_to_raw_hex(user_public_key)
        if _raw_key(admin_key) != user_key:
            logger.warning(
                "Admin key mismatch for %s update: on-chain=%s caller=%s",
                entity,
                admin_key,
                user_key,
            )
            raise AuthorizationError(
                f"You do not have permission to update this {entity}. "
                "The adminKey does not match your public key."
            )

        for name in requested_keys:
            if not snapshot.get(name):
                key_name = key_names[name]
                raise AuthorizationError(
                    f"Cannot update {key_name}: {entity} was created without a {key_name}"
                )
