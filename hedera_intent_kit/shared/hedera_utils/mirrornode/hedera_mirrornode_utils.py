from typing import Any, Mapping, Optional, Union

from hedera_intent_kit.shared.hedera_utils.mirrornode.hedera_mirrornode_service_default_impl import (
    HederaMirrornodeServiceDefaultImpl,
)
from hedera_intent_kit.shared.hedera_utils.mirrornode.hedera_mirrornode_service_interface import (
    IHederaMirrornodeService,
)
from hedera_intent_kit.shared.utils.ledger_id import LedgerId, ledger_id_from_network


def get_mirrornode_service(
    mirrornode_service: Optional[IHederaMirrornodeService],
    network: Union[LedgerId, Any],
    base_urls: Optional[Mapping[str, str]] = None,
) -> IHederaMirrornodeService:
    """Return the injected service, or build the default HTTP one.

    Args:
        mirrornode_service: Service injected through the context, if any.
        network: A LedgerId, or a ``Client``/``Network`` to derive it from. It is
            only resolved when no service was injected.
        base_urls: Optional per-ledger mirror node URL overrides.
    """
    if mirrornode_service is not None:
        return mirrornode_service
    return HederaMirrornodeServiceDefaultImpl(
        ledger_id_from_network(network), base_urls=base_urls
    )
