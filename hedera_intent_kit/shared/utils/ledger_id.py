from enum import Enum


class LedgerId(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"
    PREVIEWNET = "previewnet"
    LOCAL = "local"


def ledger_id_from_network(network) -> LedgerId:
    """Map a network name, a hiero ``Network`` or a ``Client`` to a LedgerId.

    A ``Client`` exposes its ``Network`` as ``client.network``, which in turn
    exposes the name as ``network.network``.

    Raises:
        ValueError: If the network name is not recognised.
    """
    value = network
    for _ in range(2):
        if isinstance(value, (str, LedgerId)):
            break
        value = getattr(value, "network", value)
    if isinstance(value, LedgerId):
        return value
    name = str(value).lower()
    if name in ("local", "localhost", "solo"):
        return LedgerId.LOCAL
    try:
        return LedgerId(name)
    except ValueError:
        raise ValueError(f"Unsupported network: {name}") from None
