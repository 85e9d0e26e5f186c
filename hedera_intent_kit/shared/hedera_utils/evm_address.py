"""EVM address helpers for Hedera entities.

A long-zero address encodes an entity number in its last 8 bytes with the
first 12 bytes zeroed. ``ContractId`` has no constructor from an EVM address,
so the conversion is done here.
"""

import re

from hiero_sdk_python.contract.contract_id import ContractId

_EVM_ADDRESS_REGEX = re.compile(r"^(0x)?[0-9a-fA-F]{40}$")


def _strip_0x(value: str) -> str:
    return value[2:] if value.startswith("0x") else value


def is_evm_address(value: str) -> bool:
    return bool(_EVM_ADDRESS_REGEX.match(str(value)))


def is_long_zero_address(value: str) -> bool:
    """True for EVM addresses whose first 12 bytes are zero (entity-num aliases)."""
    if not is_evm_address(value):
        return False
    return set(_strip_0x(value)[:24]) == {"0"}


def entity_num_from_long_zero_address(address: str) -> int:
    """Decode the entity number of a long-zero address.

    Raises:
        ValueError: If ``address`` is not a long-zero EVM address.
    """
    if not is_evm_address(address):
        raise ValueError(f"Invalid EVM address: {address}")
    if not is_long_zero_address(address):
        raise ValueError(f"{address} is not a long-zero address")
    return int(_strip_0x(address)[24:], 16)


def long_zero_address_from_num(num: int) -> str:
    return "0x" + num.to_bytes(20, "big").hex()


def contract_id_from_evm_address(
    address: str, shard: int = 0, realm: int = 0
) -> ContractId:
    """Build a ``ContractId`` from a long-zero EVM address."""
    return ContractId(shard, realm, entity_num_from_long_zero_address(address))
