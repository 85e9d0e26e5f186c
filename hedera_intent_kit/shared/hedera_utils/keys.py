"""The tri-state key parameter used by create/update operations.

A key field can be left untouched, set to the caller's default public key, or
set to an explicit key string. Explicit strings are parsed into hiero
``PublicKey`` objects so malformed input fails before a transaction is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Union

from hiero_sdk_python import PublicKey


@dataclass(frozen=True)
class Unset:
    """The key field is not touched."""


@dataclass(frozen=True)
class UseDefault:
    """The key field resolves to the caller's default public key."""


@dataclass(frozen=True)
class Explicit:
    """The key field is set to the given public key string."""

    key: str


KeySpec = Union[Unset, UseDefault, Explicit]

UNSET = Unset()
USE_DEFAULT = UseDefault()


def key_spec_from_raw(raw_value: Union[str, bool, None]) -> KeySpec:
    """Classify a raw key parameter.

    ``True`` means "use my key", a string is an explicit key, and ``False`` or
    ``None`` leave the field untouched.
    """
    if isinstance(raw_value, str):
        return Explicit(raw_value)
    if raw_value is True:
        return USE_DEFAULT
    return UNSET


def parse_public_key(value: str) -> PublicKey:
    """Parse a public key string, trying ED25519 first and then any supported type.

    Raises:
        ValueError: If ``value`` is not a valid public key.
    """
    try:
        return PublicKey.from_string_ed25519(value)
    except Exception:
        pass
    try:
        return PublicKey.from_string(value)
    except Exception:
        raise ValueError(f"Invalid public key: {value}") from None


def public_key_to_raw_hex(key: PublicKey) -> str:
    """Hex of the raw key bytes, the form the mirror node reports."""
    return key.to_bytes_raw().hex()


async def resolve_key_spec(
    spec: KeySpec,
    default_key: Callable[[], Awaitable[PublicKey]],
) -> Optional[PublicKey]:
    """Resolve a KeySpec to a PublicKey, or None when the field is unset.

    ``default_key`` is only awaited for ``UseDefault``.

    Raises:
        ValueError: If an explicit key string is not a valid public key.
    """
    if isinstance(spec, Explicit):
        return parse_public_key(spec.key)
    if isinstance(spec, UseDefault):
        return await default_key()
    return None
