"""
Models Module

Shared type aliases and fixed-width integer helpers for permission values.

Permission values follow signed 32-bit two's complement semantics. Integers
outside that range are not representable: the validator rejects them, while
aggregates (OR, sum) and the role view wrap into the range instead of growing
or raising.
"""

from typing import Dict, Set

from . import config

CapabilityName = str
CapabilityHexUnitValue = int
CapabilityDescriptor = Dict[CapabilityName, CapabilityHexUnitValue]
CapabilityHexValue = int
CapabilityHexUnitSet = Set[CapabilityHexUnitValue]
CapabilityNameSet = Set[CapabilityName]

CAPABILITY_BITS = config.CAPABILITY_BITS
MAX_CAPABILITIES = config.MAX_CAPABILITIES

_MODULUS = 1 << CAPABILITY_BITS
_SIGN_BIT = 1 << (CAPABILITY_BITS - 1)

MIN_HEX_VALUE = -_SIGN_BIT
MAX_HEX_VALUE = _SIGN_BIT - 1


def in_range(value: int) -> bool:
    """Checks that a value is representable without wrapping."""
    return MIN_HEX_VALUE <= value <= MAX_HEX_VALUE


def to_signed(value: int) -> int:
    """
    Wrap an arbitrary integer into the signed permission value range.

    Args:
        value: Any integer

    Returns:
        int: The two's complement value in [MIN_HEX_VALUE, MAX_HEX_VALUE]
    """
    value &= _MODULUS - 1
    if value & _SIGN_BIT:
        value -= _MODULUS
    return value


def format_binary(value: int) -> str:
    """Render a value as a 0b-prefixed string of its unsigned 32-bit pattern."""
    return bin(value & (_MODULUS - 1))


def format_hex(value: int) -> str:
    """Render a value as a 0x-prefixed string of its unsigned 32-bit pattern."""
    return hex(value & (_MODULUS - 1))
