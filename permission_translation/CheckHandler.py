"""
Check Handler Module

Validation functions for permission values against a capability descriptor.

Validation rules, in order:
1. Descriptor integrity: the OR of all unit values must not exceed their sum.
   A descriptor that breaks this (negative values, inconsistent bit
   assignments) is refused outright and every value is rejected.
2. Valid bits only: a value may only set bits defined by the descriptor.
3. Maximum permission: a value may not exceed the descriptor's OR mask.

The integrity rule is a heuristic guard against misconfigured descriptors,
not a security guarantee.

Usage:
    from permission_translation.CheckHandler import is_valid_hex

    descriptor = {"Read": 0x1, "Write": 0x2}
    is_valid_hex(0x3, descriptor)  # True
    is_valid_hex(0x4, descriptor)  # False
"""

import logging
from typing import Mapping, Tuple

from .Models import CapabilityHexValue, in_range, to_signed

logger = logging.getLogger("permission_translation.checks")


def _aggregate(descriptor: Mapping[str, int]) -> Tuple[int, int, bool]:
    mask = 0
    total = 0
    representable = True
    for unit_value in descriptor.values():
        if not in_range(unit_value):
            representable = False
        unit_value = to_signed(unit_value)
        mask |= unit_value
        total = to_signed(total + unit_value)
    return mask, total, representable


def is_valid_hex(value: CapabilityHexValue, descriptor: Mapping[str, int]) -> bool:
    """
    Validates a permission value against a capability descriptor.

    Values and unit values outside the signed 32-bit range are never valid;
    they are rejected as given, not wrapped.

    Args:
        value: The combined permission value to validate
        descriptor: Mapping of capability name to unit value

    Returns:
        bool: True if the value passes every validation rule, False otherwise
    """
    if not in_range(value):
        logger.debug("Rejecting %s: outside the 32-bit permission range", hex(value))
        return False

    mask, total, representable = _aggregate(descriptor)

    if not representable:
        logger.debug("Rejecting %s: descriptor holds a value outside the 32-bit range", hex(value))
        return False

    if mask > total:
        logger.debug(
            "Rejecting %s: descriptor mask %s exceeds sum %s", hex(value), hex(mask), hex(total)
        )
        return False

    if value & ~mask != 0:
        logger.debug("Rejecting %s: bits outside descriptor mask %s", hex(value), hex(mask))
        return False

    if value > mask:
        logger.debug("Rejecting %s: value exceeds descriptor mask %s", hex(value), hex(mask))
        return False

    return True


def get_max_hex_value_descriptor(descriptor: Mapping[str, int]) -> CapabilityHexValue:
    """
    Returns the bitwise OR of every unit value in the descriptor (0 when empty).
    """
    return _aggregate(descriptor)[0]


def get_sum_hex_value_descriptor(descriptor: Mapping[str, int]) -> CapabilityHexValue:
    """
    Returns the wrapped arithmetic sum of every unit value in the descriptor (0 when empty).
    """
    return _aggregate(descriptor)[1]


is_valid = is_valid_hex
max_value = get_max_hex_value_descriptor
sum_value = get_sum_hex_value_descriptor
