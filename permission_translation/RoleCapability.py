"""
Role Capability Module

Pairs a capability descriptor with one permission value and answers which
capabilities that value grants.

Usage:
    from permission_translation.RoleCapability import RoleCapability

    descriptor = {"Read": 0x1, "Write": 0x2, "Execute": 0x4}
    role = RoleCapability(descriptor, 0x5)

    role.to_name_set()            # {"Read", "Execute"}
    role.to_hex_set()             # {0x1, 0x4}
    role.has_capability("Write")  # False
"""

import logging
from types import MappingProxyType
from typing import Mapping

from .CheckHandler import is_valid_hex
from .Models import (
    CapabilityDescriptor,
    CapabilityHexUnitSet,
    CapabilityHexValue,
    CapabilityName,
    CapabilityNameSet,
    to_signed,
)


class RoleCapability:
    """
    Read-only view of the capabilities granted by a permission value.

    The descriptor is copied at construction, so later changes to the
    caller's mapping do not affect the role. Values are wrapped to 32 bits
    for the capability queries. No integrity validation is performed; use
    is_valid() for that, which checks the values exactly as given.
    """

    __slots__ = ("_declared", "_declared_value", "_descriptor", "_hex_value", "logger")

    def __init__(self, descriptor: Mapping[str, int], hex_value: CapabilityHexValue, logger=None):
        """
        Initialize the role.

        Args:
            descriptor: Mapping of capability name to unit value
            hex_value: The combined permission value held by this role
            logger: Optional logger instance. If not provided, creates its own.
        """
        if logger is None:
            self.logger = logging.getLogger("permission_translation.rolecapability")
        else:
            self.logger = logger.getChild("rolecapability")

        self._declared: CapabilityDescriptor = dict(descriptor)
        self._declared_value = hex_value
        self._descriptor: CapabilityDescriptor = {
            name: to_signed(unit_value) for name, unit_value in self._declared.items()
        }
        self._hex_value = to_signed(hex_value)

        self.logger.debug(
            "RoleCapability created for %s over %d capabilities",
            hex(self._hex_value),
            len(self._descriptor),
        )

    @property
    def hex_value(self) -> CapabilityHexValue:
        return self._hex_value

    @property
    def descriptor(self) -> Mapping[str, int]:
        return MappingProxyType(self._descriptor)

    def to_hex_set(self) -> CapabilityHexUnitSet:
        """
        Collects the unit values granted by this role.

        Returns:
            Set[int]: Every descriptor value sharing at least one bit with the
            role's value. Zero-valued entries never match.
        """
        return {
            unit_value for unit_value in self._descriptor.values() if self._hex_value & unit_value
        }

    def to_name_set(self) -> CapabilityNameSet:
        """
        Collects the capability names granted by this role.

        Returns:
            Set[str]: Every descriptor name whose value shares at least one bit
            with the role's value. Zero-valued entries never match.
        """
        return {name for name, unit_value in self._descriptor.items() if self._hex_value & unit_value}

    def has_capability(self, permission_name: CapabilityName) -> bool:
        """
        Checks if a given capability is granted by this role.

        Args:
            permission_name: The capability to check

        Returns:
            bool: True if the capability is granted. Unknown names are never granted.
        """
        unit_value = self._descriptor.get(permission_name)
        if unit_value is None:
            self.logger.debug("Unknown capability: %s", permission_name)
            return False
        return (self._hex_value & unit_value) != 0

    def is_valid(self) -> bool:
        """Checks the role's value against its own descriptor, both unwrapped."""
        return is_valid_hex(self._declared_value, self._declared)

    capability_values = to_hex_set
    capability_names = to_name_set

    def __eq__(self, other):
        if not isinstance(other, RoleCapability):
            return NotImplemented
        return (
            self._declared_value == other._declared_value and self._declared == other._declared
        )

    def __hash__(self):
        return hash((self._declared_value, frozenset(self._declared.items())))

    def __repr__(self):
        return f"RoleCapability(hex_value={hex(self._hex_value)}, capabilities={len(self._descriptor)})"
