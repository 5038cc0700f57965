"""
Descriptor Handler Module

Caller-side helpers for building capability descriptors and turning
permission names into values and back.

Usage:
    from permission_translation.DescriptorHandler import DescriptorHandler

    handler = DescriptorHandler.from_keys(["read", "write", "admin"])
    value = handler.calculate("read", "admin")  # 5
    handler.decode(value)["permissions"]        # ["admin", "read"]

Descriptors can also be loaded from a YAML file shaped either as a mapping:

    read: 0x1
    write: 0x2

or as a list of permission records:

    permissions:
      - name: read
        bit: 0
      - name: write
        value: 2
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

import yaml

from .CheckHandler import get_max_hex_value_descriptor, get_sum_hex_value_descriptor, is_valid_hex
from .Models import (
    CAPABILITY_BITS,
    MAX_CAPABILITIES,
    CapabilityDescriptor,
    CapabilityHexValue,
    format_binary,
    format_hex,
    to_signed,
)
from .RoleCapability import RoleCapability


class DescriptorHandler:
    """
    Holds a capability descriptor and offers name/value conversions over it.
    """

    def __init__(self, descriptor: Mapping[str, int], logger=None):
        """
        Initialize the handler with a snapshot of the descriptor.

        Args:
            descriptor: Mapping of capability name to unit value
            logger: Optional logger instance. If not provided, creates its own.
        """
        if logger is None:
            self.logger = logging.getLogger("permission_translation.descriptorhandler")
        else:
            self.logger = logger.getChild("descriptorhandler")

        self.descriptor: CapabilityDescriptor = dict(descriptor)

        self.logger.debug("DescriptorHandler initialized with %d capabilities", len(self.descriptor))

    @classmethod
    def from_keys(cls, keys: List[str], logger=None) -> "DescriptorHandler":
        """
        Build a descriptor where each key's bit position is its list index.

        Args:
            keys: Capability names in bit order
            logger: Optional logger instance

        Raises:
            ValueError: If there are too many keys or a key repeats.
        """
        if len(keys) > MAX_CAPABILITIES:
            raise ValueError(
                f"Cannot assign {len(keys)} keys: at most {MAX_CAPABILITIES} "
                "single-bit capabilities fit in a permission value."
            )
        if len(set(keys)) != len(keys):
            raise ValueError("Duplicate keys are not allowed.")

        return cls({key: 1 << index for index, key in enumerate(keys)}, logger=logger)

    @classmethod
    def from_permissions(cls, records: Iterable[Mapping[str, Any]], logger=None) -> "DescriptorHandler":
        """
        Build a descriptor from permission records.

        Each record needs a "name" and either an explicit "value" or a "bit"
        position. "value" wins when both are present.

        Raises:
            ValueError: If a record is malformed.
        """
        descriptor: Dict[str, int] = {}
        for record in records:
            if not isinstance(record, Mapping):
                raise ValueError(f"Invalid permission record: {record!r}")

            name = record.get("name")
            if not isinstance(name, str) or not name:
                raise ValueError(f"Permission record without a name: {record!r}")

            value = record.get("value")
            if value is None:
                bit = record.get("bit")
                if not isinstance(bit, int) or isinstance(bit, bool) or not 0 <= bit < CAPABILITY_BITS:
                    raise ValueError(f"Permission '{name}' needs a value or a valid bit position")
                value = to_signed(1 << bit)
            elif not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"Permission '{name}' has a non-integer value: {value!r}")

            descriptor[name] = value

        return cls(descriptor, logger=logger)

    @classmethod
    def from_yaml(cls, path: str, logger=None) -> "DescriptorHandler":
        """
        Load a descriptor from a YAML file.

        Args:
            path: Path of the YAML document

        Raises:
            ValueError: If the document has neither a name/value mapping nor a
            "permissions" list, or a capability name is not a string.
            OSError: If the file cannot be read.
        """
        with open(path, "r", encoding="utf-8") as f:
            document = yaml.safe_load(f)

        if isinstance(document, Mapping) and "permissions" in document:
            permissions = document["permissions"]
            if not isinstance(permissions, list):
                raise ValueError(f"'permissions' in {path} must be a list")
            return cls.from_permissions(permissions, logger=logger)

        if isinstance(document, Mapping):
            for name, value in document.items():
                if not isinstance(name, str) or not name:
                    raise ValueError(f"Capability name {name!r} in {path} must be a non-empty string")
                if not isinstance(value, int) or isinstance(value, bool):
                    raise ValueError(f"Capability '{name}' in {path} has a non-integer value")
            return cls(dict(document), logger=logger)

        if document is None:
            return cls({}, logger=logger)

        raise ValueError(f"Unsupported descriptor document in {path}")

    @property
    def max_value(self) -> CapabilityHexValue:
        return get_max_hex_value_descriptor(self.descriptor)

    @property
    def sum_value(self) -> CapabilityHexValue:
        return get_sum_hex_value_descriptor(self.descriptor)

    def is_valid(self, value: CapabilityHexValue) -> bool:
        return is_valid_hex(value, self.descriptor)

    def role(self, value: CapabilityHexValue) -> RoleCapability:
        return RoleCapability(self.descriptor, value, logger=self.logger)

    def get_value(self, name: str) -> int:
        """
        Returns the declared unit value of a capability.

        Raises:
            KeyError: If the capability is not in the descriptor.
        """
        if name not in self.descriptor:
            raise KeyError(f"Invalid key: {name}")
        return self.descriptor[name]

    def calculate(self, *names: Optional[str]) -> CapabilityHexValue:
        """
        Combines capability names into one permission value.

        Args:
            *names: Capability names. Empty or None names are skipped.

        Returns:
            int: The OR of the named unit values.

        Raises:
            KeyError: If any name is not in the descriptor.
        """
        value = 0
        for name in names:
            if name is None or name == "":
                continue
            value |= self.get_value(name)
        return value

    def decode(self, value: CapabilityHexValue) -> Dict[str, Any]:
        """
        Breaks a permission value down into the capabilities it grants.

        Returns:
            dict: The wrapped bitmap, its validity, the sorted granted names,
            binary and hexadecimal renderings, and a per-capability breakdown.
        """
        role = self.role(value)
        names = sorted(role.to_name_set())

        return {
            "bitmap": role.hex_value,
            "valid": role.is_valid(),
            "permissions": names,
            "binary": format_binary(role.hex_value),
            "hexadecimal": format_hex(role.hex_value),
            "breakdown": [{"name": name, "value": self.descriptor[name]} for name in names],
        }
