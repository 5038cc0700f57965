"""
Permission Translation Package

Translates integer permission bitmasks into named capabilities:
- CheckHandler: validation of permission values against a descriptor
- RoleCapability: decomposition of one permission value
- DescriptorHandler: building descriptors and converting names to values
- log_handler: logging setup
"""

from .CheckHandler import (
    get_max_hex_value_descriptor,
    get_sum_hex_value_descriptor,
    is_valid,
    is_valid_hex,
    max_value,
    sum_value,
)
from .config import APP_VERSION as __version__
from .DescriptorHandler import DescriptorHandler
from .log_handler import LogManager, setup_logging
from .Models import (
    CAPABILITY_BITS,
    MAX_CAPABILITIES,
    MAX_HEX_VALUE,
    MIN_HEX_VALUE,
    CapabilityDescriptor,
    CapabilityHexUnitSet,
    CapabilityHexUnitValue,
    CapabilityHexValue,
    CapabilityName,
    CapabilityNameSet,
    in_range,
    to_signed,
)
from .RoleCapability import RoleCapability

__all__ = [
    "is_valid_hex",
    "get_max_hex_value_descriptor",
    "get_sum_hex_value_descriptor",
    "is_valid",
    "max_value",
    "sum_value",
    "RoleCapability",
    "DescriptorHandler",
    "LogManager",
    "setup_logging",
    "CAPABILITY_BITS",
    "MAX_CAPABILITIES",
    "MAX_HEX_VALUE",
    "MIN_HEX_VALUE",
    "CapabilityDescriptor",
    "CapabilityHexUnitSet",
    "CapabilityHexUnitValue",
    "CapabilityHexValue",
    "CapabilityName",
    "CapabilityNameSet",
    "in_range",
    "to_signed",
    "__version__",
]
