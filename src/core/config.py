"""Runtime configuration model for lvdkit.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Literal, cast

from core.constants import DEFAULT_ENDIAN, DEFAULT_MAX_ELEMENT_COUNT, SUPPORTED_ENDIANS
from core.errors import LvdConfigError

Endian = Literal["big", "little"]


@dataclass(frozen=True)
class LvdConfig:
    """Validated runtime configuration.

    Attributes:
        endian: Byte order used for binary streams unless overridden.
        max_element_count: Upper bound on any declared array count.
    """

    endian: Endian
    max_element_count: int

    @classmethod
    def from_env(cls) -> "LvdConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            LvdConfigError: If environment values are invalid.
        """
        endian = parse_endian(os.getenv("LVD_ENDIAN", DEFAULT_ENDIAN), "LVD_ENDIAN")
        max_element_count = _parse_max_element_count(
            os.getenv("LVD_MAX_ELEMENT_COUNT", str(DEFAULT_MAX_ELEMENT_COUNT))
        )
        return cls(endian=endian, max_element_count=max_element_count)


def parse_endian(raw_value: str, source: str) -> Endian:
    """Parse a byte order name.

    Args:
        raw_value: Raw byte order string.
        source: Name of the setting, used in error messages.

    Returns:
        Normalized byte order.

    Raises:
        LvdConfigError: If value is not a supported byte order.
    """
    normalized = raw_value.strip().lower()
    if normalized not in SUPPORTED_ENDIANS:
        raise LvdConfigError(
            f"Invalid {source} value: expected one of {SUPPORTED_ENDIANS}, "
            f"got '{raw_value}'. Set {source} to 'big' or 'little'."
        )
    return cast(Endian, normalized)


def _parse_max_element_count(raw_value: str) -> int:
    """Parse the maximum element count environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed positive integer.

    Raises:
        LvdConfigError: If value is not a positive integer.
    """
    try:
        value = int(raw_value)
    except ValueError as error:
        raise LvdConfigError(
            "Invalid LVD_MAX_ELEMENT_COUNT value: "
            f"expected integer, got '{raw_value}'. "
            "Set LVD_MAX_ELEMENT_COUNT to a numeric value."
        ) from error
    if value <= 0:
        raise LvdConfigError(
            f"Invalid LVD_MAX_ELEMENT_COUNT value: expected a positive integer, got {value}."
        )
    return value
