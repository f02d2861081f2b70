"""Core constants used across lvdkit modules.

This module centralizes wire constants and runtime defaults.
Keeping values here avoids magic literals in codec logic.
"""

from __future__ import annotations

DEFAULT_ENDIAN = "big"
SUPPORTED_ENDIANS = ("big", "little")
DEFAULT_MAX_ELEMENT_COUNT = 1_000_000

LVD_SIGNATURE_MAGIC = b"LVD1"
LVD_SIGNATURE_VERSION = 1
LVD_HEADER_CONSTANT = 1
LVD_HEADER_SIZE = 4
LVD_LATEST_VERSION = 13

TAG_STRING_LENGTH = 7
TAG_LETTER_COUNT = 3
TAG_DIGIT_COUNT = 4
TAG_NUMBER_MODULUS = 10000

FIXED_STRING_ENCODING = "utf-8"

LVD_FILE_EXTENSION = ".lvd"
YAML_FILE_EXTENSIONS = (".yaml", ".yml")
DEFAULT_YAML_EXTENSION = ".yaml"
