"""Binary LVD file persistence helpers."""

from __future__ import annotations

from pathlib import Path

from core.config import Endian
from core.constants import DEFAULT_ENDIAN, DEFAULT_MAX_ELEMENT_COUNT
from core.logging_config import get_logger
from objects.envelope import LvdFile, decode_lvd_file, encode_lvd_file

_LOGGER = get_logger(__name__)


def read_lvd_file(
    path: Path,
    endian: Endian = DEFAULT_ENDIAN,
    max_element_count: int = DEFAULT_MAX_ELEMENT_COUNT,
) -> LvdFile:
    """Read and decode a binary LVD file.

    Args:
        path: Input file path.
        endian: Byte order of the file.
        max_element_count: Upper bound for any declared array count.

    Returns:
        Decoded file.
    """
    lvd_path = Path(path).expanduser()
    lvd_file = decode_lvd_file(
        lvd_path.read_bytes(), endian=endian, max_element_count=max_element_count
    )
    _LOGGER.info("lvd_file_read", path=str(lvd_path), lvd_version=lvd_file.version)
    return lvd_file


def write_lvd_file(path: Path, lvd_file: LvdFile, endian: Endian = DEFAULT_ENDIAN) -> Path:
    """Encode and write a binary LVD file.

    Encoding completes before the destination is opened, so a failed
    encode never leaves a partial file behind.

    Returns:
        Path written.
    """
    lvd_path = Path(path).expanduser()
    payload = encode_lvd_file(lvd_file, endian=endian)
    lvd_path.write_bytes(payload)
    _LOGGER.info(
        "lvd_file_written",
        path=str(lvd_path),
        lvd_version=lvd_file.version,
        size_bytes=len(payload),
    )
    return lvd_path
