"""YAML text form of LVD files.

This module renders decoded files as editable YAML and parses them back.
Field order in the text follows wire order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from core.errors import LvdDependencyError, LvdTextFormatError
from core.logging_config import get_logger
from objects.envelope import LvdFile
from store.payload import lvd_file_from_payload, lvd_file_to_payload

_LOGGER = get_logger(__name__)


def dump_lvd_yaml(lvd_file: LvdFile) -> str:
    """Render a file as YAML text.

    Args:
        lvd_file: Decoded file.

    Returns:
        YAML document.
    """
    yaml = _import_yaml()
    return yaml.safe_dump(
        lvd_file_to_payload(lvd_file),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def load_lvd_yaml(text: str, source: str = "<string>") -> LvdFile:
    """Parse YAML text into a file.

    Args:
        text: YAML document.
        source: Name of the document for error messages.

    Returns:
        Parsed file.

    Raises:
        LvdTextFormatError: If the YAML is malformed or does not fit the layout.
    """
    yaml = _import_yaml()
    try:
        payload = yaml.safe_load(text)
    except yaml.YAMLError as error:
        raise LvdTextFormatError(
            f"Failed to parse YAML at {source}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise LvdTextFormatError(f"YAML document at {source} is empty. Define 'header' and 'lvd'.")
    return lvd_file_from_payload(payload)


def read_yaml_file(path: Path) -> LvdFile:
    """Read a YAML file into a decoded file."""
    yaml_path = Path(path).expanduser()
    lvd_file = load_lvd_yaml(yaml_path.read_text(encoding="utf-8"), source=str(yaml_path))
    _LOGGER.info("lvd_yaml_read", path=str(yaml_path), lvd_version=lvd_file.version)
    return lvd_file


def write_yaml_file(path: Path, lvd_file: LvdFile) -> Path:
    """Write a decoded file as YAML.

    The document is rendered in full before the destination is opened.

    Returns:
        Path written.
    """
    yaml_path = Path(path).expanduser()
    text = dump_lvd_yaml(lvd_file)
    yaml_path.write_text(text, encoding="utf-8")
    _LOGGER.info(
        "lvd_yaml_written",
        path=str(yaml_path),
        lvd_version=lvd_file.version,
        size_bytes=len(text.encode("utf-8")),
    )
    return yaml_path


def _import_yaml() -> Any:
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as error:  # pragma: no cover - dependency failure
        raise LvdDependencyError(
            "YAML conversion requires PyYAML. Install with 'pip install pyyaml'."
        ) from error
    return yaml
