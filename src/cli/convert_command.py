"""Conversion between binary LVD files and YAML text."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from core.config import Endian
from core.constants import (
    DEFAULT_MAX_ELEMENT_COUNT,
    DEFAULT_YAML_EXTENSION,
    LVD_FILE_EXTENSION,
    YAML_FILE_EXTENSIONS,
)
from core.logging_config import get_logger
from store.lvd_file_io import read_lvd_file, write_lvd_file
from store.yaml_io import read_yaml_file, write_yaml_file

_LOGGER = get_logger(__name__)

ConversionDirection = Literal["to_yaml", "to_lvd"]


@dataclass(frozen=True)
class ConversionPlan:
    """Resolved conversion inputs.

    Attributes:
        input_path: Source file.
        output_path: Destination file.
        direction: ``to_yaml`` for binary input, ``to_lvd`` for YAML input.
    """

    input_path: Path
    output_path: Path
    direction: ConversionDirection


def plan_conversion(input_path: str, output_path: str | None) -> ConversionPlan:
    """Infer direction from the input suffix and default the output path.

    A ``.yaml``/``.yml`` input converts to binary next to it with a
    ``.lvd`` suffix. Any other input, including one without a suffix, is
    read as binary and written to ``<input>.yaml``.
    """
    source = Path(input_path)
    if source.suffix.lower() in YAML_FILE_EXTENSIONS:
        default_output = source.with_suffix(LVD_FILE_EXTENSION)
        direction: ConversionDirection = "to_lvd"
    else:
        default_output = Path(f"{source}{DEFAULT_YAML_EXTENSION}")
        direction = "to_yaml"
    target = Path(output_path) if output_path else default_output
    return ConversionPlan(input_path=source, output_path=target, direction=direction)


def run_conversion(
    plan: ConversionPlan,
    endian: Endian,
    max_element_count: int = DEFAULT_MAX_ELEMENT_COUNT,
) -> Path:
    """Execute one conversion.

    Returns:
        Path of the written output.
    """
    if plan.direction == "to_lvd":
        lvd_file = read_yaml_file(plan.input_path)
        written = write_lvd_file(plan.output_path, lvd_file, endian=endian)
    else:
        lvd_file = read_lvd_file(
            plan.input_path, endian=endian, max_element_count=max_element_count
        )
        written = write_yaml_file(plan.output_path, lvd_file)
    _LOGGER.info(
        "lvd_converted",
        input_path=str(plan.input_path),
        output_path=str(written),
        direction=plan.direction,
        endian=endian,
    )
    return written
