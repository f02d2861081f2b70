"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import LvdConfig, parse_endian
from core.constants import DEFAULT_MAX_ELEMENT_COUNT
from core.errors import LvdConfigError


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should default to big endian and the standard count limit."""
    monkeypatch.delenv("LVD_ENDIAN", raising=False)
    monkeypatch.delenv("LVD_MAX_ELEMENT_COUNT", raising=False)

    config = LvdConfig.from_env()

    assert config == LvdConfig(endian="big", max_element_count=DEFAULT_MAX_ELEMENT_COUNT)


def test_from_env_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should normalize environment overrides."""
    monkeypatch.setenv("LVD_ENDIAN", " Little ")
    monkeypatch.setenv("LVD_MAX_ELEMENT_COUNT", "64")

    config = LvdConfig.from_env()

    assert (config.endian, config.max_element_count) == ("little", 64)


def test_from_env_raises_for_invalid_endian(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unknown byte orders with a hint."""
    monkeypatch.setenv("LVD_ENDIAN", "middle")

    with pytest.raises(LvdConfigError, match="LVD_ENDIAN"):
        LvdConfig.from_env()


@pytest.mark.parametrize("raw_value", ["many", "0", "-3"])
def test_from_env_raises_for_invalid_count(monkeypatch: pytest.MonkeyPatch, raw_value: str) -> None:
    """Config should fail for non-positive or non-numeric limits."""
    monkeypatch.setenv("LVD_MAX_ELEMENT_COUNT", raw_value)

    with pytest.raises(LvdConfigError):
        LvdConfig.from_env()


def test_parse_endian_names_source() -> None:
    """Errors should name the setting that carried the bad value."""
    with pytest.raises(LvdConfigError, match="--endian"):
        parse_endian("native", "--endian")
