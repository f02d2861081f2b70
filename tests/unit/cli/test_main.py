"""Unit tests for CLI command handling."""

from __future__ import annotations

import runpy
import sys
from pathlib import Path

import pytest

from cli.convert_command import plan_conversion
from cli.main import main
from codec.array import Array
from codec.fixed_string import FixedString56
from objects.envelope import LvdFile, decode_lvd_file, encode_lvd_file
from tests.sample_objects import sample_lvd_file


@pytest.fixture(autouse=True)
def _clear_lvd_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LVD_ENDIAN", raising=False)
    monkeypatch.delenv("LVD_MAX_ELEMENT_COUNT", raising=False)


def test_plan_infers_direction_from_suffix() -> None:
    """YAML inputs convert to binary; anything else converts to YAML."""
    to_lvd = plan_conversion("stage/dam_00.yml", None)
    to_yaml = plan_conversion("stage/dam_00.lvd", None)
    bare = plan_conversion("stage/dam_00", None)

    assert (to_lvd.direction, to_lvd.output_path) == ("to_lvd", Path("stage/dam_00.lvd"))
    assert (to_yaml.direction, to_yaml.output_path) == ("to_yaml", Path("stage/dam_00.lvd.yaml"))
    assert (bare.direction, bare.output_path) == ("to_yaml", Path("stage/dam_00.yaml"))
    assert plan_conversion("a.YAML", "out.bin").output_path == Path("out.bin")


def test_cli_converts_binary_to_yaml_and_back(tmp_path, capsys) -> None:
    """CLI should convert in both directions and print the output path."""
    source = tmp_path / "stage.lvd"
    source.write_bytes(encode_lvd_file(sample_lvd_file()))

    exit_code = main([str(source)])
    yaml_path = tmp_path / "stage.lvd.yaml"
    output = capsys.readouterr().out.strip()

    assert exit_code == 0
    assert output == f"output_path={yaml_path}"

    rebuilt = tmp_path / "rebuilt.lvd"
    assert main([str(yaml_path), str(rebuilt)]) == 0
    assert rebuilt.read_bytes() == source.read_bytes()


def test_cli_endian_option(tmp_path) -> None:
    """The endian option should select the byte order of the binary side."""
    source = tmp_path / "stage.lvd"
    source.write_bytes(encode_lvd_file(LvdFile.empty(8), endian="little"))

    assert main([str(source), "--endian", "little"]) == 0
    assert main([str(tmp_path / "stage.lvd.yaml"), str(tmp_path / "big.lvd")]) == 0
    assert decode_lvd_file((tmp_path / "big.lvd").read_bytes()) == LvdFile.empty(8)


def test_cli_endian_from_environment(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """LVD_ENDIAN should apply when no option is given."""
    monkeypatch.setenv("LVD_ENDIAN", "little")
    source = tmp_path / "stage.lvd"
    source.write_bytes(encode_lvd_file(LvdFile.empty(3), endian="little"))

    assert main([str(source)]) == 0


def test_cli_reports_decode_errors(tmp_path, capsys) -> None:
    """Corrupt input should exit non-zero without writing output."""
    source = tmp_path / "broken.lvd"
    source.write_bytes(b"\x00\x00\x00\x01\x0d\x01LVDX")

    exit_code = main([str(source)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "lvd_error=bad magic" in captured.err
    assert captured.out == ""
    assert not (tmp_path / "broken.lvd.yaml").exists()


def test_cli_reports_missing_input(tmp_path, capsys) -> None:
    """Missing input files should be reported as errors."""
    exit_code = main([str(tmp_path / "missing.yaml")])

    assert exit_code == 1
    assert "lvd_error=" in capsys.readouterr().err
    assert not (tmp_path / "missing.lvd").exists()


def test_cli_reports_invalid_environment(tmp_path, capsys, monkeypatch: pytest.MonkeyPatch) -> None:
    """Invalid configuration should be reported like any other error."""
    monkeypatch.setenv("LVD_MAX_ELEMENT_COUNT", "lots")

    assert main([str(tmp_path / "stage.lvd")]) == 1
    assert "LVD_MAX_ELEMENT_COUNT" in capsys.readouterr().err


def test_module_entry_point_exits_with_main_status(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """``python -m cli`` should exit with the status main returns."""
    source = tmp_path / "stage.lvd"
    source.write_bytes(encode_lvd_file(LvdFile.empty(1)))
    monkeypatch.setattr(sys, "argv", ["lvd", str(source)])

    with pytest.raises(SystemExit) as exit_info:
        runpy.run_module("cli", run_name="__main__")

    assert exit_info.value.code == 0
    assert (tmp_path / "stage.lvd.yaml").is_file()


def test_cli_refuses_lossy_yaml_export(tmp_path, capsys) -> None:
    """Names that are not valid UTF-8 should fail the conversion, not be replaced."""
    lvd = sample_lvd_file().lvd
    point = lvd.start_positions[0]
    meta_info = point.base.meta_info.replace(name=FixedString56(b"\xff" * 20))
    broken = point.replace(base=point.base.replace(meta_info=meta_info))
    source = tmp_path / "stage.lvd"
    source.write_bytes(encode_lvd_file(LvdFile(lvd=lvd.replace(start_positions=Array([broken])))))

    exit_code = main([str(source)])

    assert exit_code == 1
    assert "not valid UTF-8" in capsys.readouterr().err
    assert not (tmp_path / "stage.lvd.yaml").exists()
