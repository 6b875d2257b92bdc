"""CLI parser and command behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from helpgen.cli import _build_parser, main
from tests._fixtures.package_builder import PackageBuilder


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "generate"])
    assert args.verbose is True
    assert args.command == "generate"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["generate", "--verbose"])
    assert args.verbose is True
    assert args.command == "generate"


def test_cli_generate_options() -> None:
    parser = _build_parser()
    args = parser.parse_args(["generate", "-r", "pkgs", "-o", "out", "--syntax", "dos"])
    assert args.root == "pkgs"
    assert args.out == "out"
    assert args.syntax == "dos"


def test_cli_show_collects_keys() -> None:
    parser = _build_parser()
    args = parser.parse_args(["show", "vm", "start"])
    assert args.keys == ["vm", "start"]
    assert args.syntax is None


def test_cli_rejects_unknown_syntax() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["generate", "--syntax", "vms"])


def test_show_prints_help(
    package_builder: PackageBuilder, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    package_builder.vm_package()

    main(["show", "--config", str(tmp_path), "-r", str(package_builder.root), "vm", "start"])

    out = capsys.readouterr().out
    assert "az vm start [--name] <string> [--force]" in out


def test_show_unknown_command_exits(
    package_builder: PackageBuilder, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    package_builder.vm_package()

    with pytest.raises(SystemExit) as excinfo:
        main(["show", "--config", str(tmp_path), "-r", str(package_builder.root), "vm", "nope"])

    assert excinfo.value.code == 1
    assert "No command registered" in capsys.readouterr().err


def test_generate_uses_config_file(
    package_builder: PackageBuilder, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    package_builder.vm_package()
    (tmp_path / ".helpgen.yml").write_text(
        f'packages_root: "{package_builder.root.as_posix()}"\noutput_dir: out\n',
        encoding="utf-8",
    )

    main(["generate", "--config", str(tmp_path)])

    assert (tmp_path / "out" / "vm-pkg" / "vm.start.hlp").exists()
    assert (tmp_path / "out" / "vm-pkg" / "vm.stop.hlp").exists()
    assert "Wrote 2 help file(s), skipped 0" in capsys.readouterr().out


def test_missing_packages_root_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["generate", "--config", str(tmp_path)])
    assert excinfo.value.code == 1


def test_show_joins_keys_with_configured_separator(
    package_builder: PackageBuilder, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    package = package_builder.vm_package()
    package_builder.index(package, ["vm/start:vm_pkg_commands.py/StartAzureVMCommand"])
    (tmp_path / ".helpgen.yml").write_text('key_separator: "/"\n', encoding="utf-8")

    main(["show", "--config", str(tmp_path), "-r", str(package_builder.root), "vm", "start"])

    assert "az vm start [--name] <string> [--force]" in capsys.readouterr().out


def test_cli_accepts_log_file_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["show", "--log-file", "run.log", "vm"])
    assert args.log_file == "run.log"
    assert parser.parse_args(["generate"]).log_file is None


def test_generate_writes_log_file(package_builder: PackageBuilder, tmp_path: Path) -> None:
    package_builder.vm_package()
    log_file = tmp_path / "logs" / "helpgen.log"

    main(
        [
            "generate",
            "--config",
            str(tmp_path),
            "-r",
            str(package_builder.root),
            "-o",
            str(tmp_path / "out"),
            "--log-file",
            str(log_file),
        ]
    )

    text = log_file.read_text(encoding="utf-8")
    assert "INFO helpgen.generator: Wrote" in text
    assert "vm.stop.hlp" in text
