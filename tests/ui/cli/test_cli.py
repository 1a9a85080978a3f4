"""Tests for CLI functionality."""

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from brandfork.ui.cli import CommandProcessor

CONFIG_TEMPLATE = """\
name = "Acme Generic"
vendor = "Acme Corp"
update_hostname = "updates.acme.test"
engine_dir = "engine"
src_dir = "src"
tests_dir = "overlay-tests"
max_workers = 2

[brands.acme]
brandFullName = "Acme Browser"
"""


@pytest.fixture
def fork(tmp_path: Path, mocker: MockerFixture, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a fork checkout and return the path of its configuration file."""

    _ = mocker.patch("brandfork.ui.cli.args.parser.setup_logger")
    monkeypatch.setenv("BRANDFORK_DATA_DIR", str(tmp_path / ".brandfork"))

    config_file = tmp_path / "config" / "brandfork.toml"
    config_file.parent.mkdir()
    _ = config_file.write_text(CONFIG_TEMPLATE, encoding="utf-8")

    (tmp_path / "src" / "browser" / "base").mkdir(parents=True)
    _ = (tmp_path / "src" / "browser" / "base" / "zen.js").write_text("// zen\n", encoding="utf-8")
    _ = (tmp_path / "src" / "browser" / "base" / "zen.js.patch").write_text("diff\n", encoding="utf-8")
    (tmp_path / "overlay-tests" / "unit").mkdir(parents=True)
    _ = (tmp_path / "overlay-tests" / "unit" / "test_zen.js").write_text("ok\n", encoding="utf-8")
    (tmp_path / "engine").mkdir()
    return config_file


def test_overlay_command_projects_src_and_tests(fork: Path) -> None:
    CommandProcessor.process_command(["--config", str(fork), "overlay", "--strategy", "copy", "--quiet"])

    engine = fork.parent.parent / "engine"
    assert (engine / "browser" / "base" / "zen.js").read_text(encoding="utf-8") == "// zen\n"
    assert not (engine / "browser" / "base" / "zen.js.patch").exists()
    tests_copy = engine / "browser" / "base" / "zen-components" / "overlay-tests" / "unit" / "test_zen.js"
    assert tests_copy.read_text(encoding="utf-8") == "ok\n"
    assert "browser/base/zen.js" in (engine / ".gitignore").read_text(encoding="utf-8").splitlines()


def test_overlay_failures_exit_with_error(fork: Path) -> None:
    engine = fork.parent.parent / "engine"
    _ = (engine / "browser").write_text("not a directory", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["--config", str(fork), "overlay", "--strategy", "copy", "--quiet"])

    assert excinfo.value.code == 1


def test_brand_apply_unknown_brand_exits(fork: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["--config", str(fork), "brand", "apply", "ghost"])

    assert excinfo.value.code == 1


def test_mozconfig_prints_fragment(fork: Path, capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["--config", str(fork), "mozconfig", "acme"])

    out = capsys.readouterr().out
    assert "ac_add_options --with-branding=browser/branding/acme" in out
    assert "export MOZ_APPUPDATE_HOST=updates.acme.test" in out


def test_mozconfig_writes_output_file(fork: Path, tmp_path: Path) -> None:
    target = tmp_path / "out" / "mozconfig"

    CommandProcessor.process_command(
        ["--config", str(fork), "mozconfig", "acme", "--build-mode", "debug", "--output", str(target)]
    )

    assert "ac_add_options --enable-debug" in target.read_text(encoding="utf-8")


def test_init_config_respects_existing_file(fork: Path) -> None:
    before = fork.read_text(encoding="utf-8")

    CommandProcessor.process_command(["--config", str(fork), "init-config"])
    assert fork.read_text(encoding="utf-8") == before

    CommandProcessor.process_command(["--config", str(fork), "init-config", "--force"])
    assert fork.read_text(encoding="utf-8").startswith("# brandfork configuration file")


def test_keyboard_interrupt_exits_130(mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "brandfork.ui.cli.cli.ArgumentParser.process_args",
        side_effect=KeyboardInterrupt,
    )

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["overlay"])

    assert excinfo.value.code == 130
