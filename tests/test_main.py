from __future__ import annotations

import logging

import pytest

from uuid_bitmop.config import BitmopConfig
from uuid_bitmop.log_config import get_logger, setup_logging
from uuid_bitmop.main import main


@pytest.mark.unit
def test_config_profiles() -> None:
    assert BitmopConfig().get_pad_count() == 8
    assert BitmopConfig("debug").get_log_level() == "DEBUG"
    unknown = BitmopConfig("missing")
    assert unknown.get_pad_count() == 8
    assert unknown.get_log_dir() is None
    assert unknown.get_log_file() == "uuid_bitmop.log"


@pytest.mark.unit
def test_setup_logging_is_idempotent(tmp_path) -> None:
    logger = setup_logging(log_dir=str(tmp_path), mode="test")
    again = setup_logging(log_dir=str(tmp_path), mode="test", level="DEBUG")
    assert logger is again
    root = get_logger()
    assert len(root.handlers) == 2
    assert root.level == logging.DEBUG
    logger.info("hello")
    assert (tmp_path / "uuid_bitmop.log").exists()


@pytest.mark.unit
def test_setup_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        setup_logging(level="LOUD")


@pytest.mark.unit
@pytest.mark.parametrize(
    "argv, expected",
    [
        (["mask", "8", "8"], "65280 0x000000000000ff00"),
        (["mask", "8", "56"], "-72057594037927936 0xff00000000000000"),
        (["inspect", "0xff00"], "width=8 offset=8"),
        (["hex", "255"], "00000000000000ff"),
        (["hex", "256", "--pad", "2"], "0100"),
        (["octets", "256", "--pad", "2"], "1 0"),
        (["unhex", "ffffffffffffffff"], "-1"),
        (["hex-text", "abc"], "616263"),
        (["unhex-text", "616263"], "abc"),
        (["pphex", "1"], "[0000000000000001] [" + "0" * 63 + "1]"),
    ],
)
def test_cli_commands(argv, expected, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(argv) == 0
    assert capsys.readouterr().out.strip() == expected


@pytest.mark.unit
def test_cli_reports_errors_with_exit_status(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["unhex", "10000000000000000"]) == 1
    assert main(["mask", "10", "60"]) == 1
    assert capsys.readouterr().out == ""


@pytest.mark.unit
def test_cli_rejects_non_integer_arguments() -> None:
    with pytest.raises(SystemExit):
        main(["hex", "abc"])
