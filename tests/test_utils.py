from __future__ import annotations

import logging

import pytest

from uuid_bitmop import ContractViolation, expt, expt2, format_word, pphex, to_signed64, to_unsigned64


@pytest.mark.unit
def test_expt() -> None:
    assert expt(2, 10) == 1024
    assert expt(3, 0) == 1
    assert expt(-2, 3) == -8
    with pytest.raises(ContractViolation):
        expt(2, -1)


@pytest.mark.unit
def test_expt2() -> None:
    assert expt2(0) == 1
    assert expt2(63) == 1 << 63
    with pytest.raises(ContractViolation):
        expt2(64)
    with pytest.raises(ContractViolation):
        expt2(-1)


@pytest.mark.unit
def test_signed_unsigned_folding() -> None:
    assert to_signed64((1 << 64) - 1) == -1
    assert to_signed64(1 << 63) == -(1 << 63)
    assert to_signed64(5) == 5
    assert to_unsigned64(-1) == (1 << 64) - 1


@pytest.mark.unit
def test_format_word() -> None:
    assert format_word(0x12) == "[0000000000000012] [" + "0" * 59 + "10010]"
    assert format_word(-1) == "[FFFFFFFFFFFFFFFF] [" + "1" * 64 + "]"


@pytest.mark.unit
def test_pphex_logs_and_returns_its_argument(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="uuid_bitmop"):
        assert pphex(255) == 255
    assert "[00000000000000FF]" in caplog.text
