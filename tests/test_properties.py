from __future__ import annotations

import pytest
pytest.importorskip("hypothesis")
from hypothesis import given, strategies as st

from uuid_bitmop import (
    bit_count,
    bytes_to_value,
    dpb,
    from_hex,
    ldb,
    long_to_octets,
    mask,
    to_hex,
)

words = st.integers(min_value=-(1 << 63), max_value=(1 << 63) - 1)


@st.composite
def masks(draw):
    offset = draw(st.integers(min_value=0, max_value=63))
    width = draw(st.integers(min_value=1, max_value=64 - offset))
    return mask(width, offset)


@pytest.mark.unit
@given(masks(), words)
def test_deposit_of_loaded_field_is_identity(m, word):
    assert dpb(m, word, ldb(m, word)) == word


@pytest.mark.unit
@given(masks(), words, st.integers(min_value=0, max_value=(1 << 64) - 1))
def test_deposit_then_load_returns_truncated_value(m, word, value):
    width_mask = ldb(m, -1)
    assert ldb(m, dpb(m, word, value)) == value & width_mask


@pytest.mark.unit
@given(words, st.integers(min_value=1, max_value=16))
def test_octets_round_trip_when_padding_fits(value, pad_count):
    needed = 8 if value < 0 else max(1, (value.bit_length() + 7) // 8)
    if pad_count >= needed:
        octets = long_to_octets(value, pad_count)
        assert len(octets) == pad_count
        assert bytes_to_value(octets) == value


@pytest.mark.unit
@given(words)
def test_hex_round_trip(value):
    text = to_hex(value)
    assert len(text) == 16
    assert from_hex(text) == value


@pytest.mark.unit
@given(words)
def test_bit_count_matches_unsigned_popcount(value):
    assert bit_count(value) == bin(value & ((1 << 64) - 1)).count("1")
