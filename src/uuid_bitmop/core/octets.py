# core/octets.py
"""
位元組向量

整數與大端序 (big-endian) 位元組序列之間的轉換：
- 無號向量 (ubvec)：bytes，元素 0 ~ 255
- 有號向量 (sbvec)：array('b')，元素 -128 ~ 127
兩者表示相同的 8 位元內容
"""

import logging
from array import array
from typing import Iterable, List, Union

from ..config.constants import DEFAULT_PAD_COUNT, OCTET_BITS, WORD_BITS
from .bitfield import dpb, ldb
from .casting import sb8, ub8
from .errors import ContractViolation, OctetOverflowError
from .mask import mask
from .utils import _int, _octet, _word

logger = logging.getLogger(__name__)

OCTETS_PER_WORD = WORD_BITS // OCTET_BITS

OctetSource = Union[int, Iterable[int]]


def long_to_octets(lng: int, pad_count: int = DEFAULT_PAD_COUNT) -> List[int]:
    """
    將 64 位元整數轉為無號位元組列表（高位在前）

    Args:
        lng: 64 位元字組
        pad_count: 輸出長度，不足時於高位補零

    Returns:
        長度恰為 pad_count 的位元組列表

    Raises:
        OctetOverflowError: 數值所需位元組數超過 pad_count
    """
    lng = _word(lng)
    if _int(pad_count, "pad_count") < 1:
        raise ContractViolation(f"補零長度必須大於 0: {pad_count}")

    raw_bytes = [ldb(mask(OCTET_BITS, i * OCTET_BITS), lng) for i in range(OCTETS_PER_WORD)]

    # 去除高位的零位元組
    value_bytes = list(reversed(raw_bytes))
    while value_bytes and value_bytes[0] == 0:
        value_bytes.pop(0)

    if len(value_bytes) > pad_count:
        logger.debug(f"位元組長度 {len(value_bytes)} 超過補零長度 {pad_count}: {lng}")
        raise OctetOverflowError(
            f"數值 {lng} 需要 {len(value_bytes)} 個位元組，超過補零長度 {pad_count}"
        )

    return [0] * (pad_count - len(value_bytes)) + value_bytes


def bytes_to_value(byte_seq: Iterable[int]) -> int:
    """
    將大端序位元組序列組回 64 位元有號整數（long_to_octets 的反函數）

    超過 8 個位元組時，多出的高位位元組必須為零（即 long_to_octets 的補零）

    Raises:
        OctetOverflowError: 多出的高位位元組不為零
    """
    octets = [_octet(b) for b in _iter_octets(byte_seq)]
    extra = len(octets) - OCTETS_PER_WORD
    if extra > 0:
        if any(octets[:extra]):
            raise OctetOverflowError(
                f"位元組序列超過 {OCTETS_PER_WORD} 個且高位不為零: {len(octets)} 個"
            )
        octets = octets[extra:]

    total = 0
    for i, octet in enumerate(reversed(octets)):
        total = dpb(mask(OCTET_BITS, i * OCTET_BITS), total, octet)
    return total


def _iter_octets(thing) -> Iterable[int]:
    """檢查並返回可迭代的位元組來源"""
    if isinstance(thing, str):
        raise TypeError("字串不是位元組序列，請先編碼或使用 hex_of_text")
    try:
        return iter(thing)
    except TypeError:
        raise TypeError(f"不支援的類型: {type(thing).__name__}") from None


# ============= 有號向量 =============

def sbvec(thing: OctetSource) -> array:
    """由整數或位元組集合建立有號位元組向量"""
    if isinstance(thing, int) and not isinstance(thing, bool):
        return array('b', (sb8(b) for b in long_to_octets(thing)))
    return array('b', (sb8(b) for b in _iter_octets(thing)))

def sbvector(*args: int) -> array:
    return sbvec(args)

def make_sbvector(length: int, initial_element: int) -> array:
    return sbvec([initial_element] * max(_int(length, "length"), 0))


# ============= 無號向量 =============

def ubvec(thing: OctetSource) -> bytes:
    """由整數或位元組集合建立無號位元組向量"""
    if isinstance(thing, int) and not isinstance(thing, bool):
        return bytes(long_to_octets(thing))
    return bytes(ub8(b) for b in _iter_octets(thing))

def ubvector(*args: int) -> bytes:
    return ubvec(args)

def make_ubvector(length: int, initial_element: int) -> bytes:
    return ubvec([initial_element] * max(_int(length, "length"), 0))
