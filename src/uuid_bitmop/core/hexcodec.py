# core/hexcodec.py
"""
十六進位字串編解碼

輸出固定為小寫，每個位元組兩個字元，無分隔符
文字一律以 UTF-8 編碼
"""

import logging
from typing import Iterable, Union

from ..config.constants import DEFAULT_PAD_COUNT, HEX_CHARS, TEXT_ENCODING, WORD_BITS
from .casting import ub8
from .errors import HexOverflowError, MalformedHexError
from .octets import _iter_octets, long_to_octets, ubvec
from .utils import _octet, to_signed64

logger = logging.getLogger(__name__)

# 字元 -> 數值（大小寫皆可）
_HEX_VALUES = {c: i for i, c in enumerate(HEX_CHARS)}
_HEX_VALUES.update({c.upper(): i for c, i in list(_HEX_VALUES.items())})

_MAX_HEX_DIGITS = WORD_BITS // 4


def octet_hex(num: int) -> str:
    """位元組轉為兩個十六進位字元（高半位元組在前）"""
    num = ub8(_octet(num))
    return HEX_CHARS[num >> 4] + HEX_CHARS[num & 0x0F]


def to_hex(thing: Union[int, Iterable[int]], pad_count: int = DEFAULT_PAD_COUNT) -> str:
    """
    整數或位元組序列轉為十六進位字串

    Args:
        thing: 64 位元整數，或位元組序列（bytes、列表等）
        pad_count: 整數輸入時的位元組長度；位元組序列輸入時不使用，原樣輸出

    Returns:
        十六進位字串，每個位元組兩個字元
    """
    if isinstance(thing, int) and not isinstance(thing, bool):
        thing = ubvec(long_to_octets(thing, pad_count))
    return "".join(octet_hex(b) for b in _iter_octets(thing))


def hex_of_text(s: str) -> str:
    """文字以 UTF-8 編碼後轉為十六進位字串"""
    if not isinstance(s, str):
        raise TypeError(f"必須為字串: {s!r}")
    return to_hex(s.encode(TEXT_ENCODING))


def _digit(s: str, i: int) -> int:
    """解析第 i 個十六進位字元"""
    value = _HEX_VALUES.get(s[i])
    if value is None:
        logger.debug(f"非十六進位字元 {s[i]!r} 於位置 {i}: {s!r}")
        raise MalformedHexError(f"非十六進位字元 {s[i]!r} 於位置 {i}: {s!r}", s, i)
    return value


def _check_text(s: str) -> str:
    """確保輸入為字串"""
    if not isinstance(s, str):
        raise TypeError(f"必須為字串: {s!r}")
    return s


def from_hex(s: str) -> int:
    """
    十六進位字串轉為 64 位元有號整數

    第 63 位元設定時結果為負數，與 to_hex 互為反函數

    Raises:
        MalformedHexError: 空字串或含非十六進位字元
        HexOverflowError: 數值超過 64 位元
    """
    if not _check_text(s):
        raise MalformedHexError("十六進位字串為空", s)
    # 先檢查全部字元，格式錯誤優先於溢位
    digits = [_digit(s, i) for i in range(len(s))]

    value = 0
    significant = 0
    for digit in digits:
        # 前導零不計入位數
        if significant or digit:
            significant += 1
        if significant > _MAX_HEX_DIGITS:
            logger.debug(f"十六進位數值超過 64 位元: {len(s)} 個字元")
            raise HexOverflowError(f"十六進位數值超過 64 位元 (長度 {len(s)}): {s[:32]!r}")
        value = (value << 4) | digit
    return to_signed64(value)


def octets_of_hex(s: str) -> bytes:
    """逐對解析十六進位字串為位元組序列"""
    _check_text(s)
    if len(s) % 2:
        raise MalformedHexError(f"十六進位字串長度必須為偶數: {s!r}", s, len(s) - 1)
    return bytes((_digit(s, i) << 4) | _digit(s, i + 1) for i in range(0, len(s), 2))


def text_of_hex(s: str) -> str:
    """十六進位字串逐位元組解碼後以 UTF-8 還原文字"""
    data = octets_of_hex(s)
    try:
        return data.decode(TEXT_ENCODING)
    except UnicodeDecodeError as e:
        raise MalformedHexError(f"無法以 {TEXT_ENCODING} 解碼: {s!r}", s, e.start * 2) from e
