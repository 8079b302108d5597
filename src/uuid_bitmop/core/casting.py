# core/casting.py
"""
位元組轉型

ubN: 取低 N 位元的無號值
sbN: 將低 N 位元重新解讀為二補數有號值（會環繞，不保值）
"""

from ..config.constants import (
    UB4_MASK, UB8_MASK, UB16_MASK, UB24_MASK,
    UB32_MASK, UB48_MASK, UB56_MASK, UB64_MASK,
)
from .utils import _int


def _signed(num: int, width: int) -> int:
    """將 width 位元的無號值解讀為有號值"""
    return num - (1 << width) if num >> (width - 1) else num


def ub4(num: int) -> int:
    return _int(num) & UB4_MASK

def ub8(num: int) -> int:
    return _int(num) & UB8_MASK

def ub16(num: int) -> int:
    return _int(num) & UB16_MASK

def ub24(num: int) -> int:
    return _int(num) & UB24_MASK

def ub32(num: int) -> int:
    return _int(num) & UB32_MASK

def ub48(num: int) -> int:
    return _int(num) & UB48_MASK

def ub56(num: int) -> int:
    return _int(num) & UB56_MASK

def ub64(num: int) -> int:
    return _int(num) & UB64_MASK


def sb8(num: int) -> int:
    return _signed(ub8(num), 8)

def sb16(num: int) -> int:
    return _signed(ub16(num), 16)

def sb32(num: int) -> int:
    return _signed(ub32(num), 32)

def sb64(num: int) -> int:
    return _signed(ub64(num), 64)
