# core/utils.py
"""
工具函數
"""

import logging

from ..config.constants import LONG_MIN, LONG_MAX, ULONG_MASK, WORD_BITS, OCTET_MIN, OCTET_MAX
from .errors import ContractViolation

logger = logging.getLogger(__name__)

def _int(x, name: str = "value") -> int:
    """確保參數為整數（bool 不算）"""
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError(f"{name} 必須為整數: {x!r}")
    return x

def _word(x: int) -> int:
    """確保值在 64 位元字組範圍內，並轉為有號表示"""
    _int(x, "word")
    if not (LONG_MIN <= x <= ULONG_MASK):
        raise ContractViolation(f"word range error: {x}")
    return to_signed64(x)

def _octet(x: int) -> int:
    """確保值為有號或無號位元組"""
    _int(x, "octet")
    if not (OCTET_MIN <= x <= OCTET_MAX):
        raise ContractViolation(f"octet range error: {x}")
    return x

def to_signed64(x: int) -> int:
    """將整數的低 64 位元視為二補數有號值"""
    x &= ULONG_MASK
    return x - (1 << WORD_BITS) if x > LONG_MAX else x

def to_unsigned64(x: int) -> int:
    """取得整數低 64 位元的無號值"""
    return x & ULONG_MASK

def expt(num: int, power: int) -> int:
    """整數次方（重複相乘）"""
    if _int(power, "power") < 0:
        raise ContractViolation(f"次方不可為負數: {power}")
    acc = 1
    for _ in range(power):
        acc *= num
    return acc

def expt2(power: int) -> int:
    """2 的次方，限 64 位元字組內"""
    if not (0 <= _int(power, "power") < WORD_BITS):
        raise ContractViolation(f"次方超出範圍 0~63: {power}")
    return 1 << power

def format_word(x: int) -> str:
    """格式化為 [十六進位] [64位元二進位]"""
    u = to_unsigned64(_word(x))
    return f"[{u:016X}] [{u:064b}]"

def pphex(x: int) -> int:
    """記錄字組的十六進位與二進位表示，原值返回"""
    logger.info(format_word(x))
    return x
