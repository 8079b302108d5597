# core/bitfield.py
"""
位元欄位存取 (ldb / dpb)
"""

from .mask import mask, mask_offset
from .utils import _int, _word, to_signed64, to_unsigned64


def ldb(bitmask: int, num: int) -> int:
    """讀取遮罩所指的欄位，右對齊至第 0 位元"""
    bitmask = _word(bitmask)
    num = _word(num)
    offset = mask_offset(bitmask)
    # 遮罩需以無號右移，避免飽和遮罩的符號位元擴展
    return (to_unsigned64(bitmask) >> offset) & (num >> offset)


def dpb(bitmask: int, num: int, value: int) -> int:
    """將 value 寫入遮罩所指的欄位，其餘位元不變"""
    bitmask = _word(bitmask)
    num = _word(num)
    _int(value, "value")
    offset = mask_offset(bitmask)
    return to_signed64((num & ~bitmask) | (bitmask & (value << offset)))


def bit_count(x: int) -> int:
    """計算設定位元數（低 63 位元加上符號位元）"""
    x = _word(x)
    n = ldb(mask(63, 0), x)
    return bin(n).count("1") + (1 if x < 0 else 0)
