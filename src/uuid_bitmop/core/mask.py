# core/mask.py
"""
位元遮罩

遮罩以 64 位元有號字組表示：
- 一般遮罩 (width + offset <= 63)：非負數
- 飽和遮罩 (連續位元延伸至第 63 位元)：負數，即 ~((1 << offset) - 1)
"""

from ..config.constants import WORD_BITS
from .errors import ContractViolation
from .utils import _int, _word


def mask(width: int, offset: int) -> int:
    """由 (寬度, 偏移) 建立遮罩"""
    _int(width, "width")
    _int(offset, "offset")
    if not (0 <= width <= WORD_BITS):
        raise ContractViolation(f"遮罩寬度超出範圍 0~64: {width}")
    if not (0 <= offset < WORD_BITS):
        raise ContractViolation(f"遮罩偏移超出範圍 0~63: {offset}")
    if width + offset > WORD_BITS:
        raise ContractViolation(f"遮罩超出字組: width={width}, offset={offset}")

    if width + offset <= WORD_BITS - 1:
        return ((1 << width) - 1) << offset
    return ~((1 << offset) - 1)


def mask_offset(m: int) -> int:
    """遮罩最低設定位元的位置"""
    m = _word(m)
    if m == 0:
        return 0
    if m < 0:
        return WORD_BITS - mask_width(m)
    c = 0
    while not (m >> c) & 1:
        c += 1
    return c


def mask_width(m: int) -> int:
    """遮罩連續設定位元的寬度"""
    m = _word(m)
    if m < 0:
        return WORD_BITS - mask_width(-(m + 1))
    m >>= mask_offset(m)
    c = 0
    while (m >> c) & 1:
        c += 1
    return c
