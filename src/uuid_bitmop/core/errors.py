# core/errors.py
"""
錯誤類型

全部繼承 ValueError，沿用呼叫端以 ValueError 捕捉範圍錯誤的習慣
"""

from typing import Optional


class BitmopError(ValueError):
    """位元運算錯誤基類"""


class ContractViolation(BitmopError):
    """前置條件不成立（寬度、偏移、補零長度、字組或位元組超出範圍）"""


class OctetOverflowError(BitmopError):
    """數值所需位元組數超過允許長度"""


class HexOverflowError(BitmopError):
    """十六進位字串數值超過 64 位元"""


class MalformedHexError(BitmopError):
    """十六進位字串格式錯誤"""

    def __init__(self, message: str, text: str, position: Optional[int] = None):
        super().__init__(message)
        self.text = text
        self.position = position
