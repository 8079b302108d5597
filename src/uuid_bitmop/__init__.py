"""
UUID 底層位元運算工具

遮罩、位元欄位、位元組轉型、位元組向量與十六進位編解碼
"""

from .core import *  # noqa: F401,F403
from .core import __all__

__version__ = "0.1.0"
