"""
位元運算常量定義
"""

#============================== 字組幾何 ==============================
WORD_BITS = 64
OCTET_BITS = 8

LONG_MIN = -(1 << 63)
LONG_MAX = (1 << 63) - 1
ULONG_MASK = (1 << 64) - 1

#============================== 窄化遮罩 ==============================
UB4_MASK = 0x0F
UB8_MASK = 0xFF
UB16_MASK = 0xFFFF
UB24_MASK = 0xFFFFFF
UB32_MASK = 0xFFFFFFFF
UB48_MASK = 0xFFFFFFFFFFFF
UB56_MASK = 0xFFFFFFFFFFFFFF
UB64_MASK = ULONG_MASK

# 位元組可接受的範圍（有號 -128 ~ 無號 255）
OCTET_MIN = -0x80
OCTET_MAX = 0xFF

#============================== 編碼設定 ==============================
HEX_CHARS = "0123456789abcdef"
TEXT_ENCODING = "utf-8"
DEFAULT_PAD_COUNT = 8

#============================== 命令列設定 ==============================
PROFILE_CONFIG = {
    "default": {
        "pad_count": DEFAULT_PAD_COUNT,
        "log_dir": None,
        "log_file": "uuid_bitmop.log",
        "log_level": "INFO",
    },
    "uuid": {
        "pad_count": 8,
        "log_dir": None,
        "log_file": "uuid_bitmop.log",
        "log_level": "INFO",
    },
    "debug": {
        "pad_count": DEFAULT_PAD_COUNT,
        "log_dir": "logs",
        "log_file": "uuid_bitmop_debug.log",
        "log_level": "DEBUG",
    },
}
