"""
配置管理器
"""

from .constants import PROFILE_CONFIG, DEFAULT_PAD_COUNT

class BitmopConfig:
    """命令列配置類"""

    def __init__(self, profile="default"):
        """初始化配置
        參數:
            profile: 配置名稱（見 PROFILE_CONFIG）
        """
        self.profile = profile
        self.config = PROFILE_CONFIG.get(profile, {})

    def get_profile(self):
        """獲取配置名稱"""
        return self.profile

    def get_pad_count(self):
        """獲取預設補零長度"""
        return self.config.get("pad_count", DEFAULT_PAD_COUNT)

    def get_log_dir(self):
        """獲取日誌目錄（None 表示只輸出到終端）"""
        return self.config.get("log_dir")

    def get_log_file(self):
        """獲取日誌文件名"""
        return self.config.get("log_file", "uuid_bitmop.log")

    def get_log_level(self):
        """獲取日誌等級"""
        return self.config.get("log_level", "INFO")
