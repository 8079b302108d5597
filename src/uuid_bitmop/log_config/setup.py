# log_config/setup.py
"""
日誌配置
"""

import logging
import os
from pathlib import Path
from typing import Optional

ROOT_LOGGER = "uuid_bitmop"
_logging_configured = {}

def setup_logging(log_dir: Optional[str] = None, log_file: str = "uuid_bitmop.log",
                  mode: str = "default", level: str = "INFO"):
    """設置日志系統

    處理器掛在套件根 logger 上，模組內的 logging.getLogger(__name__) 一併輸出

    Args:
        log_dir: 日誌目錄，None 表示不寫入文件
        log_file: 日誌文件名
        mode: 模式名稱（用於區分不同的logger實例）
        level: 日誌等級名稱
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"未知日誌等級: {level}")

    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(log_level)
    logger = logging.getLogger(f"{ROOT_LOGGER}.{mode}")

    # 如果已經配置過，只更新等級
    if _logging_configured.get(ROOT_LOGGER) and root.handlers:
        for handler in root.handlers:
            handler.setLevel(log_level)
        return logger

    # 配置日誌格式
    log_format = '%(asctime)s - %(levelname)s - %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'

    # 文件處理器
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        log_path = os.path.join(log_dir, log_file)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(log_format, date_format))
        file_handler.setLevel(log_level)
        root.addHandler(file_handler)

    # 控制台處理器
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(log_format, date_format))
    console_handler.setLevel(log_level)
    root.addHandler(console_handler)

    root.propagate = False  # 防止日誌向上傳播

    _logging_configured[ROOT_LOGGER] = True

    return logger

def get_logger(name: str = ROOT_LOGGER):
    """獲取日誌器"""
    return logging.getLogger(name)
