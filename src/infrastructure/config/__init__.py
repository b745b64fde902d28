"""
Configuration module for table-to-blt.

設定管理の一元化モジュール。settings.pyが唯一のエントリーポイント。
"""

from src.infrastructure.config.settings import (
    Settings,
    get_settings,
    reload_settings,
)


__all__ = [
    "Settings",
    "get_settings",
    "reload_settings",
]
