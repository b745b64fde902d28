"""Application settings.

環境変数から設定を読み込む。get_settings()が唯一のエントリーポイント。
"""

import os

from pydantic import BaseModel


_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE_VALUES


class Settings(BaseModel):
    """BLT変換の設定."""

    log_level: str = "WARNING"
    sort_ballots: bool = True
    show_names: bool = False
    results_table_selector: str = "table.results"
    election_name_prefix: str = "Election"

    @classmethod
    def from_env(cls) -> "Settings":
        """環境変数から設定を生成する."""
        return cls(
            log_level=os.environ.get("BLT_LOG_LEVEL", "WARNING").upper(),
            sort_ballots=_env_bool("BLT_SORT_BALLOTS", True),
            show_names=_env_bool("BLT_SHOW_NAMES", False),
            results_table_selector=os.environ.get(
                "BLT_RESULTS_TABLE_SELECTOR", "table.results"
            ),
            election_name_prefix=os.environ.get("BLT_ELECTION_NAME_PREFIX", "Election"),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """設定を取得する（初回のみ環境変数から読み込む）."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reload_settings() -> Settings:
    """環境変数から設定を読み込み直す."""
    global _settings
    _settings = Settings.from_env()
    return _settings
