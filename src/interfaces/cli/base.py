"""CLI共通処理."""

import functools
import logging
import sys

from collections.abc import Callable
from typing import Any

import click

from src.domain.exceptions import BltConversionError
from src.infrastructure.config import get_settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """ログ出力を設定する（標準出力はBLT専用のため標準エラーに出力）."""
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def echo_error(message: str) -> None:
    """Show an error message"""
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)


def with_error_handling(func: Callable[..., Any]) -> Callable[..., Any]:
    """BltConversionErrorをエラーメッセージと終了コード1に変換する."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except BltConversionError as e:
            logging.getLogger(func.__module__).debug("変換失敗", exc_info=True)
            echo_error(str(e))
            sys.exit(1)

    return wrapper
