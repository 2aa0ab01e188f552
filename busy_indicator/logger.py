"""
ログ設定モジュール
loguru でコンソールとファイルにログを出力する
"""

import os
import sys
from pathlib import Path
from loguru import logger

from busy_indicator.path_manager import get_appdata_dir

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[component]} | {name}:{function}:{line} - {message}"


def setup_logger(log_dir: str = None, level: str = "INFO", to_file: bool = True):
    """
    ロガーを初期化する

    Args:
        log_dir: ログファイルの出力先（省略時はアプリ固有ディレクトリ/logs）
        level: コンソールに出すログレベル
        to_file: ファイル出力を行うかどうか
    """
    logger.remove()
    # get_logger で名前を付けていないログにも component を持たせる
    logger.configure(extra={"component": "-"})

    # GUIアプリとして起動した場合 sys.stderr が None になることがある
    if sys.stderr is not None:
        logger.add(sys.stderr, format=LOG_FORMAT, level=level, colorize=False, catch=True)

    if to_file:
        log_path = Path(log_dir) if log_dir else Path(get_appdata_dir()) / "logs"
        os.makedirs(log_path, exist_ok=True)
        logger.add(
            log_path / "busy_indicator_{time:YYYY-MM-DD}.log",
            format=LOG_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            encoding="utf-8",
            catch=True,
            backtrace=True,
        )

    def handle_exception(exc_type, exc_value, exc_traceback):
        """未捕獲の例外をログに残す"""
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logger.opt(exception=(exc_type, exc_value, exc_traceback)).critical("未捕獲の例外が発生しました")

    sys.excepthook = handle_exception
    logger.debug("ロガー初期化完了")
    return logger


def get_logger(name: str = None):
    """モジュール名を付けたロガーを返す"""
    return logger.bind(component=name) if name else logger
