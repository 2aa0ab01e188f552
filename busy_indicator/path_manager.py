from pathlib import Path
import os
import sys

APP_NAME = "busy_indicator"


class PathManager:
    """
    パッケージ内のパスを一元管理するユーティリティクラス。
    どこからimportしても正しいアイコンのパスを返す。
    """
    @staticmethod
    def package_root():
        return Path(__file__).resolve().parent

    @staticmethod
    def icons_dir():
        return PathManager.package_root() / "icons"

    @staticmethod
    def icon_path(name):
        """アイコン名(拡張子付き)から絶対パスを返す"""
        return PathManager.icons_dir() / name


def get_appdata_dir() -> str:
    """
    アプリ固有の設定ファイル・ログを保存するディレクトリの絶対パスを返す。
    OSごとに適切な場所（Windows: %APPDATA%、Mac: ~/Library/Application Support、Linux: ~/.config など）
    """
    if sys.platform.startswith("win"):
        base = os.environ.get("APPDATA", os.path.expanduser("~"))
    elif sys.platform == "darwin":
        base = os.path.expanduser("~/Library/Application Support")
    else:
        base = os.path.expanduser("~/.config")
    path = os.path.join(base, APP_NAME)
    os.makedirs(path, exist_ok=True)
    return path


def get_appdata_path(filename: str) -> str:
    """
    アプリ固有ディレクトリ配下のファイル絶対パスを返す
    """
    return os.path.join(get_appdata_dir(), filename)
