import json
from dataclasses import dataclass, asdict, fields

from busy_indicator.path_manager import get_appdata_path
from busy_indicator.logger import get_logger

logger = get_logger("demo_settings")

SETTINGS_FILE_NAME = "busy_indicator_demo_state.json"
MAX_FREEZE_DURATION = 1000
BOOL_FIELDS = ("scalable", "freeze_enabled", "bogus", "internal_timer")


def clamp_freeze_duration(value: int) -> int:
    """フリーズ時間を [0, 1000] に収める。負の値は警告を出して 0 にする"""
    if value < 0:
        logger.warning("ignoring negative freezeDuration")
        return 0
    return min(value, MAX_FREEZE_DURATION)


@dataclass
class DemoSettings:
    """デモ画面のつまみの状態（次回起動時に復元する）"""
    freeze_duration: int = 250
    scalable: bool = False
    freeze_enabled: bool = False
    bogus: bool = False
    internal_timer: bool = False


def default_settings_path():
    return get_appdata_path(SETTINGS_FILE_NAME)


def load_settings(path=None) -> DemoSettings:
    """保存済みの状態を読み込む。読めない場合は既定値を返す"""
    path = path or default_settings_path()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        return DemoSettings()
    except (OSError, ValueError) as e:
        logger.warning(f"状態ファイル読込失敗: {e}")
        return DemoSettings()
    if not isinstance(data, dict):
        logger.warning(f"状態ファイルの形式が不正です: {path}")
        return DemoSettings()
    known = {f.name for f in fields(DemoSettings)}
    try:
        settings = DemoSettings(**{k: v for k, v in data.items() if k in known})
        settings.freeze_duration = clamp_freeze_duration(int(settings.freeze_duration))
    except (TypeError, ValueError) as e:
        logger.warning(f"状態ファイルの値が不正です: {e}")
        return DemoSettings()
    for name in BOOL_FIELDS:
        if not isinstance(getattr(settings, name), bool):
            logger.warning(f"状態ファイルの値が不正です: {name}={getattr(settings, name)!r}")
            return DemoSettings()
    return settings


def save_settings(settings: DemoSettings, path=None):
    path = path or default_settings_path()
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(asdict(settings), f, indent=2)
    except OSError as e:
        logger.warning(f"状態ファイル保存失敗: {e}")
