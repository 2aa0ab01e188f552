"""アイコン資源とスタイル値の取得（テスト時は差し替え可能）"""

from PyQt6.QtWidgets import QApplication, QStyle
from PyQt6.QtGui import QIcon, QPixmap
from PyQt6.QtCore import QSize

from busy_indicator.path_manager import PathManager
from busy_indicator.logger import get_logger

logger = get_logger("icon_provider")

SCALABLE_ICON_NAME = "view-refresh-scalable.svg"
# 固定解像度アイコンの一辺(px)
FIXED_ICON_EXTENT = 22

# プロセス内で一度だけ読み込み、全ウィジェットで共有する
_icon_cache = {}


def _load_scalable_icon():
    path = PathManager.icon_path(SCALABLE_ICON_NAME)
    if not path.exists():
        logger.warning(f"アイコンが見つかりません: {path}")
        return QIcon()
    return QIcon(str(path))


def _load_fixed_icon(scalable: QIcon):
    if scalable.isNull():
        return QIcon()
    # 同じ絵柄を固定サイズのラスタ画像にしておく（拡大するとぼやける）
    pixmap = scalable.pixmap(QSize(FIXED_ICON_EXTENT, FIXED_ICON_EXTENT))
    if pixmap.isNull():
        logger.warning("固定サイズアイコンの生成に失敗しました")
        return QIcon()
    return QIcon(QPixmap(pixmap))


class IconProvider:
    """固定解像度アイコンとスケーラブルアイコンを提供する"""

    def scalable_icon(self) -> QIcon:
        if "scalable" not in _icon_cache:
            _icon_cache["scalable"] = _load_scalable_icon()
        return _icon_cache["scalable"]

    def fixed_icon(self) -> QIcon:
        if "fixed" not in _icon_cache:
            _icon_cache["fixed"] = _load_fixed_icon(self.scalable_icon())
        return _icon_cache["fixed"]


class StyleMetrics:
    """ホストのスタイルから寸法を取得する"""

    def small_icon_extent(self) -> int:
        return QApplication.style().pixelMetric(QStyle.PixelMetric.PM_SmallIconSize)
