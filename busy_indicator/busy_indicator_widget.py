from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import QPointF, QSize
from PyQt6.QtGui import QPainter

from busy_indicator.icon_provider import IconProvider, StyleMetrics
from busy_indicator.rotation_driver import RampRotationDriver, TickRotationDriver
from busy_indicator.logger import get_logger

logger = get_logger("busy_indicator_widget")


class BusyIndicatorWidget(QWidget):
    """
    回転するアイコンで「処理中」を示すウィジェット
    - 表示されるとアニメーション開始、非表示で停止
    - スケーラブル(SVG)/固定解像度アイコンの切替
    - フレーム毎のフリーズ(ms)、描画スキップ(bogus)、内部タイマーモード
    """
    def __init__(self, scalable=False, freeze_ms=0, parent=None, *,
                 icon_provider=None, style_metrics=None, use_internal_timer=False):
        # BusyIndicatorWidget(parent) / BusyIndicatorWidget(scalable, parent) も受け付ける
        if isinstance(scalable, QWidget):
            scalable, parent = False, scalable
        elif isinstance(freeze_ms, QWidget):
            freeze_ms, parent = 0, freeze_ms
        super().__init__(parent)
        self.icon_provider = icon_provider or IconProvider()
        self.style_metrics = style_metrics or StyleMetrics()
        self._fixed_icon = self.icon_provider.fixed_icon()
        self._scalable_icon = self.icon_provider.scalable_icon()
        self._rotation = 0.0
        self._paint_center = QPointF()
        self._scalable = bool(scalable)
        self._suppress_paint = False
        self._use_internal_timer = bool(use_internal_timer)
        self._running = False

        self.ramp_driver = RampRotationDriver(self)
        self.tick_driver = TickRotationDriver(self)
        for driver in (self.ramp_driver, self.tick_driver):
            driver.rotationChanged.connect(self._on_rotation_changed)
        self.set_freeze_duration_ms(freeze_ms)

    def _on_rotation_changed(self, degrees):
        self._rotation = degrees
        self.update()  # 新しい角度で再描画

    def active_driver(self):
        return self.tick_driver if self._use_internal_timer else self.ramp_driver

    # --- Qtイベント ---
    def minimumSizeHint(self):
        extent = self.style_metrics.small_icon_extent()
        return QSize(extent, extent)

    def showEvent(self, event):
        super().showEvent(event)
        self._running = True
        self.active_driver().start(self._rotation)

    def hideEvent(self, event):
        super().hideEvent(event)
        self._running = False
        self.active_driver().stop()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        size = event.size()
        self._paint_center = QPointF(size.width() / 2.0, size.height() / 2.0)

    def paintEvent(self, event):
        if self._suppress_paint:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
        # 中心で回転させてから原点に戻し、アイコンを描く
        painter.translate(self._paint_center)
        painter.rotate(self._rotation)
        painter.translate(-self._paint_center)
        icon = self._scalable_icon if self._scalable else self._fixed_icon
        icon.paint(painter, self.rect())
        painter.end()

    # --- 設定 ---
    def set_use_scalable_icon(self, enabled: bool):
        self._scalable = bool(enabled)

    def use_scalable_icon(self) -> bool:
        return self._scalable

    def set_freeze_duration_ms(self, ms: int):
        """フリーズ時間(ms)を設定。負の値は 0 として扱う"""
        ms = ms if ms >= 0 else 0
        self.ramp_driver.set_freeze_duration(ms)
        self.tick_driver.set_freeze_duration(ms)

    def freeze_duration_ms(self) -> int:
        return self.ramp_driver.freeze_duration()

    def set_suppress_paint(self, enabled: bool):
        self._suppress_paint = bool(enabled)

    def suppress_paint(self) -> bool:
        return self._suppress_paint

    def set_use_internal_timer(self, enabled: bool):
        enabled = bool(enabled)
        if enabled == self._use_internal_timer:
            return
        self._use_internal_timer = enabled
        if self._running:
            # 両方止めてから選択された方だけを、現在の角度から再開
            self.ramp_driver.stop()
            self.tick_driver.stop()
            self.active_driver().start(self._rotation)
        logger.debug(f"内部タイマーモード: {enabled}")

    def use_internal_timer(self) -> bool:
        return self._use_internal_timer

    # --- 状態参照 ---
    def rotation(self) -> float:
        return self._rotation

    def paint_center(self) -> QPointF:
        return QPointF(self._paint_center)

    def is_running(self) -> bool:
        return self._running
