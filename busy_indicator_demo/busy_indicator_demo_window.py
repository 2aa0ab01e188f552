import sys
import argparse
from dataclasses import dataclass, replace
from PyQt6.QtWidgets import (
    QApplication, QWidget, QLabel, QToolButton, QSlider, QVBoxLayout, QHBoxLayout
)
from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtCore import Qt

from busy_indicator.busy_indicator_widget import BusyIndicatorWidget
from busy_indicator.logger import setup_logger, get_logger
from busy_indicator_demo.demo_settings import (
    DemoSettings, MAX_FREEZE_DURATION, clamp_freeze_duration, load_settings, save_settings
)

logger = get_logger("busy_indicator_demo")


class ToggleToolButton(QToolButton):
    def __init__(self, text, checked, parent=None):
        super().__init__(parent)
        self.setText(text)
        self.setCheckable(True)
        self.setChecked(checked)


@dataclass
class DemoState:
    """スライダーとFreezeボタンが共有するフリーズ時間(ms)"""
    freeze_duration: int = 250


class BusyIndicatorDemoWindow(QWidget):
    """BusyIndicatorWidget の各設定を手動で確認するための画面"""

    def __init__(self, freeze_duration=None, settings=None, settings_path=None, parent=None):
        super().__init__(parent)
        self.settings_path = settings_path
        settings = settings or DemoSettings()
        if freeze_duration is not None:
            settings = replace(settings, freeze_duration=freeze_duration)
        self.state = DemoState(freeze_duration=settings.freeze_duration)

        self.setWindowTitle("BusyIndicatorWidget テスト")
        self.setBaseSize(128, 128)
        layout = QVBoxLayout(self)

        # インジケータ + ラベルの行（Visibleボタンで表示切替）
        self.busy_row = QWidget(self)
        busy_layout = QHBoxLayout(self.busy_row)
        self.indicator = BusyIndicatorWidget(self)
        self.busy_label = QLabel("Busy...", self)
        busy_layout.addWidget(self.indicator)
        busy_layout.addWidget(self.busy_label)

        buttons = QHBoxLayout()
        self.btn_visible = ToggleToolButton("Visible", True, self)
        self.btn_scalable = ToggleToolButton("Scalable", settings.scalable, self)
        self.btn_scalable.setToolTip("Use a scalable (svg) or fixed (raster) icon")
        self.btn_freeze = ToggleToolButton("Freeze", settings.freeze_enabled, self)
        self.btn_bogus = ToggleToolButton("Bogus", settings.bogus, self)
        self.btn_bogus.setToolTip("Run bogus animation loop")
        self.btn_timer = ToggleToolButton("Timer", settings.internal_timer, self)
        self.btn_timer.setToolTip("Drive the rotation with an internal timer")
        self.freeze_slider = QSlider(Qt.Orientation.Horizontal, self)
        self.freeze_slider.setRange(0, MAX_FREEZE_DURATION)
        self.freeze_slider.setValue(self.state.freeze_duration)
        self._update_freeze_tooltip()

        # 復元した状態をウィジェットへ反映
        self.indicator.set_use_scalable_icon(settings.scalable)
        self.indicator.set_suppress_paint(settings.bogus)
        self.indicator.set_use_internal_timer(settings.internal_timer)
        if settings.freeze_enabled:
            self.indicator.set_freeze_duration_ms(self.state.freeze_duration)

        self.btn_visible.clicked.connect(self.toggle_visible)
        self.btn_scalable.toggled.connect(self.indicator.set_use_scalable_icon)
        self.btn_freeze.toggled.connect(self.on_freeze_toggled)
        self.freeze_slider.valueChanged.connect(self.on_freeze_slider_changed)
        self.btn_bogus.toggled.connect(self.indicator.set_suppress_paint)
        self.btn_timer.toggled.connect(self.indicator.set_use_internal_timer)

        for btn in (self.btn_visible, self.btn_scalable, self.btn_freeze, self.btn_bogus, self.btn_timer):
            buttons.addWidget(btn)
        layout.addLayout(buttons)
        layout.addWidget(self.freeze_slider)
        layout.addWidget(self.busy_row)
        layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        QShortcut(QKeySequence(QKeySequence.StandardKey.Quit), self).activated.connect(self.close)
        QShortcut(QKeySequence(QKeySequence.StandardKey.Cancel), self).activated.connect(self.close)

    def _update_freeze_tooltip(self):
        self.btn_freeze.setToolTip(
            f"Freeze the animation for {self.state.freeze_duration}ms between frames"
        )

    def toggle_visible(self):
        self.busy_row.setVisible(not self.busy_row.isVisible())

    def apply_freeze(self):
        """Freezeボタンの状態に応じて共有値または 0 をウィジェットへ設定"""
        if self.btn_freeze.isChecked():
            self.indicator.set_freeze_duration_ms(self.state.freeze_duration)
            logger.warning(f"Freezing {self.state.freeze_duration} ms between frames")
        else:
            self.indicator.set_freeze_duration_ms(0)

    def on_freeze_toggled(self, checked):
        self.apply_freeze()

    def on_freeze_slider_changed(self, value):
        if value == self.state.freeze_duration:
            return
        self.state.freeze_duration = value
        self._update_freeze_tooltip()
        self.apply_freeze()

    def current_settings(self) -> DemoSettings:
        return DemoSettings(
            freeze_duration=self.state.freeze_duration,
            scalable=self.btn_scalable.isChecked(),
            freeze_enabled=self.btn_freeze.isChecked(),
            bogus=self.btn_bogus.isChecked(),
            internal_timer=self.btn_timer.isChecked(),
        )

    def closeEvent(self, event):
        save_settings(self.current_settings(), self.settings_path)
        super().closeEvent(event)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="BusyIndicatorWidget test harness")
    parser.add_argument(
        "--freezeDuration",
        dest="freeze_duration",
        type=int,
        default=None,
        metavar="MS",
        help="the time (in ms) animation can be frozen between frames (must be in [0,1000])",
    )
    parser.add_argument("--verbose", action="store_true", help="DEBUGログをコンソールに出す")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logger(level="DEBUG" if args.verbose else "INFO")
    freeze_duration = None
    if args.freeze_duration is not None:
        freeze_duration = clamp_freeze_duration(args.freeze_duration)
    app = QApplication.instance() or QApplication(sys.argv[:1])
    win = BusyIndicatorDemoWindow(freeze_duration=freeze_duration, settings=load_settings())
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
