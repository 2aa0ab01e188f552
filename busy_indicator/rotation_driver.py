"""
回転角を時間とともに進めるドライバ

- RampRotationDriver: QVariantAnimationで 2000ms ごとに 360度 をループ
- TickRotationDriver: QTimerの周期ごとに経過時間から角度を加算
どちらも rotationChanged(float) を発行し、ウィジェットはそれを受けて再描画する。
"""

import math

from PyQt6.QtCore import QObject, QVariantAnimation, QTimer, QElapsedTimer, QThread, Qt, pyqtSignal

from busy_indicator.logger import get_logger

logger = get_logger("rotation_driver")

# 1回転にかかる時間(ms)
ROTATION_PERIOD_MS = 2000
# 内部タイマーの既定周期(60Hz)
DEFAULT_TICK_INTERVAL_MS = 1000 // 60


def freeze_frame(ms: int):
    """
    呼び出し元のスレッドを ms ミリ秒ブロックする。
    アニメーションのコールバック内で呼ぶと UI スレッド全体が止まる点に注意。
    """
    QThread.msleep(ms)


class RotationDriver(QObject):
    """回転ドライバの共通インターフェース"""

    rotationChanged = pyqtSignal(float)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._freeze_duration = 0

    def set_freeze_duration(self, ms: int):
        self._freeze_duration = ms if ms >= 0 else 0

    def freeze_duration(self) -> int:
        return self._freeze_duration

    def start(self, from_degrees: float = 0.0):
        raise NotImplementedError

    def stop(self):
        raise NotImplementedError

    def is_running(self) -> bool:
        raise NotImplementedError


class RampRotationDriver(RotationDriver):
    """0→360 のランプを無限ループさせる（既定のモード）"""

    def __init__(self, parent=None, stall=freeze_frame):
        super().__init__(parent)
        self.stall = stall
        self.animation = QVariantAnimation(self)
        self.animation.setLoopCount(-1)
        self.animation.setDuration(ROTATION_PERIOD_MS)
        self.animation.setStartValue(0.0)
        self.animation.setEndValue(360.0)
        self.animation.valueChanged.connect(self._on_value_changed)

    def _on_value_changed(self, value):
        self.rotationChanged.emit(math.fmod(float(value), 360.0))
        if self._freeze_duration:
            self.stall(self._freeze_duration)

    def start(self, from_degrees: float = 0.0):
        # 開始角をずらしたランプにすることで、再開時に角度が 0 に戻らない
        self.animation.stop()
        self.animation.setStartValue(float(from_degrees))
        self.animation.setEndValue(float(from_degrees) + 360.0)
        self.animation.start()
        logger.debug(f"ランプアニメーション開始: {from_degrees:.1f}度から")

    def stop(self):
        if self.animation.state() != QVariantAnimation.State.Stopped:
            self.animation.stop()
            logger.debug("ランプアニメーション停止")

    def is_running(self) -> bool:
        return self.animation.state() == QVariantAnimation.State.Running


class TickRotationDriver(RotationDriver):
    """一定周期のタイマーで経過時間を測り、角度を積算する"""

    def __init__(self, parent=None, elapsed_timer=None):
        super().__init__(parent)
        self.rotation = 0.0
        self.elapsed_timer = elapsed_timer if elapsed_timer is not None else QElapsedTimer()
        self.timer = QTimer(self)
        self.timer.setTimerType(Qt.TimerType.PreciseTimer)
        self.timer.setInterval(DEFAULT_TICK_INTERVAL_MS)
        self.timer.timeout.connect(self.tick)

    def set_freeze_duration(self, ms: int):
        super().set_freeze_duration(ms)
        # setInterval は動作中のタイマーにも即座に反映される
        self.timer.setInterval(self.interval())

    def interval(self) -> int:
        """現在のタイマー周期(ms)"""
        if self._freeze_duration > 0:
            return self._freeze_duration
        return DEFAULT_TICK_INTERVAL_MS

    def start(self, from_degrees: float = 0.0):
        self.rotation = float(from_degrees)
        self.elapsed_timer.start()
        self.timer.start()
        logger.debug(f"内部タイマー開始: 周期 {self.timer.interval()}ms")

    def stop(self):
        if self.timer.isActive():
            self.timer.stop()
            logger.debug("内部タイマー停止")

    def is_running(self) -> bool:
        return self.timer.isActive()

    def tick(self):
        elapsed = self.elapsed_timer.restart()
        # フリーズ時間やイベントループの停滞で1周期が1回転を超えることもある
        self.rotation = math.fmod(self.rotation + elapsed * 360 / ROTATION_PERIOD_MS, 360.0)
        self.rotationChanged.emit(self.rotation)
