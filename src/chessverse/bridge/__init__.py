"""Front-end adapters (PyQt6)."""

from chessverse.bridge.qt_bridge import GameBridge

__all__ = ["GameBridge"]
