# sceneinput/core/__init__.py
from .geometry import Vec2, clamp
from .signal import SignalBridge, SignalDebugger, SignalEmitter, Connection

__all__ = [
    'Vec2', 'clamp',
    'SignalBridge', 'SignalDebugger', 'SignalEmitter', 'Connection',
]
