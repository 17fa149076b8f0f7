# sceneinput/__init__.py
"""
sceneinput - input routing between a host window system and a
Surface -> Panel -> Item scene graph.

Core components:
- Surface / Panel / Item: the scene graph and its handle registry
- InputDispatcher: resolves event sources and applies per-node policies
- SignalBridge: routing notifications (drags, key broadcast, misses)
- HitIndex / PointerRouter: adapters for coordinate-only hosts
"""

from .input.events import (
    EventType,
    InputEvent,
    PointerEvent,
    KeyEvent,
    ActionEvent,
)

from .core import (
    Vec2,
    SignalBridge,
    SignalDebugger,
)

from .scene import (
    Handle,
    Surface,
    Panel,
    Item,
    PassiveItem,
    InteractiveItem,
    DragConfig,
    DragPhase,
    NodeKind,
)

from .input.dispatcher import InputDispatcher, DispatcherConfig

from .hosts import HitIndex, PointerRouter

__version__ = '0.1.0'

__all__ = [
    # Events
    'EventType',
    'InputEvent',
    'PointerEvent',
    'KeyEvent',
    'ActionEvent',

    # Core
    'Vec2',
    'SignalBridge',
    'SignalDebugger',

    # Scene
    'Handle',
    'Surface',
    'Panel',
    'Item',
    'PassiveItem',
    'InteractiveItem',
    'DragConfig',
    'DragPhase',
    'NodeKind',

    # Dispatch
    'InputDispatcher',
    'DispatcherConfig',

    # Hosts
    'HitIndex',
    'PointerRouter',
]
