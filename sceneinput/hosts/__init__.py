"""
Host adapters for window systems that report coordinates instead of
widget handles.
"""

from sceneinput.hosts.hit_index import HitIndex
from sceneinput.hosts.pointer_router import PointerRouter, modifier_flags

__all__ = ["HitIndex", "PointerRouter", "modifier_flags"]
