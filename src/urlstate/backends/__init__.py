"""Navigation backends: the address bar and history surface urlstate drives."""

from .base import NavigationBackend
from .memory import MemoryHistoryBackend

__all__ = ["NavigationBackend", "MemoryHistoryBackend"]
