"""hookscope package initialization."""
from __future__ import annotations

from .config import EngineConfig, load_config
from .core.scope import TestScope
from .version import __version__

__all__ = [
    "__version__",
    "EngineConfig",
    "TestScope",
    "load_config",
]
