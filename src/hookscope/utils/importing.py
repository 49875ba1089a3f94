"""Utility helpers for dynamic imports of suite modules."""
from __future__ import annotations

import importlib
import importlib.util
import sys
from pathlib import Path
from types import ModuleType
from typing import Any


def import_string(path: str) -> Any:
    """Return the module or attribute named by ``path``.

    Supports ``module:attr`` syntax; a bare ``module`` returns the module.
    """

    if not path:
        raise ValueError("Empty import path provided")
    module_name, sep, attr = path.partition(":")
    if sep and not attr:
        raise ValueError(f"Invalid import path '{path}'")
    module = importlib.import_module(module_name)
    if not attr:
        return module
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise AttributeError(f"Module '{module_name}' has no attribute '{attr}'") from exc


def load_module_from_source(source: Path) -> ModuleType:
    """Import the Python file at ``source`` under a private module name."""

    path = source.expanduser().resolve()
    if not path.exists():
        raise FileNotFoundError(f"Suite file not found: {path}")
    module_name = f"hookscope_suite_{path.stem}_{hash(str(path)) & 0xFFFF:x}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Unable to load module from {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module
