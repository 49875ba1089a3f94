"""Host protocols and the in-memory stub host."""
from .base import ElementProtocol, HostProtocol, MeasureCallback, RegistryProtocol
from .stub import HookStore, NativeStubElement, StubElement, StubHost

__all__ = [
    "ElementProtocol",
    "HostProtocol",
    "MeasureCallback",
    "RegistryProtocol",
    "HookStore",
    "NativeStubElement",
    "StubElement",
    "StubHost",
]
