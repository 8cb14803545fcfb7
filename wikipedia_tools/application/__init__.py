"""Application layer - Host container wiring services and tools together."""

from .host import PluginHost

__all__ = [
    "PluginHost"
]
