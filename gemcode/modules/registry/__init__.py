"""Registry module: piece-number sequences and stored codes."""

from gemcode.modules.registry.service import CodeRegistryService

__all__ = [
    "CodeRegistryService",
]
