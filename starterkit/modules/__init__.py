"""Module registry.

The catalog is static: descriptors are built at import time and never
mutated.  Look modules up by key with :func:`get_module`.
"""

from __future__ import annotations

from starterkit.modules.catalog import CATALOG
from starterkit.modules.descriptor import (
    FRAMEWORK_ROOT,
    ConfigAssetSpec,
    ManagerSpec,
    ModuleDescriptor,
    TemplateFile,
)


class UnknownModuleError(KeyError):
    """Raised when a module key is not in the catalog."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unknown module '{key}'. Available: {', '.join(module_keys())}")

    def __str__(self) -> str:
        return self.args[0]


MODULES: dict[str, ModuleDescriptor] = {module.key: module for module in CATALOG}


def module_keys() -> list[str]:
    return list(MODULES)


def get_module(key: str) -> ModuleDescriptor:
    """Return the descriptor for *key*.

    Raises:
        UnknownModuleError: If *key* is not a catalog module.
    """
    try:
        return MODULES[key]
    except KeyError:
        raise UnknownModuleError(key) from None


__all__ = [
    "CATALOG",
    "ConfigAssetSpec",
    "FRAMEWORK_ROOT",
    "MODULES",
    "ManagerSpec",
    "ModuleDescriptor",
    "TemplateFile",
    "UnknownModuleError",
    "get_module",
    "module_keys",
]
