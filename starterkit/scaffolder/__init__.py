"""StarterKit scaffolder -- writes module sources, assets and scene wiring.

Quick usage::

    from starterkit.scaffolder import ModuleInstaller

    installer = ModuleInstaller(host)
    installer.install("ads")
    host.idle()
"""

from starterkit.scaffolder.installer import DashboardEntry, InstallReport, ModuleInstaller
from starterkit.scaffolder.instantiator import AssetInstantiator
from starterkit.scaffolder.resolver import TypeResolver
from starterkit.scaffolder.templates import TemplateRenderer
from starterkit.scaffolder.wiring import SceneWirer
from starterkit.scaffolder.writer import IdempotentWriter

__all__ = [
    "AssetInstantiator",
    "DashboardEntry",
    "IdempotentWriter",
    "InstallReport",
    "ModuleInstaller",
    "SceneWirer",
    "TemplateRenderer",
    "TypeResolver",
]
