"""In-process model of the editor host: paths, assets, compiler, scene, idle queue."""

from starterkit.host.assets import Asset, AssetIndex, GenericAsset
from starterkit.host.compiler import (
    EDITOR_UNIT,
    GLOBAL_UNIT,
    RUNTIME_UNIT,
    SEARCH_ORDER,
    Compiler,
    TypeHandle,
)
from starterkit.host.editor import EditorHost
from starterkit.host.paths import PathResolver
from starterkit.host.scene import Scene, SceneObject
from starterkit.host.scheduler import DeferredCall, DeferredQueue

__all__ = [
    "Asset",
    "AssetIndex",
    "Compiler",
    "DeferredCall",
    "DeferredQueue",
    "EDITOR_UNIT",
    "EditorHost",
    "GLOBAL_UNIT",
    "GenericAsset",
    "PathResolver",
    "RUNTIME_UNIT",
    "SEARCH_ORDER",
    "Scene",
    "SceneObject",
    "TypeHandle",
]
