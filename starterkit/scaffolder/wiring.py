"""Ensures marker and manager objects exist in the active scene.

Objects are matched by name only.  A found manager is returned as-is unless
repair is enabled, in which case a missing component is attached when its
type resolves.
"""

from __future__ import annotations

from starterkit.host import EditorHost, Scene, SceneObject
from starterkit.host.compiler import KIND_COMPONENT
from starterkit.utils import marker_name, print_info, print_success, print_warning

from .resolver import TypeResolver


class SceneWirer:
    def __init__(self, host: EditorHost, resolver: TypeResolver, repair: bool = False) -> None:
        self.host = host
        self.resolver = resolver
        self.repair = repair

    @property
    def scene(self) -> Scene:
        return self.host.scene

    def ensure_marker(self, label: str) -> SceneObject:
        """Return the ``------ label ------`` separator, creating it if absent."""
        name = marker_name(label)
        existing = self.scene.find(name)
        if existing is not None:
            return existing

        obj = self.scene.create_root(name)
        self.scene.undo.register_created(obj, f"Create {name}")
        self.scene.mark_dirty()
        return obj

    def ensure_manager(self, object_name: str, component_type_name: str) -> SceneObject:
        """Return the root object *object_name*, creating it with its component.

        When the component type is not compiled yet the object is still
        created, without the component, and a warning is printed.  There is
        no automatic retry.
        """
        existing = self.scene.find(object_name)
        if existing is not None:
            print_info(f"Skipped (already in scene): {object_name}")
            if self.repair and not existing.has_component(component_type_name):
                self._repair(existing, component_type_name)
            return existing

        obj = self.scene.create_root(object_name)
        handle = self.resolver.resolve_type(component_type_name)
        if handle is not None and handle.kind == KIND_COMPONENT:
            self.scene.add_component(obj, handle)
        else:
            print_warning(
                f"Component '{component_type_name}' not found yet; '{object_name}' "
                f"created without it. Attach it after the next recompile."
            )

        self.scene.undo.register_created(obj, f"Create {object_name}")
        self.scene.mark_dirty()
        print_success(f"Scene object created: {object_name}")
        return obj

    def _repair(self, obj: SceneObject, component_type_name: str) -> None:
        handle = self.resolver.resolve_type(component_type_name)
        if handle is None or handle.kind != KIND_COMPONENT:
            print_warning(f"Cannot repair '{obj.name}': '{component_type_name}' not compiled yet.")
            return
        self.scene.add_component(obj, handle)
        self.scene.mark_dirty()
        print_success(f"Attached missing component '{component_type_name}' to {obj.name}")
