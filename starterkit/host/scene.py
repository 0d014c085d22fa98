"""The active scene graph.

Only the parts of a scene the installer touches are modelled: named root
objects carrying a list of component type names, a dirty flag, and an undo
history of created objects.  The graph is persisted as YAML so that later
runs see what earlier runs created.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from .compiler import KIND_COMPONENT, TypeHandle


class SceneObject(BaseModel):
    """A named object in the scene hierarchy."""

    name: str
    components: list[str] = Field(default_factory=list)
    parent: str | None = None

    def has_component(self, type_name: str) -> bool:
        return type_name in self.components


class UndoHistory:
    """Records created objects so the most recent creation can be reverted."""

    def __init__(self, scene: "Scene") -> None:
        self.scene = scene
        self.entries: list[tuple[str, SceneObject]] = []

    def register_created(self, obj: SceneObject, label: str) -> None:
        self.entries.append((label, obj))

    def undo(self) -> str | None:
        """Remove the most recently created object.  Returns its undo label."""
        if not self.entries:
            return None
        label, obj = self.entries.pop()
        self.scene.remove(obj)
        self.scene.mark_dirty()
        return label


class Scene:
    """Root-level scene objects plus dirty tracking and persistence."""

    def __init__(self, name: str, path: Path | None = None) -> None:
        self.name = name
        self.path = path
        self.roots: list[SceneObject] = []
        self.dirty = False
        self.undo = UndoHistory(self)

    @classmethod
    def open(cls, name: str, path: Path) -> "Scene":
        """Load the scene stored at *path*, or start an empty one."""
        scene = cls(name, path)
        if path.is_file():
            document = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
            scene.roots = [
                SceneObject.model_validate(raw) for raw in document.get("objects", [])
            ]
        return scene

    # -- Queries -----------------------------------------------------------

    def find(self, name: str) -> SceneObject | None:
        """Return the first root object called *name*."""
        for obj in self.roots:
            if obj.name == name:
                return obj
        return None

    def count(self, name: str) -> int:
        return sum(1 for obj in self.roots if obj.name == name)

    # -- Mutation ----------------------------------------------------------

    def create_root(self, name: str) -> SceneObject:
        """Append a new parentless object.  Names are not checked for uniqueness."""
        obj = SceneObject(name=name)
        self.roots.append(obj)
        return obj

    def add_component(self, obj: SceneObject, handle: TypeHandle) -> None:
        """Attach a component of the resolved type to *obj*.

        Raises:
            TypeError: If *handle* is not a component type.
        """
        if handle.kind != KIND_COMPONENT:
            raise TypeError(f"'{handle.name}' is not a component type ({handle.kind})")
        obj.components.append(handle.name)

    def remove(self, obj: SceneObject) -> None:
        self.roots = [existing for existing in self.roots if existing is not obj]

    def mark_dirty(self) -> None:
        self.dirty = True

    # -- Persistence -------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Write the scene to disk and clear the dirty flag."""
        target = path or self.path
        if target is None:
            raise ValueError(f"Scene '{self.name}' has no path to save to")
        document = {
            "name": self.name,
            "objects": [obj.model_dump() for obj in self.roots],
        }
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(
            yaml.safe_dump(document, sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )
        self.path = target
        self.dirty = False
        return target
