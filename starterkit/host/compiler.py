"""Host compiler model.

The editor only knows about types it has compiled.  :class:`Compiler` scans
the project's C# sources for class declarations and sorts them into
compilation units the way Unity does: anything below an ``Editor/`` folder
goes to the editor assembly, everything else to the runtime assembly.  A
third, global unit holds engine built-ins.

A type becomes visible only after :meth:`Compiler.compile` has seen its
source, which is what makes freshly written scripts unresolvable until the
next idle cycle.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Mapping

from pydantic import BaseModel

from .assets import GenericAsset
from .paths import PathResolver

RUNTIME_UNIT = "Assembly-CSharp"
EDITOR_UNIT = "Assembly-CSharp-Editor"
GLOBAL_UNIT = "global"

# Most likely location of a freshly generated user type first.
SEARCH_ORDER: tuple[str, ...] = (RUNTIME_UNIT, EDITOR_UNIT, GLOBAL_UNIT)

KIND_ASSET = "asset"
KIND_COMPONENT = "component"
KIND_CLASS = "class"

BUILTIN_TYPES: dict[str, str] = {
    "GameObject": KIND_CLASS,
    "Transform": KIND_COMPONENT,
    "Camera": KIND_COMPONENT,
    "Light": KIND_COMPONENT,
    "AudioSource": KIND_COMPONENT,
    "AudioListener": KIND_COMPONENT,
}

_KIND_BY_BASE: dict[str, str] = {
    "ScriptableObject": KIND_ASSET,
    "MonoBehaviour": KIND_COMPONENT,
}

_CLASS_RE = re.compile(
    r"^[ \t]*(?:(?:public|internal|sealed|abstract|static|partial)\s+)*"
    r"class\s+(?P<name>\w+)(?:\s*:\s*(?P<base>[\w.]+))?",
    re.MULTILINE,
)


@dataclass(frozen=True)
class TypeHandle:
    """A compiled type, addressable by its simple name."""

    name: str
    unit: str
    kind: str = KIND_CLASS
    source: str | None = None
    factory: Callable[[], BaseModel] | None = None

    def instantiate(self) -> BaseModel:
        """Return a default-constructed instance of this type."""
        if self.factory is None:
            return GenericAsset()
        return self.factory()


class Compiler:
    """Discovers C# types under the project's asset root."""

    def __init__(
        self,
        paths: PathResolver,
        factories: Mapping[str, Callable[[], BaseModel]] | None = None,
        builtins: Mapping[str, str] | None = None,
        root_folder: str = "Assets",
    ) -> None:
        self.paths = paths
        self.factories = dict(factories or {})
        self.root_folder = root_folder
        self.generation = 0
        builtin_kinds = BUILTIN_TYPES if builtins is None else builtins
        self.units: dict[str, dict[str, TypeHandle]] = {
            RUNTIME_UNIT: {},
            EDITOR_UNIT: {},
            GLOBAL_UNIT: {
                name: TypeHandle(name=name, unit=GLOBAL_UNIT, kind=kind)
                for name, kind in builtin_kinds.items()
            },
        }

    def compile(self) -> int:
        """Rebuild the runtime and editor units from the sources on disk.

        Returns:
            Number of user types discovered.
        """
        runtime: dict[str, TypeHandle] = {}
        editor: dict[str, TypeHandle] = {}
        root = self.paths.resolve(self.root_folder)

        if root.is_dir():
            for source in sorted(root.rglob("*.cs")):
                in_editor = "Editor" in source.relative_to(root).parts[:-1]
                unit_name = EDITOR_UNIT if in_editor else RUNTIME_UNIT
                target = editor if in_editor else runtime
                logical = self.paths.to_logical(source)
                text = source.read_text(encoding="utf-8", errors="replace")
                for match in _CLASS_RE.finditer(text):
                    name = match.group("name")
                    if name in target:
                        continue
                    base = (match.group("base") or "").rsplit(".", 1)[-1]
                    target[name] = TypeHandle(
                        name=name,
                        unit=unit_name,
                        kind=_KIND_BY_BASE.get(base, KIND_CLASS),
                        source=logical,
                        factory=self.factories.get(name),
                    )

        self.units[RUNTIME_UNIT] = runtime
        self.units[EDITOR_UNIT] = editor
        self.generation += 1
        return len(runtime) + len(editor)

    def lookup(self, unit: str, name: str) -> TypeHandle | None:
        """Return *name* from a single compilation unit."""
        return self.units.get(unit, {}).get(name)
