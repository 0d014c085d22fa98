"""The editor host that scaffolding runs inside."""

from __future__ import annotations

from typing import Callable, Mapping

from pydantic import BaseModel

from starterkit.config import Config

from .assets import AssetIndex
from .compiler import Compiler
from .paths import PathResolver
from .scene import Scene
from .scheduler import DeferredQueue


class EditorHost:
    """Bundles the host services used by the scaffolder.

    Attributes:
        config: Tool configuration.
        paths: Logical-path resolver rooted at the project.
        assets: Asset database.
        compiler: Type discovery over the project's sources.
        scene: The active scene.
        deferred: Queue drained on every :meth:`idle` call.
    """

    def __init__(
        self,
        config: Config,
        schemas: Mapping[str, type[BaseModel]] | None = None,
        builtins: Mapping[str, str] | None = None,
    ) -> None:
        if schemas is None:
            from starterkit.modules.schemas import CONFIG_SCHEMAS

            schemas = CONFIG_SCHEMAS
        factories: dict[str, Callable[[], BaseModel]] = dict(schemas)

        self.config = config
        self.paths = PathResolver(config.project_root)
        self.assets = AssetIndex(self.paths, schemas)
        self.compiler = Compiler(self.paths, factories=factories, builtins=builtins)
        self.scene = Scene.open(config.scene_name, config.scene_path)
        self.deferred = DeferredQueue()

    @classmethod
    def open(cls, config: Config, **kwargs) -> "EditorHost":
        """Create a host and compile the project once, as on editor startup."""
        host = cls(config, **kwargs)
        host.assets.refresh()
        host.compiler.compile()
        return host

    def refresh(self) -> None:
        """Rescan assets and recompile sources."""
        self.assets.refresh()
        self.compiler.compile()

    def idle(self) -> int:
        """One idle cycle: refresh, recompile, then drain the deferred queue.

        Returns:
            Number of deferred calls that ran.
        """
        self.refresh()
        return self.deferred.drain()

    def run_until_idle(self, max_cycles: int = 10) -> int:
        """Run idle cycles until the deferred queue is empty or *max_cycles* is hit."""
        cycles = 0
        while self.deferred and cycles < max_cycles:
            self.idle()
            cycles += 1
        return cycles

    def save(self) -> list[str]:
        """Flush staged assets and the scene if it is dirty."""
        written = self.assets.save_assets()
        if self.scene.dirty:
            self.scene.save()
            written.append(self.paths.to_logical(self.config.scene_path))
        return written
