"""Install orchestration for framework modules.

``install()`` runs in two phases:

1. Immediately: ensure the module folder and write every source template.
2. Deferred, after the host's next recompile: create the configuration asset,
   then the scene marker and manager objects.

Every step is independently idempotent, so installing a module again only
fills in whatever is missing.  Install state is never recorded; it is always
derived from what exists on disk and in the scene.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, Field

from starterkit.host import EditorHost
from starterkit.modules import MODULES, ConfigAssetSpec, ModuleDescriptor, UnknownModuleError
from starterkit.modules.descriptor import FRAMEWORK_ROOT
from starterkit.utils import marker_name, print_info, print_success

from .instantiator import AssetInstantiator
from .resolver import TypeResolver
from .templates import TemplateRenderer
from .wiring import SceneWirer
from .writer import IdempotentWriter


class InstallReport(BaseModel):
    """Artifact-by-artifact view of a module's install state."""

    module: str
    installed: bool
    files: dict[str, bool] = Field(default_factory=dict)
    config_asset: bool | None = None
    scene_objects: dict[str, bool] = Field(default_factory=dict)
    missing_components: list[str] = Field(default_factory=list)

    @property
    def complete(self) -> bool:
        return (
            all(self.files.values())
            and self.config_asset is not False
            and all(self.scene_objects.values())
            and not self.missing_components
        )


@dataclass(frozen=True)
class DashboardEntry:
    """A module bound to zero-argument install/query callables."""

    module: ModuleDescriptor
    install: Callable[[], None]
    is_installed: Callable[[], bool]


class ModuleInstaller:
    """Installs catalog modules into the project owned by *host*."""

    def __init__(
        self,
        host: EditorHost,
        renderer: TemplateRenderer | None = None,
        modules: dict[str, ModuleDescriptor] | None = None,
    ) -> None:
        self.host = host
        self.renderer = renderer or TemplateRenderer()
        self.modules = modules if modules is not None else MODULES
        self.resolver = TypeResolver(host.compiler)

        self.writer = IdempotentWriter(host)
        self.instantiator = AssetInstantiator(host, self.resolver)
        self.wirer = SceneWirer(
            host, self.resolver, repair=host.config.repair_scene_components
        )

    # -- Public API --------------------------------------------------------

    def install(self, module: ModuleDescriptor | str) -> None:
        """Scaffold *module*; asset and scene steps run on the next idle cycle."""
        module = self._module(module)

        # 1. Folder
        self.writer.ensure_folder(module.folder)

        # 2. Source templates
        context = self._build_context(module)
        for file in module.files:
            self.writer.write_file(file.path, self.renderer.render(file.template, context))

        # 3. Config asset, after the new types compile
        if module.config_asset is not None:
            self._schedule_config_asset(
                module.key, module.config_asset, self.host.config.deferred_retries
            )

        # 4. Scene wiring
        if module.has_scene_wiring:
            self.host.deferred.call_later(
                lambda: self._wire_scene(module), label=f"{module.key}: wire scene"
            )

        print_success(f"{module.title} module installed.")

    def is_installed(self, module: ModuleDescriptor | str) -> bool:
        """Cheap probe: does the module's primary file exist?"""
        return self.writer.file_exists(self._module(module).primary_file)

    def inspect(self, module: ModuleDescriptor | str) -> InstallReport:
        """Probe every artifact the module would create."""
        module = self._module(module)
        scene = self.host.scene

        report = InstallReport(
            module=module.key,
            installed=self.is_installed(module),
            files={f.path: self.writer.file_exists(f.path) for f in module.files},
        )
        if module.config_asset is not None:
            report.config_asset = self.host.assets.exists(module.config_asset.path)
        if module.marker is not None:
            name = marker_name(module.marker)
            report.scene_objects[name] = scene.find(name) is not None
        for manager in module.managers:
            obj = scene.find(manager.object_name)
            report.scene_objects[manager.object_name] = obj is not None
            if obj is not None and not obj.has_component(manager.component):
                report.missing_components.append(f"{manager.object_name}.{manager.component}")
        return report

    def dashboard_entries(self) -> list[DashboardEntry]:
        return [
            DashboardEntry(
                module=module,
                install=lambda m=module: self.install(m),
                is_installed=lambda m=module: self.is_installed(m),
            )
            for module in self.modules.values()
        ]

    # -- Deferred steps ----------------------------------------------------

    def _schedule_config_asset(self, key: str, spec: ConfigAssetSpec, retries: int) -> None:
        def create_config_asset() -> None:
            asset = self.instantiator.create_config_asset(spec.type_name, spec.path)
            if asset is None and retries > 0 and self.resolver.resolve_type(spec.type_name) is None:
                print_info(f"Retrying {spec.type_name} on the next idle cycle.")
                self._schedule_config_asset(key, spec, retries - 1)

        self.host.deferred.call_later(
            create_config_asset, label=f"{key}: create {spec.path}"
        )

    def _wire_scene(self, module: ModuleDescriptor) -> None:
        if module.marker is not None:
            self.wirer.ensure_marker(module.marker)
        for manager in module.managers:
            self.wirer.ensure_manager(manager.object_name, manager.component)

    # -- Helpers -----------------------------------------------------------

    def _module(self, module: ModuleDescriptor | str) -> ModuleDescriptor:
        if isinstance(module, ModuleDescriptor):
            return module
        try:
            return self.modules[module]
        except KeyError:
            raise UnknownModuleError(module) from None

    def _build_context(self, module: ModuleDescriptor) -> dict[str, Any]:
        """Template context shared by every file of *module*."""
        paths: dict[str, str] = {}
        for other in self.modules.values():
            if other.config_asset is not None:
                paths[other.config_asset.type_name] = other.config_asset.path
        return {
            "framework_root": FRAMEWORK_ROOT,
            "module_key": module.key,
            "module_title": module.title,
            "asset_paths": paths,
        }
