"""Module descriptors: what a module writes, creates and wires."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

FRAMEWORK_ROOT = "Assets/_Framework"


class TemplateFile(BaseModel):
    """A Jinja2 template and the logical path it is written to."""

    model_config = ConfigDict(frozen=True)

    template: str
    path: str


class ConfigAssetSpec(BaseModel):
    """A configuration asset of *type_name* created at *path*."""

    model_config = ConfigDict(frozen=True)

    type_name: str
    path: str


class ManagerSpec(BaseModel):
    """A root scene object carrying one behaviour component."""

    model_config = ConfigDict(frozen=True)

    object_name: str
    component: str


class ModuleDescriptor(BaseModel):
    """Immutable description of one installable framework module.

    Install state is never stored: :attr:`primary_file` existing on disk is
    what "installed" means.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    title: str
    description: str = ""
    icon: str = ""
    folder: str
    files: tuple[TemplateFile, ...]
    primary_file: str
    config_asset: ConfigAssetSpec | None = None
    marker: str | None = None
    managers: tuple[ManagerSpec, ...] = ()

    @model_validator(mode="after")
    def _check_paths(self) -> "ModuleDescriptor":
        if self.primary_file not in self.target_files:
            raise ValueError(f"primary_file {self.primary_file!r} is not one of the module files")
        prefix = self.folder.rstrip("/") + "/"
        outside = [f.path for f in self.files if not f.path.startswith(prefix)]
        if outside:
            raise ValueError(f"files outside module folder {self.folder!r}: {outside}")
        return self

    @property
    def target_files(self) -> frozenset[str]:
        return frozenset(f.path for f in self.files)

    @property
    def has_scene_wiring(self) -> bool:
        return self.marker is not None or bool(self.managers)
