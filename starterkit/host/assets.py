"""Host asset database.

Configuration assets are persisted as small YAML documents::

    type: AdsConfig
    data:
      active_environment: dev
      ...

The ``data`` block is validated with the pydantic schema registered for the
asset type; types without a registered schema load into :class:`GenericAsset`.
Creating or dirtying an asset only stages it -- :meth:`AssetIndex.save_assets`
flushes staged assets to disk.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

import yaml
from pydantic import BaseModel, ConfigDict

from .paths import PathResolver


class GenericAsset(BaseModel):
    """Fallback schema for asset types with no registered model."""

    model_config = ConfigDict(extra="allow")


@dataclass
class Asset:
    """Handle to a configuration asset at a logical path."""

    path: str
    type_name: str
    data: BaseModel


class AssetIndex:
    """Tracks project assets and persists configuration objects."""

    def __init__(
        self,
        paths: PathResolver,
        schemas: Mapping[str, type[BaseModel]] | None = None,
        root_folder: str = "Assets",
    ) -> None:
        self.paths = paths
        self.schemas = dict(schemas or {})
        self.root_folder = root_folder
        self.known: set[str] = set()
        self.imported: list[str] = []
        self._loaded: dict[str, Asset] = {}
        self._staged: dict[str, Asset] = {}

    # -- Index maintenance -------------------------------------------------

    def import_path(self, logical_path: str) -> None:
        """Register a single freshly created file or folder with the index."""
        if self.paths.resolve(logical_path).exists():
            self.known.add(logical_path)
        self.imported.append(logical_path)

    def refresh(self) -> int:
        """Rescan the whole asset tree and return the number of known paths.

        Cached assets that are not staged are dropped, so the next load
        rereads whatever is on disk now.
        """
        root = self.paths.resolve(self.root_folder)
        self.known = set()
        if root.is_dir():
            self.known.add(self.root_folder)
            for entry in root.rglob("*"):
                self.known.add(self.paths.to_logical(entry))
        self.known.update(self._staged)
        self._loaded = {}
        return len(self.known)

    def exists(self, logical_path: str) -> bool:
        return logical_path in self._staged or self.paths.resolve(logical_path).is_file()

    # -- Asset access ------------------------------------------------------

    def load_asset(self, logical_path: str) -> Asset | None:
        """Return the asset at *logical_path*, or ``None`` if there is none.

        Raises:
            yaml.YAMLError: If the file exists but is not valid YAML.
            pydantic.ValidationError: If the data does not fit its schema.
        """
        if logical_path in self._staged:
            return self._staged[logical_path]

        file_path = self.paths.resolve(logical_path)
        if not file_path.is_file():
            self._loaded.pop(logical_path, None)
            return None
        if logical_path in self._loaded:
            return self._loaded[logical_path]

        document = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
        type_name = str(document.get("type", ""))
        schema = self.schemas.get(type_name, GenericAsset)
        asset = Asset(
            path=logical_path,
            type_name=type_name,
            data=schema.model_validate(document.get("data") or {}),
        )
        self._loaded[logical_path] = asset
        return asset

    def create_asset(self, instance: BaseModel, logical_path: str, type_name: str) -> Asset:
        """Stage a new asset at *logical_path*.

        Raises:
            FileExistsError: If an asset is already present at the path.
        """
        if self.exists(logical_path):
            raise FileExistsError(f"Asset already exists: {logical_path}")
        asset = Asset(path=logical_path, type_name=type_name, data=instance)
        self._staged[logical_path] = asset
        self._loaded[logical_path] = asset
        self.known.add(logical_path)
        return asset

    def set_dirty(self, asset: Asset) -> None:
        """Mark a loaded asset as modified so the next save writes it."""
        self._staged[asset.path] = asset

    def save_assets(self) -> list[str]:
        """Write every staged asset to disk and return their logical paths."""
        written: list[str] = []
        for logical_path, asset in list(self._staged.items()):
            _write_asset(self.paths.resolve(logical_path), asset)
            del self._staged[logical_path]
            written.append(logical_path)
        return written

    @property
    def pending(self) -> list[str]:
        """Logical paths of staged, not yet flushed, assets."""
        return list(self._staged)


def _write_asset(path: Path, asset: Asset) -> None:
    document = {
        "type": asset.type_name,
        "data": asset.data.model_dump(mode="json"),
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        yaml.safe_dump(document, sort_keys=False, allow_unicode=True),
        encoding="utf-8",
    )
