"""Creates configuration assets of types that may have just been generated."""

from __future__ import annotations

from starterkit.host import Asset, EditorHost
from starterkit.host.compiler import KIND_ASSET
from starterkit.utils import print_info, print_success, print_warning

from .resolver import TypeResolver


class AssetInstantiator:
    def __init__(self, host: EditorHost, resolver: TypeResolver) -> None:
        self.host = host
        self.resolver = resolver

    def create_config_asset(self, type_name: str, logical_path: str) -> Asset | None:
        """Create a default *type_name* asset at *logical_path* if none exists.

        Returns the existing asset unchanged when one is already there, the
        new asset after flushing it to disk otherwise, and ``None`` when the
        type is not compiled yet (nothing is written in that case).
        """
        handle = self.resolver.resolve_type(type_name)
        if handle is None:
            print_warning(
                f"Type '{type_name}' not found yet; will retry after next recompile."
            )
            return None
        if handle.kind != KIND_ASSET:
            print_warning(
                f"Type '{type_name}' is a {handle.kind}, not a ScriptableObject; "
                f"skipping {logical_path}."
            )
            return None

        existing = self.host.assets.load_asset(logical_path)
        if existing is not None:
            print_info(f"Skipped asset (already exists): {logical_path}")
            return existing

        asset = self.host.assets.create_asset(handle.instantiate(), logical_path, handle.name)
        self.host.assets.save_assets()
        print_success(f"Created asset: {logical_path}")
        return asset
