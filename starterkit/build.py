"""Environment switching and player-settings resolution over config assets.

These helpers operate on the assets the Ads and Build Scripts modules
create.  Invoking the engine's packaging backend is left to the generated
``BuildScript`` inside the editor; here we only compute and persist what it
would apply.
"""

from __future__ import annotations

from pydantic import BaseModel

from starterkit.host import Asset, EditorHost
from starterkit.modules import get_module
from starterkit.modules.schemas import AdsConfig, BuildConfig, Environment, Platform
from starterkit.utils import print_error, print_info, print_success


class PlayerSettings(BaseModel):
    """What a build would apply for the active identity."""

    target: Platform
    environment: Environment
    product_name: str
    application_identifier: str
    bundle_version: str
    version_code: int
    output_path: str
    scenes: list[str]
    keystore_path: str | None = None
    key_alias: str | None = None


def _asset_path(module_key: str) -> str:
    spec = get_module(module_key).config_asset
    if spec is None:
        raise KeyError(f"Module '{module_key}' has no config asset")
    return spec.path


def load_build_config(host: EditorHost) -> Asset | None:
    """Load the BuildConfig asset, reporting an error when it is missing."""
    path = _asset_path("build")
    asset = host.assets.load_asset(path)
    if asset is None or not isinstance(asset.data, BuildConfig):
        print_error(f"BuildConfig not found at {path}. Install the Build Scripts module first.")
        return None
    return asset


def switch_environment(host: EditorHost, environment: Environment) -> bool | None:
    """Point BuildConfig (and AdsConfig, when installed) at *environment*.

    A missing BuildConfig is reported as an error; AdsConfig is still
    switched in that case.

    Returns:
        ``True`` if any asset changed, ``False`` if both were already in
        *environment*, ``None`` when BuildConfig is missing.
    """
    changed = False

    build_asset = load_build_config(host)
    if build_asset is not None and build_asset.data.active_environment is not environment:
        build_asset.data.active_environment = environment
        host.assets.set_dirty(build_asset)
        changed = True

    ads_asset = host.assets.load_asset(_asset_path("ads"))
    if ads_asset is not None and isinstance(ads_asset.data, AdsConfig):
        if ads_asset.data.active_environment is not environment:
            ads_asset.data.active_environment = environment
            host.assets.set_dirty(ads_asset)
            changed = True

    if changed:
        host.assets.save_assets()

    if build_asset is None:
        if changed:
            print_success(f"Switched AdsConfig to {environment.value}.")
        return None
    if not changed:
        print_info(f"Already in {environment.value} environment.")
        return False

    identity = build_asset.data.active_identity
    print_success(
        f"Switched to {environment.value}. Bundle: {identity.bundle_id}, App: {identity.app_name}"
    )
    return True


def resolve_player_settings(
    host: EditorHost, target: Platform, bump: bool = False
) -> PlayerSettings | None:
    """Compute the player settings for *target* from BuildConfig.

    With *bump* the active identity's version code is incremented and saved
    first, as an actual build would do.  Returns ``None`` when BuildConfig
    is missing.
    """
    asset = load_build_config(host)
    if asset is None:
        return None
    config = asset.data
    identity = config.active_identity

    if bump:
        identity.version_code += 1
        host.assets.set_dirty(asset)
        host.assets.save_assets()
        print_info(
            f"{config.active_environment.value} identity: {identity.bundle_id} "
            f"v{identity.version_name} (build {identity.version_code})"
        )

    settings = PlayerSettings(
        target=target,
        environment=config.active_environment,
        product_name=identity.app_name,
        application_identifier=identity.bundle_id,
        bundle_version=identity.version_name,
        version_code=identity.version_code,
        output_path=(
            config.android_output_path if target is Platform.ANDROID else config.ios_output_path
        ),
        scenes=list(config.scenes),
    )
    if target is Platform.ANDROID and config.keystore_path:
        settings.keystore_path = config.keystore_path
        settings.key_alias = config.key_alias
    return settings
