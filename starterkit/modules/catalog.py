"""The fixed catalog of framework modules."""

from __future__ import annotations

from .descriptor import (
    FRAMEWORK_ROOT,
    ConfigAssetSpec,
    ManagerSpec,
    ModuleDescriptor,
    TemplateFile,
)


def _files(key: str, folder: str, *names: str) -> tuple[TemplateFile, ...]:
    return tuple(
        TemplateFile(template=f"{key}/{name}.cs.j2", path=f"{folder}/{name}.cs")
        for name in names
    )


_AUTH = f"{FRAMEWORK_ROOT}/Authentication"
_ADS = f"{FRAMEWORK_ROOT}/Ads"
_BUILD = f"{FRAMEWORK_ROOT}/Editor/Build"
_SOUND = f"{FRAMEWORK_ROOT}/SoundHaptics"
_SETTINGS = f"{FRAMEWORK_ROOT}/Settings"
_FIREBASE = f"{FRAMEWORK_ROOT}/Firebase"


AUTH = ModuleDescriptor(
    key="auth",
    title="Authentication",
    description="Firebase Auth with guest, Google and Apple sign-in, sign-out and account deletion events.",
    icon="🔐",
    folder=_AUTH,
    files=_files("auth", _AUTH, "AuthManager"),
    primary_file=f"{_AUTH}/AuthManager.cs",
    marker="Authentication",
    managers=(ManagerSpec(object_name="AuthManager", component="AuthManager"),),
)

ADS = ModuleDescriptor(
    key="ads",
    title="Ads",
    description="MAX / AdMob banner, interstitial and rewarded ads driven by an AdsConfig asset.",
    icon="📢",
    folder=_ADS,
    files=_files("ads", _ADS, "AdsConfig", "AdsManager"),
    primary_file=f"{_ADS}/AdsManager.cs",
    config_asset=ConfigAssetSpec(type_name="AdsConfig", path=f"{_ADS}/AdsConfig.asset"),
    marker="Ads",
    managers=(ManagerSpec(object_name="AdsManager", component="AdsManager"),),
)

BUILD = ModuleDescriptor(
    key="build",
    title="Build Scripts",
    description="One-click Android and iOS builds from a BuildConfig asset with Dev/Prod identities.",
    icon="🔨",
    folder=_BUILD,
    files=_files("build", _BUILD, "BuildConfig", "BuildScript"),
    primary_file=f"{_BUILD}/BuildScript.cs",
    config_asset=ConfigAssetSpec(type_name="BuildConfig", path=f"{_BUILD}/BuildConfig.asset"),
)

SOUND_HAPTICS = ModuleDescriptor(
    key="sound_haptics",
    title="Sound & Haptics",
    description="Pooled SFX, music player and platform haptics driven by a SoundConfig asset.",
    icon="🔊",
    folder=_SOUND,
    files=_files("sound_haptics", _SOUND, "SoundConfig", "SoundManager", "HapticsManager"),
    primary_file=f"{_SOUND}/SoundManager.cs",
    config_asset=ConfigAssetSpec(type_name="SoundConfig", path=f"{_SOUND}/SoundConfig.asset"),
    marker="Sound & Haptics",
    # HapticsManager is a static class and needs no scene object.
    managers=(ManagerSpec(object_name="SoundManager", component="SoundManager"),),
)

SETTINGS_LINKS = ModuleDescriptor(
    key="settings_links",
    title="Settings & Links",
    description="Persisted sound/haptics/notification toggles plus a GameLinks asset for store and policy URLs.",
    icon="⚙️",
    folder=_SETTINGS,
    files=_files("settings_links", _SETTINGS, "GameLinks", "SettingsManager", "LinksManager"),
    primary_file=f"{_SETTINGS}/SettingsManager.cs",
    config_asset=ConfigAssetSpec(type_name="GameLinks", path=f"{_SETTINGS}/GameLinks.asset"),
    marker="Settings & Links",
    managers=(
        ManagerSpec(object_name="SettingsManager", component="SettingsManager"),
        ManagerSpec(object_name="LinksManager", component="LinksManager"),
    ),
)

FIREBASE = ModuleDescriptor(
    key="firebase",
    title="Firebase Firestore",
    description="Firestore wrapper with async set, get, update, delete, listen and query helpers.",
    icon="🔥",
    folder=_FIREBASE,
    files=_files("firebase", _FIREBASE, "FirebaseManager"),
    primary_file=f"{_FIREBASE}/FirebaseManager.cs",
    marker="Firebase Firestore",
    managers=(ManagerSpec(object_name="FirebaseManager", component="FirebaseManager"),),
)

# Dashboard order.
CATALOG: tuple[ModuleDescriptor, ...] = (
    AUTH,
    ADS,
    BUILD,
    SOUND_HAPTICS,
    SETTINGS_LINKS,
    FIREBASE,
)
