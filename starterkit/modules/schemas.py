"""Pydantic schemas for the configuration assets the modules create.

Each schema mirrors the serialised fields of the matching C# ScriptableObject
template.  Default values are what a freshly created asset contains.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Environment(str, Enum):
    """Which identity block and ad unit IDs are active."""

    DEV = "dev"
    PROD = "prod"


class Platform(str, Enum):
    ANDROID = "android"
    IOS = "ios"


# ---------------------------------------------------------------------------
# Ads
# ---------------------------------------------------------------------------

# Google's public AdMob test units; safe to ship in dev builds.
ADMOB_TEST_IDS: dict[str, str] = {
    "banner_android": "ca-app-pub-3940256099942544/6300978111",
    "interstitial_android": "ca-app-pub-3940256099942544/1033173712",
    "rewarded_android": "ca-app-pub-3940256099942544/5224354917",
    "banner_ios": "ca-app-pub-3940256099942544/2934735716",
    "interstitial_ios": "ca-app-pub-3940256099942544/4411468910",
    "rewarded_ios": "ca-app-pub-3940256099942544/1712485313",
}


class AdsConfig(BaseModel):
    """Ad unit IDs per environment, platform and ad format."""

    active_environment: Environment = Environment.DEV
    is_ads_enabled: bool = True
    is_remove_ads_purchased: bool = False

    dev_banner_android: str = ADMOB_TEST_IDS["banner_android"]
    dev_interstitial_android: str = ADMOB_TEST_IDS["interstitial_android"]
    dev_rewarded_android: str = ADMOB_TEST_IDS["rewarded_android"]
    dev_banner_ios: str = ADMOB_TEST_IDS["banner_ios"]
    dev_interstitial_ios: str = ADMOB_TEST_IDS["interstitial_ios"]
    dev_rewarded_ios: str = ADMOB_TEST_IDS["rewarded_ios"]

    prod_banner_android: str = ""
    prod_interstitial_android: str = ""
    prod_rewarded_android: str = ""
    prod_banner_ios: str = ""
    prod_interstitial_ios: str = ""
    prod_rewarded_ios: str = ""

    def unit_id(self, ad_format: str, platform: Platform = Platform.ANDROID) -> str:
        """Return the unit ID for *ad_format* (banner/interstitial/rewarded)."""
        field = f"{self.active_environment.value}_{ad_format}_{platform.value}"
        if field not in type(self).model_fields:
            raise ValueError(f"Unknown ad format: {ad_format}")
        return getattr(self, field)


# ---------------------------------------------------------------------------
# Build
# ---------------------------------------------------------------------------


class AppIdentity(BaseModel):
    """Everything that differs between a dev sideload and a store release."""

    app_name: str = "MyGame"
    bundle_id: str = "com.company.mygame"
    version_name: str = "1.0.0"
    version_code: int = Field(default=1, ge=1)


class BuildConfig(BaseModel):
    """Build settings with separate Dev and Prod identities."""

    active_environment: Environment = Environment.DEV
    dev: AppIdentity = Field(
        default_factory=lambda: AppIdentity(
            app_name="MyGame (Dev)",
            bundle_id="com.company.mygame.dev",
            version_name="0.1.0",
        )
    )
    prod: AppIdentity = Field(default_factory=AppIdentity)

    keystore_path: str = ""
    keystore_pass: str = ""
    key_alias: str = ""
    key_pass: str = ""

    scenes: list[str] = Field(default_factory=lambda: ["Assets/Scenes/SampleScene.unity"])
    android_output_path: str = "Builds/Android/game.apk"
    ios_output_path: str = "Builds/iOS"

    @property
    def active_identity(self) -> AppIdentity:
        return self.dev if self.active_environment is Environment.DEV else self.prod


# ---------------------------------------------------------------------------
# Sound & haptics
# ---------------------------------------------------------------------------

SOUND_TYPES: tuple[str, ...] = ("ButtonClick", "ButtonBack", "Win", "Lose", "Coin", "PowerUp")


class SoundEntry(BaseModel):
    type: str
    clip: str | None = None


class SoundConfig(BaseModel):
    """Volume defaults and the clip table used by SoundManager."""

    master_volume: float = Field(default=1.0, ge=0.0, le=1.0)
    sfx_volume: float = Field(default=1.0, ge=0.0, le=1.0)
    music_volume: float = Field(default=0.7, ge=0.0, le=1.0)
    sounds: list[SoundEntry] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Settings & links
# ---------------------------------------------------------------------------


class GameLinks(BaseModel):
    """External URLs opened by LinksManager."""

    rate_us_android: str = "https://play.google.com/store/apps/details?id=com.company.mygame"
    rate_us_ios: str = "https://apps.apple.com/app/idXXXXXXXXXX"
    feedback_form_url: str = "https://forms.gle/XXXXXXXXXX"
    deep_link_url: str = "mygame://open"
    more_games_android: str = "https://play.google.com/store/apps/developer?id=YourCompany"
    more_games_ios: str = "https://apps.apple.com/developer/yourcompany/idXXXXXXXXXX"


CONFIG_SCHEMAS: dict[str, type[BaseModel]] = {
    "AdsConfig": AdsConfig,
    "BuildConfig": BuildConfig,
    "SoundConfig": SoundConfig,
    "GameLinks": GameLinks,
}
