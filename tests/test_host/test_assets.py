"""Tests for the host asset database (AssetIndex)."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from starterkit.host import AssetIndex, GenericAsset, PathResolver
from starterkit.modules.schemas import CONFIG_SCHEMAS, AdsConfig, Environment

pytestmark = pytest.mark.unit

ADS_PATH = "Assets/_Framework/Ads/AdsConfig.asset"


@pytest.fixture
def index(project_root: Path) -> AssetIndex:
    return AssetIndex(PathResolver(project_root), CONFIG_SCHEMAS)


class TestImportAndRefresh:
    def test_import_path_records_and_indexes(self, index: AssetIndex, project_root: Path):
        (project_root / "Assets" / "Ads").mkdir()
        index.import_path("Assets/Ads")
        assert index.imported == ["Assets/Ads"]
        assert "Assets/Ads" in index.known

    def test_refresh_rescans_tree(self, index: AssetIndex, project_root: Path):
        (project_root / "Assets" / "A").mkdir()
        (project_root / "Assets" / "A" / "x.cs").write_text("", encoding="utf-8")
        count = index.refresh()
        assert {"Assets", "Assets/A", "Assets/A/x.cs"} <= index.known
        assert count == len(index.known)

    def test_refresh_forgets_deleted_files(self, index: AssetIndex, project_root: Path):
        target = project_root / "Assets" / "gone.cs"
        target.write_text("", encoding="utf-8")
        index.refresh()
        target.unlink()
        index.refresh()
        assert "Assets/gone.cs" not in index.known


class TestCreateAndSave:
    def test_create_is_staged_until_saved(self, index: AssetIndex, project_root: Path):
        (project_root / "Assets" / "_Framework" / "Ads").mkdir(parents=True)
        index.create_asset(AdsConfig(), ADS_PATH, "AdsConfig")

        assert index.exists(ADS_PATH)
        assert index.pending == [ADS_PATH]
        assert not (project_root / ADS_PATH).exists()

        assert index.save_assets() == [ADS_PATH]
        assert (project_root / ADS_PATH).is_file()
        assert index.pending == []

    def test_saved_document_layout(self, index: AssetIndex, project_root: Path):
        index.create_asset(AdsConfig(), ADS_PATH, "AdsConfig")
        index.save_assets()
        document = yaml.safe_load((project_root / ADS_PATH).read_text(encoding="utf-8"))
        assert document["type"] == "AdsConfig"
        assert document["data"]["active_environment"] == "dev"

    def test_create_over_existing_raises(self, index: AssetIndex):
        index.create_asset(AdsConfig(), ADS_PATH, "AdsConfig")
        with pytest.raises(FileExistsError):
            index.create_asset(AdsConfig(), ADS_PATH, "AdsConfig")

    def test_set_dirty_persists_changes(self, index: AssetIndex, project_root: Path):
        asset = index.create_asset(AdsConfig(), ADS_PATH, "AdsConfig")
        index.save_assets()

        asset.data.active_environment = Environment.PROD
        index.set_dirty(asset)
        index.save_assets()

        fresh = AssetIndex(PathResolver(project_root), CONFIG_SCHEMAS)
        assert fresh.load_asset(ADS_PATH).data.active_environment is Environment.PROD


class TestLoad:
    def test_missing_returns_none(self, index: AssetIndex):
        assert index.load_asset(ADS_PATH) is None

    def test_load_validates_with_schema(self, index: AssetIndex, project_root: Path):
        index.create_asset(AdsConfig(is_ads_enabled=False), ADS_PATH, "AdsConfig")
        index.save_assets()

        fresh = AssetIndex(PathResolver(project_root), CONFIG_SCHEMAS)
        asset = fresh.load_asset(ADS_PATH)
        assert isinstance(asset.data, AdsConfig)
        assert asset.data.is_ads_enabled is False
        assert asset.type_name == "AdsConfig"

    def test_unregistered_type_loads_generic(self, index: AssetIndex, project_root: Path):
        path = project_root / "Assets" / "Custom.asset"
        path.write_text("type: CustomThing\ndata:\n  speed: 3\n", encoding="utf-8")
        asset = index.load_asset("Assets/Custom.asset")
        assert isinstance(asset.data, GenericAsset)
        assert asset.data.model_dump() == {"speed": 3}

    def test_corrupt_yaml_propagates(self, index: AssetIndex, project_root: Path):
        (project_root / "Assets" / "Bad.asset").write_text("type: [unclosed\n", encoding="utf-8")
        with pytest.raises(yaml.YAMLError):
            index.load_asset("Assets/Bad.asset")

    def test_refresh_rereads_files_edited_on_disk(self, index: AssetIndex, project_root: Path):
        index.create_asset(AdsConfig(), ADS_PATH, "AdsConfig")
        index.save_assets()
        assert index.load_asset(ADS_PATH).data.is_ads_enabled is True

        (project_root / ADS_PATH).write_text(
            "type: AdsConfig\ndata:\n  is_ads_enabled: false\n", encoding="utf-8"
        )
        index.refresh()

        assert index.load_asset(ADS_PATH).data.is_ads_enabled is False

    def test_refresh_keeps_staged_assets(self, index: AssetIndex):
        asset = index.create_asset(AdsConfig(), ADS_PATH, "AdsConfig")
        index.refresh()
        assert index.load_asset(ADS_PATH) is asset
