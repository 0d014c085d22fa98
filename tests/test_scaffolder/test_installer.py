"""Unit tests for ModuleInstaller (starterkit.scaffolder.installer)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from jinja2 import TemplateNotFound

from starterkit.config import Config
from starterkit.host import EditorHost
from starterkit.modules import (
    ConfigAssetSpec,
    ManagerSpec,
    ModuleDescriptor,
    TemplateFile,
    UnknownModuleError,
)
from starterkit.scaffolder import ModuleInstaller, TemplateRenderer

DEMO_FOLDER = "Assets/_Framework/Demo"


@pytest.fixture
def demo_templates(tmp_path: Path) -> Path:
    """A template directory whose config type never compiles."""
    root = tmp_path / "templates"
    (root / "demo").mkdir(parents=True)
    (root / "demo" / "DemoManager.cs.j2").write_text(
        "// {{ module_title }}\npublic class DemoManager : MonoBehaviour {}\n",
        encoding="utf-8",
    )
    return root


@pytest.fixture
def demo_module() -> ModuleDescriptor:
    return ModuleDescriptor(
        key="demo",
        title="Demo",
        folder=DEMO_FOLDER,
        files=(TemplateFile(template="demo/DemoManager.cs.j2", path=f"{DEMO_FOLDER}/DemoManager.cs"),),
        primary_file=f"{DEMO_FOLDER}/DemoManager.cs",
        config_asset=ConfigAssetSpec(type_name="DemoConfig", path=f"{DEMO_FOLDER}/DemoConfig.asset"),
        marker="Demo",
        managers=(ManagerSpec(object_name="DemoManager", component="DemoManager"),),
    )


def _demo_installer(host: EditorHost, templates: Path, module: ModuleDescriptor) -> ModuleInstaller:
    return ModuleInstaller(host, renderer=TemplateRenderer(templates), modules={module.key: module})


# ---------------------------------------------------------------------------
# Immediate phase
# ---------------------------------------------------------------------------


class TestImmediatePhase:
    @pytest.mark.unit
    def test_writes_folder_and_sources(self, installer: ModuleInstaller, project_root: Path):
        installer.install("ads")
        folder = project_root / "Assets" / "_Framework" / "Ads"
        assert (folder / "AdsConfig.cs").is_file()
        assert (folder / "AdsManager.cs").is_file()

    @pytest.mark.unit
    def test_schedules_deferred_steps_in_order(self, installer: ModuleInstaller, host: EditorHost):
        installer.install("ads")
        assert host.deferred.pending == [
            "ads: create Assets/_Framework/Ads/AdsConfig.asset",
            "ads: wire scene",
        ]

    @pytest.mark.unit
    def test_module_without_scene_wiring(self, installer: ModuleInstaller, host: EditorHost):
        installer.install("build")
        assert host.deferred.pending == [
            "build: create Assets/_Framework/Editor/Build/BuildConfig.asset"
        ]

    @pytest.mark.unit
    def test_module_without_asset(self, installer: ModuleInstaller, host: EditorHost):
        installer.install("firebase")
        assert host.deferred.pending == ["firebase: wire scene"]

    @pytest.mark.unit
    def test_accepts_descriptor(self, installer: ModuleInstaller):
        installer.install(installer.modules["auth"])
        assert installer.is_installed("auth")

    @pytest.mark.unit
    def test_unknown_key(self, installer: ModuleInstaller):
        with pytest.raises(UnknownModuleError):
            installer.install("analytics")

    @pytest.mark.unit
    def test_render_failure_propagates(self, host: EditorHost, tmp_path: Path, demo_module):
        with pytest.raises(TemplateNotFound):
            _demo_installer(host, tmp_path / "empty", demo_module).install("demo")

    @pytest.mark.unit
    def test_template_context(self, host: EditorHost, demo_templates, demo_module, project_root: Path):
        _demo_installer(host, demo_templates, demo_module).install("demo")
        text = (project_root / DEMO_FOLDER / "DemoManager.cs").read_text(encoding="utf-8")
        assert text.startswith("// Demo\n")


# ---------------------------------------------------------------------------
# Deferred phase
# ---------------------------------------------------------------------------


class TestDeferredPhase:
    @pytest.mark.unit
    def test_idle_creates_asset_and_wiring(self, installer: ModuleInstaller, host: EditorHost):
        installer.install("settings_links")
        host.idle()

        assert host.assets.exists("Assets/_Framework/Settings/GameLinks.asset")
        assert host.scene.find("------ Settings & Links ------") is not None
        assert host.scene.find("SettingsManager").components == ["SettingsManager"]
        assert host.scene.find("LinksManager").components == ["LinksManager"]
        assert len(host.deferred) == 0

    @pytest.mark.unit
    def test_unresolved_config_type_retries_once(
        self, host: EditorHost, demo_templates, demo_module, project_root: Path
    ):
        installer = _demo_installer(host, demo_templates, demo_module)
        installer.install("demo")

        host.idle()
        assert host.deferred.pending == ["demo: create Assets/_Framework/Demo/DemoConfig.asset"]

        host.idle()
        assert len(host.deferred) == 0
        assert not (project_root / DEMO_FOLDER / "DemoConfig.asset").exists()

    @pytest.mark.unit
    def test_retries_disabled(self, project_root: Path, demo_templates, demo_module):
        host = EditorHost.open(Config(project_root=project_root, deferred_retries=0))
        _demo_installer(host, demo_templates, demo_module).install("demo")

        with patch("starterkit.scaffolder.instantiator.print_warning") as mock_warn:
            host.idle()

        mock_warn.assert_called_once()
        assert len(host.deferred) == 0

    @pytest.mark.unit
    def test_reinstall_after_type_appears(
        self, host: EditorHost, demo_templates, demo_module, write_source
    ):
        installer = _demo_installer(host, demo_templates, demo_module)
        installer.install("demo")
        host.run_until_idle()
        assert not host.assets.exists(f"{DEMO_FOLDER}/DemoConfig.asset")

        write_source(f"{DEMO_FOLDER}/DemoConfig.cs", "public class DemoConfig : ScriptableObject {}\n")
        installer.install("demo")
        host.run_until_idle()

        assert host.assets.exists(f"{DEMO_FOLDER}/DemoConfig.asset")
        assert host.scene.count("DemoManager") == 1

    @pytest.mark.unit
    def test_repair_from_config(self, project_root: Path):
        host = EditorHost.open(Config(project_root=project_root, repair_scene_components=True))
        host.scene.create_root("FirebaseManager")
        installer = ModuleInstaller(host)

        installer.install("firebase")
        host.idle()

        assert host.scene.find("FirebaseManager").components == ["FirebaseManager"]


# ---------------------------------------------------------------------------
# Install state
# ---------------------------------------------------------------------------


class TestInstallState:
    @pytest.mark.unit
    def test_is_installed_tracks_primary_file(self, installer: ModuleInstaller, project_root: Path):
        assert installer.is_installed("ads") is False
        installer.install("ads")
        assert installer.is_installed("ads") is True

        (project_root / "Assets" / "_Framework" / "Ads" / "AdsManager.cs").unlink()
        assert installer.is_installed("ads") is False

    @pytest.mark.unit
    def test_inspect_before_and_after_idle(self, installer: ModuleInstaller, host: EditorHost):
        installer.install("ads")
        report = installer.inspect("ads")
        assert report.installed is True
        assert all(report.files.values())
        assert report.config_asset is False
        assert report.complete is False

        host.idle()
        report = installer.inspect("ads")
        assert report.config_asset is True
        assert report.scene_objects == {"------ Ads ------": True, "AdsManager": True}
        assert report.complete is True

    @pytest.mark.unit
    def test_inspect_reports_missing_component(self, installer: ModuleInstaller, host: EditorHost):
        host.scene.create_root("AdsManager")
        installer.install("ads")
        host.idle()

        report = installer.inspect("ads")
        assert report.installed is True
        assert report.missing_components == ["AdsManager.AdsManager"]
        assert report.complete is False

    @pytest.mark.unit
    def test_inspect_module_without_asset(self, installer: ModuleInstaller):
        report = installer.inspect("auth")
        assert report.config_asset is None
        assert report.installed is False


class TestDashboardEntries:
    @pytest.mark.unit
    def test_one_entry_per_module(self, installer: ModuleInstaller):
        keys = [entry.module.key for entry in installer.dashboard_entries()]
        assert keys == list(installer.modules)

    @pytest.mark.unit
    def test_entries_bind_their_own_module(self, installer: ModuleInstaller):
        entries = {entry.module.key: entry for entry in installer.dashboard_entries()}
        entries["sound_haptics"].install()

        assert entries["sound_haptics"].is_installed() is True
        assert entries["ads"].is_installed() is False
