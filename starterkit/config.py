"""StarterKit configuration.

Centralised, typed configuration for the scaffolding tool.  Settings use a
Pydantic v2 model so they are validated at construction time and can be
serialised to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Global StarterKit configuration.

    Instances are typically created once by the CLI entry point and handed
    to :class:`~starterkit.host.EditorHost`, which passes the relevant parts
    on to the asset index, scene and installer.
    """

    project_root: Path = Field(default=Path("."))
    state_dir: str = Field(
        default=".starterkit", description="Tool metadata directory inside the project"
    )
    scene_name: str = Field(default="SampleScene", description="Scene that receives wiring")
    deferred_retries: int = Field(
        default=1,
        ge=0,
        description="How many idle cycles a config-asset step may wait for its type",
    )
    repair_scene_components: bool = Field(
        default=False,
        description="Attach a missing component to an already existing manager object",
    )

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def state_path(self) -> Path:
        """Root of the ``.starterkit/`` metadata directory."""
        return self.project_root / self.state_dir

    @property
    def scenes_dir(self) -> Path:
        """Directory holding persisted scene graphs."""
        return self.state_path / "scenes"

    @property
    def scene_path(self) -> Path:
        """Path to the persisted graph of the active scene."""
        return self.scenes_dir / f"{self.scene_name}.yaml"

    @property
    def config_file(self) -> Path:
        """Default location of a saved configuration."""
        return self.state_path / "config.json"

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to ``<state_path>/config.json``.

        Returns:
            The path where the file was written.
        """
        target = path or self.config_file
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            STARTERKIT_PROJECT_ROOT, STARTERKIT_SCENE,
            STARTERKIT_DEFERRED_RETRIES, STARTERKIT_REPAIR_SCENE.

        Keyword *overrides* win over the environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("STARTERKIT_PROJECT_ROOT"):
            kwargs["project_root"] = Path(os.environ["STARTERKIT_PROJECT_ROOT"])
        if os.environ.get("STARTERKIT_SCENE"):
            kwargs["scene_name"] = os.environ["STARTERKIT_SCENE"]
        if os.environ.get("STARTERKIT_DEFERRED_RETRIES"):
            kwargs["deferred_retries"] = int(os.environ["STARTERKIT_DEFERRED_RETRIES"])
        if os.environ.get("STARTERKIT_REPAIR_SCENE"):
            kwargs["repair_scene_components"] = os.environ["STARTERKIT_REPAIR_SCENE"].lower() in (
                "1",
                "true",
                "yes",
                "on",
            )
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
