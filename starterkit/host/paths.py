"""Logical-path to filesystem-path mapping."""

from __future__ import annotations

from pathlib import Path, PurePosixPath


class PathResolver:
    """Maps project-relative logical paths (``Assets/_Framework/Ads``) to
    absolute filesystem paths under a fixed project root.
    """

    def __init__(self, project_root: str | Path) -> None:
        self.root = Path(project_root).absolute()

    def resolve(self, logical_path: str) -> Path:
        """Return the absolute path for *logical_path*.  No filesystem access."""
        return self.root.joinpath(*PurePosixPath(logical_path).parts)

    def to_logical(self, path: str | Path) -> str:
        """Inverse of :meth:`resolve` for paths inside the project root."""
        return Path(path).absolute().relative_to(self.root).as_posix()
