"""Create-if-absent folder and file primitives.

A file that already exists is never diffed or overwritten, so edits made
after installation survive any number of re-installs.  Filesystem errors
propagate to the caller untouched.
"""

from __future__ import annotations

from starterkit.host import EditorHost
from starterkit.utils import print_info, print_success


class IdempotentWriter:
    def __init__(self, host: EditorHost) -> None:
        self.host = host

    def file_exists(self, logical_path: str) -> bool:
        return self.host.paths.resolve(logical_path).is_file()

    def folder_exists(self, logical_path: str) -> bool:
        return self.host.paths.resolve(logical_path).is_dir()

    def ensure_folder(self, logical_path: str) -> bool:
        """Create *logical_path* and any missing ancestors.

        The new folder is imported into the asset index so files written
        into it are visible without a full refresh.

        Returns:
            ``True`` if the folder was created by this call.
        """
        if self.folder_exists(logical_path):
            return False
        self.host.paths.resolve(logical_path).mkdir(parents=True, exist_ok=True)
        self.host.assets.import_path(logical_path)
        return True

    def write_file(self, logical_path: str, content: str) -> bool:
        """Write *content* verbatim (UTF-8) unless a file already exists.

        Returns:
            ``True`` if the file was written by this call.
        """
        if self.file_exists(logical_path):
            print_info(f"Skipped (already exists): {logical_path}")
            return False
        path = self.host.paths.resolve(logical_path)
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        self.host.assets.import_path(logical_path)
        print_success(f"Created: {logical_path}")
        return True
