"""StarterKit -- idempotent module scaffolding for Unity game projects.

Writes C# source templates, configuration assets and scene wiring for a
fixed catalog of framework modules (authentication, ads, build scripts,
sound & haptics, settings & links, Firestore).  Every step is safe to
re-run: files are never overwritten, assets are created at most once and
scene objects are matched by name.

Quick usage::

    from starterkit import Config, EditorHost, ModuleInstaller

    host = EditorHost.open(Config(project_root="./MyGame"))
    installer = ModuleInstaller(host)
    installer.install("ads")
    host.idle()   # recompile, then run the deferred asset/scene steps
    host.save()
"""

from starterkit.config import Config
from starterkit.host import EditorHost
from starterkit.scaffolder import ModuleInstaller

__all__ = [
    "Config",
    "EditorHost",
    "ModuleInstaller",
]

__version__ = "0.1.0"
