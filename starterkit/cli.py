"""StarterKit command line.

Usage::

    python -m starterkit list
    python -m starterkit install ads build
    python -m starterkit install --all --project ./MyGame
    python -m starterkit status ads
    python -m starterkit env prod
    python -m starterkit player-settings --target android --bump
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from starterkit.build import resolve_player_settings, switch_environment
from starterkit.config import Config
from starterkit.host import EditorHost
from starterkit.modules import UnknownModuleError, module_keys
from starterkit.modules.schemas import Environment, Platform
from starterkit.scaffolder import ModuleInstaller
from starterkit.utils import console, print_error, print_summary_table, print_warning


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="starterkit",
        description="StarterKit -- scaffold framework modules into a Unity project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  starterkit list\n"
            "  starterkit install ads build\n"
            "  starterkit env prod --project ./MyGame\n"
        ),
    )
    parser.add_argument(
        "--project", "-p",
        default=None,
        help="Unity project root (default: $STARTERKIT_PROJECT_ROOT or .)",
    )
    parser.add_argument(
        "--scene",
        default=None,
        help="Scene that receives module wiring (default: SampleScene)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="Show every module and whether it is installed")

    install = sub.add_parser("install", help="Install one or more modules")
    install.add_argument("modules", nargs="*", help=f"Module keys: {', '.join(module_keys())}")
    install.add_argument("--all", action="store_true", help="Install every module")

    status = sub.add_parser("status", help="Show per-artifact install state of a module")
    status.add_argument("module")

    env = sub.add_parser("env", help="Switch BuildConfig/AdsConfig environment")
    env.add_argument("environment", choices=[e.value for e in Environment])

    settings = sub.add_parser("player-settings", help="Print the settings a build would apply")
    settings.add_argument(
        "--target", choices=[p.value for p in Platform], default=Platform.ANDROID.value
    )
    settings.add_argument("--bump", action="store_true", help="Increment the version code")

    return parser


def _cmd_list(installer: ModuleInstaller) -> int:
    rows = []
    for entry in installer.dashboard_entries():
        state = "[green]Installed[/green]" if entry.is_installed() else "Not installed"
        rows.append((entry.module.key, f"{entry.module.icon}  {entry.module.title}", state))
    print_summary_table(rows, columns=("Key", "Module", "Status"), title="Framework modules")
    return 0


def _cmd_install(host: EditorHost, installer: ModuleInstaller, args: argparse.Namespace) -> int:
    keys = module_keys() if args.all else args.modules
    if not keys:
        print_error("Nothing to install. Name one or more modules or pass --all.")
        return 1
    for key in keys:
        installer.install(key)

    host.run_until_idle()
    if host.deferred:
        print_warning(
            f"{len(host.deferred)} deferred step(s) still pending; run install again "
            f"after the project compiles."
        )
    host.save()
    return 0


def _cmd_status(installer: ModuleInstaller, key: str) -> int:
    report = installer.inspect(key)
    rows = [(path, "yes" if present else "[red]missing[/red]") for path, present in report.files.items()]
    if report.config_asset is not None:
        rows.append(("config asset", "yes" if report.config_asset else "[red]missing[/red]"))
    for name, present in report.scene_objects.items():
        rows.append((f"scene: {name}", "yes" if present else "[red]missing[/red]"))
    for component in report.missing_components:
        rows.append((f"component: {component}", "[yellow]not attached[/yellow]"))
    print_summary_table(rows, columns=("Artifact", "Present"), title=f"Module '{key}'")
    return 0


def _cmd_env(host: EditorHost, environment: str) -> int:
    if switch_environment(host, Environment(environment)) is None:
        return 1
    return 0


def _cmd_player_settings(host: EditorHost, args: argparse.Namespace) -> int:
    settings = resolve_player_settings(host, Platform(args.target), bump=args.bump)
    if settings is None:
        return 1
    rows = [(key, value) for key, value in settings.model_dump(mode="json").items() if value is not None]
    print_summary_table(rows, title=f"Player settings ({args.target})")
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``python -m starterkit``."""
    args = _build_parser().parse_args(argv)

    config = Config.from_env(
        project_root=Path(args.project) if args.project else None,
        scene_name=args.scene,
    )
    if not config.project_root.is_dir():
        console.print(f"[bold red]Error:[/bold red] Project root not found: {config.project_root}")
        sys.exit(1)

    host = EditorHost.open(config)
    installer = ModuleInstaller(host)

    try:
        if args.command == "list":
            code = _cmd_list(installer)
        elif args.command == "install":
            code = _cmd_install(host, installer, args)
        elif args.command == "status":
            code = _cmd_status(installer, args.module)
        elif args.command == "env":
            code = _cmd_env(host, args.environment)
        else:
            code = _cmd_player_settings(host, args)
    except UnknownModuleError as exc:
        print_error(str(exc))
        code = 1

    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
