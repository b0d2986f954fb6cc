"""Command line entry point: ``kanban tui [DIR]``, ``kanban projects``, ``kanban keys``."""

import argparse
import logging
import sys
from datetime import datetime
from importlib.metadata import PackageNotFoundError, version as pkg_version
from pathlib import Path

from config import DEFAULT_REGISTRY_PATH, get_registry_path, get_user_lang, get_user_theme, set_user_lang
from core.focus.key_bindings import get_bindings_for_action, get_key_display
from core.focus.types import Action
from core.interface.constants import APP_TITLE
from core.interface.i18n import available_langs, translate
from core.interface.tui_app import cmd_tui
from core.interface.tui_themes import DEFAULT_THEME, THEMES
from infrastructure.project_registry import ProjectRegistry

DEFAULT_LOG_PATH = DEFAULT_REGISTRY_PATH.parent / "kanban.log"


def configure_logging(verbose: bool, log_file: Path = DEFAULT_LOG_PATH) -> None:
    """The full-screen UI owns the terminal, so verbose logs go to a file."""
    if not verbose:
        logging.getLogger("kanban_md").addHandler(logging.NullHandler())
        return
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_file),
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_projects(args) -> int:
    projects = sorted(ProjectRegistry(get_registry_path()).load(), key=lambda p: p.last_access, reverse=True)
    if not projects:
        print(translate("projects.none"))
        return 0
    print(translate("projects.header"))
    for project in projects:
        seen = datetime.fromtimestamp(project.last_access).strftime("%Y-%m-%d %H:%M") if project.last_access else "-"
        print(f"  {project.name:<24} {seen}  {project.path}")
    return 0


def cmd_keys(args) -> int:
    platform = getattr(args, "platform", None)
    for action in Action:
        labels = []
        for binding in get_bindings_for_action(action):
            label = get_key_display(binding, platform)
            if label not in labels:
                labels.append(label)
        print(f"  {action.value:<11} {', '.join(labels)}")
    return 0


def cmd_lang(args) -> int:
    if args.code:
        set_user_lang(args.code)
    print(get_user_lang() or "en")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kanban", description=f"{APP_TITLE}: keyboard-driven kanban board")
    parser.add_argument("--version", action="store_true", help="print the installed version")
    parser.add_argument("--verbose", "-v", action="store_true", help=f"write debug logs to {DEFAULT_LOG_PATH}")
    sub = parser.add_subparsers(dest="command")

    user_theme = get_user_theme()
    tui_p = sub.add_parser("tui", help="open the board in the terminal")
    tui_p.add_argument("directory", nargs="?", type=Path, help="board directory (default: current directory)")
    tui_p.add_argument(
        "--theme",
        choices=list(THEMES.keys()),
        default=user_theme if user_theme in THEMES else DEFAULT_THEME,
        help="color palette",
    )
    tui_p.set_defaults(func=cmd_tui)

    proj_p = sub.add_parser("projects", help="list recent projects")
    proj_p.set_defaults(func=cmd_projects)

    keys_p = sub.add_parser("keys", help="show key bindings")
    keys_p.add_argument("--platform", choices=["darwin", "linux", "win32"], help="label style (default: this machine)")
    keys_p.set_defaults(func=cmd_keys)

    lang_p = sub.add_parser("lang", help="show or set the interface language")
    lang_p.add_argument("code", nargs="?", choices=available_langs())
    lang_p.set_defaults(func=cmd_lang)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.version:
        try:
            print(pkg_version("kanban-md"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    configure_logging(args.verbose)
    if not getattr(args, "command", None):
        parser.print_help()
        return 1
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
