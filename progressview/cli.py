# progressview/cli.py

# SECTION: MODULE DOCSTRING
"""Command-line entry point.

    progressview show   --user user.json --challenges challenges.json [--messages] [--json] [--output FILE]
    progressview stats  --user user.json --challenges challenges.json
    progressview browse --user user.json --challenges challenges.json

File options default to the configured paths (PROGRESSVIEW_USER_FILE,
PROGRESSVIEW_CHALLENGES_FILE).
"""

# SECTION: IMPORTS
import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from progressview import __version__
from progressview.config import AppConfig, get_config
from progressview.exception import DataLoadError
from progressview.helpers._json import save_json
from progressview.helpers._logger import log, setup_logging
from progressview.helpers._rich import console
from progressview.helpers._styles import PLAIN, RichStyler, Styler
from progressview.loaders import load_catalog, load_user_state
from progressview.views.progress_view import ProgressView
from progressview.views.rich_tree import print_progress_tree


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="progressview", description="Show challenge progress as a menu tree.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--user", type=Path, help="User state JSON file.")
    common.add_argument("--challenges", type=Path, help="Challenge catalog JSON file.")
    common.add_argument("--plain", action="store_true", help="Disable colour markup in messages.")

    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", parents=[common], help="Print the progress tree.")
    show.add_argument("--messages", action="store_true", help="Print each node's message under its label.")
    show.add_argument("--json", action="store_true", help="Print the tree as JSON instead.")
    show.add_argument("--output", type=Path, help="Write the tree JSON to this file.")

    sub.add_parser("stats", parents=[common], help="Print points and completion rate.")
    sub.add_parser("browse", parents=[common], help="Open the interactive browser.")
    return parser


def _make_view(args: argparse.Namespace, config: AppConfig, styler: Styler) -> ProgressView:
    user_state = load_user_state(args.user or config.user_file)
    catalog = load_catalog(args.challenges or config.challenges_file)
    return ProgressView(user_state, catalog, styler)


def _cmd_show(args: argparse.Namespace, view: ProgressView, markup: bool) -> int:
    tree = view.build_progress_tree()
    if args.output:
        if not save_json(tree.to_dict(), args.output):
            console.print(f"[error]Could not write {escape(str(args.output))}[/error]")
            return 1
        log.success(f"Saved progress tree to {args.output}")
        console.print(f"[success]Saved progress tree to {escape(str(args.output))}[/success]")
    if args.json:
        console.print_json(json.dumps(tree.to_dict()))
    elif not args.output:
        print_progress_tree(tree, show_messages=args.messages, markup=markup, console=console)
    return 0


def _cmd_stats(view: ProgressView) -> int:
    summary = view.summary()
    table = Table(title=f"Progress for {escape(summary.display_name)}", show_header=True, header_style="table.header")
    table.add_column("Stat")
    table.add_column("Value", justify="right")
    table.add_row("Points Earned", f"{summary.points:,}")
    table.add_row("Total Challenges", str(summary.enabled))
    table.add_row("Completed", str(summary.completed))
    table.add_row("Completion Rate", f"{summary.completion_rate}%")
    console.print(table)
    return 0


def _cmd_browse(view: ProgressView, markup: bool) -> int:
    from progressview.ui.app import ProgressMenuApp

    ProgressMenuApp(view.build_progress_tree(), markup=markup).run()
    return 0


# FUNC: main
def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_config()
    setup_logging(log_level=config.log_level, log_dir=config.log_dir)

    markup = config.color and not args.plain
    styler: Styler = RichStyler() if markup else PLAIN

    try:
        view = _make_view(args, config, styler)
    except DataLoadError as e:
        console.print(f"[error]{escape(str(e))}[/error]")
        return 1

    log.debug(f"Running command '{args.command}'.")
    if args.command == "show":
        return _cmd_show(args, view, markup)
    if args.command == "stats":
        return _cmd_stats(view)
    return _cmd_browse(view, markup)


if __name__ == "__main__":
    sys.exit(main())
