"""
cli — Argparse entry point for the pull, preview and config commands.
"""

import argparse
import sys
import textwrap

from .config import load_settings
from .errors import ConfigurationMissing, PullError
from .notes import FileNoteStore
from .pull import preview, pull
from .ui import detail, notify_error, notify_success
from .views import view_config, view_preview


def cmd_pull(args):
    settings = load_settings(args.config)
    store = FileNoteStore(args.note or settings.note)
    result = pull(store, settings)
    notify_success(
        f"Added {len(result.issues)} '{settings.status}' issues to {store.path}"
    )
    detail(f"{result.fetched} issues on the board, {len(result.issues)} matched your filters")


def cmd_preview(args):
    view_preview(preview(load_settings(args.config)))


def cmd_config(args):
    view_config(load_settings(args.config))


def build_parser():
    parser = argparse.ArgumentParser(
        prog="ghpull",
        description="Pull GitHub Project (v2) issues into a markdown note as a checklist.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
            Settings come from .ghpull/config.json (or --config) and
            GHPULL_* environment variables:
              token, project_id, organization_name, assignee, status,
              labels (comma-separated), note (optional note path)

            Example:
              ghpull pull --note notes/today.md
        """),
    )
    parser.add_argument("--config", help="path to a JSON config file")
    sub = parser.add_subparsers(dest="command")

    p_pull = sub.add_parser("pull", help="Append matching issues to the active note (default)")
    p_pull.add_argument("--note", help="markdown note to append to (overrides the note setting)")
    p_pull.set_defaults(func=cmd_pull)

    p_preview = sub.add_parser("preview", help="Show the checklist without touching the note")
    p_preview.set_defaults(func=cmd_preview)

    p_config = sub.add_parser("config", help="Show the resolved settings")
    p_config.set_defaults(func=cmd_config)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        argv = sys.argv[1:] if argv is None else list(argv)
        args = parser.parse_args(argv + ["pull"])

    try:
        args.func(args)
    except ConfigurationMissing:
        # each missing key has already been reported
        sys.exit(1)
    except PullError as exc:
        notify_error(str(exc))
        sys.exit(1)
