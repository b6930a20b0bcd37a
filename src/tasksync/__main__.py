"""CLI entry point for tasksync."""

import argparse
from pathlib import Path
from typing import Any

from .config import Settings
from .logging import setup_logging
from .models import FilterMode, Priority, SortKey


def _add_task_fields(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--description", default=None, help="Longer description")
    parser.add_argument("--due", default=None, metavar="YYYY-MM-DD", help="Due date")
    parser.add_argument(
        "--priority",
        choices=[p.value for p in Priority],
        default=None,
        help="Task priority (default: medium)",
    )
    parser.add_argument("--tags", default=None, help='Comma separated tags, e.g. "home, errand"')


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="tasksync",
        description="Task list synchronized with a remote store, with a local fallback cache",
    )
    parser.add_argument(
        "--remote-url",
        default=None,
        help="Base URL of the remote task API (default: http://localhost:8080/api)",
    )
    parser.add_argument(
        "--cache-dir",
        type=Path,
        default=None,
        help="Directory for the local cache (default: ~/.tasksync)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    list_cmd = commands.add_parser("list", help="Show tasks")
    list_cmd.add_argument(
        "--filter", choices=[m.value for m in FilterMode], default=FilterMode.ALL.value
    )
    list_cmd.add_argument("--search", default="", help="Case-insensitive text search")
    list_cmd.add_argument(
        "--sort",
        choices=[k.value for k in SortKey],
        default=SortKey.MANUAL.value,
        help="Order within each priority group",
    )

    add_cmd = commands.add_parser("add", help="Create a task")
    add_cmd.add_argument("title")
    _add_task_fields(add_cmd)

    edit_cmd = commands.add_parser("edit", help="Change a task")
    edit_cmd.add_argument("id")
    edit_cmd.add_argument("--title", default=None)
    _add_task_fields(edit_cmd)

    done_cmd = commands.add_parser("done", help="Toggle a task's completed state")
    done_cmd.add_argument("id")

    rm_cmd = commands.add_parser("rm", help="Delete a task")
    rm_cmd.add_argument("id")

    commands.add_parser("clear", help="Delete all completed tasks")

    move_cmd = commands.add_parser("move", help="Move a task to another task's position")
    move_cmd.add_argument("src")
    move_cmd.add_argument("dst")

    export_cmd = commands.add_parser("export", help="Export tasks to a JSON or YAML file")
    export_cmd.add_argument("path", type=Path)

    import_cmd = commands.add_parser("import", help="Import tasks from a JSON or YAML file")
    import_cmd.add_argument("path", type=Path)

    return parser.parse_args(argv)


def _task_fields(args: argparse.Namespace) -> dict[str, Any]:
    """Collect the task options that were given."""
    fields: dict[str, Any] = {}
    if args.command == "edit" and args.title is not None:
        fields["title"] = args.title
    if args.description is not None:
        fields["description"] = args.description
    if args.due is not None:
        fields["due_date"] = args.due
    if args.priority is not None:
        fields["priority"] = args.priority
    if args.tags is not None:
        fields["tags"] = args.tags
    return fields


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.remote_url:
        settings_kwargs["remote_url"] = args.remote_url
    if args.cache_dir:
        settings_kwargs["cache_dir"] = args.cache_dir
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)

    # Import here so --help stays fast
    from .cli import commands

    if args.command == "list":
        return commands.run_list(settings, args.filter, args.search, args.sort)
    if args.command == "add":
        return commands.run_add(settings, args.title, **_task_fields(args))
    if args.command == "edit":
        return commands.run_edit(settings, args.id, _task_fields(args))
    if args.command == "done":
        return commands.run_toggle(settings, args.id)
    if args.command == "rm":
        return commands.run_delete(settings, args.id)
    if args.command == "clear":
        return commands.run_clear(settings)
    if args.command == "move":
        return commands.run_move(settings, args.src, args.dst)
    if args.command == "export":
        return commands.run_export(settings, args.path)
    if args.command == "import":
        return commands.run_import(settings, args.path)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
