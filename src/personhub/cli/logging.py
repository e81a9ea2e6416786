"""``personhub logging`` subcommands: set, show and locate the log level/file."""

import logging

from personhub.logging import get_logger, reset_logger
from personhub.logging.logging import get_configured_level, _resolve_log_file
from personhub.logging.config import save_log_level

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def register_subcommands(subparsers):
    set_level_parser = subparsers.add_parser("set-level", help="Persist the logging level")
    set_level_parser.add_argument("level", choices=LEVELS, help="Logging level to use")

    subparsers.add_parser("show-path", help="Show the log file location")
    subparsers.add_parser("show-level", help="Show the effective logging level")


def dispatch(args):
    """Run the handler for ``args.subcommand``; unknown names raise ``ValueError``."""

    def _set_level() -> None:
        level_name = args.level.upper()
        path = save_log_level(level_name)
        reset_logger()
        get_logger(level=getattr(logging, level_name))
        print(f"{level_name} saved to {path}")

    def _show_path() -> None:
        print(_resolve_log_file().resolve())

    def _show_level() -> None:
        get_logger()
        print(get_configured_level())

    commands = {
        "set-level": _set_level,
        "show-path": _show_path,
        "show-level": _show_level,
    }
    try:
        handler = commands[args.subcommand]
    except KeyError as exc:
        message = f"No handler for logging subcommand: {args.subcommand}"
        get_logger(__file__).error(message)
        raise ValueError(message) from exc

    handler()
