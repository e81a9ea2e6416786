"""Command-line helpers for the personhub database.

Registers ``init``, ``status``, ``add`` and ``list`` on an ``argparse``
parser and dispatches the parsed arguments to :mod:`personhub.db.operations`.
"""

import json
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from personhub.api.forms import bind_person_form
from personhub.api.messages import Messages
from personhub.api.models.person import PersonOut
from personhub.db import operations
from personhub.logging import get_logger


def register_subcommands(subparsers):
    """Attach database subcommands to an ``argparse`` parser.

    Examples
    --------
    >>> import argparse
    >>> parser = argparse.ArgumentParser(prog="personhub db")
    >>> subparsers = parser.add_subparsers(dest="subcommand", required=True)
    >>> register_subcommands(subparsers)
    >>> parser.parse_args(["add", "--name", "Ada", "--age", "36"])
    Namespace(subcommand='add', name='Ada', age='36', file=None)
    """

    init_parser = subparsers.add_parser("init", help="initialize db")
    init_parser.add_argument("--file", required=False)

    status_parser = subparsers.add_parser("status", help="Check DB status")
    status_parser.add_argument("--file", required=False)

    add_parser = subparsers.add_parser("add", help="Add a person")
    add_parser.add_argument("--name", required=True)
    add_parser.add_argument("--age", required=True)
    add_parser.add_argument("--file", required=False)

    list_parser = subparsers.add_parser("list", help="List people")
    list_parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    list_parser.add_argument("--file", required=False)


def dispatch(args):
    """Run the database operation associated with ``args.subcommand``.

    Invalid ``add`` input raises ``ValueError`` carrying the same messages the
    web form shows.
    """

    logger = get_logger(__file__)

    if args.subcommand == "status":
        operations.check_status(file_path=args.file)
    elif args.subcommand == "init":
        operations.initialize(file_path=args.file)
    elif args.subcommand == "add":
        form = bind_person_form({"name": args.name, "age": args.age})
        if form.has_errors:
            messages = Messages()
            details = "; ".join(
                f"{error.field}: {messages(error.key, *error.args)}" for error in form.errors
            )
            raise ValueError(f"invalid person: {details}")
        person = operations.add_person(form.value.to_create(), file_path=args.file)
        print(json.dumps(person.model_dump()))
    elif args.subcommand == "list":
        people = operations.list_people(file_path=args.file)
        if getattr(args, "json", False):
            print(json.dumps([p.model_dump() for p in people]))
        else:
            _render_people(people)
    else:
        logger.info("no dispatched function provided for %s", args.subcommand)


def _render_people(people: Sequence[PersonOut], console: Console | None = None) -> None:
    """Pretty-print people using ``rich``."""

    if console is None:
        console = Console()

    table = Table(title="People")
    table.add_column("ID", justify="right", style="bold cyan")
    table.add_column("Name", style="magenta")
    table.add_column("Age", justify="right", style="green")

    if not people:
        table.add_row("[dim]-[/dim]", "[dim]No people found[/dim]", "")
    for person in people:
        table.add_row(str(person.id), person.name, str(person.age))

    console.print(table)
