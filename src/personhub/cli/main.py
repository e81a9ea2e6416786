# personhub/cli/main.py
import argparse

from personhub.cli import api, db, logging as logging_cli

# command name -> (help text, module exposing register_subcommands/dispatch)
COMMANDS = {
    "db": ("Database operations", db),
    "api": ("Run or check the web service", api),
    "logging": ("Logging utilities", logging_cli),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="personhub", description="personhub command line")
    subparsers = parser.add_subparsers(dest="command", required=True)
    for name, (help_text, module) in COMMANDS.items():
        command_parser = subparsers.add_parser(name, help=help_text)
        module.register_subcommands(
            command_parser.add_subparsers(dest="subcommand", required=True)
        )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    _, module = COMMANDS[args.command]
    module.dispatch(args)


if __name__ == "__main__":
    main()
