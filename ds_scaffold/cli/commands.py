#!/usr/bin/env python3
"""ds-scaffold CLI - Main Entry Point.

Usage:
    ds-scaffold <command> [options]

Commands:
    create    Scaffold a new data-science project (or --update an existing one)
    new       Alias for create
    help      Show this help message

Run 'ds-scaffold create --help' for all create options.
"""

from __future__ import annotations

import contextlib
import importlib
import sys

import click

from ds_scaffold import __version__

# Minimum number of CLI args (program name + command)
_MIN_ARGS = 2

# Commands implemented by argparse-based modules exposing main(argv) -> int
COMMANDS: dict[str, dict[str, str]] = {
    "create": {
        "module": "ds_scaffold.cli.scaffold_command",
        "description": "Scaffold a new data-science project (or --update an existing one)",
    },
}

COMMAND_ALIASES: dict[str, str] = {
    "new": "create",
}


def print_help() -> None:
    """Print help message with all available commands."""
    print(__doc__)
    print(f"Version: {__version__}")


def execute_command(command: str, extra_args: list[str]) -> int:
    """Run a registered command module with the remaining arguments."""
    cmd_info = COMMANDS.get(COMMAND_ALIASES.get(command, command))
    if cmd_info is None:
        print(f"❌ Unknown command: {command}")
        print("\nRun 'ds-scaffold help' to see available commands.")
        return 1

    module = importlib.import_module(cmd_info["module"])
    return int(module.main(extra_args))


@click.group(invoke_without_command=True)
@click.pass_context
def _click_cli(ctx: click.Context) -> int:
    """Top-level command group with passthrough command registration."""
    if ctx.invoked_subcommand is not None:
        return 0
    print_help()
    return 0


def _register_passthrough_command(command_name: str, description: str) -> None:
    """Register a click command that hands its raw args to argparse."""

    @click.command(
        name=command_name,
        help=description,
        context_settings={
            "allow_extra_args": True,
            "ignore_unknown_options": True,
        },
        add_help_option=False,
    )
    @click.pass_context
    def _cmd(ctx: click.Context) -> int:
        extra_args: list[str] = list(ctx.args)
        return execute_command(command_name, extra_args)

    _click_cli.add_command(_cmd)


def _register_commands() -> None:
    for cmd, info in COMMANDS.items():
        _register_passthrough_command(cmd, info["description"])

    for alias, canonical in COMMAND_ALIASES.items():
        _click_cli.add_command(_click_cli.commands[canonical], name=alias)

    @click.command(name="help", help="Show help message")
    def _help_cmd() -> int:
        print_help()
        return 0

    _click_cli.add_command(_help_cmd)


_register_commands()


def main() -> int:
    """Main CLI entry point."""
    import os

    # Let Click handle shell completion protocol before anything else.
    if os.environ.get("_DS_SCAFFOLD_COMPLETE"):
        with contextlib.suppress(SystemExit):
            _click_cli.main(
                args=sys.argv[1:],
                prog_name="ds-scaffold",
                standalone_mode=True,
            )
        return 0

    if len(sys.argv) < _MIN_ARGS or sys.argv[1] in ["help", "--help", "-h"]:
        print_help()
        return 0

    if sys.argv[1] == "--version":
        print(f"ds-scaffold {__version__}")
        return 0

    try:
        result = _click_cli.main(
            args=sys.argv[1:],
            prog_name="ds-scaffold",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return 130
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
