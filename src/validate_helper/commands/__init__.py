"""Subcommand modules for validate-helper.

Provides register_commands() which uses deferred imports to keep
``validate-helper --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every check command on the root CLI group."""
    from validate_helper.commands.checks import (
        between,
        email,
        password,
        positive,
        username,
        uuid_cmd,
    )

    cli.add_command(username)
    cli.add_command(password)
    cli.add_command(email)
    cli.add_command(between)
    cli.add_command(positive)
    cli.add_command(uuid_cmd)
