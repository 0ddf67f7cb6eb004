"""Commands: run a single guard against a value from the command line."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

import click

from validate_helper import validate
from validate_helper.checks import run_check
from validate_helper.commands._base import CheckCommand, param_options

if TYPE_CHECKING:
    from validate_helper.commands._context import AppContext


@click.command(
    cls=CheckCommand,
    examples="""\
  validate-helper username jdoe_42
  validate-helper username jane@example.com
  validate-helper --json username ab --param user --field name""",
)
@click.argument("value")
@param_options
@click.pass_obj
def username(app: AppContext, value: str, param_name: str, field: str | None) -> None:
    """Check a username (or an email address used as one)."""
    app.emit(run_check("username", validate.username, value, param_name=param_name, field=field))


@click.command(
    cls=CheckCommand,
    examples="""\
  validate-helper password 'Abcdefghi1#'
  validate-helper password 'Abcdefghijkl1#' --min-length 14""",
)
@click.argument("value")
@click.option(
    "--min-length",
    type=click.IntRange(min=1),
    default=None,
    help="Minimum length (default: [password] min_length, or 10).",
)
@param_options
@click.pass_obj
def password(
    app: AppContext,
    value: str,
    min_length: int | None,
    param_name: str,
    field: str | None,
) -> None:
    """Check password strength."""
    if min_length is None:
        min_length = app.settings.password.min_length
    app.emit(
        run_check(
            "password",
            validate.password,
            value,
            param_name=param_name,
            field=field,
            min_password_length=min_length,
        )
    )


@click.command(
    cls=CheckCommand,
    examples="""\
  validate-helper email user@example.co.uk
  validate-helper --json email 'not-an-email'""",
)
@click.argument("value")
@param_options
@click.pass_obj
def email(app: AppContext, value: str, param_name: str, field: str | None) -> None:
    """Check an email address."""
    app.emit(run_check("email", validate.email, value, param_name=param_name, field=field))


@click.command(
    cls=CheckCommand,
    examples="""\
  validate-helper between 5 --min 1 --max 10
  validate-helper between 0.5 --min 1 --max 10 --param ratio""",
)
@click.argument("value", type=float)
@click.option("--min", "min_value", type=float, required=True, help="Inclusive lower bound.")
@click.option("--max", "max_value", type=float, required=True, help="Inclusive upper bound.")
@param_options
@click.pass_obj
def between(
    app: AppContext,
    value: float,
    min_value: float,
    max_value: float,
    param_name: str,
    field: str | None,
) -> None:
    """Check that a number lies within inclusive bounds."""
    app.emit(
        run_check(
            "between",
            validate.between,
            value,
            min_value,
            max_value,
            param_name=param_name,
            field=field,
        )
    )


@click.command(
    cls=CheckCommand,
    examples="""\
  validate-helper positive 3
  validate-helper positive --allow-zero 0
  validate-helper positive -- -1""",
)
@click.argument("value", type=int)
@click.option("--allow-zero", is_flag=True, help="Accept 0 as well.")
@param_options
@click.pass_obj
def positive(
    app: AppContext,
    value: int,
    allow_zero: bool,
    param_name: str,
    field: str | None,
) -> None:
    """Check that an integer is greater than 0."""
    if allow_zero:
        result = run_check(
            "positive_or_zero",
            validate.positive_or_zero,
            value,
            param_name=param_name,
            field=field,
        )
    else:
        result = run_check("positive", validate.positive, value, param_name=param_name, field=field)
    app.emit(result)


@click.command(
    "uuid",
    cls=CheckCommand,
    examples="""\
  validate-helper uuid 3f2504e0-4f89-11d3-9a0c-0305e82c3301
  validate-helper uuid 00000000-0000-0000-0000-000000000000""",
)
@click.argument("value", type=click.UUID)
@param_options
@click.pass_obj
def uuid_cmd(app: AppContext, value: uuid.UUID, param_name: str, field: str | None) -> None:
    """Check that an identifier is not the nil UUID."""
    app.emit(run_check("uuid", validate.not_empty, value, param_name=param_name, field=field))
