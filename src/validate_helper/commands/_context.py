"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Configures logging and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from validate_helper.output.formatters import format_result

if TYPE_CHECKING:
    from validate_helper.config.settings import HelperSettings
    from validate_helper.result import CheckResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: HelperSettings) -> None:
        self.settings = settings

        from validate_helper.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: CheckResult) -> None:
        """Format and output a CheckResult with correct exit semantics.

        * Success: writes to stdout (nothing in quiet mode), returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            if not self.settings.quiet or self.settings.json_output:
                click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
