from typing import Any

import click

from sdtgen.cli.options import load_unit_options, unit_options
from sdtgen.errors import UnitGenerationError
from sdtgen.services import UnitService


@click.command('generate')
@unit_options
@click.pass_context
def generate(ctx: click.Context, **params: Any) -> None:
    """Write the service unit and, with --timer, its timer unit.
    """
    options = load_unit_options(ctx, params)

    try:
        report = UnitService().generate(options)
    except UnitGenerationError as e:
        click.echo(str(e))
        ctx.exit(1)

    for result in report.results:
        if result.success:
            click.echo(f'Wrote {result.kind} file {result.path}')
        else:
            click.echo(result.error_message)

    if not report.success:
        ctx.exit(1)
