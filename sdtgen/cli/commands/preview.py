from typing import Any

import click

from sdtgen.cli.options import load_unit_options, unit_options
from sdtgen.errors import UnitGenerationError
from sdtgen.services import UnitService


@click.command('preview')
@unit_options
@click.pass_context
def preview(ctx: click.Context, **params: Any) -> None:
    """Print the generated units without writing them.
    """
    options = load_unit_options(ctx, params)

    try:
        unit_preview = UnitService().preview(options)
    except UnitGenerationError as e:
        click.echo(str(e))
        ctx.exit(1)

    click.echo(f'# {unit_preview.service_path}')
    click.echo(unit_preview.service_content, nl=False)

    if unit_preview.timer_content is not None:
        click.echo()
        click.echo(f'# {unit_preview.timer_path}')
        click.echo(unit_preview.timer_content, nl=False)
