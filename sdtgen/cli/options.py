from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from sdtgen.models import (
    RestartPolicy,
    ServiceType,
    UnitOptions,
    UnitSectionLayout,
)
from sdtgen.system.constants import (
    EnvironmentVariables,
    SystemdPaths,
    UnitTargets,
)


def _help(field_name: str) -> str:
    return UnitOptions.describe(field_name)


_PATH = click.Path(dir_okay=False, path_type=Path)

_OPTIONS = [
    # [Unit]
    click.option('-d', '--description', help=_help('description')),
    click.option('-b', '--before', multiple=True, help=_help('before')),
    click.option('-a', '--after', multiple=True, help=_help('after')),
    click.option(
        '-c',
        '--conflicts',
        multiple=True,
        help=_help('conflicts'),
    ),
    click.option('-r', '--requires', multiple=True, help=_help('requires')),
    click.option('--on-failure', help=_help('on_failure')),
    click.option(
        '--unit-layout',
        type=click.Choice([layout.value for layout in UnitSectionLayout]),
        default=UnitSectionLayout.CANONICAL.value,
        show_default=True,
        help=_help('unit_layout'),
    ),

    # [Service]
    click.option(
        '-t',
        '--type',
        'service_type',
        type=click.Choice([service_type.value for service_type in ServiceType]),
        default=ServiceType.SIMPLE.value,
        show_default=True,
        help=_help('service_type'),
    ),
    click.option(
        '-e',
        '--exec-start',
        type=_PATH,
        required=True,
        help=_help('exec_start'),
    ),
    click.option('--exec-reload', type=_PATH, help=_help('exec_reload')),
    click.option('--exec-stop', type=_PATH, help=_help('exec_stop')),
    click.option(
        '--restart',
        type=click.Choice([policy.value for policy in RestartPolicy]),
        help=_help('restart'),
    ),
    click.option(
        '--restart-sec',
        type=click.IntRange(min=0),
        help=_help('restart_sec'),
    ),
    click.option('-u', '--user', help=_help('user')),
    click.option('-g', '--group', help=_help('group')),

    # [Install]
    click.option(
        '-w',
        '--wanted-by',
        default=UnitTargets.MULTI_USER.value,
        show_default=True,
        help=_help('wanted_by'),
    ),

    # Timer
    click.option(
        '-T',
        '--timer',
        'timer_enabled',
        is_flag=True,
        help=_help('timer_enabled'),
    ),
    click.option(
        '-p',
        '--persistent',
        is_flag=True,
        help=_help('persistent'),
    ),
    click.option('--on-calendar', help=_help('on_calendar')),
    click.option('--on-unit-active-sec', help=_help('on_unit_active_sec')),
    click.option(
        '--on-unit-inactive-sec',
        help=_help('on_unit_inactive_sec'),
    ),
    click.option('--accuracy-sec', help=_help('accuracy_sec')),

    click.option(
        '-o',
        '--output',
        'output_dir',
        type=click.Path(file_okay=False, path_type=Path),
        default=SystemdPaths.SYSTEM_UNIT_DIR.value,
        envvar=EnvironmentVariables.OUTPUT_DIR.value,
        show_default=True,
        help=_help('output_dir'),
    ),
    click.option(
        '--no-check',
        'skip_exec_check',
        is_flag=True,
        help=_help('skip_exec_check'),
    ),
    click.option('-n', '--name', required=True, help=_help('name')),
]


def unit_options(command: Callable[..., Any]) -> Callable[..., Any]:
    """Attach every unit option to a click command.
    """
    for option in reversed(_OPTIONS):
        command = option(command)
    return command


def load_unit_options(
    ctx: click.Context,
    params: dict[str, Any],
) -> UnitOptions:
    """Build UnitOptions from parsed command parameters.

    Exits with status 1 if the parameters are rejected by the model.
    """
    try:
        return UnitOptions(**params)
    except ValidationError as e:
        for error in e.errors():
            location = '.'.join(str(part) for part in error['loc'])
            click.echo(f'Invalid options: {location}: {error["msg"]}')
        ctx.exit(1)
