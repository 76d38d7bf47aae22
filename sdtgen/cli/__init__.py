import click

from sdtgen import __version__
from sdtgen.cli.commands.generate import generate
from sdtgen.cli.commands.preview import preview


@click.group()
@click.version_option(__version__, prog_name='sdtgen')
def cli() -> None:
    """sdtgen - Generate systemd service and timer units.
    """
    pass


cli.add_command(generate)
cli.add_command(preview)


def run_cli() -> None:
    """Run the CLI interface.
    """
    cli()


__all__ = [
    'cli',
    'run_cli',
]
