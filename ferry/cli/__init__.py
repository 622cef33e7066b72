"""Ferry CLI: convert and inspect Discord markup from the command line."""

import click
from ferry import __version__


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="ferry")
@click.pass_context
def cli(ctx):
    """Ferry: Discord markdown → Telegram MarkdownV2"""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Import all command modules (registers commands onto cli group)
from . import cmd_convert  # noqa: E402, F401
