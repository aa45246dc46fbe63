# ABOUTME: CLI package for booktree, built on Click.
# ABOUTME: Defines the root command group, configures logging, and registers subcommands.

import logging

import click

from booktree.cli.commands import shell_cmd
from booktree.cli.options import log_level_option


@click.group()
@click.version_option(package_name="booktree")
@log_level_option
def cli(log_level: str) -> None:
    """booktree - an in-memory, title-ordered book catalog."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


cli.add_command(shell_cmd.shell)
