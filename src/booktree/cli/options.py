# ABOUTME: Shared Click options for booktree CLI commands.
# ABOUTME: Provides reusable decorators for common flags like --log-level.

import click

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

log_level_option = click.option(
    "--log-level",
    "log_level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    envvar="BOOKTREE_LOG_LEVEL",
    show_envvar=True,
    help=f"Logging verbosity (default: {DEFAULT_LOG_LEVEL})",
)
