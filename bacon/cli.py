#!/usr/bin/env python3

import logging
import sys

import click

from bacon.cli_base import BaconGroup, common_options, print_help_if_no_command
from bacon.commands.pnc import pnc_cmd
from bacon.exit_codes import FAILURE, FatalError

logger = logging.getLogger(__name__)


@click.group(cls=BaconGroup, context_settings={'help_option_names': ['-h', '--help']})
@common_options
@click.pass_context
def cli(ctx):
    """bacon - command-line client for the PNC build system.

    Create, inspect, list and update PNC projects and SCM repositories.
    Results are printed as YAML, or as JSON with -o.
    """
    print_help_if_no_command(ctx)


# Command groups
cli.add_command(pnc_cmd)


def main():
    try:
        cli()
    except FatalError as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(FAILURE)

if __name__ == "__main__":
    main()
