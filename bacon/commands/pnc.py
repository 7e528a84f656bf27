import click

from ..cli_base import BaconGroup, common_options, print_help_if_no_command
from .project import project_cmd
from .scm_repository import scm_repository_cmd


@click.group('pnc', cls=BaconGroup)
@common_options
@click.pass_context
def pnc_cmd(ctx):
    """PNC sub-command"""
    print_help_if_no_command(ctx)


pnc_cmd.add_command(project_cmd)
pnc_cmd.add_command(scm_repository_cmd)
