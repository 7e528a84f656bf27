"""
SCM repository commands for bacon.
"""

import click

from ..cli_base import (
    BaconGroup,
    common_options,
    execute_helper,
    json_output_option,
    list_options,
    print_help_if_no_command,
)
from ..domain import CreateAndSyncSCMRequest
from ..infra import ClientCreator, SCMRepositoryClient
from ..output import print_result

CREATOR = ClientCreator(SCMRepositoryClient)


@click.group('scm-repository', cls=BaconGroup)
@common_options
@click.pass_context
def scm_repository_cmd(ctx):
    """Scm repository"""
    print_help_if_no_command(ctx)


@scm_repository_cmd.command('create-and-sync', examples={
    "Create repository with internal URL:":
        'pnc scm-repository create-and-sync "git+ssh://internal.example.com/some/project.git"',
    "Create repository with external URL:":
        'pnc scm-repository create-and-sync "https://external.example.com/some/project.git"',
    "Create repository with external URL and disabled pre-build sync:":
        'pnc scm-repository create-and-sync --disable-pre-build-sync '
        '"https://external.example.com/some/project.git"',
})
@click.argument('scm_url')
@click.option('--disable-pre-build-sync', 'pre_build_sync_disabled', is_flag=True,
              help='Disable the pre-build sync of external repo.')
@json_output_option
@common_options
@execute_helper
def create_and_sync(scm_url, pre_build_sync_disabled, json_output):
    """Create a repository"""
    request = CreateAndSyncSCMRequest(
        scm_url=scm_url,
        pre_build_sync_enabled=not pre_build_sync_disabled,
    )
    print_result(json_output, CREATOR.get_client_authenticated().create_new(request))


@scm_repository_cmd.command('get', examples={
    "Get scm-repository with id 8:": "pnc scm-repository get 8",
})
@click.argument('repository_id')
@json_output_option
@common_options
@execute_helper
def get(repository_id, json_output):
    """Get a repository"""
    print_result(json_output, CREATOR.get_client().get_specific(repository_id))


@scm_repository_cmd.command('list', examples={
    "List all SCM Repositories:": "pnc scm-repository list",
    "List all SCM Repositories of project-ncl github organization:":
        'pnc scm-repository list --search-url "github.com/project-ncl"',
    "Get SCM Repository of Bacon in project-ncl github organization:":
        'pnc scm-repository list --match-url "https://github.com/project-ncl/bacon.git"',
})
@click.option('--match-url', default=None, help='Exact URL to search')
@click.option('--search-url', default=None, help='Part of the URL to search')
@list_options
@common_options
@execute_helper
def list_repositories(match_url, search_url, sort, query, json_output):
    """List repositories"""
    print_result(json_output, CREATOR.get_client().get_all(match_url, search_url, sort, query))


@scm_repository_cmd.command('list-build-configs', examples={
    "List all build configs having SCM Repository with id 8:": "pnc scm-repository list-build-configs 8",
})
@click.argument('repository_id')
@list_options
@common_options
@execute_helper
def list_build_configs(repository_id, sort, query, json_output):
    """List build configs that use a particular SCM repository"""
    print_result(json_output, CREATOR.get_client().get_build_configs(repository_id, sort, query))
