"""
Project commands for bacon.
"""

import dataclasses

import click

from ..cli_base import (
    BaconGroup,
    common_options,
    execute_helper,
    json_output_option,
    list_options,
    print_help_if_no_command,
)
from ..domain import Project
from ..infra import ClientCreator, ProjectClient
from ..output import print_result

CREATOR = ClientCreator(ProjectClient)


@click.group('project', cls=BaconGroup)
@common_options
@click.pass_context
def project_cmd(ctx):
    """Project"""
    print_help_if_no_command(ctx)


@project_cmd.command('create', examples={
    "Create new project:": 'pnc project create "New Project Name"',
    "Create new project with description and project url:":
        'pnc project create --description "Project description" '
        '--project-url "https://example.com/" "New Project Name"',
})
@click.argument('name')
@click.option('--description', default='', help='Description of project')
@click.option('--project-url', default='', help='Project-URL of project')
@click.option('--issue-tracker-url', default='', help='Issue-Tracker-URL of project')
@json_output_option
@common_options
@execute_helper
def create(name, description, project_url, issue_tracker_url, json_output):
    """Create a project"""
    project = Project(
        name=name,
        description=description,
        project_url=project_url,
        issue_tracker_url=issue_tracker_url,
    )
    print_result(json_output, CREATOR.get_client_authenticated().create_new(project))


@project_cmd.command('get', examples={
    "Get project with id 8:": "pnc project get 8",
})
@click.argument('project_id')
@json_output_option
@common_options
@execute_helper
def get(project_id, json_output):
    """Get a project"""
    print_result(json_output, CREATOR.get_client().get_specific(project_id))


@project_cmd.command('list', examples={
    "List all projects:": "pnc project list",
    "List all projects that have 'Foo' in their description:":
        'pnc project list --query "description=LIKE=*Foo*"',
})
@list_options
@common_options
@execute_helper
def list_projects(sort, query, json_output):
    """List projects"""
    print_result(json_output, CREATOR.get_client().get_all(sort, query))


@project_cmd.command('list-build-configs', examples={
    "List all build configs in project with id 8:": "pnc project list-build-configs 8",
})
@click.argument('project_id')
@list_options
@common_options
@execute_helper
def list_build_configs(project_id, sort, query, json_output):
    """List build configurations for a project"""
    print_result(json_output, CREATOR.get_client().get_build_configurations(project_id, sort, query))


@project_cmd.command('list-builds')
@click.argument('project_id')
@list_options
@common_options
@execute_helper
def list_builds(project_id, sort, query, json_output):
    """List builds for a project"""
    print_result(json_output, CREATOR.get_client().get_builds(project_id, sort, query))


@project_cmd.command('update', examples={
    "Set new description for project with id 8:": 'pnc project update --description "New description" 8',
})
@click.argument('project_id')
@click.option('--name', default=None, help='Name of project')
@click.option('--description', default=None, help='Description of project')
@click.option('--project-url', default=None, help='Project-URL of project')
@click.option('--issue-tracker-url', default=None, help='Issue-Tracker-URL of project')
@common_options
@execute_helper
def update(project_id, name, description, project_url, issue_tracker_url):
    """Update a project

    Only the given options change; every other field keeps its current value.
    """
    project = CREATOR.get_client().get_specific(project_id)

    changes = {
        'name': name,
        'description': description,
        'project_url': project_url,
        'issue_tracker_url': issue_tracker_url,
    }
    updated = dataclasses.replace(
        project, **{key: value for key, value in changes.items() if value is not None}
    )

    CREATOR.get_client_authenticated().update(project_id, updated)
