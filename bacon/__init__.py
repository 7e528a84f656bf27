"""
bacon - command-line client for the PNC build system.

bacon exposes create/get/list/update operations over the PNC REST API.
Every command builds a request object, makes one API call and prints the
result as YAML (default) or JSON.

Quick Start:
    $ bacon pnc project list
    $ bacon pnc project create --description "Project description" "New Project Name"
    $ bacon pnc scm-repository create-and-sync "https://github.com/project-ncl/bacon.git"

Library use:
    from bacon.infra import ProjectClient

    client = ProjectClient("https://pnc.example.com")
    for project in client.get_all(query="name=like=%bacon%"):
        print(project.name)

Domain Objects:
    Project, SCMRepository, BuildConfiguration, Build

Clients:
    ProjectClient, SCMRepositoryClient
"""

__version__ = "2.0.0"

# Domain objects
from .domain import (
    Project,
    SCMRepository,
    CreateAndSyncSCMRequest,
    RepositoryCreationResponse,
    BuildConfiguration,
    Build,
)

# Clients
from .infra import (
    ProjectClient,
    SCMRepositoryClient,
    ClientException,
)

__all__ = [
    # Version
    "__version__",
    # Domain objects
    "Project",
    "SCMRepository",
    "CreateAndSyncSCMRequest",
    "RepositoryCreationResponse",
    "BuildConfiguration",
    "Build",
    # Clients
    "ProjectClient",
    "SCMRepositoryClient",
    "ClientException",
]
