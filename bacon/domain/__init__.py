"""
Domain layer for bacon.

Plain data-transfer objects exchanged with the PNC REST API:
- Project: A product project grouping build configurations
- SCMRepository: An internal/external source repository pair
- BuildConfiguration: How to build something from an SCM repository
- Build: A single execution of a build configuration

These objects carry no behaviour beyond conversion from API responses
and back to the API's camelCase JSON shape.
"""

from .project import Project
from .scm_repository import SCMRepository, CreateAndSyncSCMRequest, RepositoryCreationResponse
from .build_configuration import BuildConfiguration
from .build import Build

__all__ = [
    'Project',
    'SCMRepository',
    'CreateAndSyncSCMRequest',
    'RepositoryCreationResponse',
    'BuildConfiguration',
    'Build',
]
