"""
Infrastructure layer for bacon.

Contains abstractions for external systems:
- PncClient: PNC REST API access (ProjectClient, SCMRepositoryClient)
- RemoteCollection: Lazily paged API results
- ClientCreator: Clients built from the active configuration

These provide clean interfaces that can be mocked for testing.
"""

from .pnc_client import (
    PncClient,
    ProjectClient,
    SCMRepositoryClient,
    RemoteCollection,
    ClientException,
    RemoteResourceException,
    RemoteResourceNotFoundException,
)
from .client_creator import ClientCreator

__all__ = [
    'PncClient',
    'ProjectClient',
    'SCMRepositoryClient',
    'RemoteCollection',
    'ClientException',
    'RemoteResourceException',
    'RemoteResourceNotFoundException',
    'ClientCreator',
]
