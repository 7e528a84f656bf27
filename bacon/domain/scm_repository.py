"""
SCM repository domain objects for bacon.

PNC keeps an internal mirror (internalUrl) of every repository it builds
from; externalUrl points at the upstream it is synced from, if any.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any

from .project import compact


@dataclass
class SCMRepository:
    """SCM repository registered in PNC."""
    id: Optional[str] = None
    internal_url: Optional[str] = None
    external_url: Optional[str] = None
    pre_build_sync_enabled: Optional[bool] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'SCMRepository':
        """Create from PNC API response."""
        return cls(
            id=data.get('id'),
            internal_url=data.get('internalUrl'),
            external_url=data.get('externalUrl'),
            pre_build_sync_enabled=data.get('preBuildSyncEnabled'),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the API's JSON shape."""
        return compact({
            'id': self.id,
            'internalUrl': self.internal_url,
            'externalUrl': self.external_url,
            'preBuildSyncEnabled': self.pre_build_sync_enabled,
        })


@dataclass
class CreateAndSyncSCMRequest:
    """Request body for POST /scm-repositories/create-and-sync."""
    scm_url: str
    pre_build_sync_enabled: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            'scmUrl': self.scm_url,
            'preBuildSyncEnabled': self.pre_build_sync_enabled,
        }


@dataclass
class RepositoryCreationResponse:
    """
    Response to a create-and-sync request.

    An internal URL is created immediately and `repository` is set. An
    external URL starts an asynchronous sync task on the server and only
    `task_id` is set.
    """
    task_id: Optional[int] = None
    repository: Optional[SCMRepository] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'RepositoryCreationResponse':
        repository = data.get('repository')
        return cls(
            task_id=data.get('taskId'),
            repository=SCMRepository.from_api_response(repository) if repository else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact({
            'taskId': self.task_id,
            'repository': self.repository.to_dict() if self.repository else None,
        })
