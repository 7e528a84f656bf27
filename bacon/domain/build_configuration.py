"""
Build configuration domain object for bacon.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from .project import compact
from .scm_repository import SCMRepository


@dataclass
class BuildConfiguration:
    """
    PNC build configuration.

    Only the fields bacon displays are typed. References to other
    entities it never inspects (project, environment) are kept as the raw
    API mappings.
    """
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    build_script: Optional[str] = None
    scm_revision: Optional[str] = None
    build_type: Optional[str] = None
    creation_time: Optional[str] = None
    modification_time: Optional[str] = None
    parameters: Dict[str, str] = field(default_factory=dict)
    scm_repository: Optional[SCMRepository] = None
    project: Optional[Dict[str, Any]] = None
    environment: Optional[Dict[str, Any]] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'BuildConfiguration':
        """Create from PNC API response."""
        scm_repository = data.get('scmRepository')
        return cls(
            id=data.get('id'),
            name=data.get('name'),
            description=data.get('description'),
            build_script=data.get('buildScript'),
            scm_revision=data.get('scmRevision'),
            build_type=data.get('buildType'),
            creation_time=data.get('creationTime'),
            modification_time=data.get('modificationTime'),
            parameters=data.get('parameters') or {},
            scm_repository=SCMRepository.from_api_response(scm_repository) if scm_repository else None,
            project=data.get('project'),
            environment=data.get('environment'),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the API's JSON shape."""
        return compact({
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'buildScript': self.build_script,
            'scmRevision': self.scm_revision,
            'buildType': self.build_type,
            'creationTime': self.creation_time,
            'modificationTime': self.modification_time,
            'parameters': self.parameters or None,
            'scmRepository': self.scm_repository.to_dict() if self.scm_repository else None,
            'project': self.project,
            'environment': self.environment,
        })
