"""
Build domain object for bacon.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any

from .project import compact


@dataclass
class Build:
    """A single PNC build record."""
    id: Optional[str] = None
    status: Optional[str] = None
    build_content_id: Optional[str] = None
    temporary_build: Optional[bool] = None
    scm_url: Optional[str] = None
    scm_revision: Optional[str] = None
    scm_tag: Optional[str] = None
    submit_time: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    project: Optional[Dict[str, Any]] = None
    build_config_revision: Optional[Dict[str, Any]] = None
    environment: Optional[Dict[str, Any]] = None
    user: Optional[Dict[str, Any]] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'Build':
        """Create from PNC API response."""
        return cls(
            id=data.get('id'),
            status=data.get('status'),
            build_content_id=data.get('buildContentId'),
            temporary_build=data.get('temporaryBuild'),
            scm_url=data.get('scmUrl'),
            scm_revision=data.get('scmRevision'),
            scm_tag=data.get('scmTag'),
            submit_time=data.get('submitTime'),
            start_time=data.get('startTime'),
            end_time=data.get('endTime'),
            project=data.get('project'),
            build_config_revision=data.get('buildConfigRevision'),
            environment=data.get('environment'),
            user=data.get('user'),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the API's JSON shape."""
        return compact({
            'id': self.id,
            'status': self.status,
            'buildContentId': self.build_content_id,
            'temporaryBuild': self.temporary_build,
            'scmUrl': self.scm_url,
            'scmRevision': self.scm_revision,
            'scmTag': self.scm_tag,
            'submitTime': self.submit_time,
            'startTime': self.start_time,
            'endTime': self.end_time,
            'project': self.project,
            'buildConfigRevision': self.build_config_revision,
            'environment': self.environment,
            'user': self.user,
        })
