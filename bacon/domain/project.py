"""
Project domain object for bacon.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any


def compact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop unset (None) entries so output only shows what the server knows."""
    return {key: value for key, value in data.items() if value is not None}


@dataclass
class Project:
    """
    PNC project.

    Examples:
        Project(name="New Project Name", description="", project_url="")
        dataclasses.replace(project, description="New description")
    """
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    project_url: Optional[str] = None
    issue_tracker_url: Optional[str] = None
    engineering_team: Optional[str] = None
    technical_leader: Optional[str] = None
    build_configs: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'Project':
        """Create from PNC API response."""
        return cls(
            id=data.get('id'),
            name=data.get('name'),
            description=data.get('description'),
            project_url=data.get('projectUrl'),
            issue_tracker_url=data.get('issueTrackerUrl'),
            engineering_team=data.get('engineeringTeam'),
            technical_leader=data.get('technicalLeader'),
            build_configs=data.get('buildConfigs') or {},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the API's JSON shape."""
        return compact({
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'projectUrl': self.project_url,
            'issueTrackerUrl': self.issue_tracker_url,
            'engineeringTeam': self.engineering_team,
            'technicalLeader': self.technical_leader,
            'buildConfigs': self.build_configs or None,
        })
