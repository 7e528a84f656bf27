"""
Tests for bacon domain objects.
"""

import dataclasses

from bacon.domain import (
    Build,
    BuildConfiguration,
    CreateAndSyncSCMRequest,
    Project,
    RepositoryCreationResponse,
    SCMRepository,
)

SAMPLE_PROJECT = {
    "id": "8",
    "name": "bacon",
    "description": "PNC command-line client",
    "projectUrl": "https://github.com/project-ncl/bacon",
    "issueTrackerUrl": "https://issues.example.com/browse/NCL",
    "engineeringTeam": "NCL",
    "technicalLeader": "lead@example.com",
    "buildConfigs": {"100": {"id": "100", "name": "bacon-build"}},
}

SAMPLE_REPOSITORY = {
    "id": "42",
    "internalUrl": "git+ssh://internal.example.com/project-ncl/bacon.git",
    "externalUrl": "https://github.com/project-ncl/bacon.git",
    "preBuildSyncEnabled": True,
}


class TestProject:
    """Tests for Project."""

    def test_from_api_response(self):
        project = Project.from_api_response(SAMPLE_PROJECT)
        assert project.id == "8"
        assert project.project_url == "https://github.com/project-ncl/bacon"
        assert project.issue_tracker_url == "https://issues.example.com/browse/NCL"
        assert project.build_configs == {"100": {"id": "100", "name": "bacon-build"}}

    def test_to_dict_restores_api_shape(self):
        assert Project.from_api_response(SAMPLE_PROJECT).to_dict() == SAMPLE_PROJECT

    def test_to_dict_omits_unset_fields(self):
        project = Project(name="New Project Name", description="")
        assert project.to_dict() == {"name": "New Project Name", "description": ""}

    def test_replace_keeps_other_fields(self):
        project = Project.from_api_response(SAMPLE_PROJECT)
        updated = dataclasses.replace(project, description="New description")
        assert updated.description == "New description"
        assert updated.name == "bacon"
        assert project.description == "PNC command-line client"


class TestSCMRepository:
    """Tests for SCM repository objects."""

    def test_round_trip(self):
        assert SCMRepository.from_api_response(SAMPLE_REPOSITORY).to_dict() == SAMPLE_REPOSITORY

    def test_create_and_sync_request(self):
        request = CreateAndSyncSCMRequest(scm_url="https://github.com/x/y.git",
                                          pre_build_sync_enabled=False)
        assert request.to_dict() == {
            "scmUrl": "https://github.com/x/y.git",
            "preBuildSyncEnabled": False,
        }

    def test_creation_response_with_repository(self):
        response = RepositoryCreationResponse.from_api_response({"repository": SAMPLE_REPOSITORY})
        assert response.task_id is None
        assert response.repository.id == "42"
        assert response.to_dict() == {"repository": SAMPLE_REPOSITORY}

    def test_creation_response_with_task(self):
        response = RepositoryCreationResponse.from_api_response({"taskId": 1234})
        assert response.repository is None
        assert response.to_dict() == {"taskId": 1234}


class TestBuildConfiguration:
    """Tests for BuildConfiguration."""

    def test_nested_scm_repository(self):
        data = {
            "id": "100",
            "name": "bacon-build",
            "buildScript": "mvn clean deploy",
            "buildType": "MVN",
            "parameters": {"ALIGNMENT_PARAMETERS": "-DskipTests"},
            "scmRepository": SAMPLE_REPOSITORY,
            "project": {"id": "8", "name": "bacon"},
        }
        config = BuildConfiguration.from_api_response(data)
        assert isinstance(config.scm_repository, SCMRepository)
        assert config.scm_repository.internal_url.startswith("git+ssh://")
        assert config.to_dict() == data

    def test_minimal(self):
        assert BuildConfiguration.from_api_response({"id": "1"}).to_dict() == {"id": "1"}


class TestBuild:
    """Tests for Build."""

    def test_round_trip(self):
        data = {
            "id": "ABC123",
            "status": "SUCCESS",
            "temporaryBuild": False,
            "scmUrl": "https://github.com/project-ncl/bacon.git",
            "scmRevision": "deadbeef",
            "submitTime": "2020-01-01T10:00:00Z",
            "project": {"id": "8"},
        }
        build = Build.from_api_response(data)
        assert build.status == "SUCCESS"
        assert build.temporary_build is False
        assert build.to_dict() == data
