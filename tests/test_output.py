"""
Tests for bacon.output.
"""

import json

import yaml

from bacon.domain import Project, SCMRepository
from bacon.output import format_yaml, print_result, to_data


def test_yaml_is_default(capsys):
    print_result(False, Project(id="8", name="bacon", project_url="https://example.com/"))
    out = capsys.readouterr().out

    assert out == "id: '8'\nname: bacon\nprojectUrl: https://example.com/\n"
    assert yaml.safe_load(out) == {"id": "8", "name": "bacon", "projectUrl": "https://example.com/"}


def test_json_on_flag(capsys):
    print_result(True, SCMRepository(id="42", pre_build_sync_enabled=True))
    out = capsys.readouterr().out

    assert json.loads(out) == {"id": "42", "preBuildSyncEnabled": True}
    assert out.startswith('{\n  "id": "42"')


def test_collections_become_lists(capsys):
    print_result(True, iter([Project(id="1"), Project(id="2")]))
    assert json.loads(capsys.readouterr().out) == [{"id": "1"}, {"id": "2"}]


def test_none_prints_nothing(capsys):
    print_result(False, None)
    print_result(True, None)
    assert capsys.readouterr().out == ""


def test_yaml_keeps_key_order():
    text = format_yaml(to_data(Project(name="z", description="a", id="1")))
    assert text.splitlines()[0] == "id: '1'"
    assert text.splitlines()[1] == "name: z"


def test_to_data_nested_mapping():
    assert to_data({"items": [Project(id="1")], "count": 1}) == {"items": [{"id": "1"}], "count": 1}
