"""
Shared fixtures for bacon tests.

Every test runs with an isolated HOME and no bacon-related environment
variables, so a developer's real ~/.config/pnc-bacon never leaks in.
"""

import logging
import os

import pytest

import bacon.config


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Isolate HOME, PNC_CONFIG_PATH, BACON_* and the active config."""
    monkeypatch.setenv('HOME', str(tmp_path))
    monkeypatch.delenv(bacon.config.CONFIG_ENV, raising=False)
    for key in list(os.environ):
        if key.startswith(bacon.config.ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)

    monkeypatch.setattr(bacon.config, '_config_file_path', None)
    monkeypatch.setattr(bacon.config, '_config', None)

    levels = {name: logging.getLogger(name).level for name in ('', 'bacon', 'urllib3')}
    yield tmp_path
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


@pytest.fixture
def config_folder(tmp_path):
    """A config folder holding a usable config.yaml."""
    folder = tmp_path / 'pnc-config'
    folder.mkdir()
    (folder / 'config.yaml').write_text(
        "pnc:\n"
        "  url: https://pnc.example.com\n"
        "  token: secret-token\n"
        "  page_size: 2\n"
    )
    return folder
