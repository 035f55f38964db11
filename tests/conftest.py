"""
Shared pytest fixtures.

Every test logs into its own temp directory instead of ./tagjump.log.
"""

import pytest

import utils
from jumplist import JumpHistory
from navigator import TagNavigator
from tagresolve import TagResolver, TagsConfig
from tests.factories import FakeHost


@pytest.fixture(autouse=True)
def log_to_tmp(tmp_path, monkeypatch):
    log_file = tmp_path / "tagjump.log"
    monkeypatch.setattr(utils, "LOG_FILE", str(log_file))
    return log_file


@pytest.fixture
def config():
    return TagsConfig()


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def navigator(host, config):
    resolver = TagResolver(config, host.project_root, host.report_error)
    return TagNavigator(host, resolver, JumpHistory())
