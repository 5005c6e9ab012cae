"""Shared test fixtures for gitcfg tests.

Created: 2025-11-08
"""

import pytest
from click.testing import CliRunner

from gitcfg.core.models import Config, new_config


SAMPLE_CONFIG = b"""[core]
\trepositoryformatversion = 0
\tbare = true
[remote "origin"]
\turl = git@github.com:example/project.git
\tfetch = +refs/heads/*:refs/remotes/origin/*
\tpushurl = git@github.com:mirror/project.git
[remote "alt"]
\turl = https://example.com/alt.git
\tfetch = +refs/heads/*:refs/remotes/alt/*
\tfetch = +refs/pull/*:refs/remotes/alt/pull/*
[branch "master"]
\tremote = origin
\tmerge = refs/heads/master
"""


@pytest.fixture
def sample_config_bytes() -> bytes:
    """Git config text with core, two remotes and an unmodeled branch section."""
    return SAMPLE_CONFIG


@pytest.fixture
def sample_config(sample_config_bytes) -> Config:
    """Config parsed from the sample text."""
    cfg = new_config()
    cfg.unmarshal(sample_config_bytes)
    return cfg


@pytest.fixture
def sample_config_path(tmp_path, sample_config_bytes):
    """Sample config written to a temporary file."""
    path = tmp_path / "config"
    path.write_bytes(sample_config_bytes)
    return path


@pytest.fixture
def runner():
    """Click CLI runner."""
    return CliRunner()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove gitcfg environment overrides."""
    for name in ("GITCFG_LOG_LEVEL", "GITCFG_FORMAT", "GITCFG_SORT_REMOTES"):
        monkeypatch.delenv(name, raising=False)
