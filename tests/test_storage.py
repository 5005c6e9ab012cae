"""
Tests for config storage.

Modified: 2025-11-08
"""

import pytest
from gitcfg.core.exceptions import ConfigDecodeError, RemoteConfigEmptyURLError
from gitcfg.core.models import RemoteConfig, new_config
from gitcfg.core.storage import ConfigStorer, MemoryConfigStorage


class TestMemoryConfigStorage:
    """Test MemoryConfigStorage."""

    def test_is_config_storer(self):
        """Test the memory storage implements the storer contract."""
        assert isinstance(MemoryConfigStorage(), ConfigStorer)

    def test_empty_storage(self):
        """Test an empty storage returns an empty config."""
        cfg = MemoryConfigStorage().config()

        assert cfg.remotes == {}
        assert cfg.core.is_bare is False

    def test_initial_data(self, sample_config_bytes):
        """Test storage seeded with git-config text."""
        cfg = MemoryConfigStorage(sample_config_bytes).config()

        assert cfg.core.is_bare is True
        assert "origin" in cfg.remotes

    def test_initial_data_decode_error(self):
        """Test malformed seed data fails on read."""
        storage = MemoryConfigStorage(b"[core\n")

        with pytest.raises(ConfigDecodeError):
            storage.config()

    def test_set_config_round_trip(self):
        """Test a stored config is returned with defaults applied."""
        storage = MemoryConfigStorage()
        cfg = new_config()
        cfg.add_remote(RemoteConfig(name="origin", url="https://example.com/repo.git"))

        storage.set_config(cfg)
        stored = storage.config()

        assert stored.remotes["origin"].url == "https://example.com/repo.git"
        assert stored.remotes["origin"].fetch == ["+refs/heads/*:refs/remotes/origin/*"]

    def test_set_config_validates(self, sample_config_bytes):
        """Test an invalid config is rejected and nothing is stored."""
        storage = MemoryConfigStorage(sample_config_bytes)
        cfg = storage.config()
        cfg.add_remote(RemoteConfig(name="broken"))

        with pytest.raises(RemoteConfigEmptyURLError):
            storage.set_config(cfg)

        assert "broken" not in storage.config().remotes

    def test_config_returns_independent_copies(self, sample_config_bytes):
        """Test mutating a returned config does not affect storage."""
        storage = MemoryConfigStorage(sample_config_bytes)

        first = storage.config()
        first.remotes.clear()
        first.core.is_bare = False

        second = storage.config()
        assert second.core.is_bare is True
        assert set(second.remotes) == {"origin", "alt"}

    def test_unknown_entries_preserved(self, sample_config_bytes):
        """Test unmodeled sections survive storing a loaded config."""
        storage = MemoryConfigStorage(sample_config_bytes)

        storage.set_config(storage.config())

        assert b'[branch "master"]' in storage.config().marshal()
