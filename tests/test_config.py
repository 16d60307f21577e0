"""Tests for configuration loading."""

import json

import pytest

from momentum.config import Config, load_config, save_config
from momentum.storage import JsonFileStorage, MemoryStorage
from momentum.store.factory import create_stores


class TestConfig:

    def test_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.json")

        assert config.storage.backend == "file"
        assert config.storage.key_prefix == "momentum"
        assert config.lifecycle.enforce_transitions is False
        assert config.logging.level == "SUCCESS"

    def test_camel_case_keys(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps({"storage": {"dataDir": "/tmp/m", "keyPrefix": "dev"}, "lifecycle": {"enforceTransitions": True}})
        )

        config = load_config(path)

        assert config.storage.data_dir == "/tmp/m"
        assert config.storage.key_prefix == "dev"
        assert config.lifecycle.enforce_transitions is True

    def test_invalid_json_falls_back(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{broken")

        assert load_config(path).storage.key_prefix == "momentum"

    def test_invalid_value_falls_back(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"storage": {"backend": "s3"}}))

        assert load_config(path).storage.backend == "file"

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        config = Config()
        config.storage.key_prefix = "saved"

        save_config(config, path)

        assert (path.stat().st_mode & 0o777) == 0o600
        assert "keyPrefix" in json.loads(path.read_text())["storage"]
        assert load_config(path).storage.key_prefix == "saved"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MOMENTUM_STORAGE__KEY_PREFIX", "env")
        assert Config().storage.key_prefix == "env"


class TestStoreFactory:

    def test_memory_backend(self):
        config = Config()
        config.storage.backend = "memory"

        stores = create_stores(config)

        assert isinstance(stores.tasks.storage, MemoryStorage)
        assert stores.tasks.storage is stores.social_events.storage

    def test_file_backend_and_options(self, tmp_path):
        config = Config()
        config.storage.data_dir = str(tmp_path)
        config.storage.key_prefix = "dev"
        config.lifecycle.enforce_transitions = True

        stores = create_stores(config)

        assert isinstance(stores.contexts.storage, JsonFileStorage)
        assert stores.tasks.key == "dev_tasks"
        assert stores.contexts.key == "dev_contexts"
        assert stores.social_events.key == "dev_social_events"
        assert stores.tasks.enforce_transitions is True

    @pytest.mark.asyncio
    async def test_load_all(self):
        config = Config()
        config.storage.backend = "memory"
        stores = create_stores(config)

        await stores.load_all()

        assert len(stores.tasks) == 0
