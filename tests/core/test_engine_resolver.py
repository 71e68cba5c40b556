"""Tests for EngineResolver."""

import pytest

from lanzo.core.engine_resolver import EngineResolver
from lanzo.services.docker_service import DockerService


class TestEngineResolver:
    """Target hosts map to engine endpoints."""

    @pytest.mark.parametrize("target_host", [None, "", "   "])
    def test_empty_host_selects_local_engine(self, target_host):
        assert EngineResolver().base_url(target_host) is None

    def test_host_uses_default_engine_port(self):
        assert EngineResolver().base_url("10.0.0.5") == "tcp://10.0.0.5:2375"

    def test_custom_engine_port(self):
        assert EngineResolver(engine_port=2376).base_url("docker.internal") == "tcp://docker.internal:2376"

    def test_surrounding_whitespace_stripped(self):
        assert EngineResolver().base_url(" 10.0.0.5 ") == "tcp://10.0.0.5:2375"

    def test_full_url_passes_through(self):
        assert EngineResolver().base_url("unix:///var/run/docker.sock") == "unix:///var/run/docker.sock"

    def test_resolve_builds_unconnected_handle(self, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("resolve must not connect")

        monkeypatch.setattr("docker.DockerClient", fail)
        monkeypatch.setattr("docker.from_env", fail)

        engine = EngineResolver().resolve("10.0.0.5")

        assert isinstance(engine, DockerService)
        assert engine.base_url == "tcp://10.0.0.5:2375"
        assert engine.endpoint == "tcp://10.0.0.5:2375"

    def test_resolve_local(self):
        engine = EngineResolver().resolve(None)

        assert engine.base_url is None
        assert engine.endpoint == "local"
