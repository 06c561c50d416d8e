"""
Tests unitaires pour Settings et le container DI.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from tmdbnet.adapters.api.resolver import ResourceResolver
from tmdbnet.adapters.api.service_client import ServiceClient
from tmdbnet.adapters.api.storage_client import StorageClient
from tmdbnet.config import Settings
from tmdbnet.container import Container


class TestSettings:
    """Tests pour Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TMDBNET_API_KEY", raising=False)

        settings = Settings(_env_file=None)

        assert settings.api_key is None
        assert settings.api_enabled is False
        assert settings.base_url == "https://api.themoviedb.org/3"
        assert settings.image_base_url == "https://image.tmdb.org/t/p/"
        assert settings.request_timeout == 30.0
        assert settings.max_throttle_attempts is None

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TMDBNET_API_KEY", "from-env")
        monkeypatch.setenv("TMDBNET_MAX_THROTTLE_ATTEMPTS", "4")
        monkeypatch.setenv("TMDBNET_LANGUAGE", "fr")

        settings = Settings(_env_file=None)

        assert settings.api_enabled is True
        assert settings.api_key == "from-env"
        assert settings.max_throttle_attempts == 4
        assert settings.language == "fr"

    def test_empty_key_disables_api(self) -> None:
        assert Settings(_env_file=None, api_key="").api_enabled is False

    def test_log_file_expands_home(self) -> None:
        settings = Settings(_env_file=None, log_file="~/tmdbnet.log")

        assert settings.log_file == Path.home() / "tmdbnet.log"

    def test_throttle_log_file_optional(self) -> None:
        assert Settings(_env_file=None).throttle_log_file is None
        assert Settings(_env_file=None, throttle_log_file="").throttle_log_file is None

        settings = Settings(_env_file=None, throttle_log_file="~/throttle.log")

        assert settings.throttle_log_file == Path.home() / "throttle.log"

    def test_invalid_values_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, request_timeout=0)
        with pytest.raises(ValidationError):
            Settings(_env_file=None, max_throttle_attempts=0)


class TestContainer:
    """Tests pour le container DI."""

    @pytest.fixture
    def container(self, test_settings: Settings) -> Container:
        container = Container()
        container.config.override(test_settings)
        yield container
        container.config.reset_override()

    def test_service_client_built_from_settings(self, container: Container) -> None:
        client = container.service_client()

        assert isinstance(client, ServiceClient)
        assert client._api_key == "test_api_key"
        assert client._base_url == "https://api.themoviedb.org/3"
        assert client._max_attempts is None

    def test_each_call_gives_new_client(self, container: Container) -> None:
        assert container.service_client() is not container.service_client()

    def test_resolver_is_shared(self, container: Container) -> None:
        resolver = container.resource_resolver()

        assert isinstance(resolver, ResourceResolver)
        assert container.resource_resolver() is resolver
        assert container.service_client()._interpreter.resolver is resolver

    def test_storage_client(self, container: Container) -> None:
        storage = container.storage_client()

        assert isinstance(storage, StorageClient)
        assert storage._base_url == "https://image.tmdb.org/t/p/"
