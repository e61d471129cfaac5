# tests/unit/client/test_factory.py

from unittest.mock import MagicMock, patch

import pytest

from toolbridge.client import (
    ConfigurationError,
    RegistryClient,
    RegistryConfig,
    create_registry_client,
)
from toolbridge.formatting import Provider


class TestFactory:
    def test_create_client(self) -> None:
        """Test creating a registry client from config."""
        with patch("toolbridge.client.registry.httpx.AsyncClient"):
            config = RegistryConfig(api_key="prm_test123", provider="mistral")
            client = create_registry_client(config)

            assert isinstance(client, RegistryClient)
            assert client.provider == Provider.MISTRAL

    def test_config_defaults(self) -> None:
        config = RegistryConfig(api_key="prm_test123")

        assert config.provider == Provider.GENERIC
        assert config.base_url == "https://api.primrose.dev"
        assert config.timeout == 30.0

    def test_config_values_passed_through(self) -> None:
        """Test that config values are passed to the HTTP client."""
        with patch("toolbridge.client.registry.httpx.AsyncClient") as mock_http:
            config = RegistryConfig(
                api_key="my-key",
                provider=Provider.GOOGLE,
                base_url="https://registry.internal/",
                timeout=5.0,
            )
            metrics_hook = MagicMock()
            client = create_registry_client(config, metrics_hook=metrics_hook)

            assert client.base_url == "https://registry.internal"
            assert client.metrics_hook is metrics_hook
            mock_http.assert_called_once_with(
                base_url="https://registry.internal",
                headers={
                    "Authorization": "Bearer my-key",
                    "Content-Type": "application/json",
                },
                timeout=5.0,
            )

    def test_invalid_config_raises_before_any_request(self) -> None:
        with patch("toolbridge.client.registry.httpx.AsyncClient") as mock_http:
            with pytest.raises(ConfigurationError):
                create_registry_client(RegistryConfig(api_key=""))
            with pytest.raises(ConfigurationError):
                create_registry_client(
                    RegistryConfig(api_key="prm_test123", provider="invalid_tag")
                )
            mock_http.assert_not_called()
