# src/toolbridge/client/registry.py

import logging
from time import monotonic
from types import TracebackType
from typing import Any

import httpx

from toolbridge.formatting import FormattedTool, Provider, tools_to_provider_schema
from toolbridge.observability import names
from toolbridge.observability.base import MetricsHook, NoOpMetricsHook
from toolbridge.tools.tool import ToolCall, ToolsResponse

from .config import DEFAULT_BASE_URL
from .errors import ConfigurationError, ErrorCode, RegistryError, error_from_response

logger = logging.getLogger(__name__)


class RegistryClient:
    """Async client for a remote tool registry.

    Stateless per call. One request per operation, no retries. Tool
    definitions come back already converted to the configured provider's
    format.
    """

    def __init__(
        self,
        api_key: str | None,
        provider: Provider | str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        if not api_key:
            raise ConfigurationError("api_key is required")

        if provider is None:
            provider = Provider.GENERIC
        try:
            self._provider = Provider(provider)
        except ValueError:
            valid = ", ".join(p.value for p in Provider)
            raise ConfigurationError(
                f"Invalid provider: {provider}. Must be one of: {valid}"
            ) from None

        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
        )
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized RegistryClient with provider=%s, base_url=%s, timeout=%s",
            self._provider.value,
            self._base_url,
            timeout,
        )

    @property
    def provider(self) -> Provider:
        return self._provider

    @property
    def base_url(self) -> str:
        return self._base_url

    async def list_tools(self, mcp_server: str | None = None) -> list[FormattedTool]:
        """List every tool visible to the API key.

        Args:
            mcp_server: Optional name of a sub-registry to scope the listing to.

        Returns:
            Tools in the configured provider's format, in registry order.

        Raises:
            RegistryError: On a non-2xx response or transport failure.
        """
        params = {"provider": self._provider.value}
        if mcp_server:
            params["mcp_server"] = mcp_server

        data = await self._request("list_tools", "GET", "/tools", params=params)
        tools = self._format_tools("list_tools", data)
        logger.info("Listed %d tools (mcp_server=%s)", len(tools), mcp_server)
        return tools

    async def search_tools(self, query: str) -> list[FormattedTool]:
        """Free-text search. Ranking is up to the registry and kept as is."""
        params = {"q": query, "provider": self._provider.value}

        data = await self._request("search_tools", "GET", "/tools/search", params=params)
        tools = self._format_tools("search_tools", data)
        logger.info("Search returned %d tools for query=%r", len(tools), query)
        return tools

    async def call_tool(
        self, tool_name: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Invoke a tool on the registry.

        Returns:
            The ``{"result": ...}`` envelope exactly as the registry sent it.
        """
        body = ToolCall(tool_name=tool_name, arguments=params or {}).to_request_body()
        result = await self._request("call_tool", "POST", "/tools/call", json=body)
        logger.info("Called tool %s", tool_name)
        return result

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "RegistryClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def _format_tools(self, operation: str, data: Any) -> list[FormattedTool]:
        response = ToolsResponse.model_validate(data)
        self.metrics_hook.record_gauge(
            names.REGISTRY_TOOLS_RETURNED,
            len(response.tools),
            labels={"operation": operation},
        )
        return tools_to_provider_schema(response.tools, self._provider)

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Single attempt. Every failure surfaces as RegistryError."""
        start = monotonic()
        logger.debug("Registry request: %s %s params=%s", method, path, params)

        try:
            response = await self._client.request(method, path, params=params, json=json)
        except httpx.HTTPError as exc:
            self._record_error(operation, ErrorCode.UNKNOWN_ERROR)
            logger.error("Registry request %s %s failed: %s", method, path, exc)
            raise RegistryError(
                f"Request to registry failed: {exc}", ErrorCode.UNKNOWN_ERROR
            ) from exc

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(
            names.REGISTRY_REQUEST_DURATION, elapsed_ms, labels={"operation": operation}
        )
        self.metrics_hook.increment(
            names.REGISTRY_REQUESTS_TOTAL,
            labels={"operation": operation, "provider": self._provider.value},
        )

        if response.is_success:
            try:
                data = response.json()
            except ValueError as exc:
                self._record_error(operation, ErrorCode.UNKNOWN_ERROR)
                raise RegistryError(
                    "Registry returned a non-JSON response",
                    ErrorCode.UNKNOWN_ERROR,
                    response.status_code,
                ) from exc
            # Every endpoint answers with an object envelope.
            if not isinstance(data, dict):
                self._record_error(operation, ErrorCode.UNKNOWN_ERROR)
                raise RegistryError(
                    "Registry returned a non-object JSON response",
                    ErrorCode.UNKNOWN_ERROR,
                    response.status_code,
                )
            return data

        try:
            body = response.json()
        except ValueError:
            body = None

        error = error_from_response(response.status_code, body)
        self._record_error(operation, error.code)
        logger.error(
            "Registry %s %s returned %d (%s): %s",
            method,
            path,
            response.status_code,
            error.code.value,
            error.message,
        )
        raise error

    def _record_error(self, operation: str, code: ErrorCode) -> None:
        self.metrics_hook.increment(
            names.REGISTRY_ERRORS_TOTAL,
            labels={"operation": operation, "code": code.value},
        )
