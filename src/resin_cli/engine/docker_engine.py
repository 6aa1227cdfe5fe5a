"""DockerEngine — talks to the Docker Engine REST API with httpx.

Plain HTTP over the daemon socket (or a TCP endpoint from ``DOCKER_HOST``);
no docker-py dependency.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlsplit

import httpx

from resin_cli.engine.models import (
    ContainerCreateSpec,
    ContainerHandle,
    ContainerStatus,
    EngineConfig,
    ImageInfo,
)
from resin_cli.errors import EngineConflictError, EngineError

logger = logging.getLogger(__name__)

# Engine API versions before 1.24 took host config on the start request.
_LEGACY_START_API = (1, 24)


class DockerEngine:
    """Docker Engine API client.

    Satisfies the :class:`~resin_cli.engine.client.ContainerEngine`
    protocol.

    Usage::

        async with DockerEngine(EngineConfig.from_env()) as engine:
            info = await engine.inspect_image("sha256:abc123")
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or EngineConfig()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> DockerEngine:
        base_url, transport = self._connection()
        kwargs: dict[str, Any] = {"base_url": base_url, "transport": transport}
        if self._config.timeout is not None:
            kwargs["timeout"] = self._config.timeout
        self._client = httpx.AsyncClient(**kwargs)
        return self

    async def __aexit__(self, *_: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            msg = "DockerEngine must be used as an async context manager"
            raise RuntimeError(msg)
        return self._client

    def _connection(self) -> tuple[str, httpx.AsyncBaseTransport | None]:
        """Map the configured host to an httpx base URL and transport."""
        parts = urlsplit(self._config.host)
        if parts.scheme == "unix":
            transport = self._transport or httpx.AsyncHTTPTransport(uds=parts.path)
            return "http://docker", transport
        if parts.scheme == "tcp":
            return f"http://{parts.netloc}", self._transport
        if parts.scheme in ("http", "https"):
            return f"{parts.scheme}://{parts.netloc}", self._transport
        raise EngineError(f"Unsupported engine host: {self._config.host}")

    def _path(self, path: str) -> str:
        if self._config.api_version:
            return f"/v{self._config.api_version}{path}"
        return path

    def _is_legacy_api(self) -> bool:
        if not self._config.api_version:
            return False
        try:
            major, minor = (int(p) for p in self._config.api_version.split(".")[:2])
        except ValueError:
            return False
        return (major, minor) < _LEGACY_START_API

    async def inspect_image(self, image_id: str) -> ImageInfo:
        """``GET /images/{id}/json``."""
        data = await self._request("GET", f"/images/{image_id}/json")
        return ImageInfo.from_engine(data)

    async def create_container(self, spec: ContainerCreateSpec) -> ContainerHandle:
        """``POST /containers/create?name=...``."""
        data = await self._request(
            "POST",
            "/containers/create",
            params={"name": spec.name},
            json=spec.to_engine_body(),
        )
        warnings = data.get("Warnings") or []
        for warning in warnings:
            logger.warning("Engine warning for %s: %s", spec.name, warning)
        container_id = data.get("Id")
        if not container_id:
            raise EngineError(f"Engine did not return an Id for container {spec.name}")
        return ContainerHandle(id=container_id, name=spec.name, warnings=warnings)

    async def start_container(self, container_id: str, *, privileged: bool = False) -> None:
        """``POST /containers/{id}/start``.

        Current engines fix privileged mode at creation time (see
        :meth:`ContainerCreateSpec.to_engine_body`) and reject a start body;
        only legacy API versions receive ``{"Privileged": true}`` here.
        """
        body = {"Privileged": True} if privileged and self._is_legacy_api() else None
        await self._request(
            "POST",
            f"/containers/{container_id}/start",
            json=body,
            accept=(304,),
        )

    async def inspect_container(self, container_id: str) -> ContainerStatus:
        """``GET /containers/{id}/json``."""
        data = await self._request("GET", f"/containers/{container_id}/json")
        return ContainerStatus.from_engine(data)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
        accept: tuple[int, ...] = (),
    ) -> dict[str, Any]:
        """Send a request and return the decoded JSON body (``{}`` if none)."""
        logger.debug("Docker %s %s", method, path)
        try:
            response = await self._http().request(
                method, self._path(path), params=params, json=json
            )
        except httpx.HTTPError as exc:
            raise EngineError(f"Cannot reach Docker at {self._config.host}: {exc}") from exc

        if response.status_code in accept:
            return {}
        if response.status_code == 409:
            raise EngineConflictError(_error_message(response), status_code=409)
        if response.is_error:
            raise EngineError(_error_message(response), status_code=response.status_code)
        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as exc:
            raise EngineError(
                f"Unexpected non-JSON reply from {self._config.host}",
                status_code=response.status_code,
            ) from exc
        if not isinstance(data, dict):
            raise EngineError(
                f"Unexpected reply from {self._config.host}: {type(data).__name__}",
                status_code=response.status_code,
            )
        return data


def _error_message(response: httpx.Response) -> str:
    """Pull the engine's ``message`` field out of an error reply."""
    try:
        data = response.json()
    except ValueError:
        return response.text.strip()
    if isinstance(data, dict) and "message" in data:
        return str(data["message"])
    return response.text.strip()
