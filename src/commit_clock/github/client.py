"""Async GitHub API client (GraphQL + gists) built on httpx."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .. import __version__
from ..errors import ApiError
from .queries import GraphQLQuery

logger = logging.getLogger(__name__)

API_BASE = "https://api.github.com"


class GitHubClient:
    """Thin wrapper over ``httpx.AsyncClient``.

    Every failure (transport, HTTP status, bad JSON, GraphQL ``errors``) is
    raised as :class:`ApiError`. Nothing is retried.
    """

    def __init__(
        self,
        token: str,
        base_url: str = API_BASE,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "User-Agent": f"commit-clock/{__version__}",
            },
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        logger.debug("%s %s", method, url)
        try:
            resp = await self._client.request(method, url, **kwargs)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ApiError(
                f"{method} {url} returned {e.response.status_code}: {e.response.text}"
            ) from e
        except httpx.HTTPError as e:
            raise ApiError(f"{method} {url} failed: {e}") from e
        try:
            return resp.json()
        except ValueError as e:
            raise ApiError(f"{method} {url} returned invalid JSON") from e

    async def execute(self, query: GraphQLQuery) -> dict[str, Any]:
        """Run a GraphQL query and return its ``data`` object."""
        body = await self._request("POST", "/graphql", json=query.to_payload())
        if not isinstance(body, dict):
            raise ApiError("GraphQL response is not an object")
        errors = body.get("errors")
        if errors:
            if not isinstance(errors, list):
                errors = [errors]
            messages = "; ".join(
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in errors
            )
            raise ApiError(f"GraphQL error: {messages}")
        data = body.get("data")
        if not isinstance(data, dict):
            raise ApiError("GraphQL response has no data")
        return data

    async def get_gist(self, gist_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/gists/{gist_id}")

    async def update_gist(self, gist_id: str, files: dict[str, dict[str, str]]) -> dict[str, Any]:
        return await self._request("PATCH", f"/gists/{gist_id}", json={"files": files})
