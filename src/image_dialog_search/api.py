"""Content API client used by the image dialog."""

from collections.abc import Mapping
from typing import Any

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from image_dialog_search.config import API_BASE_URL, API_TIMEOUT, API_TOKEN, API_USER_NAME


class ContentApiClient:
    """Async client for the content-management REST API."""

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        user_name: str | None = None,
        timeout: float = API_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or API_BASE_URL).rstrip("/")
        if not self.base_url:
            raise ValueError(
                "Content API base URL is required. Set IMAGE_DIALOG_API_BASE_URL in .env file."
            )
        self.user_name = user_name if user_name is not None else API_USER_NAME
        token = token if token is not None else API_TOKEN
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, max=10),
        retry=retry_if_exception_type(httpx.TimeoutException),
        reraise=True,
    )
    async def fetch(self, resource_name: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET a resource and return the parsed JSON."""
        resp = await self._client.get(f"/{resource_name.lstrip('/')}", params=_query_params(params))
        resp.raise_for_status()
        return resp.json()

    def user(self) -> dict[str, Any]:
        """The authenticated user, in the API's own shape."""
        return {"userName": self.user_name}

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ContentApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def _query_params(params: Mapping[str, Any] | None) -> list[tuple[str, Any]]:
    """Flatten list values into repeated query parameters."""
    if not params:
        return []
    flat: list[tuple[str, Any]] = []
    for key, value in params.items():
        if isinstance(value, (list, tuple)):
            flat.extend((key, item) for item in value)
        elif isinstance(value, bool):
            flat.append((key, "true" if value else "false"))
        else:
            flat.append((key, value))
    return flat
