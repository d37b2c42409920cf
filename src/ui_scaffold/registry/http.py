"""HTTP registry client with a single fallback endpoint.

Every fetch makes at most two requests: the primary registry, then the raw
GitHub mirror. There is no backoff; the registry is static content.
"""

import logging
from collections.abc import Callable
from urllib.parse import quote

import httpx

from ui_scaffold.constants import (
    ARTIFACT_PATH_PREFIX,
    FALLBACK_ARTIFACT_PATH_PREFIX,
    FALLBACK_INDEX_PATH,
    FALLBACK_REGISTRY_URL,
    REGISTRY_INDEX_PATH,
    REGISTRY_TIMEOUT,
    REGISTRY_URL,
)
from ui_scaffold.exceptions import RegistryUnavailable
from ui_scaffold.io.registry import parse_registry_index
from ui_scaffold.models.registry import RegistryIndex
from ui_scaffold.registry.abc import Fetched, FetchFailed, FetchResult, RegistryClient

logger = logging.getLogger(__name__)


class HttpRegistryClient(RegistryClient):
    """Production implementation fetching from the primary and fallback registries."""

    def __init__(
        self,
        *,
        primary_url: str = REGISTRY_URL,
        fallback_url: str = FALLBACK_REGISTRY_URL,
        timeout: float = REGISTRY_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Create client.

        Args:
            primary_url: Base URL of the primary registry
            fallback_url: Base URL of the fallback mirror
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self.primary_url = primary_url.rstrip("/")
        self.fallback_url = fallback_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def index_urls(self) -> tuple[str, str]:
        return (
            f"{self.primary_url}/{REGISTRY_INDEX_PATH}",
            f"{self.fallback_url}/{FALLBACK_INDEX_PATH}",
        )

    def artifact_urls(self, file_id: str) -> tuple[str, str]:
        path = quote(file_id.lstrip("/"), safe="/")
        return (
            f"{self.primary_url}/{ARTIFACT_PATH_PREFIX}/{path}",
            f"{self.fallback_url}/{FALLBACK_ARTIFACT_PATH_PREFIX}/{path}",
        )

    def fetch_index(self) -> FetchResult[RegistryIndex]:
        return self._fetch_first("registry index", self.index_urls(), parse_registry_index)

    def fetch_artifact(self, file_id: str) -> FetchResult[str]:
        return self._fetch_first(f"component file '{file_id}'", self.artifact_urls(file_id), str)

    def _client(self) -> httpx.Client:
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout, connect=10.0),
            follow_redirects=True,
            transport=self._transport,
        )

    def _fetch_first[T](
        self,
        identifier: str,
        urls: tuple[str, str],
        parse: Callable[[str], T],
    ) -> FetchResult[T]:
        """Try each URL in order and return the first successfully parsed body."""
        attempts: list[str] = []
        content_failures = 0
        with self._client() as client:
            for url in urls:
                try:
                    response = client.get(url)
                    response.raise_for_status()
                    value = parse(response.text)
                except httpx.HTTPStatusError as e:
                    attempts.append(f"{url}: HTTP {e.response.status_code}")
                except httpx.HTTPError as e:
                    attempts.append(f"{url}: {type(e).__name__}: {e}")
                except ValueError as e:
                    # Reachable but unparseable; let the fallback try
                    attempts.append(f"{url}: invalid content: {e}")
                    content_failures += 1
                else:
                    if attempts:
                        logger.info("Fetched %s from fallback %s", identifier, url)
                    return Fetched(value=value, url=url)
                logger.debug("Fetch attempt failed: %s", attempts[-1])

        return FetchFailed(
            RegistryUnavailable(
                identifier, attempts, invalid_content=content_failures == len(urls)
            )
        )
