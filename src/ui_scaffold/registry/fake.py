"""Fake registry client for testing.

FakeRegistryClient is an in-memory implementation that serves a fixed index
and artifact map, and records every artifact request.
"""

from collections.abc import Iterable, Mapping

from ui_scaffold.exceptions import RegistryUnavailable
from ui_scaffold.models.registry import RegistryIndex
from ui_scaffold.registry.abc import Fetched, FetchFailed, FetchResult, RegistryClient

FAKE_REGISTRY_URL = "https://registry.fake"


class FakeRegistryClient(RegistryClient):
    """In-memory fake implementation of registry reads.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        *,
        index: RegistryIndex | None = None,
        artifacts: Mapping[str, str] | None = None,
        index_available: bool = True,
        unavailable_artifacts: Iterable[str] = (),
    ) -> None:
        """Create FakeRegistryClient.

        Args:
            index: Index returned from fetch_index() (empty index if None)
            artifacts: Mapping of file id to source text
            index_available: If False, fetch_index() reports RegistryUnavailable
            unavailable_artifacts: File ids that report RegistryUnavailable even
                if present in artifacts
        """
        self._index = index if index is not None else RegistryIndex()
        self._artifacts = dict(artifacts or {})
        self._index_available = index_available
        self._unavailable_artifacts = frozenset(unavailable_artifacts)
        self._index_fetches = 0
        self._artifact_requests: list[str] = []

    @property
    def index_fetches(self) -> int:
        """Number of fetch_index() calls. For test assertions only."""
        return self._index_fetches

    @property
    def artifact_requests(self) -> list[str]:
        """File ids passed to fetch_artifact(), in order. For test assertions only."""
        return self._artifact_requests

    def fetch_index(self) -> FetchResult[RegistryIndex]:
        self._index_fetches += 1
        if not self._index_available:
            return FetchFailed(
                RegistryUnavailable("registry index", [f"{FAKE_REGISTRY_URL}: unavailable"])
            )
        return Fetched(value=self._index, url=f"{FAKE_REGISTRY_URL}/registry.json")

    def fetch_artifact(self, file_id: str) -> FetchResult[str]:
        self._artifact_requests.append(file_id)
        if file_id in self._unavailable_artifacts or file_id not in self._artifacts:
            return FetchFailed(
                RegistryUnavailable(
                    f"component file '{file_id}'", [f"{FAKE_REGISTRY_URL}: HTTP 404"]
                )
            )
        return Fetched(
            value=self._artifacts[file_id],
            url=f"{FAKE_REGISTRY_URL}/components/{file_id}",
        )
