"""Registry access interface.

Architecture:
- RegistryClient: Abstract base class defining the interface
- HttpRegistryClient: Production implementation over HTTP (primary + fallback)
- FakeRegistryClient: In-memory implementation for tests

Fetches return a tagged result instead of raising, so callers decide whether
an unavailable registry aborts the run (index) or fails a single component
(artifact).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ui_scaffold.exceptions import RegistryUnavailable
from ui_scaffold.models.registry import RegistryIndex


@dataclass(frozen=True)
class Fetched[T]:
    """Successful fetch, with the URL that served it."""

    value: T
    url: str


@dataclass(frozen=True)
class FetchFailed:
    """Both registry endpoints failed."""

    error: RegistryUnavailable


type FetchResult[T] = Fetched[T] | FetchFailed


class RegistryClient(ABC):
    """Abstract interface for registry reads.

    Implementations have no filesystem or process side effects.
    """

    @abstractmethod
    def fetch_index(self) -> FetchResult[RegistryIndex]:
        """Fetch and parse the registry index.

        Returns:
            Fetched with the parsed index, or FetchFailed naming every attempt
        """
        ...

    @abstractmethod
    def fetch_artifact(self, file_id: str) -> FetchResult[str]:
        """Fetch the raw source text of one component file.

        Args:
            file_id: File identifier as listed in ComponentEntry.files

        Returns:
            Fetched with the source text, or FetchFailed naming the file
        """
        ...
