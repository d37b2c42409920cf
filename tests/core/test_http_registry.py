"""Tests for HttpRegistryClient against an in-process transport."""

import json

import httpx

from ui_scaffold.registry.abc import Fetched, FetchFailed
from ui_scaffold.registry.http import HttpRegistryClient
from tests.test_utils.registry_helpers import BUTTON_SOURCE, sample_registry

PRIMARY = "https://primary.test"
FALLBACK = "https://fallback.test/raw"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every requested URL."""

    def __init__(self, routes: dict[str, httpx.Response | Exception]) -> None:
        self.requested: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            url = str(request.url)
            self.requested.append(url)
            outcome = routes.get(url, httpx.Response(404))
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

        super().__init__(handler)


def _client(
    routes: dict[str, httpx.Response | Exception],
) -> tuple[HttpRegistryClient, RecordingTransport]:
    transport = RecordingTransport(routes)
    client = HttpRegistryClient(primary_url=PRIMARY, fallback_url=FALLBACK, transport=transport)
    return client, transport


def test_index_and_artifact_urls() -> None:
    client = HttpRegistryClient(primary_url=PRIMARY + "/", fallback_url=FALLBACK)

    assert client.index_urls() == (
        f"{PRIMARY}/registry.json",
        f"{FALLBACK}/registry/registry.json",
    )
    assert client.artifact_urls("ui/button.tsx") == (
        f"{PRIMARY}/components/ui/button.tsx",
        f"{FALLBACK}/packages/components/ui/button.tsx",
    )


def test_fetch_index_from_primary() -> None:
    client, transport = _client(
        {f"{PRIMARY}/registry.json": httpx.Response(200, text=json.dumps(sample_registry()))}
    )

    result = client.fetch_index()

    assert isinstance(result, Fetched)
    assert result.url == f"{PRIMARY}/registry.json"
    assert result.value.names() == ["button", "card", "utils"]
    assert transport.requested == [f"{PRIMARY}/registry.json"]


def test_fetch_index_falls_back_transparently() -> None:
    """Primary 500, fallback 200: same index as a direct primary success."""
    body = json.dumps(sample_registry())
    direct, _ = _client({f"{PRIMARY}/registry.json": httpx.Response(200, text=body)})
    client, transport = _client(
        {
            f"{PRIMARY}/registry.json": httpx.Response(500),
            f"{FALLBACK}/registry/registry.json": httpx.Response(200, text=body),
        }
    )

    result = client.fetch_index()
    expected = direct.fetch_index()

    assert isinstance(result, Fetched)
    assert isinstance(expected, Fetched)
    assert result.value == expected.value
    assert result.url == f"{FALLBACK}/registry/registry.json"
    assert transport.requested == [
        f"{PRIMARY}/registry.json",
        f"{FALLBACK}/registry/registry.json",
    ]


def test_fetch_index_both_failing_makes_two_requests() -> None:
    client, transport = _client(
        {
            f"{PRIMARY}/registry.json": httpx.Response(503),
            f"{FALLBACK}/registry/registry.json": httpx.ConnectError("connection refused"),
        }
    )

    result = client.fetch_index()

    assert isinstance(result, FetchFailed)
    assert len(transport.requested) == 2
    assert result.error.identifier == "registry index"
    assert result.error.attempts[0] == f"{PRIMARY}/registry.json: HTTP 503"
    assert "ConnectError" in result.error.attempts[1]


def test_invalid_index_body_tries_fallback() -> None:
    body = json.dumps(sample_registry())
    client, _ = _client(
        {
            f"{PRIMARY}/registry.json": httpx.Response(200, text="<html>maintenance</html>"),
            f"{FALLBACK}/registry/registry.json": httpx.Response(200, text=body),
        }
    )

    result = client.fetch_index()

    assert isinstance(result, Fetched)
    assert result.url == f"{FALLBACK}/registry/registry.json"


def test_invalid_index_everywhere_reports_content_error() -> None:
    client, _ = _client(
        {
            f"{PRIMARY}/registry.json": httpx.Response(200, text="[]"),
            f"{FALLBACK}/registry/registry.json": httpx.Response(200, text="[]"),
        }
    )

    result = client.fetch_index()

    assert isinstance(result, FetchFailed)
    assert all("invalid content" in attempt for attempt in result.error.attempts)
    assert result.error.invalid_content


def test_fetch_artifact_primary_and_fallback() -> None:
    client, transport = _client(
        {
            f"{PRIMARY}/components/ui/button.tsx": httpx.Response(404),
            f"{FALLBACK}/packages/components/ui/button.tsx": httpx.Response(
                200, text=BUTTON_SOURCE
            ),
        }
    )

    result = client.fetch_artifact("ui/button.tsx")

    assert isinstance(result, Fetched)
    assert result.value == BUTTON_SOURCE
    assert len(transport.requested) == 2


def test_fetch_artifact_missing_everywhere() -> None:
    client, _ = _client({})

    result = client.fetch_artifact("ui/missing.tsx")

    assert isinstance(result, FetchFailed)
    assert "component file 'ui/missing.tsx'" in str(result.error)
    assert len(result.error.attempts) == 2


def test_follows_redirects() -> None:
    client, _ = _client(
        {
            f"{PRIMARY}/components/ui/button.tsx": httpx.Response(
                302, headers={"Location": f"{PRIMARY}/cdn/button.tsx"}
            ),
            f"{PRIMARY}/cdn/button.tsx": httpx.Response(200, text=BUTTON_SOURCE),
        }
    )

    result = client.fetch_artifact("ui/button.tsx")

    assert isinstance(result, Fetched)
    assert result.url == f"{PRIMARY}/components/ui/button.tsx"


def test_corrupt_registry_reported_as_invalid_not_outage() -> None:
    """A self-dependent entry on both endpoints names the content problem."""
    corrupt = json.dumps({"a": {"registryDependencies": ["a"]}})
    client, _ = _client(
        {
            f"{PRIMARY}/registry.json": httpx.Response(200, text=corrupt),
            f"{FALLBACK}/registry/registry.json": httpx.Response(200, text=corrupt),
        }
    )

    result = client.fetch_index()

    assert isinstance(result, FetchFailed)
    assert result.error.invalid_content
    message = str(result.error)
    assert message.startswith("Registry served an invalid registry index")
    assert "lists itself" in message


def test_mixed_outage_and_bad_content_is_unavailable() -> None:
    client, _ = _client(
        {
            f"{PRIMARY}/registry.json": httpx.Response(502),
            f"{FALLBACK}/registry/registry.json": httpx.Response(200, text="[]"),
        }
    )

    result = client.fetch_index()

    assert isinstance(result, FetchFailed)
    assert not result.error.invalid_content
    assert str(result.error).startswith("Failed to fetch registry index")
