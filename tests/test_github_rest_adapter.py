"""Tests for the GitHub REST adapter using respx-mocked httpx routes."""

from datetime import datetime, timezone

import httpx
import pytest
import respx

from repo_browser.domain.exceptions import (
    DecodeError,
    NetworkError,
    NonHttpResponseError,
    NonSuccessStatusError,
)
from repo_browser.infrastructure.github_rest_adapter import GitHubRestAdapter, parse_timestamp

REPOS_URL = "https://api.github.com/orgs/pointfreeco/repos"


def repo_json(**overrides):
    data = {
        "id": 1234,
        "name": "swift-composable-architecture",
        "full_name": "pointfreeco/swift-composable-architecture",
        "archived": False,
        "description": "A library for building applications",
        "html_url": "https://github.com/pointfreeco/swift-composable-architecture",
        "pushed_at": "2023-01-17T10:00:00+00:00",
        "stargazers_count": 10000,
    }
    data.update(overrides)
    return data


async def fetch(route_response):
    respx.get(REPOS_URL).mock(return_value=route_response)
    async with httpx.AsyncClient() as client:
        return await GitHubRestAdapter(client).fetch_repos()


class TestDecoding:
    @pytest.mark.asyncio
    @respx.mock
    async def test_decodes_snake_case_fields(self) -> None:
        repos = await fetch(httpx.Response(200, json=[repo_json()]))

        assert len(repos) == 1
        repo = repos[0]
        assert repo.name == "swift-composable-architecture"
        assert repo.archived is False
        assert repo.description == "A library for building applications"
        assert repo.html_url == "https://github.com/pointfreeco/swift-composable-architecture"
        assert repo.pushed_at == datetime(2023, 1, 17, 10, 0, 0, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    @respx.mock
    async def test_offset_is_normalised_to_utc(self) -> None:
        repos = await fetch(
            httpx.Response(200, json=[repo_json(pushed_at="2023-01-17T10:00:00+02:00")])
        )

        assert repos[0].pushed_at == datetime(2023, 1, 17, 8, 0, 0, tzinfo=timezone.utc)
        assert repos[0].pushed_at.utcoffset().total_seconds() == 0

    @pytest.mark.asyncio
    @respx.mock
    async def test_zulu_suffix_is_accepted(self) -> None:
        repos = await fetch(
            httpx.Response(200, json=[repo_json(pushed_at="2023-01-17T10:00:00Z")])
        )

        assert repos[0].pushed_at == datetime(2023, 1, 17, 10, 0, 0, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    @respx.mock
    async def test_optional_fields_may_be_null_or_absent(self) -> None:
        minimal = {"archived": True, "html_url": "https://github.com/pointfreeco/x", "name": "x"}
        repos = await fetch(
            httpx.Response(200, json=[repo_json(description=None, pushed_at=None), minimal])
        )

        assert repos[0].description is None
        assert repos[0].pushed_at is None
        assert repos[1].archived is True
        assert repos[1].description is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_empty_array(self) -> None:
        assert await fetch(httpx.Response(200, json=[])) == []

    @pytest.mark.asyncio
    @respx.mock
    async def test_fetch_is_not_filtered_or_reordered(self) -> None:
        body = [
            repo_json(name="old", pushed_at="2019-01-01T00:00:00+00:00"),
            repo_json(name="archived", archived=True),
        ]
        repos = await fetch(httpx.Response(200, json=body))

        assert [r.name for r in repos] == ["old", "archived"]

    @pytest.mark.asyncio
    @respx.mock
    async def test_decoded_ids_are_stable_across_fetches(self) -> None:
        route = respx.get(REPOS_URL).mock(return_value=httpx.Response(200, json=[repo_json()]))
        async with httpx.AsyncClient() as client:
            adapter = GitHubRestAdapter(client)
            first = await adapter.fetch_repos()
            second = await adapter.fetch_repos()

        assert first[0].id == second[0].id
        assert route.call_count == 2


class TestDecodeErrors:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            b"not json",
            b'{"message": "an object, not an array"}',
            b'[{"archived": "yes", "html_url": "https://x.io", "name": "x"}]',
            b'[{"archived": false, "name": "x"}]',
            b'[{"archived": false, "html_url": "https://x.io"}]',
            b'[{"archived": false, "html_url": "https://x.io", "name": 42}]',
            b'[{"archived": false, "html_url": "https://x.io", "name": "x", "pushed_at": "17/01/2023"}]',
            b'[{"archived": false, "html_url": "https://x.io", "name": "x", "pushed_at": "2023-01-17 10:00:00"}]',
            b'[{"archived": false, "html_url": "https://x.io", "name": "x", "pushed_at": 1673949600}]',
            b'[{"archived": false, "html_url": "https://x.io", "name": "x", "pushed_at": "2023-01-17T10:00:00+0000"}]',
            b'[{"archived": false, "html_url": "not a url", "name": "x"}]',
        ],
    )
    async def test_bad_body_is_decode_error(self, body) -> None:
        with respx.mock, pytest.raises(DecodeError):
            await fetch(httpx.Response(200, content=body))


class TestTransportAndStatus:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [301, 404, 403, 500, 299])
    async def test_non_success_status(self, status) -> None:
        with respx.mock, pytest.raises(NonSuccessStatusError) as excinfo:
            await fetch(httpx.Response(status, json=[]))

        assert excinfo.value.status_code == status

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [200, 201, 204, 298])
    async def test_success_range(self, status) -> None:
        with respx.mock:
            route = respx.get(REPOS_URL).mock(return_value=httpx.Response(status, json=[]))
            async with httpx.AsyncClient() as client:
                assert await GitHubRestAdapter(client).fetch_repos() == []
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_protocol_error_is_non_http_response(self) -> None:
        respx.get(REPOS_URL).mock(side_effect=httpx.RemoteProtocolError)

        async with httpx.AsyncClient() as client:
            with pytest.raises(NonHttpResponseError):
                await GitHubRestAdapter(client).fetch_repos()

    @pytest.mark.asyncio
    async def test_non_http_scheme_is_non_http_response(self) -> None:
        async with httpx.AsyncClient() as client:
            adapter = GitHubRestAdapter(client, base_url="file:///tmp")
            with pytest.raises(NonHttpResponseError):
                await adapter.fetch_repos()

    @pytest.mark.asyncio
    @respx.mock
    async def test_connect_error_is_network_error(self) -> None:
        respx.get(REPOS_URL).mock(side_effect=httpx.ConnectError)

        async with httpx.AsyncClient() as client:
            with pytest.raises(NetworkError):
                await GitHubRestAdapter(client).fetch_repos()

    @pytest.mark.asyncio
    @respx.mock
    async def test_single_get_with_github_headers(self) -> None:
        route = respx.get(REPOS_URL).mock(return_value=httpx.Response(200, json=[]))

        async with httpx.AsyncClient() as client:
            await GitHubRestAdapter(client).fetch_repos()

        assert route.call_count == 1
        request = route.calls.last.request
        assert request.headers["Accept"] == "application/vnd.github.v3+json"
        assert "Authorization" not in request.headers

    @pytest.mark.asyncio
    @respx.mock
    async def test_custom_base_and_path(self) -> None:
        route = respx.get("https://ghe.example.com/api/v3/orgs/acme/repos").mock(
            return_value=httpx.Response(200, json=[repo_json(name="acme")])
        )

        async with httpx.AsyncClient() as client:
            adapter = GitHubRestAdapter(client, base_url="https://ghe.example.com/api/v3/")
            repos = await adapter.fetch("orgs/acme/repos")

        assert route.called
        assert [r.name for r in repos] == ["acme"]


class TestParseTimestamp:
    def test_numeric_offset(self) -> None:
        assert parse_timestamp("2023-01-17T10:00:00-05:00") == datetime(
            2023, 1, 17, 15, 0, 0, tzinfo=timezone.utc
        )

    def test_zulu(self) -> None:
        assert parse_timestamp("2023-01-17T10:00:00Z") == datetime(
            2023, 1, 17, 10, 0, 0, tzinfo=timezone.utc
        )

    @pytest.mark.parametrize(
        "value", ["2023-01-17T10:00:00+0000", "2023-01-17T10:00:00-0500", "2023-01-17T10:00:00+00:00:00"]
    )
    def test_offset_without_colon_is_rejected(self, value) -> None:
        with pytest.raises(ValueError):
            parse_timestamp(value)

    def test_missing_offset_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_timestamp("2023-01-17T10:00:00")
