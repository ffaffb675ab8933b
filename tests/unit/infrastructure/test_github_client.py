"""Tests for the GitHub REST client with mocked aiohttp sessions."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from botplug.core.domain.errors import UpstreamCallError
from botplug.infrastructure.github_client import GitHubClient, github_api_url

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _mock_aiohttp_response(*, json_data=None, text_data="", status=201, raise_on_json=False):
    """Create a mock aiohttp response context manager."""
    response = AsyncMock()
    response.status = status
    if raise_on_json:
        response.json = AsyncMock(side_effect=ValueError("bad json"))
    else:
        response.json = AsyncMock(return_value=json_data or {})
    response.text = AsyncMock(return_value=text_data)

    ctx = AsyncMock()
    ctx.__aenter__ = AsyncMock(return_value=response)
    ctx.__aexit__ = AsyncMock(return_value=False)
    return ctx


def _mock_session(response_ctx):
    """Create a mock aiohttp.ClientSession as an async context manager."""
    session = MagicMock()
    session.post = MagicMock(return_value=response_ctx)

    session_ctx = AsyncMock()
    session_ctx.__aenter__ = AsyncMock(return_value=session)
    session_ctx.__aexit__ = AsyncMock(return_value=False)
    return session_ctx, session


@pytest.fixture
def client() -> GitHubClient:
    return GitHubClient(token="secret", repository="acme/app", api_url="https://gh.test")


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


async def test_create_issue_returns_html_url(client: GitHubClient) -> None:
    session_ctx, session = _mock_session(
        _mock_aiohttp_response(json_data={"html_url": "https://github.com/acme/app/issues/1"})
    )
    with patch("aiohttp.ClientSession", return_value=session_ctx):
        url = await client.create_issue("title", "body")

    assert url == "https://github.com/acme/app/issues/1"
    args, kwargs = session.post.call_args
    assert args[0] == "https://gh.test/repos/acme/app/issues"
    assert kwargs["json"] == {"title": "title", "body": "body", "labels": ["bug"]}
    assert kwargs["headers"]["Authorization"] == "token secret"
    assert kwargs["headers"]["Accept"] == "application/vnd.github+json"


async def test_unexpected_status_raises(client: GitHubClient) -> None:
    session_ctx, _ = _mock_session(_mock_aiohttp_response(status=422, text_data="invalid"))
    with patch("aiohttp.ClientSession", return_value=session_ctx):
        with pytest.raises(UpstreamCallError, match="got 422, expected 201") as exc_info:
            await client.create_issue("title", "body")
    assert exc_info.value.details["status"] == 422


async def test_unreadable_response_raises(client: GitHubClient) -> None:
    session_ctx, _ = _mock_session(_mock_aiohttp_response(raise_on_json=True))
    with patch("aiohttp.ClientSession", return_value=session_ctx):
        with pytest.raises(UpstreamCallError, match="while unmarshaling response"):
            await client.create_issue("title", "body")


async def test_transport_error_raises(client: GitHubClient) -> None:
    session = MagicMock()
    session.post = MagicMock(side_effect=aiohttp.ClientConnectionError("refused"))
    session_ctx = AsyncMock()
    session_ctx.__aenter__ = AsyncMock(return_value=session)
    session_ctx.__aexit__ = AsyncMock(return_value=False)

    with patch("aiohttp.ClientSession", return_value=session_ctx):
        with pytest.raises(UpstreamCallError, match="while creating an issue"):
            await client.create_issue("title", "body")


def test_api_url_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BOTPLUG_GITHUB_API_URL", "https://ghe.example.com/api/v3/")
    assert github_api_url() == "https://ghe.example.com/api/v3"

    monkeypatch.delenv("BOTPLUG_GITHUB_API_URL")
    assert github_api_url() == "https://api.github.com"
