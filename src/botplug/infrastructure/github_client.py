"""Minimal GitHub REST client used by the gh executor.

Usage::

    client = GitHubClient(token="ghp_...", repository="org/repo")
    url = await client.create_issue("The `pod/web` malfunctions", body)
"""

from __future__ import annotations

import os
from typing import Any

import aiohttp
import structlog

from botplug.core.domain.errors import UpstreamCallError

logger = structlog.get_logger(__name__)

DEFAULT_API_URL = "https://api.github.com"


def github_api_url() -> str:
    """GitHub API base URL, overridable with ``BOTPLUG_GITHUB_API_URL``."""
    return os.getenv("BOTPLUG_GITHUB_API_URL", DEFAULT_API_URL).rstrip("/")


class GitHubClient:
    """Creates issues through the GitHub REST API."""

    def __init__(
        self,
        *,
        token: str,
        repository: str,
        api_url: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._token = token
        self._repository = repository
        self._api_url = (api_url or github_api_url()).rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/vnd.github+json"}
        if self._token:
            headers["Authorization"] = f"token {self._token}"
        return headers

    async def create_issue(
        self, title: str, body: str, labels: list[str] | None = None
    ) -> str:
        """Create an issue and return its HTML URL.

        Raises:
            UpstreamCallError: On transport failures, a status other than
                201 Created, or an unreadable response.
        """
        url = f"{self._api_url}/repos/{self._repository}/issues"
        request_body: dict[str, Any] = {
            "title": title,
            "body": body,
            "labels": labels if labels is not None else ["bug"],
        }

        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.post(
                    url, json=request_body, headers=self._headers()
                ) as resp:
                    if resp.status != 201:
                        text = await resp.text()
                        logger.warning(
                            "github.issue.create_failed",
                            status=resp.status,
                            body=text[:200],
                        )
                        raise UpstreamCallError(
                            f"got unexpected status code, got {resp.status}, expected 201",
                            details={"status": resp.status, "url": url},
                        )
                    data = await resp.json(content_type=None)
        except aiohttp.ClientError as exc:
            raise UpstreamCallError(
                f"while creating an issue: {exc}", details={"url": url}
            ) from exc
        except ValueError as exc:
            raise UpstreamCallError(
                f"while unmarshaling response: {exc}", details={"url": url}
            ) from exc

        issue_url = data.get("html_url", "") if isinstance(data, dict) else ""
        logger.info("github.issue.created", repository=self._repository, url=issue_url)
        return issue_url
