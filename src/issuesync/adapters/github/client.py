"""
GitHub API Client - Low-level HTTP client for the GitHub REST API.

This handles the raw HTTP communication with GitHub.
The GitHubAdapter uses this to implement the IssueTrackerPort.
"""

import logging
from typing import Any, Optional

import requests

from ...core.exceptions import (
    IssueTrackerError,
    AuthenticationError,
    NotFoundError,
    PermissionError,
    RateLimitError,
)


class GitHubApiClient:
    """
    Low-level GitHub REST API client scoped to one repository.

    Handles authentication, request/response, and error handling.
    """

    API_VERSION = "2022-11-28"
    PER_PAGE = 100

    def __init__(
        self,
        token: str,
        owner: str,
        repo: str,
        api_url: str = "https://api.github.com",
        dry_run: bool = True,
        timeout: float = 30.0,
    ):
        """
        Initialize the GitHub client.

        Args:
            token: Personal access token or app installation token
            owner: Repository owner (user or organization)
            repo: Repository name
            api_url: API root (GitHub Enterprise uses https://host/api/v3)
            dry_run: If True, don't make write operations
            timeout: Per-request timeout in seconds
        """
        self.api_url = api_url.rstrip("/")
        self.repo_url = f"{self.api_url}/repos/{owner}/{repo}"
        self.owner = owner
        self.repo = repo
        self.dry_run = dry_run
        self.timeout = timeout
        self.logger = logging.getLogger("GitHubApiClient")

        self.headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
            "X-GitHub-Api-Version": self.API_VERSION,
        }

        self._session = requests.Session()
        self._session.headers.update(self.headers)

    # -------------------------------------------------------------------------
    # Core Request Methods
    # -------------------------------------------------------------------------

    def request(
        self,
        method: str,
        url: str,
        **kwargs
    ) -> requests.Response:
        """
        Make an authenticated request to the GitHub API.

        Args:
            method: HTTP method (GET, POST, PATCH)
            url: Absolute URL, or an endpoint relative to the repository
            **kwargs: Additional arguments for requests

        Returns:
            The successful response

        Raises:
            IssueTrackerError: On API errors
        """
        if not url:
            url = self.repo_url
        elif not url.startswith("http"):
            url = f"{self.repo_url}/{url}"
        kwargs.setdefault("timeout", self.timeout)

        try:
            response = self._session.request(method, url, **kwargs)
        except requests.exceptions.ConnectionError as e:
            raise IssueTrackerError(f"Connection failed: {e}", cause=e) from e
        except requests.exceptions.Timeout as e:
            raise IssueTrackerError(f"Request timed out: {e}", cause=e) from e

        self._check_response(response, url)
        return response

    def get(self, endpoint: str, **kwargs) -> Any:
        """GET request."""
        return self._json(self.request("GET", endpoint, **kwargs))

    def get_paginated(self, endpoint: str, **kwargs) -> list[Any]:
        """GET every page of a list endpoint, following Link headers."""
        params = dict(kwargs.pop("params", None) or {})
        params.setdefault("per_page", self.PER_PAGE)

        items: list[Any] = []
        response = self.request("GET", endpoint, params=params, **kwargs)
        items.extend(self._json(response) or [])

        while "next" in response.links:
            response = self.request("GET", response.links["next"]["url"], **kwargs)
            items.extend(self._json(response) or [])

        return items

    def post(self, endpoint: str, json: Optional[dict] = None, **kwargs) -> Any:
        """POST request (checks dry_run)."""
        if self.dry_run:
            self.logger.info(f"[DRY-RUN] Would POST to {endpoint}")
            return {}
        return self._json(self.request("POST", endpoint, json=json, **kwargs))

    def patch(self, endpoint: str, json: Optional[dict] = None, **kwargs) -> Any:
        """PATCH request (checks dry_run)."""
        if self.dry_run:
            self.logger.info(f"[DRY-RUN] Would PATCH {endpoint}")
            return {}
        return self._json(self.request("PATCH", endpoint, json=json, **kwargs))

    # -------------------------------------------------------------------------
    # Response Handling
    # -------------------------------------------------------------------------

    def _check_response(self, response: requests.Response, endpoint: str) -> None:
        """Raise the matching IssueTrackerError for a failed response."""
        if response.ok:
            return

        status = response.status_code
        error_body = response.text[:500] if response.text else ""

        if status == 401:
            raise AuthenticationError(
                "Authentication failed. Check GITHUB_TOKEN."
            )

        if status in (403, 429):
            if status == 429 or response.headers.get("X-RateLimit-Remaining") == "0":
                raise RateLimitError(
                    f"Rate limit exceeded for {endpoint} "
                    f"(resets at {response.headers.get('X-RateLimit-Reset', 'unknown')})"
                )
            raise PermissionError(f"Permission denied for {endpoint}")

        if status == 404:
            raise NotFoundError(f"Not found: {endpoint}")

        # Generic error
        raise IssueTrackerError(f"API error {status}: {error_body}")

    @staticmethod
    def _json(response: requests.Response) -> Any:
        if response.text:
            return response.json()
        return {}

    # -------------------------------------------------------------------------
    # Convenience Methods
    # -------------------------------------------------------------------------

    def search_issues(self, query: str, max_results: int = 1000) -> list[dict]:
        """
        Run an issue search query, limited to this repository.

        Follows Link headers across result pages. The search API stops
        at 1000 results.
        """
        response = self.request(
            "GET",
            f"{self.api_url}/search/issues",
            params={
                "q": f"{query} repo:{self.owner}/{self.repo} is:issue",
                "sort": "created",
                "order": "asc",
                "per_page": min(max_results, self.PER_PAGE),
            },
        )
        items = list((self._json(response) or {}).get("items", []))

        while "next" in response.links and len(items) < max_results:
            response = self.request("GET", response.links["next"]["url"])
            items.extend((self._json(response) or {}).get("items", []))

        return items[:max_results]
