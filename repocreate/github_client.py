"""
github_client.py

Responsibility: Isolate the GitHub REST API call used to find the owning account.

Repository lookup and creation go through the `gh` CLI; this client is only used
when a clone URL needs an owner and none was given explicitly.
"""

from __future__ import annotations

from typing import Any

import requests


class GitHubError(RuntimeError):
    pass


class GitHubClient:
    def __init__(self, token: str, api_base: str = "https://api.github.com") -> None:
        if not token.strip():
            raise GitHubError("GitHub token is required.")
        self._token = token
        self._api_base = api_base.rstrip("/")

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self._token}",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "create-repo",
        }

    def _get(self, path: str) -> Any:
        url = f"{self._api_base}{path}"
        try:
            r = requests.request("GET", url, headers=self._headers(), timeout=30)
        except requests.RequestException as e:
            raise GitHubError(f"GitHub API request failed GET {path}: {e}") from e
        if r.status_code >= 400:
            try:
                payload = r.json()
            except ValueError:
                payload = {"message": r.text}
            raise GitHubError(f"GitHub API error {r.status_code} GET {path}: {payload.get('message', payload)}")
        return r.json()

    def viewer_login(self) -> str:
        """Return the login of the account the token belongs to."""
        data = self._get("/user")
        login = str(data.get("login") or "").strip()
        if not login:
            raise GitHubError("GitHub API response for /user has no login.")
        return login
