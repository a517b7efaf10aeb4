from __future__ import annotations

from typing import Any

import pytest
import requests

from repocreate.github_client import GitHubClient, GitHubError


class FakeResponse:
    def __init__(self, status_code: int, payload: Any = None, text: str = "") -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


def _patch(monkeypatch: pytest.MonkeyPatch, response: FakeResponse, seen: list[dict[str, Any]]) -> None:
    def fake_request(method: str, url: str, **kwargs: Any) -> FakeResponse:
        seen.append({"method": method, "url": url, **kwargs})
        return response

    monkeypatch.setattr(requests, "request", fake_request)


def test_token_required() -> None:
    with pytest.raises(GitHubError):
        GitHubClient("  ")


def test_viewer_login(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[dict[str, Any]] = []
    _patch(monkeypatch, FakeResponse(200, {"login": "octocat"}), seen)
    assert GitHubClient("t0ken").viewer_login() == "octocat"
    assert seen[0]["method"] == "GET"
    assert seen[0]["url"] == "https://api.github.com/user"
    assert seen[0]["headers"]["Authorization"] == "Bearer t0ken"


def test_custom_api_base(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[dict[str, Any]] = []
    _patch(monkeypatch, FakeResponse(200, {"login": "ghe-user"}), seen)
    GitHubClient("t0ken", api_base="https://ghe.example.com/api/v3/").viewer_login()
    assert seen[0]["url"] == "https://ghe.example.com/api/v3/user"


def test_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch(monkeypatch, FakeResponse(401, {"message": "Bad credentials"}), [])
    with pytest.raises(GitHubError, match="401.*Bad credentials"):
        GitHubClient("t0ken").viewer_login()


def test_http_error_without_json(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch(monkeypatch, FakeResponse(502, None, text="Bad gateway"), [])
    with pytest.raises(GitHubError, match="Bad gateway"):
        GitHubClient("t0ken").viewer_login()


def test_network_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(*args: Any, **kwargs: Any) -> None:
        raise requests.ConnectionError("unreachable")

    monkeypatch.setattr(requests, "request", boom)
    with pytest.raises(GitHubError, match="unreachable"):
        GitHubClient("t0ken").viewer_login()


def test_missing_login(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch(monkeypatch, FakeResponse(200, {}), [])
    with pytest.raises(GitHubError):
        GitHubClient("t0ken").viewer_login()
