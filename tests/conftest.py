"""Shared fixtures for commit-comments tests."""

import json

import pytest
import requests

SAMPLE_COMMITS = [
    {"sha": "a1", "commit": {"message": "fix bug", "author": {"name": "Ann"}}},
    {"sha": "b2", "commit": {"message": "add feature", "author": {"name": "Bob"}}},
]


class FakeGitHubApi:
    """Stands in for the network below requests.get, recording every request."""

    def __init__(self):
        self.calls = []
        self.routes = {}
        self.error = None
        self.default = (200, json.dumps(SAMPLE_COMMITS), {})

    def respond(self, status, body="", headers=None, url=None):
        """Answer ``url`` (or every URL when omitted) with this status and body."""
        entry = (status, body, headers or {})
        if url is None:
            self.default = entry
        else:
            self.routes[url] = entry

    def fail(self, error):
        self.error = error

    @property
    def urls(self):
        return [url for _method, url, _kwargs in self.calls]

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        status, body, headers = self.routes.get(url, self.default)
        response = requests.Response()
        response.status_code = status
        response._content = body.encode("utf-8")
        response.encoding = "utf-8"
        response.headers.update(headers)
        response.url = url
        return response


@pytest.fixture
def github_api(monkeypatch):
    """Route all requests sessions to a FakeGitHubApi answering 200 with two commits."""
    api = FakeGitHubApi()

    def fake_request(session, method, url, **kwargs):
        return api.request(method, url, **kwargs)

    monkeypatch.setattr(requests.Session, "request", fake_request)
    return api
