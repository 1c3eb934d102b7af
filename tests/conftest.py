from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, NamedTuple

import pytest
import requests

from google_kit.auth.base import Auth

FIXTURES = Path(__file__).parent / "fixtures"


def fixture_text(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


def make_response(
    body: str | bytes = "", status_code: int = 200, content_type: str = "application/atom+xml"
) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8") if isinstance(body, str) else body
    response.encoding = "utf-8"
    response.headers["Content-Type"] = content_type
    return response


class Call(NamedTuple):
    url: str
    data: Any
    headers: dict[str, str]
    method: str


class FakeAuth(Auth):
    """Auth double that records requests and replays queued results.

    A queued result is a response, an exception to raise, or a callable
    taking the Call and returning a response.
    """

    def __init__(self, options: dict[str, Any] | None = None, authenticated: bool = True) -> None:
        super().__init__(options)
        self.authenticated = authenticated
        self.calls: list[Call] = []
        self.results: list[Any] = []

    def queue(self, *results: Any) -> FakeAuth:
        self.results.extend(results)
        return self

    def authenticate(self) -> bool:
        self.authenticated = True
        return True

    def is_authenticated(self) -> bool:
        return self.authenticated

    def query(self, url, data=None, headers=None, method="get"):
        call = Call(url, data, dict(headers or {}), method)
        self.calls.append(call)
        if not self.results:
            raise AssertionError(f"unexpected request: {method} {url}")
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        if callable(result):
            return result(call)
        return result


def echo(call: Call) -> requests.Response:
    """Answer a PUT with the body that was sent."""
    return make_response(call.data)


@pytest.fixture
def options() -> dict[str, Any]:
    return {
        "clientid": "01234567891011.apps.googleusercontent.com",
        "clientsecret": "jeDs8rKw_jDJW8MMf-ff8ejs",
        "redirecturi": "http://localhost/oauth",
    }


@pytest.fixture
def auth(options) -> FakeAuth:
    return FakeAuth(options)


@pytest.fixture
def album_xml() -> ET.Element:
    return ET.fromstring(fixture_text("album.xml"))


@pytest.fixture
def photo_xml() -> ET.Element:
    return ET.fromstring(fixture_text("photo.xml"))
