"""Base class for authenticated Google data facades."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Any

import requests

from ..auth.base import Auth
from ..auth.oauth2 import OAuth2Auth
from ..core.errors import UnexpectedDataError


class Data:
    """Shared plumbing for facades that talk to Google on behalf of a user.

    Subclasses set ``SCOPE``; it is installed into the auth options when the
    caller has not chosen a scope.
    """

    SCOPE: str | None = None

    def __init__(self, options: dict[str, Any] | None = None, auth: Auth | None = None) -> None:
        self.log = logging.getLogger(type(self).__module__)
        self.options = options if options is not None else {}
        self.auth = auth if auth is not None else OAuth2Auth(self.options)

        if self.SCOPE and not self.auth.get_option("scope"):
            self.auth.set_option("scope", self.SCOPE)

    def authenticate(self) -> bool:
        return self.auth.authenticate()

    def is_authenticated(self) -> bool:
        return self.auth.is_authenticated()

    def query(
        self,
        url: str,
        data: Any = None,
        headers: dict[str, str] | None = None,
        method: str = "get",
    ) -> requests.Response:
        return self.auth.query(url, data, headers, method)

    @staticmethod
    def safe_xml(body: str | bytes) -> ET.Element:
        """Parse an XML document.

        Raises:
            UnexpectedDataError: If the body is not well-formed XML
        """
        try:
            return ET.fromstring(body)
        except ET.ParseError as e:
            text = body.decode("utf-8", "replace") if isinstance(body, bytes) else body
            raise UnexpectedDataError(text) from e

    def get_option(self, key: str) -> Any:
        return self.options.get(key)

    def set_option(self, key: str, value: Any) -> Data:
        self.options[key] = value
        return self
