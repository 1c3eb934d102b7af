"""Abstract authentication collaborator shared by every data facade."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import requests


class Auth(ABC):
    """Google authentication base class.

    Concrete implementations decide how credentials are obtained and how
    authorised requests are sent. Facades only talk to this interface.
    """

    def __init__(self, options: dict[str, Any] | None = None) -> None:
        """Initialize the authentication object.

        Args:
            options: Option mapping. It is kept by reference, so changes made
                by the caller stay visible here.
        """
        self.options = options if options is not None else {}

    @abstractmethod
    def authenticate(self) -> bool:
        """Authenticate to Google.

        Returns:
            True on success
        """

    @abstractmethod
    def is_authenticated(self) -> bool:
        """Verify if the client has been authenticated."""

    @abstractmethod
    def query(
        self,
        url: str,
        data: Any = None,
        headers: dict[str, str] | None = None,
        method: str = "get",
    ) -> requests.Response:
        """Send an authorised request to Google.

        Args:
            url: The URL for the request
            data: The body to include in the request
            headers: Headers to send with the request
            method: HTTP method name

        Returns:
            The HTTP response

        Raises:
            TransportError: If Google answers with a non-2xx status
        """

    def get_option(self, key: str) -> Any:
        """Get an option value, or None when it is not set."""
        return self.options.get(key)

    def set_option(self, key: str, value: Any) -> Auth:
        """Set an option value and return self for chaining."""
        self.options[key] = value
        return self
