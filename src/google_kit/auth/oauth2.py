"""OAuth 2.0 authentication for Google APIs.

This module handles the OAuth 2.0 flow, credential storage and token
refresh, and sends authorised requests through a requests session.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import requests
from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from ..core.errors import TransportError
from ..core.paths import app_data_dir
from .base import Auth

# Token file name (stored in app data directory)
TOKEN_FILE = "google_token.json"

AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
TOKEN_URI = "https://oauth2.googleapis.com/token"

DEFAULT_TIMEOUT = 30


class OAuth2Auth(Auth):
    """OAuth 2.0 implementation of the authentication collaborator.

    Recognised options:
        clientid, clientsecret, redirecturi: OAuth client configuration
        credentialsfile: Path to a client secrets JSON file (used instead of
            the client options when set)
        scope: Space separated scope string or list of scopes
        tokenfile: Where to store the token (defaults to the app data dir)
        timeout: Request timeout in seconds
        debug: If true, log request and response details
    """

    def __init__(
        self,
        options: dict[str, Any] | None = None,
        credentials: Credentials | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the authentication handler.

        Args:
            options: Option mapping
            credentials: Already obtained credentials, if any
            session: HTTP session to send requests with
        """
        super().__init__(options)
        self.log = logging.getLogger(__name__)
        self.credentials = credentials
        self.session = session if session is not None else requests.Session()

    @property
    def token_path(self) -> Path:
        token_file = self.get_option("tokenfile")
        if token_file:
            return Path(token_file)
        return app_data_dir() / TOKEN_FILE

    def scopes(self) -> list[str]:
        """Return the configured scopes as a list."""
        scope = self.get_option("scope")
        if not scope:
            return []
        if isinstance(scope, str):
            return scope.split()
        return list(scope)

    def authenticate(self) -> bool:
        """Authenticate and store credentials.

        Loads existing credentials if available, otherwise starts the OAuth
        flow. Automatically refreshes expired tokens.

        Returns:
            True once valid credentials are held

        Raises:
            FileNotFoundError: If the configured client secrets file is missing
            ValueError: If no OAuth client is configured
        """
        if self.credentials is None and self.token_path.exists():
            try:
                self.credentials = Credentials.from_authorized_user_file(
                    str(self.token_path), self.scopes() or None
                )
                self.log.info("Loaded existing credentials from %s", self.token_path)
            except ValueError as e:
                self.log.warning("Failed to load credentials: %s", e)
                self.credentials = None

        if not self.credentials or not self.credentials.valid:
            if self.credentials and self.credentials.expired and self.credentials.refresh_token:
                try:
                    self.credentials.refresh(Request())
                    self.log.info("Refreshed expired credentials")
                except RefreshError as e:
                    self.log.warning("Failed to refresh credentials: %s", e)
                    self.credentials = None

            if not self.credentials or not self.credentials.valid:
                self._run_oauth_flow()

        if self.credentials and self.credentials.valid:
            self._save_credentials()

        return bool(self.credentials and self.credentials.valid)

    def _client_config(self) -> dict[str, Any]:
        client_id = self.get_option("clientid")
        if not client_id:
            raise ValueError("An OAuth client id or credentials file is required")

        installed: dict[str, Any] = {
            "client_id": client_id,
            "client_secret": self.get_option("clientsecret"),
            "auth_uri": AUTH_URI,
            "token_uri": TOKEN_URI,
        }
        redirect_uri = self.get_option("redirecturi")
        if redirect_uri:
            installed["redirect_uris"] = [redirect_uri]
        return {"installed": installed}

    def _run_oauth_flow(self) -> None:
        """Run the OAuth 2.0 flow to obtain new credentials."""
        self.log.info("Starting OAuth 2.0 flow...")
        credentials_file = self.get_option("credentialsfile")
        if credentials_file:
            credentials_path = Path(credentials_file)
            if not credentials_path.exists():
                raise FileNotFoundError(f"Credentials file not found: {credentials_path}")
            flow = InstalledAppFlow.from_client_secrets_file(str(credentials_path), self.scopes())
        else:
            flow = InstalledAppFlow.from_client_config(self._client_config(), self.scopes())

        self.credentials = flow.run_local_server(port=0, open_browser=True)  # type: ignore[assignment]
        self.log.info("OAuth flow completed successfully")

    def _save_credentials(self) -> None:
        """Save credentials to token file."""
        if not self.credentials:
            return

        self.token_path.parent.mkdir(parents=True, exist_ok=True)

        token_data: dict[str, Any] = {
            "token": self.credentials.token,
            "refresh_token": self.credentials.refresh_token,
            "token_uri": self.credentials.token_uri,
            "client_id": self.credentials.client_id,
            "client_secret": self.credentials.client_secret,
            "scopes": self.credentials.scopes,
        }

        with self.token_path.open("w") as f:
            json.dump(token_data, f, indent=2)

        self.log.info("Saved credentials to %s", self.token_path)

    def is_authenticated(self) -> bool:
        """Check if valid credentials are available."""
        if not self.credentials:
            return False
        if not self.credentials.valid:
            if self.credentials.expired and self.credentials.refresh_token:
                try:
                    self.credentials.refresh(Request())
                    return True
                except RefreshError as e:
                    self.log.warning("Failed to refresh credentials: %s", e)
                    return False
            return False
        return True

    def revoke(self) -> None:
        """Revoke credentials and delete token file."""
        if self.credentials and self.credentials.token:
            response = self.session.post(
                "https://oauth2.googleapis.com/revoke",
                params={"token": self.credentials.token},
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=self._timeout(),
            )
            if response.status_code != 200:
                self.log.warning("Failed to revoke credentials: %s", response.text)

        if self.token_path.exists():
            self.token_path.unlink()
            self.log.info("Deleted token file: %s", self.token_path)

        self.credentials = None

    def _timeout(self) -> float:
        return self.get_option("timeout") or DEFAULT_TIMEOUT

    def _update_session_auth(self) -> None:
        """Update session with current credentials."""
        if not self.credentials:
            raise ValueError("No credentials available, call authenticate() first")
        if not self.credentials.valid:
            if self.credentials.expired and self.credentials.refresh_token:
                self.credentials.refresh(Request())
            else:
                raise ValueError("Credentials are invalid and cannot be refreshed")

        self.session.headers.update(
            {"Authorization": f"Bearer {self.credentials.token}"}
        )

    def query(
        self,
        url: str,
        data: Any = None,
        headers: dict[str, str] | None = None,
        method: str = "get",
    ) -> requests.Response:
        """Make an authorised request.

        Args:
            url: Full request URL
            data: Request body
            headers: Extra request headers
            method: HTTP method (get, post, put, delete)

        Returns:
            The HTTP response

        Raises:
            TransportError: If the response status is not 2xx
            requests.RequestException: If the request fails
        """
        method = method.upper()
        self._update_session_auth()
        debug = bool(self.get_option("debug"))

        if debug:
            self.log.info("API Request: %s %s", method, url)
            if headers:
                self.log.info("  Headers: %s", headers)

        try:
            response = self.session.request(
                method=method, url=url, data=data, headers=headers, timeout=self._timeout()
            )
        except requests.RequestException as e:
            self.log.error("API request failed: %s %s - %s", method, url, e)
            raise

        if debug:
            self.log.info("API Response: %s %s - Status: %s", method, url, response.status_code)

        if response.status_code < 200 or response.status_code >= 300:
            self.log.error(
                "API request failed: %s %s - Status: %s", method, url, response.status_code
            )
            raise TransportError(response.status_code, response.text)

        return response
