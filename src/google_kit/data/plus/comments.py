"""Google+ comments API."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote, urlencode

from ...auth.base import Auth
from ...core.errors import UnexpectedDataError
from ..base import Data

API_URL = "https://www.googleapis.com/plus/v1/"
SCOPE = "https://www.googleapis.com/auth/plus.me"

DEFAULT_MAX_RESULTS = 20


class Comments(Data):
    """Read comments attached to Google+ activities."""

    SCOPE = SCOPE

    def __init__(self, options: dict[str, Any] | None = None, auth: Auth | None = None) -> None:
        super().__init__(options, auth)
        if not self.get_option("api.url"):
            self.set_option("api.url", API_URL)

    def _get_json(self, url: str, params: dict[str, Any]) -> Any:
        if params:
            url = f"{url}?{urlencode(params)}"

        response = self.auth.query(url)
        try:
            return response.json()
        except ValueError as e:
            raise UnexpectedDataError(response.text) from e

    def list_comments(
        self,
        activity_id: str,
        fields: str | None = None,
        max_results: int = DEFAULT_MAX_RESULTS,
        order: str | None = None,
        token: str | None = None,
        alt: str | None = None,
    ) -> dict[str, Any] | bool:
        """List all of the comments for an activity.

        Args:
            activity_id: The activity to get comments for
            fields: Partial response selector
            max_results: Maximum number of comments per page
            order: "ascending" or "descending"
            token: The nextPageToken of a previous response
            alt: Alternative representation type ("json")

        Returns:
            The decoded response, or False if not authenticated
        """
        if not self.is_authenticated():
            return False

        params: dict[str, Any] = {}
        if fields:
            params["fields"] = fields
        if max_results != DEFAULT_MAX_RESULTS:
            params["maxResults"] = max_results
        if order:
            params["orderBy"] = order
        if token:
            params["pageToken"] = token
        if alt:
            params["alt"] = alt

        url = f"{self.get_option('api.url')}activities/{quote(activity_id, safe='')}/comments"
        return self._get_json(url, params)

    def get_comment(self, comment_id: str, fields: str | None = None) -> dict[str, Any] | bool:
        """Get a single comment.

        Args:
            comment_id: The comment to get
            fields: Partial response selector

        Returns:
            The decoded comment, or False if not authenticated
        """
        if not self.is_authenticated():
            return False

        params = {"fields": fields} if fields else {}
        url = f"{self.get_option('api.url')}comments/{quote(comment_id, safe='')}"
        return self._get_json(url, params)
