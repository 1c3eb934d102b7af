"""Picasa Web Albums service: album listing, creation and lookup."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable
from urllib.parse import quote

from ...core.errors import UnexpectedDataError
from ..base import Data
from .album import Album, album_entry
from .atom import API_URL, FEED, GDATA_VERSION, NS, SCOPE, to_string


class Picasa(Data):
    """Entry point to a user's Picasa albums."""

    SCOPE = SCOPE

    def _feed_url(self, user_id: str) -> str:
        return f"{API_URL}user/{quote(user_id, safe='')}"

    def list_albums(self, user_id: str = "default") -> list[Album] | bool:
        """List the albums of a user.

        Args:
            user_id: Google user id, or "default" for the authenticated user

        Returns:
            List of albums, or False if not authenticated

        Raises:
            UnexpectedDataError: If Google does not answer with a feed
        """
        if not self.is_authenticated():
            return False

        response = self.query(self._feed_url(user_id), None, dict(GDATA_VERSION))
        feed = self.safe_xml(response.content)
        if feed.tag != FEED:
            raise UnexpectedDataError(response.text)

        albums = [Album(entry, self.options, self.auth) for entry in feed.findall("atom:entry", NS)]
        self.log.debug("Listed %d albums for %s", len(albums), user_id)
        return albums

    def create_album(
        self,
        user_id: str = "default",
        title: str = "",
        access: str = "private",
        summary: str = "",
        location: str = "",
        time: float | None = None,
        keywords: Iterable[str] = (),
    ) -> Album | bool:
        """Create a new album.

        Args:
            user_id: Google user id, or "default" for the authenticated user
            title: Album title
            access: Access level (public, private, protected)
            summary: Album description
            location: Where the album was taken
            time: Album time in seconds since the epoch (defaults to now)
            keywords: Album keywords

        Returns:
            The created album, or False if not authenticated
        """
        if not self.is_authenticated():
            return False

        if time is None:
            time = datetime.now(timezone.utc).timestamp()

        entry = album_entry(title, access, summary, location, int(round(time * 1000)), list(keywords))
        headers = {**GDATA_VERSION, "Content-Type": "application/atom+xml"}
        response = self.query(self._feed_url(user_id), to_string(entry), headers, "post")

        return Album(self.safe_xml(response.content), self.options, self.auth)

    def get_album(self, url: str) -> Album | bool:
        """Fetch a single album by its entry URL."""
        if not self.is_authenticated():
            return False

        response = self.query(url, None, dict(GDATA_VERSION))
        return Album(self.safe_xml(response.content), self.options, self.auth)
