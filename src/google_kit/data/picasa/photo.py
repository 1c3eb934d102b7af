"""Picasa photo entries."""

from __future__ import annotations

from typing import Any

from .atom import NS
from .entry import PicasaEntry


class Photo(PicasaEntry):
    """A photo (or video) stored in a Picasa album."""

    def get_url(self) -> str | None:
        """Return the URL of the full size media."""
        content = self._element().find("atom:content", NS)
        return content.get("src") if content is not None else None

    def get_thumbnails(self) -> dict[int, dict[str, Any]]:
        """Return the thumbnails keyed by width.

        Each value holds the thumbnail ``url`` and its ``w``/``h`` in pixels.
        """
        thumbnails: dict[int, dict[str, Any]] = {}
        for thumb in self._element().findall("media:group/media:thumbnail", NS):
            width = int(thumb.get("width", 0))
            thumbnails[width] = {
                "url": thumb.get("url"),
                "w": width,
                "h": int(thumb.get("height", 0)),
            }
        return thumbnails

    def _int(self, tag: str) -> int:
        value = self._text(tag)
        return int(value) if value else 0

    def get_size(self) -> int:
        """Return the file size in bytes."""
        return self._int("gphoto:size")

    def get_height(self) -> int:
        return self._int("gphoto:height")

    def get_width(self) -> int:
        return self._int("gphoto:width")
