"""Picasa album entries: metadata, photo listing and media upload."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from ...core.errors import FileAccessError, UnexpectedDataError, UnsupportedFileError
from .atom import FEED, FEED_REL, GDATA_VERSION, NS, new_entry, qname, to_string
from .entry import PicasaEntry
from .photo import Photo

BOUNDARY = "END_OF_PART"

# Media types Picasa accepts, keyed by lower-case file extension
MEDIA_TYPES = {
    "bmp": "image/bmp",
    "bm": "image/bmp",
    "gif": "image/gif",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "jpe": "image/jpeg",
    "jif": "image/jpeg",
    "jfif": "image/jpeg",
    "jfi": "image/jpeg",
    "png": "image/png",
    "3gp": "video/3gpp",
    "avi": "video/avi",
    "mov": "video/quicktime",
    "moov": "video/quicktime",
    "qt": "video/quicktime",
    "mp4": "video/mp4",
    "m4a": "video/mp4",
    "m4p": "video/mp4",
    "m4b": "video/mp4",
    "m4r": "video/mp4",
    "m4v": "video/mp4",
    "mpg": "video/mpeg",
    "mpeg": "video/mpeg",
    "mp1": "video/mpeg",
    "mp2": "video/mpeg",
    "mp3": "video/mpeg",
    "m1v": "video/mpeg",
    "m1a": "video/mpeg",
    "m2a": "video/mpeg",
    "mpa": "video/mpeg",
    "mpv": "video/mpeg",
    "asf": "video/x-ms-asf",
    "wmv": "video/x-ms-wmv",
}


def media_type(file: str | Path) -> str | None:
    """Return the media type for a file name, or None if Picasa rejects it."""
    return MEDIA_TYPES.get(Path(file).suffix.lstrip(".").lower())


class Album(PicasaEntry):
    """A Picasa Web Albums album."""

    def get_location(self) -> str:
        return self._text("gphoto:location")

    def set_location(self, location: str) -> Album:
        self._set_text("gphoto:location", location)
        return self

    def list_photos(self) -> list[Photo] | bool:
        """Retrieve the photos of this album.

        Returns:
            List of photos, or False if not authenticated

        Raises:
            UnexpectedDataError: If the album has no feed link or Google does not
                answer with a feed
        """
        if not self.is_authenticated():
            return False

        url = self.get_link(FEED_REL)
        if url is None:
            raise UnexpectedDataError(to_string(self._element()))

        response = self.query(url, None, dict(GDATA_VERSION))
        feed = self.safe_xml(response.content)
        if feed.tag != FEED:
            raise UnexpectedDataError(response.text)

        return [Photo(entry, self.options, self.auth) for entry in feed.findall("atom:entry", NS)]

    def upload(self, file: str | Path, title: str = "", summary: str = "") -> Photo | bool:
        """Upload a photo or video into this album.

        Args:
            file: Path of the file to upload
            title: Title to give to the file (defaults to the file name)
            summary: Description of the file

        Returns:
            The created photo, or False if not authenticated

        Raises:
            UnsupportedFileError: If the file extension has no known media type
            FileAccessError: If the file cannot be read or is empty
        """
        if not self.is_authenticated():
            return False

        path = Path(file)
        title = title or path.name

        content_type = media_type(path)
        if content_type is None:
            raise UnsupportedFileError("Inappropriate file type.")

        try:
            data = path.read_bytes()
        except OSError as e:
            raise FileAccessError(f"Cannot access file: `{file}`") from e
        if not data:
            raise FileAccessError(f"Cannot access file: `{file}`")

        entry = ET.tostring(new_entry("photo", title, summary), encoding="utf-8")
        body = b"".join(
            [
                b"Media multipart posting\r\n",
                f"--{BOUNDARY}\r\n".encode(),
                b"Content-Type: application/atom+xml\r\n\r\n",
                entry,
                f"\r\n--{BOUNDARY}\r\n".encode(),
                f"Content-Type: {content_type}\r\n\r\n".encode(),
                data,
                f"\r\n--{BOUNDARY}--\r\n".encode(),
            ]
        )
        headers = {
            **GDATA_VERSION,
            "Content-Type": f'multipart/related; boundary="{BOUNDARY}"',
            "MIME-version": "1.0",
        }

        url = self.get_link(FEED_REL) or self.get_link()
        self.log.debug("Uploading %s (%s, %d bytes) to %s", path, content_type, len(data), url)
        response = self.query(url, body, headers, "post")

        return Photo(self.safe_xml(response.content), self.options, self.auth)


def album_entry(
    title: str,
    access: str,
    summary: str,
    location: str,
    timestamp_ms: int,
    keywords: list[str],
) -> ET.Element:
    """Build the Atom entry that creates a new album."""
    entry = new_entry("album", title, summary)
    ET.SubElement(entry, qname("gphoto:access")).text = access
    ET.SubElement(entry, qname("gphoto:location")).text = location
    ET.SubElement(entry, qname("gphoto:timestamp")).text = str(timestamp_ms)
    group = ET.SubElement(entry, qname("media:group"))
    ET.SubElement(group, qname("media:keywords")).text = ", ".join(keywords)
    return entry
