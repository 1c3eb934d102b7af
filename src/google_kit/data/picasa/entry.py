"""Common behaviour of Picasa album and photo entries.

An entry wraps the Atom XML Google returned for one resource. Edits are
made on that XML through the setters and sent back with ``save()``.

Mutations are conditional on the entry's etag (``gd:etag``). ``match``
selects the ``If-Match`` value:

- ``"*"`` (default): unconditional
- a string: a previously retrieved etag
- ``True``: the etag of the locally held XML

When Google answers 412 the resource changed in the meantime and
``EtagMismatchError`` is raised. Any other transport error propagates
unchanged. On success the local XML is replaced by what Google returned.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any

import requests

from ...auth.base import Auth
from ...core.errors import (
    EntryDeletedError,
    EtagMismatchError,
    TransportError,
    UnexpectedDataError,
)
from ..base import Data
from .atom import ETAG, GDATA_VERSION, NS, SCOPE, qname, to_string

PRECONDITION_FAILED = 412


class PicasaEntry(Data):
    """Base class for Picasa resources backed by an Atom entry."""

    SCOPE = SCOPE

    def __init__(
        self,
        xml: ET.Element,
        options: dict[str, Any] | None = None,
        auth: Auth | None = None,
    ) -> None:
        self.xml: ET.Element | None = xml
        super().__init__(options, auth)

    # XML access

    def _element(self) -> ET.Element:
        if self.xml is None:
            raise EntryDeletedError("The entry has been deleted.")
        return self.xml

    def _child(self, tag: str) -> ET.Element | None:
        return self._element().find(qname(tag))

    def _text(self, tag: str) -> str:
        child = self._child(tag)
        if child is None or child.text is None:
            return ""
        return child.text

    def _set_text(self, tag: str, value: Any) -> None:
        child = self._child(tag)
        if child is None:
            child = ET.SubElement(self._element(), qname(tag))
        child.text = str(value)

    def get_etag(self) -> str | None:
        return self._element().get(ETAG)

    def get_link(self, rel: str = "edit") -> str | None:
        """Return the href of the entry's link with the given rel."""
        for link in self._element().findall("atom:link", NS):
            if link.get("rel") == rel:
                return link.get("href")
        return None

    # Common fields

    def get_title(self) -> str:
        return self._text("title")

    def get_summary(self) -> str:
        return self._text("summary")

    def get_access(self) -> str:
        return self._text("gphoto:access")

    def get_time(self) -> float:
        """Return the entry time in seconds since the epoch."""
        timestamp = self._text("gphoto:timestamp")
        return float(timestamp) / 1000 if timestamp else 0.0

    def set_title(self, title: str) -> PicasaEntry:
        self._set_text("title", title)
        return self

    def set_summary(self, summary: str) -> PicasaEntry:
        self._set_text("summary", summary)
        return self

    def set_access(self, access: str) -> PicasaEntry:
        self._set_text("gphoto:access", access)
        return self

    def set_time(self, time: float) -> PicasaEntry:
        """Set the entry time, given in seconds since the epoch."""
        self._set_text("gphoto:timestamp", int(round(time * 1000)))
        return self

    # Remote operations

    def _resolve_match(self, match: str | bool) -> str:
        if match is True:
            etag = self.get_etag()
            if etag is None:
                self.log.warning("No etag on %s, sending an unconditional request", self.get_link())
                return "*"
            return etag
        return match

    def _conditional_query(
        self, data: Any, headers: dict[str, str], method: str, match: str
    ) -> requests.Response:
        try:
            return self.query(self.get_link(), data, headers, method)
        except TransportError as e:
            if e.status_code == PRECONDITION_FAILED:
                self.log.info("Etag %s no longer matches %s", match, self.get_link())
                raise EtagMismatchError(match) from e
            raise

    def delete(self, match: str | bool = "*") -> bool:
        """Delete the resource on Google.

        Args:
            match: If-Match value, or True to use the local etag

        Returns:
            True on success, False if not authenticated

        Raises:
            EtagMismatchError: If the resource changed since the etag was issued
            UnexpectedDataError: If Google answers with a body
        """
        if not self.is_authenticated():
            return False

        match = self._resolve_match(match)
        headers = {**GDATA_VERSION, "If-Match": match}
        response = self._conditional_query(None, headers, "delete", match)

        if response.text != "":
            raise UnexpectedDataError(response.text)

        self.xml = None
        return True

    def save(self, match: str | bool = "*") -> PicasaEntry | bool:
        """Send the locally edited entry to Google.

        Args:
            match: If-Match value, or True to use the local etag

        Returns:
            self with the XML Google returned, or False if not authenticated

        Raises:
            EtagMismatchError: If the resource changed since the etag was issued
        """
        if not self.is_authenticated():
            return False

        match = self._resolve_match(match)
        headers = {**GDATA_VERSION, "Content-Type": "application/atom+xml", "If-Match": match}
        response = self._conditional_query(to_string(self._element()), headers, "put", match)
        self.xml = self.safe_xml(response.content)
        return self

    def refresh(self) -> PicasaEntry | bool:
        """Reload the entry from Google, discarding local edits."""
        if not self.is_authenticated():
            return False

        response = self.query(self.get_link(), None, dict(GDATA_VERSION))
        self.xml = self.safe_xml(response.content)
        return self
