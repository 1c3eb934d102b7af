"""Exceptions raised by the Google facades."""

from __future__ import annotations


class GoogleError(Exception):
    """Base class for all errors raised by google_kit."""


class TransportError(GoogleError):
    """A request reached Google but came back with a non-2xx status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"Error code {status_code} received requesting data: {body}.")
        self.status_code = status_code
        self.body = body


class EtagMismatchError(GoogleError, RuntimeError):
    """The resource changed on the server since its etag was issued."""

    def __init__(self, match: str) -> None:
        super().__init__(f"Etag match failed: `{match}`.")
        self.match = match


class UnexpectedDataError(GoogleError, ValueError):
    """Google answered with a body that could not be understood."""

    def __init__(self, body: str) -> None:
        super().__init__(f"Unexpected data received from Google: `{body}`.")
        self.body = body


class UnsupportedFileError(GoogleError, RuntimeError):
    """The file to upload has no known media type."""


class FileAccessError(GoogleError, RuntimeError):
    """The file to upload could not be read."""


class GeocodeError(GoogleError, RuntimeError):
    """The geocoding service failed or returned garbage."""


class MissingKeyError(GoogleError, ValueError):
    """A Maps API key is required but none was configured."""


class EntryDeletedError(GoogleError, RuntimeError):
    """The entry was deleted on Google and has no local representation left."""
