"""Base class for page embeddable Google widgets."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlsplit


class Embed:
    """Shared option handling for embed generators."""

    def __init__(self, options: dict[str, Any] | None = None, uri: str | None = None) -> None:
        """Initialize the embed.

        Args:
            options: Option mapping
            uri: URL of the page being rendered; decides http vs https
        """
        self.log = logging.getLogger(type(self).__module__)
        self.options = options if options is not None else {}
        self.uri = uri

    def is_secure(self) -> bool:
        """Check whether the page is served over https (assumed without a page URL)."""
        if self.uri is None:
            return True
        return urlsplit(self.uri).scheme == "https"

    def get_option(self, key: str) -> Any:
        return self.options.get(key)

    def set_option(self, key: str, value: Any) -> Embed:
        self.options[key] = value
        return self
