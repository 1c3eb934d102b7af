"""Factory facade that builds the data and embed objects by name."""

from __future__ import annotations

import logging
from typing import Any

from .auth.base import Auth
from .data.base import Data
from .data.picasa import Picasa
from .data.plus import Comments
from .embed.base import Embed
from .embed.maps import Maps

DATA_CLASSES: dict[str, type[Data]] = {
    "picasa": Picasa,
    "plus_comments": Comments,
    "comments": Comments,
}

EMBED_CLASSES: dict[str, type[Embed]] = {
    "maps": Maps,
}


class Google:
    """Builds Google facades that share one option mapping and auth object.

    Usage:
        google = Google({"clientid": "...", "clientsecret": "..."})
        picasa = google.data("picasa")
        maps = google.embed("maps")
    """

    def __init__(self, options: dict[str, Any] | None = None, auth: Auth | None = None) -> None:
        self.log = logging.getLogger(__name__)
        self.options = options if options is not None else {}
        self.auth = auth

    def data(
        self, name: str, options: dict[str, Any] | None = None, auth: Auth | None = None
    ) -> Data | None:
        """Create a data facade ("picasa", "plus_comments").

        Returns:
            The facade, or None for an unknown name
        """
        cls = DATA_CLASSES.get(name.lower())
        if cls is None:
            self.log.warning("Unknown Google data facade: %s", name)
            return None
        options = options if options is not None else self.options
        return cls(options, auth if auth is not None else self.auth)

    def embed(self, name: str, options: dict[str, Any] | None = None) -> Embed | None:
        """Create an embed generator ("maps").

        Returns:
            The embed, or None for an unknown name
        """
        cls = EMBED_CLASSES.get(name.lower())
        if cls is None:
            self.log.warning("Unknown Google embed: %s", name)
            return None
        return cls(options if options is not None else self.options)

    def get_option(self, key: str) -> Any:
        return self.options.get(key)

    def set_option(self, key: str, value: Any) -> Google:
        self.options[key] = value
        return self
