"""Google Maps JavaScript embed with markers and address geocoding."""

from __future__ import annotations

import json
from typing import Any, Sequence, Union

import requests

from ..core.errors import GeocodeError, MissingKeyError
from .base import Embed

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
MAPS_HOST = "maps.googleapis.com/maps/api/js"

DEFAULT_TIMEOUT = 30

# A latitude/longitude pair or an address to geocode
Location = Union[Sequence[float], str]


def _json_members(value: Any) -> str:
    """Render a mapping as bare JavaScript object members (no braces)."""
    return json.dumps(value or {}, separators=(",", ":"))[1:-1]


def _js_string(value: Any) -> str:
    return str(value).replace("\\", "\\\\").replace("'", "\\'")


class Maps(Embed):
    """Google Maps embed generator.

    Build the map with the setters, then place ``get_header()`` in the page
    head and ``get_body()`` where the map should appear.
    """

    def __init__(
        self,
        options: dict[str, Any] | None = None,
        uri: str | None = None,
        http: requests.Session | None = None,
    ) -> None:
        """Initialize the map.

        Args:
            options: Option mapping
            uri: URL of the page being rendered
            http: HTTP session used for geocoding requests
        """
        super().__init__(options, uri)
        self.http = http if http is not None else requests.Session()

    def get_key(self) -> str | None:
        return self.get_option("key")

    def set_key(self, key: str) -> Maps:
        self.set_option("key", key)
        return self

    def get_map_id(self) -> str:
        return self.get_option("mapid") or "map_canvas"

    def set_map_id(self, map_id: str) -> Maps:
        self.set_option("mapid", map_id)
        return self

    def get_map_class(self) -> str:
        return self.get_option("mapclass") or ""

    def set_map_class(self, css_class: str) -> Maps:
        self.set_option("mapclass", css_class)
        return self

    def get_map_style(self) -> str:
        return self.get_option("mapstyle") or ""

    def set_map_style(self, style: str) -> Maps:
        self.set_option("mapstyle", style)
        return self

    def get_map_type(self) -> str:
        return self.get_option("maptype") or "ROADMAP"

    def set_map_type(self, map_type: str) -> Maps:
        """Set the map type: ROADMAP, SATELLITE, HYBRID or TERRAIN."""
        self.set_option("maptype", map_type.upper())
        return self

    def get_additional_map_options(self) -> dict[str, Any]:
        return self.get_option("mapoptions") or {}

    def set_additional_map_options(self, options: dict[str, Any]) -> Maps:
        self.set_option("mapoptions", options)
        return self

    def get_additional_javascript(self) -> str:
        return self.get_option("extrascript") or ""

    def set_additional_javascript(self, script: str) -> Maps:
        self.set_option("extrascript", script)
        return self

    def get_zoom(self) -> int:
        return self.get_option("zoom") or 0

    def set_zoom(self, zoom: int) -> Maps:
        """Set the zoom level (0 is the whole world)."""
        self.set_option("zoom", zoom)
        return self

    def get_center(self) -> Location:
        return self.get_option("mapcenter") or [0, 0]

    def set_center(
        self,
        location: Location,
        title: str | bool = True,
        marker_options: dict[str, Any] | None = None,
    ) -> Maps | None:
        """Set the center of the map.

        Args:
            location: A latitude/longitude pair or an address
            title: Marker hover text, True for a default marker, False for none
            marker_options: Extra google.maps.Marker options

        Returns:
            self, or None if the address could not be geocoded
        """
        if title:
            marker = self.add_marker(
                location, title if isinstance(title, str) else None, marker_options
            )
            if marker is None:
                return None
            location = marker["loc"]
        elif isinstance(location, str):
            geocode = self.geocode_address(location)
            if geocode is None:
                return None
            point = geocode["geometry"]["location"]
            location = [point["lat"], point["lng"]]

        self.set_option("mapcenter", list(location))
        return self

    def add_marker(
        self,
        location: Location,
        title: str | None = None,
        options: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        """Add a marker to the map.

        Args:
            location: A latitude/longitude pair or an address
            title: Hover text (defaults to the address or the coordinates)
            options: Extra google.maps.Marker options

        Returns:
            The marker, or None if the address could not be geocoded
        """
        if isinstance(location, str):
            if not title:
                title = location

            geocode = self.geocode_address(location)
            if geocode is None:
                return None
            point = geocode["geometry"]["location"]
            location = [point["lat"], point["lng"]]
        elif not title:
            title = ", ".join(str(coord) for coord in location)

        marker = {"loc": list(location), "title": title, "options": options or {}}

        markers = self.list_markers()
        markers.append(marker)
        self.set_option("markers", markers)

        return marker

    def list_markers(self) -> list[dict[str, Any]]:
        return list(self.get_option("markers") or [])

    def delete_marker(self, index: int | None = None) -> dict[str, Any]:
        """Delete a marker from the map.

        Args:
            index: Index of the marker (defaults to the last added one)

        Returns:
            The deleted marker

        Raises:
            IndexError: If there is no marker at that index
        """
        markers = self.list_markers()

        if index is None:
            index = len(markers) - 1

        if index >= len(markers) or index < 0:
            raise IndexError("Marker index out of bounds.")

        marker = markers.pop(index)
        self.set_option("markers", markers)

        return marker

    def is_async(self) -> bool:
        async_ = self.get_option("async")
        return True if async_ is None else async_

    def use_async(self) -> Maps:
        self.set_option("async", True)
        return self

    def use_sync(self) -> Maps:
        self.set_option("async", False)
        return self

    def get_async_callback(self) -> str:
        return self.get_option("callback") or "initialize"

    def set_async_callback(self, callback: str) -> Maps:
        self.set_option("callback", callback)
        return self

    def has_sensor(self) -> bool:
        sensor = self.get_option("sensor")
        return False if sensor is None else sensor

    def use_sensor(self) -> Maps:
        self.set_option("sensor", True)
        return self

    def no_sensor(self) -> Maps:
        self.set_option("sensor", False)
        return self

    def get_autoload(self) -> str:
        return self.get_option("autoload") or "false"

    def set_autoload(self, autoload: str = "onload") -> Maps:
        """Choose how the map setup is run: onload, jquery, mootools or false."""
        self.set_option("autoload", autoload)
        return self

    def _setup_script(self) -> str:
        center = self.get_center()

        setup = "var mapOptions = {"
        setup += f"zoom: {self.get_zoom()},"
        setup += f"center: new google.maps.LatLng({center[0]},{center[1]}),"
        setup += f"mapTypeId: google.maps.MapTypeId.{self.get_map_type()},"
        setup += _json_members(self.get_additional_map_options())
        setup += "};"
        setup += (
            f"var map = new google.maps.Map(document.getElementById('{self.get_map_id()}'), mapOptions);"
        )

        for marker in self.list_markers():
            loc = marker["loc"]
            setup += "new google.maps.Marker({"
            setup += f"position: new google.maps.LatLng({loc[0]},{loc[1]}),"
            setup += "map: map,"
            setup += f"title:'{_js_string(marker['title'])}',"
            setup += _json_members(marker["options"])
            setup += "});"

        setup += self.get_additional_javascript()
        return setup

    def get_header(self) -> str:
        """Get the script that loads the Maps API and builds the map.

        Raises:
            MissingKeyError: If no API key is set
        """
        key = self.get_key()
        if not key:
            raise MissingKeyError("A Google Maps API key is required.")

        scheme = "https" if self.is_secure() else "http"
        sensor = "true" if self.has_sensor() else "false"
        src = f"{scheme}://{MAPS_HOST}?key={key}&sensor={sensor}"
        setup = self._setup_script()

        if self.is_async():
            callback = self.get_async_callback()

            output = '<script type="text/javascript">'
            output += f"function {callback}() {{{setup}}}"

            onload = "function() {"
            onload += 'var script = document.createElement("script");'
            onload += 'script.type = "text/javascript";'
            onload += f"script.src = '{src}&callback={callback}';"
            onload += "document.body.appendChild(script);"
            onload += "}"
        else:
            output = f"<script type='text/javascript' src='{src}'></script>"
            output += '<script type="text/javascript">'
            onload = f"function() {{{setup}}}"

        autoload = self.get_autoload()
        if autoload == "onload":
            output += f"window.onload={onload};"
        elif autoload == "jquery":
            output += f"$(document).ready({onload});"
        elif autoload == "mootools":
            output += f"window.addEvent('domready',{onload});"

        output += "</script>"
        return output

    def get_body(self) -> str:
        """Get the div the map is loaded into."""
        output = f"<div id='{self.get_map_id()}'"

        css_class = self.get_map_class()
        if css_class:
            output += f" class='{css_class}'"

        style = self.get_map_style()
        if style:
            output += f" style='{style}'"

        output += "></div>"
        return output

    def geocode_address(self, address: str) -> dict[str, Any] | None:
        """Look up an address with the Geocoding API.

        Args:
            address: The address to geocode

        Returns:
            The first geocoding result, or None if Google found nothing

        Raises:
            GeocodeError: If the request fails or the answer is not JSON
        """
        params = {"address": address}
        key = self.get_key()
        if key:
            params["key"] = key

        response = self.http.get(GEOCODE_URL, params=params, timeout=DEFAULT_TIMEOUT)

        if response.status_code < 200 or response.status_code >= 300:
            self.log.error("Geocoding failed for %r - Status: %s", address, response.status_code)
            raise GeocodeError(
                f"Error code {response.status_code} received geocoding address: {response.text}."
            )

        try:
            data = response.json()
        except ValueError as e:
            raise GeocodeError(f"Invalid json received geocoding address: {response.text}.") from e
        if not isinstance(data, dict) or not data:
            raise GeocodeError(f"Invalid json received geocoding address: {response.text}.")

        if data.get("status") != "OK":
            self.log.debug("No geocoding result for %r: %s", address, data.get("status"))
            return None

        return data["results"][0]
