"""Tests for google_kit.embed.maps"""
from __future__ import annotations

import json
from unittest import mock

import pytest
import requests

from conftest import make_response
from google_kit.core.errors import GeocodeError, MissingKeyError
from google_kit.embed import Maps
from google_kit.embed.maps import GEOCODE_URL

ADDRESS = "1600 Amphitheatre Parkway, Mountain View, CA"
GEOCODE_OK = {
    "status": "OK",
    "results": [
        {
            "formatted_address": ADDRESS,
            "geometry": {"location": {"lat": 37.42, "lng": -122.08}},
        }
    ],
}


def geocode_response(payload, status_code=200):
    return make_response(json.dumps(payload), status_code, "application/json")


@pytest.fixture
def http():
    session = mock.Mock(spec=requests.Session)
    session.get.return_value = geocode_response(GEOCODE_OK)
    return session


@pytest.fixture
def maps(http) -> Maps:
    return Maps({}, "https://example.com/page", http)


class TestMapsOptions:
    def test_defaults(self, maps):
        assert maps.get_key() is None
        assert maps.get_map_id() == "map_canvas"
        assert maps.get_map_class() == ""
        assert maps.get_map_style() == ""
        assert maps.get_map_type() == "ROADMAP"
        assert maps.get_additional_map_options() == {}
        assert maps.get_additional_javascript() == ""
        assert maps.get_zoom() == 0
        assert maps.get_center() == [0, 0]
        assert maps.is_async() is True
        assert maps.get_async_callback() == "initialize"
        assert maps.has_sensor() is False
        assert maps.get_autoload() == "false"
        assert maps.list_markers() == []

    def test_setters_chain(self, maps):
        result = (
            maps.set_key("abc")
            .set_map_id("mymap")
            .set_map_class("big")
            .set_map_style("height: 300px")
            .set_map_type("satellite")
            .set_zoom(8)
            .set_async_callback("boot")
            .set_autoload()
        )
        assert result is maps
        assert maps.get_key() == "abc"
        assert maps.get_map_id() == "mymap"
        assert maps.get_map_class() == "big"
        assert maps.get_map_style() == "height: 300px"
        assert maps.get_map_type() == "SATELLITE"
        assert maps.get_zoom() == 8
        assert maps.get_async_callback() == "boot"
        assert maps.get_autoload() == "onload"

    def test_toggles(self, maps):
        assert maps.use_sync().is_async() is False
        assert maps.use_async().is_async() is True
        assert maps.use_sensor().has_sensor() is True
        assert maps.no_sensor().has_sensor() is False

    def test_options_are_shared(self, http):
        options = {"key": "from-config"}
        maps = Maps(options, http=http)
        maps.set_zoom(3)
        assert options["zoom"] == 3
        assert maps.get_key() == "from-config"


class TestMarkers:
    def test_add_marker_coordinates(self, maps):
        marker = maps.add_marker((37.4, -122.1))
        assert marker == {"loc": [37.4, -122.1], "title": "37.4, -122.1", "options": {}}
        assert maps.list_markers() == [marker]

    def test_add_marker_address(self, maps, http):
        maps.set_key("abc")

        marker = maps.add_marker(ADDRESS, options={"draggable": True})

        assert marker == {"loc": [37.42, -122.08], "title": ADDRESS, "options": {"draggable": True}}
        http.get.assert_called_once_with(
            GEOCODE_URL, params={"address": ADDRESS, "key": "abc"}, timeout=30
        )

    def test_add_marker_address_not_found(self, maps, http):
        http.get.return_value = geocode_response({"status": "ZERO_RESULTS", "results": []})
        assert maps.add_marker("nowhere") is None
        assert maps.list_markers() == []

    def test_delete_marker(self, maps):
        first = maps.add_marker([1, 2], "one")
        second = maps.add_marker([3, 4], "two")

        assert maps.delete_marker() == second
        assert maps.list_markers() == [first]
        assert maps.delete_marker(0) == first
        assert maps.list_markers() == []

    def test_delete_marker_out_of_bounds(self, maps):
        maps.add_marker([1, 2])
        with pytest.raises(IndexError, match="Marker index out of bounds."):
            maps.delete_marker(1)
        with pytest.raises(IndexError):
            maps.delete_marker(-1)

    def test_delete_marker_empty(self, maps):
        with pytest.raises(IndexError):
            maps.delete_marker()


class TestCenter:
    def test_set_center_with_marker(self, maps):
        assert maps.set_center([37.4, -122.1], "HQ") is maps
        assert maps.get_center() == [37.4, -122.1]
        assert maps.list_markers()[0]["title"] == "HQ"

    def test_set_center_without_marker(self, maps):
        maps.set_center([10, 20], False)
        assert maps.get_center() == [10, 20]
        assert maps.list_markers() == []

    def test_set_center_address_without_marker(self, maps):
        maps.set_center(ADDRESS, False)
        assert maps.get_center() == [37.42, -122.08]
        assert maps.list_markers() == []

    def test_set_center_unknown_address(self, maps, http):
        http.get.return_value = geocode_response({"status": "ZERO_RESULTS"})
        assert maps.set_center("nowhere") is None
        assert maps.set_center("nowhere", False) is None
        assert maps.get_center() == [0, 0]


class TestGeocode:
    def test_geocode_address(self, maps, http):
        assert maps.geocode_address(ADDRESS) == GEOCODE_OK["results"][0]
        http.get.assert_called_once_with(GEOCODE_URL, params={"address": ADDRESS}, timeout=30)

    def test_geocode_http_error(self, maps, http):
        http.get.return_value = make_response("denied", 403, "text/plain")
        with pytest.raises(GeocodeError, match="Error code 403 received geocoding address: denied."):
            maps.geocode_address(ADDRESS)

    def test_geocode_invalid_json(self, maps, http):
        http.get.return_value = make_response("BADDATA", 200, "text/plain")
        with pytest.raises(GeocodeError, match="Invalid json"):
            maps.geocode_address(ADDRESS)

    def test_geocode_json_not_an_object(self, maps, http):
        http.get.return_value = make_response('["x"]', 200, "application/json")
        with pytest.raises(GeocodeError, match="Invalid json"):
            maps.geocode_address(ADDRESS)


class TestRendering:
    def test_header_requires_key(self, maps):
        with pytest.raises(MissingKeyError):
            maps.get_header()

    def test_async_header(self, maps):
        maps.set_key("abc").set_center([37.4, -122.1], "Bob's place").set_autoload("onload")
        maps.set_additional_map_options({"scrollwheel": False})

        header = maps.get_header()

        assert header.startswith('<script type="text/javascript">function initialize() {var mapOptions = {')
        assert "zoom: 0," in header
        assert "center: new google.maps.LatLng(37.4,-122.1)," in header
        assert "mapTypeId: google.maps.MapTypeId.ROADMAP,\"scrollwheel\":false};" in header
        assert "var map = new google.maps.Map(document.getElementById('map_canvas'), mapOptions);" in header
        assert "position: new google.maps.LatLng(37.4,-122.1),map: map,title:'Bob\\'s place',});" in header
        assert (
            "script.src = 'https://maps.googleapis.com/maps/api/js?key=abc&sensor=false&callback=initialize';"
            in header
        )
        assert "window.onload=function() {" in header
        assert header.endswith("};</script>")

    def test_sync_header(self, http):
        maps = Maps({}, "http://example.com/page", http)
        maps.set_key("abc").use_sync().use_sensor().set_autoload("jquery")
        maps.set_additional_javascript("console.log(map);")

        header = maps.get_header()

        assert header.startswith(
            "<script type='text/javascript' src='http://maps.googleapis.com/maps/api/js?key=abc&sensor=true'>"
            "</script><script type=\"text/javascript\">"
        )
        assert "$(document).ready(function() {var mapOptions = {" in header
        assert "console.log(map);});</script>" in header

    def test_mootools_autoload(self, maps):
        maps.set_key("abc").set_autoload("mootools")
        assert "window.addEvent('domready',function() {" in maps.get_header()

    def test_no_autoload(self, maps):
        header = maps.set_key("abc").get_header()
        assert "window.onload" not in header
        assert header.endswith("}</script>")

    def test_body(self, maps):
        assert maps.get_body() == "<div id='map_canvas'></div>"
        maps.set_map_id("m").set_map_class("big").set_map_style("width: 10px")
        assert maps.get_body() == "<div id='m' class='big' style='width: 10px'></div>"


def test_secure_without_page_uri(http):
    assert Maps(http=http).is_secure() is True
    assert Maps(uri="http://example.com", http=http).is_secure() is False
