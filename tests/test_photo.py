"""Tests for google_kit.data.picasa.photo"""
from __future__ import annotations

import pytest

from conftest import echo, fixture_text, make_response
from google_kit.core.errors import EtagMismatchError, TransportError, UnexpectedDataError
from google_kit.data.picasa import Photo

PHOTO_URL = (
    "https://picasaweb.google.com/data/entry/api/user/12345678901234567890"
    "/albumid/0123456789012345678/photoid/12345678901234567890"
)
THUMB_BASE = "https://lh3.googleusercontent.com/sdgfdfgsdgf/werewr/aswertrt/vdfderer"


@pytest.fixture
def photo(photo_xml, options, auth) -> Photo:
    return Photo(photo_xml, options, auth)


def test_get_link(photo):
    assert photo.get_link() == PHOTO_URL
    assert photo.get_link("self") == PHOTO_URL
    assert photo.get_link("nothing") is None


def test_get_url(photo):
    assert photo.get_url() == (
        "https://lh3.googleusercontent.com/-VQfLCrQyGuw/UAYBmwBJZ3I/AAAAAAAAF-k/8y_1iBPJcdQ/Photo2.jpg"
    )


def test_get_thumbnails(photo):
    assert photo.get_thumbnails() == {
        72: {"url": f"{THUMB_BASE}/s72/Photo2.jpg", "w": 72, "h": 54},
        144: {"url": f"{THUMB_BASE}/s144/Photo2.jpg", "w": 144, "h": 108},
        288: {"url": f"{THUMB_BASE}/s288/Photo2.jpg", "w": 288, "h": 216},
    }


def test_getters(photo):
    assert photo.get_title() == "Photo2.jpg"
    assert photo.get_summary() == "Summary"
    assert photo.get_access() == "only_you"
    assert photo.get_time() == 1328140800
    assert photo.get_size() == 648818
    assert photo.get_height() == 1536
    assert photo.get_width() == 2048


def test_setters(photo):
    assert photo.set_title("New Title").get_title() == "New Title"
    assert photo.set_summary("New Summary").get_summary() == "New Summary"
    assert photo.set_access("public").get_access() == "public"
    assert photo.set_time(0).get_time() == 0


def test_save_modes(photo, auth):
    auth.queue(echo, echo)
    photo.set_title("New Title")

    photo.save()
    photo.save(True)

    assert [call.headers["If-Match"] for call in auth.calls] == ["*", '"YDkqeyI."']
    assert all("New Title" in call.data for call in auth.calls)
    assert photo.get_title() == "New Title"


def test_save_conflict(photo, auth):
    auth.queue(TransportError(412, "Mismatch: etags"))
    with pytest.raises(EtagMismatchError, match="Etag match failed"):
        photo.save('"stale"')


def test_delete(photo, auth):
    auth.queue(make_response(""))
    assert photo.delete() is True
    assert auth.calls[0].url == PHOTO_URL


def test_delete_with_unexpected_body(photo, auth):
    auth.queue(make_response("BADDATA"))
    with pytest.raises(UnexpectedDataError, match="BADDATA"):
        photo.delete()
    assert photo.xml is not None


def test_refresh(photo, auth):
    auth.queue(make_response(fixture_text("photo.xml")))
    photo.set_title("Unsaved")

    assert photo.refresh() is photo
    assert photo.get_title() == "Photo2.jpg"


def test_unauthenticated_returns_false(photo, auth):
    auth.authenticated = False
    assert photo.delete() is False
    assert photo.save() is False
    assert photo.refresh() is False
    assert auth.calls == []
