"""Atom/GData XML vocabulary used by the Picasa Web Albums API."""

from __future__ import annotations

import xml.etree.ElementTree as ET

ATOM_NS = "http://www.w3.org/2005/Atom"
GD_NS = "http://schemas.google.com/g/2005"
GPHOTO_NS = "http://schemas.google.com/photos/2007"
MEDIA_NS = "http://search.yahoo.com/mrss/"

NS = {"atom": ATOM_NS, "gd": GD_NS, "gphoto": GPHOTO_NS, "media": MEDIA_NS}

for _prefix, _uri in NS.items():
    ET.register_namespace("" if _prefix == "atom" else _prefix, _uri)

ETAG = f"{{{GD_NS}}}etag"
FEED = f"{{{ATOM_NS}}}feed"
FEED_REL = f"{GD_NS}#feed"
KIND_SCHEME = f"{GD_NS}#kind"

API_URL = "https://picasaweb.google.com/data/feed/api/"
SCOPE = "https://picasaweb.google.com/data/"

GDATA_VERSION = {"GData-Version": "2"}


def qname(tag: str) -> str:
    """Expand ``prefix:local`` into ElementTree's ``{uri}local`` form."""
    prefix, _, local = tag.rpartition(":")
    return f"{{{NS[prefix or 'atom']}}}{local}"


def to_string(element: ET.Element) -> str:
    return ET.tostring(element, encoding="unicode")


def new_entry(kind: str, title: str = "", summary: str = "") -> ET.Element:
    """Build a bare Atom entry of the given gphoto kind (album, photo)."""
    entry = ET.Element(qname("entry"))
    ET.SubElement(entry, qname("title"), {"type": "text"}).text = title
    ET.SubElement(entry, qname("summary"), {"type": "text"}).text = summary
    ET.SubElement(
        entry,
        qname("category"),
        {"scheme": KIND_SCHEME, "term": f"{GPHOTO_NS}#{kind}"},
    )
    return entry
