"""
Shared fixtures: Figma node builders and an in-memory FigmaClient stand-in.
No network access or real token is needed.
"""
import threading

import pytest

from figma_svg_extract.components import DocumentNode
from figma_svg_extract.config import ExtractConfig
from figma_svg_extract.errors import RemoteFetchError

ICON_SVG = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<svg width="24" height="24" viewBox="0 0 24 24" fill="none" xmlns="http://www.w3.org/2000/svg">\n'
    '  <!-- exported -->\n'
    '  <path fill-rule="evenodd" d="M0 0h24v24H0z" fill="#FF0000" stroke="#000" stroke-width="2"/>\n'
    '</svg>\n'
)


def node(node_id, name, node_type="FRAME", children=None):
    return {"id": node_id, "name": name, "type": node_type, "children": children or []}


def tree(*pages):
    return DocumentNode.from_dict(node("0:0", "Document", "DOCUMENT", list(pages)))


class FakeClient:
    """Serves a fixed tree, URL map and SVG bodies"""

    def __init__(self, document, urls=None, sources=None, delays=None):
        self.document = document
        self.urls = urls or {}
        self.sources = sources or {}
        self.delays = delays or {}
        self.calls = []
        self._lock = threading.Lock()

    def fetch_tree(self, file_key, page_id):
        self._record(("tree", file_key, page_id))
        if isinstance(self.document, Exception):
            raise self.document
        return self.document

    def fetch_image_urls(self, ids, file_key):
        self._record(("images", tuple(ids), file_key))
        return dict(self.urls)

    def fetch_raw_source(self, url):
        self._record(("source", url))
        event = self.delays.get(url)
        if event is not None:
            event.wait(timeout=5)
        source = self.sources.get(url, ICON_SVG)
        if isinstance(source, Exception):
            raise source
        return source

    def _record(self, call):
        with self._lock:
            self.calls.append(call)


@pytest.fixture
def make_config():
    def _make(**kwargs):
        values = {"token": "token", "file": "FILE", "page": "1:0"}
        values.update(kwargs)
        return ExtractConfig(**values)
    return _make


@pytest.fixture
def forbidden():
    return RemoteFetchError("Unexpected response: Forbidden.", status_code=403, reason="Forbidden")
