"""
Shared fixtures: an in-memory stand-in for the KEGG REST server.
"""

import pytest

from kegg2gpml.parsing_functions.parsing_utils import FeedReader
from kegg2gpml.utils.organism_utils import clear_species_cache

BASE_URL = "http://kegg.test"

INFO_HSA = (
    "T01001           Homo sapiens (human) KEGG Genes Database\n"
    "hsa              Release 110.0+/05-24, May 24\n"
)

LIST_PATHWAY_HSA = (
    "path:hsa00010\tGlycolysis / Gluconeogenesis - Homo sapiens (human)\n"
    "path:hsa00020\tCitrate cycle (TCA cycle) - Homo sapiens (human)\n"
    "path:hsa04110\tCell cycle - Homo sapiens (human)\n"
)

LINK_HSA_PATHWAY = (
    "path:hsa00010\thsa:1234\n"
    "path:hsa00010\thsa:5678\n"
    "path:hsa00010\thsa:1234\n"
    "path:hsa00020\thsa:9\n"
    "path:hsa99999\thsa:42\n"
)

LINK_PATHWAY_COMPOUND = (
    "cpd:C00031\tpath:map00010\n"
    "cpd:C00022\tpath:map00010\n"
    "cpd:C00031\tpath:map00010\n"
    "cpd:C00024\tpath:map00020\n"
    "cpd:C00099\tpath:map01100\n"
)


class FakeResponse:
    def __init__(self, status_code=200, body=b"", content_type="text/plain", error=None):
        self.status_code = status_code
        self.body = body
        self.headers = {"content-type": content_type}
        self.encoding = None
        if "charset=" in content_type:
            self.encoding = content_type.split("charset=", 1)[1].strip()
        self.error = error
        self.closed = False

    def iter_lines(self):
        for line in self.body.splitlines():
            yield line
        if self.error is not None:
            raise self.error

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class FakeSession:
    """Serves canned feeds by URL and records every response handed out."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.requests = []
        self.responses = []

    def add(self, path, body, **kwargs):
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.routes[f"{BASE_URL}/{path}"] = (body, kwargs)

    def get(self, url, stream=False, timeout=None):
        self.requests.append({"url": url, "stream": stream, "timeout": timeout})
        if url not in self.routes:
            response = FakeResponse(status_code=404)
        else:
            body, kwargs = self.routes[url]
            if isinstance(body, Exception):
                raise body
            response = FakeResponse(body=body, **kwargs)
        self.responses.append(response)
        return response


@pytest.fixture(autouse=True)
def _clear_species_cache():
    clear_species_cache()
    yield
    clear_species_cache()


@pytest.fixture()
def kegg_session():
    """A fake KEGG server with a small human data set."""
    session = FakeSession()
    session.add("info/hsa", INFO_HSA)
    session.add("list/pathway/hsa", LIST_PATHWAY_HSA)
    session.add("link/hsa/pathway", LINK_HSA_PATHWAY)
    session.add("link/pathway/compound", LINK_PATHWAY_COMPOUND)
    return session


@pytest.fixture()
def kegg_reader(kegg_session):
    return FeedReader(timeout=5, session=kegg_session)
