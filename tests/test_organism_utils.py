"""
Tests for kegg2gpml.utils.organism_utils: species display names from /info/<org>.
"""

import pytest

from kegg2gpml.parsing_functions.parsing_utils import FeedError, FeedReader
from kegg2gpml.utils.organism_utils import get_species_name, parse_species_name

from conftest import BASE_URL, FakeSession


class TestParseSpeciesName:
    @pytest.mark.parametrize("line, expected", [
        ("T01001           Homo sapiens (human) KEGG Genes Database", "Homo sapiens"),
        ("T01002           Mus musculus (house mouse) KEGG Genes Database", "Mus musculus"),
        ("T00007  Escherichia coli K-12 MG1655 KEGG Genes Database", "Escherichia coli K-12 MG1655"),
        ("T01001 Homo sapiens (human)", "Homo sapiens"),
    ])
    def test_name_fields(self, line, expected):
        assert parse_species_name(line) == expected

    def test_line_without_name(self):
        assert parse_species_name("T01001") is None
        assert parse_species_name("") is None
        assert parse_species_name("T01001   (human)") is None


class TestGetSpeciesName:
    def test_resolves_from_info_feed(self, kegg_session, kegg_reader):
        assert get_species_name("hsa", reader=kegg_reader, base_url=BASE_URL) == "Homo sapiens"
        assert kegg_session.requests[0]["url"] == f"{BASE_URL}/info/hsa"
        assert kegg_session.responses[0].closed

    def test_second_lookup_is_cached(self, kegg_session, kegg_reader):
        get_species_name("hsa", reader=kegg_reader, base_url=BASE_URL)
        get_species_name("hsa", reader=kegg_reader, base_url=BASE_URL)
        assert len(kegg_session.requests) == 1

    def test_cache_is_per_base_url(self, kegg_reader):
        mirror = FakeSession()
        mirror.routes["http://mirror.test/info/hsa"] = (
            b"T01001           Homo sapiens sapiens (human) KEGG Genes Database\n", {}
        )

        assert get_species_name("hsa", reader=kegg_reader, base_url=BASE_URL) == "Homo sapiens"
        name = get_species_name("hsa", reader=FeedReader(session=mirror), base_url="http://mirror.test")

        assert name == "Homo sapiens sapiens"
        assert len(mirror.requests) == 1

    def test_unparsable_info_raises(self):
        session = FakeSession()
        session.add("info/xyz", "T99999\n")

        with pytest.raises(FeedError, match="no organism name"):
            get_species_name("xyz", reader=FeedReader(session=session), base_url=BASE_URL)

    def test_unknown_species_raises(self):
        with pytest.raises(FeedError) as excinfo:
            get_species_name("zzz", reader=FeedReader(session=FakeSession()), base_url=BASE_URL)
        assert excinfo.value.url == f"{BASE_URL}/info/zzz"
