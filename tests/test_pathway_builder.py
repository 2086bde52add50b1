"""
Tests for building one GPML Pathway from the relational model.
"""

import dataclasses

import pytest

from kegg2gpml.build_functions.mapping_builder import MappingBuilder
from kegg2gpml.build_functions.pathway_builder_core import (
    build_pathway_document, collect_pathway_components
)
from kegg2gpml.data_structure.kegg_data_structure import PathwayRecord
from kegg2gpml.data_structure.wiki_data_structure import DataNodeType
from kegg2gpml.parsing_functions.parsing_utils import FeedReader
from kegg2gpml.utils import layout
from kegg2gpml.utils.id_manager import IDManager, sanitize_element_id

from conftest import BASE_URL, FakeSession


GLYCOLYSIS = PathwayRecord(pathway_id="hsa00010", name="Glycolysis / Gluconeogenesis")


def build(gene_links=None, compound_links=None, record=GLYCOLYSIS):
    return build_pathway_document(record, gene_links or {}, compound_links or {}, "Homo sapiens")


class TestBuildPathwayDocument:
    def test_single_gene_and_compound(self):
        pathway = build({"hsa00010": {"1234"}}, {"hsa00010": {"C00031"}})

        assert pathway.title == "Glycolysis / Gluconeogenesis"
        assert pathway.organism == "Homo sapiens"
        assert len(pathway.dataNodes) == 2

        gene, compound = pathway.dataNodes
        assert gene.type == DataNodeType.GENE_PRODUCT
        assert gene.textLabel == "1234"
        assert gene.elementId == "_1234"
        assert gene.xref.identifier == "1234"
        assert gene.xref.dataSource == "Entrez Gene"
        assert (gene.graphics.centerX, gene.graphics.centerY) == (65, 70)
        assert (gene.graphics.width, gene.graphics.height) == (80.0, 20.0)

        assert compound.type == DataNodeType.METABOLITE
        assert compound.textLabel == "C00031"
        assert compound.elementId == "C00031"
        assert compound.xref.dataSource == "KEGG Compound"
        assert (compound.graphics.centerX, compound.graphics.centerY) == (165, 70)
        assert compound.graphics.textColor == "0000FF"
        assert compound.graphics.borderColor == "0000FF"
        assert compound.graphics.fillColor == "FFFFFF"

    def test_glycan_and_drug_data_sources(self):
        session = FakeSession()
        session.add("link/pathway/compound", "gl:G00001\tpath:map00510\ndr:D00001\tpath:map00510\n")
        compound_links = MappingBuilder(
            "hsa", reader=FeedReader(session=session), base_url=BASE_URL
        ).build_compound_mapping()

        pathway = build(compound_links=compound_links,
                        record=PathwayRecord(pathway_id="hsa00510", name="N-Glycan biosynthesis"))

        nodes = [(n.textLabel, n.xref.identifier, n.xref.dataSource) for n in pathway.dataNodes]
        assert nodes == [("D00001", "D00001", "KEGG Drug"), ("G00001", "G00001", "KEGG Glycan")]

    def test_metadata(self):
        pathway = build()

        assert pathway.source == "KEGG: hsa00010"
        assert pathway.xref.identifier == "hsa00010"
        assert pathway.xref.dataSource == "KEGG Pathway"
        assert [a.name for a in pathway.authors] == ["KEGG"]
        assert pathway.comments[0].source == "Automated Conversion"
        assert [(p.key, p.value) for p in pathway.properties] == [("UniqueID", "hsa00010")]

    def test_pathway_without_members_has_no_nodes(self):
        pathway = build({"hsa00020": {"9"}}, {"hsa00020": {"C00024"}})

        assert pathway.dataNodes == []
        assert pathway.graphics.boardWidth == layout.MIN_BOARD_WIDTH
        assert pathway.graphics.boardHeight == layout.MIN_BOARD_HEIGHT

    def test_columns_are_evenly_spaced(self):
        genes = {str(n) for n in range(1, 8)}
        compounds = {"C00022", "C00031", "C00186"}
        pathway = build({"hsa00010": genes}, {"hsa00010": compounds})

        gene_nodes = [n for n in pathway.dataNodes if n.type == DataNodeType.GENE_PRODUCT]
        compound_nodes = [n for n in pathway.dataNodes if n.type == DataNodeType.METABOLITE]

        assert len(gene_nodes) == 7
        assert len(compound_nodes) == 3
        assert all(node.graphics.centerX == 65 for node in gene_nodes)
        assert all(node.graphics.centerX == 165 for node in compound_nodes)
        assert [node.graphics.centerY for node in gene_nodes] == [70 + 30 * i for i in range(7)]
        assert [node.graphics.centerY for node in compound_nodes] == [70, 100, 130]

    def test_genes_come_before_compounds(self):
        pathway = build({"hsa00010": {"1", "2"}}, {"hsa00010": {"C00031"}})
        types = [node.type for node in pathway.dataNodes]
        assert types == [DataNodeType.GENE_PRODUCT, DataNodeType.GENE_PRODUCT, DataNodeType.METABOLITE]

    def test_board_fits_longest_column(self):
        genes = {str(n) for n in range(1, 21)}
        pathway = build({"hsa00010": genes})

        last_y = 70 + 30 * 19
        assert pathway.graphics.boardHeight >= last_y + 10
        assert pathway.graphics.boardWidth >= 165 + 40

    def test_element_ids_are_unique(self):
        # gene and compound sharing an identifier must not collide
        pathway = build({"hsa00010": {"C00031", "10"}}, {"hsa00010": {"C00031"}})
        ids = [node.elementId for node in pathway.dataNodes] + [pathway.elementId]
        assert len(ids) == len(set(ids))

    def test_inputs_are_not_modified(self):
        gene_links = {"hsa00010": {"1234", "5678"}}
        compound_links = {"hsa00010": {"C00031"}}

        first = build(gene_links, compound_links)
        second = build(gene_links, compound_links)

        assert gene_links == {"hsa00010": {"1234", "5678"}}
        assert compound_links == {"hsa00010": {"C00031"}}
        assert first == second

    def test_data_nodes_are_immutable(self):
        node = build({"hsa00010": {"1234"}}).dataNodes[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.textLabel = "changed"


def test_components_use_natural_order():
    components = collect_pathway_components(
        "hsa00010",
        {"hsa00010": {"10", "9", "100"}},
        {"hsa00010": {"C00100", "C00031"}},
    )
    assert components == {"genes": ["9", "10", "100"], "compounds": ["C00031", "C00100"]}


def test_missing_pathway_has_empty_components():
    assert collect_pathway_components("hsa04110", {}, {}) == {"genes": [], "compounds": []}


class TestIDManager:
    def test_sanitize(self):
        assert sanitize_element_id("1234") == "_1234"
        assert sanitize_element_id("gl:G00001") == "gl_G00001"
        assert sanitize_element_id("C00031") == "C00031"

    def test_collisions_get_suffixes(self):
        manager = IDManager()
        assert manager.register_id("a:b") == "a_b"
        assert manager.register_id("a_b") == "a_b_1"
        assert manager.register_id("a:b") == "a_b"

    def test_namespaces_are_independent(self):
        manager = IDManager()
        assert manager.register_id("C00031", namespace="gene") == "C00031"
        assert manager.register_id("C00031", namespace="compound") == "C00031_1"
        assert manager.register_id("C00031", namespace="gene") == "C00031"
