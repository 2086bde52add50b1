"""
Build a GPML Pathway for one KEGG pathway from the relational model.
"""
import re

from kegg2gpml.data_structure.wiki_data_structure import (
    Pathway, Xref, Author, Comment, Property
)
from kegg2gpml.build_functions.build_gene_data_nodes import create_gene_datanodes
from kegg2gpml.build_functions.build_compounds_data_nodes import create_compound_datanodes
from kegg2gpml.object2gpml.gpml_writer import GPMLWriter
from kegg2gpml.utils.id_manager import IDManager
from kegg2gpml.utils import layout
from kegg2gpml.utils import settings
from kegg2gpml.utils.standard_graphics import create_board_graphics


GENERATION_COMMENT = (
    "This GPML file was automatically generated from KEGG REST data. "
    "It lists the genes and compounds of the pathway; the KEGG map layout is not preserved."
)


def _natural_key(identifier):
    """Sort key that orders '9' before '10' and 'C00031' before 'C00100'."""
    return [int(part) if part.isdigit() else part for part in re.split(r'(\d+)', identifier)]


def collect_pathway_components(pathway_id, gene_links, compound_links):
    """
    Collect the ordered gene and compound ids of a pathway.

    A pathway missing from a membership map simply has no members of that kind.

    Returns:
        dict: {'genes': [ids], 'compounds': [ids]}
    """
    return {
        'genes': sorted(gene_links.get(pathway_id, ()), key=_natural_key),
        'compounds': sorted(compound_links.get(pathway_id, ()), key=_natural_key),
    }


def build_pathway_document(record, gene_links, compound_links, species_name):
    """
    Build the GPML Pathway for one cataloged pathway.

    Pure function of its inputs: the membership maps are only read.

    Args:
        record (PathwayRecord): Pathway to build
        gene_links (dict): pathway id -> set of gene ids
        compound_links (dict): pathway id -> set of compound ids
        species_name (str): Organism display name, e.g. 'Homo sapiens'

    Returns:
        Pathway: Gene nodes (x=65) followed by compound nodes (x=165)
    """
    pathway_id = record.pathway_id
    id_manager = IDManager()

    pathway_components = collect_pathway_components(pathway_id, gene_links, compound_links)
    positions = layout.calculate_component_positions(pathway_components)

    data_nodes = create_gene_datanodes(positions['genes'], id_manager)
    data_nodes += create_compound_datanodes(positions['compounds'], id_manager)

    board_width, board_height = layout.calculate_board_size(positions)

    return Pathway(
        elementId=id_manager.register_id(pathway_id, namespace='pathway'),
        title=record.name,
        organism=species_name,
        source=f"{settings.SOURCE_TAG}: {pathway_id}",
        xref=Xref(identifier=pathway_id, dataSource=settings.PATHWAY_DATA_SOURCE),
        authors=[Author(name="KEGG")],
        graphics=create_board_graphics(board_width, board_height),
        dataNodes=data_nodes,
        comments=[Comment(value=GENERATION_COMMENT, source="Automated Conversion")],
        properties=[Property(key="UniqueID", value=pathway_id)]
    )


def export_pathway_to_gpml(pathway, output_file):
    """
    Export pathway to a GPML file.
    """
    writer = GPMLWriter()
    gpml_content = writer.write_pathway(pathway)
    with open(output_file, 'w', encoding='utf-8') as f:
        f.write(gpml_content)
