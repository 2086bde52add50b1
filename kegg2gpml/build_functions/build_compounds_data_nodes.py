from kegg2gpml.data_structure.wiki_data_structure import Xref, DataNode, DataNodeType
from kegg2gpml.utils import standard_graphics
from kegg2gpml.utils import settings

# KEGG ligand prefixes that may appear in the compound link feed
LIGAND_DATA_SOURCES = {
    'C': settings.COMPOUND_DATA_SOURCE,
    'G': 'KEGG Glycan',
    'D': 'KEGG Drug',
}


def get_primary_compound_xref(compound_id):
    """
    Get the external reference for a KEGG compound.

    Args:
        compound_id: Ligand identifier without its database prefix, e.g. 'C00031' or 'G00001'

    Returns:
        Xref: KEGG Compound reference (KEGG Glycan / KEGG Drug for G/D entries)
    """
    data_source = LIGAND_DATA_SOURCES.get(compound_id[:1], settings.COMPOUND_DATA_SOURCE)
    return Xref(identifier=compound_id, dataSource=data_source)


def create_compound_datanode(compound_id, center_x, center_y, id_manager):
    """
    Create a Metabolite DataNode for one compound.

    Args:
        compound_id: Compound identifier, used for label and xref
        center_x: X coordinate of center
        center_y: Y coordinate of center
        id_manager: IDManager of the pathway being built

    Returns:
        DataNode: Metabolite node with the metabolite color
    """
    return DataNode(
        textLabel=compound_id,
        elementId=id_manager.register_id(compound_id, namespace='compound'),
        type=DataNodeType.METABOLITE,
        xref=get_primary_compound_xref(compound_id),
        graphics=standard_graphics.create_metabolite_graphics(center_x, center_y)
    )


def create_compound_datanodes(compound_positions, id_manager):
    return [create_compound_datanode(compound_id, x, y, id_manager) for compound_id, x, y in compound_positions]
