from kegg2gpml.data_structure.wiki_data_structure import Xref, DataNode, DataNodeType
from kegg2gpml.utils import standard_graphics
from kegg2gpml.utils import settings


def get_primary_gene_xref(gene_id):
    """
    Get the external reference for a KEGG gene.

    KEGG gene ids of the form '<org>:<id>' carry the NCBI Gene (Entrez) id
    for most organisms once the organism prefix is stripped.

    Args:
        gene_id: Gene identifier without organism prefix, e.g. '1234'

    Returns:
        Xref: Entrez Gene reference
    """
    return Xref(identifier=gene_id, dataSource=settings.GENE_DATA_SOURCE)


def create_gene_datanode(gene_id, center_x, center_y, id_manager):
    """
    Create a GeneProduct DataNode for one gene.

    Args:
        gene_id: Gene identifier, used for label and xref
        center_x: X coordinate of center
        center_y: Y coordinate of center
        id_manager: IDManager of the pathway being built

    Returns:
        DataNode: GeneProduct node
    """
    return DataNode(
        textLabel=gene_id,
        elementId=id_manager.register_id(gene_id, namespace='gene'),
        type=DataNodeType.GENE_PRODUCT,
        xref=get_primary_gene_xref(gene_id),
        graphics=standard_graphics.create_gene_graphics(center_x, center_y)
    )


def create_gene_datanodes(gene_positions, id_manager):
    """
    Create gene DataNodes from calculated positions.

    Args:
        gene_positions: [(gene_id, x, y), ...]
        id_manager: IDManager of the pathway being built

    Returns:
        list: DataNodes in position order
    """
    return [create_gene_datanode(gene_id, x, y, id_manager) for gene_id, x, y in gene_positions]
