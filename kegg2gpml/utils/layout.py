"""
Layout utilities for positioning pathway elements.

Genes and compounds are stacked in two fixed columns. Columns grow downward
without a limit; large pathways produce tall boards.
"""
from kegg2gpml.utils.standard_graphics import STANDARD_WIDTH, STANDARD_HEIGHT

# Column positions (node centers)
GENE_COLUMN_X = 65
COMPOUND_COLUMN_X = 165
COLUMN_START_Y = 70
ROW_SPACING = 30

# Board
BOARD_MARGIN = 50
MIN_BOARD_WIDTH = 250
MIN_BOARD_HEIGHT = 150


def calculate_column_positions(element_ids, column_x, start_y=COLUMN_START_Y, spacing=ROW_SPACING):
    """
    Place elements top to bottom in one column.

    Args:
        element_ids: Ordered element identifiers
        column_x: Center x of the column
        start_y: Center y of the first element
        spacing: Vertical distance between consecutive centers

    Returns:
        list: [(element_id, x, y), ...] in input order
    """
    return [(element_id, column_x, start_y + i * spacing) for i, element_id in enumerate(element_ids)]


def calculate_component_positions(pathway_components):
    """
    Calculate positions for the gene and compound columns.

    Args:
        pathway_components: {'genes': [ids], 'compounds': [ids]}, already ordered

    Returns:
        dict: {'genes': [(id, x, y)], 'compounds': [(id, x, y)]}
    """
    return {
        'genes': calculate_column_positions(pathway_components['genes'], GENE_COLUMN_X),
        'compounds': calculate_column_positions(pathway_components['compounds'], COMPOUND_COLUMN_X),
    }


def calculate_board_size(positions):
    """
    Size the board to fit every positioned node plus a margin.

    Returns:
        tuple: (board_width, board_height)
    """
    all_positions = positions['genes'] + positions['compounds']
    if not all_positions:
        return float(MIN_BOARD_WIDTH), float(MIN_BOARD_HEIGHT)

    max_x = max(x for _, x, _ in all_positions) + STANDARD_WIDTH / 2
    max_y = max(y for _, _, y in all_positions) + STANDARD_HEIGHT / 2
    return (float(max(MIN_BOARD_WIDTH, max_x + BOARD_MARGIN)),
            float(max(MIN_BOARD_HEIGHT, max_y + BOARD_MARGIN)))
