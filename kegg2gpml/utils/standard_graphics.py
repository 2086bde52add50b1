"""
Standard Graphics Styles for PathVisio/WikiPathways

This module provides the graphics used for gene and compound DataNodes
in converted KEGG pathways.
"""

from kegg2gpml.data_structure.wiki_data_structure import (
    Graphics, HAlign, VAlign, BorderStyle, ShapeType
)


# Standard DataNode dimensions
STANDARD_WIDTH = 80.0
STANDARD_HEIGHT = 20.0

# Standard font settings
STANDARD_FONT_SIZE = 10.0
STANDARD_FONT_NAME = "Arial"

# Standard colors (hex format without #)
COLOR_BLACK = "000000"
COLOR_WHITE = "FFFFFF"
COLOR_METABOLITE_BLUE = "0000FF"


def create_standard_datanode_graphics(
    center_x: float,
    center_y: float,
    width: float = STANDARD_WIDTH,
    height: float = STANDARD_HEIGHT,
    color: str = None
) -> Graphics:
    """
    Create standard PathVisio-style DataNode graphics.

    Args:
        center_x: X coordinate of center
        center_y: Y coordinate of center
        width: Width of the node (default: 80.0)
        height: Height of the node (default: 20.0)
        color: Optional text and border color (hex without #)

    Returns:
        Graphics object with standard settings
    """
    return Graphics(
        centerX=center_x,
        centerY=center_y,
        width=width,
        height=height,
        textColor=color if color else COLOR_BLACK,
        fontName=STANDARD_FONT_NAME,
        fontWeight=False,
        fontStyle=False,
        fontSize=STANDARD_FONT_SIZE,
        hAlign=HAlign.CENTER,
        vAlign=VAlign.MIDDLE,
        borderColor=color if color else COLOR_BLACK,
        borderStyle=BorderStyle.SOLID,
        borderWidth=1.0,
        fillColor=COLOR_WHITE,
        shapeType=ShapeType.RECTANGLE
    )


def create_gene_graphics(center_x: float, center_y: float) -> Graphics:
    """
    Create standard graphics for gene/GeneProduct nodes.
    """
    return create_standard_datanode_graphics(center_x, center_y)


def create_metabolite_graphics(center_x: float, center_y: float) -> Graphics:
    """
    Create standard graphics for metabolite/compound nodes (blue text and border, white fill).
    """
    return create_standard_datanode_graphics(center_x, center_y, color=COLOR_METABOLITE_BLUE)


def create_board_graphics(board_width: float, board_height: float) -> Graphics:
    return Graphics(boardWidth=board_width, boardHeight=board_height)
