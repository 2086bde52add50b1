import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

# --- GPML2021 Enums ---
class DataNodeType(Enum):
    UNDEFINED = "Undefined"
    GENE_PRODUCT = "GeneProduct"
    DNA = "DNA"
    RNA = "RNA"
    PROTEIN = "Protein"
    METABOLITE = "Metabolite"
    PATHWAY = "Pathway"

class HAlign(Enum):
    LEFT = "Left"
    CENTER = "Center"
    RIGHT = "Right"

class VAlign(Enum):
    TOP = "Top"
    MIDDLE = "Middle"
    BOTTOM = "Bottom"

class BorderStyle(Enum):
    SOLID = "Solid"
    DASHED = "Dashed"
    DOUBLE = "Double"

class ShapeType(Enum):
    RECTANGLE = "Rectangle"
    ROUNDED_RECTANGLE = "RoundedRectangle"
    OVAL = "Oval"

# --- Core GPML2021 Data Structures ---

@dataclass(frozen=True)
class Xref:
    identifier: str
    dataSource: str

@dataclass
class Author:
    name: str
    username: Optional[str] = None
    order: Optional[int] = None
    xref: Optional[Xref] = None

@dataclass(frozen=True)
class Comment:
    value: str
    source: Optional[str] = None

@dataclass(frozen=True)
class Property:
    key: str
    value: str

# --- Graphics Mixin ---
@dataclass(frozen=True)
class Graphics:
    boardWidth: Optional[float] = None
    boardHeight: Optional[float] = None

    centerX: Optional[float] = None
    centerY: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None

    textColor: Optional[str] = None
    fontName: Optional[str] = None
    fontWeight: Optional[bool] = None
    fontStyle: Optional[bool] = None
    fontSize: Optional[float] = None
    hAlign: Optional[HAlign] = None
    vAlign: Optional[VAlign] = None

    borderColor: Optional[str] = None
    borderStyle: Optional[BorderStyle] = None
    borderWidth: Optional[float] = None
    fillColor: Optional[str] = None
    shapeType: Optional[ShapeType] = None
    zOrder: Optional[int] = None

# --- Pathway Elements ---

@dataclass(frozen=True)
class DataNode:
    textLabel: str
    elementId: str = field(default_factory=lambda: str(uuid.uuid4()))
    type: DataNodeType = DataNodeType.UNDEFINED
    xref: Optional[Xref] = None
    graphics: Graphics = field(default_factory=Graphics)
    comments: List[Comment] = field(default_factory=list)
    properties: List[Property] = field(default_factory=list)

    def __post_init__(self):
        g = self.graphics
        if g.centerX is None or g.centerY is None or g.width is None or g.height is None:
            raise ValueError("DataNode graphics must have 'centerX', 'centerY', 'width', and 'height'.")


@dataclass
class Pathway:
    title: str
    elementId: str = field(default_factory=lambda: str(uuid.uuid4()))
    organism: Optional[str] = None
    source: Optional[str] = None
    version: Optional[str] = None
    license: Optional[str] = None
    xref: Optional[Xref] = None
    description: Optional[str] = None
    authors: List[Author] = field(default_factory=list)
    graphics: Graphics = field(default_factory=Graphics)
    dataNodes: List[DataNode] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)
    properties: List[Property] = field(default_factory=list)

    def __post_init__(self):
        if self.graphics.boardWidth is None or self.graphics.boardHeight is None:
            raise ValueError("Pathway graphics must have 'boardWidth' and 'boardHeight'.")
