"""Teatro: declarative text views rendered to HTML, SVG, PNG and previews."""

from teatro.fountain import FountainElement, FountainElementKind, FountainSceneView, parse_fountain
from teatro.lily_score import LilyScore
from teatro.view_core import (
    Alignment,
    HStack,
    Renderable,
    Stage,
    TeatroIcon,
    Text,
    TextStyle,
    VStack,
)

__version__ = "0.1.0"

__all__ = [
    "Alignment",
    "FountainElement",
    "FountainElementKind",
    "FountainSceneView",
    "HStack",
    "LilyScore",
    "Renderable",
    "Stage",
    "TeatroIcon",
    "Text",
    "TextStyle",
    "VStack",
    "parse_fountain",
    "__version__",
]
