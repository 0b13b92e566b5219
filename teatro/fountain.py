"""Fountain screenplay support: a line classifier and a view over its output."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from teatro.view_core import Renderable

SCENE_HEADING_PREFIXES: tuple[str, ...] = ("INT", "EXT")
TRANSITION_SUFFIX = "TO:"
DIALOGUE_PREFIXES: tuple[str, ...] = ("  ", "\t")


class FountainElementKind(Enum):
    """The screenplay element types the classifier can emit."""

    SCENE_HEADING = "scene_heading"
    CHARACTER_CUE = "character_cue"
    DIALOGUE = "dialogue"
    ACTION = "action"
    TRANSITION = "transition"


@dataclass(frozen=True)
class FountainElement(Renderable):
    """
    One classified screenplay line.

    Attributes:
        kind: Element type assigned by the classifier.
        text: The line text; trimmed for dialogue, verbatim otherwise.
    """

    kind: FountainElementKind
    text: str

    def render(self) -> str:
        if self.kind is FountainElementKind.SCENE_HEADING:
            return f"# {self.text}"
        if self.kind is FountainElementKind.CHARACTER_CUE:
            return f"\n{self.text.upper()}"
        if self.kind is FountainElementKind.DIALOGUE:
            return f"\t{self.text}"
        if self.kind is FountainElementKind.TRANSITION:
            return f"{self.text} >>"
        return self.text


def classify_line(line: str) -> FountainElement | None:
    """
    Classify a single line of Fountain text.

    Lines are classified on their own text alone; the first matching rule
    wins. Returns None for an empty line.
    """
    if line.startswith(SCENE_HEADING_PREFIXES):
        return FountainElement(FountainElementKind.SCENE_HEADING, line)
    if line.strip() and line.upper() == line:
        return FountainElement(FountainElementKind.CHARACTER_CUE, line)
    if line.endswith(TRANSITION_SUFFIX):
        return FountainElement(FountainElementKind.TRANSITION, line)
    if line.startswith(DIALOGUE_PREFIXES):
        return FountainElement(FountainElementKind.DIALOGUE, line.strip())
    if line:
        return FountainElement(FountainElementKind.ACTION, line)
    return None


def parse_fountain(text: str) -> list[FountainElement]:
    """
    Split raw screenplay text on newlines and classify every line.

    Args:
        text: Raw Fountain source.

    Returns:
        The elements in source order. Empty lines produce no element.
    """
    elements: list[FountainElement] = []
    for line in text.split("\n"):
        element = classify_line(line)
        if element is not None:
            elements.append(element)
    return elements


@dataclass(frozen=True)
class FountainSceneView(Renderable):
    """A parsed screenplay that composes like any other view node."""

    elements: tuple[FountainElement, ...]

    @classmethod
    def from_text(cls, fountain_text: str) -> FountainSceneView:
        """Build a scene view by classifying *fountain_text*."""
        return cls(tuple(parse_fountain(fountain_text)))

    def render(self) -> str:
        return "\n".join(element.render() for element in self.elements)
