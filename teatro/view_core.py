"""Core view nodes: the Renderable contract and the layout primitives."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

# U+25C9 FISHEYE, drawn in front of every icon symbol
ICON_MARKER = "◉"


class Renderable(ABC):
    """Anything that can describe itself as line-oriented text."""

    @abstractmethod
    def render(self) -> str:
        """Return the node's text; embedded newlines separate output lines."""


class Alignment(Enum):
    """Stack alignment. Recorded on stacks but not applied to the output."""

    LEADING = "left"
    CENTER = "center"
    TRAILING = "right"

    @classmethod
    def _missing_(cls, value: object) -> Alignment | None:
        # Also accept the member names, e.g. "leading" or "TRAILING".
        if isinstance(value, str):
            return cls.__members__.get(value.upper())
        return None


class TextStyle(Enum):
    """Inline emphasis applied to a Text node."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    PLAIN = "plain"

    def apply(self, content: str) -> str:
        """Wrap *content* in the markers for this style."""
        if self is TextStyle.BOLD:
            return f"**{content}**"
        if self is TextStyle.ITALIC:
            return f"*{content}*"
        if self is TextStyle.UNDERLINE:
            return f"_{content}_"
        return content


# ── Leaves ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Text(Renderable):
    """A single line of styled text."""

    content: str
    style: TextStyle = TextStyle.PLAIN

    def __post_init__(self) -> None:
        # Style names such as "bold" are accepted; unknown names raise ValueError.
        object.__setattr__(self, "style", TextStyle(self.style))

    def render(self) -> str:
        return self.style.apply(self.content)


@dataclass(frozen=True)
class TeatroIcon(Renderable):
    """A symbol shown behind the fixed icon marker."""

    symbol: str

    def render(self) -> str:
        return f"{ICON_MARKER} {self.symbol}"


# ── Containers ──────────────────────────────────────────────────────────────

def _init_stack(
    stack: Renderable,
    children: tuple[Renderable, ...],
    alignment: Alignment | str,
    padding: int,
) -> None:
    """Validate and store stack fields on a frozen dataclass instance."""
    if padding < 0:
        raise ValueError(f"padding must be non-negative, got {padding}.")
    object.__setattr__(stack, "children", tuple(children))
    object.__setattr__(stack, "alignment", Alignment(alignment))
    object.__setattr__(stack, "padding", padding)


@dataclass(frozen=True, init=False)
class VStack(Renderable):
    """
    Children stacked top to bottom.

    Each child's block gets ``padding`` spaces in front of it once. Lines
    inside a multi-line child are not indented again, so nested stacks do
    not accumulate indentation.
    """

    children: tuple[Renderable, ...]
    alignment: Alignment
    padding: int

    def __init__(
        self,
        *children: Renderable,
        alignment: Alignment | str = Alignment.LEADING,
        padding: int = 0,
    ) -> None:
        _init_stack(self, children, alignment, padding)

    def render(self) -> str:
        indent = " " * self.padding
        return "\n".join(indent + child.render() for child in self.children)


@dataclass(frozen=True, init=False)
class HStack(Renderable):
    """Children laid out left to right, separated by one space."""

    children: tuple[Renderable, ...]
    alignment: Alignment
    padding: int

    def __init__(
        self,
        *children: Renderable,
        alignment: Alignment | str = Alignment.LEADING,
        padding: int = 0,
    ) -> None:
        _init_stack(self, children, alignment, padding)

    def render(self) -> str:
        indent = " " * self.padding
        return indent + " ".join(child.render() for child in self.children)


@dataclass(frozen=True)
class Stage(Renderable):
    """A titled frame around exactly one content node."""

    title: str
    content: Renderable

    def render(self) -> str:
        return f"[Stage: {self.title}]\n{self.content.render()}"
