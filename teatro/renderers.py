"""Renderer implementations for text-based output targets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Final

from teatro.view_core import Renderable

CODEX_PREVIEW_TARGET: Final[str] = "codex-preview"


def _escape_html(text: str) -> str:
    """Escape the three characters that are unsafe in HTML text content."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


class ViewRenderer(ABC):
    """Abstract view renderer."""

    @property
    @abstractmethod
    def default_extension(self) -> str:
        """Default filename extension for this renderer."""

    @abstractmethod
    def render(self, view: Renderable) -> str:
        """Render a view tree into a file content string."""


class CodexPreviewer(ViewRenderer):
    """Render a view as its plain text under a comment header naming its type."""

    @property
    def default_extension(self) -> str:
        return ".txt"

    def render(self, view: Renderable) -> str:
        return (
            "/// Codex Preview:\n"
            "///\n"
            "/// Source:\n"
            f"/// {type(view).__name__}\n"
            "///\n"
            "/// Output:\n"
            f"{view.render()}"
        )


class HTMLRenderer(ViewRenderer):
    """
    Wrap the rendered text in a minimal HTML document.

    The view text goes into a ``<pre>`` block as-is, so markup produced by
    the view is passed through to the browser.
    """

    def __init__(self, title: str = "") -> None:
        self.title = title

    @property
    def default_extension(self) -> str:
        return ".html"

    def render(self, view: Renderable) -> str:
        head = f"<head><title>{_escape_html(self.title)}</title></head>" if self.title else ""
        return f"<html>{head}<body><pre>\n{view.render()}\n</pre></body></html>"


class SVGRenderer(ViewRenderer):
    """Place each rendered line in its own ``<text>`` element."""

    WIDTH: Final[int] = 600
    LINE_HEIGHT: Final[int] = 20  # also the top offset of the first line
    MARGIN_LEFT: Final[int] = 10
    FONT_SIZE: Final[int] = 14

    @property
    def default_extension(self) -> str:
        return ".svg"

    def render(self, view: Renderable) -> str:
        lines = view.render().split("\n")
        texts = "\n".join(
            f'<text x="{self.MARGIN_LEFT}" y="{self.LINE_HEIGHT + idx * self.LINE_HEIGHT}" '
            f'font-family="monospace" font-size="{self.FONT_SIZE}">{line}</text>'
            for idx, line in enumerate(lines)
        )
        height = self.LINE_HEIGHT + len(lines) * self.LINE_HEIGHT
        return (
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.WIDTH}" height="{height}">\n'
            f"{texts}\n"
            "</svg>"
        )


SUPPORTED_TARGETS: Final[dict[str, type[ViewRenderer]]] = {
    CODEX_PREVIEW_TARGET: CodexPreviewer,
    "html": HTMLRenderer,
    "svg": SVGRenderer,
}


def build_renderer(target: str) -> ViewRenderer:
    """
    Return a renderer for a text output target.

    Raises:
        ValueError: If *target* is not one of SUPPORTED_TARGETS.
    """
    normalized = target.strip().lower()
    if normalized not in SUPPORTED_TARGETS:
        supported = ", ".join(sorted(SUPPORTED_TARGETS))
        raise ValueError(f"Unsupported output target '{target}'. Use one of: {supported}.")
    return SUPPORTED_TARGETS[normalized]()
