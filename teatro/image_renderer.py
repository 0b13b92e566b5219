"""ImageRenderer: rasterizes a view's text lines to a PNG file."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, Sequence

from teatro.logs import get_logger
from teatro.view_core import Renderable

logger = get_logger(__name__)

DEFAULT_OUTPUT_PATH: Final[str] = "output.png"
FALLBACK_SUFFIX: Final[str] = ".txt"


@dataclass(frozen=True)
class TextPlacement:
    """One line of text anchored at a pixel position (baseline origin)."""

    text: str
    x: int
    y: int


class Rasterizer(ABC):
    """Abstract 2D backend that draws placed text lines into an image file."""

    @abstractmethod
    def rasterize(
        self,
        placements: Sequence[TextPlacement],
        size: tuple[int, int],
        path: Path,
    ) -> None:
        """
        Draw *placements* on a blank canvas of *size* and save it to *path*.

        Raises:
            ImportError: If the backend library is not installed.
            OSError: If the image cannot be written.
            ValueError: If the path or text cannot be encoded.
        """


class PillowRasterizer(Rasterizer):
    """Black monospace text on a white background, drawn with Pillow."""

    # Tried in order; Pillow's bundled default font is the last resort.
    FONT_CANDIDATES: Final[tuple[str, ...]] = (
        "DejaVuSansMono.ttf",
        "LiberationMono-Regular.ttf",
        "Menlo.ttc",
        "consola.ttf",
    )

    def __init__(self, font_size: int = 16) -> None:
        self.font_size = font_size

    def _load_font(self) -> Any:
        from PIL import ImageFont

        for candidate in self.FONT_CANDIDATES:
            try:
                return ImageFont.truetype(candidate, self.font_size)
            except OSError:
                continue
        return ImageFont.load_default(size=self.font_size)

    def rasterize(
        self,
        placements: Sequence[TextPlacement],
        size: tuple[int, int],
        path: Path,
    ) -> None:
        from PIL import Image, ImageDraw

        image = Image.new("RGB", size, (255, 255, 255))
        draw = ImageDraw.Draw(image)
        font = self._load_font()
        for placement in placements:
            # anchor "ls": the y coordinate is the text baseline
            draw.text(
                (placement.x, placement.y),
                placement.text,
                fill=(0, 0, 0),
                font=font,
                anchor="ls",
            )
        image.save(path, format="PNG")


class ImageRenderer:
    """
    Render a view to a PNG through a pluggable rasterizer.

    Lines start at y=30 and advance 20px each on an 800x600 canvas. Without
    a usable backend, the raw view text is written to ``<path>.txt`` instead.
    """

    CANVAS_SIZE: Final[tuple[int, int]] = (800, 600)
    MARGIN_LEFT: Final[int] = 10
    FIRST_BASELINE: Final[int] = 30
    LINE_HEIGHT: Final[int] = 20

    def __init__(self, rasterizer: Rasterizer | None = None, *, fallback_only: bool = False) -> None:
        """
        Args:
            rasterizer:    Drawing backend; PillowRasterizer when omitted.
            fallback_only: Skip rasterization and always write the text file.
        """
        self.rasterizer = None if fallback_only else (rasterizer or PillowRasterizer())

    def layout(self, view: Renderable) -> list[TextPlacement]:
        """Position each rendered line of *view* on the canvas."""
        lines = view.render().split("\n")
        return [
            TextPlacement(
                text=line,
                x=self.MARGIN_LEFT,
                y=self.FIRST_BASELINE + idx * self.LINE_HEIGHT,
            )
            for idx, line in enumerate(lines)
        ]

    def _write_fallback(self, view: Renderable, path: Path) -> Path:
        fallback_path = path.with_name(path.name + FALLBACK_SUFFIX)
        try:
            fallback_path.write_text(view.render(), encoding="utf-8")
        except (OSError, ValueError):
            pass
        return fallback_path

    def render_to_png(self, view: Renderable, path: str | Path = DEFAULT_OUTPUT_PATH) -> Path:
        """
        Write *view* as a PNG at *path* without raising on I/O failure.

        Returns:
            The file that was targeted: *path*, or ``<path>.txt`` in fallback mode.
        """
        target = Path(path)
        if self.rasterizer is None:
            return self._write_fallback(view, target)

        try:
            self.rasterizer.rasterize(self.layout(view), self.CANVAS_SIZE, target)
        except ImportError:
            return self._write_fallback(view, target)
        except (OSError, ValueError):
            return target

        logger.debug("wrote png", path=str(target))
        return target
