"""Animator: writes a sequence of views as numbered PNG frames."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from teatro.image_renderer import ImageRenderer
from teatro.logs import get_logger
from teatro.view_core import Renderable

logger = get_logger(__name__)

DEFAULT_FRAME_DIRECTORY = "Animations"


class Animator:
    """
    Render each view of a sequence to ``<directory>/<base_name>_<index>.png``.

    Frames are written one after another on the calling thread. A frame that
    fails to write is skipped silently, like any ImageRenderer output.
    """

    def __init__(
        self,
        image_renderer: ImageRenderer | None = None,
        directory: str | Path = DEFAULT_FRAME_DIRECTORY,
    ) -> None:
        self.image_renderer = image_renderer or ImageRenderer()
        self.directory = Path(directory)

    def frame_path(self, base_name: str, index: int) -> Path:
        """Return the output path for frame *index*."""
        return self.directory / f"{base_name}_{index}.png"

    def render_frames(self, frames: Sequence[Renderable], base_name: str = "frame") -> list[Path]:
        """
        Write one image per frame, indexed from 0.

        Returns:
            The paths targeted for each frame, in order.
        """
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError:
            pass

        written: list[Path] = []
        for index, frame in enumerate(frames):
            written.append(self.image_renderer.render_to_png(frame, self.frame_path(base_name, index)))
        logger.debug("rendered frames", count=len(written), directory=str(self.directory))
        return written
