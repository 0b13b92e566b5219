"""Unit tests for ImageRenderer and the Animator built on it."""

from pathlib import Path
from typing import Sequence

import pytest

from teatro.animator import Animator
from teatro.image_renderer import ImageRenderer, PillowRasterizer, Rasterizer, TextPlacement
from teatro.view_core import Stage, Text, VStack


class RecordingRasterizer(Rasterizer):
    """Captures rasterize() calls and writes a marker file."""

    def __init__(self) -> None:
        self.calls: list[tuple[list[TextPlacement], tuple[int, int], Path]] = []

    def rasterize(
        self,
        placements: Sequence[TextPlacement],
        size: tuple[int, int],
        path: Path,
    ) -> None:
        self.calls.append((list(placements), size, path))
        path.write_bytes(b"png")


class FailingRasterizer(Rasterizer):
    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def rasterize(
        self,
        placements: Sequence[TextPlacement],
        size: tuple[int, int],
        path: Path,
    ) -> None:
        raise self.exc


def test_layout_spaces_lines_from_y30() -> None:
    placements = ImageRenderer(RecordingRasterizer()).layout(Stage("S", Text("x")))
    assert placements == [
        TextPlacement(text="[Stage: S]", x=10, y=30),
        TextPlacement(text="x", x=10, y=50),
    ]


def test_render_to_png_hands_lines_to_rasterizer(tmp_path: Path) -> None:
    rasterizer = RecordingRasterizer()
    out = tmp_path / "view.png"

    written = ImageRenderer(rasterizer).render_to_png(VStack(Text("a"), Text("b")), out)

    assert written == out
    assert out.read_bytes() == b"png"
    placements, size, path = rasterizer.calls[0]
    assert size == (800, 600)
    assert path == out
    assert [p.text for p in placements] == ["a", "b"]


def test_fallback_writes_raw_text(tmp_path: Path) -> None:
    out = tmp_path / "view.png"
    view = Stage("S", Text("x"))

    written = ImageRenderer(fallback_only=True).render_to_png(view, out)

    assert written == tmp_path / "view.png.txt"
    assert written.read_text(encoding="utf-8") == view.render()
    assert not out.exists()


def test_missing_backend_falls_back_to_text(tmp_path: Path) -> None:
    out = tmp_path / "view.png"
    renderer = ImageRenderer(FailingRasterizer(ImportError("No module named 'PIL'")))

    written = renderer.render_to_png(Text("x"), out)

    assert written.name == "view.png.txt"
    assert written.read_text(encoding="utf-8") == "x"


def test_write_failure_is_swallowed(tmp_path: Path) -> None:
    renderer = ImageRenderer(FailingRasterizer(OSError("disk full")))
    assert renderer.render_to_png(Text("x"), tmp_path / "view.png") == tmp_path / "view.png"


def test_fallback_write_failure_is_swallowed(tmp_path: Path) -> None:
    missing_dir = tmp_path / "missing" / "view.png"
    written = ImageRenderer(fallback_only=True).render_to_png(Text("x"), missing_dir)
    assert not written.exists()


def test_pillow_rasterizer_writes_png(tmp_path: Path) -> None:
    pytest.importorskip("PIL")
    from PIL import Image

    out = tmp_path / "view.png"
    ImageRenderer(PillowRasterizer()).render_to_png(Stage("Demo", Text("Hello")), out)

    with Image.open(out) as image:
        assert image.format == "PNG"
        assert image.size == (800, 600)
        assert image.getpixel((799, 599)) == (255, 255, 255)


# ---------------------------------------------------------------------------
# Animator
# ---------------------------------------------------------------------------

def test_animator_writes_indexed_frames(tmp_path: Path) -> None:
    rasterizer = RecordingRasterizer()
    animator = Animator(ImageRenderer(rasterizer), directory=tmp_path / "frames")

    written = animator.render_frames([Text("a"), Text("b"), Text("c")], base_name="scene")

    assert [p.name for p in written] == ["scene_0.png", "scene_1.png", "scene_2.png"]
    assert all(p.exists() for p in written)
    assert [call[0][0].text for call in rasterizer.calls] == ["a", "b", "c"]


def test_animator_default_base_name(tmp_path: Path) -> None:
    animator = Animator(ImageRenderer(fallback_only=True), directory=tmp_path)
    written = animator.render_frames([Text("a")])
    assert written == [tmp_path / "frame_0.png.txt"]


def test_animator_with_no_frames(tmp_path: Path) -> None:
    animator = Animator(ImageRenderer(RecordingRasterizer()), directory=tmp_path / "empty")
    assert animator.render_frames([]) == []


def test_unencodable_fallback_text_is_swallowed(tmp_path: Path) -> None:
    renderer = ImageRenderer(fallback_only=True)
    written = renderer.render_to_png(Text("x \ud83c"), tmp_path / "view.png")
    assert written == tmp_path / "view.png.txt"


def test_invalid_path_is_swallowed(tmp_path: Path) -> None:
    renderer = ImageRenderer(FailingRasterizer(ValueError("embedded null byte")))
    target = tmp_path / "v\x00.png"
    assert renderer.render_to_png(Text("x"), target) == target


def test_pillow_rejects_nul_path_without_raising(tmp_path: Path) -> None:
    pytest.importorskip("PIL")
    target = str(tmp_path / "v\x00.png")
    assert ImageRenderer(PillowRasterizer()).render_to_png(Text("x"), target) == Path(target)


def test_animator_survives_unwritable_frames(tmp_path: Path) -> None:
    animator = Animator(ImageRenderer(fallback_only=True), directory=tmp_path)
    written = animator.render_frames([Text("ok"), Text("bad \ud83c")])
    assert [p.name for p in written] == ["frame_0.png.txt", "frame_1.png.txt"]
    assert written[0].read_text(encoding="utf-8") == "ok"
