"""Teatro CLI entry point."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from teatro import __version__
from teatro.animator import DEFAULT_FRAME_DIRECTORY, Animator
from teatro.fountain import FountainSceneView
from teatro.image_renderer import DEFAULT_OUTPUT_PATH, ImageRenderer
from teatro.lily_score import LilyScore
from teatro.logs import DEFAULT_LOG_LEVEL, configure_logging, get_logger
from teatro.renderers import CODEX_PREVIEW_TARGET, build_renderer
from teatro.view_core import Alignment, Renderable, Stage, TeatroIcon, Text, TextStyle, VStack

logger = get_logger(__name__)

PNG_TARGET = "png"
TARGETS: tuple[str, ...] = ("html", "svg", PNG_TARGET, CODEX_PREVIEW_TARGET)


def _resolve_target(target: str | None) -> str:
    """Map a raw target argument onto TARGETS (case-sensitive), defaulting to the codex preview."""
    return target if target is not None and target in TARGETS else CODEX_PREVIEW_TARGET


def demo_view() -> Renderable:
    """The view rendered by ``teatro render``."""
    return Stage(
        "CLI Demo",
        VStack(
            TeatroIcon("🎭"),
            Text("CLI Renderer", style=TextStyle.BOLD),
            alignment=Alignment.CENTER,
            padding=2,
        ),
    )


def _emit(view: Renderable, target: str, output: str | None) -> None:
    """Print *view* for text targets, or write it as an image for ``png``."""
    if target == PNG_TARGET:
        written = ImageRenderer().render_to_png(view, output or DEFAULT_OUTPUT_PATH)
        click.echo(f"Wrote '{written}'.", err=True)
        return
    click.echo(build_renderer(target).render(view))


_target_argument = click.argument("target", required=False, default=None, metavar="[TARGET]")
_output_option = click.option(
    "--output",
    "-o",
    default=None,
    metavar="PATH",
    help=f"Image path for the png target. Defaults to {DEFAULT_OUTPUT_PATH}.",
)


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="teatro")
@click.option(
    "--log-level",
    envvar="TEATRO_LOG_LEVEL",
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Diagnostic log level (written to stderr).",
)
def main(log_level: str) -> None:
    """Teatro: compose text views and render them as HTML, SVG, PNG or a preview."""
    configure_logging(log_level)


# ── render subcommand ──────────────────────────────────────────────────────────

@main.command()
@_target_argument
@_output_option
def render(target: str | None, output: str | None) -> None:
    """
    Render the demo stage.

    TARGET is one of html, svg, png or codex-preview. Anything else,
    including no argument, selects codex-preview.

    \b
    Examples:
      teatro render
      teatro render svg
      teatro render png -o demo.png
    """
    resolved = _resolve_target(target)
    logger.debug("rendering demo view", target=resolved)
    _emit(demo_view(), resolved, output)


# ── fountain subcommand ────────────────────────────────────────────────────────

@main.command()
@click.argument("fountain_file", type=click.Path(exists=True, dir_okay=False, readable=True))
@_target_argument
@_output_option
def fountain(fountain_file: str, target: str | None, output: str | None) -> None:
    """
    Parse a Fountain screenplay and render it.

    FOUNTAIN_FILE is the screenplay source; TARGET works as for ``render``.
    """
    try:
        text = Path(fountain_file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"  ERROR: Could not read screenplay: {exc}", err=True)
        sys.exit(1)

    _emit(FountainSceneView.from_text(text), _resolve_target(target), output)


# ── engrave subcommand ─────────────────────────────────────────────────────────

@main.command()
@click.argument("score_file", type=click.Path(exists=True, dir_okay=False, readable=True))
@click.option(
    "--name",
    "-n",
    default=None,
    metavar="NAME",
    help="Output name passed to lilypond. Defaults to the score filename stem.",
)
def engrave(score_file: str, name: str | None) -> None:
    """
    Typeset a LilyPond score with the lilypond executable (best effort).

    The executable is taken from $TEATRO_LILYPOND or found on PATH. Engraving
    failures are not reported.
    """
    score_path = Path(score_file)
    try:
        content = score_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"  ERROR: Could not read score: {exc}", err=True)
        sys.exit(1)

    output_name = name if name is not None else score_path.stem
    LilyScore(content).render_to_pdf(output_name)
    click.echo(f"Requested engraving of '{output_name}'.")


# ── animate subcommand ─────────────────────────────────────────────────────────

@main.command()
@click.argument(
    "fountain_files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, readable=True),
)
@click.option("--base-name", default="frame", show_default=True, help="Frame filename prefix.")
@click.option(
    "--directory",
    "-d",
    default=DEFAULT_FRAME_DIRECTORY,
    show_default=True,
    metavar="DIR",
    help="Directory that receives the frames.",
)
def animate(fountain_files: tuple[str, ...], base_name: str, directory: str) -> None:
    """
    Render each Fountain file as one numbered PNG frame.

    \b
    Example:
      teatro animate act1.fountain act2.fountain --base-name act
    """
    frames: list[Renderable] = []
    for path in fountain_files:
        try:
            frames.append(FountainSceneView.from_text(Path(path).read_text(encoding="utf-8")))
        except (OSError, UnicodeDecodeError) as exc:
            click.echo(f"  ERROR: Could not read screenplay '{path}': {exc}", err=True)
            sys.exit(1)

    written = Animator(directory=directory).render_frames(frames, base_name=base_name)
    for frame_path in written:
        click.echo(str(frame_path))
