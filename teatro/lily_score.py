"""LilyScore: LilyPond source as a view node, with best-effort engraving."""

from __future__ import annotations

import os
import shutil
import subprocess
import tempfile
from abc import ABC, abstractmethod
from dataclasses import dataclass

from teatro.logs import get_logger
from teatro.view_core import Renderable

logger = get_logger(__name__)

#: Environment variable that overrides the lilypond executable.
LILYPOND_ENV_VAR = "TEATRO_LILYPOND"


class ScoreEngraver(ABC):
    """Abstract strategy that typesets score source into an artifact."""

    @abstractmethod
    def engrave(self, content: str, output_name: str) -> None:
        """
        Typeset *content* into an artifact named *output_name*.

        Implementations are best-effort and must not raise.
        """


class LilypondEngraver(ScoreEngraver):
    """
    Run the ``lilypond`` executable on a temporary ``.ly`` file.

    The executable is ``$TEATRO_LILYPOND`` when set, otherwise ``lilypond``
    resolved on ``PATH``. Failures of any kind leave no trace beyond the
    missing artifact.
    """

    def __init__(self, executable: str | None = None) -> None:
        self.executable = executable or os.environ.get(LILYPOND_ENV_VAR, "lilypond")

    def build_command(self, output_name: str, source_path: str) -> list[str]:
        """Return the argument vector for one engraving run."""
        resolved = shutil.which(self.executable) or self.executable
        return [resolved, "-o", output_name, source_path]

    def engrave(self, content: str, output_name: str) -> None:
        temp_dir: str | None = None
        try:
            temp_dir = tempfile.mkdtemp(prefix="teatro_")
            source_path = os.path.join(temp_dir, f"{os.path.basename(output_name)}.ly")
            with open(source_path, "w", encoding="utf-8") as fh:
                fh.write(content)
            command = self.build_command(output_name, source_path)
            logger.debug("engraving score", command=command)
            subprocess.run(
                command,
                check=False,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except (OSError, ValueError, subprocess.SubprocessError):
            # ValueError covers unencodable content and NUL bytes in paths.
            pass
        finally:
            if temp_dir is not None:
                shutil.rmtree(temp_dir, ignore_errors=True)


@dataclass(frozen=True)
class LilyScore(Renderable):
    """Opaque LilyPond source; renders as itself."""

    content: str

    def render(self) -> str:
        return self.content

    def render_to_pdf(
        self,
        filename: str = "score",
        engraver: ScoreEngraver | None = None,
    ) -> None:
        """
        Typeset this score into ``<filename>.pdf`` without raising.

        Args:
            filename: Output name handed to the engraver (no extension).
            engraver: Strategy used for typesetting; LilypondEngraver by default.
        """
        (engraver or LilypondEngraver()).engrave(self.content, filename)
