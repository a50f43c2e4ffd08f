"""Graphviz ``dot`` invocation."""

from __future__ import annotations

import subprocess
from pathlib import Path

from pgnode2graph import config


class GraphvizError(Exception):
    """Raised when the dot program is missing or fails."""


def _run_dot(args: list[str], program: str | None = None) -> subprocess.CompletedProcess[str]:
    """Run dot and return the completed process. Raises GraphvizError on failure."""
    program = program or config.DOT_PROGRAM
    try:
        return subprocess.run(
            [program] + args,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        raise GraphvizError(f"{program} {' '.join(args)} failed: {e.stderr.strip()}") from e
    except FileNotFoundError:
        raise GraphvizError(f"could not find \"{program}\" program")


def check_dot_program(program: str | None = None) -> str:
    """Make sure dot exists and comes from Graphviz. Returns its version line."""
    result = _run_dot(["-V"], program)
    # dot prints its version on stderr.
    version = (result.stderr or result.stdout).strip()
    if "graphviz" not in version.lower():
        raise GraphvizError(f"program \"{program or config.DOT_PROGRAM}\" doesn't come from Graphviz")
    return version


def render_image(
    dot_file: Path,
    image_file: Path,
    fmt: str,
    program: str | None = None,
) -> None:
    """Lay out ``dot_file`` and write the picture to ``image_file``."""
    _run_dot(["-T", fmt, "-o", str(image_file), str(dot_file)], program)
