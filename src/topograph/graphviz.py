"""Rasterize DOT output with the Graphviz ``dot`` tool."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from topograph.core.errors import GraphvizError

logger = logging.getLogger(__name__)


def find_dot() -> str:
    """Locate the ``dot`` executable on PATH."""
    dot_exe = shutil.which("dot")
    if not dot_exe:
        raise GraphvizError(
            "Graphviz 'dot' command not found. Please install Graphviz "
            "(e.g. 'apt install graphviz' or 'brew install graphviz')."
        )
    return dot_exe


def render_image(dot: str, output: str | Path, fmt: str = "png") -> Path:
    """
    Render DOT text to an image file.

    The parent directory is created if needed. Returns the output path.
    """
    output = Path(output)
    dot_exe = find_dot()
    output.parent.mkdir(parents=True, exist_ok=True)

    logger.debug("Running %s -T%s -o %s", dot_exe, fmt, output)
    try:
        subprocess.run(
            [dot_exe, f"-T{fmt}", "-o", str(output)],
            input=dot,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        details = (e.stderr or e.stdout or "").strip()
        raise GraphvizError(f"Graphviz 'dot' failed (exit {e.returncode}): {details}") from e
    except OSError as e:
        raise GraphvizError(f"Could not run Graphviz 'dot': {e}") from e

    return output


def render_png(dot: str, output: str | Path) -> Path:
    """Render DOT text to a PNG file."""
    return render_image(dot, output, "png")
