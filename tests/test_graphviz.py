"""Tests for Graphviz invocation."""

import subprocess
from unittest.mock import patch

import pytest

from topograph.core.errors import GraphvizError
from topograph.graphviz import find_dot, render_png

DOT = "digraph Infrastructure {\n}\n"


class TestFindDot:
    """Tests for find_dot."""

    def test_missing(self):
        with patch("topograph.graphviz.shutil.which", return_value=None):
            with pytest.raises(GraphvizError, match="not found"):
                find_dot()

    def test_found(self):
        with patch("topograph.graphviz.shutil.which", return_value="/usr/bin/dot"):
            assert find_dot() == "/usr/bin/dot"


class TestRenderPng:
    """Tests for render_png."""

    def test_runs_dot(self, tmp_path):
        """DOT is passed on stdin and the output directory is created."""
        output = tmp_path / "out" / "diagram.png"
        with patch("topograph.graphviz.shutil.which", return_value="/usr/bin/dot"), patch(
            "topograph.graphviz.subprocess.run"
        ) as run:
            assert render_png(DOT, output) == output

        run.assert_called_once()
        args, kwargs = run.call_args
        assert args[0] == ["/usr/bin/dot", "-Tpng", "-o", str(output)]
        assert kwargs["input"] == DOT
        assert kwargs["check"] is True
        assert output.parent.is_dir()

    def test_dot_fails(self, tmp_path):
        error = subprocess.CalledProcessError(1, ["dot"], output="", stderr="syntax error in line 1")
        with patch("topograph.graphviz.shutil.which", return_value="/usr/bin/dot"), patch(
            "topograph.graphviz.subprocess.run", side_effect=error
        ):
            with pytest.raises(GraphvizError, match="syntax error in line 1"):
                render_png(DOT, tmp_path / "diagram.png")

    def test_missing_dot(self, tmp_path):
        with patch("topograph.graphviz.shutil.which", return_value=None):
            with pytest.raises(GraphvizError):
                render_png(DOT, tmp_path / "diagram.png")
