"""Tests for the node color table loader."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pgnode2graph.render.colors import (
    DEFAULT_NODE_COLORS,
    ColorMapError,
    NodeColor,
    default_color_map,
    load_color_map,
    parse_color_map,
)


class TestParseColorMap:
    def test_two_and_three_fields(self):
        colors = parse_color_map([
            "QUERY, skyblue",
            "  VAR ,  black , white  ",
        ])
        assert colors == {
            "QUERY": NodeColor("skyblue"),
            "VAR": NodeColor("black", "white"),
        }

    def test_skips_blank_and_comment_lines(self):
        colors = parse_color_map(["", "   ", "# QUERY, red", "QUERY, blue"])
        assert colors == {"QUERY": NodeColor("blue")}

    def test_invalid_lines_are_reported_and_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pgnode2graph.render.colors"):
            colors = parse_color_map([
                "QUERY",
                "VAR, black",
                "# comment",
                "TARGETENTRY, a, b, c",
            ])
        assert colors == {"VAR": NodeColor("black")}
        messages = [r.getMessage() for r in caplog.records]
        assert messages == [
            "invalid node colors mapping at line 1",
            "invalid node colors mapping at line 4",
        ]

    def test_later_lines_override(self):
        colors = parse_color_map(["QUERY, red", "QUERY, green, white"])
        assert colors["QUERY"] == NodeColor("green", "white")

    def test_trailing_comma_gives_empty_font(self):
        assert parse_color_map(["QUERY, red,"]) == {"QUERY": NodeColor("red", "")}


class TestLoadColorMap:
    def test_load_file(self, tmp_path: Path):
        path = tmp_path / "colors.conf"
        path.write_text("# node colors\nQUERY, skyblue\n\nVAR, black, white\n")
        assert load_color_map(path) == {
            "QUERY": NodeColor("skyblue"),
            "VAR": NodeColor("black", "white"),
        }

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ColorMapError, match="could not open file"):
            load_color_map(tmp_path / "missing.conf")


class TestDefaultColorMap:
    def test_contents(self):
        assert default_color_map() == {
            "QUERY": NodeColor("skyblue"),
            "PLANNEDSTMT": NodeColor("pink"),
            "TARGETENTRY": NodeColor("sienna"),
        }

    def test_returns_copy(self):
        colors = default_color_map()
        colors["VAR"] = NodeColor("red")
        assert "VAR" not in DEFAULT_NODE_COLORS
