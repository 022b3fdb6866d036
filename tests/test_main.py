"""
Tests for the command-line entry point.
"""

import matplotlib

matplotlib.use("Agg")

import json

from fractree.config import Point, TreeConfig
from main import build_config, main, parse_arguments


class TestBuildConfig:
    """Tests for layering defaults, file and flags."""

    def test_defaults_follow_canvas(self) -> None:
        args = parse_arguments(["--width", "1000", "--height", "500"])
        assert build_config(args) == TreeConfig.default(1000, 500)

    def test_flags_override(self) -> None:
        args = parse_arguments([
            "--root-x", "-50", "--trunk-height", "120",
            "--length-ratio", "0.2", "--no-random", "--no-flower",
            "--branch-color", "#000000",
        ])
        config = build_config(args)
        assert config.root_position == Point(-50.0, 30.0)
        assert config.main_branch_height == 120.0
        assert config.branch_length_decrease_ratio == 0.2
        assert config.random is False
        assert config.has_flower is False
        assert config.branch_color == "#000000"

    def test_file_then_flags(self, tmp_path) -> None:
        path = tmp_path / "tree.json"
        path.write_text(json.dumps({"angle_delta": 0.5, "main_branch_height": 90}))
        args = parse_arguments(["--config", str(path), "--trunk-height", "70"])
        config = build_config(args)
        assert config.angle_delta == 0.5
        assert config.main_branch_height == 70.0


class TestMain:
    """Tests for running the CLI end to end."""

    def test_writes_image(self, tmp_path, capsys) -> None:
        out = tmp_path / "out.png"
        code = main([
            "--width", "200", "--height", "150", "--seed", "5",
            "--output", str(out),
        ])
        assert code == 0
        assert out.exists()
        assert f"Saved to {out}" in capsys.readouterr().out

    def test_invalid_ratio_exits_2(self, tmp_path, capsys) -> None:
        code = main(["--length-ratio", "1.5", "--output", str(tmp_path / "x.png")])
        assert code == 2
        assert "Invalid tree parameters" in capsys.readouterr().err
        assert not (tmp_path / "x.png").exists()

    def test_non_object_config_exits_2(self, tmp_path, capsys) -> None:
        """A JSON list instead of an object is reported, not raised."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        code = main(["--config", str(path), "--output", str(tmp_path / "x.png")])
        assert code == 2
        assert "expected a JSON object" in capsys.readouterr().err
        assert not (tmp_path / "x.png").exists()

    def test_missing_config_exits_2(self, tmp_path, capsys) -> None:
        code = main(["--config", str(tmp_path / "missing.json")])
        assert code == 2
        assert "Could not load" in capsys.readouterr().err
