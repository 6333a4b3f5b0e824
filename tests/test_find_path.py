"""
Tests for the find_path command line script.
"""

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture(scope="module")
def find_path():
    """Import scripts/find_path.py as a module."""
    script = Path(__file__).parent.parent / "scripts" / "find_path.py"
    spec = importlib.util.spec_from_file_location("find_path", script)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def diamond_file(data_dir):
    return str(data_dir / "diamond.json")


class TestFindPath:
    """Exit codes and output."""

    def test_path_found(self, find_path, diamond_file, capsys):
        """Prints the path and exits 0."""
        code = find_path.main(["--graph", diamond_file, "--source", "A", "--target", "D"])
        out = capsys.readouterr().out
        assert code == 0
        assert "1. C" in out
        assert "Total cost: 2 over 2 edges" in out

    def test_distance_costs(self, find_path, diamond_file, capsys):
        """The Euclidean model uses node positions."""
        code = find_path.main(
            ["--graph", diamond_file, "--source", "A", "--target", "D", "--costs", "distance"]
        )
        assert code == 0
        assert "distance" in capsys.readouterr().out

    def test_no_path(self, find_path, diamond_file, capsys):
        """Unreachable target exits 1."""
        code = find_path.main(["--graph", diamond_file, "--source", "A", "--target", "E"])
        assert code == 1
        assert "No path" in capsys.readouterr().out

    def test_unknown_node(self, find_path, diamond_file, capsys):
        """Unknown node ids exit 2."""
        code = find_path.main(["--graph", diamond_file, "--source", "A", "--target", "Z"])
        assert code == 2
        assert "Error" in capsys.readouterr().err

    def test_missing_file(self, find_path, tmp_path):
        """A missing graph file exits 2."""
        code = find_path.main(
            ["--graph", str(tmp_path / "none.json"), "--source", "A", "--target", "B"]
        )
        assert code == 2

    def test_bare_name_uses_data_dir(self, find_path, capsys):
        """A graph name that is not a path is looked up in the data directory."""
        code = find_path.main(["--graph", "diamond.json", "--source", "A", "--target", "D"])
        assert code == 0
        assert "Total cost: 2" in capsys.readouterr().out
