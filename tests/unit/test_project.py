"""Unit tests for the project metadata."""

import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]


def test_readme_exists():
    """Test that the readme named in the project metadata is shipped."""
    metadata = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))
    readme = ROOT / metadata["project"]["readme"]

    assert readme.name == "README.md"
    assert "license-inspector" in readme.read_text(encoding="utf-8")
