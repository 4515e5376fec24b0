"""
Tests for the installed package set.
"""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def test_only_project_packages_are_installed():
    with open(PYPROJECT, "rb") as f:
        config = tomllib.load(f)

    find = config["tool"]["setuptools"]["packages"]["find"]
    assert sorted(find["include"]) == ["blokli*", "schemas*", "service*"]
    assert "scripts" not in config.get("project", {})
