"""
Tests for pyproject.toml packaging metadata.

Only what an editable install relies on: the import roots that are packaged,
and that tests stay out of the distribution.
"""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")


PYPROJECT = Path(__file__).parent.parent / "pyproject.toml"


@pytest.fixture
def pyproject():
    with open(PYPROJECT, "rb") as f:
        return tomllib.load(f)


def test_packaged_import_roots(pyproject):
    """Test that exactly src, its subpackages, and actions are packaged."""
    find = pyproject["tool"]["setuptools"]["packages"]["find"]
    assert sorted(find["include"]) == ["actions", "src", "src.*"]
    assert pyproject["tool"]["setuptools"]["py-modules"] == ["main"]


def test_tests_are_not_packaged(pyproject):
    """Test that the tests directory is excluded from the distribution."""
    include = pyproject["tool"]["setuptools"]["packages"]["find"]["include"]
    assert not any(pattern.startswith("tests") for pattern in include)


def test_runtime_dependencies(pyproject):
    """Test that every third-party import used at runtime is declared."""
    declared = {dep.split(">")[0].split("=")[0] for dep in pyproject["project"]["dependencies"]}
    assert declared == {"numpy", "pandas", "python-dotenv"}
