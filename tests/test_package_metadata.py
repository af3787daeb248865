"""Tests for ensuring project packaging metadata stays consistent."""

from __future__ import annotations

import tomllib
from pathlib import Path

import hexlattice

ROOT = Path(__file__).resolve().parents[1]


def _load_pyproject() -> dict:
    with (ROOT / "pyproject.toml").open("rb") as handle:
        return tomllib.load(handle)


def test_pyproject_declares_expected_metadata() -> None:
    project = _load_pyproject()["project"]

    assert project["name"] == "hexlattice"
    assert project["version"] == hexlattice.__version__
    assert project["scripts"]["hexlattice"] == "hexlattice.__main__:main"

    declared = " ".join(project["dependencies"])
    for dependency in ("pydantic", "networkx", "rich", "python-json-logger"):
        assert dependency in declared, f"missing dependency declaration for {dependency}"
