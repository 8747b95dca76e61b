"""Shared pytest fixtures for GetHash."""

import pytest

from gethash.scanning.aggregator import BatchAggregator
from gethash.tests.fixtures.sample_files import make_tree, media_library_layout, pattern_bytes, write_file


@pytest.fixture
def make_file(tmp_path):
    """Factory: make_file('name.mp4', size) writes patterned content under tmp_path."""
    def _make(name, size, seed=0):
        return write_file(tmp_path / name, pattern_bytes(size, seed))
    return _make


@pytest.fixture
def scenario_tree(tmp_path):
    """root/{a.mp4, b.txt, sub/c.mkv}"""
    root = tmp_path / "root"
    make_tree(root, {"a.mp4": 1_000, "b.txt": 500, "sub/c.mkv": 60_000})
    return root


@pytest.fixture
def library(tmp_path):
    root = tmp_path / "library"
    files = make_tree(root, media_library_layout())
    return root, files


@pytest.fixture
def aggregator():
    return BatchAggregator()


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch):
    """Keep rich output free of ANSI codes regardless of the host terminal."""
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
