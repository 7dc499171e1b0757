"""Shared fixtures for strata tests."""

import pytest

import strata

TWO_PARAGRAPHS = "First paragraph here.\n\nSecond paragraph here."


@pytest.fixture
def store(tmp_path):
    """A fresh result store rooted in a temporary directory."""
    return strata.ContainerStore(tmp_path / "store")


@pytest.fixture
def two_paragraphs():
    return TWO_PARAGRAPHS
