# file: tests/conftest.py
from __future__ import annotations

import logging

import pytest

from phoneregion import registry
from phoneregion.core.capabilities import RegionCapabilities
from phoneregion.core.resolver import RegionResolver
from phoneregion.metadata.catalog import load_catalog
from phoneregion.metadata.indexer import build_indices
from phoneregion.metadata.model import MetadataIndex


@pytest.fixture(scope="session")
def sample_index() -> MetadataIndex:
    return build_indices(load_catalog())


@pytest.fixture()
def resolver(sample_index: MetadataIndex) -> RegionResolver:
    return RegionResolver(sample_index)


@pytest.fixture()
def caps(sample_index: MetadataIndex) -> RegionCapabilities:
    return RegionCapabilities(sample_index)


@pytest.fixture()
def clean_registry():
    registry.reset()
    yield
    registry.reset()


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
