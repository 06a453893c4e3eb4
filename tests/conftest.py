"""Shared fixtures for the Frogpath test suite."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from numpy.random import Generator

from frogpath.pond.pond import Pond
from frogpath.search.config import FrogConfig

REPO_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def default_config() -> FrogConfig:
    """Default frog config (no YAML file needed)."""
    return FrogConfig()


@pytest.fixture
def line_pond() -> Pond:
    """A single row: start, water, 3-fly food, end."""
    return Pond.from_rows(["S W 3 E"])


@pytest.fixture
def sample_map() -> Path:
    """The sample map shipped with the repository."""
    return REPO_ROOT / "maps" / "sample.yaml"


@pytest.fixture
def default_config_path() -> Path:
    """The default YAML config shipped with the repository."""
    return REPO_ROOT / "config" / "default.yaml"
