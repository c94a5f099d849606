"""Pytest configuration and fixtures."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

# Ensure src/ is on sys.path for tests so the src layout is used during test runs
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from llm_impact.estimation.estimator import ImpactEstimator, default_estimator  # noqa: E402
from llm_impact.impact_models import ElectricityMix  # noqa: E402
from llm_impact.reference_data import (  # noqa: E402
    ElectricityMixTable,
    ModelCatalog,
    build_electricity_mixes,
    build_model_catalog,
    load_electricity_mixes,
    load_model_catalog,
)

CATALOG_PAYLOAD: dict[str, object] = {
    "aliases": [
        {"provider": "acme", "name": "dense-latest", "alias": "dense-70b"},
    ],
    "models": [
        {
            "provider": "acme",
            "name": "dense-70b",
            "architecture": {"type": "dense", "parameters": 70},
        },
        {
            "provider": "acme",
            "name": "moe-large",
            "architecture": {
                "type": "moe",
                "parameters": {
                    "total": {"min": 440, "max": 1320},
                    "active": {"min": 44, "max": 220},
                },
            },
        },
        {
            "provider": "acme",
            "name": "moe-fixed",
            "architecture": {
                "type": "moe",
                "parameters": {"total": 46.7, "active": 12.9},
            },
        },
    ],
}

MIXES_PAYLOAD: dict[str, object] = {
    "TST": {"gwp": 0.5, "adpe": 1e-8, "pe": 10.0},
    "WOR": {"gwp": 0.590478, "adpe": 7.37708e-08, "pe": 9.988527},
}


@pytest.fixture
def catalog() -> ModelCatalog:
    """Small catalog with one dense model, two MoE models and an alias."""

    return build_model_catalog(CATALOG_PAYLOAD)


@pytest.fixture
def mixes() -> ElectricityMixTable:
    """Electricity mixes with round test factors and the world average."""

    return build_electricity_mixes(MIXES_PAYLOAD)


@pytest.fixture
def test_mix(mixes: ElectricityMixTable) -> ElectricityMix:
    """Mix with ``gwp=0.5``, ``adpe=1e-8`` and ``pe=10``."""

    return mixes["TST"]


@pytest.fixture
def estimator(catalog: ModelCatalog, mixes: ElectricityMixTable) -> ImpactEstimator:
    """Estimator wired to the fixture reference tables."""

    return ImpactEstimator(catalog=catalog, mixes=mixes)


@pytest.fixture
def clear_reference_caches() -> Iterator[None]:
    """Ensure cached reference data does not leak between tests."""

    load_model_catalog.cache_clear()
    load_electricity_mixes.cache_clear()
    default_estimator.cache_clear()
    yield
    load_model_catalog.cache_clear()
    load_electricity_mixes.cache_clear()
    default_estimator.cache_clear()
