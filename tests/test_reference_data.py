"""Tests for the reference data store and its loaders."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from llm_impact.errors import ReferenceDataError
from llm_impact.impact_models import DenseArchitecture, MoEArchitecture
from llm_impact.ranges import Range
from llm_impact.reference_data import (
    ModelCatalog,
    build_electricity_mixes,
    build_model_catalog,
    load_electricity_mixes,
    load_model_catalog,
)

pytestmark = pytest.mark.usefixtures("clear_reference_caches")


def test_packaged_catalog_contains_known_models():
    """The packaged catalog resolves aliases to MoE and dense records."""
    catalog = load_model_catalog()

    gpt4o = catalog.find("openai", "gpt-4o")
    assert gpt4o is not None
    assert gpt4o.name == "gpt-4o-2024-08-06"
    assert isinstance(gpt4o.architecture, MoEArchitecture)
    assert gpt4o.architecture.total == Range(440.0, 1320.0)

    llama = catalog.find("huggingface_hub", "meta-llama/Meta-Llama-3.1-70B-Instruct")
    assert llama is not None
    assert llama.architecture == DenseArchitecture(parameters=70.0)

    assert "openai" in catalog.providers()
    assert all(record.provider == "mistralai" for record in catalog.models_for("mistralai"))


def test_packaged_catalog_is_cached():
    """The loader parses the file once per process."""
    assert load_model_catalog() is load_model_catalog()


def test_packaged_mixes_include_world_average():
    """The packaged mix table has the world-average zone."""
    mixes = load_electricity_mixes()
    assert "WOR" in mixes
    assert mixes["WOR"].zone == "WOR"
    assert mixes["FRA"].gwp < mixes["WOR"].gwp
    assert mixes.get("ZZ") is None
    assert "WOR" in mixes.zones()


def test_mix_table_is_read_only(mixes):
    """Mix tables cannot be mutated after construction."""
    with pytest.raises(TypeError):
        mixes.mixes["NEW"] = mixes["TST"]  # type: ignore[index]


def test_catalog_first_duplicate_wins():
    """Duplicate entries resolve to the first record in file order."""
    catalog = build_model_catalog(
        {
            "models": [
                {"provider": "p", "name": "m", "architecture": {"type": "dense", "parameters": 1}},
                {"provider": "p", "name": "m", "architecture": {"type": "dense", "parameters": 2}},
            ]
        }
    )
    record = catalog.find("p", "m")
    assert record is not None
    assert record.architecture == DenseArchitecture(parameters=1.0)


def test_empty_catalog_finds_nothing():
    """An empty catalog is valid and returns no records."""
    catalog = ModelCatalog(models=())
    assert catalog.find("openai", "gpt-4o") is None
    assert len(catalog) == 0


@pytest.mark.parametrize(
    "architecture",
    [
        {"type": "dense", "parameters": {"min": 10, "max": 5}},
        {"type": "dense", "parameters": -1},
        {"type": "sparse", "parameters": 10},
        {"type": "moe", "parameters": {"total": 10}},
    ],
)
def test_invalid_catalog_payload_rejected(architecture):
    """Schema violations surface as ReferenceDataError."""
    payload = {"models": [{"provider": "p", "name": "m", "architecture": architecture}]}
    with pytest.raises(ReferenceDataError):
        build_model_catalog(payload)


def test_invalid_mix_payload_rejected():
    """Negative or missing impact factors are rejected."""
    with pytest.raises(ReferenceDataError):
        build_electricity_mixes({"BAD": {"gwp": -1.0, "adpe": 0.0, "pe": 0.0}})
    with pytest.raises(ReferenceDataError):
        build_electricity_mixes({"BAD": {"gwp": 1.0}})


def test_models_file_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """LLM_IMPACT_MODELS_FILE replaces the packaged catalog."""
    path = tmp_path / "models.json"
    path.write_text(
        json.dumps(
            {
                "aliases": [{"provider": "local", "name": "tiny", "alias": "tiny-1b"}],
                "models": [
                    {
                        "provider": "local",
                        "name": "tiny-1b",
                        "architecture": {"type": "dense", "parameters": 1.1},
                    }
                ],
            }
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("LLM_IMPACT_MODELS_FILE", str(path))

    catalog = load_model_catalog()

    assert len(catalog) == 1
    record = catalog.find("local", "tiny")
    assert record is not None
    assert record.name == "tiny-1b"


def test_mixes_file_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """LLM_IMPACT_ELECTRICITY_MIXES_FILE replaces the packaged table."""
    path = tmp_path / "mixes.json"
    path.write_text(json.dumps({"LAB": {"gwp": 0.1, "adpe": 1e-9, "pe": 3.0}}))
    monkeypatch.setenv("LLM_IMPACT_ELECTRICITY_MIXES_FILE", str(path))

    mixes = load_electricity_mixes()

    assert mixes.zones() == ("LAB",)


def test_missing_override_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """A configured but missing override path raises FileNotFoundError."""
    monkeypatch.setenv("LLM_IMPACT_MODELS_FILE", str(tmp_path / "absent.json"))
    with pytest.raises(FileNotFoundError, match="LLM_IMPACT_MODELS_FILE"):
        load_model_catalog()


def test_malformed_override_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Unparseable JSON raises ReferenceDataError."""
    path = tmp_path / "mixes.json"
    path.write_text("{not json")
    monkeypatch.setenv("LLM_IMPACT_ELECTRICITY_MIXES_FILE", str(path))
    with pytest.raises(ReferenceDataError):
        load_electricity_mixes()


def test_non_object_override_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """A JSON document that is not an object is rejected."""
    path = tmp_path / "models.json"
    path.write_text("[]")
    monkeypatch.setenv("LLM_IMPACT_MODELS_FILE", str(path))
    with pytest.raises(ReferenceDataError, match="JSON object"):
        load_model_catalog()
