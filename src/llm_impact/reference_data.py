"""Read-only reference datasets: the model catalog and electricity mixes.

The packaged JSON files are parsed once per process and exposed through
immutable containers. Both loaders honour the override paths from
:mod:`llm_impact.settings` so deployments can ship their own tables.
"""

from __future__ import annotations

import json
import logging
import pathlib
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from importlib import resources
from types import MappingProxyType

from pydantic import ValidationError

from llm_impact.errors import ReferenceDataError
from llm_impact.impact_models import (
    AliasRecord,
    Architecture,
    DenseArchitecture,
    ElectricityMix,
    MoEArchitecture,
    ModelRecord,
)
from llm_impact.ranges import Range, RangeLike
from llm_impact.schemas import (
    DenseArchitectureEntry,
    ElectricityMixFile,
    ModelCatalogFile,
    MoEArchitectureEntry,
    ParameterValue,
    RangeEntry,
)
from llm_impact.settings import get_settings

LOGGER = logging.getLogger(__name__)

__all__ = [
    "ElectricityMixTable",
    "ModelCatalog",
    "build_electricity_mixes",
    "build_model_catalog",
    "load_electricity_mixes",
    "load_model_catalog",
]

_MODELS_RESOURCE = "models.json"
_MIXES_RESOURCE = "electricity_mixes.json"


@dataclass(frozen=True, slots=True)
class ModelCatalog:
    """Immutable collection of model records and provider-scoped aliases."""

    models: tuple[ModelRecord, ...]
    aliases: tuple[AliasRecord, ...] = ()
    _index: Mapping[tuple[str, str], ModelRecord] = field(
        init=False, repr=False, compare=False
    )
    _alias_index: Mapping[tuple[str, str], str] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        index: dict[tuple[str, str], ModelRecord] = {}
        for record in self.models:
            # First entry wins, matching a linear scan of the catalog.
            index.setdefault((record.provider, record.name), record)
        alias_index: dict[tuple[str, str], str] = {}
        for alias in self.aliases:
            alias_index.setdefault((alias.provider, alias.name), alias.alias)
        object.__setattr__(self, "_index", MappingProxyType(index))
        object.__setattr__(self, "_alias_index", MappingProxyType(alias_index))

    def canonical_name(self, provider: str, name: str) -> str:
        """Return the catalog name ``name`` refers to for ``provider``."""

        return self._alias_index.get((provider, name), name)

    def find(self, provider: str, name: str) -> ModelRecord | None:
        """Look up a model after alias substitution.

        Args:
            provider: Provider identifier (for example ``"openai"``).
            name: User-facing or canonical model name.

        Returns:
            The matching record, or ``None`` when the catalog has no entry.
        """

        return self._index.get((provider, self.canonical_name(provider, name)))

    def providers(self) -> tuple[str, ...]:
        """Return the sorted provider identifiers present in the catalog."""

        return tuple(sorted({record.provider for record in self.models}))

    def models_for(self, provider: str) -> tuple[ModelRecord, ...]:
        """Return every record published by ``provider``."""

        return tuple(record for record in self.models if record.provider == provider)

    def __len__(self) -> int:
        return len(self.models)


@dataclass(frozen=True, slots=True, eq=False)
class ElectricityMixTable(Mapping[str, ElectricityMix]):
    """Immutable mapping of zone code to :class:`ElectricityMix`."""

    mixes: Mapping[str, ElectricityMix]

    def __post_init__(self) -> None:
        object.__setattr__(self, "mixes", MappingProxyType(dict(self.mixes)))

    def __getitem__(self, zone: str) -> ElectricityMix:
        return self.mixes[zone]

    def __iter__(self) -> Iterator[str]:
        return iter(self.mixes)

    def __len__(self) -> int:
        return len(self.mixes)

    def zones(self) -> tuple[str, ...]:
        """Return the sorted zone codes."""

        return tuple(sorted(self.mixes))


def build_model_catalog(payload: Mapping[str, object]) -> ModelCatalog:
    """Validate a ``models.json`` payload and build a :class:`ModelCatalog`.

    Args:
        payload: Parsed JSON mapping with ``models`` and ``aliases`` lists.

    Returns:
        The immutable catalog.

    Raises:
        ReferenceDataError: If the payload does not match the schema.
    """

    try:
        parsed = ModelCatalogFile.model_validate(payload)
    except ValidationError as exc:
        raise ReferenceDataError("Invalid model catalog payload") from exc

    models = tuple(
        ModelRecord(
            provider=entry.provider,
            name=entry.name,
            architecture=_architecture_from_entry(entry.architecture),
            warnings=entry.warnings,
            sources=entry.sources,
        )
        for entry in parsed.models
    )
    aliases = tuple(
        AliasRecord(provider=entry.provider, name=entry.name, alias=entry.alias)
        for entry in parsed.aliases
    )
    return ModelCatalog(models=models, aliases=aliases)


def build_electricity_mixes(payload: Mapping[str, object]) -> ElectricityMixTable:
    """Validate an electricity-mix payload and build the lookup table.

    Args:
        payload: Mapping of zone code to ``{"gwp", "adpe", "pe"}`` factors.

    Returns:
        The immutable mix table.

    Raises:
        ReferenceDataError: If the payload does not match the schema.
    """

    try:
        parsed = ElectricityMixFile.model_validate(payload)
    except ValidationError as exc:
        raise ReferenceDataError("Invalid electricity mix payload") from exc

    return ElectricityMixTable(
        {
            zone: ElectricityMix(zone=zone, gwp=entry.gwp, adpe=entry.adpe, pe=entry.pe)
            for zone, entry in parsed.root.items()
        }
    )


@lru_cache(maxsize=1)
def load_model_catalog() -> ModelCatalog:
    """Load the model catalog.

    Returns:
        Catalog parsed from ``LLM_IMPACT_MODELS_FILE`` when set, otherwise
        from the packaged ``models.json``.

    Raises:
        FileNotFoundError: Raised when the override path does not exist.
        ReferenceDataError: Raised when the content cannot be parsed.
    """

    override = get_settings().models_file
    payload = _read_payload(override, _MODELS_RESOURCE, "LLM_IMPACT_MODELS_FILE")
    catalog = build_model_catalog(payload)
    LOGGER.debug(
        "Model catalog loaded",
        extra={
            "models": len(catalog),
            "aliases": len(catalog.aliases),
            "override": override,
        },
    )
    return catalog


@lru_cache(maxsize=1)
def load_electricity_mixes() -> ElectricityMixTable:
    """Load the electricity-mix table.

    Returns:
        Table parsed from ``LLM_IMPACT_ELECTRICITY_MIXES_FILE`` when set,
        otherwise from the packaged ``electricity_mixes.json``.

    Raises:
        FileNotFoundError: Raised when the override path does not exist.
        ReferenceDataError: Raised when the content cannot be parsed.
    """

    override = get_settings().electricity_mixes_file
    payload = _read_payload(
        override, _MIXES_RESOURCE, "LLM_IMPACT_ELECTRICITY_MIXES_FILE"
    )
    table = build_electricity_mixes(payload)
    LOGGER.debug(
        "Electricity mixes loaded",
        extra={"zones": len(table), "override": override},
    )
    return table


def _read_payload(
    override_path: str | None, resource_name: str, env_name: str
) -> dict[str, object]:
    if override_path:
        path = pathlib.Path(override_path)
        if not path.exists():
            raise FileNotFoundError(f"{env_name} not found: {path}")
        text = path.read_text(encoding="utf-8")
    else:
        text = (
            resources.files("llm_impact.data")
            .joinpath(resource_name)
            .read_text(encoding="utf-8")
        )
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ReferenceDataError(f"Failed to parse {resource_name}") from exc
    if not isinstance(data, dict):
        raise ReferenceDataError(f"{resource_name} must contain a JSON object")
    return data


def _architecture_from_entry(
    entry: DenseArchitectureEntry | MoEArchitectureEntry,
) -> Architecture:
    if isinstance(entry, DenseArchitectureEntry):
        return DenseArchitecture(parameters=_parameter_value(entry.parameters))
    parameters = entry.parameters
    return MoEArchitecture(
        total=_parameter_value(parameters.total),
        active=_parameter_value(parameters.active),
    )


def _parameter_value(value: ParameterValue) -> RangeLike:
    if isinstance(value, RangeEntry):
        return Range(value.min, value.max)
    return float(value)
