"""Resolve catalog models and electricity mixes, failing loudly on misses."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from llm_impact.errors import ModelNotFound, ZoneNotFound
from llm_impact.impact_models import DenseArchitecture, ElectricityMix, ModelRecord
from llm_impact.ranges import Range
from llm_impact.reference_data import ModelCatalog

LOGGER = logging.getLogger(__name__)

__all__ = ["model_parameters", "resolve_model", "resolve_zone"]


def resolve_model(catalog: ModelCatalog, provider: str, name: str) -> ModelRecord:
    """Return the catalog record for ``provider``/``name``.

    Aliases scoped to ``provider`` are substituted before the lookup.

    Raises:
        ModelNotFound: If no record matches.
    """

    record = catalog.find(provider, name)
    if record is None:
        raise ModelNotFound(provider, name)
    if record.name != name:
        LOGGER.debug(
            "Model alias resolved",
            extra={"provider": provider, "alias": name, "model": record.name},
        )
    return record


def resolve_zone(mixes: Mapping[str, ElectricityMix], zone: str) -> ElectricityMix:
    """Return the electricity mix for ``zone``.

    Raises:
        ZoneNotFound: If the table has no entry for ``zone``.
    """

    mix = mixes.get(zone)
    if mix is None:
        raise ZoneNotFound(zone)
    return mix


def model_parameters(model: ModelRecord) -> tuple[Range, Range]:
    """Return the ``(active, total)`` parameter ranges of ``model``.

    Dense models activate every parameter, so both entries are equal.
    """

    architecture = model.architecture
    if isinstance(architecture, DenseArchitecture):
        parameters = Range.of(architecture.parameters)
        return parameters, parameters
    return Range.of(architecture.active), Range.of(architecture.total)
