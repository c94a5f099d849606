"""Domain models for the LLM impact estimator.

Reference records (models, aliases, electricity mixes) are immutable and
live for the whole process. Impact results are created fresh for every
estimate and returned to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict, Union

from llm_impact.ranges import Range, RangeLike


class RangeDict(TypedDict):
    """JSON shape of a :class:`~llm_impact.ranges.Range`."""

    min: float
    max: float


class UsageImpactsDict(TypedDict):
    """JSON shape of :class:`UsageImpacts`."""

    energy: RangeDict
    gwp: RangeDict
    adpe: RangeDict
    pe: RangeDict


class EmbodiedImpactsDict(TypedDict):
    """JSON shape of :class:`EmbodiedImpacts`."""

    gwp: RangeDict
    adpe: RangeDict
    pe: RangeDict


class ImpactResultDict(TypedDict):
    """JSON shape of :class:`ImpactResult`."""

    energy: RangeDict
    gwp: RangeDict
    adpe: RangeDict
    pe: RangeDict
    usage: UsageImpactsDict
    embodied: EmbodiedImpactsDict


@dataclass(frozen=True, slots=True)
class DenseArchitecture:
    """Every parameter participates in each forward pass."""

    parameters: RangeLike


@dataclass(frozen=True, slots=True)
class MoEArchitecture:
    """Mixture-of-experts model with distinct total and active sizes."""

    total: RangeLike
    active: RangeLike


Architecture = Union[DenseArchitecture, MoEArchitecture]


@dataclass(frozen=True, slots=True)
class ModelRecord:
    """Catalog entry for one model.

    Parameter counts are expressed in billions of parameters.
    """

    provider: str
    name: str
    architecture: Architecture
    warnings: tuple[str, ...] = ()
    sources: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class AliasRecord:
    """Redirects a user-facing model name to its canonical catalog name."""

    provider: str
    name: str
    alias: str


@dataclass(frozen=True, slots=True)
class ElectricityMix:
    """Impact factors per kWh for one electricity-grid zone."""

    zone: str
    gwp: float
    adpe: float
    pe: float


@dataclass(frozen=True, slots=True)
class ScenarioImpacts:
    """Impacts of a single (active, total) parameter scenario."""

    request_energy: Range
    request_usage_gwp: Range
    request_usage_adpe: Range
    request_usage_pe: Range
    request_embodied_gwp: Range
    request_embodied_adpe: Range
    request_embodied_pe: Range

    def union(self, other: ScenarioImpacts) -> ScenarioImpacts:
        """Return the field-wise envelope of two scenarios."""

        return ScenarioImpacts(
            request_energy=self.request_energy.union(other.request_energy),
            request_usage_gwp=self.request_usage_gwp.union(other.request_usage_gwp),
            request_usage_adpe=self.request_usage_adpe.union(
                other.request_usage_adpe
            ),
            request_usage_pe=self.request_usage_pe.union(other.request_usage_pe),
            request_embodied_gwp=self.request_embodied_gwp.union(
                other.request_embodied_gwp
            ),
            request_embodied_adpe=self.request_embodied_adpe.union(
                other.request_embodied_adpe
            ),
            request_embodied_pe=self.request_embodied_pe.union(
                other.request_embodied_pe
            ),
        )


@dataclass(frozen=True, slots=True)
class UsageImpacts:
    """Impacts attributable to the electricity consumed by the request."""

    energy: Range
    gwp: Range
    adpe: Range
    pe: Range

    def to_dict(self) -> UsageImpactsDict:
        return {
            "energy": _range_dict(self.energy),
            "gwp": _range_dict(self.gwp),
            "adpe": _range_dict(self.adpe),
            "pe": _range_dict(self.pe),
        }


@dataclass(frozen=True, slots=True)
class EmbodiedImpacts:
    """Manufacturing impacts amortised over the request's share of hardware life."""

    gwp: Range
    adpe: Range
    pe: Range

    def to_dict(self) -> EmbodiedImpactsDict:
        return {
            "gwp": _range_dict(self.gwp),
            "adpe": _range_dict(self.adpe),
            "pe": _range_dict(self.pe),
        }


@dataclass(frozen=True, slots=True)
class ImpactResult:
    """Bounded environmental impacts of one inference request.

    Units: energy in kWh, GWP in kgCO2eq, ADPe in kgSbeq, PE in MJ. The
    top-level ``gwp``, ``adpe`` and ``pe`` fields are usage plus embodied.
    """

    energy: Range
    gwp: Range
    adpe: Range
    pe: Range
    usage: UsageImpacts
    embodied: EmbodiedImpacts

    def to_dict(self) -> ImpactResultDict:
        """Return a nested, JSON-serialisable representation."""

        return {
            "energy": _range_dict(self.energy),
            "gwp": _range_dict(self.gwp),
            "adpe": _range_dict(self.adpe),
            "pe": _range_dict(self.pe),
            "usage": self.usage.to_dict(),
            "embodied": self.embodied.to_dict(),
        }


def _range_dict(value: Range) -> RangeDict:
    return {"min": float(value.min), "max": float(value.max)}
