"""Reporting helpers separate from core estimation."""

from __future__ import annotations

from llm_impact.impact_models import ImpactResult
from llm_impact.ranges import Range
from llm_impact.schemas import ImpactRecord

__all__ = ["compare_gwp_equivalents", "to_record"]

_KG_CO2_PER_KM_DRIVEN = 0.12
_KG_CO2_PER_TREE_DAY = 0.021
_KG_CO2_PER_SMARTPHONE_CHARGE = 0.008


def to_record(
    result: ImpactResult,
    *,
    provider: str,
    model: str,
    estimation_model: str,
    output_tokens: int,
    latency: float,
    zone: str,
) -> ImpactRecord:
    """Flatten an impact result into one validated usage-log row.

    Args:
        result: Estimate to flatten.
        provider: Provider of the estimated model.
        model: Model label as reported by the caller.
        estimation_model: Catalog model name the estimate was computed for.
        output_tokens: Generated token count of the request.
        latency: Observed latency of the request in seconds.
        zone: Electricity-mix zone used.
    """

    return ImpactRecord(
        provider=provider,
        model=model,
        estimation_model=estimation_model,
        output_token=output_tokens,
        latency=latency,
        zone=zone,
        energy_min=result.energy.min,
        energy_max=result.energy.max,
        gwp_min=result.gwp.min,
        gwp_max=result.gwp.max,
        adpe_min=result.adpe.min,
        adpe_max=result.adpe.max,
        pe_min=result.pe.min,
        pe_max=result.pe.max,
    )


def compare_gwp_equivalents(gwp: Range) -> dict[str, dict[str, str]]:
    """Convert a GWP range (kgCO2eq) into human-friendly equivalents."""

    if gwp.min < 0 or gwp.max < 0:
        raise ValueError("gwp must be non-negative")
    return {"min": _equivalents(gwp.min), "max": _equivalents(gwp.max)}


def _equivalents(carbon_kgco2: float) -> dict[str, str]:
    return {
        "carbon_kgco2": f"{carbon_kgco2:.6f}",
        "equivalent_km_driven": f"{carbon_kgco2 / _KG_CO2_PER_KM_DRIVEN:.4f}",
        "equivalent_tree_days": f"{carbon_kgco2 / _KG_CO2_PER_TREE_DAY:.3f}",
        "equivalent_smartphone_charges": (
            f"{carbon_kgco2 / _KG_CO2_PER_SMARTPHONE_CHARGE:.2f}"
        ),
    }
