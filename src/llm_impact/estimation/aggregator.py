"""Combine scenario evaluations into a single bounded impact result."""

from __future__ import annotations

import logging

from llm_impact.estimation.scenario import compute_scenario
from llm_impact.impact_models import (
    ElectricityMix,
    EmbodiedImpacts,
    ImpactResult,
    ScenarioImpacts,
    UsageImpacts,
)
from llm_impact.ranges import Range, RangeLike

LOGGER = logging.getLogger(__name__)

__all__ = ["compute_llm_impacts", "evaluate_scenarios"]


def evaluate_scenarios(
    *,
    active_params: RangeLike,
    total_params: RangeLike,
    output_tokens: int,
    request_latency: float,
    mix: ElectricityMix,
) -> ScenarioImpacts:
    """Evaluate the parameter endpoints and return their envelope.

    The lower endpoints of ``active_params`` and ``total_params`` form one
    scenario and the upper endpoints another. Their results are unioned
    field by field, never interpolated. A model whose parameter counts are
    both scalars is evaluated once.
    """

    active = Range.of(active_params)
    total = Range.of(total_params)

    endpoints = [(active.min, total.min)]
    if not (active.is_degenerate and total.is_degenerate):
        endpoints.append((active.max, total.max))

    LOGGER.debug(
        "Evaluating impact scenarios",
        extra={"scenarios": len(endpoints), "output_tokens": output_tokens},
    )

    scenarios = [
        compute_scenario(
            active_params=active_value,
            total_params=total_value,
            output_tokens=output_tokens,
            request_latency=request_latency,
            mix=mix,
        )
        for active_value, total_value in endpoints
    ]
    combined = scenarios[0]
    for scenario in scenarios[1:]:
        combined = combined.union(scenario)
    return combined


def compute_llm_impacts(
    *,
    active_params: RangeLike,
    total_params: RangeLike,
    output_tokens: int,
    request_latency: float,
    mix: ElectricityMix,
) -> ImpactResult:
    """Compute the full impact result for a model of the given size.

    Args:
        active_params: Active parameters in billions, scalar or range.
        total_params: Total parameters in billions, scalar or range.
        output_tokens: Number of generated tokens.
        request_latency: Observed request latency in seconds.
        mix: Electricity mix of the serving zone.

    Returns:
        Usage and embodied impacts plus their per-indicator totals.
    """

    impacts = evaluate_scenarios(
        active_params=active_params,
        total_params=total_params,
        output_tokens=output_tokens,
        request_latency=request_latency,
        mix=mix,
    )

    usage = UsageImpacts(
        energy=impacts.request_energy,
        gwp=impacts.request_usage_gwp,
        adpe=impacts.request_usage_adpe,
        pe=impacts.request_usage_pe,
    )
    embodied = EmbodiedImpacts(
        gwp=impacts.request_embodied_gwp,
        adpe=impacts.request_embodied_adpe,
        pe=impacts.request_embodied_pe,
    )
    return ImpactResult(
        energy=impacts.request_energy,
        gwp=usage.gwp + embodied.gwp,
        adpe=usage.adpe + embodied.adpe,
        pe=usage.pe + embodied.pe,
        usage=usage,
        embodied=embodied,
    )
