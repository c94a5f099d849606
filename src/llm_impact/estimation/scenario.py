"""Impact model for a single, concrete parameter-count scenario.

Energy and latency per generated token follow a linear regression on the
number of active parameters (in billions). Their 95% confidence bands give
the bounds of every downstream quantity. Hardware sizing follows from the
total parameter count and the memory of one GPU.
"""

from __future__ import annotations

import logging
import math

from llm_impact.estimation import constants as c
from llm_impact.impact_models import ElectricityMix, ScenarioImpacts
from llm_impact.ranges import Range, RangeLike

LOGGER = logging.getLogger(__name__)

__all__ = [
    "compute_scenario",
    "embodied_impact",
    "generation_latency",
    "gpu_count",
    "gpu_energy",
    "gpu_latency_interval",
    "request_energy",
    "server_energy",
]


def _confidence_band(
    per_token: float, stdev: float, output_tokens: int | float
) -> Range:
    margin = c.CONFIDENCE_Z * stdev
    return Range(
        max(0.0, output_tokens * (per_token - margin)),
        output_tokens * (per_token + margin),
    )


def gpu_energy(active_params: float, output_tokens: int | float) -> Range:
    """Energy drawn by one GPU to generate ``output_tokens`` tokens (kWh)."""

    per_token = c.GPU_ENERGY_ALPHA * active_params + c.GPU_ENERGY_BETA
    return _confidence_band(per_token, c.GPU_ENERGY_STDEV, output_tokens)


def gpu_latency_interval(active_params: float, output_tokens: int | float) -> Range:
    """Modeled time to generate ``output_tokens`` tokens (seconds)."""

    per_token = c.GPU_LATENCY_ALPHA * active_params + c.GPU_LATENCY_BETA
    return _confidence_band(per_token, c.GPU_LATENCY_STDEV, output_tokens)


def generation_latency(latency_interval: Range, request_latency: float) -> Range:
    """Pick the latency that drives server energy and hardware amortisation.

    When the whole modeled interval lies below the observed latency the
    observed value is used as a degenerate range; otherwise the modeled
    interval is kept.
    """

    if latency_interval.less_than(request_latency):
        LOGGER.debug(
            "Observed latency overrides modeled interval",
            extra={
                "modeled_max_s": latency_interval.max,
                "request_latency_s": request_latency,
            },
        )
        return Range.of(request_latency)
    return latency_interval


def gpu_count(total_params: float) -> int:
    """Number of GPUs needed to hold the quantized model in memory."""

    memory_gb = c.MODEL_MEMORY_OVERHEAD * total_params * c.MODEL_QUANTIZATION_BITS / 8
    return math.ceil(memory_gb / c.GPU_MEMORY_GB)


def server_energy(latency: RangeLike, gpus: int) -> Range:
    """Energy of the non-GPU server share used during ``latency`` (kWh)."""

    return Range.of(latency).scale(c.SERVER_POWER_KW / 3600 * (gpus / c.SERVER_GPUS))


def request_energy(server: RangeLike, gpus: int, per_gpu_energy: RangeLike) -> Range:
    """Total request energy including datacenter overhead (kWh)."""

    return Range.of(server).add(Range.of(per_gpu_energy).scale(gpus)).scale(
        c.DATACENTER_PUE
    )


def embodied_impact(
    latency: RangeLike, gpus: int, server_impact: float, gpu_impact: float
) -> Range:
    """Share of the hardware manufacturing impact used during ``latency``.

    Args:
        latency: Generation latency in seconds.
        gpus: Number of GPUs serving the model.
        server_impact: Embodied impact of one full server.
        gpu_impact: Embodied impact of one GPU.
    """

    hardware_impact = (gpus / c.SERVER_GPUS) * server_impact + gpus * gpu_impact
    return Range.of(latency).scale(hardware_impact / c.HARDWARE_LIFESPAN_SECONDS)


def compute_scenario(
    *,
    active_params: float,
    total_params: float,
    output_tokens: int,
    request_latency: float,
    mix: ElectricityMix,
) -> ScenarioImpacts:
    """Compute energy, usage and embodied impacts for one scenario.

    Args:
        active_params: Parameters used per forward pass, in billions.
        total_params: Parameters held in memory, in billions.
        output_tokens: Number of generated tokens.
        request_latency: Observed wall-clock latency of the request in seconds.
        mix: Electricity mix of the serving zone.

    Returns:
        The seven impact ranges for this scenario. Inputs are not validated.
    """

    per_gpu_energy = gpu_energy(active_params, output_tokens)
    latency = generation_latency(
        gpu_latency_interval(active_params, output_tokens), request_latency
    )
    gpus = gpu_count(total_params)

    energy = request_energy(server_energy(latency, gpus), gpus, per_gpu_energy)

    return ScenarioImpacts(
        request_energy=energy,
        request_usage_gwp=energy.scale(mix.gwp),
        request_usage_adpe=energy.scale(mix.adpe),
        request_usage_pe=energy.scale(mix.pe),
        request_embodied_gwp=embodied_impact(
            latency, gpus, c.SERVER_EMBODIED_IMPACT_GWP, c.GPU_EMBODIED_IMPACT_GWP
        ),
        request_embodied_adpe=embodied_impact(
            latency, gpus, c.SERVER_EMBODIED_IMPACT_ADPE, c.GPU_EMBODIED_IMPACT_ADPE
        ),
        request_embodied_pe=embodied_impact(
            latency, gpus, c.SERVER_EMBODIED_IMPACT_PE, c.GPU_EMBODIED_IMPACT_PE
        ),
    )
