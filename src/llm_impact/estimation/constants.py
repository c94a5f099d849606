"""Fixed coefficients of the GPU energy/latency regression and hardware model.

These values reproduce a published regression and are intentionally not
configurable.
"""

from __future__ import annotations

from typing import Final

MODEL_QUANTIZATION_BITS: Final[int] = 4
MODEL_MEMORY_OVERHEAD: Final[float] = 1.2

# Per-token GPU energy (kWh) as a linear function of active parameters (B).
GPU_ENERGY_ALPHA: Final[float] = 8.91e-8
GPU_ENERGY_BETA: Final[float] = 1.43e-6
GPU_ENERGY_STDEV: Final[float] = 5.19e-7

# Per-token GPU generation latency (s).
GPU_LATENCY_ALPHA: Final[float] = 8.02e-4
GPU_LATENCY_BETA: Final[float] = 2.23e-2
GPU_LATENCY_STDEV: Final[float] = 7.00e-6

# Two-sided 95% confidence band.
CONFIDENCE_Z: Final[float] = 1.96

GPU_MEMORY_GB: Final[float] = 80.0
GPU_EMBODIED_IMPACT_GWP: Final[float] = 143.0
GPU_EMBODIED_IMPACT_ADPE: Final[float] = 5.1e-3
GPU_EMBODIED_IMPACT_PE: Final[float] = 1828.0

SERVER_GPUS: Final[int] = 8
SERVER_POWER_KW: Final[float] = 1.0
SERVER_EMBODIED_IMPACT_GWP: Final[float] = 3000.0
SERVER_EMBODIED_IMPACT_ADPE: Final[float] = 0.24
SERVER_EMBODIED_IMPACT_PE: Final[float] = 38000.0

HARDWARE_LIFESPAN_SECONDS: Final[float] = 5 * 365 * 24 * 60 * 60
DATACENTER_PUE: Final[float] = 1.2
