"""Impact estimation package.

Provides the high-level :class:`ImpactEstimator` API along with the
scenario calculator and aggregator it is built from.
"""

from __future__ import annotations

from .aggregator import compute_llm_impacts
from .estimator import DEFAULT_ZONE, ImpactEstimator, estimate

__all__ = ["DEFAULT_ZONE", "ImpactEstimator", "compute_llm_impacts", "estimate"]
