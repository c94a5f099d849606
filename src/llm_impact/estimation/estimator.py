"""High-level impact estimation orchestration."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache

from llm_impact.estimation.aggregator import compute_llm_impacts
from llm_impact.estimation.labeling import resolve_label
from llm_impact.estimation.resolver import (
    model_parameters,
    resolve_model,
    resolve_zone,
)
from llm_impact.impact_models import ElectricityMix, ImpactResult, ModelRecord
from llm_impact.reference_data import (
    ModelCatalog,
    load_electricity_mixes,
    load_model_catalog,
)

DEFAULT_ZONE = "WOR"

__all__ = ["DEFAULT_ZONE", "ImpactEstimator", "default_estimator", "estimate"]


class ImpactEstimator:
    """Estimate the environmental impacts of LLM inference requests.

    The estimator holds read-only references to a model catalog and an
    electricity-mix table. Both default to the packaged datasets; tests and
    integrations may inject their own. Instances keep no mutable state and
    may be shared between threads.
    """

    def __init__(
        self,
        catalog: ModelCatalog | None = None,
        mixes: Mapping[str, ElectricityMix] | None = None,
    ) -> None:
        """Initialise the estimator with optional reference tables.

        Args:
            catalog: Model catalog used for model lookups.
            mixes: Mapping of zone code to electricity mix.
        """

        self.logger = logging.getLogger("llm_impact.estimator")
        self.catalog = catalog if catalog is not None else load_model_catalog()
        self.mixes = mixes if mixes is not None else load_electricity_mixes()

        self.logger.info(
            "ImpactEstimator initialised",
            extra={"models": len(self.catalog), "zones": len(self.mixes)},
        )

    def resolve_model(self, provider: str, model_name: str) -> ModelRecord:
        """Return the catalog record used for ``provider``/``model_name``."""

        return resolve_model(self.catalog, provider, model_name)

    def resolve_zone(self, zone: str) -> ElectricityMix:
        """Return the electricity mix for ``zone``."""

        return resolve_zone(self.mixes, zone)

    def estimate(
        self,
        provider: str,
        model_name: str,
        output_tokens: int,
        request_latency: float,
        zone: str = DEFAULT_ZONE,
    ) -> ImpactResult:
        """Estimate the impacts of one inference request.

        Args:
            provider: Provider identifier, for example ``"openai"``.
            model_name: Model name or alias as known by the provider.
            output_tokens: Number of generated tokens. Must be non-negative.
            request_latency: Observed request latency in seconds. Must be
                non-negative.
            zone: Electricity-mix zone code; ``"WOR"`` is the world average.

        Returns:
            A new :class:`ImpactResult` owned by the caller.

        Raises:
            ModelNotFound: If the model is not in the catalog.
            ZoneNotFound: If the zone is not in the electricity-mix table.
        """

        model = self.resolve_model(provider, model_name)
        mix = self.resolve_zone(zone)
        active, total = model_parameters(model)
        return compute_llm_impacts(
            active_params=active,
            total_params=total,
            output_tokens=output_tokens,
            request_latency=request_latency,
            mix=mix,
        )

    def estimate_for_label(
        self,
        label: str,
        output_tokens: int,
        request_latency: float,
        zone: str = DEFAULT_ZONE,
    ) -> ImpactResult:
        """Estimate a request reported under an application model label.

        Raises:
            UnknownModelLabel: If the label has no catalog mapping.
            ModelNotFound: If the mapped model is not in the catalog.
            ZoneNotFound: If the zone is not in the electricity-mix table.
        """

        mapping = resolve_label(label)
        return self.estimate(
            mapping.provider, mapping.model, output_tokens, request_latency, zone
        )


@lru_cache(maxsize=1)
def default_estimator() -> ImpactEstimator:
    """Return the process-wide estimator backed by the packaged datasets."""

    return ImpactEstimator()


def estimate(
    provider: str,
    model_name: str,
    output_tokens: int,
    request_latency: float,
    zone: str = DEFAULT_ZONE,
) -> ImpactResult:
    """Estimate one request with :func:`default_estimator`.

    See :meth:`ImpactEstimator.estimate` for argument and error details.
    """

    return default_estimator().estimate(
        provider, model_name, output_tokens, request_latency, zone
    )
