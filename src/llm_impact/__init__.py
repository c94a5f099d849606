"""LLM Impact - bounded energy and environmental estimates for LLM inference."""

from __future__ import annotations

from importlib import import_module
from typing import Any, TYPE_CHECKING

__all__ = [
    "ImpactEstimator",
    "ImpactResult",
    "ModelNotFound",
    "Range",
    "ZoneNotFound",
    "estimate",
]

if TYPE_CHECKING:
    from .errors import ModelNotFound, ZoneNotFound
    from .estimation import ImpactEstimator, estimate
    from .impact_models import ImpactResult
    from .ranges import Range


def __getattr__(name: str) -> Any:
    """Lazily import submodules to keep package import light."""

    module_map = {
        "ImpactEstimator": "estimation",
        "estimate": "estimation",
        "ImpactResult": "impact_models",
        "ModelNotFound": "errors",
        "ZoneNotFound": "errors",
        "Range": "ranges",
    }

    if name not in module_map:
        raise AttributeError(name)

    module = import_module(f".{module_map[name]}", __name__)
    return getattr(module, name)
