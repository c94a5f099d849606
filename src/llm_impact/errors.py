"""Exception hierarchy for :mod:`llm_impact`."""

from __future__ import annotations

__all__ = [
    "EstimationError",
    "ModelNotFound",
    "ReferenceDataError",
    "UnknownModelLabel",
    "ZoneNotFound",
]


class EstimationError(Exception):
    """Base class for errors raised while producing an impact estimate."""


class ModelNotFound(EstimationError, LookupError):
    """No catalog entry matches the provider and (alias-resolved) model name."""

    def __init__(self, provider: str, model_name: str) -> None:
        super().__init__(
            f"Could not find model `{model_name}` for {provider} provider."
        )
        self.provider = provider
        self.model_name = model_name


class ZoneNotFound(EstimationError, LookupError):
    """The electricity-mix table has no entry for the requested zone."""

    def __init__(self, zone: str) -> None:
        super().__init__(f"Could not find electricity mix for zone `{zone}`.")
        self.zone = zone


class UnknownModelLabel(EstimationError, LookupError):
    """An application-facing model label has no estimation mapping."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Could not find estimation for model name: {label}.")
        self.label = label


class ReferenceDataError(EstimationError):
    """A reference dataset could not be parsed or failed validation."""
