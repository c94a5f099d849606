"""Environment-backed settings primitives for :mod:`llm_impact`."""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["LLMImpactSettings", "get_settings"]


class LLMImpactSettings(BaseSettings):
    """Expose environment-derived configuration knobs for the estimator.

    Only integration concerns are configurable. The regression constants of
    the energy model are compiled in and have no setting.

    Attributes:
        default_zone: Electricity-mix zone used by the CLI when ``--zone`` is
            not supplied.
        models_file: Optional path to a model catalog JSON file replacing the
            packaged catalog.
        electricity_mixes_file: Optional path to an electricity-mix JSON file
            replacing the packaged table.
        log_level: Logging level name applied by the CLI.
    """

    default_zone: str = Field(default="WOR", alias="LLM_IMPACT_DEFAULT_ZONE")
    models_file: str | None = Field(default=None, alias="LLM_IMPACT_MODELS_FILE")
    electricity_mixes_file: str | None = Field(
        default=None, alias="LLM_IMPACT_ELECTRICITY_MIXES_FILE"
    )
    log_level: str = Field(default="WARNING", alias="LLM_IMPACT_LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=None, extra="ignore")

    @field_validator("default_zone", mode="before")
    @classmethod
    def _normalise_zone(cls, value: object) -> str:
        """Strip whitespace and fall back to the world average when blank.

        Args:
            value: Raw environment value.

        Returns:
            Zone code to use as the default.
        """

        if value is None:
            return "WOR"
        text = str(value).strip()
        return text or "WOR"

    @field_validator("models_file", "electricity_mixes_file", mode="before")
    @classmethod
    def _blank_path_is_unset(cls, value: object) -> str | None:
        """Treat empty path variables as unset."""

        if value in (None, ""):
            return None
        return str(value)

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_log_level(cls, value: object) -> str:
        """Accept level names case-insensitively, ignoring unknown names."""

        if value is None:
            return "WARNING"
        name = str(value).strip().upper()
        if isinstance(logging.getLevelName(name), int):
            return name
        return "WARNING"

    @property
    def log_level_value(self) -> int:
        """Return :attr:`log_level` as a numeric logging level."""

        return int(logging.getLevelName(self.log_level))


def get_settings() -> LLMImpactSettings:
    """Return a :class:`LLMImpactSettings` instance.

    Returns:
        Settings parsed from environment variables.
    """

    return LLMImpactSettings()
