"""Pydantic models describing the reference datasets and flat output records."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator

SchemaVersionLiteral = Literal["0.1.0"]
CURRENT_RECORD_SCHEMA_VERSION: SchemaVersionLiteral = "0.1.0"


class RangeEntry(BaseModel):
    """Parameter count known only as an interval."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    min: float = Field(..., ge=0.0)
    max: float = Field(..., ge=0.0)

    @model_validator(mode="after")
    def _check_bounds(self) -> RangeEntry:
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self


ParameterValue = Union[Annotated[float, Field(ge=0.0)], RangeEntry]


class MoEParameters(BaseModel):
    """Total and active parameter counts of a mixture-of-experts model."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    total: ParameterValue
    active: ParameterValue


class DenseArchitectureEntry(BaseModel):
    """Dense architecture block of a catalog entry."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["dense"]
    parameters: ParameterValue


class MoEArchitectureEntry(BaseModel):
    """Mixture-of-experts architecture block of a catalog entry."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["moe"]
    parameters: MoEParameters


class ModelEntry(BaseModel):
    """One model in ``models.json``."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    provider: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    architecture: Annotated[
        Union[DenseArchitectureEntry, MoEArchitectureEntry],
        Field(discriminator="type"),
    ]
    warnings: tuple[str, ...] = ()
    sources: tuple[str, ...] = ()


class AliasEntry(BaseModel):
    """One alias in ``models.json``."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    provider: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    alias: str = Field(..., min_length=1)


class ModelCatalogFile(BaseModel):
    """Top-level structure of ``models.json``."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    aliases: tuple[AliasEntry, ...] = ()
    models: tuple[ModelEntry, ...] = ()


class ElectricityMixEntry(BaseModel):
    """Impact factors per kWh for one zone."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    gwp: float = Field(..., ge=0.0, description="kgCO2eq per kWh.")
    adpe: float = Field(..., ge=0.0, description="kgSbeq per kWh.")
    pe: float = Field(..., ge=0.0, description="MJ of primary energy per kWh.")


class ElectricityMixFile(RootModel[dict[str, ElectricityMixEntry]]):
    """Top-level structure of ``electricity_mixes.json`` keyed by zone code."""


class ImpactRecord(BaseModel):
    """Flat, versioned row describing one estimated request.

    The column set mirrors the usage log kept by request-tracking
    integrations, one ``_min``/``_max`` pair per indicator.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: SchemaVersionLiteral = Field(
        default=CURRENT_RECORD_SCHEMA_VERSION,
        description="Semantic version of the record layout.",
    )
    provider: str = Field(..., min_length=1)
    model: str = Field(
        ..., min_length=1, description="Model label as seen by the caller."
    )
    estimation_model: str = Field(
        ..., min_length=1, description="Catalog model used for the estimate."
    )
    output_token: int = Field(..., ge=0)
    latency: float = Field(..., description="Observed request latency in seconds.")
    zone: str = Field(..., min_length=1)
    energy_min: float
    energy_max: float
    gwp_min: float
    gwp_max: float
    adpe_min: float
    adpe_max: float
    pe_min: float
    pe_max: float

    def model_dump_json_ready(self) -> dict[str, object]:
        """Return a JSON-serialisable payload."""

        return self.model_dump(mode="json")
