"""Attestation report models as published by the Attestation Collector."""

from datetime import datetime
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class TrustTier(IntEnum):
    """EAR trust tier codes."""
    NONE = 0
    AFFIRMING = 2
    WARNING = 32
    CONTRAINDICATED = 96


class CollectorModel(BaseModel):
    """Base for collector payloads: null or missing fields take their default."""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, v: Any, info: ValidationInfo) -> Any:
        """Treat JSON null as an absent field."""
        if v is None:
            return cls.model_fields[info.field_name].get_default()
        return v


class TrustVector(CollectorModel):
    """Per-category EAR trust tiers for one attestation result."""

    instance_identity: int = 0
    configuration: int = 0
    executables: int = 0
    file_system: int = 0
    hardware: int = 0
    runtime_opaque: int = 0
    storage_opaque: int = 0
    sourced_data: int = 0


class AttestationReport(CollectorModel):
    """One workload's attestation result from the collector."""

    pod_name: str = ""
    namespace: str = ""
    tee_type: str = ""
    attested: bool = False
    trust_vector: TrustVector | None = None
    ear_token: str | None = Field(None, description="Opaque EAR verification token")
    timestamp: datetime | None = None
    error: str = ""
