"""Pydantic schemas for the HTTP API layer.

Field aliases are the wire names used by the sensor firmware and the
dashboard (``temp``, ``rH``, ``CO2``, ...); Python attribute names follow the
domain model.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from models.records import Reading
from services.dewpoint import estimate_dewpoint


class ReadingFields(BaseModel):
    """Measurements shared by inbound and outbound reading payloads."""

    location: str
    temperature: float = Field(..., alias="temp")
    relative_humidity: float = Field(..., alias="rH")
    voc_index: float = Field(..., alias="VOC")
    nox_index: float = Field(..., alias="NOx")
    pm1: float = Field(..., alias="pmass1")
    pm2_5: float = Field(..., alias="pmass25")
    pm4: float = Field(..., alias="pmass4")
    pm10: float = Field(..., alias="pmass10")
    formaldehyde: float = Field(..., alias="HCHO")
    co2: float = Field(..., alias="CO2")
    indoor_dewpoint: float = Field(..., alias="indoorTd")


class ReadingIn(ReadingFields):
    """Payload submitted by a sensor; storage-owned fields are ignored."""

    model_config = ConfigDict(extra="ignore")

    indoor_dewpoint: Optional[float] = Field(  # type: ignore[assignment]
        default=None,
        alias="indoorTd",
        description="Indoor dew point; estimated from temp and rH when omitted.",
    )

    @model_validator(mode="after")
    def _fill_dewpoint(self) -> "ReadingIn":
        if self.indoor_dewpoint is None:
            self.indoor_dewpoint = estimate_dewpoint(self.temperature, self.relative_humidity)
        return self

    def to_domain(self) -> Reading:
        return Reading(**self.model_dump(by_alias=False))


class ReadingOut(ReadingFields):
    """A stored reading as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    timestamp: str = Field(..., description="ISO-8601 storage time in UTC.")
    tags: Optional[List[str]] = Field(
        default=None, description="Derived labels; omitted when none apply."
    )

    @classmethod
    def from_domain(cls, reading: Reading) -> "ReadingOut":
        if reading.id is None or reading.recorded_at is None:
            raise ValueError("Only stored readings can be serialized for output.")
        return cls(
            id=reading.id,
            timestamp=reading.recorded_at.isoformat(),
            location=reading.location,
            temperature=reading.temperature,
            relative_humidity=reading.relative_humidity,
            voc_index=reading.voc_index,
            nox_index=reading.nox_index,
            pm1=reading.pm1,
            pm2_5=reading.pm2_5,
            pm4=reading.pm4,
            pm10=reading.pm10,
            formaldehyde=reading.formaldehyde,
            co2=reading.co2,
            indoor_dewpoint=reading.indoor_dewpoint,
            tags=list(reading.tags) if reading.tags else None,
        )


class InsertResponse(BaseModel):
    message: str = "Sensor data inserted successfully"
