"""Pydantic schemas for entries read from the local datastore or a backup file.

Records are validated here, before any aggregation runs. A record with a
missing, unparseable or offset-less timestamp is rejected at this boundary,
so every sample reaching the aggregation core is timezone-aware.
"""

from datetime import datetime

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field


class _Entry(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: str = Field(description="Entry identifier")
    recorded_at: AwareDatetime = Field(
        alias="recordedAt", description="When the value was recorded (ISO 8601 with offset)"
    )


class BodyWeightEntry(_Entry):
    """One body weight measurement."""

    weight_g: int = Field(alias="weightG", gt=0, description="Body weight in integer grams")


class BpmEntry(_Entry):
    """One heart rate measurement."""

    bpm: int = Field(ge=20, le=300, description="Heart rate in beats per minute")


class BackupFile(BaseModel):
    """Subset of the app's JSON backup used for charts.

    Other backup sections (templates, logs, achievements) are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    schema_version: int | None = Field(default=None, alias="schemaVersion")
    exported_at: datetime | None = Field(default=None, alias="exportedAt")
    body_weights: list[BodyWeightEntry] = Field(default_factory=list, alias="bodyWeights")
    bpm_entries: list[BpmEntry] = Field(default_factory=list, alias="bpmEntries")
