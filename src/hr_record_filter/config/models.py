"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic. Defaults
reproduce the thresholds and option lists the HR client ships with.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class StageConfig(BaseModel):
    """Toggle shared by all filter stages."""

    enabled: bool = True


class TimeCategoryConfig(BaseModel):
    """Check-in thresholds in minutes since midnight."""

    # 08:45 and 09:00
    early_before_minutes: int = Field(default=525, ge=0, le=1440)
    on_time_until_minutes: int = Field(default=540, ge=0, le=1440)

    @model_validator(mode="after")
    def _check_order(self) -> "TimeCategoryConfig":
        if self.early_before_minutes > self.on_time_until_minutes:
            raise ValueError("early_before_minutes must be <= on_time_until_minutes")
        return self


class DurationCategoryConfig(BaseModel):
    """Leave length thresholds in days (upper bounds are inclusive)."""

    short_max_days: float = Field(default=2, ge=0)
    medium_max_days: float = Field(default=5, ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "DurationCategoryConfig":
        if self.short_max_days > self.medium_max_days:
            raise ValueError("short_max_days must be <= medium_max_days")
        return self


class BandConfig(BaseModel):
    """
    Half-open numeric bands.

    ``boundaries`` split the axis into ``len(boundaries) + 1`` bands, each
    including its lower boundary; ``labels`` names them in order. Values
    below ``min_value`` fall in no band.
    """

    boundaries: List[float]
    labels: List[str]
    min_value: Optional[float] = None

    @model_validator(mode="after")
    def _check_shape(self) -> "BandConfig":
        if len(self.labels) != len(self.boundaries) + 1:
            raise ValueError("labels must have exactly one more entry than boundaries")
        if sorted(self.boundaries) != list(self.boundaries):
            raise ValueError("boundaries must be ascending")
        return self


def _experience_bands() -> BandConfig:
    return BandConfig(
        boundaries=[2, 5, 10],
        labels=["0-2 years", "2-5 years", "5-10 years", "10+ years"],
        min_value=0,
    )


def _salary_bands() -> BandConfig:
    return BandConfig(
        boundaries=[50_000, 80_000, 120_000],
        labels=["< $50k", "$50k - $80k", "$80k - $120k", "$120k+"],
    )


class ClassifierConfig(BaseModel):
    """Thresholds for all derived-category classifiers."""

    time: TimeCategoryConfig = Field(default_factory=TimeCategoryConfig)
    duration: DurationCategoryConfig = Field(default_factory=DurationCategoryConfig)
    experience: BandConfig = Field(default_factory=_experience_bands)
    salary: BandConfig = Field(default_factory=_salary_bands)


class ChoicesConfig(BaseModel):
    """Fixed option lists offered by the filter menus."""

    attendance_statuses: List[str] = Field(
        default_factory=lambda: ["present", "absent", "late", "half-day", "on-leave"]
    )
    leave_types: List[str] = Field(
        default_factory=lambda: [
            "casual", "sick", "vacation", "personal", "maternity", "paternity"
        ]
    )
    leave_statuses: List[str] = Field(
        default_factory=lambda: ["pending", "approved", "rejected"]
    )
    candidate_stages: List[str] = Field(
        default_factory=lambda: [
            "screening", "interview", "technical", "offer", "rejected", "hired"
        ]
    )
    employee_statuses: List[str] = Field(
        default_factory=lambda: ["active", "terminated"]
    )


class FilterEngineConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    unknown_label: str = Field(default="Unknown", min_length=1)
    search_filter: StageConfig = Field(default_factory=StageConfig)
    dimension_filter: StageConfig = Field(default_factory=StageConfig)
    date_range_filter: StageConfig = Field(default_factory=StageConfig)
    category_filter: StageConfig = Field(default_factory=StageConfig)
    classifiers: ClassifierConfig = Field(default_factory=ClassifierConfig)
    choices: ChoicesConfig = Field(default_factory=ChoicesConfig)
