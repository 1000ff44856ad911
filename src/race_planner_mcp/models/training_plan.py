"""Pydantic models for planner input and generated training plans."""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class RaceType(str, Enum):
    """Race categories a plan can target."""

    MARATHON = "marathon"
    HALF_MARATHON = "half-marathon"
    TEN_K = "10k"
    FIVE_K = "5k"
    CUSTOM = "custom"


class PlanMode(str, Enum):
    """How the planning horizon is expressed."""

    DATE = "date"
    WEEKS = "weeks"


class SessionType(str, Enum):
    """Training stimulus of a single session."""

    EASY = "easy"
    RECOVERY = "recovery"
    TEMPO = "tempo"
    INTERVAL = "interval"
    LONG = "long"
    RACE = "race"


class WeekPhase(str, Enum):
    """Periodization phase of a training week."""

    BASE = "base"
    BUILD = "build"
    PEAK = "peak"
    RECOVERY = "recovery"
    TAPER = "taper"
    RACE = "race"


class PlannerForm(BaseModel):
    """
    Raw planner input as entered by the user or loaded from storage.

    Numeric fields are deliberately loose (they may be stale, missing or NaN);
    the engine normalizes them. The race date stays a string so the engine
    can report calendar errors itself.
    """

    race_type: RaceType = RaceType.MARATHON
    custom_distance_km: Optional[float] = 15
    goal_time: str = "03:45"
    mode: PlanMode = PlanMode.DATE
    race_date: Optional[str] = None
    training_weeks: Optional[float] = 16
    days_per_week: Optional[float] = 4

    @field_validator("custom_distance_km", "training_weeks", "days_per_week", mode="before")
    @classmethod
    def drop_non_numeric(cls, value):
        """Unparseable numbers become None so the engine default applies."""
        if isinstance(value, bool):
            return None
        try:
            float(value)
        except (TypeError, ValueError):
            return None
        return value


class WeekLoadProfile(BaseModel):
    """Multiplicative load factors applied against the theoretical peak."""

    long_run_factor: float
    volume_factor: float
    quality_factor: float


class TrainingSession(BaseModel):
    """A single dated session in a training week."""

    id: str
    date: date
    weekday: str
    title: str
    type: SessionType
    distance_km: float
    pace: str
    description: str

    class Config:
        """Pydantic configuration."""

        use_enum_values = True


class TrainingWeek(BaseModel):
    """A Monday to Sunday week in the training plan."""

    week_number: int
    start_date: date
    end_date: date
    focus: str
    total_distance_km: float
    sessions: list[TrainingSession] = Field(default_factory=list)


class TrainingPlan(BaseModel):
    """Complete generated training plan."""

    race_label: str
    distance_km: float
    goal_time_minutes: float
    target_pace_min_per_km: float
    start_date: date
    end_date: date
    total_weeks: int
    days_per_week: int
    weeks: list[TrainingWeek] = Field(default_factory=list)
