"""Body composition, activity and progress photo entities."""

from pydantic import Field

from .base import CamelModel, Resource, Timestamp


class WeightEntry(CamelModel):
    """A body-composition snapshot, laid out like a RENPHO scale export."""

    date: Timestamp
    time: str | None = None
    weight: float = Field(gt=0)
    body_fat: float | None = None
    fat_free_mass: float | None = None
    muscle_mass: float | None = None
    bmi: float | None = None
    subcutaneous_fat: float | None = None
    skeletal_muscle: float | None = None
    body_water: float | None = None
    visceral_fat: int | None = None
    bone_mass: float | None = None
    protein: float | None = None
    bmr: int | None = None
    metabolic_age: int | None = None
    optimal_weight: float | None = None
    target_to_optimal_weight: float | None = None
    target_to_optimal_fat_mass: float | None = None
    target_to_optimal_muscle_mass: float | None = None
    body_type: str | None = None
    remarks: str | None = None


class BodyMeasurement(CamelModel):
    """Tape measurements, in inches."""

    date: Timestamp
    chest: float | None = None
    waist: float | None = None
    hips: float | None = None
    neck: float | None = None
    left_arm: float | None = None
    right_arm: float | None = None
    left_thigh: float | None = None
    right_thigh: float | None = None
    notes: str = ""


class StepEntry(CamelModel):
    """Daily step count."""

    date: Timestamp
    steps: int = Field(ge=0)
    distance: float | None = None
    floors_ascended: int | None = None


class CardioLogEntry(CamelModel):
    """A single cardio session."""

    date: Timestamp
    activity_type: str = Field(min_length=1)
    duration: float | None = None  # minutes
    distance: str = ""
    pace: str = ""
    calories: int | None = None
    heart_rate: int | None = None
    rpe: int | None = Field(default=None, ge=0, le=10)
    notes: str = ""


class PhotoProgress(CamelModel):
    """Progress photo metadata; the image itself lives in object storage."""

    title: str = Field(min_length=1)
    description: str = ""
    photo_url: str = Field(min_length=1)
    body_part: str | None = None
    weight: float | None = None
    taken_at: Timestamp


WEIGHT_ENTRIES = Resource(
    name="weight_entries",
    label="Weight entry",
    table="weight_entries",
    model=WeightEntry,
    order_by=(("date", False), ("created_at", False)),
)

BODY_MEASUREMENTS = Resource(
    name="body_measurements",
    label="Body measurement",
    table="body_measurements",
    model=BodyMeasurement,
    order_by=(("date", True), ("created_at", True)),
)

STEP_ENTRIES = Resource(
    name="step_entries",
    label="Step entry",
    table="step_entries",
    model=StepEntry,
    order_by=(("date", False), ("created_at", False)),
)

CARDIO_LOG_ENTRIES = Resource(
    name="cardio_log_entries",
    label="Cardio log entry",
    table="cardio_log_entries",
    model=CardioLogEntry,
    order_by=(("date", True), ("created_at", True)),
)

PHOTO_PROGRESS = Resource(
    name="photo_progress",
    label="Photo progress entry",
    table="photo_progress",
    model=PhotoProgress,
    order_by=(("taken_at", True), ("created_at", True)),
)
