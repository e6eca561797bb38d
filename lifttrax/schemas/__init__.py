"""Pydantic schemas for API request/response validation."""
from lifttrax.schemas.base import APIError, APIResponse, ResponseMeta
from lifttrax.schemas.wave import (
    CircuitSchema,
    DaySchema,
    ExerciseSchema,
    MetricSchema,
    SetPrescriptionSchema,
    WaveRequest,
    WaveResponse,
    WeekSchema,
    WorkoutEntrySchema,
)

__all__ = [
    "APIError",
    "APIResponse",
    "ResponseMeta",
    "CircuitSchema",
    "DaySchema",
    "ExerciseSchema",
    "MetricSchema",
    "SetPrescriptionSchema",
    "WaveRequest",
    "WaveResponse",
    "WeekSchema",
    "WorkoutEntrySchema",
]
