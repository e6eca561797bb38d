"""Pydantic schemas for wave generation API endpoints."""
from typing import Literal

from pydantic import BaseModel, Field

from lifttrax.models.enums import (
    AccommodatingResistance,
    ExerciseRegion,
    MovementPattern,
    WaveProgram,
    Weekday,
)
from lifttrax.models.exercise import Exercise
from lifttrax.models.workout import (
    CircuitPrescription,
    DayWorkout,
    DistanceFeet,
    Reps,
    RepsRange,
    SetMetric,
    SetPrescription,
    TimeSecs,
    Wave,
    Week,
    WorkoutEntry,
)


# ============== Request Schemas ==============

class WaveRequest(BaseModel):
    """Schema for requesting a generated wave."""
    weeks: int | None = Field(
        None, ge=1, description="Number of weeks; the configured default when omitted"
    )
    program: WaveProgram = Field(WaveProgram.CONJUGATE, description="Training program to generate")
    seed: int | None = Field(None, description="Seed for a reproducible wave")


# ============== Response Schemas ==============

class ExerciseSchema(BaseModel):
    name: str
    region: ExerciseRegion
    pattern: MovementPattern | None = None
    muscles: list[str] = Field(default_factory=list)
    notes: str = ""

    @classmethod
    def from_exercise(cls, exercise: Exercise) -> "ExerciseSchema":
        return cls(
            name=exercise.name,
            region=exercise.region,
            pattern=exercise.pattern,
            muscles=sorted(m.value for m in exercise.muscles),
            notes=exercise.notes,
        )


class MetricSchema(BaseModel):
    """Target metric; only the fields for ``kind`` are populated."""
    kind: Literal["reps", "reps_range", "time_secs", "distance_feet"]
    description: str
    reps: int | None = None
    min_reps: int | None = None
    max_reps: int | None = None
    seconds: int | None = None
    feet: int | None = None

    @classmethod
    def from_metric(cls, metric: SetMetric) -> "MetricSchema":
        description = metric.describe()
        if isinstance(metric, Reps):
            return cls(kind="reps", description=description, reps=metric.reps)
        if isinstance(metric, RepsRange):
            return cls(
                kind="reps_range", description=description, min_reps=metric.min, max_reps=metric.max
            )
        if isinstance(metric, TimeSecs):
            return cls(kind="time_secs", description=description, seconds=metric.seconds)
        if isinstance(metric, DistanceFeet):
            return cls(kind="distance_feet", description=description, feet=metric.feet)
        raise TypeError(f"unsupported metric: {metric!r}")


class SetPrescriptionSchema(BaseModel):
    exercise: ExerciseSchema
    metric: MetricSchema | None = None
    percent: int | None = None
    accommodating_resistance: AccommodatingResistance | None = None
    rpe: float | None = None
    deload: bool = False

    @classmethod
    def from_prescription(cls, prescription: SetPrescription) -> "SetPrescriptionSchema":
        return cls(
            exercise=ExerciseSchema.from_exercise(prescription.exercise),
            metric=MetricSchema.from_metric(prescription.metric) if prescription.metric else None,
            percent=prescription.percent,
            accommodating_resistance=prescription.accommodating_resistance,
            rpe=prescription.rpe,
            deload=prescription.deload,
        )


class CircuitSchema(BaseModel):
    prescriptions: list[SetPrescriptionSchema]
    rounds: int
    rest_seconds: int
    warmup: bool = False

    @classmethod
    def from_circuit(cls, circuit: CircuitPrescription) -> "CircuitSchema":
        return cls(
            prescriptions=[SetPrescriptionSchema.from_prescription(p) for p in circuit.prescriptions],
            rounds=circuit.rounds,
            rest_seconds=circuit.rest_seconds,
            warmup=circuit.warmup,
        )


class WorkoutEntrySchema(BaseModel):
    """A workout entry; exactly one of ``single`` and ``circuit`` is set."""
    name: str
    type: Literal["single", "circuit"]
    single: SetPrescriptionSchema | None = None
    circuit: CircuitSchema | None = None

    @classmethod
    def from_entry(cls, entry: WorkoutEntry) -> "WorkoutEntrySchema":
        if entry.is_circuit:
            return cls(
                name=entry.name, type="circuit", circuit=CircuitSchema.from_circuit(entry.circuit)
            )
        return cls(
            name=entry.name,
            type="single",
            single=SetPrescriptionSchema.from_prescription(entry.single),
        )


class DaySchema(BaseModel):
    day: Weekday
    entries: list[WorkoutEntrySchema]

    @classmethod
    def from_day(cls, day: Weekday, workout: DayWorkout) -> "DaySchema":
        return cls(day=day, entries=[WorkoutEntrySchema.from_entry(e) for e in workout])


class WeekSchema(BaseModel):
    week: int = Field(..., ge=1, description="1-indexed week number")
    days: list[DaySchema]

    @classmethod
    def from_week(cls, number: int, week: Week) -> "WeekSchema":
        return cls(
            week=number,
            days=[DaySchema.from_day(day, week[day]) for day in week.training_days],
        )


class WaveResponse(BaseModel):
    """Wave response schema."""
    program: WaveProgram = WaveProgram.CONJUGATE
    week_count: int
    weeks: list[WeekSchema]

    @classmethod
    def from_wave(cls, wave: Wave, program: WaveProgram = WaveProgram.CONJUGATE) -> "WaveResponse":
        return cls(
            program=program,
            week_count=len(wave),
            weeks=[WeekSchema.from_week(number, week) for number, week in enumerate(wave, start=1)],
        )
