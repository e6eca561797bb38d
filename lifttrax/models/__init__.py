"""Domain models for exercises and generated workouts."""
from lifttrax.models.enums import (
    AccommodatingResistance,
    ExerciseRegion,
    MovementPattern,
    Muscle,
    WaveProgram,
    Weekday,
)
from lifttrax.models.exercise import Exercise, normalize_name
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

__all__ = [
    "AccommodatingResistance",
    "ExerciseRegion",
    "MovementPattern",
    "Muscle",
    "WaveProgram",
    "Weekday",
    "Exercise",
    "normalize_name",
    "CircuitPrescription",
    "DayWorkout",
    "DistanceFeet",
    "Reps",
    "RepsRange",
    "SetMetric",
    "SetPrescription",
    "TimeSecs",
    "Wave",
    "Week",
    "WorkoutEntry",
]
