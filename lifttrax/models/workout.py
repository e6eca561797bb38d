"""Generated workout prescriptions.

These types describe what a lifter should do, not what was recorded. A
``Wave`` is an ordered list of ``Week`` objects; each week maps a weekday to
a ``DayWorkout``, which is an ordered list of ``WorkoutEntry`` items. An
entry is either a single ``SetPrescription`` or a ``CircuitPrescription``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

from lifttrax.models.enums import AccommodatingResistance, Weekday
from lifttrax.models.exercise import Exercise


# =============================================================================
# Set metrics
# =============================================================================

@dataclass(frozen=True)
class Reps:
    reps: int

    def describe(self) -> str:
        return f"{self.reps} reps"


@dataclass(frozen=True)
class RepsRange:
    min: int
    max: int

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError(f"rep range minimum {self.min} exceeds maximum {self.max}")

    def describe(self) -> str:
        return f"{self.min}-{self.max} reps"


@dataclass(frozen=True)
class TimeSecs:
    seconds: int

    def describe(self) -> str:
        return f"{self.seconds} sec"


@dataclass(frozen=True)
class DistanceFeet:
    feet: int

    def describe(self) -> str:
        return f"{self.feet} ft"


SetMetric = Union[Reps, RepsRange, TimeSecs, DistanceFeet]


# =============================================================================
# Prescriptions
# =============================================================================

@dataclass(frozen=True)
class SetPrescription:
    """A single generated set instruction.

    Attributes:
        exercise: Catalog exercise to perform
        metric: Optional target (reps, rep range, time or distance)
        percent: Optional percentage of the lifter's max
        accommodating_resistance: Chains/bands/straight, dynamic effort only
        rpe: Optional target rate of perceived exertion
        deload: Whether the set counts toward a deload
    """

    exercise: Exercise
    metric: SetMetric | None = None
    percent: int | None = None
    accommodating_resistance: AccommodatingResistance | None = None
    rpe: float | None = None
    deload: bool = False


@dataclass(frozen=True)
class CircuitPrescription:
    """Prescriptions performed back-to-back for a number of rounds."""

    prescriptions: tuple[SetPrescription, ...]
    rounds: int
    rest_seconds: int
    warmup: bool = False

    @property
    def exercises(self) -> list[Exercise]:
        return [p.exercise for p in self.prescriptions]


@dataclass(frozen=True)
class WorkoutEntry:
    """A named item of a day's workout ("Max Effort Single", "Warmup Circuit")."""

    name: str
    kind: SetPrescription | CircuitPrescription

    @property
    def is_circuit(self) -> bool:
        return isinstance(self.kind, CircuitPrescription)

    @property
    def single(self) -> SetPrescription:
        if not isinstance(self.kind, SetPrescription):
            raise TypeError(f"{self.name} is a circuit, not a single prescription")
        return self.kind

    @property
    def circuit(self) -> CircuitPrescription:
        if not isinstance(self.kind, CircuitPrescription):
            raise TypeError(f"{self.name} is a single prescription, not a circuit")
        return self.kind


@dataclass
class DayWorkout:
    """Ordered workout entries for one training day."""

    entries: list[WorkoutEntry] = field(default_factory=list)

    def __iter__(self) -> Iterator[WorkoutEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def named(self, name: str) -> list[WorkoutEntry]:
        return [entry for entry in self.entries if entry.name == name]


@dataclass
class Week:
    """Mapping of weekday to its scheduled workout."""

    days: dict[Weekday, DayWorkout] = field(default_factory=dict)

    def __getitem__(self, day: Weekday) -> DayWorkout:
        return self.days[day]

    def __contains__(self, day: object) -> bool:
        return day in self.days

    @property
    def training_days(self) -> list[Weekday]:
        """Populated days in calendar order."""
        return [day for day in Weekday if day in self.days]


@dataclass
class Wave:
    """One complete generated multi-week plan; index order is week order."""

    weeks: list[Week] = field(default_factory=list)

    def __iter__(self) -> Iterator[Week]:
        return iter(self.weeks)

    def __len__(self) -> int:
        return len(self.weeks)

    def __getitem__(self, index: int) -> Week:
        return self.weeks[index]
