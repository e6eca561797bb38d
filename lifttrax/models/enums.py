"""Enumerations shared by the catalog, the generator and the API schemas."""
from enum import Enum


class ExerciseRegion(str, Enum):
    """Body region an exercise primarily trains."""

    UPPER = "upper"
    LOWER = "lower"

    @classmethod
    def parse(cls, value: "str | ExerciseRegion") -> "ExerciseRegion":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"unknown region: {value}") from None


class MovementPattern(str, Enum):
    """Primary movement-pattern tag of an exercise."""

    SQUAT = "squat"
    DEADLIFT = "deadlift"
    BENCH_PRESS = "bench_press"
    OVERHEAD_PRESS = "overhead_press"
    ACCESSORY = "accessory"
    CONDITIONING = "conditioning"
    MOBILITY = "mobility"

    @classmethod
    def parse(cls, value: "str | MovementPattern | None") -> "MovementPattern | None":
        """Parse ``"Bench Press"``, ``"bench-press"`` or ``"BENCH_PRESS"``.

        Blank values mean the exercise carries no pattern tag.
        """
        if value is None or isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace(" ", "_").replace("-", "_")
        if not normalized:
            return None
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"unknown movement pattern: {value}") from None

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class Muscle(str, Enum):
    """Muscles that an exercise can train."""

    BICEP = "bicep"
    TRICEP = "tricep"
    NECK = "neck"
    LAT = "lat"
    QUAD = "quad"
    HAMSTRING = "hamstring"
    CALF = "calf"
    LOWER_BACK = "lower_back"
    CHEST = "chest"
    FOREARM = "forearm"
    REAR_DELT = "rear_delt"
    FRONT_DELT = "front_delt"
    SHOULDER = "shoulder"
    CORE = "core"
    GLUTE = "glute"
    TRAP = "trap"

    @classmethod
    def parse(cls, value: "str | Muscle") -> "Muscle":
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"unknown muscle: {value}") from None


class WaveProgram(str, Enum):
    """Training programs a wave can be generated for."""

    CONJUGATE = "conjugate"
    HYPERTROPHY = "hypertrophy"


class AccommodatingResistance(str, Enum):
    """Added resistance that varies load through a lift's range of motion."""

    STRAIGHT = "straight"
    CHAINS = "chains"
    BANDS = "bands"


class Weekday(str, Enum):
    """Days of a training week, in calendar order."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def display_name(self) -> str:
        return self.value.title()
