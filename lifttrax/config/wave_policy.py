"""Fixed periodization policy for conjugate waves.

This module centralizes the numbers that shape a generated wave. They are
a fixed policy rather than per-call options: every wave ramps dynamic-effort
percentages the same way and every training day follows the same template.

Constants are organized by functional area:
- Max effort: top single, backoff and supplemental schemes
- Dynamic effort: percentage ramp, set/rep schemes, resistance choices
- Hypertrophy: rep ranges, RPE target and accessory focus per day
- Circuits: warm-up and accessory structure
- Conditioning and finishers
- Catalog requirements: canonical lift names and required accessory muscles
"""

from __future__ import annotations

from lifttrax.models.enums import AccommodatingResistance, MovementPattern, Muscle, Weekday


# =============================================================================
# Max Effort Constants
# =============================================================================

class MaxEffort:
    """Max-effort day prescriptions."""

    SINGLE_REPS = 1

    # Backoff option A: one heavy set
    HEAVY_BACKOFF_PROBABILITY = 0.5
    HEAVY_BACKOFF_PERCENT = 90
    HEAVY_BACKOFF_MIN_REPS = 3
    HEAVY_BACKOFF_MAX_REPS = 5

    # Backoff option B: a cluster of triples
    TRIPLES_BACKOFF_SETS = 3
    TRIPLES_BACKOFF_REPS = 3
    TRIPLES_BACKOFF_PERCENT = 80

    # Supplemental work on next week's main lift
    SUPPLEMENTAL_SETS = 3
    SUPPLEMENTAL_REPS = 5
    SUPPLEMENTAL_PERCENT = 80

    # Third accessory slot on the upper day is drawn from these
    UPPER_ACCESSORY_OPTIONS = (
        Muscle.REAR_DELT,
        Muscle.SHOULDER,
        Muscle.FRONT_DELT,
        Muscle.TRAP,
    )


# =============================================================================
# Dynamic Effort Constants
# =============================================================================

class DynamicEffort:
    """Dynamic-effort (speed work) prescriptions."""

    BASE_PERCENT = 60
    WEEKLY_PERCENT_STEP = 5

    SQUAT_SETS, SQUAT_REPS = 6, 3
    DEADLIFT_SETS, DEADLIFT_REPS = 6, 2
    BENCH_SETS, BENCH_REPS = 9, 3
    OVERHEAD_SETS, OVERHEAD_REPS = 6, 2

    # Straight weight is reserved; speed work always carries chains or bands
    RESISTANCE_CHOICES = (AccommodatingResistance.CHAINS, AccommodatingResistance.BANDS)

    @staticmethod
    def percent_for_week(week_index: int) -> int:
        """Percentage of max for dynamic-effort sets in a 0-indexed week."""
        return DynamicEffort.BASE_PERCENT + DynamicEffort.WEEKLY_PERCENT_STEP * week_index


# =============================================================================
# Hypertrophy Constants
# =============================================================================

class Hypertrophy:
    """Rep-range prescriptions for the hypertrophy program."""

    MAIN_SETS = 4
    SUPPLEMENTAL_SETS = 3
    RPE = 8.0

    # (min, max) reps
    UPPER_MAIN_REPS = (8, 12)
    UPPER_SUPPLEMENTAL_REPS = (10, 15)
    LOWER_MAIN_REPS = (6, 10)
    LOWER_SUPPLEMENTAL_REPS = (8, 12)

    # Accessory circuits for the first and second day of each region
    UPPER_ACCESSORIES = (Muscle.LAT, Muscle.TRICEP, Muscle.REAR_DELT)
    UPPER_SHOULDER_ACCESSORIES = (Muscle.SHOULDER, Muscle.TRICEP, Muscle.BICEP)
    LOWER_ACCESSORIES = (Muscle.QUAD, Muscle.CALF, Muscle.CORE)
    LOWER_POSTERIOR_ACCESSORIES = (Muscle.HAMSTRING, Muscle.TRAP, Muscle.CORE)


# =============================================================================
# Circuit Constants
# =============================================================================

class Circuits:
    ROUNDS = 3
    REST_SECONDS = 60

    ACCESSORY_MIN_REPS = 10
    ACCESSORY_MAX_REPS = 12

    WARMUP_ACCESSORY_COUNT = 2
    # Accessories tagged with these never appear in a warm-up
    WARMUP_EXCLUDED_MUSCLES = frozenset({Muscle.CORE, Muscle.FOREARM})


# =============================================================================
# Conditioning Constants
# =============================================================================

class Conditioning:
    DURATION_SECONDS = 600


# =============================================================================
# Catalog Requirements
# =============================================================================

class CatalogRequirements:
    """What the catalog must provide for a wave to be generated."""

    CANONICAL_NAMES: dict[MovementPattern, str] = {
        MovementPattern.SQUAT: "Squat",
        MovementPattern.DEADLIFT: "Deadlift",
        MovementPattern.BENCH_PRESS: "Bench Press",
        MovementPattern.OVERHEAD_PRESS: "Overhead Press",
    }

    MAIN_PATTERNS = tuple(CANONICAL_NAMES)

    REQUIRED_ACCESSORY_MUSCLES = (
        Muscle.HAMSTRING,
        Muscle.QUAD,
        Muscle.CALF,
        Muscle.LAT,
        Muscle.TRICEP,
        Muscle.REAR_DELT,
        Muscle.SHOULDER,
        Muscle.FRONT_DELT,
        Muscle.TRAP,
        Muscle.CORE,
        Muscle.BICEP,
    )


# =============================================================================
# Weekly Template
# =============================================================================

TRAINING_DAYS = (Weekday.MONDAY, Weekday.TUESDAY, Weekday.THURSDAY, Weekday.FRIDAY)


class EntryNames:
    """Display names of workout entries."""

    WARMUP = "Warmup Circuit"
    MAX_EFFORT = "Max Effort Single"
    BACKOFF_SET = "Backoff Set"
    BACKOFF_SETS = "Backoff Sets"
    SUPPLEMENTAL = "Supplemental Sets"
    DYNAMIC_EFFORT = "Dynamic Effort"
    ACCESSORY_CIRCUIT = "Accessory Circuit"
    CONDITIONING = "Conditioning"
    FOREARM_FINISHER = "Forearm Finisher"
    MAIN_HYPERTROPHY = "Main Hypertrophy"
    SUPPLEMENTAL_HYPERTROPHY = "Supplemental Hypertrophy"
